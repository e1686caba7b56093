"""
InMemorySessionStore - Sessions conservées dans le processus
"""

from copy import deepcopy
from datetime import datetime
from typing import Dict, Optional

from domain.entities import UserSession
from domain.repositories import SessionStore


class InMemorySessionStore(SessionStore):
    """Store en mémoire (développement et tests) ; perdu au redémarrage"""

    def __init__(self) -> None:
        self._sessions: Dict[str, UserSession] = {}

    def get(self, sid: str) -> Optional[UserSession]:
        session = self._sessions.get(sid)
        return deepcopy(session) if session else None

    def save(self, session: UserSession) -> None:
        self._sessions[session.sid] = deepcopy(session)

    def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    def prune_expired(self, now: datetime) -> int:
        expired = [sid for sid, session in list(self._sessions.items()) if session.is_expired(now)]
        for sid in expired:
            self._sessions.pop(sid, None)
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)
