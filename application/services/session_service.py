"""
SessionService - Cycle de vie des sessions de connexion
"""

import secrets
import logging
from datetime import datetime, timedelta
from typing import Optional

from domain.clock import utcnow
from domain.entities import UserSession
from domain.repositories import SessionStore

logger = logging.getLogger(__name__)


class SessionService:
    """Ouvre, recharge et détruit les sessions liées à un utilisateur"""

    def __init__(self, store: SessionStore, max_age: timedelta = timedelta(days=7)):
        self.store = store
        self.max_age = max_age

    def generate_sid(self) -> str:
        """Génère un identifiant de session imprévisible"""
        return secrets.token_urlsafe(32)

    def open(self, user_id: str) -> UserSession:
        """
        Crée une session liée à l'utilisateur ; retourne après persistance.

        Les sessions expirées du store sont supprimées au passage.
        """
        now = utcnow()
        self.prune_expired(now)
        session = UserSession(
            sid=self.generate_sid(),
            expires_at=now + self.max_age,
            data={"userId": user_id}
        )
        self.store.save(session)
        return session

    def load(self, sid: str) -> Optional[UserSession]:
        """Recharge une session ; une session expirée est purgée et ignorée"""
        session = self.store.get(sid)
        if session is None:
            return None

        if session.is_expired(utcnow()):
            logger.info("Expired session purged")
            self.store.destroy(sid)
            return None

        return session

    def destroy(self, sid: str) -> None:
        self.store.destroy(sid)

    def prune_expired(self, now: Optional[datetime] = None) -> int:
        pruned = self.store.prune_expired(now or utcnow())
        if pruned:
            logger.info(f"{pruned} expired session(s) pruned")
        return pruned
