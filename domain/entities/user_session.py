"""
Entité UserSession - Session de connexion côté serveur
"""

from datetime import datetime
from typing import Any, Dict, Optional
from dataclasses import dataclass, field


@dataclass
class UserSession:
    """Session identifiée par un jeton aléatoire"""
    sid: str
    expires_at: datetime
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def user_id(self) -> Optional[str]:
        return self.data.get("userId")

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
