"""
Interface SessionStore - Stockage des sessions de connexion
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from domain.entities.user_session import UserSession


class SessionStore(ABC):
    """Interface pour les stores de sessions (table SQL ou mémoire)"""

    @abstractmethod
    def get(self, sid: str) -> Optional[UserSession]:
        """Charge une session par son identifiant"""
        pass

    @abstractmethod
    def save(self, session: UserSession) -> None:
        """Persiste une session ; ne rend la main qu'une fois l'écriture validée"""
        pass

    @abstractmethod
    def destroy(self, sid: str) -> None:
        """Supprime une session (sans erreur si absente)"""
        pass

    @abstractmethod
    def prune_expired(self, now: datetime) -> int:
        """Supprime toutes les sessions expirées à `now` ; retourne leur nombre"""
        pass
