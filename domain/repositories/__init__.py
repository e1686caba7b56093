"""
Repositories - Interfaces pour l'accès aux données
"""

from domain.repositories.user_repository import UserRepository
from domain.repositories.commande_repository import CommandeRepository
from domain.repositories.session_store import SessionStore

__all__ = [
    "UserRepository",
    "CommandeRepository",
    "SessionStore"
]
