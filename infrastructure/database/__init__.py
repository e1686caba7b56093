"""
Infrastructure Database - Configuration et repositories SQLAlchemy
"""

from infrastructure.database.session import build_engine, build_session_factory, get_db_session
from infrastructure.database.models import Base, UserModel, CommandeModel, SessionModel
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyCommandeRepository
)

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "UserModel",
    "CommandeModel",
    "SessionModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemyCommandeRepository"
]
