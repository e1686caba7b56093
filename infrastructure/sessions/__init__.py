"""
Stores de sessions
"""

from infrastructure.sessions.memory_store import InMemorySessionStore
from infrastructure.sessions.sqlalchemy_store import SQLAlchemySessionStore

__all__ = [
    "InMemorySessionStore",
    "SQLAlchemySessionStore"
]
