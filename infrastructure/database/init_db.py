"""
Initialisation de la base de données
"""

import logging
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from infrastructure.database.models import Base
from infrastructure.database.repositories import SQLAlchemyUserRepository
from infrastructure.security.password_hasher import PasswordHasher
from application.services.user_service import UserService
from config import Config

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    """Crée les tables manquantes (users, commandes, user_sessions)"""
    Base.metadata.create_all(bind=engine)
    logger.info("Tables de base de données créées")


def seed_admin_user(session_factory: sessionmaker, config: Config, password_hasher: PasswordHasher) -> None:
    """Crée le compte administrateur initial s'il est absent"""
    db = session_factory()
    try:
        user_service = UserService(SQLAlchemyUserRepository(db), password_hasher)
        user_service.ensure_seed_user(config.seed_username, config.seed_password)
    finally:
        db.close()


def init_db(engine: Engine, session_factory: sessionmaker, config: Config, password_hasher: PasswordHasher) -> bool:
    """
    Initialise la base de données (tables + compte administrateur).

    Une base injoignable ne bloque pas le démarrage : l'erreur est journalisée
    et l'API démarre quand même. Retourne True si l'initialisation a abouti.
    """
    try:
        create_tables(engine)
        seed_admin_user(session_factory, config, password_hasher)
    except Exception as e:
        logger.warning(f"Superadmin seed skipped (database not reachable yet): {e}")
        return False
    return True
