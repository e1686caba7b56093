"""
Dépendances FastAPI pour l'injection de services

Le moteur, la session factory et le store de sessions sont construits une fois
par application (app.state) ; les repositories et services sont créés par requête.
"""

from datetime import timedelta
from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends, Request

from config import Config
from domain.repositories import SessionStore
from infrastructure.database.session import get_db_session
from infrastructure.database.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyCommandeRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.session_signer import SessionSigner
from application.services.user_service import UserService
from application.services.commande_service import CommandeService
from application.services.session_service import SessionService
from application.services.stats_service import StatsService


def get_config(request: Request) -> Config:
    """Dépendance pour obtenir la configuration de l'application"""
    return request.app.state.config


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    yield from get_db_session(request.app.state.session_factory)


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db)


def get_commande_repository(db: Session = Depends(get_db)) -> SQLAlchemyCommandeRepository:
    """Dépendance pour obtenir le CommandeRepository"""
    return SQLAlchemyCommandeRepository(db)


def get_password_hasher(request: Request) -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher"""
    return request.app.state.password_hasher


def get_session_signer(config: Config = Depends(get_config)) -> SessionSigner:
    """Dépendance pour obtenir le SessionSigner"""
    return SessionSigner(
        secret_key=config.session_secret,
        max_age_seconds=config.session_max_age_seconds
    )


def get_session_store(request: Request) -> SessionStore:
    """Dépendance pour obtenir le store de sessions partagé"""
    return request.app.state.session_store


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository, password_hasher)


def get_commande_service(
    commande_repository: SQLAlchemyCommandeRepository = Depends(get_commande_repository)
) -> CommandeService:
    """Dépendance pour obtenir le CommandeService"""
    return CommandeService(commande_repository)


def get_stats_service(
    commande_repository: SQLAlchemyCommandeRepository = Depends(get_commande_repository)
) -> StatsService:
    """Dépendance pour obtenir le StatsService"""
    return StatsService(commande_repository)


def get_session_service(
    store: SessionStore = Depends(get_session_store),
    config: Config = Depends(get_config)
) -> SessionService:
    """Dépendance pour obtenir le SessionService"""
    return SessionService(store, max_age=timedelta(days=config.session_max_age_days))
