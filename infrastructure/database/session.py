"""
Configuration de la session de base de données SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def postgres_connect_args(ssl: bool) -> dict:
    """sslmode libpq : TLS exigé sans vérification du certificat, ou désactivé"""
    return {"sslmode": "require" if ssl else "disable"}


def build_engine(database_url: str, ssl: bool = True) -> Engine:
    """Crée le moteur de base de données"""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # Base en mémoire : une seule connexion partagée entre les threads
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)

    options = {}
    if database_url.startswith("postgres"):
        options["connect_args"] = postgres_connect_args(ssl)

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Vérifie la connexion avant utilisation
        pool_size=10,
        max_overflow=20,
        **options
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    """Crée la session factory"""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db_session(session_factory: sessionmaker):
    """Factory pour obtenir une session de base de données"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
