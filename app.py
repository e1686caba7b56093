"""
suivi-chargements-api/app.py
Point d'entrée principal de l'API de suivi des chargements
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import iterate_in_threadpool

from config import Config
from api.endpoints import router as api_router, auth_router
from api.errors import register_error_handlers
from domain.repositories import SessionStore
from infrastructure.database.init_db import init_db
from infrastructure.database.session import build_engine, build_session_factory
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.sessions import InMemorySessionStore, SQLAlchemySessionStore
from logging_config import setup_logging, setup_colored_logging

logger = logging.getLogger("suivi")

MAX_LOG_LINE = 120


def configure_logging(config: Config) -> logging.Logger:
    log_file = config.log_file_path if config.log_file_enabled else None
    if config.log_colored:
        return setup_colored_logging(log_level=config.log_level, log_file=log_file)
    return setup_logging(log_level=config.log_level, log_file=log_file)


def format_request_log(method: str, path: str, status_code: int, duration_ms: int, body: Optional[bytes] = None) -> str:
    """Ligne de log d'une requête /api, suivie du corps JSON renvoyé"""
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if body:
        line += f" :: {body.decode('utf-8', errors='replace')}"
    if len(line) > MAX_LOG_LINE:
        line = line[:MAX_LOG_LINE - 1] + "…"
    return line


def build_session_store(config: Config, session_factory) -> SessionStore:
    """Store de sessions choisi par la configuration (table SQL ou mémoire)"""
    if config.session_store == "memory":
        logger.info("Session store: in-memory")
        return InMemorySessionStore()
    logger.info("Session store: table user_sessions")
    return SQLAlchemySessionStore(session_factory)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    # --- Startup ---
    config = app.state.config
    logger.info("Démarrage de Suivi Chargements API")
    logger.info(f"Database: {config.database_url.split('@')[-1]}")

    init_db(app.state.engine, app.state.session_factory, config, app.state.password_hasher)

    yield

    # --- Shutdown ---
    logger.info("Arrêt de Suivi Chargements API")
    app.state.engine.dispose()


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Construit l'application FastAPI et ses dépendances partagées"""
    config = config or Config()

    app = FastAPI(
        title="Suivi Chargements API",
        description="API de suivi des commandes de livraison de carburant",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    engine = build_engine(config.database_url, ssl=config.database_ssl)
    session_factory = build_session_factory(engine)

    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.password_hasher = PasswordHasher(rounds=config.bcrypt_rounds)
    app.state.session_store = build_session_store(config, session_factory)

    # Configuration CORS (cookies de session acceptés depuis le front)
    if config.allow_all_origins:
        cors_options = {"allow_origin_regex": ".*"}
    else:
        cors_options = {"allow_origins": config.cors_origins}
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        **cors_options
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path
        if not path.startswith("/api"):
            return response

        body = None
        if response.headers.get("content-type", "").startswith("application/json"):
            chunks = [chunk async for chunk in response.body_iterator]
            body = b"".join(chunks)
            response.body_iterator = iterate_in_threadpool(iter(chunks))

        duration = int((time.perf_counter() - start) * 1000)
        logger.info(format_request_log(request.method, path, response.status_code, duration, body))
        return response

    register_error_handlers(app)

    app.include_router(auth_router, prefix="/api")
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["System"])
    def health_check():
        """Endpoint de santé pour les orchestrateurs"""
        return {
            "status": "healthy",
            "service": "suivi-chargements-api"
        }

    return app


config = Config()
configure_logging(config)
app = create_app(config)

if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
