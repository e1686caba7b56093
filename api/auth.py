"""
suivi-chargements-api/api/auth.py
Logique d'authentification (session par requête, cookie, dépendances)
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Depends, Request, Response
from pydantic import ValidationError as PydanticValidationError

from api.schemas import LoginRequest
from config import Config
from domain.entities import User, UserSession
from domain.errors import AuthError, ValidationError
from application.services.session_service import SessionService
from application.services.user_service import UserService
from infrastructure.dependencies import (
    get_config, get_session_service, get_session_signer, get_user_service
)
from infrastructure.security.session_signer import SessionSigner

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "Not authenticated"
INVALID_CREDENTIALS = "Invalid credentials"
USER_NOT_FOUND = "User not found"
CREDENTIALS_REQUIRED = "Username and password are required"


@dataclass
class RequestSession:
    """Session résolue pour la requête en cours (jamais partagée entre requêtes)"""
    sid: Optional[str] = None
    user_id: Optional[str] = None


def get_request_session(
    request: Request,
    config: Config = Depends(get_config),
    signer: SessionSigner = Depends(get_session_signer),
    session_service: SessionService = Depends(get_session_service)
) -> RequestSession:
    """
    Dépendance FastAPI : résout le cookie de session en identité.

    Cookie absent, signature invalide, session inconnue ou expirée donnent
    tous une session vide.
    """
    token = request.cookies.get(config.session_cookie_name)
    if not token:
        return RequestSession()

    sid = signer.unsign(token)
    if sid is None:
        return RequestSession()

    stored = session_service.load(sid)
    if stored is None:
        return RequestSession()

    return RequestSession(sid=stored.sid, user_id=stored.user_id)


def read_credentials(payload: Any) -> LoginRequest:
    """
    Identifiants extraits d'un corps JSON quelconque.

    Corps absent, qui n'est pas un objet, ou champ vide ou non textuel
    donnent tous la même erreur 400.
    """
    if not isinstance(payload, dict):
        raise ValidationError(CREDENTIALS_REQUIRED)
    try:
        credentials = LoginRequest.model_validate(payload)
    except PydanticValidationError:
        raise ValidationError(CREDENTIALS_REQUIRED)
    if not credentials.username or not credentials.password:
        raise ValidationError(CREDENTIALS_REQUIRED)
    return credentials


def require_user_id(session: RequestSession = Depends(get_request_session)) -> str:
    """Dépendance qui bloque toute route protégée sans session authentifiée"""
    if not session.user_id:
        raise AuthError(NOT_AUTHENTICATED)
    return session.user_id


def get_current_user(
    session: RequestSession = Depends(get_request_session),
    user_service: UserService = Depends(get_user_service)
) -> User:
    """Dépendance FastAPI : utilisateur lié à la session courante"""
    if not session.user_id:
        raise AuthError(NOT_AUTHENTICATED)

    user = user_service.get_user(session.user_id)
    if user is None:
        logger.warning(f"Session bound to unknown user '{session.user_id}'")
        raise AuthError(USER_NOT_FOUND)
    return user


def set_session_cookie(response: Response, session: UserSession, config: Config, signer: SessionSigner) -> None:
    response.set_cookie(
        key=config.session_cookie_name,
        value=signer.sign(session.sid),
        max_age=config.session_max_age_seconds,
        httponly=True,
        secure=config.cookie_secure,
        samesite=config.cookie_samesite,
    )


def clear_session_cookie(response: Response, config: Config) -> None:
    response.delete_cookie(
        key=config.session_cookie_name,
        httponly=True,
        secure=config.cookie_secure,
        samesite=config.cookie_samesite,
    )
