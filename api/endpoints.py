"""
suivi-chargements-api/api/endpoints.py
Endpoints de l'API (authentification, commandes, statistiques)

Chaque endpoint intercepte localement les défaillances inattendues : le
détail est journalisé et le client ne reçoit qu'une erreur générique.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from api.auth import (
    INVALID_CREDENTIALS, RequestSession,
    clear_session_cookie, get_current_user, get_request_session,
    read_credentials, require_user_id, set_session_cookie
)
from api.schemas import (
    CommandeResponse, MessageResponse, StatsResponse, SuccessResponse, UserResponse
)
from application.services.commande_service import CommandeService
from application.services.session_service import SessionService
from application.services.stats_service import StatsService
from application.services.user_service import UserService
from application.validation import validate_commande
from config import Config
from domain.entities import Commande, User
from domain.errors import AppError, AuthError, InternalError
from infrastructure.dependencies import (
    get_commande_service, get_config, get_session_service,
    get_session_signer, get_stats_service, get_user_service
)
from infrastructure.security.session_signer import SessionSigner

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])
router = APIRouter(
    dependencies=[Depends(require_user_id)],
    responses={401: {"model": MessageResponse}}
)


def _internal_error(context: str, error: Exception) -> InternalError:
    logger.error(f"{context} error: {error}", exc_info=True)
    return InternalError()


def _to_response(commande: Commande) -> CommandeResponse:
    return CommandeResponse.model_validate(commande.to_dict())

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

@auth_router.post("/login", response_model=UserResponse)
def login(
    response: Response,
    payload: Any = Body(None),
    current: RequestSession = Depends(get_request_session),
    user_service: UserService = Depends(get_user_service),
    session_service: SessionService = Depends(get_session_service),
    signer: SessionSigner = Depends(get_session_signer),
    config: Config = Depends(get_config)
):
    """
    Ouvre une session en échange de username/password.

    Utilisateur inconnu et mauvais mot de passe produisent exactement la
    même réponse 401. La session déjà portée par la requête est détruite,
    la nouvelle est persistée avant l'envoi de la réponse.
    """
    credentials = read_credentials(payload)

    try:
        user = user_service.authenticate(credentials.username, credentials.password)
        if user is None:
            raise AuthError(INVALID_CREDENTIALS)

        if current.sid:
            session_service.destroy(current.sid)
        session = session_service.open(user.id)
        set_session_cookie(response, session, config, signer)
        return UserResponse.model_validate(user)
    except AppError:
        raise
    except Exception as e:
        raise _internal_error("Login", e)


@auth_router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    session: RequestSession = Depends(get_request_session),
    session_service: SessionService = Depends(get_session_service),
    config: Config = Depends(get_config)
):
    """Détruit la session courante (sans erreur si aucune session)"""
    try:
        if session.sid:
            session_service.destroy(session.sid)
        clear_session_cookie(response, config)
        return {"success": True}
    except Exception as e:
        raise _internal_error("Logout", e)


@auth_router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    """Utilisateur lié à la session"""
    return UserResponse.model_validate(user)

# ============================================================================
# COMMANDES
# ============================================================================

@router.get("/commandes", response_model=List[CommandeResponse], tags=["Commandes"])
def list_commandes(commande_service: CommandeService = Depends(get_commande_service)):
    """Toutes les commandes, la plus récente d'abord"""
    try:
        return [_to_response(c) for c in commande_service.list_commandes()]
    except Exception as e:
        raise _internal_error("Get commandes", e)


@router.get("/commandes/{commande_id}", response_model=CommandeResponse, tags=["Commandes"])
def get_commande(
    commande_id: str,
    commande_service: CommandeService = Depends(get_commande_service)
):
    try:
        return _to_response(commande_service.get_commande(commande_id))
    except AppError:
        raise
    except Exception as e:
        raise _internal_error("Get commande", e)


@router.post(
    "/commandes",
    response_model=CommandeResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Commandes"]
)
def create_commande(
    payload: Dict[str, Any] = Body(...),
    commande_service: CommandeService = Depends(get_commande_service)
):
    """Crée une commande après validation complète du corps"""
    try:
        data = validate_commande(payload)
        return _to_response(commande_service.create_commande(data))
    except AppError:
        raise
    except Exception as e:
        raise _internal_error("Create commande", e)


@router.put("/commandes/{commande_id}", response_model=CommandeResponse, tags=["Commandes"])
def update_commande(
    commande_id: str,
    payload: Dict[str, Any] = Body(...),
    commande_service: CommandeService = Depends(get_commande_service)
):
    """Remplace intégralement une commande existante"""
    try:
        data = validate_commande(payload)
        return _to_response(commande_service.update_commande(commande_id, data))
    except AppError:
        raise
    except Exception as e:
        raise _internal_error("Update commande", e)


@router.delete("/commandes/{commande_id}", response_model=SuccessResponse, tags=["Commandes"])
def delete_commande(
    commande_id: str,
    commande_service: CommandeService = Depends(get_commande_service)
):
    try:
        commande_service.delete_commande(commande_id)
        return {"success": True}
    except AppError:
        raise
    except Exception as e:
        raise _internal_error("Delete commande", e)

# ============================================================================
# STATISTIQUES
# ============================================================================

@router.get("/stats", response_model=StatsResponse, tags=["Stats"])
def get_stats(stats_service: StatsService = Depends(get_stats_service)):
    """Synthèse des commandes du mois en cours"""
    try:
        return stats_service.monthly_stats()
    except Exception as e:
        raise _internal_error("Get stats", e)
