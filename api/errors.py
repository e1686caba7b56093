"""
suivi-chargements-api/api/errors.py
Traduction des erreurs en réponses JSON {"message": ...}

Le client ne reçoit jamais de trace ni de détail interne ; ceux-ci restent
dans les logs serveur.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.errors import AppError, AuthError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"

_STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: AppError) -> JSONResponse:
    """Unique correspondance variante d'erreur -> statut HTTP + corps"""
    status_code = _STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        error = InternalError()
    return JSONResponse(status_code=status_code, content={"message": error.message})


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Corps absent ou JSON illisible
    logger.warning(f"Malformed request on {request.url.path}: {exc.errors()}")
    return error_response(ValidationError("Validation error: Invalid request body"))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(NotFoundError(NOT_FOUND_MESSAGE))
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Filet de sécurité final : message générique, détail dans les logs"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
