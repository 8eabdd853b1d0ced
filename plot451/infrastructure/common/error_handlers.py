"""Global exception handlers translating application and domain errors to HTTP."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from plot451.domain.common.exceptions import (
    DomainConsistencyError,
    DomainError,
    EntityNotFoundError,
    NotAllEntitiesFoundError,
    RepositoryError,
)
from plot451.domain.table.exceptions import DuplicatedColumnNamesError
from plot451.exceptions import Plot451Error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_application_error_handler(app)
    _register_domain_error_handler(app)
    _register_consistency_error_handler(app)


def domain_error_status(exc: DomainError) -> int:
    """Pick the HTTP status for a domain error."""
    if isinstance(exc, EntityNotFoundError | NotAllEntitiesFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, DuplicatedColumnNamesError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, RepositoryError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def _register_application_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Plot451Error)
    async def application_error_handler(request: Request, exc: Plot451Error) -> JSONResponse:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = domain_error_status(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}", exc_info=exc)
        else:
            logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status_code, content={"detail": exc.message})


def _register_consistency_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainConsistencyError)
    async def consistency_error_handler(
        request: Request, exc: DomainConsistencyError
    ) -> JSONResponse:
        """Defects never leak their details to the client."""
        logger.error(f"Consistency defect on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )
