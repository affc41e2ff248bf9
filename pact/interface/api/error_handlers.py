"""Global exception handlers.

Domain errors map onto HTTP statuses with a JSON body of the form
``{"error": {"code": ..., "message": ...}}``. Unhandled exceptions
never leak internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pact.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# (status, code) per domain error type, most specific first
ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    (ConflictError, status.HTTP_409_CONFLICT, "CONFLICT"),
    (InvalidStateError, status.HTTP_409_CONFLICT, "INVALID_STATE"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN, "NOT_AUTHORIZED"),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "NOT_AUTHENTICATED"),
]


def error_body(code: str, message: str, **extra) -> dict:
    """Build the error envelope."""
    return {"error": {"code": code, "message": message, **extra}}


def status_for(exc: DomainError) -> tuple[int, str]:
    """Resolve the HTTP status and error code for a domain error."""
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code, code = status_for(exc)
        extra = {}
        if isinstance(exc, ConflictError) and exc.reason:
            extra["reason"] = exc.reason
        logger.info(
            f"{type(exc).__name__} on {request.url.path}: {exc}",
            extra={"error_code": code},
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(code, str(exc), **extra),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request body/query validation errors."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "VALIDATION_ERROR",
                "Invalid request data",
                details=[
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                    }
                    for e in exc.errors()
                ],
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
