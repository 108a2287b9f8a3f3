"""Error Handlers: global exception handlers producing the uniform envelope.

Invariants:
    - SeoConsoleError → its own status and {"error": {code, message, details}}
    - No route / wrong method → 404 naming the method and original path
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, routing, validation, catch-all
    - 405 folded into 404: the API has no notion of "path exists for another
      method", an unknown combination is simply not found
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seo_console.api.dependencies import original_url
from seo_console.core.errors import NotFoundError, SeoConsoleError, error_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SeoConsoleError)
    async def domain_error_handler(request: Request, exc: SeoConsoleError):
        logger.warning(
            f"{exc.message}: {exc.details}" if exc.details else exc.message,
            extra={
                "error_code": exc.http_status,
                "method": request.method,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Unmatched routes surface from Starlette as 404/405 HTTPExceptions."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            error = NotFoundError(
                "Not found", f"{request.method} {original_url(request)}",
            )
            logger.info(
                f"No route for {error.details}",
                extra={"method": request.method, "path": request.url.path},
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                status.HTTP_400_BAD_REQUEST,
                "Invalid request body",
                _summarize_validation_errors(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An unexpected error occurred",
            ),
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into the envelope's single details string."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
