"""
Error taxonomy and HTTP translation.

Services raise the exceptions defined here; ``register_error_handlers``
turns them into JSON responses at the route boundary.  Each class knows
its HTTP status and the key under which the message is rendered
(``message`` for access errors, ``error`` for lookups and failures),
which keeps the wire format compatible with existing clients.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    key: str = "error"
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def to_body(self) -> Dict[str, Any]:
        return {self.key: self.message}


class UnauthorizedError(ServiceError):
    """Missing or rejected credential, or identity mismatch on own-data reads."""

    status_code = 401
    key = "message"
    default_message = "Unauthorized access"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class ForbiddenError(ServiceError):
    """Valid credential, but the caller does not own the target resource."""

    status_code = 403
    key = "message"
    default_message = "Forbidden access"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class StorageError(ServiceError):
    """The storage engine call itself failed."""

    default_message = "Storage failure"


class IdentityProviderError(ServiceError):
    """The identity provider failed while serving a non-verification call."""

    default_message = "Identity provider failure"


def _json_error(status_code: int, body: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers translating errors into JSON responses."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _json_error(exc.status_code, exc.to_body(), exc.headers)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched paths and unsupported methods both mean "no such route".
        if exc.status_code in (404, 405) and not isinstance(exc.detail, dict):
            return _json_error(404, {"error": "Route not found"})
        if isinstance(exc.detail, dict):
            body = exc.detail
        else:
            body = {"message": exc.detail}
        return _json_error(exc.status_code, body, getattr(exc, "headers", None))
