"""Exception handlers turning workflow failures into JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ponto_auth.core.errors import AuthWorkflowError, InvalidInput, RateLimited

logger = logging.getLogger(__name__)


async def _workflow_error_handler(
    request: Request, exc: AuthWorkflowError
) -> JSONResponse:
    code = exc.status_code
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.kind.value
        )
    else:
        logger.info(
            "%s %s rejected: %s", request.method, request.url.path, exc.kind.value
        )
    headers = None
    if code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(exc, RateLimited) and exc.retry_after is not None:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse({"message": exc.message}, status_code=code, headers=headers)


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("%s %s rejected: malformed request", request.method, request.url.path)
    error = InvalidInput()
    return JSONResponse({"message": error.message}, status_code=error.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the workflow error mapping to ``app``."""
    app.add_exception_handler(AuthWorkflowError, _workflow_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)


__all__ = ["register_exception_handlers"]
