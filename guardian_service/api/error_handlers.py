"""Exception handlers: every error leaves the service as a JSON body."""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


def _error(status_code: int, request: Request, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "path": request.url.path},
    )


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        logger.info("%s %s → %d: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return _error(exc.status_code, request, str(exc.detail))

    @app.exception_handler(ValidationError)
    async def dataset_error_handler(request: Request, exc: ValidationError):
        # Bundled data no longer matches the published models
        logger.error("Invalid dataset entry on %s: %s", request.url.path, exc)
        return _error(500, request, "Invalid dataset entry")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s\n%s",
                     request.url.path, exc, traceback.format_exc())
        return _error(500, request, "Internal server error")
