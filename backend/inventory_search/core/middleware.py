"""
Middleware configuration for the FastAPI application.

CORS plus the exception handlers that turn domain errors into
failure envelopes. Extracted from main.py to keep app factory slim.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_search.core.exceptions import NotFoundError, ValidationError
from inventory_search.schemas.inventory import ResponseEnvelope

logger = logging.getLogger(__name__)


def apply_cors(app: FastAPI) -> None:
    """Apply CORS middleware with permissive defaults."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _failure_response(status_code: int, message: str) -> JSONResponse:
    envelope = ResponseEnvelope.failure(message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json", by_alias=True))


def apply_exception_handlers(app: FastAPI) -> None:
    """Map ValidationError -> 400 and NotFoundError -> 404 failure envelopes."""

    @app.exception_handler(ValidationError)
    async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(f"Rejected {request.url.path}: {exc}")
        return _failure_response(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(f"Nothing found for {request.url.path}: {exc}")
        return _failure_response(404, str(exc))
