"""
Exception handlers serializing failures to ``{"error": ...}`` JSON bodies.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from campreg.errors import RegistrationError

logger = logging.getLogger(__name__)

# Endpoints whose error bodies always carry "success": false
SUCCESS_FLAG_PATHS = frozenset({"/score-participant"})


def error_response(exc: RegistrationError, **extra: Any) -> JSONResponse:
    """Build the JSON response for a handled registration error."""
    return JSONResponse(status_code=exc.status_code, content={**exc.to_payload(), **extra})


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers so errors raised in dependencies share the router error format."""

    @app.exception_handler(RegistrationError)
    async def registration_error_handler(request: Request, exc: RegistrationError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        content: dict[str, Any] = {"error": "Invalid request body", "details": jsonable_encoder(exc.errors())}
        if request.url.path in SUCCESS_FLAG_PATHS:
            content["success"] = False
        return JSONResponse(status_code=400, content=content)
