"""Exception handlers mapping request and pipeline errors to ``{error}`` bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.errors import ConfigurationError, InputValidationError, MisinfoDetectorError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the error body shared by every failure response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 instead of FastAPI's 422 detail list."""
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        return error_response(400, "Request body must be valid JSON")
    if any(error.get("loc", ())[-1:] == ("text",) for error in errors):
        return error_response(400, "Text is required")
    return error_response(400, "Invalid request")


async def detector_error_handler(request: Request, exc: MisinfoDetectorError) -> JSONResponse:
    """Report pipeline errors raised outside the endpoint body (e.g. in dependencies)."""
    if isinstance(exc, InputValidationError):
        return error_response(400, str(exc))
    if isinstance(exc, ConfigurationError):
        logger.error(f"❌ Configuration error: {exc}")
    return error_response(500, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(MisinfoDetectorError, detector_error_handler)
