"""
Service errors and the FastAPI handlers that turn them into JSON envelopes.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userservice.shared.logger import StructuredLogger


class ServiceError(Exception):
    """Base error for expected, client-facing failures."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    message = "Invalid request payload"


class NotFoundError(ServiceError):
    status_code = 404
    message = "User not found"


def error_envelope(message: str) -> dict:
    return {"success": False, "error": message}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    request.app.state.logger.warning(
        exc.message,
        method=request.method,
        path=request.url.path,
        status=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    request.app.state.logger.warning(
        "Rejected request payload",
        method=request.method,
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(status_code=400, content=error_envelope(ValidationError.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        request.app.state.logger.warning("Route not found", method=request.method, path=request.url.path)
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI, logger: StructuredLogger) -> None:
    """Install the envelope handlers; handled errors are logged through ``logger``."""
    app.state.logger = logger
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
