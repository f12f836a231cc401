import traceback
from typing import Any, Dict, Optional
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from scrolljob.config import get_settings
from scrolljob.utils.logger import app_logger

class AppException(HTTPException):
    """Application error carrying its HTTP status"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code
        self.extra_data = extra_data or {}

    @property
    def message(self) -> str:
        return self.detail

class ValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            error_code="VALIDATION_ERROR"
        )

class UnauthorizedError(AppException):
    def __init__(self, message: str = "Unauthorized - Invalid or missing admin key"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            error_code="UNAUTHORIZED"
        )

class NotFoundError(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or f"{resource} not found",
            error_code="NOT_FOUND"
        )

class InvalidIdentifierError(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail or f"Invalid {resource.lower()} ID",
            error_code="INVALID_ID"
        )

class InternalServerError(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="INTERNAL_ERROR"
        )

def create_error_response(message: str, stack: Optional[str] = None) -> Dict[str, Any]:
    """Uniform error envelope"""
    response = {
        "status": "error",
        "message": message,
        "data": None
    }

    if stack:
        response["stack"] = stack

    return response

def format_validation_errors(exc: Exception) -> str:
    """Joins every pydantic error into one comma separated message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        # pydantic prefixes custom ValueError messages
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.append(f"{location}: {message}" if location and error.get("type") != "value_error" else message)
    return ", ".join(messages) or "Invalid request"

def _error_json(request: Request, status_code: int, message: str, exc: Exception) -> JSONResponse:
    settings = get_settings()
    stack = None
    if settings.is_development:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    app_logger.error("Error occurred", extra={"context": {
        "message": message,
        "status_code": status_code,
        "path": request.url.path,
        "stack": stack,
    }})
    return JSONResponse(status_code=status_code, content=create_error_response(message, stack))

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return _error_json(request, exc.status_code, exc.detail, exc)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_json(request, status.HTTP_400_BAD_REQUEST, format_validation_errors(exc), exc)

async def document_validation_handler(request: Request, exc: PydanticValidationError) -> JSONResponse:
    return _error_json(request, status.HTTP_400_BAD_REQUEST, format_validation_errors(exc), exc)

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Route not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return _error_json(request, exc.status_code, message, exc)

async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return _error_json(
        request,
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many requests, please try again later",
        exc
    )

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    settings = get_settings()
    message = str(exc) if settings.is_development and str(exc) else "Internal server error"
    return _error_json(request, status.HTTP_500_INTERNAL_SERVER_ERROR, message, exc)

def register_exception_handlers(app: FastAPI) -> None:
    """Maps every failure to the uniform error envelope."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, document_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
