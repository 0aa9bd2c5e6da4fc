"""Application exception classes and handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse

from devstatus.schemas.response_schema import ErrorResponse


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Service Unavailable (503) ---


class DatabaseUnavailableError(AppException):
    """The diagnostic probe could not connect or query."""

    def __init__(self, message: str = "Database unavailable") -> None:
        super().__init__(
            message=message,
            code="CONNECTION_OR_QUERY_FAILURE",
            status_code=503,
        )


# --- Exception Handler ---


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            status=exc.status_code,
            message=exc.message,
            code=exc.code,
        ).model_dump(),
    )
