"""Custom exceptions for the view renderer with proper HTTP status codes."""

from enum import Enum
from typing import Any

from view_renderer.models.results import HttpFault, InternalFault


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    VIEW_RENDERER_ERROR = "VIEW_RENDERER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # HTTP errors meant for the client
    HTTP_ERROR = "HTTP_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"

    # Template errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class ViewRendererException(Exception):
    """Base exception for renderer errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_RENDERER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize renderer exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class HttpException(ViewRendererException):
    """An error to show the client with a specific HTTP status.

    The message is sent to the client as-is, so it must be safe to expose.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: ErrorCode = ErrorCode.HTTP_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class BadRequestException(HttpException):
    """Request could not be understood."""

    def __init__(self, message: str = "Bad Request", details: dict[str, Any] | None = None):
        super().__init__(message, status_code=400, code=ErrorCode.BAD_REQUEST, details=details)


class UnauthorizedException(HttpException):
    """Request requires authentication."""

    def __init__(self, message: str = "Unauthorized", details: dict[str, Any] | None = None):
        super().__init__(message, status_code=401, code=ErrorCode.UNAUTHORIZED, details=details)


class ForbiddenException(HttpException):
    """Authenticated but not allowed."""

    def __init__(self, message: str = "Forbidden", details: dict[str, Any] | None = None):
        super().__init__(message, status_code=403, code=ErrorCode.FORBIDDEN, details=details)


class NotFoundException(HttpException):
    """Requested resource does not exist."""

    def __init__(self, message: str = "Not Found", details: dict[str, Any] | None = None):
        super().__init__(message, status_code=404, code=ErrorCode.NOT_FOUND, details=details)


class TemplateRenderException(ViewRendererException):
    """Template engine failed to render a file.

    Always internal: the message is for logs only.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code=500, details=details)


class ConfigurationException(ViewRendererException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


def classify_error(error: BaseException) -> HttpFault | InternalFault:
    """Map an exception to the fault shown to the client.

    HttpException keeps its status and message; anything else becomes an
    InternalFault whose details stay out of the response.
    """
    if isinstance(error, HttpException):
        return HttpFault(status_code=error.status_code, message=error.message, cause=error)
    return InternalFault(cause=error)
