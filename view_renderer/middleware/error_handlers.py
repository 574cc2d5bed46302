"""Exception handlers that answer with HTML error pages."""

from fastapi import FastAPI, Request
from fastapi.responses import Response

from view_renderer.exceptions import HttpException
from view_renderer.logging_config import get_logger, log_with_context
from view_renderer.models import HTML_CONTENT_TYPE, INTERNAL_ERROR_MESSAGE, ResponseShell
from view_renderer.views.template_renderer import ViewRenderer

logger = get_logger(__name__)


def _renderer_for(request: Request) -> ViewRenderer | None:
    return getattr(request.app.state, "view_renderer", None)


async def http_exception_handler(request: Request, exc: HttpException) -> Response:
    """Render an HttpException raised from a route with its own status and message."""
    log_with_context(
        logger,
        "warning",
        "HTTP error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="http_error",
    )

    renderer = _renderer_for(request)
    if renderer is None:
        return Response(content=exc.message, status_code=exc.status_code, media_type=HTML_CONTENT_TYPE)
    return renderer.render_error(request, ResponseShell(), {}, exc).to_response()


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        exc_info=exc,
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )

    # Don't expose internal error details to clients
    renderer = _renderer_for(request)
    if renderer is None:
        return Response(content=INTERNAL_ERROR_MESSAGE, status_code=500, media_type=HTML_CONTENT_TYPE)
    return renderer.render_error(request, ResponseShell(), {}, exc).to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HttpException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
