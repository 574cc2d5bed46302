"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from view_renderer import __version__
from view_renderer.config import Settings, get_settings
from view_renderer.dependencies import create_view_renderer
from view_renderer.logging_config import setup_logging
from view_renderer.middleware.error_handlers import register_error_handlers


def create_app(settings: Settings | None = None, configure_logging: bool = False) -> FastAPI:
    """Create and configure a FastAPI application with a shared view renderer.

    Routes are added by the caller; they can get the renderer with
    ``Depends(get_view_renderer)``.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        configure_logging: Also set up root logging from the settings

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    if configure_logging:
        setup_logging(settings.log_level, settings.log_dir)

    app = FastAPI(title="View Renderer", version=__version__)

    app.state.settings = settings
    app.state.view_renderer = create_view_renderer(settings)

    register_error_handlers(app)

    return app
