"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from view_renderer.config import Settings
from view_renderer.engines.jinja_engine import JinjaTemplateEngine
from view_renderer.logging_config import get_logger
from view_renderer.views.template_renderer import ViewRenderer


def create_view_renderer(settings: Settings) -> ViewRenderer:
    """Build a ViewRenderer backed by Jinja templates from settings.

    Raises:
        ConfigurationException: If the template directory does not exist.
    """
    engine = JinjaTemplateEngine(
        settings.templates_dir,
        autoescape=settings.autoescape,
        auto_reload=settings.auto_reload,
        strict_undefined=settings.strict_undefined,
    )
    return ViewRenderer(
        engine,
        default_layout=settings.default_layout,
        logger=get_logger("view_renderer.views"),
    )


async def get_view_renderer(request: Request) -> ViewRenderer:
    """
    Get the shared view renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewRenderer instance.

    Raises:
        RuntimeError: If the view renderer is not initialized.
    """
    renderer: ViewRenderer | None = getattr(request.app.state, "view_renderer", None)

    if renderer is None:
        raise RuntimeError("View renderer not initialized.")

    return renderer
