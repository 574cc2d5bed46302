"""Data models for the view renderer."""

from view_renderer.models.render_options import LayoutData, RenderOptions, dedupe
from view_renderer.models.response import HTML_CONTENT_TYPE, ResponseShell
from view_renderer.models.results import (
    INTERNAL_ERROR_MESSAGE,
    HttpFault,
    InternalFault,
    RenderFault,
    RenderResult,
    RenderSuccess,
)

__all__ = [
    "HTML_CONTENT_TYPE",
    "INTERNAL_ERROR_MESSAGE",
    "HttpFault",
    "InternalFault",
    "LayoutData",
    "RenderFault",
    "RenderOptions",
    "RenderResult",
    "RenderSuccess",
    "ResponseShell",
    "dedupe",
]
