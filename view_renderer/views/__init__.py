"""View rendering module for HTML templates.

Composes a view template into a layout template and maps rendering
failures to HTML error responses.
"""

from view_renderer.views.template_renderer import ViewRenderer

__all__ = ["ViewRenderer"]
