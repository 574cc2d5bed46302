"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from view_renderer.config import Settings
from view_renderer.engines.jinja_engine import JinjaTemplateEngine
from view_renderer.models import ResponseShell
from view_renderer.views.template_renderer import ViewRenderer

VIEW_TEMPLATE = "<h1>{{ title }}</h1>"
LAYOUT_TEMPLATE = (
    "<html><head>"
    "{% for href in head_css or [] %}<link href=\"{{ href }}\">{% endfor %}"
    "{% if inline_css %}<style>{{ inline_css }}</style>{% endif %}"
    "</head><body>{{ content|safe }}"
    "{% for src in bottom_scripts or [] %}<script src=\"{{ src }}\"></script>{% endfor %}"
    "</body></html>"
)


@pytest.fixture
def templates_dir(tmp_path):
    """Template directory with a view, a layout and a broken template."""
    (tmp_path / "view.html").write_text(VIEW_TEMPLATE, encoding="utf-8")
    (tmp_path / "layout.html").write_text(LAYOUT_TEMPLATE, encoding="utf-8")
    (tmp_path / "broken.html").write_text("{% if %}", encoding="utf-8")
    (tmp_path / "data.html").write_text("{{ data }}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def jinja_engine(templates_dir):
    """Jinja engine over the test template directory."""
    return JinjaTemplateEngine(templates_dir)


@pytest.fixture
def mock_engine():
    """Template engine stub that echoes the template path and context."""
    engine = MagicMock()
    engine.render.side_effect = lambda file_path, context: f"[{file_path}]"
    return engine


@pytest.fixture
def mock_logger():
    """Mock logger for asserting on failure logging."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def renderer(mock_engine, mock_logger):
    """ViewRenderer with a stub engine and mock logger."""
    return ViewRenderer(mock_engine, logger=mock_logger)


@pytest.fixture
def http_request():
    """Minimal GET request."""
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": "/page",
            "query_string": b"",
            "headers": [],
        }
    )


@pytest.fixture
def response_shell():
    """Fresh response with default status."""
    return ResponseShell()


@pytest.fixture
def test_settings(templates_dir):
    """Settings pointing at the test template directory."""
    return Settings(templates_dir=templates_dir, default_layout="layout.html")
