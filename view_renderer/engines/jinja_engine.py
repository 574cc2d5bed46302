"""Jinja2 implementation of the TemplateEngine protocol."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    Undefined,
    select_autoescape,
)

from view_renderer.exceptions import ConfigurationException, ErrorCode, TemplateRenderException
from view_renderer.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

AUTOESCAPE_EXTENSIONS = ["html", "htm", "xml", "phtml"]


class JinjaTemplateEngine:
    """Renders template files from a directory with Jinja2."""

    def __init__(
        self,
        templates_dir: Path | str,
        autoescape: bool = True,
        auto_reload: bool = True,
        strict_undefined: bool = False,
    ):
        """Create the Jinja environment.

        Args:
            templates_dir: Directory template paths are resolved against
            autoescape: Escape variables in HTML-like templates
            auto_reload: Pick up template changes without a restart
            strict_undefined: Raise on undefined variables instead of rendering them empty

        Raises:
            ConfigurationException: If templates_dir is not a directory
        """
        self.templates_dir = Path(templates_dir)
        if not self.templates_dir.is_dir():
            raise ConfigurationException(
                f"Template directory does not exist: {self.templates_dir}",
                details={"templates_dir": str(self.templates_dir)},
            )

        undefined: type[Undefined] = StrictUndefined if strict_undefined else Undefined
        self.environment = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(AUTOESCAPE_EXTENSIONS) if autoescape else False,
            auto_reload=auto_reload,
            undefined=undefined,
        )

    def render(self, file_path: str, context: Any) -> str:
        """Render a template file with the given context.

        A mapping context exposes its keys as template variables; any other
        value is available as ``data``.

        Raises:
            TemplateRenderException: If Jinja cannot load or render the template
        """
        variables = dict(context) if isinstance(context, Mapping) else {"data": context}

        try:
            template = self.environment.get_template(file_path)
            return template.render(variables)
        except TemplateNotFound as e:
            log_with_context(
                logger,
                "debug",
                "Template not found",
                template=file_path,
                event_type="template_not_found",
            )
            raise TemplateRenderException(
                f"Template not found: {file_path}",
                code=ErrorCode.TEMPLATE_NOT_FOUND,
                details={"template": file_path},
            ) from e
        except TemplateError as e:
            raise TemplateRenderException(
                f"Failed to render template {file_path}: {e}",
                details={"template": file_path},
            ) from e
