"""Protocol definitions for dependency injection."""

from typing import Any, Protocol


class TemplateEngine(Protocol):
    """Protocol for template engines.

    Implementations turn a template file plus a data context into a string
    and raise on any problem (missing file, evaluation error, ...).
    """

    def render(self, file_path: str, context: Any) -> str:
        """Render a template file.

        Args:
            file_path: Template path, relative to the engine's template root
            context: Data made available to the template

        Returns:
            Rendered text
        """
        ...

