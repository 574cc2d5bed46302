"""Pydantic models for render options and the layout context."""

from collections.abc import Iterable
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def dedupe(values: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


class RenderOptions(BaseModel):
    """Options for a single render call.

    Accepts both snake_case names and the camelCase keys used by callers
    that build options as plain dicts (``viewFilePath``, ``headCss``, ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    view_file_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("view_file_path", "viewFilePath"),
        description="View template path; None renders no view body",
    )
    layout_file_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("layout_file_path", "layoutFilePath"),
        description="Layout template path; None falls back to the renderer default, an empty string disables it",
    )
    inline_css: Any = Field(default=None, validation_alias=AliasChoices("inline_css", "inlineCss"))
    inline_scripts: Any = Field(default=None, validation_alias=AliasChoices("inline_scripts", "inlineScripts"))
    bottom_scripts: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("bottom_scripts", "bottomScripts"),
        description="Script URLs for the end of the body",
    )
    head_css: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("head_css", "headCss"),
        description="Stylesheet URLs for the document head",
    )

    def deduplicated(self) -> "RenderOptions":
        """Return a copy with bottom_scripts and head_css deduplicated.

        Only non-empty lists are touched; None and [] are kept as they are.
        """
        update: dict[str, list[str]] = {}
        if self.bottom_scripts:
            update["bottom_scripts"] = dedupe(self.bottom_scripts)
        if self.head_css:
            update["head_css"] = dedupe(self.head_css)
        if not update:
            return self
        return self.model_copy(update=update)


class LayoutData(BaseModel):
    """Context handed to the layout template."""

    content: str = ""
    inline_css: Any = None
    inline_scripts: Any = None
    bottom_scripts: list[str] | None = None
    head_css: list[str] | None = None

    @classmethod
    def from_options(cls, content: str, options: RenderOptions) -> "LayoutData":
        """Build the layout context from rendered view content and options."""
        return cls(
            content=content,
            inline_css=options.inline_css,
            inline_scripts=options.inline_scripts,
            bottom_scripts=options.bottom_scripts,
            head_css=options.head_css,
        )

    def as_context(self) -> dict[str, Any]:
        """Field values as a dict, without serializing nested values."""
        return {name: getattr(self, name) for name in type(self).model_fields}
