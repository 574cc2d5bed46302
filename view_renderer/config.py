from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # view-renderer/


class Settings(BaseSettings):
    """Renderer settings with validation.

    Values come from VIEW_RENDERER_* environment variables or the .env file
    at the project root. Everything has a default so the renderer can start
    without any configuration.
    """

    templates_dir: Path = Field(default=BASE_DIR / "templates", description="Root directory for template files")
    default_layout: str | None = Field(default=None, description="Layout used when a render call names none")
    autoescape: bool = Field(default=True, description="Autoescape HTML-like templates")
    auto_reload: bool = Field(default=True, description="Reload templates when the file changes")
    strict_undefined: bool = Field(default=False, description="Fail on undefined template variables")

    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path | None = Field(default=None, description="Directory for JSON logs (console only when unset)")

    model_config = SettingsConfigDict(
        env_prefix="VIEW_RENDERER_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("default_layout", mode="after")
    @classmethod
    def validate_default_layout(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace layout as no layout."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level is a known logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
