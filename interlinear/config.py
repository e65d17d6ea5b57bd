"""
Configuration for the interlinear library.

Settings are read from ``INTERLINEAR_*`` environment variables (or an ``.env``
file) and can be overridden programmatically with :func:`configure`.
"""

from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from interlinear.exceptions import ConfigurationError


class InterlinearSettings(BaseSettings):
    """Settings controlling locator resolution, fetching and gloss markup."""

    model_config = SettingsConfigDict(
        env_prefix="INTERLINEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Locator resolution
    base_path: str | list[str] = Field(
        default="",
        description="Base path (or ordered candidates, first one wins) for annotation files",
    )
    source_extension: str = Field(
        default=".md",
        description="Extension a primary document must carry to be annotatable",
    )
    annotation_suffix: str = Field(
        default="_en",
        description="Language suffix inserted before the extension of the annotation file",
    )

    # Fetching
    request_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers merged over the base fetch options",
    )
    fetch_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Base fetch option set",
    )
    cache_mode: str = Field(
        default="force-cache",
        description="Transport cache mode used when fetch options do not set one",
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
    )

    # Markup
    gloss_tag: str = Field(default="ruby", description="Element wrapping a glossed block")
    gloss_text_tag: str = Field(default="rt", description="Element holding the gloss text")
    line_break_tag: str = Field(default="br", description="Line break inside a gloss")

    @model_validator(mode="after")
    def _check(self) -> "InterlinearSettings":
        if not self.annotation_suffix:
            raise ConfigurationError(
                "Annotation suffix must not be empty", setting_name="annotation_suffix"
            )
        if not self.source_extension.startswith(".") or len(self.source_extension) < 2:
            raise ConfigurationError(
                f"Invalid source extension: {self.source_extension!r}",
                setting_name="source_extension",
            )
        if isinstance(self.base_path, list) and not self.base_path:
            raise ConfigurationError(
                "Base path candidate list must not be empty", setting_name="base_path"
            )
        if self.request_timeout <= 0:
            raise ConfigurationError(
                "Request timeout must be positive", setting_name="request_timeout"
            )
        return self


_settings: InterlinearSettings | None = None


def get_settings() -> InterlinearSettings:
    """Return the process-wide settings instance, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = InterlinearSettings()
    return _settings


def configure(**overrides: Any) -> InterlinearSettings:
    """
    Replace the process-wide settings with overridden values.

    Example:
        configure(base_path="https://docs.example.com/", annotation_suffix="_fr")
    """
    global _settings
    _settings = InterlinearSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the process-wide settings so the next access re-reads the environment."""
    global _settings
    _settings = None
