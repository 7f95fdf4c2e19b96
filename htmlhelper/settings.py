"""Process-wide settings for HTML generation."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class HtmlSettings(BaseModel):
    """Settings shared by the escaper and the ID generator."""

    encoding: str = Field(
        "UTF-8", description="Character encoding of the generated HTML code."
    )
    id_prefix: str = Field(
        "auto-id-", description="Prefix of element IDs handed out by the ID generator."
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            # str.encode() only accepts text encodings, not codecs such as base64 or rot13.
            "".encode(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding: {value}") from exc
        return value

    @property
    def is_unicode(self) -> bool:
        """True when every character can be written without a character reference."""
        return codecs.lookup(self.encoding).name in {"utf-8", "utf-16", "utf-32"}


_settings = HtmlSettings()


def get_settings() -> HtmlSettings:
    return _settings


def configure(**overrides: Any) -> HtmlSettings:
    """Replace the process-wide settings, keeping fields that are not overridden."""
    global _settings
    _settings = HtmlSettings.model_validate({**_settings.model_dump(), **overrides})
    return _settings


def reset_settings() -> HtmlSettings:
    global _settings
    _settings = HtmlSettings()
    return _settings


def load_settings(path: Path) -> HtmlSettings:
    """Load and validate settings from a YAML mapping.

    Raises ``ValueError`` for a file without a mapping and pydantic's
    ``ValidationError`` for invalid settings.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping of settings.")
    return HtmlSettings.model_validate(data)


__all__ = ["HtmlSettings", "configure", "get_settings", "load_settings", "reset_settings"]
