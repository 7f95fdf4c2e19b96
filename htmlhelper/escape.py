"""Conversion of scalar values to escaped HTML text."""

from __future__ import annotations

import html
from typing import Any, Union

from .errors import TypeMismatch
from .settings import get_settings

Scalar = Union[str, int, float, bool, None]

SCALAR_TYPES = (str, int, float, bool, type(None))


def scalar_to_text(value: Any) -> str:
    """Return the canonical (unescaped) text of a scalar.

    ``None`` becomes ``""``, ``True``/``False`` become ``"1"``/``"0"`` and numbers
    use their default decimal form. Any other type raises :class:`TypeMismatch`.
    """
    if isinstance(value, str):
        return value
    # bool is a subclass of int and must be checked first.
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    if value is None:
        return ""
    raise TypeMismatch(type(value).__name__)


def escape_text(text: str) -> str:
    """Escape ``& < > " '`` and encode characters the output encoding lacks."""
    escaped = html.escape(text, quote=True)
    settings = get_settings()
    if settings.is_unicode:
        return escaped
    return escaped.encode(settings.encoding, "xmlcharrefreplace").decode(settings.encoding)


def txt2html(value: Any) -> str:
    """Return a scalar as text that is safe to embed in HTML."""
    if isinstance(value, str):
        return escape_text(value)
    # Numbers, booleans and None never contain markup-significant characters.
    return scalar_to_text(value)


__all__ = ["SCALAR_TYPES", "Scalar", "escape_text", "scalar_to_text", "txt2html"]
