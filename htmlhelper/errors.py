"""Exceptions raised while generating HTML."""

from __future__ import annotations


class HtmlHelperError(Exception):
    """Base class for errors raised by htmlhelper."""


class TypeMismatch(HtmlHelperError, TypeError):
    """A value of an unsupported type was passed where a scalar is expected."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported value of type {type_name}; expected str, int, float, bool or None.")
        self.type_name = type_name


class StructureError(HtmlHelperError, ValueError):
    """A markup tree node has a shape the nested renderer cannot interpret."""


__all__ = ["HtmlHelperError", "StructureError", "TypeMismatch"]
