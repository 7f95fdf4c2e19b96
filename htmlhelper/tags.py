"""Rendering of start tags, void elements and elements with content."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .attributes import render_attribute
from .escape import txt2html

# Attribute names with this prefix are bookkeeping for callers and are never rendered
# by the flat API.
FAKE_ATTRIBUTE_PREFIX = "_"

# See <https://html.spec.whatwg.org/multipage/syntax.html#void-elements>. Callers pick
# render_void_tag() for these; tag names are not validated against this set.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

Attributes = Mapping[str, Any]


def is_fake_attribute(name: str) -> bool:
    return name.startswith(FAKE_ATTRIBUTE_PREFIX)


def render_attributes(attrs: Optional[Attributes], *, skip_fake: bool = True) -> str:
    """Return the attribute fragments of a tag in the iteration order of ``attrs``."""
    if not attrs:
        return ""
    parts = [
        render_attribute(name, value)
        for name, value in attrs.items()
        if not (skip_fake and is_fake_attribute(name))
    ]
    return "".join(parts)


def render_start_tag(tag: str, attrs: Optional[Attributes] = None, *, skip_fake: bool = True) -> str:
    """Return the start tag of an element, e.g. ``<a href="/">``."""
    return f"<{tag}{render_attributes(attrs, skip_fake=skip_fake)}>"


def render_void_tag(tag: str, attrs: Optional[Attributes] = None, *, skip_fake: bool = True) -> str:
    """Return a self-closed void element, e.g. ``<br/>``."""
    return f"<{tag}{render_attributes(attrs, skip_fake=skip_fake)}/>"


def render_end_tag(tag: str) -> str:
    return f"</{tag}>"


def render_element(
    tag: str,
    attrs: Optional[Attributes] = None,
    content: Any = "",
    is_html: bool = False,
    *,
    skip_fake: bool = True,
) -> str:
    """Return an element with its content.

    When ``is_html`` is set ``content`` is a trusted HTML snippet inserted
    verbatim, otherwise it is a scalar that is escaped.
    """
    if is_html:
        inner = "" if content is None else content
    else:
        inner = txt2html(content)
    return render_start_tag(tag, attrs, skip_fake=skip_fake) + inner + render_end_tag(tag)


__all__ = [
    "FAKE_ATTRIBUTE_PREFIX",
    "VOID_ELEMENTS",
    "is_fake_attribute",
    "render_attributes",
    "render_element",
    "render_end_tag",
    "render_start_tag",
    "render_void_tag",
]
