"""Rendering of nested markup trees.

A markup tree is one of:

* ``None``, rendered as nothing;
* a list (or tuple) of markup trees, rendered in order;
* an :class:`Element` whose content is :class:`Children`, :class:`Text`,
  :class:`RawHtml` or ``None`` for a void element;
* a :class:`TextFragment` (escaped scalar) or :class:`RawFragment` (trusted HTML).

Plain mappings are accepted as well and converted with :func:`from_struct`::

    render_nested([{"tag": "table",
                    "attr": {"class": "test"},
                    "children": [{"tag": "tr",
                                  "attr": {"id": "first-row"},
                                  "children": [{"tag": "td", "text": "hello"},
                                               {"tag": "td", "html": "<b>world</b>"}]}]},
                   {"text": "The End"},
                   {"html": "!"}])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, TextIO, Union

from .errors import StructureError
from .escape import Scalar, txt2html
from .tags import render_end_tag, render_start_tag, render_void_tag

# "inner" is the historical spelling of "children".
CHILDREN_KEYS = ("children", "inner")


@dataclass(frozen=True)
class Children:
    """Content made of nested markup."""
    node: "Node"


@dataclass(frozen=True)
class Text:
    """Content made of a single escaped scalar."""
    value: Scalar


@dataclass(frozen=True)
class RawHtml:
    """Content made of a trusted HTML snippet."""
    html: Optional[str]


Content = Union[Children, Text, RawHtml]


@dataclass(frozen=True)
class Element:
    """An element; without content it is rendered as a self-closed void element."""
    tag: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    content: Optional[Content] = None

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str) or not self.tag:
            raise StructureError(f"Element tag must be a non-empty string, got {self.tag!r}")

    @property
    def is_void(self) -> bool:
        return self.content is None


@dataclass(frozen=True)
class TextFragment:
    value: Scalar


@dataclass(frozen=True)
class RawFragment:
    html: Optional[str]


Node = Union[None, Element, TextFragment, RawFragment, Sequence["Node"], Mapping[str, Any]]

_NODE_TYPES = (Element, TextFragment, RawFragment)


def _record_to_node(record: Mapping[str, Any]) -> Node:
    tag = record.get("tag")
    if tag is not None:
        attrs = record.get("attr") or {}
        for key in CHILDREN_KEYS:
            if key in record:
                return Element(tag, attrs, Children(from_struct(record[key])))
        if "text" in record:
            return Element(tag, attrs, Text(record["text"]))
        if "html" in record:
            return Element(tag, attrs, RawHtml(record["html"]))
        return Element(tag, attrs)

    if "text" in record:
        return TextFragment(record["text"])
    if "html" in record:
        return RawFragment(record["html"])
    raise StructureError("Expected key 'tag', 'text', or 'html'")


def from_struct(struct: Any) -> Node:
    """Convert a tree of plain lists and mappings into markup nodes.

    The presence of a content key, not its value, decides between an element
    and a void element: ``{"tag": "span", "children": None}`` is an empty span.
    """
    if struct is None or isinstance(struct, _NODE_TYPES):
        return struct
    if isinstance(struct, (list, tuple)):
        return [from_struct(item) for item in struct]
    if isinstance(struct, Mapping):
        return _record_to_node(struct)
    raise StructureError(f"Unsupported markup node of type {type(struct).__name__}")


def _walk(node: Any, emit: Callable[[str], Any]) -> None:
    if node is None:
        return

    if isinstance(node, (list, tuple)):
        for child in node:
            _walk(child, emit)
        return

    if isinstance(node, Mapping):
        node = from_struct(node)

    if isinstance(node, Element):
        content = node.content
        if content is None:
            emit(render_void_tag(node.tag, node.attrs, skip_fake=False))
            return
        emit(render_start_tag(node.tag, node.attrs, skip_fake=False))
        if isinstance(content, Children):
            _walk(content.node, emit)
        elif isinstance(content, Text):
            emit(txt2html(content.value))
        elif isinstance(content, RawHtml):
            emit(content.html or "")
        else:
            raise StructureError(f"Unsupported element content of type {type(content).__name__}")
        emit(render_end_tag(node.tag))
    elif isinstance(node, TextFragment):
        emit(txt2html(node.value))
    elif isinstance(node, RawFragment):
        emit(node.html or "")
    else:
        raise StructureError(f"Unsupported markup node of type {type(node).__name__}")


def render_nested(node: Node) -> str:
    """Return the HTML code of a markup tree."""
    parts: list[str] = []
    _walk(node, parts.append)
    return "".join(parts)


def write_nested(node: Node, stream: TextIO) -> None:
    """Write the HTML code of a markup tree to ``stream`` while walking it."""
    _walk(node, stream.write)


__all__ = [
    "Children",
    "Content",
    "Element",
    "Node",
    "RawFragment",
    "RawHtml",
    "Text",
    "TextFragment",
    "from_struct",
    "render_nested",
    "write_nested",
]
