"""Rendering of single HTML attributes.

HTML attributes do not share one value syntax: some are presence flags, some
are fixed pairs of keywords and ``class`` is a list of tokens. The table
:data:`ATTRIBUTE_RULES` records which rule applies to which attribute name and
:func:`render_attribute` interprets it. Attributes not in the table are
rendered as ``name="value"`` with both parts escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

from .escape import SCALAR_TYPES, escape_text, scalar_to_text, txt2html


@dataclass(frozen=True)
class BooleanFlag:
    """Presence attribute, rendered as ``name="name"`` when its value is set."""


@dataclass(frozen=True)
class TriState:
    """Attribute with a keyword for set and unset values; ``None`` omits it.

    ``extra`` lists string values that are written as-is and ``false_literals``
    lists strings that count as unset.
    """
    true_value: str
    false_value: str
    extra: tuple[str, ...] = ()
    false_literals: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassList:
    """Space separated list of unique, sorted class names."""


AttributeRule = Union[BooleanFlag, TriState, ClassList]

CLASS_SEQUENCE_TYPES = (list, tuple, set, frozenset)

ATTRIBUTE_RULES: Dict[str, AttributeRule] = {
    "autofocus": BooleanFlag(),
    "checked": BooleanFlag(),
    "disabled": BooleanFlag(),
    "hidden": BooleanFlag(),
    "ismap": BooleanFlag(),
    "multiple": BooleanFlag(),
    "novalidate": BooleanFlag(),
    "readonly": BooleanFlag(),
    "required": BooleanFlag(),
    "selected": BooleanFlag(),
    "spellcheck": BooleanFlag(),
    "draggable": TriState("true", "false", extra=("auto",), false_literals=("false",)),
    "contenteditable": TriState("true", "false"),
    "autocomplete": TriState("on", "off"),
    "translate": TriState("yes", "no"),
    "class": ClassList(),
}


def is_set(value: Any) -> bool:
    """Return whether a value switches an attribute on.

    ``None``, ``False``, zero, ``""``, ``"0"`` and empty collections are unset;
    everything else, including arbitrary objects, is set.
    """
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def clean_classes(classes: Any) -> list[str]:
    """Return the unique, non-empty class names of a sequence in sorted order.

    Entries are converted with their scalar text form, so ``False`` is kept as
    ``"0"``. Entries that are not scalars are dropped.
    """
    clean = set()
    for entry in classes:
        if not isinstance(entry, SCALAR_TYPES):
            continue
        text = scalar_to_text(entry)
        if text != "":
            clean.add(text)
    return sorted(clean)


def rule_for(name: str, value: Any) -> AttributeRule | None:
    """Return the rule that applies to an attribute, or None for the default rule."""
    rule = ATTRIBUTE_RULES.get(name)
    if isinstance(rule, ClassList) and not isinstance(value, CLASS_SEQUENCE_TYPES):
        return None
    return rule


def render_attribute(name: str, value: Any) -> str:
    """Return the ``' name="value"'`` fragment of an attribute or ``""`` to omit it."""
    rule = rule_for(name, value)

    if isinstance(rule, BooleanFlag):
        if is_set(value):
            return f' {name}="{name}"'
        return ""

    if isinstance(rule, TriState):
        if value is None:
            return ""
        if isinstance(value, str) and value in rule.extra:
            keyword = value
        elif is_set(value) and not (isinstance(value, str) and value in rule.false_literals):
            keyword = rule.true_value
        else:
            keyword = rule.false_value
        return f' {name}="{keyword}"'

    if isinstance(rule, ClassList):
        classes = " ".join(clean_classes(value))
        if classes == "":
            return ""
        return f' class="{escape_text(classes)}"'

    if value is None or (isinstance(value, str) and value == ""):
        return ""
    return f' {txt2html(name)}="{txt2html(value)}"'


__all__ = [
    "ATTRIBUTE_RULES",
    "AttributeRule",
    "BooleanFlag",
    "ClassList",
    "TriState",
    "clean_classes",
    "is_set",
    "render_attribute",
    "rule_for",
]
