"""Attribute bag for "heavy" HTML elements.

Light weight markup is better built as a tree and rendered with
:func:`htmlhelper.nested.render_nested`. :class:`HtmlElement` is meant for
objects that collect their attributes over time (form controls, widgets) and
render themselves at the end.

Unless stated otherwise, setting an attribute to ``None`` or ``""`` removes it
from the generated HTML code. Setters return the element so they can be chained.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .nested import Content, Element
from .tags import is_fake_attribute, render_element, render_void_tag


class HtmlElement:
    def __init__(self, tag: str = "div") -> None:
        self.tag = tag
        self._attributes: Dict[str, Any] = {}

    @property
    def attributes(self) -> Dict[str, Any]:
        """A copy of all attributes, including fake attributes."""
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> "HtmlElement":
        self._attributes[name] = value
        return self

    def set_fake_attribute(self, name: str, value: Any) -> "HtmlElement":
        """Set an attribute that is kept with the element but never rendered.

        The name of a fake attribute must start with an underscore.
        """
        if not is_fake_attribute(name):
            raise ValueError(f"Attribute '{name}' is not a valid fake attribute.")
        self._attributes[name] = value
        return self

    # Classes.

    def _class_list(self) -> list:
        classes = self._attributes.get("class")
        if classes is None or classes == "":
            return []
        # A class set through set_attribute() may be a space separated string.
        if isinstance(classes, str):
            return classes.split()
        if isinstance(classes, (list, tuple, set, frozenset)):
            return list(classes)
        return [classes]

    def add_class(self, class_name: Optional[str]) -> "HtmlElement":
        if class_name is None or class_name == "":
            return self
        classes = self._class_list()
        classes.append(class_name)
        self._attributes["class"] = classes
        return self

    def add_classes(self, class_names: Iterable[Optional[str]]) -> "HtmlElement":
        for class_name in class_names:
            self.add_class(class_name)
        return self

    def remove_class(self, class_name: Optional[str]) -> "HtmlElement":
        if not class_name or "class" not in self._attributes:
            return self
        self._attributes["class"] = [name for name in self._class_list() if name != class_name]
        return self

    def unset_class(self) -> "HtmlElement":
        self._attributes.pop("class", None)
        return self

    # Global attributes.

    def set_attr_access_key(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("accesskey", value)

    def set_attr_aria(self, name: str, value: Any) -> "HtmlElement":
        """Set ``aria-<name>``."""
        return self.set_attribute(f"aria-{name}", value)

    def set_attr_content_editable(self, value: Any) -> "HtmlElement":
        """Set ``contenteditable``: ``"true"`` when set, ``"false"`` when unset, omitted for None."""
        return self.set_attribute("contenteditable", value)

    def set_attr_context_menu(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("contextmenu", value)

    def set_attr_data(self, name: str, value: Any) -> "HtmlElement":
        """Set ``data-<name>``."""
        return self.set_attribute(f"data-{name}", value)

    def set_attr_dir(self, value: Optional[str]) -> "HtmlElement":
        """Set ``dir``: one of ``ltr``, ``rtl`` or ``auto``."""
        return self.set_attribute("dir", value)

    def set_attr_draggable(self, value: Any) -> "HtmlElement":
        """Set ``draggable``: ``"auto"`` is kept, other values become ``"true"`` or ``"false"``."""
        return self.set_attribute("draggable", value)

    def set_attr_drop_zone(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("dropzone", value)

    def set_attr_hidden(self, value: Any) -> "HtmlElement":
        return self.set_attribute("hidden", value)

    def set_attr_id(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("id", value)

    def set_attr_lang(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("lang", value)

    def set_attr_role(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("role", value)

    def set_attr_spell_check(self, value: Any) -> "HtmlElement":
        return self.set_attribute("spellcheck", value)

    def set_attr_style(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("style", value)

    def set_attr_tab_index(self, value: Optional[int]) -> "HtmlElement":
        return self.set_attribute("tabindex", value)

    def set_attr_title(self, value: Optional[str]) -> "HtmlElement":
        return self.set_attribute("title", value)

    def set_attr_translate(self, value: Any) -> "HtmlElement":
        """Set ``translate``: ``"yes"`` when set, ``"no"`` when unset, omitted for None."""
        return self.set_attribute("translate", value)

    # Rendering.

    def rendered_attributes(self) -> Dict[str, Any]:
        """The attributes that end up in HTML code, i.e. without fake attributes."""
        return {name: value for name, value in self._attributes.items() if not is_fake_attribute(name)}

    def generate_element(self, content: Any = "", is_html: bool = False) -> str:
        return render_element(self.tag, self._attributes, content, is_html)

    def generate_void_element(self) -> str:
        return render_void_tag(self.tag, self._attributes)

    def to_node(self, content: Optional[Content] = None) -> Element:
        """Return this element as a markup node for a nested tree."""
        return Element(self.tag, self.rendered_attributes(), content)


__all__ = ["HtmlElement"]
