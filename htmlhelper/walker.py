"""CSS class names for CSS modules."""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

ClassNames = Union[str, Sequence[str], None]


def _as_list(value: ClassNames, argument: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeError(f"Argument {argument} must be a list of str, a str or None, got {type(value).__name__}")


class RenderWalker:
    """Derives class names from a CSS module class while rendering a component.

    Sub-classes are prefixed with the module class, e.g. with module class
    ``menu`` the sub-class ``item`` becomes ``menu-item``.
    """

    def __init__(self, module_class: str, sub_module_class: Optional[str] = None) -> None:
        self._module_class = module_class
        self._sub_module_class = sub_module_class

    @property
    def module_class(self) -> str:
        return self._module_class

    @property
    def sub_module_class(self) -> Optional[str]:
        return self._sub_module_class

    def set_module_class(self, module_class: str) -> "RenderWalker":
        self._module_class = module_class
        return self

    def set_sub_module_class(self, sub_module_class: Optional[str]) -> "RenderWalker":
        self._sub_module_class = sub_module_class
        return self

    def get_classes(self, sub_classes: ClassNames = None, additional_classes: ClassNames = None) -> List[str]:
        """Return the module, sub-module, prefixed sub-classes and additional classes."""
        classes = [self._module_class]
        if self._sub_module_class is not None:
            classes.append(self._sub_module_class)
        for sub_class in _as_list(sub_classes, "sub_classes"):
            classes.append(f"{self._module_class}-{sub_class}")
        classes.extend(_as_list(additional_classes, "additional_classes"))
        return classes


__all__ = ["RenderWalker"]
