"""Unique element IDs."""

from __future__ import annotations

import threading
from typing import Optional

from .settings import get_settings


class IdGenerator:
    """Hands out element IDs that are unique for the lifetime of the generator.

    The counter starts at 0 and is incremented before each ID is formed, so the
    first ID ends in ``1``. Without an explicit prefix the ``id_prefix`` setting
    is used.
    """

    def __init__(self, prefix: Optional[str] = None) -> None:
        self._prefix = prefix
        self._counter = 0
        self._lock = threading.Lock()

    @property
    def prefix(self) -> str:
        if self._prefix is not None:
            return self._prefix
        return get_settings().id_prefix

    def next_id(self) -> str:
        with self._lock:
            self._counter += 1
            value = self._counter
        return f"{self.prefix}{value}"

    def reset(self) -> None:
        """Restart the counter. Only meant for isolating tests."""
        with self._lock:
            self._counter = 0


_default_generator = IdGenerator()


def default_generator() -> IdGenerator:
    return _default_generator


def next_id() -> str:
    """Return a new ID from the process-wide generator."""
    return _default_generator.next_id()


__all__ = ["IdGenerator", "default_generator", "next_id"]
