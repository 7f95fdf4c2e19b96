"""Utility helpers for reading markup trees and reporting problems."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def read_structure(path: Path) -> Any:
    """Load a markup tree from a JSON or YAML file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def write_text(path: Path, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # Characters the target encoding lacks were already written as character references.
    path.write_text(content, encoding=encoding, errors="xmlcharrefreplace")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_structure", "warn", "write_text"]
