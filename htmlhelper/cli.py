"""Command-line interface for htmlhelper."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from .errors import HtmlHelperError
from .escape import txt2html
from .io_utils import read_structure, warn, write_text
from .nested import from_struct, render_nested, write_nested
from .settings import configure, get_settings, load_settings
from .slug import txt2slug


def _apply_settings(args: argparse.Namespace) -> None:
    overrides = {}
    if args.settings:
        settings_path = Path(args.settings)
        try:
            overrides.update(load_settings(settings_path).model_dump())
        except ValueError as exc:
            raise SystemExit(f"Invalid settings in {settings_path}: {exc}") from exc
    if args.encoding:
        overrides["encoding"] = args.encoding
    if not overrides:
        return
    try:
        configure(**overrides)
    except ValidationError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc



def _handle_render(args: argparse.Namespace) -> None:
    _apply_settings(args)
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")

    struct = read_structure(input_path)
    if struct is None:
        warn(f"[render] {input_path} is empty; nothing to render")
    try:
        tree = from_struct(struct)
        if args.output:
            output_path = write_text(Path(args.output), render_nested(tree), encoding=get_settings().encoding)
            print(f"Rendered {input_path} into {output_path}")
        else:
            write_nested(tree, sys.stdout)
            sys.stdout.write("\n")
    except HtmlHelperError as exc:
        raise SystemExit(f"Invalid markup structure in {input_path}: {exc}") from exc


def _handle_slug(args: argparse.Namespace) -> None:
    for text in args.text:
        print(txt2slug(text))


def _handle_escape(args: argparse.Namespace) -> None:
    print(txt2html(args.text))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlhelper",
        description="Generate HTML code from markup trees and derive slugs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a markup tree to HTML.",
        description="Render a markup tree stored as JSON or YAML to HTML code.",
    )
    render_parser.add_argument(
        "--input",
        "--in",
        dest="input",
        required=True,
        help="Path to the JSON or YAML file with the markup tree.",
    )
    render_parser.add_argument(
        "--output",
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML code (default: standard output).",
    )
    render_parser.add_argument(
        "--encoding",
        default=None,
        help="Character encoding of the generated HTML code (default: UTF-8).",
    )
    render_parser.add_argument(
        "--settings",
        default=None,
        help="Path to a YAML file with settings.",
    )
    render_parser.set_defaults(func=_handle_render)

    slug_parser = subparsers.add_parser(
        "slug",
        help="Print the URL slug of each argument.",
        description="Transliterate text into lowercase, hyphen-delimited slugs.",
    )
    slug_parser.add_argument("text", nargs="+", help="Text to convert.")
    slug_parser.set_defaults(func=_handle_slug)

    escape_parser = subparsers.add_parser(
        "escape",
        help="Print text with HTML special characters escaped.",
        description="Escape & < > \" and ' as HTML entities.",
    )
    escape_parser.add_argument("text", help="Text to escape.")
    escape_parser.set_defaults(func=_handle_escape)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
