"""Command line interface for rendering fragments."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bootstencil.exceptions import BootstencilError
from bootstencil.modal import Modal
from bootstencil.navbar import Navbar
from bootstencil.outline import parse_outline
from bootstencil.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootstencil", description="Render Bootstrap fragments from outline text."
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING...)")
    parser.add_argument(
        "--lenient-indentation",
        action="store_true",
        help="Round uneven dedents down instead of rejecting them",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    menu = commands.add_parser("menu", help="Print the parsed menu tree as JSON")
    menu.add_argument("file", help="Outline file, '-' for stdin")

    navbar = commands.add_parser("navbar", help="Render a navbar from an outline")
    navbar.add_argument("file", help="Outline file, '-' for stdin")
    navbar.add_argument("--class", dest="css_class", help="Extra classes of the nav element")
    navbar.add_argument("--container", action="store_true", help="Keep the positioning container")
    navbar.add_argument("--pretty", action="store_true", help="Indent the output")

    modal = commands.add_parser("modal", help="Render a modal dialog")
    modal.add_argument("--title", help="Dialog title")
    modal.add_argument("--text", help="Dialog body text")
    modal.add_argument("--id", help="Dialog identifier")
    modal.add_argument("--class", dest="css_class", help="Extra classes of the dialog")
    modal.add_argument("--button", action="append", default=[], help="Footer button label (repeatable)")
    modal.add_argument("--pretty", action="store_true", help="Indent the output")
    return parser


def read_outline(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    path = Path(file)
    if not path.is_file():
        raise FileNotFoundError(f"Outline file not found: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level)
    # None defers to BOOTSTENCIL_STRICT_INDENTATION.
    strict = False if args.lenient_indentation else None

    try:
        if args.command == "menu":
            menu = parse_outline(read_outline(args.file), strict_indentation=strict)
            output = json.dumps(menu.to_dict(), indent=2)
        elif args.command == "navbar":
            menu = parse_outline(read_outline(args.file), strict_indentation=strict)
            navbar = Navbar(menu=menu, css_class=args.css_class, in_container=args.container)
            output = navbar.render_html(pretty=args.pretty)
        else:
            modal = Modal(title=args.title, text=args.text, id=args.id, css_class=args.css_class)
            for label in args.button:
                modal.add_button(label, dismiss=True)
            output = modal.render_html(pretty=args.pretty)
    except (BootstencilError, FileNotFoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
