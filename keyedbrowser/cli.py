"""Command-line front door for keyedbrowser.

Loads a JSON item list, runs it through the browser engine, and prints the
visible rows. ``--move`` prints the collaborator calls a bulk move would make.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from .browser import FileBrowser, plan_moves
from .config import load_browser_options
from .tree_model import Item
from .tree_model.rendering import DEFAULT_THEME, PLAIN_THEME, SHOW_MORE_LABEL, empty_message, format_row

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def load_items(source: str) -> list[Item]:
    """Read a JSON list of item objects from a path or ``-`` (stdin)."""
    if source == "-":
        raw = sys.stdin.read()
    else:
        with open(source, encoding="utf-8") as handle:
            raw = handle.read()
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("item file must contain a JSON list")
    return [Item.from_mapping(entry) for entry in data]


def render_listing(browser: FileBrowser, color: bool = True) -> list[str]:
    """Return the listing lines for the browser's visible page."""
    theme = DEFAULT_THEME if color else PLAIN_THEME
    rows, has_more = browser.visible_page()
    if not rows:
        message = empty_message(browser.state.name_filter, browser.options.no_files_message)
        return [f"{theme.message}{message}{theme.reset}"]
    selection = set(browser.state.selection)
    lines = [
        format_row(row, browser.state.open_folders, selected=row.key in selection, theme=theme)
        for row in rows
    ]
    if has_more:
        lines.append(f"{theme.message}{SHOW_MORE_LABEL}{theme.reset}")
    return lines


def render_move_plan(targets: Sequence[str], destination: str) -> list[str]:
    plan = plan_moves(targets, destination)
    lines = [f"move {step.kind} {step.old_key} -> {step.new_key}" for step in plan.steps]
    if plan.aborted:
        lines.append(f"aborted: {plan.aborted_at} cannot move into {plan.destination}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyedbrowser",
        description="List a flat key/folder item list the way the browser shows it.",
    )
    parser.add_argument("items", help="JSON file with a list of items, or - for stdin")
    parser.add_argument("--filter", default="", help="name filter (all terms must match)")
    parser.add_argument("--open", action="append", default=[], metavar="KEY", help="open a folder (repeatable)")
    parser.add_argument("--select", action="append", default=[], metavar="KEY", help="highlight a key (repeatable)")
    parser.add_argument("--show-folders-on-filter", action="store_true", help="keep folder rows while filtering")
    parser.add_argument("--pages", type=_positive_int, default=1, help="result pages to show while filtering")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--move", nargs="+", metavar="KEY", help="plan a bulk move of these keys")
    parser.add_argument("--to", metavar="FOLDER", help="destination folder for --move")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable verbose logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.move and args.to is None:
        parser.error("--move requires --to")

    try:
        items = load_items(args.items)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        parser.error(f"cannot read items from {args.items}: {exc}")

    if args.move:
        known = {item.key for item in items}
        for key in args.move:
            if key not in known:
                logger.warning("move target %r is not in the item list", key)
        for line in render_move_plan(args.move, args.to):
            print(line)
        return 0

    options = load_browser_options()
    if args.show_folders_on_filter:
        options = replace(options, show_folders_on_filter=True)
    browser = FileBrowser(items, options=options)
    for key in args.open:
        browser.open_folder(key)
    if args.select:
        browser.set_selection(args.select)
    browser.update_filter(args.filter)
    for _ in range(args.pages - 1):
        browser.show_more_results()

    for line in render_listing(browser, color=not args.no_color and sys.stdout.isatty()):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
