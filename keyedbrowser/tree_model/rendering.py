"""Formatting helpers for listing visible rows as terminal text."""

from __future__ import annotations

from dataclasses import dataclass

from .types import FolderNode, VisibleRow

SIZE_LABEL_MIN_BYTES = 10 * 1024


@dataclass(frozen=True)
class RowTheme:
    """ANSI palette for listing rows."""

    reset: str = "\033[0m"
    reverse: str = "\033[7m"
    marker: str = "\033[38;5;245m"
    folder: str = "\033[1;34m"
    file: str = "\033[38;5;252m"
    draft: str = "\033[3;38;5;179m"
    size: str = "\033[38;5;109m"
    message: str = "\033[38;5;245m"


DEFAULT_THEME = RowTheme()
PLAIN_THEME = RowTheme(reset="", reverse="", marker="", folder="", file="", draft="", size="", message="")


def size_label(size: int) -> str:
    """Return a ``[N KB]`` label for large files, else empty."""
    if size < SIZE_LABEL_MIN_BYTES:
        return ""
    return f" [{size // 1024} KB]"


def format_row(
    row: VisibleRow,
    open_folders: frozenset[str] | set[str],
    *,
    selected: bool = False,
    theme: RowTheme | None = None,
) -> str:
    """Render one visible row with indentation, marker, and size label."""
    active = theme or DEFAULT_THEME
    indent = "  " * row.depth
    node = row.node
    name_color = active.draft if node.item.draft else (active.folder if row.is_folder else active.file)
    prefix = active.reverse if selected else ""
    if isinstance(node, FolderNode):
        marker = "▾ " if node.key in open_folders else "▸ "
        return f"{indent}{active.marker}{marker}{active.reset}{prefix}{name_color}{node.name}/{active.reset}"

    label = size_label(node.item.size)
    size_text = f"{active.size}{label}{active.reset}" if label else ""
    return f"{indent}  {prefix}{name_color}{node.name}{active.reset}{size_text}"


def empty_message(name_filter: str, no_files_message: str) -> str:
    """Return the placeholder line shown when no rows are visible."""
    if name_filter:
        return f'No files matching "{name_filter}".'
    return no_files_message


SHOW_MORE_LABEL = "Show more results"
