"""Pure helpers over flat, slash-delimited item keys.

A key ending in ``SEPARATOR`` names a folder, any other key names a file.
Hierarchy is never stored; it is derived from key prefixes on demand.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = "/"
DRAFT_SEGMENT = "__new__"


def is_folder(key: str) -> bool:
    """Return whether ``key`` names a folder (trailing separator)."""
    return key.endswith(SEPARATOR)


def parent(key: str) -> str:
    """Return the containing folder key, or ``""`` for root-level keys."""
    trimmed = key[:-1] if is_folder(key) else key
    idx = trimmed.rfind(SEPARATOR)
    if idx < 0:
        return ""
    return trimmed[: idx + 1]


def basename(key: str) -> str:
    """Return the last non-empty segment (folder names without separator)."""
    trimmed = key[:-1] if is_folder(key) else key
    return trimmed.rsplit(SEPARATOR, 1)[-1]


def folder_name(key: str) -> str:
    """Return the name of the folder ``key`` belongs to.

    For a folder key that is its own name; for a file key it is the name of
    the containing folder, or ``""`` at root.
    """
    folder = key if is_folder(key) else parent(key)
    return basename(folder) if folder else ""


def split_by_kind(keys: Iterable[str]) -> tuple[list[str], list[str]]:
    """Partition keys into ``(folders, files)`` keeping relative order."""
    folders: list[str] = []
    files: list[str] = []
    for key in keys:
        (folders if is_folder(key) else files).append(key)
    return folders, files


def is_ancestor(ancestor: str, key: str) -> bool:
    """Return whether folder ``ancestor`` strictly contains ``key``."""
    return is_folder(ancestor) and key != ancestor and key.startswith(ancestor)


def is_descendant(key: str, ancestor: str) -> bool:
    return is_ancestor(ancestor, key)


def is_direct_child(key: str, folder: str) -> bool:
    """Return whether ``key`` sits directly inside ``folder`` (``""`` is root)."""
    if folder and not is_ancestor(folder, key):
        return False
    rest = key[len(folder):]
    if not rest:
        return False
    return SEPARATOR not in rest.rstrip(SEPARATOR)


def is_draft_key(key: str) -> bool:
    """Return whether ``key`` is an in-progress create placeholder."""
    return basename(key) == DRAFT_SEGMENT


def draft_key_for(base: str) -> str:
    """Return the placeholder key for creating a folder under ``base``."""
    if base and not is_folder(base):
        base += SEPARATOR
    if is_draft_key(base):
        return base
    return f"{base}{DRAFT_SEGMENT}{SEPARATOR}"
