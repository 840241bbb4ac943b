"""Default sorter: folders first, then files, each by case-insensitive name."""

from __future__ import annotations

from collections.abc import Sequence

from .types import FileNode, FolderNode, RenderNode


def _name_key(node: RenderNode) -> tuple[str, str]:
    return (node.name.lower(), node.name)


def sort_by_name(nodes: Sequence[RenderNode]) -> list[RenderNode]:
    """Return ``nodes`` ordered recursively; inputs are left untouched."""
    folders = sorted((node for node in nodes if isinstance(node, FolderNode)), key=_name_key)
    files = sorted((node for node in nodes if isinstance(node, FileNode)), key=_name_key)
    ordered: list[RenderNode] = [
        FolderNode(item=folder.item, children=tuple(sort_by_name(folder.children)), key_derived=folder.key_derived)
        for folder in folders
    ]
    ordered.extend(files)
    return ordered
