"""Default grouper: nest a flat item list into folders by key prefix."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .keys import SEPARATOR
from .types import FileNode, FolderNode, Item, RenderNode


@dataclass
class _Level:
    item: Item | None = None
    folders: dict[str, "_Level"] = field(default_factory=dict)
    files: list[Item] = field(default_factory=list)


def group_by_folder(items: Iterable[Item], root: str = "") -> list[RenderNode]:
    """Group ``items`` below ``root`` into folder nodes with nested children.

    Folders only implied by deeper keys are synthesized and flagged
    ``key_derived``. Items outside ``root`` are ignored.
    """
    top = _Level()
    for item in items:
        if not item.key.startswith(root):
            continue
        segments = item.key[len(root):].split(SEPARATOR)
        level = top
        last_idx = len(segments) - 1
        for idx, segment in enumerate(segments):
            if idx == last_idx and item.is_folder:
                level.item = item
            if not segment:
                continue
            if idx == last_idx:
                level.files.append(item)
            else:
                level = level.folders.setdefault(segment, _Level())

    def nodes_for(level: _Level, prefix: str) -> list[RenderNode]:
        nodes: list[RenderNode] = []
        for name, child in level.folders.items():
            child_prefix = f"{prefix}{name}{SEPARATOR}"
            nodes.append(
                FolderNode(
                    item=child.item or Item(key=child_prefix),
                    children=tuple(nodes_for(child, child_prefix)),
                    key_derived=child.item is None,
                )
            )
        nodes.extend(FileNode(item) for item in level.files)
        return nodes

    return nodes_for(top, root)
