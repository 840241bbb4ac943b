"""Item and render-node datatypes shared by the tree pipeline and browser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .keys import basename, is_folder


@dataclass(frozen=True)
class Item:
    """One raw entry of the externally owned flat item list."""

    key: str
    modified: Any = None
    size: int = 0
    draft: bool = False

    @property
    def is_folder(self) -> bool:
        return is_folder(self.key)

    @property
    def name(self) -> str:
        return basename(self.key)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Item:
        """Build an item from a JSON-style mapping; ``key`` is required."""
        key = data["key"]
        if not isinstance(key, str):
            raise TypeError(f"item key must be a string, got {type(key).__name__}")
        size = data.get("size") or 0
        return cls(
            key=key,
            modified=data.get("modified"),
            size=int(size),
            draft=bool(data.get("draft", False)),
        )


@dataclass(frozen=True)
class FileNode:
    """Leaf render node wrapping one file item."""

    item: Item

    @property
    def key(self) -> str:
        return self.item.key

    @property
    def name(self) -> str:
        return self.item.name


@dataclass(frozen=True)
class FolderNode:
    """Folder render node with its ordered direct children.

    ``key_derived`` marks folders synthesized from deeper keys when the item
    list holds no explicit entry for them.
    """

    item: Item
    children: tuple["RenderNode", ...] = ()
    key_derived: bool = False

    @property
    def key(self) -> str:
        return self.item.key

    @property
    def name(self) -> str:
        return self.item.name


RenderNode = FolderNode | FileNode


@dataclass(frozen=True)
class VisibleRow:
    """One row of the flattened, visibility-filtered sequence."""

    node: RenderNode
    depth: int

    @property
    def key(self) -> str:
        return self.node.key

    @property
    def is_folder(self) -> bool:
        return isinstance(self.node, FolderNode)


@dataclass(frozen=True)
class TreeBuild:
    """Pipeline output: the renderable tree plus its flattened rows."""

    tree: tuple[RenderNode, ...]
    flattened: tuple[VisibleRow, ...]

    @property
    def visible_keys(self) -> list[str]:
        return [row.key for row in self.flattened]


__all__ = [
    "Item",
    "FileNode",
    "FolderNode",
    "RenderNode",
    "VisibleRow",
    "TreeBuild",
]
