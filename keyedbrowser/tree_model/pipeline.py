"""Filter, group, sort, and flatten a flat item list into renderable rows.

``build_tree`` is recomputed from the raw item list on every change; nothing
derived here is cached across calls.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Sequence
from dataclasses import dataclass, field

from .filtering import filter_items_by_name, name_filter_terms
from .grouping import group_by_folder
from .sorting import sort_by_name
from .types import FileNode, FolderNode, Item, RenderNode, TreeBuild, VisibleRow

Grouper = Callable[[list[Item], str], list[RenderNode]]
Sorter = Callable[[Sequence[RenderNode]], list[RenderNode]]

RESULTS_PER_PAGE = 20


@dataclass(frozen=True)
class TreeOptions:
    """Inputs that shape one pipeline run besides the item list."""

    name_filter: str = ""
    show_folders_on_filter: bool = False
    nest_children: bool = False
    open_folders: frozenset[str] = field(default_factory=frozenset)
    group: Grouper | None = group_by_folder
    sort: Sorter | None = sort_by_name

    @property
    def filter_active(self) -> bool:
        return bool(name_filter_terms(self.name_filter))


def group_and_sort(items: list[Item], options: TreeOptions) -> list[RenderNode]:
    """Apply filter, grouping (or the files-only fallback), and sorting."""
    filtered = filter_items_by_name(items, options.name_filter)
    if options.group is not None:
        nodes = list(options.group(filtered, ""))
    else:
        nodes = [FileNode(item) for item in filtered if not item.is_folder]
    if options.sort is not None:
        nodes = list(options.sort(nodes))
    return nodes


def flatten_tree(tree: Iterable[RenderNode], options: TreeOptions) -> list[VisibleRow]:
    """Depth-first walk producing rows used for range selection and paging.

    Folders are listed unless a filter hides them; a filter always descends
    into folders, otherwise only open folders are descended when children are
    not nested by the presentation layer.
    """
    filter_active = options.filter_active
    rows: list[VisibleRow] = []

    def walk(nodes: Iterable[RenderNode], depth: int) -> None:
        row_depth = 0 if filter_active else depth
        for node in nodes:
            if isinstance(node, FileNode):
                rows.append(VisibleRow(node, row_depth))
                continue
            if options.show_folders_on_filter or not filter_active:
                rows.append(VisibleRow(node, row_depth))
            if filter_active or (node.key in options.open_folders and not options.nest_children):
                walk(node.children, depth + 1)

    walk(tree, 0)
    return rows


def build_tree(items: Iterable[Item], options: TreeOptions | None = None) -> TreeBuild:
    """Run the full pipeline and return the tree plus flattened rows."""
    options = options or TreeOptions()
    tree = group_and_sort(list(items), options)
    return TreeBuild(tree=tuple(tree), flattened=tuple(flatten_tree(tree, options)))


def page_rows(
    rows: Sequence[VisibleRow],
    shown: int,
    filter_active: bool,
) -> tuple[list[VisibleRow], bool]:
    """Return rows to display and whether more search results remain."""
    if not filter_active or len(rows) <= shown:
        return list(rows), False
    return list(rows[: max(0, shown)]), True


def find_item(items: Iterable[Item], key: str) -> Item:
    """Return the item for ``key``, or an empty placeholder for implied folders."""
    for item in items:
        if item.key == key:
            return item
    return Item(key=key)


def selected_nodes(tree: Iterable[RenderNode], selection: Collection[str]) -> list[RenderNode]:
    """Collect nodes whose key is selected, depth first, ignoring visibility."""
    found: list[RenderNode] = []

    def walk(nodes: Iterable[RenderNode]) -> None:
        for node in nodes:
            if node.key in selection:
                found.append(node)
            if isinstance(node, FolderNode):
                walk(node.children)

    walk(tree)
    return found
