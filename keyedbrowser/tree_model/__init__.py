"""Flat-key tree model: key helpers, grouping, sorting, filtering, flattening.

Turns the externally owned flat item list into renderable folder/file nodes
and the flattened visible sequence used for selection and paging.
"""

from __future__ import annotations

from .filtering import filter_items_by_name, key_matches_terms, name_filter_terms
from .grouping import group_by_folder
from .keys import (
    DRAFT_SEGMENT,
    SEPARATOR,
    basename,
    draft_key_for,
    folder_name,
    is_ancestor,
    is_descendant,
    is_direct_child,
    is_draft_key,
    is_folder,
    parent,
    split_by_kind,
)
from .pipeline import (
    RESULTS_PER_PAGE,
    TreeOptions,
    build_tree,
    find_item,
    flatten_tree,
    group_and_sort,
    page_rows,
    selected_nodes,
)
from .sorting import sort_by_name
from .types import FileNode, FolderNode, Item, RenderNode, TreeBuild, VisibleRow

__all__ = [
    "Item",
    "FileNode",
    "FolderNode",
    "RenderNode",
    "VisibleRow",
    "TreeBuild",
    "TreeOptions",
    "SEPARATOR",
    "DRAFT_SEGMENT",
    "RESULTS_PER_PAGE",
    "is_folder",
    "parent",
    "basename",
    "folder_name",
    "split_by_kind",
    "is_ancestor",
    "is_descendant",
    "is_direct_child",
    "is_draft_key",
    "draft_key_for",
    "name_filter_terms",
    "key_matches_terms",
    "filter_items_by_name",
    "group_by_folder",
    "sort_by_name",
    "group_and_sort",
    "flatten_tree",
    "build_tree",
    "page_rows",
    "find_item",
    "selected_nodes",
]
