"""Browser configuration, collaborator callbacks, and derived capabilities."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..tree_model import RESULTS_PER_PAGE, Item, TreeOptions
from ..tree_model.grouping import group_by_folder
from ..tree_model.pipeline import Grouper, Sorter
from ..tree_model.sorting import sort_by_name

RENDER_STYLES = ("table", "list")

MoveCallback = Callable[[str, str], Awaitable[Any] | None]


@dataclass(frozen=True)
class BrowserOptions:
    """Static browser configuration."""

    show_folders_on_filter: bool = False
    nest_children: bool = False
    multiple_selection: bool = True
    can_filter: bool = True
    render_style: str = "table"
    no_files_message: str = "No files."
    results_per_page: int = RESULTS_PER_PAGE
    group: Grouper | None = group_by_folder
    sort: Sorter | None = sort_by_name
    storage_key: str | None = None

    def __post_init__(self) -> None:
        if self.render_style not in RENDER_STYLES:
            raise ValueError(f"render_style must be one of {RENDER_STYLES}, got {self.render_style!r}")
        if self.results_per_page <= 0:
            raise ValueError("results_per_page must be >= 1")

    def tree_options(self, name_filter: str, open_folders: set[str]) -> TreeOptions:
        return TreeOptions(
            name_filter=name_filter,
            show_folders_on_filter=self.show_folders_on_filter,
            nest_children=self.nest_children,
            open_folders=frozenset(open_folders),
            group=self.group,
            sort=self.sort,
        )


@dataclass(frozen=True)
class BrowserCallbacks:
    """Optional external collaborators; a missing one disables its action."""

    create_files: Callable[[Sequence[Any], str | None], None] | None = None
    create_folder: Callable[[str], None] | None = None
    move_file: MoveCallback | None = None
    move_folder: MoveCallback | None = None
    rename_file: Callable[[str, str], None] | None = None
    rename_folder: Callable[[str, str], None] | None = None
    delete_file: Callable[[list[str]], None] | None = None
    delete_folder: Callable[[str], None] | None = None
    download_file: Callable[[list[str]], None] | None = None
    download_folder: Callable[[list[str]], None] | None = None
    on_select: Callable[[list[str]], None] | None = None
    on_folder_open: Callable[[Item], None] | None = None
    on_folder_close: Callable[[Item], None] | None = None
    on_scrolled_to_bottom: Callable[[Any], None] | None = None


@dataclass(frozen=True)
class Capabilities:
    """Which mutating actions the presentation layer may offer."""

    can_create_files: bool = False
    can_create_folder: bool = False
    can_rename_file: bool = False
    can_rename_folder: bool = False
    can_move_file: bool = False
    can_move_folder: bool = False
    can_delete_file: bool = False
    can_delete_folder: bool = False
    can_download_file: bool = False
    can_download_folder: bool = False

    @property
    def can_move(self) -> bool:
        return self.can_move_file or self.can_move_folder

    @classmethod
    def from_callbacks(cls, callbacks: BrowserCallbacks) -> Capabilities:
        return cls(
            can_create_files=callbacks.create_files is not None,
            can_create_folder=callbacks.create_folder is not None,
            can_rename_file=callbacks.rename_file is not None,
            can_rename_folder=callbacks.rename_folder is not None,
            can_move_file=callbacks.move_file is not None,
            can_move_folder=callbacks.move_folder is not None,
            can_delete_file=callbacks.delete_file is not None,
            can_delete_folder=callbacks.delete_folder is not None,
            can_download_file=callbacks.download_file is not None,
            can_download_folder=callbacks.download_folder is not None,
        )
