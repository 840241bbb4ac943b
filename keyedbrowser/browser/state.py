"""Browser-owned interaction state and action names."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..tree_model import RESULTS_PER_PAGE

ACTION_RENAME = "rename"
ACTION_DELETE = "delete"
ACTION_MOVE = "move"
ACTION_CREATE_FOLDER = "createFolder"
ACTIONS = (ACTION_RENAME, ACTION_DELETE, ACTION_MOVE, ACTION_CREATE_FOLDER)


@dataclass
class BrowserState:
    """Mutable state owned by one ``FileBrowser``.

    ``active_action`` is ``None`` when idle. ``anchor`` is the key range
    selection extends from. Only ``open_folders`` is persisted.
    """

    open_folders: set[str] = field(default_factory=set)
    selection: list[str] = field(default_factory=list)
    anchor: str | None = None
    active_action: str | None = None
    action_targets: list[str] = field(default_factory=list)
    name_filter: str = ""
    search_results_shown: int = RESULTS_PER_PAGE

    def is_renaming(self, key: str) -> bool:
        return self.active_action == ACTION_RENAME and key in self.action_targets

    def is_deleting(self, key: str) -> bool:
        return self.active_action == ACTION_DELETE and key in self.action_targets
