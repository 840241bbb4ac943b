"""Mutually exclusive action modes and the create-folder draft row."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..tree_model import Item, draft_key_for, is_draft_key, is_folder, parent
from .state import ACTION_CREATE_FOLDER, ACTION_DELETE, ACTION_MOVE, ACTION_RENAME, ACTIONS, BrowserState

logger = logging.getLogger(__name__)


class ActionStateMachine:
    """Track the single active action and the keys it applies to."""

    def __init__(self, *, state: BrowserState, commit: Callable[..., None]) -> None:
        self._state = state
        self._commit = commit

    @property
    def active_action(self) -> str | None:
        return self._state.active_action

    @property
    def targets(self) -> list[str]:
        return list(self._state.action_targets)

    def begin(self, action: str | None, targets: Iterable[str] | None = None) -> None:
        """Enter ``action`` with ``targets``, preempting any previous action."""
        if action is not None and action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}")
        logger.debug("begin action %s targets=%r", action, targets)
        self._commit(active_action=action, action_targets=list(targets or []))

    def end(self) -> None:
        """Return to idle; drop a selection made only of draft placeholders."""
        changes: dict[str, object] = {"active_action": None, "action_targets": []}
        selection = self._state.selection
        if selection and all(is_draft_key(key) for key in selection):
            changes["selection"] = []
            changes["anchor"] = None
        self._commit(**changes)

    def begin_rename(self) -> None:
        self.begin(ACTION_RENAME, self._state.selection)

    def begin_delete(self) -> None:
        self.begin(ACTION_DELETE, self._state.selection)

    def begin_move(self) -> None:
        self.begin(ACTION_MOVE, self._state.selection)

    def begin_create_folder(self) -> str | None:
        """Start naming a new folder under the selected folder.

        Returns the draft key, or ``None`` when a create is already underway.
        """
        state = self._state
        if state.active_action == ACTION_CREATE_FOLDER:
            return None
        base = ""
        if state.selection:
            first = state.selection[0]
            base = first if is_folder(first) else parent(first)
        draft_key = draft_key_for(base)
        changes: dict[str, object] = {
            "active_action": ACTION_CREATE_FOLDER,
            "action_targets": [draft_key],
            "selection": [draft_key],
            "anchor": None,
        }
        if base:
            changes["open_folders"] = state.open_folders | {base}
        logger.debug("begin create folder at %r", draft_key)
        self._commit(**changes)
        return draft_key

    def working_items(self, items: Iterable[Item]) -> list[Item]:
        """Return ``items`` plus the draft row while a folder is being created."""
        working = list(items)
        state = self._state
        if state.active_action == ACTION_CREATE_FOLDER and state.action_targets:
            draft_key = state.action_targets[0]
            if not any(item.key == draft_key for item in working):
                working.append(Item(key=draft_key, size=0, draft=True))
        return working
