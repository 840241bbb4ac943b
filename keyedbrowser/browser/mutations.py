"""Local state transitions around create/rename/move/delete/download calls.

Each entry point resets the interaction state first and then hands the keys to
the matching external collaborator. Entry points whose collaborator is missing
return without touching state; the presentation layer never offers them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from ..tree_model import Item, is_ancestor, split_by_kind
from .actions import ActionStateMachine
from .moves import MovePlan, maybe_await, plan_moves, run_move_plan
from .options import BrowserCallbacks
from .state import BrowserState

logger = logging.getLogger(__name__)


def _rekey(key: str, old_prefix: str, new_prefix: str) -> str:
    if key.startswith(old_prefix):
        return new_prefix + key[len(old_prefix):]
    return key


def _without_subtree(open_folders: set[str], key: str) -> set[str]:
    return {folder for folder in open_folders if folder != key and not is_ancestor(key, folder)}


class MutationCoordinator:
    """Apply local state changes and delegate mutations to collaborators."""

    def __init__(
        self,
        *,
        state: BrowserState,
        commit: Callable[..., None],
        callbacks: BrowserCallbacks,
        actions: ActionStateMachine,
        find_item: Callable[[str], Item],
        open_folder: Callable[[str], None],
    ) -> None:
        """Create a coordinator bound to one browser's state.

        Args:
            state: Browser state read for selection/open folders.
            commit: Applies keyword state changes atomically.
            callbacks: External collaborators; missing ones disable actions.
            actions: Action state machine ended after bulk moves.
            find_item: Resolves a key to an item for folder notifications.
            open_folder: Opens a folder and notifies observers.
        """
        self._state = state
        self._commit = commit
        self._callbacks = callbacks
        self._actions = actions
        self._find_item = find_item
        self._open_folder = open_folder

    def _migrate_open_folders(self, old_key: str, new_key: str) -> set[str] | None:
        """Return open folders with ``old_key``'s subtree rekeyed, or ``None``."""
        open_folders = self._state.open_folders
        moved = {folder for folder in open_folders if folder == old_key or is_ancestor(old_key, folder)}
        if not moved:
            return None
        return (open_folders - moved) | {_rekey(folder, old_key, new_key) for folder in moved}

    def create_files(self, files: Sequence[Any], target_prefix: str | None = None) -> None:
        callback = self._callbacks.create_files
        if callback is None:
            return
        changes: dict[str, object] = {"selection": [], "anchor": None}
        if target_prefix:
            changes["open_folders"] = self._state.open_folders | {target_prefix}
        self._commit(**changes)
        callback(files, target_prefix)

    def create_folder(self, key: str) -> None:
        callback = self._callbacks.create_folder
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[], selection=[key], anchor=key)
        callback(key)

    async def move_file(self, old_key: str, new_key: str) -> None:
        callback = self._callbacks.move_file
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[], selection=[new_key], anchor=new_key)
        await maybe_await(callback(old_key, new_key))

    async def move_folder(self, old_key: str, new_key: str) -> None:
        callback = self._callbacks.move_folder
        if callback is None:
            return
        changes: dict[str, object] = {
            "active_action": None,
            "action_targets": [],
            "selection": [new_key],
            "anchor": new_key,
        }
        open_folders = self._migrate_open_folders(old_key, new_key)
        if open_folders is not None:
            changes["open_folders"] = open_folders
        self._commit(**changes)
        await maybe_await(callback(old_key, new_key))

    def rename_file(self, old_key: str, new_key: str) -> None:
        callback = self._callbacks.rename_file
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[], selection=[new_key], anchor=new_key)
        callback(old_key, new_key)

    def rename_folder(self, old_key: str, new_key: str) -> None:
        callback = self._callbacks.rename_folder
        if callback is None:
            return
        state = self._state
        changes: dict[str, object] = {
            "active_action": None,
            "action_targets": [],
            "selection": [_rekey(key, old_key, new_key) for key in state.selection],
        }
        if state.anchor is not None:
            changes["anchor"] = _rekey(state.anchor, old_key, new_key)
        open_folders = self._migrate_open_folders(old_key, new_key)
        if open_folders is not None:
            changes["open_folders"] = open_folders
        self._commit(**changes)
        if open_folders is not None and self._callbacks.on_folder_open is not None:
            self._callbacks.on_folder_open(self._find_item(new_key))
        callback(old_key, new_key)

    def delete_file(self, keys: list[str]) -> None:
        callback = self._callbacks.delete_file
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[], selection=[], anchor=None)
        callback(list(keys))

    def delete_folder(self, key: str) -> None:
        callback = self._callbacks.delete_folder
        if callback is None:
            return
        changes: dict[str, object] = {
            "active_action": None,
            "action_targets": [],
            "selection": [],
            "anchor": None,
        }
        was_open = key in self._state.open_folders
        if was_open:
            changes["open_folders"] = _without_subtree(self._state.open_folders, key)
        self._commit(**changes)
        if was_open and self._callbacks.on_folder_close is not None:
            self._callbacks.on_folder_close(self._find_item(key))
        callback(key)

    def download_file(self, keys: list[str]) -> None:
        callback = self._callbacks.download_file
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[])
        callback(list(keys))

    def download_folder(self, keys: list[str]) -> None:
        callback = self._callbacks.download_folder
        if callback is None:
            return
        self._commit(active_action=None, action_targets=[])
        callback(list(keys))

    def confirm_delete(self) -> None:
        """Delete every selected key: files in one call, folders one by one."""
        folders, files = split_by_kind(self._state.selection)
        if files:
            self.delete_file(files)
        for folder in folders:
            self.delete_folder(folder)

    def download(self, selection_is_folder: bool) -> None:
        """Dispatch download of the selection to the file or folder flavor."""
        keys = list(self._state.selection)
        if selection_is_folder:
            self.download_folder(keys)
            return
        self.download_file(keys)

    async def move(self, targets: Iterable[str], destination: str) -> MovePlan:
        """Bulk-move ``targets`` into ``destination`` and end the action."""
        plan = plan_moves(targets, destination)
        try:
            if plan.destination:
                self._open_folder(plan.destination)
            await run_move_plan(
                plan,
                self.move_file if self._callbacks.move_file is not None else None,
                self.move_folder if self._callbacks.move_folder is not None else None,
            )
        finally:
            self._actions.end()
        return plan

    async def select_move_target(self, destination: str) -> MovePlan:
        """Move the current action targets into the chosen destination."""
        return await self.move(list(self._state.action_targets), destination)
