"""Single owner of browser state wiring pipeline, selection, and actions.

``FileBrowser`` holds the raw item list handed in by the external owner and
rebuilds the tree from it on demand. All state changes funnel through
``_commit`` so selection observers and persistence see one consistent update.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any

from ..tree_model import (
    FolderNode,
    Item,
    RenderNode,
    TreeBuild,
    VisibleRow,
    build_tree,
    find_item,
    name_filter_terms,
    page_rows,
    selected_nodes,
)
from .actions import ActionStateMachine
from .drag_drop import MoveSelectionOnDrop
from .events import ClickEvents
from .moves import MovePlan
from .mutations import MutationCoordinator
from .options import BrowserCallbacks, BrowserOptions, Capabilities
from .persistence import parse_open_folders, serialize_open_folders
from .selection import SelectionEngine
from .state import ACTION_RENAME, BrowserState

logger = logging.getLogger(__name__)

_STATE_FIELDS = frozenset(field.name for field in fields(BrowserState))


@dataclass(frozen=True)
class ItemStatus:
    """Per-row flags the presentation layer renders."""

    is_selected: bool
    is_open: bool
    is_renaming: bool
    is_deleting: bool
    is_draft: bool


class FileBrowser:
    """Interactive state engine for a keyed file/folder browser."""

    def __init__(
        self,
        items: Iterable[Item] = (),
        *,
        options: BrowserOptions | None = None,
        callbacks: BrowserCallbacks | None = None,
        store: Any = None,
        drag_drop: MoveSelectionOnDrop | None = None,
    ) -> None:
        """Create a browser over ``items``.

        Args:
            items: Current flat item list owned by the caller.
            options: Static configuration; defaults to ``BrowserOptions()``.
            callbacks: External collaborators enabling mutating actions.
            store: Persistence port used when ``options.storage_key`` is set.
            drag_drop: Optional strategy handling drops onto folders.
        """
        self.options = options or BrowserOptions()
        self.callbacks = callbacks or BrowserCallbacks()
        self.capabilities = Capabilities.from_callbacks(self.callbacks)
        self.state = BrowserState(search_results_shown=self.options.results_per_page)
        self._items: list[Item] = list(items)
        self._store = store
        self._drag_drop = drag_drop
        self._unsubscribe_click = None

        self.actions = ActionStateMachine(state=self.state, commit=self._commit)
        self.selector = SelectionEngine(
            state=self.state,
            commit=self._commit,
            visible_keys=lambda: self.build().visible_keys,
            multiple_selection=self.options.multiple_selection,
        )
        self.mutations = MutationCoordinator(
            state=self.state,
            commit=self._commit,
            callbacks=self.callbacks,
            actions=self.actions,
            find_item=self.find_item,
            open_folder=self.open_folder,
        )
        self.restore_state()

    # state plumbing

    def _commit(self, **changes: Any) -> None:
        """Apply ``changes`` to state, then notify selection and persist."""
        unknown = set(changes) - _STATE_FIELDS
        if unknown:
            raise AttributeError(f"unknown browser state fields: {sorted(unknown)}")
        state = self.state
        previous_selection = list(state.selection)
        for name, value in changes.items():
            setattr(state, name, value)
        if state.selection != previous_selection and self.callbacks.on_select is not None:
            self.callbacks.on_select(list(state.selection))
        self._persist()

    def _persist(self) -> None:
        storage_key = self.options.storage_key
        if storage_key is None or self._store is None:
            return
        self._store.save(storage_key, serialize_open_folders(self.state.open_folders))

    def restore_state(self) -> bool:
        """Load persisted open folders; returns whether anything was restored."""
        storage_key = self.options.storage_key
        if storage_key is None or self._store is None:
            return False
        open_folders = parse_open_folders(self._store.load(storage_key))
        if open_folders is None:
            return False
        self._commit(open_folders=open_folders)
        return True

    def activate(self, events: ClickEvents | None = None) -> None:
        """Start listening for outside clicks."""
        if self.options.render_style == "table" and self.options.nest_children:
            logger.warning("invalid settings: cannot nest table children in file browser")
        if events is not None and self._unsubscribe_click is None:
            self._unsubscribe_click = events.subscribe(self.handle_global_click)

    def deactivate(self) -> None:
        if self._unsubscribe_click is not None:
            self._unsubscribe_click()
            self._unsubscribe_click = None

    # items and tree

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def set_items(self, items: Iterable[Item]) -> None:
        """Replace the raw item list after an external refresh."""
        self._items = list(items)

    def find_item(self, key: str) -> Item:
        return find_item(self._items, key)

    def build(self) -> TreeBuild:
        """Run the pipeline over the items plus any draft placeholder."""
        working = self.actions.working_items(self._items)
        return build_tree(working, self.options.tree_options(self.state.name_filter, self.state.open_folders))

    def visible_page(self) -> tuple[list[VisibleRow], bool]:
        """Return rows to show and whether "show more results" applies."""
        build = self.build()
        filter_active = bool(name_filter_terms(self.state.name_filter))
        return page_rows(build.flattened, self.state.search_results_shown, filter_active)

    def selected_items(self) -> list[RenderNode]:
        return selected_nodes(self.build().tree, set(self.state.selection))

    def selection_is_folder(self) -> bool:
        selected = self.selected_items()
        return len(selected) == 1 and isinstance(selected[0], FolderNode)

    def item_status(self, item: Item) -> ItemStatus:
        state = self.state
        return ItemStatus(
            is_selected=item.key in state.selection,
            is_open=item.key in state.open_folders or bool(name_filter_terms(state.name_filter)),
            is_renaming=state.is_renaming(item.key),
            is_deleting=state.is_deleting(item.key),
            is_draft=item.draft,
        )

    # filter and paging

    def update_filter(self, value: str) -> None:
        if not self.options.can_filter:
            return
        self._commit(name_filter=value, search_results_shown=self.options.results_per_page)

    def show_more_results(self) -> None:
        self._commit(search_results_shown=self.state.search_results_shown + self.options.results_per_page)

    def handle_scroll(self, scroll_height: int, scroll_top: int, client_height: int, event: Any = None) -> bool:
        """Report reaching the scroll end; returns whether the hook fired."""
        callback = self.callbacks.on_scrolled_to_bottom
        if callback is None or scroll_height - scroll_top != client_height:
            return False
        callback(event)
        return True

    # folders

    def toggle_folder(self, key: str) -> None:
        was_open = key in self.state.open_folders
        if was_open:
            self._commit(open_folders=self.state.open_folders - {key})
        else:
            self._commit(open_folders=self.state.open_folders | {key})
        callback = self.callbacks.on_folder_close if was_open else self.callbacks.on_folder_open
        if callback is not None:
            callback(self.find_item(key))

    def open_folder(self, key: str) -> None:
        self._commit(open_folders=self.state.open_folders | {key})
        if self.callbacks.on_folder_open is not None:
            self.callbacks.on_folder_open(self.find_item(key))

    # selection and actions

    def select(
        self,
        key: str,
        kind: str | None = None,
        ctrl_key: bool = False,
        shift_key: bool = False,
        force: bool = False,
    ) -> list[str]:
        return self.selector.select(key, kind, ctrl_key=ctrl_key, shift_key=shift_key, force=force)

    def set_selection(self, selection: list[str], anchor: str | None = None) -> None:
        self.selector.set_selection(selection, anchor)

    def handle_global_click(self, inside: bool) -> None:
        """Clear selection on outside clicks unless a modal action is open."""
        if inside:
            return
        if self.state.active_action in (None, ACTION_RENAME):
            self._commit(selection=[], anchor=None, action_targets=[], active_action=None)

    def begin_create_folder(self) -> str | None:
        if not self.capabilities.can_create_folder:
            return None
        return self.actions.begin_create_folder()

    def download(self) -> None:
        self.mutations.download(self.selection_is_folder())

    async def drop(self, did_drop: bool, target: str) -> MovePlan | None:
        """Forward a drop to the drag-and-drop strategy, if one is configured."""
        if self._drag_drop is None:
            return None
        return await self._drag_drop.handle_drop(self, did_drop, target)
