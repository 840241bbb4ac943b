"""Click, ctrl-click, and shift-click selection over the visible sequence.

Selection is computed against the flattened visible rows supplied by the
caller, so range selection always follows what the user currently sees.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .state import BrowserState

logger = logging.getLogger(__name__)


def union_keys(existing: list[str], added: list[str]) -> list[str]:
    """Return ``existing`` followed by unseen ``added`` keys, without duplicates."""
    seen = set(existing)
    merged = list(existing)
    for key in added:
        if key not in seen:
            seen.add(key)
            merged.append(key)
    return merged


class SelectionEngine:
    """Own selection/anchor transitions for one browser.

    Every transition is applied through a single ``commit`` call so that
    observers see selection, anchor, and action changes together.
    """

    def __init__(
        self,
        *,
        state: BrowserState,
        commit: Callable[..., None],
        visible_keys: Callable[[], list[str]],
        multiple_selection: bool = True,
    ) -> None:
        """Create a selection engine.

        Args:
            state: Browser state read for the current selection and action.
            commit: Applies keyword state changes atomically.
            visible_keys: Provider of the flattened visible key sequence.
            multiple_selection: Whether ctrl/shift extend the selection.
        """
        self._state = state
        self._commit = commit
        self._visible_keys = visible_keys
        self._multiple_selection = multiple_selection

    def select(
        self,
        key: str,
        kind: str | None = None,
        ctrl_key: bool = False,
        shift_key: bool = False,
        force: bool = False,
    ) -> list[str]:
        """Apply one click on ``key`` and return the new selection.

        ``kind`` (``"file"`` or ``"folder"``) is informational only. Clicking a
        key outside the current action targets also ends that action.
        """
        state = self._state
        toggle = ctrl_key or (shift_key and state.anchor is None)
        extend_range = shift_key and not toggle

        selection: list[str] | None = None
        anchor: str | None = None
        if self._multiple_selection and toggle:
            if key in state.selection:
                selection = [selected for selected in state.selection if selected != key]
            else:
                selection = [*state.selection, key]
        elif self._multiple_selection and extend_range:
            selection = self._range_selection(key)
            anchor = state.anchor

        if selection is None:
            if not force and key in state.selection:
                selection = []
            else:
                selection = [key]
                anchor = key

        changes: dict[str, object] = {"selection": selection, "anchor": anchor}
        if state.action_targets and key not in state.action_targets:
            changes["active_action"] = None
            changes["action_targets"] = []
        logger.debug("select %r (%s) ctrl=%s shift=%s -> %r", key, kind, ctrl_key, shift_key, selection)
        self._commit(**changes)
        return selection

    def _range_selection(self, key: str) -> list[str] | None:
        """Union the span between anchor and ``key``; ``None`` when unresolvable."""
        visible = self._visible_keys()
        try:
            begin = visible.index(self._state.anchor)
            end = visible.index(key)
        except ValueError:
            return None
        if begin > end:
            begin, end = end, begin
        return union_keys(self._state.selection, visible[begin : end + 1])

    def set_selection(self, selection: list[str], anchor: str | None = None) -> None:
        """Replace selection and anchor directly, ending any active action."""
        self._commit(
            selection=list(selection),
            anchor=anchor,
            active_action=None,
            action_targets=[],
        )

    def select_all(self) -> None:
        """Select every currently visible key."""
        self.set_selection(self._visible_keys(), None)

    def clear(self) -> None:
        self._commit(selection=[], anchor=None)
