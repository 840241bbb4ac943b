"""Drag-and-drop strategies injected into ``FileBrowser``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .moves import MovePlan

if TYPE_CHECKING:
    from .browser import FileBrowser

logger = logging.getLogger(__name__)


class MoveSelectionOnDrop:
    """Move the current selection into the folder it is dropped on."""

    async def handle_drop(self, browser: FileBrowser, did_drop: bool, target: str) -> MovePlan | None:
        if not did_drop:
            return None
        logger.debug("drop %r onto %r", browser.state.selection, target)
        return await browser.mutations.move(list(browser.state.selection), target)
