"""Browser state engine: selection, actions, mutations, and persistence."""

from .actions import ActionStateMachine
from .browser import FileBrowser, ItemStatus
from .drag_drop import MoveSelectionOnDrop
from .events import ClickEvents
from .moves import MovePlan, MoveStep, exclude_contained, plan_moves, run_move_plan
from .mutations import MutationCoordinator
from .options import BrowserCallbacks, BrowserOptions, Capabilities
from .persistence import JsonFileStore, MemoryStore
from .selection import SelectionEngine
from .state import (
    ACTION_CREATE_FOLDER,
    ACTION_DELETE,
    ACTION_MOVE,
    ACTION_RENAME,
    BrowserState,
)

__all__ = [
    "FileBrowser",
    "ItemStatus",
    "BrowserState",
    "BrowserOptions",
    "BrowserCallbacks",
    "Capabilities",
    "SelectionEngine",
    "ActionStateMachine",
    "MutationCoordinator",
    "MovePlan",
    "MoveStep",
    "plan_moves",
    "run_move_plan",
    "exclude_contained",
    "ClickEvents",
    "MoveSelectionOnDrop",
    "JsonFileStore",
    "MemoryStore",
    "ACTION_RENAME",
    "ACTION_DELETE",
    "ACTION_MOVE",
    "ACTION_CREATE_FOLDER",
]
