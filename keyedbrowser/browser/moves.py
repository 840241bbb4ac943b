"""Bulk move of mixed file/folder selections into one destination folder.

Moves are planned from keys alone, then executed in order: files first, then
folders deepest-first. A key nested inside another moving folder travels with
that folder and gets no move of its own. Planning stops at the first folder
whose new location would be inside itself; steps planned before it still run.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..tree_model import SEPARATOR, basename, folder_name, is_ancestor, is_folder, split_by_kind

logger = logging.getLogger(__name__)

MOVE_FILE = "file"
MOVE_FOLDER = "folder"

MoveHandler = Callable[[str, str], Any]


@dataclass(frozen=True)
class MoveStep:
    kind: str
    old_key: str
    new_key: str


@dataclass(frozen=True)
class MovePlan:
    """Ordered move steps; ``aborted_at`` names the self-containing folder."""

    destination: str
    steps: tuple[MoveStep, ...] = ()
    aborted_at: str | None = None

    @property
    def aborted(self) -> bool:
        return self.aborted_at is not None


async def maybe_await(result: Any) -> Any:
    """Await ``result`` when a collaborator returned an awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


def normalize_destination(destination: str) -> str:
    """Return ``destination`` as a folder key (``""`` stays root)."""
    if destination and not is_folder(destination):
        return destination + SEPARATOR
    return destination


def exclude_contained(keys: Iterable[str]) -> list[str]:
    """Drop keys that sit inside another folder key of the same batch."""
    ordered = list(dict.fromkeys(keys))
    folders = [key for key in ordered if is_folder(key)]
    return [key for key in ordered if not any(is_ancestor(folder, key) for folder in folders)]


def plan_moves(targets: Iterable[str], destination: str) -> MovePlan:
    """Compute the move steps for ``targets`` into ``destination``."""
    destination = normalize_destination(destination)
    folders, files = split_by_kind(exclude_contained(targets))
    steps: list[MoveStep] = []

    for key in files:
        new_key = f"{destination}{basename(key)}"
        if new_key != key:
            steps.append(MoveStep(MOVE_FILE, key, new_key))

    for key in sorted(folders, key=len, reverse=True):
        new_key = f"{destination}{folder_name(key)}{SEPARATOR}"
        if new_key == key:
            continue
        if new_key.startswith(key):
            return MovePlan(destination, tuple(steps), aborted_at=key)
        steps.append(MoveStep(MOVE_FOLDER, key, new_key))

    return MovePlan(destination, tuple(steps))


async def run_move_plan(
    plan: MovePlan,
    move_file: MoveHandler | None,
    move_folder: MoveHandler | None,
) -> list[MoveStep]:
    """Execute ``plan`` sequentially and return the steps actually issued."""
    issued: list[MoveStep] = []
    for step in plan.steps:
        handler = move_file if step.kind == MOVE_FILE else move_folder
        if handler is None:
            continue
        logger.debug("move %s %r -> %r", step.kind, step.old_key, step.new_key)
        await maybe_await(handler(step.old_key, step.new_key))
        issued.append(step)
    if plan.aborted:
        logger.info(
            "aborted move of %r: destination %r is inside it",
            plan.aborted_at,
            plan.destination,
        )
    return issued
