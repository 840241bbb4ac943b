"""Persistence ports for the remembered part of browser state.

Stores expose ``load(key) -> dict | None`` and ``save(key, state) -> None``.
Loading is best-effort: missing or malformed records are logged and treated
as absent so that a browser always starts with usable default state.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_state_dir

APP_NAME = "keyedbrowser"
OPEN_FOLDERS_FIELD = "open_folders"

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def default_state_dir() -> Path:
    return Path(user_state_dir(APP_NAME, appauthor=False))


class MemoryStore:
    """In-process store; records are copied through JSON like a real store."""

    def __init__(self) -> None:
        self.records: dict[str, str] = {}

    def load(self, key: str) -> dict[str, object] | None:
        raw = self.records.get(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("ignoring malformed browser state for %r", key)
            return None
        if not isinstance(data, dict):
            logger.warning("ignoring browser state for %r: expected a JSON object", key)
            return None
        return data

    def save(self, key: str, state: dict[str, object]) -> None:
        self.records[key] = json.dumps(state)


class JsonFileStore:
    """One JSON file per storage key under the user state directory."""

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory if directory is not None else default_state_dir()

    def path_for(self, key: str) -> Path:
        safe = _UNSAFE_FILENAME_CHARS.sub("_", key).strip("._") or "default"
        return self.directory / f"{safe}.json"

    def load(self, key: str) -> dict[str, object] | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable browser state %s: %s", path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("ignoring browser state %s: expected a JSON object", path)
            return None
        return data

    def save(self, key: str, state: dict[str, object]) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(state, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("could not persist browser state to %s: %s", path, exc)


def serialize_open_folders(open_folders: Iterable[str]) -> dict[str, object]:
    return {OPEN_FOLDERS_FIELD: sorted(open_folders)}


def parse_open_folders(record: object) -> set[str] | None:
    """Extract open folder keys from a persisted record.

    Accepts a list of keys or a ``{key: true}`` mapping. Returns ``None`` when
    the record holds no usable open-folder data.
    """
    if not record:
        return None
    if not isinstance(record, dict):
        logger.warning("ignoring persisted browser state of type %s", type(record).__name__)
        return None
    value = record.get(OPEN_FOLDERS_FIELD, record.get("openFolders"))
    if isinstance(value, dict):
        return {key for key, is_open in value.items() if isinstance(key, str) and is_open}
    if isinstance(value, list):
        return {key for key in value if isinstance(key, str)}
    if value is not None:
        logger.warning("ignoring persisted open folders of type %s", type(value).__name__)
    return None
