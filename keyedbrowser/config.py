"""Persistent JSON config helpers.

Stores default browser options for the command-line listing. All access is
defensive: malformed or missing config falls back to ``BrowserOptions``
defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from platformdirs import user_config_dir

from .browser.options import BrowserOptions

APP_NAME = "keyedbrowser"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)

_BOOL_OPTIONS = ("show_folders_on_filter", "nest_children", "multiple_selection")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", CONFIG_PATH)
        return {}
    return data


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write errors are logged."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_browser_options(base: BrowserOptions | None = None) -> BrowserOptions:
    """Overlay valid config values onto ``base`` options.

    Only explicit booleans are accepted for flags, positive integers for
    ``results_per_page`` and non-empty strings for ``no_files_message``.
    """
    options = base or BrowserOptions()
    config = load_config()
    overrides: dict[str, object] = {}
    for name in _BOOL_OPTIONS:
        value = config.get(name)
        if isinstance(value, bool):
            overrides[name] = value
    per_page = config.get("results_per_page")
    if isinstance(per_page, int) and not isinstance(per_page, bool) and per_page > 0:
        overrides["results_per_page"] = per_page
    message = config.get("no_files_message")
    if isinstance(message, str) and message.strip():
        overrides["no_files_message"] = message
    return replace(options, **overrides)

