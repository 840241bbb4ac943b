"""Public package surface for keyedbrowser.

Re-exports the browser engine and tree model entry points.
Exports ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .browser import BrowserCallbacks, BrowserOptions, FileBrowser
from .tree_model import Item, TreeOptions, build_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "FileBrowser", "BrowserOptions", "BrowserCallbacks", "Item", "TreeOptions", "build_tree"]
