"""Name-filter parsing and matching over flat item lists."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Item


def name_filter_terms(name_filter: str) -> list[str]:
    """Split a filter string into lowercase whitespace-separated terms."""
    return name_filter.lower().split()


def key_matches_terms(key: str, terms: list[str]) -> bool:
    """Return whether lowercased ``key`` contains every term as a substring."""
    folded = key.lower().strip()
    return all(term in folded for term in terms)


def filter_items_by_name(items: Iterable[Item], name_filter: str) -> list[Item]:
    """Keep items whose key contains all filter terms; empty filter keeps all."""
    terms = name_filter_terms(name_filter)
    if not terms:
        return list(items)
    return [item for item in items if key_matches_terms(item.key, terms)]
