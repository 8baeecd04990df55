"""
Query normalization — canonical cache keys for search and peak lookups.

Two queries that differ only in branch ordering, criteria casing or
surrounding whitespace, or absent vs. empty sort produce the same key.
An empty branch set means "no branch filter" and is kept distinct from
any explicit branch list.
"""
from inventory_search.core.constants.cache import (
    BRANCH_KEY_SEPARATOR,
    CACHE_KEY_SEPARATOR,
    PEAK_KEY_PREFIX,
)
from inventory_search.schemas.inventory import SearchQuery


def normalize_branches(branches) -> list[str]:
    """Trimmed, lowercased, de-duplicated and sorted; blank entries dropped."""
    return sorted({b.strip().lower() for b in branches if b and b.strip()})


def _normalize_sort(query: SearchQuery) -> str:
    if query.sort is None or not query.sort.field:
        return ""
    return query.sort.to_param()


def cache_key(query: SearchQuery) -> str:
    """Build the cache key for a search query."""
    branches = BRANCH_KEY_SEPARATOR.join(normalize_branches(query.branches))
    return CACHE_KEY_SEPARATOR.join([
        query.criteria.strip().lower(),
        query.by.value,
        branches,
        "1" if query.only_available else "0",
        str(query.page),
        str(query.size),
        _normalize_sort(query),
    ])


def peak_cache_key(part_number: str) -> str:
    """Build the cache key for a peak-availability lookup."""
    return f"{PEAK_KEY_PREFIX}{part_number}"
