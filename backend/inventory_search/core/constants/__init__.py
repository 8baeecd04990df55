"""
Constants package — re-exports from domain-specific modules.

Usage:
    from inventory_search.core.constants.search import MAX_PAGE_SIZE
    # or import everything:
    from inventory_search.core.constants import cache, inventory, search
Version: 1.0.0
"""

from inventory_search.core.constants import cache, inventory, search
from inventory_search.core.constants.cache import (
    CACHE_TTL_SECONDS,
    CACHE_MAX_ENTRIES,
)
from inventory_search.core.constants.search import (
    MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    SEARCH_BY_FIELDS,
    SORT_DIRECTIONS,
    SORTABLE_FIELDS,
    NON_SORTABLE_FIELDS,
    DEFAULT_SORT_FIELD,
    CANCELLED_NOTICE,
)

__all__ = [
    "cache",
    "inventory",
    "search",
    "CACHE_TTL_SECONDS",
    "CACHE_MAX_ENTRIES",
    "MAX_PAGE_SIZE",
    "DEFAULT_PAGE_SIZE",
    "SEARCH_BY_FIELDS",
    "SORT_DIRECTIONS",
    "SORTABLE_FIELDS",
    "NON_SORTABLE_FIELDS",
    "DEFAULT_SORT_FIELD",
    "CANCELLED_NOTICE",
]
