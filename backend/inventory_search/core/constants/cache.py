"""
Cache constants — default TTL and capacity for the response caches.

Both the search cache and the peak-availability cache start from these
defaults; Settings may override them per instance.
Version: 1.0.0
"""

CACHE_TTL_SECONDS: float = 60.0
CACHE_MAX_ENTRIES: int = 5

# Separator between normalized query parts in a cache key
CACHE_KEY_SEPARATOR: str = "::"
BRANCH_KEY_SEPARATOR: str = "|"
PEAK_KEY_PREFIX: str = "peak:"
