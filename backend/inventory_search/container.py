"""
Lazy DI container — singleton access to stores, caches, clients and services.

The two response caches are process-wide: one instance for search
results, one for peak-availability lookups. Import individual getters
to avoid circular imports.
Version: 1.0.0
"""

from functools import lru_cache

from inventory_search.core.config import settings
from inventory_search.clients.inventory_api_client import InventoryApiClient
from inventory_search.db.inventory_store import InventoryStore
from inventory_search.services.inventory_service import InventoryService
from inventory_search.services.notice_service import NoticeService
from inventory_search.services.search_orchestrator import SearchOrchestrator
from inventory_search.utils.ttl_lru_cache import TtlLruCache


# -- Server side -----------------------------------------------------------

@lru_cache(maxsize=1)
def get_inventory_store():
    return InventoryStore.with_mock_data(settings)


@lru_cache(maxsize=1)
def get_inventory_service():
    return InventoryService(get_inventory_store())


# -- Caches ----------------------------------------------------------------

@lru_cache(maxsize=1)
def get_search_cache():
    return TtlLruCache(
        max_entries=settings.search_cache_max_entries,
        ttl_seconds=settings.search_cache_ttl_seconds,
        name="search-cache",
    )


@lru_cache(maxsize=1)
def get_peak_cache():
    return TtlLruCache(
        max_entries=settings.peak_cache_max_entries,
        ttl_seconds=settings.peak_cache_ttl_seconds,
        name="peak-cache",
    )


# -- Client side -----------------------------------------------------------

@lru_cache(maxsize=1)
def get_inventory_api_client():
    return InventoryApiClient(
        settings,
        search_cache=get_search_cache(),
        peak_cache=get_peak_cache(),
    )


@lru_cache(maxsize=1)
def get_notice_service():
    return NoticeService()


def build_search_orchestrator() -> SearchOrchestrator:
    """A fresh orchestrator per search screen, sharing the process-wide client."""
    return SearchOrchestrator(
        api=get_inventory_api_client(),
        notices=get_notice_service(),
        debounce_ms=settings.search_debounce_ms,
        page_size=settings.default_page_size,
    )
