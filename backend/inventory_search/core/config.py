import os
from typing import Optional
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None


class Settings(BaseModel):
    # Client-side API base (the remote search/peak capabilities live under it)
    inventory_api_base: str = os.getenv("INVENTORY_API_BASE", "http://localhost:8000/api")
    request_timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

    # Response caches (one instance for search results, one for peak lookups)
    search_cache_ttl_seconds: float = float(os.getenv("SEARCH_CACHE_TTL_SECONDS", "60"))
    search_cache_max_entries: int = int(os.getenv("SEARCH_CACHE_MAX_ENTRIES", "5"))
    peak_cache_ttl_seconds: float = float(os.getenv("PEAK_CACHE_TTL_SECONDS", "60"))
    peak_cache_max_entries: int = int(os.getenv("PEAK_CACHE_MAX_ENTRIES", "5"))

    # Search orchestration
    search_debounce_ms: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "50"))
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

    # Server boundary
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "200"))
    # Simulated latency added to successful API responses
    response_delay_ms: int = int(os.getenv("RESPONSE_DELAY_MS", "100"))

    # Mock repository
    mock_inventory_seed: Optional[int] = _optional_int("MOCK_INVENTORY_SEED")
    mock_inventory_min_items: int = int(os.getenv("MOCK_INVENTORY_MIN_ITEMS", "50"))
    mock_inventory_max_items: int = int(os.getenv("MOCK_INVENTORY_MAX_ITEMS", "1000"))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
