"""
Inventory API HTTP client — cached, cancelable search and peak lookups.

Each public call returns a RequestHandle. Identical normalized queries
issued while a call is pending, or within the cache TTL, share the same
underlying request, so only one network call is made. A failed call removes
its own cache entry so the next attempt goes back to the network.
Version: 1.0.0
"""
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError as SchemaError

from inventory_search.core.config import Settings
from inventory_search.core.constants.search import SEARCH_FAILED_MESSAGE
from inventory_search.core.exceptions import ConnectionTimeoutError, TransportFailure, ValidationError
from inventory_search.schemas.inventory import PeakAvailability, ResponseEnvelope, SearchQuery, SearchResult
from inventory_search.utils.query_normalizer import cache_key, peak_cache_key
from inventory_search.utils.request_handle import RequestHandle, SharedRequest
from inventory_search.utils.ttl_lru_cache import TtlLruCache

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVICE_NAME = "Inventory API"


class InventoryApiClient:
    def __init__(
        self,
        settings: Settings,
        search_cache: Optional[TtlLruCache] = None,
        peak_cache: Optional[TtlLruCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = settings.inventory_api_base.rstrip("/")
        self._timeout = settings.request_timeout_seconds
        self._transport = transport
        self._search_cache = search_cache if search_cache is not None else TtlLruCache(
            max_entries=settings.search_cache_max_entries,
            ttl_seconds=settings.search_cache_ttl_seconds,
            name="search-cache",
        )
        self._peak_cache = peak_cache if peak_cache is not None else TtlLruCache(
            max_entries=settings.peak_cache_max_entries,
            ttl_seconds=settings.peak_cache_ttl_seconds,
            name="peak-cache",
        )

    @property
    def search_cache(self) -> TtlLruCache:
        return self._search_cache

    @property
    def peak_cache(self) -> TtlLruCache:
        return self._peak_cache

    # -- Public capabilities -------------------------------------------------

    def search(self, query: SearchQuery) -> RequestHandle[SearchResult]:
        """Search inventory; must be called from a running event loop."""
        key = cache_key(query)
        return self._cached_request(
            self._search_cache,
            key,
            lambda: self._fetch_search(query),
            label="search",
        )

    def get_peak_availability(self, part_number: str) -> RequestHandle[PeakAvailability]:
        """Per-branch availability for ``part_number``; must be called from a running event loop."""
        key = peak_cache_key(part_number)
        return self._cached_request(
            self._peak_cache,
            key,
            lambda: self._fetch_peak(part_number),
            label="peak",
        )

    def clear_caches(self) -> None:
        self._search_cache.clear()
        self._peak_cache.clear()

    @staticmethod
    def build_search_params(query: SearchQuery) -> Dict[str, str]:
        """Query-string parameters; optional ones are only sent when set."""
        params = {
            "criteria": query.criteria,
            "by": query.by.value,
            "page": str(query.page),
            "size": str(query.size),
        }
        if query.branches:
            params["branches"] = ",".join(query.branches)
        if query.only_available:
            params["onlyAvailable"] = "true"
        if query.sort is not None:
            params["sort"] = query.sort.to_param()
        return params

    # -- Caching -------------------------------------------------------------

    def _cached_request(
        self,
        cache: TtlLruCache,
        key: str,
        fetch: Callable[[], Awaitable[T]],
        label: str,
    ) -> RequestHandle[T]:
        shared: Optional[SharedRequest[T]] = cache.get(key)
        if shared is not None:
            logger.debug(f"{label}: cache hit {key!r}")
            return shared.subscribe()

        logger.info(f"{label}: cache miss {key!r}, calling {SERVICE_NAME}")

        async def _run() -> T:
            try:
                return await fetch()
            except Exception:
                # A failed fetch must not poison the cache
                cache.remove(key, expected=shared)
                raise

        shared = SharedRequest(
            _run(),
            on_abandon=lambda: cache.remove(key, expected=shared),
            label=f"{label} {key!r}",
        )
        cache.put(key, shared)
        return shared.subscribe()

    # -- Transport -----------------------------------------------------------

    async def _fetch_search(self, query: SearchQuery) -> SearchResult:
        data = await self._get_envelope_data(
            "/inventory/search", self.build_search_params(query), SearchResult
        )
        if data is None:
            return SearchResult(total=0, items=[])
        return data

    async def _fetch_peak(self, part_number: str) -> PeakAvailability:
        data = await self._get_envelope_data(
            "/inventory/availability/peak", {"partNumber": part_number}, PeakAvailability
        )
        if data is None:
            return PeakAvailability(part_number=part_number, total_available=0, branches=[])
        return data

    @staticmethod
    def _parse_envelope(resp: httpx.Response, model: Type[T]) -> Optional[ResponseEnvelope]:
        try:
            return ResponseEnvelope[model].model_validate(resp.json())
        except (ValueError, SchemaError):
            return None

    async def _get_envelope_data(self, path: str, params: Dict[str, Any], model: Type[T]) -> Optional[T]:
        """
        GET ``path`` and unwrap the envelope.

        Returns:
            The envelope data, or None when the server reported "not found"

        Raises:
            ValidationError: server rejected the parameters (HTTP 400)
            ConnectionTimeoutError: the request timed out
            TransportFailure: network error, 5xx, or a failure envelope
        """
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(url, params=params)
        except httpx.TimeoutException:
            logger.error(f"{SERVICE_NAME} request timed out: GET {path}")
            raise ConnectionTimeoutError(SERVICE_NAME)
        except httpx.RequestError as e:
            logger.error(f"{SERVICE_NAME} network error: GET {path}: {e}")
            raise TransportFailure(SERVICE_NAME, f"Network error connecting to inventory API: {e}")

        envelope = self._parse_envelope(resp, model)
        message = envelope.message if envelope is not None and envelope.message else None

        if resp.status_code == 404 and envelope is not None and envelope.is_failed:
            logger.info(f"{SERVICE_NAME}: nothing found for GET {path} ({message})")
            return None
        if resp.status_code == 400:
            raise ValidationError(message or resp.text or SEARCH_FAILED_MESSAGE)
        if resp.status_code >= 400:
            logger.error(f"{SERVICE_NAME} error {resp.status_code}: GET {path}: {message or resp.text}")
            raise TransportFailure(SERVICE_NAME, message or SEARCH_FAILED_MESSAGE, resp.status_code)
        if envelope is None or envelope.is_failed or envelope.data is None:
            raise TransportFailure(SERVICE_NAME, message or SEARCH_FAILED_MESSAGE, resp.status_code)
        return envelope.data
