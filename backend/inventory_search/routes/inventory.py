"""
Inventory routes — paged search, peak availability and health.

Provides:
- GET /inventory/search             – filter/sort/page the inventory
- GET /inventory/availability/peak  – per-branch totals for a part number
- GET /inventory/health             – liveness with timestamp

Validation errors surface as 400 failure envelopes and empty results as
404 failure envelopes (see core.middleware.apply_exception_handlers).
Version: 1.0.0
"""
import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Query

from inventory_search.core.config import Settings
from inventory_search.core.constants.search import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SEARCH_BY,
    NO_INVENTORY_MESSAGE,
    PART_NOT_FOUND_MESSAGE,
)
from inventory_search.core.exceptions import NotFoundError
from inventory_search.schemas.inventory import PeakAvailability, ResponseEnvelope, SearchResult
from inventory_search.services.inventory_service import InventoryService
from inventory_search.utils.search_validators import validate_part_number, validate_search_params

logger = logging.getLogger(__name__)


def build_inventory_router(service: InventoryService, settings: Settings) -> APIRouter:
    router = APIRouter(prefix="/inventory", tags=["inventory"])

    async def _simulate_latency() -> None:
        if settings.response_delay_ms > 0:
            await asyncio.sleep(settings.response_delay_ms / 1000.0)

    @router.get(
        "/search",
        response_model=ResponseEnvelope[SearchResult],
        summary="Search inventory with paging and sorting",
    )
    async def search_inventory(
        criteria: str = Query(default=""),
        by: str = Query(default=DEFAULT_SEARCH_BY),
        branches: str = Query(default=""),
        only_available: bool = Query(default=False, alias="onlyAvailable"),
        page: int = Query(default=0),
        size: int = Query(default=DEFAULT_PAGE_SIZE),
        sort: str = Query(default=""),
        fail: bool = Query(default=False),
    ) -> ResponseEnvelope[SearchResult]:
        """Filter by criteria/branches/availability, sort, then page."""
        query = validate_search_params(
            criteria=criteria,
            by=by,
            branches=branches,
            only_available=only_available,
            page=page,
            size=size,
            sort=sort,
            max_page_size=settings.max_page_size,
            fail=fail,
        )

        result = await service.search_inventory(query)
        if result.total == 0:
            logger.info(f"No inventory found for criteria {query.model_dump()}.")
            raise NotFoundError(NO_INVENTORY_MESSAGE)

        await _simulate_latency()
        return ResponseEnvelope[SearchResult].success(result)

    @router.get(
        "/availability/peak",
        response_model=ResponseEnvelope[PeakAvailability],
        summary="Per-branch availability for one part number",
    )
    async def get_peak_availability(
        part_number: str = Query(default="", alias="partNumber"),
    ) -> ResponseEnvelope[PeakAvailability]:
        """Sum available quantity per branch and overall."""
        part_number = validate_part_number(part_number)

        availability = await service.get_peak_availability(part_number)
        if not availability.branches:
            logger.info(f"Part number {part_number} not found for availability.")
            raise NotFoundError(PART_NOT_FOUND_MESSAGE)

        await _simulate_latency()
        return ResponseEnvelope[PeakAvailability].success(availability)

    @router.get("/health")
    async def inventory_health():
        """Liveness with server timestamp."""
        await _simulate_latency()
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return router
