"""
Inventory service — server-side search and peak-availability lookups.

Handles:
- Loading rows from the repository
- Running the filter/sort/page pipeline (query_engine)
- Aggregating per-branch availability for one part number

An empty result is a valid outcome (total=0); presenting it as
"not found" is the HTTP boundary's decision.
Version: 1.0.0
"""
import logging
from typing import List, Protocol

from inventory_search.schemas.inventory import InventoryItem, PeakAvailability, SearchQuery, SearchResult
from inventory_search.services.peak_availability import aggregate_peak_availability
from inventory_search.services.query_engine import execute_query

logger = logging.getLogger(__name__)


class InventoryRepository(Protocol):
    async def get_all(self) -> List[InventoryItem]: ...

    async def find_by_part_number(self, part_number: str) -> List[InventoryItem]: ...


class InventoryService:
    """Search and availability over an inventory repository."""

    def __init__(self, repository: InventoryRepository) -> None:
        self._repository = repository

    async def search_inventory(self, query: SearchQuery) -> SearchResult:
        items = await self._repository.get_all()
        result = execute_query(items or [], query)
        logger.info(
            f"Inventory search by={query.by.value} criteria={query.criteria!r}: "
            f"{result.total} matched, {len(result.items)} on page {query.page}"
        )
        return result

    async def get_peak_availability(self, part_number: str) -> PeakAvailability:
        if not part_number or not part_number.strip():
            return PeakAvailability(part_number=part_number or "")
        items = await self._repository.find_by_part_number(part_number)
        return aggregate_peak_availability(part_number, items or [])
