"""
Unit tests for InventoryService.

The repository is mocked with AsyncMock where the store's behavior is
not under test.
Version: 1.0.0
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from inventory_search.schemas.inventory import SearchBy, SearchQuery


pytestmark = pytest.mark.unit


class TestSearchInventory:

    @pytest.mark.asyncio
    async def test_runs_query_over_repository(self, inventory_service):
        result = await inventory_service.search_inventory(
            SearchQuery(criteria="widget", by=SearchBy.DESCRIPTION)
        )
        assert result.total == 2
        assert [i.part_number for i in result.items] == ["AI1005", "VM3015"]

    @pytest.mark.asyncio
    async def test_empty_repository_gives_zero_total(self):
        from inventory_search.services.inventory_service import InventoryService

        repo = MagicMock()
        repo.get_all = AsyncMock(return_value=[])
        result = await InventoryService(repo).search_inventory(SearchQuery(criteria="x"))

        assert result.total == 0
        assert result.items == []


class TestPeakAvailability:

    @pytest.mark.asyncio
    async def test_aggregates_matching_rows(self, inventory_service):
        peak = await inventory_service.get_peak_availability("ci4020")
        assert peak.total_available == 40
        assert [(b.branch, b.qty) for b in peak.branches] == [("CLT", 40)]

    @pytest.mark.asyncio
    async def test_unknown_part_is_empty(self, inventory_service):
        peak = await inventory_service.get_peak_availability("ZZ0000")
        assert peak.branches == []
        assert peak.total_available == 0

    @pytest.mark.asyncio
    async def test_blank_part_skips_repository(self):
        from inventory_search.services.inventory_service import InventoryService

        repo = MagicMock()
        repo.find_by_part_number = AsyncMock()
        peak = await InventoryService(repo).get_peak_availability("  ")

        repo.find_by_part_number.assert_not_called()
        assert peak.branches == []
