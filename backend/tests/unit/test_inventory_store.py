"""
Unit tests for the in-memory inventory store and mock data generator.

Version: 1.0.0
"""
import random
from datetime import datetime, timezone

import pytest

from inventory_search.db.inventory_store import (
    InventoryStore,
    MockInventoryGenerator,
    generate_mock_inventory,
)


pytestmark = pytest.mark.unit


class TestInventoryStore:

    @pytest.mark.asyncio
    async def test_get_all_returns_copies(self, inventory_store):
        rows = await inventory_store.get_all()
        rows[0].available_qty = 9999

        fresh = await inventory_store.get_all()
        assert fresh[0].available_qty == 12

    @pytest.mark.asyncio
    async def test_find_by_part_number_case_insensitive(self, inventory_store):
        rows = await inventory_store.find_by_part_number(" ai1005 ")
        assert [r.part_number for r in rows] == ["AI1005"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["", "   ", None])
    async def test_blank_part_number_finds_nothing(self, inventory_store, value):
        assert await inventory_store.find_by_part_number(value) == []

    @pytest.mark.asyncio
    async def test_constructor_copies_input(self, sample_items):
        store = InventoryStore(sample_items)
        sample_items[0].available_qty = 0

        rows = await store.get_all()
        assert len(store) == 5
        assert rows[0].available_qty == 12

    def test_empty_store(self):
        assert len(InventoryStore()) == 0

    def test_with_mock_data(self, mock_settings):
        store = InventoryStore.with_mock_data(mock_settings)
        assert 80 <= len(store) <= 120


class TestMockInventoryGenerator:

    @pytest.fixture
    def rows(self):
        generator = MockInventoryGenerator(random.Random(7), now=datetime(2025, 6, 1, tzinfo=timezone.utc))
        return generator.generate(60)

    def test_part_numbers_unique(self, rows):
        numbers = [r.part_number.lower() for r in rows]
        assert len(set(numbers)) == len(numbers)

    def test_supplier_skus_unique(self, rows):
        skus = [r.supplier_sku.lower() for r in rows]
        assert len(set(skus)) == len(skus)

    def test_available_qty_is_sum_of_lots(self, rows):
        for row in rows:
            assert row.available_qty == sum(lot.qty for lot in row.lots)

    def test_some_rows_have_absent_nullable_fields(self):
        generator = MockInventoryGenerator(random.Random(3))
        rows = generator.generate(200)
        assert any(r.lead_time_days is None for r in rows)
        assert any(r.last_purchase_date is None for r in rows)

    def test_same_seed_same_data(self, mock_settings):
        first = generate_mock_inventory(mock_settings)
        second = generate_mock_inventory(mock_settings)
        assert [r.part_number for r in first] == [r.part_number for r in second]
