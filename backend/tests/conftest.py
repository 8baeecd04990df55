"""
Pytest configuration and shared fixtures for Inventory Search tests.

Provides settings, a controllable clock, sample inventory rows, and
in-memory store/service instances.
Version: 1.0.0
"""
from datetime import datetime, timezone

import pytest

from inventory_search.core.config import Settings
from inventory_search.db.inventory_store import InventoryStore
from inventory_search.schemas.inventory import InventoryItem, LotInfo
from inventory_search.services.inventory_service import InventoryService
from inventory_search.services.notice_service import NoticeService


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no simulated latency)."""
    return Settings(
        inventory_api_base="http://inventory.test/api",
        request_timeout_seconds=5.0,
        search_cache_ttl_seconds=60.0,
        search_cache_max_entries=5,
        peak_cache_ttl_seconds=60.0,
        peak_cache_max_entries=5,
        search_debounce_ms=50,
        default_page_size=20,
        max_page_size=200,
        response_delay_ms=0,
        mock_inventory_seed=1234,
        mock_inventory_min_items=80,
        mock_inventory_max_items=120,
    )


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


# ---------------------------------------------------------------------------
# Notices
# ---------------------------------------------------------------------------

@pytest.fixture
def notices():
    """NoticeService with a ``received`` list of every emitted notice."""
    service = NoticeService()
    service.received = []
    service.subscribe(service.received.append)
    return service


# ---------------------------------------------------------------------------
# Sample test data
# ---------------------------------------------------------------------------

def make_item(part_number: str, **overrides) -> InventoryItem:
    """Build an InventoryItem with sensible defaults."""
    data = {
        "part_number": part_number,
        "supplier_sku": f"SKU-{part_number}",
        "description": f"Description of {part_number}",
        "branch": "SEA",
        "uom": "EA",
        "lead_time_days": None,
        "last_purchase_date": None,
        "lots": [],
        "available_qty": 1,
    }
    data.update(overrides)
    return InventoryItem(**data)


@pytest.fixture
def item_factory():
    """The make_item builder, for tests that need custom rows."""
    return make_item


@pytest.fixture
def sample_items():
    """Small, hand-built inventory covering every filter and sort case."""
    return [
        make_item(
            "AI1005", description="Quick Widget", branch="SEA", uom="GB",
            lead_time_days=7, available_qty=12,
            last_purchase_date=datetime(2025, 3, 1, tzinfo=timezone.utc),
            lots=[LotInfo(lot_number="LOT-00001", qty=12)],
        ),
        make_item(
            "DB2010", description="Other", branch="DEN", uom="TB",
            lead_time_days=None, available_qty=0,
            supplier_sku="ORM10010",
        ),
        make_item(
            "VM3015", description="Slow widget", branch="sea", uom="MB",
            lead_time_days=3, available_qty=5,
            last_purchase_date=datetime(2025, 1, 15, tzinfo=timezone.utc),
        ),
        make_item(
            "CI4020", description="Gadget", branch="CLT", uom="KB",
            lead_time_days=21, available_qty=40,
        ),
        make_item(
            "CD5025", description=None, branch=None, uom="PB",
            lead_time_days=None, available_qty=2,
        ),
    ]


@pytest.fixture
def inventory_store(sample_items):
    return InventoryStore(sample_items)


@pytest.fixture
def inventory_service(inventory_store):
    return InventoryService(inventory_store)
