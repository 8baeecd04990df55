"""
Inventory store — in-memory repository backing the search API.

The store owns its InventoryItem rows. Every read hands out deep copies
so a caller can never mutate shared state through a returned item.

When constructed without explicit rows the store seeds itself with
generated mock inventory (enough rows for several pages at the default
page size).
Version: 1.0.0
"""
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional, Set

from inventory_search.core.config import Settings
from inventory_search.core.constants import inventory as pools
from inventory_search.schemas.inventory import InventoryItem, LotInfo

logger = logging.getLogger(__name__)


class MockInventoryGenerator:
    """Draws plausible, unique inventory rows from the constant pools."""

    def __init__(self, rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> None:
        self._rng = rng or random.Random()
        self._now = now or datetime.now(timezone.utc)
        self._part_numbers: Set[str] = set()
        self._supplier_skus: Set[str] = set()
        self._descriptions: Set[str] = set()

    def generate(self, count: int) -> List[InventoryItem]:
        return [self._next_item() for _ in range(count)]

    def _next_item(self) -> InventoryItem:
        lots = self._next_lots()
        return InventoryItem(
            part_number=self._unique(self._next_part_number, self._part_numbers, "PN"),
            supplier_sku=self._unique(self._next_supplier_sku, self._supplier_skus, "SKU"),
            description=self._unique(self._next_description, self._descriptions, "DESC"),
            branch=self._rng.choice(pools.BRANCH_POOL),
            uom=self._rng.choice(pools.UOM_POOL),
            lead_time_days=self._next_lead_time_days(),
            last_purchase_date=self._next_last_purchase_date(),
            lots=lots,
            available_qty=sum(lot.qty for lot in lots),
        )

    @staticmethod
    def _round_up_to_five(value: int) -> int:
        return value + 5 - (value % 5)

    def _next_part_number(self) -> str:
        prefix = self._rng.choice(pools.PART_NUMBER_PREFIX_POOL)
        low, high = pools.PART_NUMBER_RANGE
        return f"{prefix}{self._round_up_to_five(self._rng.randrange(low, high)):04d}"

    def _next_supplier_sku(self) -> str:
        prefix = self._rng.choice(pools.SUPPLIER_SKU_PREFIX_POOL)
        low, high = pools.SUPPLIER_SKU_RANGE
        return f"{prefix}{self._round_up_to_five(self._rng.randrange(low, high)):05d}"

    def _next_description(self) -> str:
        return " ".join([
            self._rng.choice(pools.DESCRIPTION_ADVERB_POOL),
            self._rng.choice(pools.DESCRIPTION_ADJECTIVE_POOL),
            self._rng.choice(pools.DESCRIPTION_NOUN_POOL),
        ])

    def _unique(self, generator: Callable[[], str], seen: Set[str], fallback_prefix: str) -> str:
        for _ in range(pools.UNIQUE_VALUE_MAX_ATTEMPTS):
            candidate = generator()
            if candidate.lower() not in seen:
                seen.add(candidate.lower())
                return candidate
        fallback = f"{fallback_prefix}-{len(seen) + 1}"
        seen.add(fallback.lower())
        return fallback

    def _next_lead_time_days(self) -> Optional[int]:
        if self._rng.random() >= pools.CHANCE_OF_LEAD_TIME:
            return None
        low, high = pools.LEAD_TIME_RANGE
        return self._rng.randrange(low, high)

    def _next_last_purchase_date(self) -> Optional[datetime]:
        if self._rng.random() >= pools.CHANCE_OF_LAST_PURCHASE:
            return None
        window = timedelta(days=30 * pools.LAST_PURCHASE_MONTHS)
        return self._now - window * self._rng.random()

    def _next_lot(self) -> LotInfo:
        low, high = pools.LOT_NUMBER_RANGE
        qty_low, qty_high = pools.LOT_QTY_RANGE
        expiration = None
        if self._rng.random() >= pools.CHANCE_OF_LOT_EXPIRATION:
            exp_low, exp_high = pools.LOT_EXPIRATION_DAYS_RANGE
            expiration = self._now + timedelta(days=self._rng.randrange(exp_low, exp_high))
        return LotInfo(
            lot_number=f"LOT-{self._rng.randrange(low, high):05d}",
            qty=self._rng.randrange(qty_low, qty_high),
            expiration_date=expiration,
        )

    def _next_lots(self) -> List[LotInfo]:
        lots: List[LotInfo] = []
        while self._rng.random() < pools.CHANCE_OF_LOT:
            lots.append(self._next_lot())
        return lots


def generate_mock_inventory(settings: Settings, rng: Optional[random.Random] = None) -> List[InventoryItem]:
    """Generate a random-sized mock inventory within the configured bounds."""
    rng = rng or random.Random(settings.mock_inventory_seed)
    count = rng.randint(settings.mock_inventory_min_items, settings.mock_inventory_max_items)
    items = MockInventoryGenerator(rng).generate(count)
    logger.info(f"Generated {len(items)} mock inventory rows")
    return items


class InventoryStore:
    """In-memory repository: ``get_all`` and ``find_by_part_number``."""

    def __init__(self, items: Optional[Iterable[InventoryItem]] = None) -> None:
        self._items: List[InventoryItem] = [i.model_copy(deep=True) for i in (items or [])]

    @classmethod
    def with_mock_data(cls, settings: Settings) -> "InventoryStore":
        return cls(generate_mock_inventory(settings))

    def __len__(self) -> int:
        return len(self._items)

    async def get_all(self) -> List[InventoryItem]:
        """Every row, as copies."""
        return [i.model_copy(deep=True) for i in self._items]

    async def find_by_part_number(self, part_number: str) -> List[InventoryItem]:
        """Rows whose part number equals ``part_number`` (case-insensitive), as copies."""
        if not part_number or not part_number.strip():
            return []
        wanted = part_number.strip().lower()
        return [i.model_copy(deep=True) for i in self._items if i.part_number.lower() == wanted]
