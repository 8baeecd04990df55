"""
Query engine — filter, sort and page an inventory record set.

Pure functions over a sequence of InventoryItem and an already-validated
SearchQuery. Nothing here mutates its input and nothing raises for an
empty result: zero matches is ``SearchResult(total=0, items=[])``.

Pipeline:
1. Criteria: case-insensitive substring on the field chosen by ``by``
2. Branches: case-insensitive membership; empty set means no filter
3. Availability: ``available_qty > 0`` when only_available is set
4. Sort: stable; nullable fields keep absent values last in any direction
5. Total is counted after filtering, before paging
6. Page: ``[page*size : page*size+size]``, empty past the end
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from inventory_search.core.constants.search import DEFAULT_SORT_FIELD, NULLABLE_SORT_FIELDS
from inventory_search.schemas.inventory import (
    InventoryItem,
    SearchBy,
    SearchQuery,
    SearchResult,
    SortDirection,
    SortSpec,
)
from inventory_search.utils.query_normalizer import normalize_branches

logger = logging.getLogger(__name__)


_CRITERIA_FIELDS: Dict[SearchBy, Callable[[InventoryItem], Optional[str]]] = {
    SearchBy.PART_NUMBER: lambda i: i.part_number,
    SearchBy.DESCRIPTION: lambda i: i.description,
    SearchBy.SUPPLIER_SKU: lambda i: i.supplier_sku,
}


def _text_key(value: Optional[str]) -> str:
    return (value or "").casefold()


# Sort keys by wire field name; nullable fields return None for "absent"
_SORT_KEYS: Dict[str, Callable[[InventoryItem], Any]] = {
    "partNumber": lambda i: _text_key(i.part_number),
    "description": lambda i: _text_key(i.description),
    "branch": lambda i: _text_key(i.branch),
    "uom": lambda i: _text_key(i.uom),
    "availableQty": lambda i: i.available_qty,
    "leadTimeDays": lambda i: i.lead_time_days,
    "lastPurchaseDate": lambda i: i.last_purchase_date,
}


def filter_by_criteria(items: Sequence[InventoryItem], criteria: str, by: SearchBy) -> List[InventoryItem]:
    needle = (criteria or "").strip().lower()
    if not needle:
        return list(items)
    field = _CRITERIA_FIELDS.get(by, _CRITERIA_FIELDS[SearchBy.PART_NUMBER])
    return [i for i in items if needle in (field(i) or "").lower()]


def filter_by_branches(items: Sequence[InventoryItem], branches: Sequence[str]) -> List[InventoryItem]:
    branch_set = set(normalize_branches(branches))
    if not branch_set:
        return list(items)
    return [i for i in items if (i.branch or "").lower() in branch_set]


def filter_by_availability(items: Sequence[InventoryItem], only_available: bool) -> List[InventoryItem]:
    if not only_available:
        return list(items)
    return [i for i in items if i.available_qty > 0]


def resolve_sort(sort: Optional[SortSpec]) -> SortSpec:
    """Absent or unsupported sort falls back to partNumber ascending."""
    if sort is None or sort.field not in _SORT_KEYS:
        return SortSpec(field=DEFAULT_SORT_FIELD, direction=SortDirection.ASC)
    return sort


def sort_items(items: Sequence[InventoryItem], sort: Optional[SortSpec]) -> List[InventoryItem]:
    """
    Stable sort by the requested field.

    For nullable fields, items with a value come first (ordered by the
    requested direction) and items without one follow in their input
    relative order, regardless of direction.
    """
    spec = resolve_sort(sort)
    key = _SORT_KEYS[spec.field]
    descending = spec.direction == SortDirection.DESC

    if spec.field in NULLABLE_SORT_FIELDS:
        present = [i for i in items if key(i) is not None]
        absent = [i for i in items if key(i) is None]
        return sorted(present, key=key, reverse=descending) + absent

    # sorted() stays stable with reverse=True
    return sorted(items, key=key, reverse=descending)


def paginate(items: Sequence[InventoryItem], page: int, size: int) -> List[InventoryItem]:
    start = page * size
    return list(items[start:start + size])


def execute_query(items: Sequence[InventoryItem], query: SearchQuery) -> SearchResult:
    """Run the full filter -> sort -> page pipeline."""
    working = filter_by_criteria(items, query.criteria, query.by)
    working = filter_by_branches(working, query.branches)
    working = filter_by_availability(working, query.only_available)
    working = sort_items(working, query.sort)

    total = len(working)
    page_items = paginate(working, query.page, query.size)

    logger.debug(
        f"Query engine: {len(items)} rows -> {total} matched, "
        f"page {query.page} size {query.size} -> {len(page_items)} returned"
    )
    return SearchResult(total=total, items=page_items)
