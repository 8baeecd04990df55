"""
Validation boundary for inventory search parameters.

Raw query-string values are checked here, before the query engine ever
runs, and turned into a typed SearchQuery. Any rejection raises
ValidationError with the user-facing message. Field names and
directions are accepted case-insensitively and canonicalized.
"""
import logging
from typing import Optional, Tuple

from inventory_search.core.constants.search import (
    MAX_PAGE_SIZE,
    NON_SORTABLE_FIELDS,
    SEARCH_BY_FIELDS,
    SORT_DIRECTIONS,
    SORTABLE_FIELDS,
)
from inventory_search.core.exceptions import ValidationError
from inventory_search.schemas.inventory import SearchBy, SearchQuery, SortDirection, SortSpec

logger = logging.getLogger(__name__)

_SEARCH_BY_LOOKUP = {name.lower(): name for name in SEARCH_BY_FIELDS}
_SORTABLE_LOOKUP = {name.lower(): name for name in SORTABLE_FIELDS}
_NON_SORTABLE_LOOKUP = {name.lower() for name in NON_SORTABLE_FIELDS}


def parse_sort(sort: Optional[str]) -> Tuple[str, str]:
    """Split ``field[:direction]``; missing direction means asc."""
    parts = [p.strip() for p in (sort or "").split(":") if p.strip()]
    field = parts[0] if parts else ""
    direction = parts[1] if len(parts) > 1 else "asc"
    return field, direction


def parse_branches(branches: Optional[str]) -> Tuple[str, ...]:
    """Comma-separated branch list; blank entries are dropped."""
    return tuple(b.strip() for b in (branches or "").split(",") if b.strip())


def validate_search_params(
    criteria: Optional[str] = "",
    by: Optional[str] = "PartNumber",
    branches: Optional[str] = "",
    only_available: bool = False,
    page: int = 0,
    size: int = 20,
    sort: Optional[str] = "",
    max_page_size: int = MAX_PAGE_SIZE,
    fail: bool = False,
) -> SearchQuery:
    """
    Validate raw search parameters and build a SearchQuery.

    Raises:
        ValidationError: bad page, size, by, sort field or sort direction,
            or a simulated failure was requested with ``fail``
    """
    sort_field, sort_direction = parse_sort(sort)

    if sort_field and sort_field.lower() in _NON_SORTABLE_LOOKUP:
        logger.warning(f"Sort field {sort_field} is not sortable.")
        raise ValidationError("supplierSku and lots are not sortable fields.")

    if fail:
        logger.warning("Simulated failure requested for search.")
        raise ValidationError("Simulated failure requested.")

    if page < 0:
        logger.warning(f"Invalid page value {page} supplied.")
        raise ValidationError("Page must be zero or greater.")

    if size <= 0 or size > max_page_size:
        logger.warning(f"Invalid size value {size} supplied.")
        raise ValidationError(f"Size must be between 1 and {max_page_size}.")

    canonical_by = _SEARCH_BY_LOOKUP.get((by or "").lower())
    if canonical_by is None:
        logger.warning(f"Invalid search field {by} supplied.")
        raise ValidationError(f"Search field must be one of: {', '.join(SEARCH_BY_FIELDS)}.")

    canonical_sort_field = _SORTABLE_LOOKUP.get(sort_field.lower()) if sort_field else None
    if sort_field and canonical_sort_field is None:
        logger.warning(f"Invalid sort field {sort_field} supplied.")
        raise ValidationError("Sort field is not supported.")

    if sort_direction.lower() not in SORT_DIRECTIONS:
        logger.warning(f"Invalid sort direction {sort_direction} supplied.")
        raise ValidationError("Sort direction must be asc or desc.")

    sort_spec = None
    if canonical_sort_field:
        sort_spec = SortSpec(field=canonical_sort_field, direction=SortDirection(sort_direction.lower()))

    return SearchQuery(
        criteria=criteria or "",
        by=SearchBy(canonical_by),
        branches=parse_branches(branches),
        only_available=only_available,
        page=page,
        size=size,
        sort=sort_spec,
    )


def validate_part_number(part_number: Optional[str]) -> str:
    """
    Raises:
        ValidationError: part number missing or blank
    """
    if not part_number or not part_number.strip():
        logger.warning("Missing part number for peak availability request.")
        raise ValidationError("Part number is required.")
    return part_number.strip()
