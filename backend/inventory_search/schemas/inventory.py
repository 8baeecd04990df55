"""
Inventory schemas — query, record, result and envelope models.

Python code uses snake_case; every model serializes with camelCase
aliases so client and server share one wire format.
Version: 1.0.0
"""
from datetime import datetime
from enum import Enum
from typing import Generic, List, Literal, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory_search.core.constants.search import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    MAX_PAGE_SIZE,
)

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for models that travel over HTTP."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchBy(str, Enum):
    PART_NUMBER = "PartNumber"
    DESCRIPTION = "Description"
    SUPPLIER_SKU = "SupplierSku"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(WireModel):
    """Sort field (wire name, e.g. ``leadTimeDays``) and direction."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = SortDirection.ASC

    def to_param(self) -> str:
        return f"{self.field}:{self.direction.value}"


class SearchQuery(WireModel):
    """Immutable search request built per user action."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    criteria: str = ""
    by: SearchBy = SearchBy.PART_NUMBER
    branches: Tuple[str, ...] = ()
    only_available: bool = False
    page: int = Field(default=0, ge=0)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort: Optional[SortSpec] = None


class LotInfo(WireModel):
    lot_number: str
    qty: int
    expiration_date: Optional[datetime] = None


class InventoryItem(WireModel):
    """One inventory row as held by the repository."""
    part_number: str
    supplier_sku: Optional[str] = None
    description: Optional[str] = None
    branch: Optional[str] = None
    uom: Optional[str] = None
    lead_time_days: Optional[int] = None
    last_purchase_date: Optional[datetime] = None
    lots: List[LotInfo] = []
    available_qty: int = 0


class SearchResult(WireModel):
    total: int = Field(default=0, ge=0)
    items: List[InventoryItem] = []


class BranchAvailability(WireModel):
    branch: str
    qty: int


class PeakAvailability(WireModel):
    part_number: str
    total_available: int = 0
    branches: List[BranchAvailability] = []


class ResponseEnvelope(WireModel, Generic[T]):
    """``{isFailed, message, data}`` wrapper around every API payload."""
    is_failed: bool = False
    message: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def success(cls, data: T) -> "ResponseEnvelope[T]":
        return cls(is_failed=False, data=data)

    @classmethod
    def failure(cls, message: str) -> "ResponseEnvelope[T]":
        return cls(is_failed=True, message=message, data=None)


NoticeLevel = Literal["info", "warning", "error", "success"]


class Notice(BaseModel):
    """A user-facing message emitted on the notice channel."""
    model_config = ConfigDict(frozen=True)

    level: NoticeLevel
    text: str
