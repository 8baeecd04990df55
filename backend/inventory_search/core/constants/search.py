"""
Search constants — allowed fields, paging bounds, notice texts.

Every rule the validation boundary and the query engine must agree on
lives here.
Version: 1.0.0
"""

MAX_PAGE_SIZE: int = 200
DEFAULT_PAGE_SIZE: int = 20

# Values accepted for the ``by`` parameter (exact, case-sensitive on the client;
# the boundary accepts any casing and canonicalizes)
SEARCH_BY_FIELDS: tuple[str, ...] = ("PartNumber", "Description", "SupplierSku")
DEFAULT_SEARCH_BY: str = "PartNumber"

SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")

# Wire names of the sortable InventoryItem fields
SORTABLE_FIELDS: tuple[str, ...] = (
    "partNumber",
    "description",
    "availableQty",
    "branch",
    "uom",
    "leadTimeDays",
    "lastPurchaseDate",
)
DEFAULT_SORT_FIELD: str = "partNumber"

# Present on InventoryItem but never sortable
NON_SORTABLE_FIELDS: tuple[str, ...] = ("supplierSku", "lots")

# Sort fields whose value may be absent; absent values always sort last
NULLABLE_SORT_FIELDS: tuple[str, ...] = ("leadTimeDays", "lastPurchaseDate")

# Notice texts
CANCELLED_NOTICE: str = "Previous search cancelled."
SEARCH_FAILED_MESSAGE: str = "Search failed"
NO_INVENTORY_MESSAGE: str = "No inventory found for the provided criteria."
PART_NOT_FOUND_MESSAGE: str = "Part number not found."
