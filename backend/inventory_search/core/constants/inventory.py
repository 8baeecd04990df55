"""
Inventory constants — pools and odds used by the mock inventory generator.

The mock repository draws from these pools so that generated data looks
plausible and spans enough rows for several pages at the default size.
Version: 1.0.0
"""

BRANCH_POOL: tuple[str, ...] = ("CLT", "DEN", "SLC", "SEA", "STL", "LAX")
PART_NUMBER_PREFIX_POOL: tuple[str, ...] = ("AI", "DB", "VM", "CI", "CD")
SUPPLIER_SKU_PREFIX_POOL: tuple[str, ...] = ("ORM", "SDK", "API", "GUI", "AWS")
UOM_POOL: tuple[str, ...] = ("GB", "TB", "MB", "KB", "PB")

DESCRIPTION_ADVERB_POOL: tuple[str, ...] = (
    "silently", "iteratively", "swiftly", "lazily", "rustily",
    "virtually", "scalably", "optimistically", "asyncly", "recursively",
)
DESCRIPTION_ADJECTIVE_POOL: tuple[str, ...] = (
    "recursive", "deprecated", "scalable", "mutable", "asynchronous",
    "out-of-support", "dynamic", "overengineered", "buggy", "misconfigured",
)
DESCRIPTION_NOUN_POOL: tuple[str, ...] = (
    "runtime", "interface", "program", "container", "algorithm",
    "cache", "syntax", "endpoint", "stacktrace", "operation",
)

PART_NUMBER_RANGE: tuple[int, int] = (1000, 10000)
SUPPLIER_SKU_RANGE: tuple[int, int] = (10005, 99995)
LEAD_TIME_RANGE: tuple[int, int] = (1, 35)
LOT_NUMBER_RANGE: tuple[int, int] = (1, 100000)
LOT_QTY_RANGE: tuple[int, int] = (1, 100)
LOT_EXPIRATION_DAYS_RANGE: tuple[int, int] = (30, 365)
LAST_PURCHASE_MONTHS: int = 6

CHANCE_OF_LAST_PURCHASE: float = 0.85
CHANCE_OF_LEAD_TIME: float = 0.85
CHANCE_OF_LOT: float = 0.3
CHANCE_OF_LOT_EXPIRATION: float = 0.5

UNIQUE_VALUE_MAX_ATTEMPTS: int = 50
