"""
Peak availability — per-branch and total quantities for one part number.
"""
from typing import Dict, Iterable

from inventory_search.schemas.inventory import BranchAvailability, InventoryItem, PeakAvailability


def aggregate_peak_availability(part_number: str, items: Iterable[InventoryItem]) -> PeakAvailability:
    """Group by branch (missing branch -> ""), preserving first-seen branch order."""
    per_branch: Dict[str, int] = {}
    for item in items:
        branch = item.branch or ""
        per_branch[branch] = per_branch.get(branch, 0) + item.available_qty

    branches = [BranchAvailability(branch=b, qty=q) for b, q in per_branch.items()]
    return PeakAvailability(
        part_number=part_number,
        total_available=sum(b.qty for b in branches),
        branches=branches,
    )
