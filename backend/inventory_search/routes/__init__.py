"""
Route aggregation module.

Combines the inventory router under the /api prefix.
Health is exported separately for main.py to mount at root.
Version: 1.0.0
"""
from fastapi import APIRouter

from inventory_search.core.config import Settings
from inventory_search.routes.health import router as health_router
from inventory_search.routes.inventory import build_inventory_router
from inventory_search.services.inventory_service import InventoryService


def build_api_router(service: InventoryService, settings: Settings) -> APIRouter:
    api_router = APIRouter(prefix="/api")
    api_router.include_router(build_inventory_router(service, settings))
    return api_router


__all__ = ["build_api_router", "health_router"]
