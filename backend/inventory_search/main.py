import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory_search.container import get_inventory_service, get_inventory_store
from inventory_search.core.config import Settings, settings
from inventory_search.core.middleware import apply_cors, apply_exception_handlers
from inventory_search.routes import build_api_router, health_router
from inventory_search.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    On startup:
    - Log repository size and cache/paging configuration

    On shutdown:
    - Log shutdown
    """
    logger.info("=== Inventory Search Starting ===")
    logger.info(
        f"Paging: default size {settings.default_page_size}, max size {settings.max_page_size}; "
        f"simulated latency {settings.response_delay_ms}ms"
    )
    logger.info(f"Inventory store holds {len(get_inventory_store())} rows")
    logger.info("=== Inventory Search Ready ===")

    yield

    logger.info("=== Inventory Search Shutting Down ===")


def create_app(service: InventoryService, app_settings: Settings, use_lifespan: bool = True) -> FastAPI:
    """Build the FastAPI app around an inventory service."""
    application = FastAPI(title="Inventory Search API", lifespan=lifespan if use_lifespan else None)
    apply_cors(application)
    apply_exception_handlers(application)
    application.include_router(health_router)
    application.include_router(build_api_router(service, app_settings))
    return application


logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

app = create_app(get_inventory_service(), settings)
