# restobill/app/main.py

"""
FastAPI application exposing the POS core as JSON endpoints.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from restobill import __version__
from restobill.core.config import get_settings
from restobill.core.exceptions import register_exception_handlers
from restobill.core.logging_config import configure_logging
from restobill.modules.analytics.routers.analytics_router import router as analytics_router
from restobill.modules.menu.routers.menu_router import router as menu_router
from restobill.modules.orders.routers.order_router import router as order_router
from restobill.modules.pos.services.pos_service import PosService
from restobill.modules.settings.routers.settings_router import router as settings_router
from restobill.modules.staff.routers.staff_router import router as staff_router
from restobill.modules.store.services.document_store import (
    DocumentStore,
    InMemoryDocumentStore,
)
from restobill.modules.store.services.seed_service import seed_if_empty
from restobill.modules.store.services.sql_document_store import SqlDocumentStore
from restobill.modules.tables.routers.table_router import router as table_router

logger = logging.getLogger(__name__)


def build_store() -> DocumentStore:
    """Document store for the configured backend"""
    settings = get_settings()
    if settings.uses_sql_store:
        logger.info("Using SQL document store")
        return SqlDocumentStore()
    logger.info("Using in-memory document store")
    return InMemoryDocumentStore()


def create_app(store: Optional[DocumentStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Build the application.

    Args:
        store: Document store to use; defaults to the configured backend
        seed: Override the ``seed_on_startup`` setting
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        document_store = store or build_store()
        if settings.seed_on_startup if seed is None else seed:
            await seed_if_empty(document_store)

        pos_service = PosService(document_store)
        await pos_service.start()
        app.state.pos_service = pos_service
        logger.info(f"RestoBill started in {settings.environment} mode")
        try:
            yield
        finally:
            pos_service.stop()
            logger.info("RestoBill stopped")

    app = FastAPI(
        title="RestoBill",
        description="Tables, orders, billing and sales reports for a single restaurant",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(table_router)
    app.include_router(order_router)
    app.include_router(analytics_router)
    app.include_router(menu_router)
    app.include_router(staff_router)
    app.include_router(settings_router)

    @app.get("/", tags=["Health"])
    def read_root():
        return {"status": "ok", "service": "restobill", "version": __version__}

    return app


configure_logging()
app = create_app()
