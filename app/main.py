from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import ServerSettings, get_server_settings
from app.logging_utils import configure_logging
from app.repositories.vendor_store import InMemoryVendorStore

logger = logging.getLogger(__name__)


def build_vendor_store(settings: ServerSettings) -> InMemoryVendorStore:
    """
    Construct the process-wide store, seeded with demo data when enabled.
    """

    store = InMemoryVendorStore()
    if settings.seed_demo_data:
        store.seed_demo_data()
    return store


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Log the vendor store state on boot and on shutdown."""
    store: InMemoryVendorStore = application.state.vendor_store
    logger.info("Vendor store ready with %d ledger entries", len(store.ledger_entries()))
    try:
        yield
    finally:
        logger.info("Vendor analytics API shut down")


def create_app(
    store: InMemoryVendorStore | None = None,
    settings: ServerSettings | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    A caller-supplied *store* is used as-is; otherwise a fresh one is built
    from *settings*.
    """

    settings = settings or get_server_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Vendor Insight API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    application.state.vendor_store = store if store is not None else build_vendor_store(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from app.api.routers import vendor_router

    application.include_router(vendor_router)

    @application.get("/health")
    def healthcheck() -> dict:
        return {"status": "ok"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_server_settings()
    uvicorn.run("app.main:app", host=_settings.host, port=_settings.port)
