"""
FastAPI application exposing the address catalog.

Run:
    uvicorn erpdesk.api.main:app --reload --port 8000
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from erpdesk.address import get_address_catalog
from erpdesk.config import get_config
from erpdesk.errors import DataUnavailable
from erpdesk.logging import get_logger

from . import address_router, health_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the catalog; a failure here is reported per request instead of blocking startup
    try:
        get_address_catalog()
    except DataUnavailable as e:
        logger.error(f"Address catalog unavailable at startup: {e}")
    yield


def create_app() -> FastAPI:
    """Build the API with the current configuration."""
    config = get_config()
    app = FastAPI(title=config.api_title, version=config.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(address_router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("erpdesk.api.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
