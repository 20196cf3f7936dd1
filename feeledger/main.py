"""
FastAPI application factory.

Uses lifespan context manager (preferred over on_event decorators in FastAPI 0.93+)
to run the catalog integrity check once at startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feeledger.catalog.registry import check_catalog_integrity, get_catalog
from feeledger.routers import catalog, contracts, expenses, health, numerals
from feeledger.settings import settings

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    logger.info("Starting fee ledger API [env=%s]", settings.environment)

    # Fail fast on a broken catalog
    if settings.check_catalog_on_startup:
        service_catalog = get_catalog()
        check_catalog_integrity(service_catalog)
        logger.info(
            "Service catalog verified: %d categories, %d items",
            len(service_catalog.categories),
            len(service_catalog.items),
        )

    yield  # ── Application runs here ──

    logger.info("Shutting down fee ledger API")


# ── App factory ───────────────────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title="Service Contract Fee Ledger",
        description=(
            "Fee engine for service contracts and expense records. "
            "Routes selected service items to their categories, rolls up "
            "per-category amounts, validates required fees, keeps expense "
            "totals in sync and renders amounts as Chinese legal numerals."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # ── CORS ──────────────────────────────────────────────────────────────────
    # Dev: allow all origins. Staging/prod: explicit allowlist from ALLOWED_ORIGINS env var.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(contracts.router)
    app.include_router(expenses.router)
    app.include_router(numerals.router)

    return app


app = create_app()
