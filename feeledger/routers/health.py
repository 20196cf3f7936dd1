"""Health check endpoint."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from feeledger.catalog.registry import CatalogIntegrityError, get_catalog
from feeledger.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    environment: str
    catalog: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse, include_in_schema=False)
def health_check() -> HealthResponse:
    """
    Returns 200 with status "ok" when the service catalog loads and passes
    its integrity check, "degraded" otherwise.
    """
    try:
        get_catalog()
        catalog_ok = True
    except CatalogIntegrityError as exc:
        logger.error("Health check: %s", exc)
        catalog_ok = False
    return HealthResponse(
        status="ok" if catalog_ok else "degraded",
        environment=settings.environment,
        catalog="valid" if catalog_ok else "invalid",
    )
