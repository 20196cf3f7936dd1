"""
Catalog API routes: static reference data for the contract and expense forms.

  GET /catalog   → categories with their items, document templates, expense fee fields
"""

from fastapi import APIRouter

from feeledger.catalog.expense_fields import (
    EXPENSE_FEE_GROUPS,
    EXPENSE_FEE_LABELS,
    EXPENSE_FEE_PARTITION,
)
from feeledger.catalog.registry import get_catalog
from feeledger.catalog.templates import TEMPLATES
from feeledger.schemas.catalog import (
    CatalogResponse,
    CategoryResponse,
    ExpenseFieldResponse,
    TemplateResponse,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
def get_service_catalog() -> CatalogResponse:
    catalog = get_catalog()
    return CatalogResponse(
        categories=[CategoryResponse.model_validate(c) for c in catalog.categories],
        templates=[TemplateResponse.model_validate(t) for t in TEMPLATES.values()],
        expense_fields=[
            ExpenseFieldResponse(
                field=field,
                label=EXPENSE_FEE_LABELS.get(field, field),
                group=group,
                group_label=EXPENSE_FEE_GROUPS[group],
            )
            for field, group in EXPENSE_FEE_PARTITION.items()
        ],
    )
