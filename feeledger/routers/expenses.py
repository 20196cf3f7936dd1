"""
Expense record routes.

  POST /expenses/recompute  → group subtotals and grand total for the fee fields

The caller sends the fee fields after every edit together with the total it
currently displays. `changed` tells it whether the total needs re-rendering;
an unchanged total must not be written back, or the form's change detection
would trigger another recompute.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from feeledger.catalog.expense_fields import EXPENSE_FEE_PARTITION, TOTAL_FIELD
from feeledger.schemas.expense import ExpenseRecomputeRequest, ExpenseRecomputeResponse
from feeledger.services.aggregation.reactive_total import recompute_and_write_back
from feeledger.services.numerals.converter import to_legal_numeral

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("/recompute", response_model=ExpenseRecomputeResponse)
def recompute_expense_total(payload: ExpenseRecomputeRequest) -> ExpenseRecomputeResponse:
    unknown = sorted(set(payload.fields) - set(EXPENSE_FEE_PARTITION))
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown expense fee field(s): {', '.join(unknown)}",
        )

    state: dict[str, object] = dict(payload.fields)
    if payload.total_fee not in (None, ""):
        state[TOTAL_FIELD] = payload.total_fee

    result = recompute_and_write_back(state, EXPENSE_FEE_PARTITION, TOTAL_FIELD)
    return ExpenseRecomputeResponse(
        group_sums=result.group_sums,
        grand_total=result.grand_total,
        changed=result.changed,
        total_fee=result.grand_total,
        grand_total_in_words=to_legal_numeral(result.grand_total),
    )
