"""
Legal numeral route.

  POST /numerals  → Chinese legal numeral for an amount ("" when out of range)

Text amounts go through the same sanitize-then-parse pipeline as fee fields;
text with no digits at all renders blank.
"""

from fastapi import APIRouter

from feeledger.schemas.numeral import NumeralRequest, NumeralResponse
from feeledger.services.amounts.sanitizer import sanitize, to_money
from feeledger.services.numerals.converter import to_legal_numeral

router = APIRouter(prefix="/numerals", tags=["numerals"])


@router.post("", response_model=NumeralResponse)
def render_numeral(payload: NumeralRequest) -> NumeralResponse:
    amount = payload.amount
    if isinstance(amount, str):
        if not sanitize(amount).strip("."):
            return NumeralResponse(amount=amount, numeral="")
        amount = to_money(amount)
    return NumeralResponse(amount=str(amount), numeral=to_legal_numeral(amount))
