"""Expense record schemas: reactive fee total."""

from decimal import Decimal

from feeledger.schemas.common import BaseSchema

AmountInput = Decimal | str | None


class ExpenseRecomputeRequest(BaseSchema):
    fields: dict[str, AmountInput] = {}
    total_fee: AmountInput = None  # value currently shown in the total field


class ExpenseRecomputeResponse(BaseSchema):
    group_sums: dict[str, Decimal]
    grand_total: Decimal
    changed: bool  # False: the stored total already matched; nothing to re-render
    total_fee: Decimal
    grand_total_in_words: str
