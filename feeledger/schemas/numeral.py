"""Legal numeral schemas."""

from decimal import Decimal

from feeledger.schemas.common import BaseSchema


class NumeralRequest(BaseSchema):
    amount: Decimal | str


class NumeralResponse(BaseSchema):
    amount: str
    numeral: str  # "" when the amount is negative, too large or unreadable
