"""
Chinese legal-numeral (大写金额) rendering for printed contracts and receipts.

    convert(Decimal("100200"))   -> "壹拾万零贰佰元整"
    convert(Decimal("1000.08"))  -> "壹仟元零捌分"

The integer part is walked digit by digit from the most significant end,
with a pending-zero counter that collapses any run of zeros into one 零 in
front of the next non-zero digit. Group units (万/亿/兆) are appended at
every 4-digit group boundary unless the whole group was zeros.

convert() raises; to_legal_numeral() is the entry point for document
rendering and degrades to "" so a bad amount blanks the field instead of
failing the page.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from feeledger.services.amounts.sanitizer import CENT, InvalidAmountInput, coerce_money

logger = logging.getLogger(__name__)

# Amounts at or above 10^15 need a unit beyond 兆
MAX_AMOUNT = Decimal(10) ** 15

DIGITS = ("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")
RADIX_UNITS = ("", "拾", "佰", "仟")
GROUP_UNITS = ("", "万", "亿", "兆")

ZERO_NUMERAL = DIGITS[0]
CURRENCY_UNIT = "元"
JIAO_UNIT = "角"
FEN_UNIT = "分"
EXACT_MARK = "整"
ZERO_EXACT = ZERO_NUMERAL + CURRENCY_UNIT + EXACT_MARK  # 零元整


class OutOfRange(ValueError):
    """Amount is negative or too large to be written with 兆 as the top unit."""


def _to_decimal(amount: object) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountInput(f"Cannot render boolean {amount!r} as an amount")
    try:
        if isinstance(amount, Decimal):
            value = amount
        elif isinstance(amount, (int, float, str)):
            value = Decimal(str(amount).strip())
        else:
            raise InvalidAmountInput(f"Unsupported amount type {type(amount).__name__}")
    except InvalidOperation:
        raise InvalidAmountInput(f"Cannot render {amount!r} as an amount")
    if not value.is_finite():
        raise InvalidAmountInput(f"Amount {amount!r} is not finite")
    return value


def _integer_numeral(integer: int) -> str:
    digits = str(integer)
    length = len(digits)
    parts: list[str] = []
    zero_count = 0

    for i, ch in enumerate(digits):
        p = length - i - 1
        q, m = divmod(p, 4)
        d = int(ch)
        if d == 0:
            zero_count += 1
        else:
            if zero_count > 0:
                parts.append(ZERO_NUMERAL)
            zero_count = 0
            parts.append(DIGITS[d] + RADIX_UNITS[m])
        # a group made only of zeros gets no 万/亿 marker
        if m == 0 and zero_count < 4:
            parts.append(GROUP_UNITS[q])

    return "".join(parts)


def convert(amount: object) -> str:
    """
    Render a non-negative amount as a legal numeral.

    Raises:
        OutOfRange: amount < 0 or amount >= 10^15 after rounding to cents.
        InvalidAmountInput: amount is not a number.
    """
    value = _to_decimal(amount)
    if value < 0:
        raise OutOfRange(f"Cannot render negative amount {value}")
    if value >= MAX_AMOUNT:
        raise OutOfRange(f"Amount {value} exceeds the supported maximum")

    cents = int((value.quantize(CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())
    if cents >= MAX_AMOUNT * 100:
        raise OutOfRange(f"Amount {value} exceeds the supported maximum")
    if cents == 0:
        return ZERO_EXACT

    integer, fraction = divmod(cents, 100)
    jiao, fen = divmod(fraction, 10)

    result = ""
    if integer > 0:
        result = _integer_numeral(integer) + CURRENCY_UNIT

    if jiao > 0:
        result += DIGITS[jiao] + JIAO_UNIT
    if fen > 0:
        if jiao == 0 and integer > 0:
            result += ZERO_NUMERAL
        result += DIGITS[fen] + FEN_UNIT

    if jiao == 0 and fen == 0:
        result += EXACT_MARK

    return result


def to_legal_numeral(amount: object) -> str:
    """
    Render amount for display. Never raises; returns "" when the amount is
    out of range or unreadable.
    """
    try:
        return convert(amount)
    except (OutOfRange, InvalidAmountInput) as exc:
        logger.warning("Legal numeral left blank: %s", exc)
        return ""


def contract_total_in_words(total_cost: object) -> str:
    """
    Numeral view of an author-entered contract total. Blank until the total
    is a positive amount; recomputed on every call, never stored.
    """
    value = coerce_money(total_cost)
    if value <= 0:
        return ""
    return to_legal_numeral(value)
