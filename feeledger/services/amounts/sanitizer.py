"""
Amount sanitizer: turns free-text fee input into Money.

Money is a Decimal quantized to cents (ROUND_HALF_UP, i.e. half away from
zero). Floats are routed through str() so binary artifacts never reach the
cents digit.

Two readers:
  parse(raw)    : numeric reading of the text as typed; rounds to cents.
                  parse("12.345") == Decimal("12.35")
  to_money(raw) : sanitize first, then parse. This is the pipeline every
                  form field goes through; the fraction is truncated, not
                  rounded. to_money("12.345") == Decimal("12.34")

Neither reader raises: garbage becomes 0.00. parse_strict() is available
for callers that want the InvalidAmountInput exception instead.
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")
_VALID_AMOUNT = re.compile(r"[0-9]*(\.[0-9]{1,2})?")


class InvalidAmountInput(ValueError):
    """Raised by parse_strict() when text cannot be read as an amount."""


def sanitize(raw: object) -> str:
    """
    Strip everything but digits and '.', keep the first '.' as the decimal
    separator and truncate the fraction to two digits.

        sanitize("¥1,234.5")   -> "1234.5"
        sanitize("1.2.3.4")    -> "1.23"
        sanitize("abc")        -> ""
    """
    if raw is None:
        return ""
    cleaned = _NON_AMOUNT_CHARS.sub("", str(raw))
    if "." not in cleaned:
        return cleaned
    head, _, tail = cleaned.partition(".")
    # later separators are dropped; their digit runs join the fraction
    return f"{head}.{tail.replace('.', '')[:2]}"


def is_valid(raw: str) -> bool:
    """True for "" (not entered yet) and for digits with an optional 1–2 digit fraction."""
    return _VALID_AMOUNT.fullmatch(raw or "") is not None


def format_amount(raw: object) -> str:
    """Display form of a field once the user leaves it: sanitized, no dangling '.'."""
    return sanitize(raw).rstrip(".")


def parse_strict(raw: object) -> Decimal:
    """Read raw as Money. Raises InvalidAmountInput on anything unreadable."""
    if isinstance(raw, bool):
        raise InvalidAmountInput(f"Cannot convert boolean {raw!r} to an amount")

    try:
        if isinstance(raw, Decimal):
            value = raw
        elif isinstance(raw, (int, float)):
            value = Decimal(str(raw))
        elif isinstance(raw, str):
            text = raw.strip()
            if not text:
                raise InvalidAmountInput("Cannot convert empty value to an amount")
            value = Decimal(text)
        else:
            raise InvalidAmountInput(f"Unsupported amount type {type(raw).__name__}")

        if not value.is_finite():
            raise InvalidAmountInput(f"Amount {raw!r} is not finite")
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountInput(f"Cannot convert {raw!r} to a monetary Decimal")


def parse(raw: object) -> Decimal:
    """
    Lenient reader: empty or non-numeric input yields 0.00, a leading minus
    sign is kept. Never raises.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return ZERO
    try:
        return parse_strict(raw)
    except InvalidAmountInput as exc:
        logger.warning("Treating unreadable amount as 0.00: %s", exc)
        return ZERO


def to_money(raw: object) -> Decimal:
    """Sanitize-then-parse; the default pipeline for text typed into a fee field."""
    if isinstance(raw, (Decimal, int, float)) and not isinstance(raw, bool):
        return parse(raw)
    return parse(sanitize(raw))


def coerce_money(value: object) -> Decimal:
    """
    Read a caller-supplied field value of any shape as Money.
    Missing values count as 0.00; unsupported types are logged and count as 0.00.
    """
    if value is None:
        return ZERO
    if isinstance(value, str):
        return to_money(value)
    if isinstance(value, (Decimal, int, float)) and not isinstance(value, bool):
        return parse(value)
    logger.warning("Ignoring fee value of unsupported type %s", type(value).__name__)
    return ZERO
