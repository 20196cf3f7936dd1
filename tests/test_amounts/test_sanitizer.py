"""
Amount sanitizer tests.
Covers both readers: parse() rounds the text as typed, to_money() truncates
after sanitizing.
"""

import pytest
from decimal import Decimal

from feeledger.services.amounts.sanitizer import (
    ZERO,
    InvalidAmountInput,
    coerce_money,
    format_amount,
    is_valid,
    parse,
    parse_strict,
    sanitize,
    to_money,
)


class TestSanitize:
    @pytest.mark.parametrize("raw,expected", [
        ("¥1,234.5",   "1234.5"),
        ("1.2.3.4",    "1.23"),
        ("12.345",     "12.34"),
        ("abc",        ""),
        ("12.",        "12."),
        ("-5",         "5"),
        (" 8 0 0 ",    "800"),
        ("",           ""),
    ])
    def test_sanitize(self, raw, expected):
        assert sanitize(raw) == expected

    def test_none_is_empty(self):
        assert sanitize(None) == ""

    def test_number_input_is_stringified(self):
        assert sanitize(12.5) == "12.5"

    @pytest.mark.parametrize("raw", ["¥1,234.5", "1.2.3.4", "abc", "12.", "..9", "0.999"])
    def test_idempotent(self, raw):
        assert sanitize(sanitize(raw)) == sanitize(raw)

    def test_fraction_never_longer_than_two_digits(self):
        for raw in ("0.999", "1.2.3.4.5", "7..123"):
            _, _, fraction = sanitize(raw).partition(".")
            assert len(fraction) <= 2


class TestIsValid:
    @pytest.mark.parametrize("raw", ["", "0", "12", "12.3", "12.34", ".5"])
    def test_valid(self, raw):
        assert is_valid(raw) is True

    @pytest.mark.parametrize("raw", ["12.345", "12.", "a", "1,000", "-1", "1.2.3"])
    def test_invalid(self, raw):
        assert is_valid(raw) is False


class TestFormatAmount:
    def test_dangling_separator_removed(self):
        assert format_amount("12.") == "12"

    def test_keeps_fraction(self):
        assert format_amount("¥12.50") == "12.50"


class TestParse:
    def test_rounds_half_up(self):
        assert parse("12.345") == Decimal("12.35")

    def test_float_goes_through_str(self):
        # binary 1.005 is 1.00499999...; the str() route keeps it at 1.005
        assert parse(1.005) == Decimal("1.01")

    def test_empty_is_zero(self):
        assert parse("") == ZERO
        assert parse(None) == ZERO

    def test_garbage_is_zero(self):
        assert parse("abc") == ZERO

    def test_minus_sign_kept(self):
        assert parse("-3") == Decimal("-3.00")

    def test_always_two_places(self):
        assert str(parse(Decimal("2"))) == "2.00"


class TestParseStrict:
    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", True, [1]])
    def test_rejects(self, raw):
        with pytest.raises(InvalidAmountInput):
            parse_strict(raw)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_strict("x")

    def test_int(self):
        assert parse_strict(800) == Decimal("800.00")


class TestToMoney:
    @pytest.mark.parametrize("raw,expected", [
        ("12.345",     Decimal("12.34")),
        ("¥1,234.5",   Decimal("1234.50")),
        ("abc",        ZERO),
        ("-3",         Decimal("3.00")),
        (".",          ZERO),
        ("",           ZERO),
    ])
    def test_sanitize_then_parse(self, raw, expected):
        assert to_money(raw) == expected

    def test_numbers_are_rounded_not_truncated(self):
        assert to_money(Decimal("12.345")) == Decimal("12.35")

    def test_result_is_never_negative_for_text(self):
        assert to_money("-0.5") >= 0


class TestCoerceMoney:
    def test_none_is_zero(self):
        assert coerce_money(None) == ZERO

    def test_text_uses_sanitize_pipeline(self):
        assert coerce_money("1,000") == Decimal("1000.00")

    def test_unsupported_type_is_zero(self):
        assert coerce_money({"amount": 5}) == ZERO

    def test_bool_is_not_an_amount(self):
        assert coerce_money(True) == ZERO
