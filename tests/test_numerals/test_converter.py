"""
Legal numeral converter tests.
Zero runs, 万/亿 grouping and the 角/分 tail are where the edge cases live.
"""

import pytest
from decimal import Decimal

from feeledger.services.numerals.converter import (
    ZERO_EXACT,
    OutOfRange,
    contract_total_in_words,
    convert,
    to_legal_numeral,
)


class TestConvert:

    # ── Integer part ─────────────────────────────────────────────────────────

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("0"),            "零元整"),
        (Decimal("1"),            "壹元整"),
        (Decimal("10"),           "壹拾元整"),
        (Decimal("100"),          "壹佰元整"),
        (Decimal("1001"),         "壹仟零壹元整"),
        (Decimal("10000"),        "壹万元整"),
        (Decimal("100200"),       "壹拾万零贰佰元整"),
        (Decimal("105000"),       "壹拾万零伍仟元整"),
        (Decimal("100000000"),    "壹亿元整"),
        (Decimal("100010000"),    "壹亿零壹万元整"),
        (Decimal("123456789"),    "壹亿贰仟叁佰肆拾伍万陆仟柒佰捌拾玖元整"),
    ])
    def test_integer_amounts(self, amount, expected):
        assert convert(amount) == expected

    def test_group_of_zeros_gets_no_unit(self):
        assert "万" not in convert(Decimal("100000001"))

    # ── Fractional part ──────────────────────────────────────────────────────

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("100.5"),     "壹佰元伍角"),
        (Decimal("12.34"),     "壹拾贰元叁角肆分"),
        (Decimal("1000.08"),   "壹仟元零捌分"),
        (Decimal("0.5"),       "伍角"),
        (Decimal("0.05"),      "伍分"),
        (Decimal("0.55"),      "伍角伍分"),
    ])
    def test_fractional_amounts(self, amount, expected):
        assert convert(amount) == expected

    def test_exact_mark_only_without_fraction(self):
        assert convert(Decimal("100.00")).endswith("整")
        assert not convert(Decimal("100.50")).endswith("整")

    def test_rounds_to_cents_half_up(self):
        assert convert(Decimal("1.005")) == "壹元零壹分"

    def test_accepts_text_and_int(self):
        assert convert("100") == "壹佰元整"
        assert convert(100) == "壹佰元整"

    def test_zero_constant(self):
        assert convert(Decimal("0.001")) == ZERO_EXACT

    # ── Range ────────────────────────────────────────────────────────────────

    def test_negative_raises(self):
        with pytest.raises(OutOfRange):
            convert(Decimal("-1"))

    def test_ten_to_the_fifteenth_raises(self):
        with pytest.raises(OutOfRange):
            convert(Decimal(10) ** 15)

    def test_rounding_up_into_overflow_raises(self):
        with pytest.raises(OutOfRange):
            convert(Decimal("999999999999999.995"))

    def test_largest_supported_amount(self):
        numeral = convert(Decimal("999999999999999.99"))
        assert numeral.startswith("玖佰玖拾玖兆")
        assert numeral.endswith("玖角玖分")


class TestToLegalNumeral:
    def test_passes_through(self):
        assert to_legal_numeral(Decimal("100200")) == "壹拾万零贰佰元整"

    @pytest.mark.parametrize("amount", [Decimal("-0.01"), Decimal(10) ** 15, "abc", None])
    def test_blank_on_failure(self, amount):
        assert to_legal_numeral(amount) == ""


class TestContractTotalInWords:
    def test_positive_total(self):
        assert contract_total_in_words("5000") == "伍仟元整"

    def test_text_is_sanitized(self):
        assert contract_total_in_words("¥5,000") == "伍仟元整"

    @pytest.mark.parametrize("total", [None, "", "0", Decimal("0"), "abc"])
    def test_blank_until_positive(self, total):
        assert contract_total_in_words(total) == ""

    def test_recomputed_on_each_call(self):
        assert contract_total_in_words("100") == "壹佰元整"
        assert contract_total_in_words("100.5") == "壹佰元伍角"
