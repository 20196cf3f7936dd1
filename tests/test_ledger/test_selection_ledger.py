"""
Selection ledger tests.
The invariant under test throughout: an unchecked entry never carries an amount.
"""

import pytest
from decimal import Decimal

from feeledger.catalog.registry import UnknownItem
from feeledger.services.ledger.selection_ledger import SelectionLedger


class TestSetChecked:
    def test_check_starts_without_amount(self, ledger):
        entry = ledger.set_checked("tax_filing", True)
        assert entry.checked is True
        assert entry.amount is None

    def test_uncheck_clears_amount(self, ledger):
        ledger.set_checked("tax_filing", True)
        ledger.set_amount("tax_filing", "300")
        ledger.set_checked("tax_filing", False)
        assert ledger.entry("tax_filing").amount is None

    def test_recheck_does_not_restore_stale_amount(self, ledger):
        ledger.set_checked("tax_filing", True)
        ledger.set_amount("tax_filing", "300")
        ledger.set_checked("tax_filing", False)
        ledger.set_checked("tax_filing", True)
        assert ledger.entry("tax_filing").amount is None

    def test_unknown_key_rejected(self, ledger):
        with pytest.raises(UnknownItem):
            ledger.set_checked("mystery_item", True)
        assert len(ledger) == 0

    def test_checked_keys(self, ledger):
        ledger.set_checked("tax_filing", True)
        ledger.set_checked("bank_loan", True)
        ledger.set_checked("bank_loan", False)
        assert ledger.checked_keys() == ["tax_filing"]

    def test_untouched_key_reads_unchecked(self, ledger):
        assert ledger.is_checked("license_food") is False
        assert ledger.entry("license_food").amount is None


class TestSetAmount:
    def test_amount_is_sanitized(self, ledger):
        ledger.set_checked("tax_filing", True)
        assert ledger.set_amount("tax_filing", "¥1,234.567") is True
        assert ledger.entry("tax_filing").amount == Decimal("1234.56")

    def test_number_amount(self, ledger):
        ledger.set_checked("tax_filing", True)
        ledger.set_amount("tax_filing", 300)
        assert ledger.entry("tax_filing").amount == Decimal("300.00")

    def test_ignored_when_unchecked(self, ledger):
        assert ledger.set_amount("tax_filing", "300") is False
        assert ledger.entry("tax_filing").amount is None

    def test_ignored_after_uncheck(self, ledger):
        ledger.set_checked("tax_filing", True)
        ledger.set_checked("tax_filing", False)
        assert ledger.set_amount("tax_filing", "300") is False
        assert ledger.entry("tax_filing").amount is None

    @pytest.mark.parametrize("raw", [None, "", ".", "abc"])
    def test_input_without_digits_clears(self, ledger, raw):
        ledger.set_checked("tax_filing", True)
        ledger.set_amount("tax_filing", "300")
        ledger.set_amount("tax_filing", raw)
        assert ledger.entry("tax_filing").amount is None


class TestClearCategory:
    def test_unchecks_every_item_of_the_category(self, tax_and_bank_ledger):
        cleared = tax_and_bank_ledger.clear_category("tax")
        assert cleared == 2
        assert tax_and_bank_ledger.checked_keys() == ["bank_basic_account"]
        assert tax_and_bank_ledger.entry("tax_filing").amount is None

    def test_unknown_category(self, ledger):
        with pytest.raises(KeyError):
            ledger.clear_category("catering")


class TestFromSnapshot:
    def test_rehydrates_checked_items_with_amounts(self, catalog):
        ledger = SelectionLedger.from_snapshot(
            {
                "taxMatters": [
                    {"itemKey": "tax_filing", "itemName": "报税", "amount": 300},
                    {"itemKey": "tax_change", "itemName": "税务变更", "amount": None},
                ],
                "bankMatters": [{"itemKey": "bank_loan", "itemName": "贷款服务", "amount": "1,000"}],
            },
            catalog,
        )
        assert set(ledger.checked_keys()) == {"tax_filing", "tax_change", "bank_loan"}
        assert ledger.entry("tax_filing").amount == Decimal("300.00")
        assert ledger.entry("tax_change").amount is None
        assert ledger.entry("bank_loan").amount == Decimal("1000.00")

    def test_unknown_keys_skipped(self, catalog):
        ledger = SelectionLedger.from_snapshot(
            {"taxMatters": [{"itemKey": "retired_item", "amount": 5}]}, catalog
        )
        assert len(ledger) == 0

    def test_non_bucket_fields_ignored(self, catalog):
        ledger = SelectionLedger.from_snapshot(
            {"totalCost": 500, "taxServiceFee": 200, "taxMatters": "corrupt"}, catalog
        )
        assert ledger.checked_keys() == []
