"""
Selection ledger: per-document checked/amount state for catalog items.

One ledger lives for one editing session of one contract. It is the source
of truth for selections; rollups are derived from it on demand.

Invariant: an unchecked entry never carries an amount. Unchecking clears the
amount and re-checking starts from None, never from a stale value.

Single-writer: callers serialize mutations per ledger; there is no locking.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Mapping, Optional

from feeledger.catalog.registry import ServiceCatalog, UnknownItem, get_catalog
from feeledger.services.amounts.sanitizer import sanitize, to_money

logger = logging.getLogger(__name__)


@dataclass
class SelectionEntry:
    item_key: str
    checked: bool = False
    amount: Optional[Decimal] = None


class SelectionLedger:
    """
    Usage:
        ledger = SelectionLedger()
        ledger.set_checked("tax_filing", True)
        ledger.set_amount("tax_filing", "300")
    """

    def __init__(self, catalog: Optional[ServiceCatalog] = None):
        self.catalog = catalog or get_catalog()
        self._entries: dict[str, SelectionEntry] = {}

    # ── Mutations ─────────────────────────────────────────────────────────────

    def set_checked(self, item_key: str, checked: bool) -> SelectionEntry:
        """
        Check or uncheck an item. Unchecking forces amount back to None.
        Raises UnknownItem for keys that route to no category.
        """
        self.catalog.category_of(item_key)

        entry = self._entries.setdefault(item_key, SelectionEntry(item_key=item_key))
        entry.checked = bool(checked)
        if not entry.checked:
            entry.amount = None
        return entry

    def set_amount(self, item_key: str, raw_amount: object) -> bool:
        """
        Store the sanitized amount for a checked item.
        Returns False (and changes nothing) when the item is not checked.
        Input with no digits left after sanitizing clears the amount to None.
        """
        entry = self._entries.get(item_key)
        if entry is None or not entry.checked:
            logger.debug("Ignoring amount for unchecked item %r", item_key)
            return False

        if raw_amount is None or (
            isinstance(raw_amount, str) and sanitize(raw_amount).strip(".") == ""
        ):
            entry.amount = None
        else:
            entry.amount = to_money(raw_amount)
        return True

    def clear_category(self, category_id: str) -> int:
        """Uncheck every item of one category. Returns how many were unchecked."""
        cleared = 0
        for item_key in self.catalog.category(category_id).item_keys:
            entry = self._entries.get(item_key)
            if entry is not None and entry.checked:
                self.set_checked(item_key, False)
                cleared += 1
        return cleared

    # ── Reads ─────────────────────────────────────────────────────────────────

    def entry(self, item_key: str) -> SelectionEntry:
        """Current entry for a key; never-touched keys read as unchecked."""
        return self._entries.get(item_key) or SelectionEntry(item_key=item_key)

    def is_checked(self, item_key: str) -> bool:
        return self.entry(item_key).checked

    def checked_keys(self) -> list[str]:
        return [key for key, entry in self._entries.items() if entry.checked]

    def __iter__(self) -> Iterator[SelectionEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    # ── Rehydration ───────────────────────────────────────────────────────────

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Mapping[str, object],
        catalog: Optional[ServiceCatalog] = None,
    ) -> "SelectionLedger":
        """
        Rebuild a ledger from a persisted contract:
            {"taxMatters": [{"itemKey": "tax_filing", "itemName": "报税", "amount": 300}], ...}

        Every listed item comes back checked with its amount. Keys that no
        longer route to a category are logged and skipped.
        """
        ledger = cls(catalog)
        output_fields = {c.output_field for c in ledger.catalog.categories}

        for field_name, items in snapshot.items():
            if field_name not in output_fields or not isinstance(items, list):
                continue
            for item in items:
                if not isinstance(item, Mapping):
                    continue
                item_key = item.get("itemKey")
                if not item_key:
                    continue
                try:
                    ledger.set_checked(item_key, True)
                except UnknownItem:
                    logger.error(
                        "Skipping unknown item %r found in persisted bucket %r",
                        item_key,
                        field_name,
                    )
                    continue
                amount = item.get("amount")
                if amount not in (None, ""):
                    ledger.set_amount(item_key, amount)

        return ledger
