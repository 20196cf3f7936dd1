"""
Category rollup: the derived, per-category view of a selection ledger.

Recomputed on every call from the ledger; nothing here is stored. The
persisted form (rollup_snapshot) is what the contract storage collaborator
saves: one list per category output field, with empty categories omitted so
a category that was selected and later cleared leaves nothing behind.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from feeledger.services.amounts.sanitizer import ZERO
from feeledger.services.ledger.selection_ledger import SelectionEntry, SelectionLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollupItem:
    item_key: str
    item_name: str
    amount: Decimal

    def to_dict(self) -> dict:
        return {"itemKey": self.item_key, "itemName": self.item_name, "amount": self.amount}


@dataclass(frozen=True)
class CategoryRollup:
    category_id: str
    output_field: str
    fee_field: str
    items: tuple[RollupItem, ...]

    @property
    def has_selection(self) -> bool:
        return len(self.items) > 0

    @property
    def subtotal(self) -> Decimal:
        return sum((item.amount for item in self.items), ZERO)


def _checked_by_category(ledger: SelectionLedger) -> dict[str, list[SelectionEntry]]:
    catalog = ledger.catalog
    buckets: dict[str, list[SelectionEntry]] = {c.category_id: [] for c in catalog.categories}
    for entry in ledger:
        if entry.checked:
            buckets[catalog.category_of(entry.item_key)].append(entry)
    return buckets


def rollup(ledger: SelectionLedger) -> list[CategoryRollup]:
    """
    One CategoryRollup per catalog category, in catalog order. Items are in
    catalog order; a checked item without an amount reports 0.00.
    """
    catalog = ledger.catalog
    buckets = _checked_by_category(ledger)
    result: list[CategoryRollup] = []

    for category in catalog.categories:
        position = {key: i for i, key in enumerate(category.item_keys)}
        entries = sorted(
            buckets[category.category_id],
            key=lambda e: position.get(e.item_key, len(position)),
        )
        items = tuple(
            RollupItem(
                item_key=e.item_key,
                item_name=catalog.display_name(e.item_key),
                amount=e.amount if e.amount is not None else ZERO,
            )
            for e in entries
        )
        result.append(
            CategoryRollup(
                category_id=category.category_id,
                output_field=category.output_field,
                fee_field=category.fee_field,
                items=items,
            )
        )

    return result


def requires_category_fee(category_id: str, ledger: SelectionLedger) -> bool:
    """True once any item of the category is checked."""
    item_keys = ledger.checked_keys()
    catalog = ledger.catalog
    catalog.category(category_id)  # unknown ids raise KeyError
    return any(catalog.category_of(key) == category_id for key in item_keys)


def selected_category_ids(ledger: SelectionLedger) -> list[str]:
    """Categories with at least one checked item, in catalog order."""
    return [c.category_id for c in rollup(ledger) if c.has_selection]


def rollup_snapshot(ledger: SelectionLedger) -> dict[str, list[dict]]:
    """
    Persisted shape: {outputField: [{itemKey, itemName, amount}, ...]}.
    Categories with no selection are omitted, not emitted as [].
    """
    snapshot = {
        category.output_field: [item.to_dict() for item in category.items]
        for category in rollup(ledger)
        if category.has_selection
    }
    logger.debug("Rollup snapshot covers %d categories", len(snapshot))
    return snapshot


def category_subtotal(category: CategoryRollup) -> Decimal:
    """Sum of the item amounts listed under one category."""
    return category.subtotal
