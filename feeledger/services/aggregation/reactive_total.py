"""
Reactive total for expense records.

A fixed set of atomic fee fields is partitioned into named groups. Any field
edit triggers recompute(), which sums every group and the grand total from
the post-edit values. The grand total is then written back into the
caller's total field, but only when it differs from what is stored there.
That guard is what keeps write → change-detection → recompute from
looping: a second recompute over unchanged inputs performs no write and
reports changed=False.

recompute() itself is pure. The only side effect in this module is the
guarded write in write_back_total().
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, MutableMapping, Optional

from feeledger.catalog.expense_fields import (
    EXPENSE_FEE_GROUPS,
    EXPENSE_FEE_PARTITION,
    TOTAL_FIELD,
)
from feeledger.services.amounts.sanitizer import ZERO, coerce_money, is_valid, parse, sanitize

logger = logging.getLogger(__name__)


class PartitionError(Exception):
    """The field → group assignment is not a partition of the declared groups."""


@dataclass(frozen=True)
class ReactiveTotal:
    group_sums: dict[str, Decimal]
    grand_total: Decimal


@dataclass(frozen=True)
class RecomputeResult:
    group_sums: dict[str, Decimal]
    grand_total: Decimal
    changed: bool  # True when the stored total was rewritten


def validate_partition(
    partition: Mapping[str, str], groups: Optional[Mapping[str, str]] = None
) -> None:
    """
    A mapping already gives each field at most one group. This checks the
    rest: every field names a declared group, and no declared group is empty.
    """
    if groups is None:
        return
    problems = [
        f"field {field!r} is assigned to undeclared group {group!r}"
        for field, group in partition.items()
        if group not in groups
    ]
    used = set(partition.values())
    problems += [f"group {group!r} has no fields" for group in groups if group not in used]
    if problems:
        raise PartitionError("; ".join(problems))


def recompute(fields: Mapping[str, object], partition: Mapping[str, str]) -> ReactiveTotal:
    """
    Group subtotals and grand total over the partitioned fields.
    Missing or non-numeric values count as 0.00; keys outside the partition
    (such as the total field itself) are not summed.
    """
    group_sums: dict[str, Decimal] = {group: ZERO for group in dict.fromkeys(partition.values())}
    grand_total = ZERO

    for field, group in partition.items():
        amount = coerce_money(fields.get(field))
        group_sums[group] += amount
        grand_total += amount

    return ReactiveTotal(group_sums=group_sums, grand_total=grand_total)


def _holds_amount(current: object, amount: Decimal) -> bool:
    """True only when current is a well-formed amount equal to amount."""
    if isinstance(current, bool):
        return False
    if isinstance(current, (Decimal, int, float)):
        return parse(current) == amount
    if isinstance(current, str):
        text = current.strip()
        return bool(text) and is_valid(text) and parse(text) == amount
    return False


def write_back_total(
    state: MutableMapping[str, object], total_field: str, grand_total: Decimal
) -> bool:
    """
    Store grand_total in state[total_field] unless it already holds that amount.
    Stored text that is not a clean amount ("800abc", "1,000") is overwritten.
    """
    if _holds_amount(state.get(total_field), grand_total):
        return False
    state[total_field] = grand_total
    return True


def recompute_and_write_back(
    state: MutableMapping[str, object],
    partition: Mapping[str, str] = EXPENSE_FEE_PARTITION,
    total_field: str = TOTAL_FIELD,
) -> RecomputeResult:
    total = recompute(state, partition)
    changed = write_back_total(state, total_field, total.grand_total)
    if changed:
        logger.debug("%s updated to %s", total_field, total.grand_total)
    return RecomputeResult(
        group_sums=total.group_sums, grand_total=total.grand_total, changed=changed
    )


class ExpenseFeeForm:
    """
    The fee fields of one expense record being edited.

    Usage:
        form = ExpenseFeeForm()
        result = form.set_field("licenseFee", "800")
        result.grand_total     # Decimal("800.00")
        form.total             # Decimal("800.00")
    """

    def __init__(
        self,
        values: Optional[Mapping[str, object]] = None,
        partition: Mapping[str, str] = EXPENSE_FEE_PARTITION,
        groups: Optional[Mapping[str, str]] = EXPENSE_FEE_GROUPS,
        total_field: str = TOTAL_FIELD,
    ):
        validate_partition(partition, groups)
        self.partition = dict(partition)
        self.total_field = total_field
        self.total_writes = 0
        self._values: dict[str, object] = {}

        for field, value in (values or {}).items():
            if field in self.partition:
                self._values[field] = self._normalize(value)
            elif field == total_field and value is not None:
                self._values[field] = coerce_money(value)

    @staticmethod
    def _normalize(raw: object) -> Optional[Decimal]:
        if raw is None:
            return None
        if isinstance(raw, str) and sanitize(raw).strip(".") == "":
            return None
        return coerce_money(raw)

    @property
    def values(self) -> dict[str, object]:
        return dict(self._values)

    @property
    def total(self) -> Optional[Decimal]:
        value = self._values.get(self.total_field)
        return value if value is None else coerce_money(value)

    def set_field(self, field: str, raw: object) -> RecomputeResult:
        """Store one atomic field, then recompute from the post-edit values."""
        if field == self.total_field:
            raise KeyError(f"{field!r} is derived and cannot be set directly")
        if field not in self.partition:
            raise KeyError(f"{field!r} is not an atomic fee field")
        self._values[field] = self._normalize(raw)
        return self.recompute()

    def recompute(self) -> RecomputeResult:
        result = recompute_and_write_back(self._values, self.partition, self.total_field)
        if result.changed:
            self.total_writes += 1
        return result
