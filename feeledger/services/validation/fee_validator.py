"""
Contract fee validation: run before a contract may be submitted.

Checks, in order:
  1. Contract total present and positive (if the template requires one)
  2. Per selected category: the template offers it, and its category fee
     field holds a positive amount
  3. Fee text that is not a well-formed amount (soft hint, WARNING only)

The contract total is author-entered and never compared to the category
fees or item amounts; negotiated totals are allowed to differ.

Pure function of its inputs. Returns failures, never raises for bad data.
Messages are the user-facing strings shown next to the offending field.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from feeledger.catalog.constants import FEE_FIELD_GROUP_LABELS, FEE_FIELD_LABELS
from feeledger.catalog.templates import DocumentTemplate
from feeledger.services.aggregation.rollup import rollup
from feeledger.services.amounts.sanitizer import coerce_money, is_valid
from feeledger.services.ledger.selection_ledger import SelectionLedger

logger = logging.getLogger(__name__)

TOTAL_COST_FIELD = "totalCost"


# ── Constant classes ──────────────────────────────────────────────────────────


class ValidationReason:
    MISSING_REQUIRED_FEE = "MISSING_REQUIRED_FEE"
    MISSING_CONTRACT_TOTAL = "MISSING_CONTRACT_TOTAL"
    CATEGORY_NOT_OFFERED = "CATEGORY_NOT_OFFERED"
    INVALID_AMOUNT_INPUT = "INVALID_AMOUNT_INPUT"


class ValidationSeverity:
    ERROR = "ERROR"  # Blocks submission
    WARNING = "WARNING"  # Shown as a hint; does not block


@dataclass
class ValidationFailure:
    target: str  # category id or field name
    reason: str
    field: Optional[str] = None
    severity: str = ValidationSeverity.ERROR
    message: str = ""


def is_submittable(failures: list[ValidationFailure]) -> bool:
    return not any(f.severity == ValidationSeverity.ERROR for f in failures)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ContractFeeValidator:
    """
    Usage:
        validator = ContractFeeValidator(get_template("single_service"))
        failures = validator.validate(ledger, fees, total_cost)
    """

    def __init__(self, template: DocumentTemplate):
        self.template = template

    def validate(
        self,
        ledger: SelectionLedger,
        fees: Mapping[str, object],
        total_cost: object = None,
    ) -> list[ValidationFailure]:
        failures: list[ValidationFailure] = []

        # ── Check 1: Contract total ───────────────────────────────────────────
        if self.template.requires_total_cost:
            total_failure = self._check_total_cost(total_cost)
            if total_failure:
                failures.append(total_failure)

        # ── Check 2: Category fees ────────────────────────────────────────────
        for category in rollup(ledger):
            if not category.has_selection:
                continue
            if not self.template.offers(category.category_id):
                failures.append(
                    ValidationFailure(
                        target=category.category_id,
                        reason=ValidationReason.CATEGORY_NOT_OFFERED,
                        message=(
                            f"{self.template.contract_type}不包含"
                            f"{ledger.catalog.category(category.category_id).label}项目"
                        ),
                    )
                )
                continue
            fee_failure = self._check_category_fee(
                category.category_id, category.fee_field, fees.get(category.fee_field)
            )
            if fee_failure:
                failures.append(fee_failure)

        # ── Check 3: Malformed amount text ────────────────────────────────────
        raw_amounts = dict(fees)
        raw_amounts[TOTAL_COST_FIELD] = total_cost
        for field_name, raw in raw_amounts.items():
            if isinstance(raw, str) and not is_valid(raw.strip()):
                failures.append(
                    ValidationFailure(
                        target=field_name,
                        reason=ValidationReason.INVALID_AMOUNT_INPUT,
                        field=field_name,
                        severity=ValidationSeverity.WARNING,
                        message="金额格式不正确，请输入数字，最多保留两位小数",
                    )
                )

        if failures:
            logger.debug(
                "Contract (%s) failed %d validation check(s)",
                self.template.template_id,
                len(failures),
            )
        return failures

    # ── Private check methods ─────────────────────────────────────────────────

    def _check_total_cost(self, total_cost: object) -> Optional[ValidationFailure]:
        if _is_blank(total_cost) or coerce_money(total_cost) <= 0:
            return ValidationFailure(
                target=TOTAL_COST_FIELD,
                reason=ValidationReason.MISSING_CONTRACT_TOTAL,
                field=TOTAL_COST_FIELD,
                message="请填写费用总计",
            )
        return None

    def _check_category_fee(
        self, category_id: str, fee_field: str, raw_fee: object
    ) -> Optional[ValidationFailure]:
        """A selected category needs its fee field filled with a positive amount."""
        if not _is_blank(raw_fee) and coerce_money(raw_fee) > 0:
            return None
        group_label = FEE_FIELD_GROUP_LABELS.get(fee_field, "服务项目")
        fee_label = FEE_FIELD_LABELS.get(fee_field, fee_field)
        return ValidationFailure(
            target=category_id,
            reason=ValidationReason.MISSING_REQUIRED_FEE,
            field=fee_field,
            message=f"已勾选{group_label}，请填写{fee_label}",
        )


def validate_contract(
    ledger: SelectionLedger,
    fees: Mapping[str, object],
    total_cost: object,
    template: DocumentTemplate,
) -> list[ValidationFailure]:
    return ContractFeeValidator(template).validate(ledger, fees, total_cost)
