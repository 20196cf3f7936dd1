"""
Contract evaluation schemas: request and response shapes for the form.

Fee and amount inputs accept either JSON numbers or the raw text the user
typed; text goes through the sanitize-then-parse pipeline.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from feeledger.schemas.common import BaseSchema

AmountInput = Decimal | str | None


class SelectionIn(BaseSchema):
    item_key: str = Field(..., min_length=1, max_length=128)
    checked: bool = True
    amount: AmountInput = None


class ContractEvaluateRequest(BaseSchema):
    template_id: str = "single_service"
    signatory: Optional[str] = None
    selections: list[SelectionIn] = []
    fees: dict[str, AmountInput] = {}
    total_cost: AmountInput = None


class RollupItemResponse(BaseSchema):
    """Persisted item shape; keys keep the storage collaborator's camelCase."""

    item_key: str = Field(alias="itemKey")
    item_name: str = Field(alias="itemName")
    amount: Decimal


class CategoryRollupResponse(BaseSchema):
    category_id: str
    output_field: str
    fee_field: str
    has_selection: bool
    subtotal: Decimal
    subtotal_in_words: str


class ValidationFailureResponse(BaseSchema):
    target: str
    reason: str
    field: Optional[str] = None
    severity: str
    message: str


class SignatoryResponse(BaseSchema):
    title: str
    english_title: str
    address: str
    phone: str
    footer: str


class ContractEvaluateResponse(BaseSchema):
    template_id: str
    contract_type: str
    signatory: Optional[SignatoryResponse] = None
    service_data: dict[str, list[RollupItemResponse]]
    categories: list[CategoryRollupResponse]
    failures: list[ValidationFailureResponse]
    submittable: bool
    total_cost_in_words: str
