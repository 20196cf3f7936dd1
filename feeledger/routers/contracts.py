"""
Contract routes: evaluate the fee state of a contract being edited.

  POST /contracts/evaluate  → rollup snapshot, validation failures, total in words

The form posts its full selection state on each relevant edit and on submit.
Nothing is stored: the response carries the persisted-shape service data for
the storage collaborator to save once `submittable` is true.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from feeledger.catalog.registry import UnknownItem, UnknownSignatory, get_signatory
from feeledger.catalog.templates import UnknownTemplate, get_template
from feeledger.schemas.contract import (
    CategoryRollupResponse,
    ContractEvaluateRequest,
    ContractEvaluateResponse,
    SignatoryResponse,
    ValidationFailureResponse,
)
from feeledger.services.aggregation.rollup import rollup, rollup_snapshot
from feeledger.services.ledger.selection_ledger import SelectionLedger
from feeledger.services.numerals.converter import contract_total_in_words, to_legal_numeral
from feeledger.services.validation.fee_validator import is_submittable, validate_contract

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.post("/evaluate", response_model=ContractEvaluateResponse)
def evaluate_contract(payload: ContractEvaluateRequest) -> ContractEvaluateResponse:
    try:
        template = get_template(payload.template_id)
    except UnknownTemplate:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown document template '{payload.template_id}'",
        )

    signatory = None
    if payload.signatory is not None:
        try:
            signatory = SignatoryResponse.model_validate(get_signatory(payload.signatory))
        except UnknownSignatory:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"不支持的签署方: {payload.signatory}",
            )

    # ── Replay the selections into a fresh ledger ─────────────────────────────
    ledger = SelectionLedger()
    for selection in payload.selections:
        try:
            ledger.set_checked(selection.item_key, selection.checked)
        except UnknownItem:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown service item '{selection.item_key}'",
            )
        if selection.checked and selection.amount is not None:
            ledger.set_amount(selection.item_key, selection.amount)

    categories = rollup(ledger)
    failures = validate_contract(ledger, payload.fees, payload.total_cost, template)

    return ContractEvaluateResponse(
        template_id=template.template_id,
        contract_type=template.contract_type,
        signatory=signatory,
        service_data=rollup_snapshot(ledger),
        categories=[
            CategoryRollupResponse(
                category_id=c.category_id,
                output_field=c.output_field,
                fee_field=c.fee_field,
                has_selection=c.has_selection,
                subtotal=c.subtotal,
                subtotal_in_words=to_legal_numeral(c.subtotal) if c.has_selection else "",
            )
            for c in categories
        ],
        failures=[ValidationFailureResponse.model_validate(f) for f in failures],
        submittable=is_submittable(failures),
        total_cost_in_words=contract_total_in_words(payload.total_cost),
    )
