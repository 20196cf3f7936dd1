"""Catalog schemas: the item lists the form renders as checkboxes."""

from feeledger.schemas.common import BaseSchema


class ServiceItemResponse(BaseSchema):
    item_key: str
    display_name: str


class CategoryResponse(BaseSchema):
    category_id: str
    label: str
    output_field: str
    fee_field: str
    items: list[ServiceItemResponse]


class TemplateResponse(BaseSchema):
    template_id: str
    contract_type: str
    category_ids: list[str]
    requires_total_cost: bool


class ExpenseFieldResponse(BaseSchema):
    field: str
    label: str
    group: str
    group_label: str


class CatalogResponse(BaseSchema):
    categories: list[CategoryResponse]
    templates: list[TemplateResponse]
    expense_fields: list[ExpenseFieldResponse]
