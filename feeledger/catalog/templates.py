"""
Document templates: which catalog categories a contract type offers.

All templates apply the same rule: once any item of an offered category is
selected, that category's fee field is required. Templates differ only in
what they offer.
"""

from dataclasses import dataclass

from feeledger.catalog.constants import CATEGORIES

_ALL_CATEGORY_IDS = tuple(c["category_id"] for c in CATEGORIES)


class UnknownTemplate(KeyError):
    """No document template is registered under this id."""


@dataclass(frozen=True)
class DocumentTemplate:
    template_id: str
    contract_type: str
    category_ids: tuple[str, ...]
    requires_total_cost: bool = True

    def offers(self, category_id: str) -> bool:
        return category_id in self.category_ids


TEMPLATES: dict[str, DocumentTemplate] = {
    "single_service": DocumentTemplate(
        template_id="single_service",
        contract_type="单项服务合同",
        category_ids=_ALL_CATEGORY_IDS,
    ),
    "product_service": DocumentTemplate(
        template_id="product_service",
        contract_type="产品服务协议",
        category_ids=_ALL_CATEGORY_IDS,
    ),
    "agency_accounting": DocumentTemplate(
        template_id="agency_accounting",
        contract_type="代理记账协议",
        category_ids=(),
    ),
}


def get_template(template_id: str) -> DocumentTemplate:
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplate(template_id)
