"""
Service catalog: canonical category and item definitions.

These are the ground-truth definitions every document template draws from;
registry.py builds the immutable ServiceCatalog from this file once per
process.

Item key format: {prefix}{item}, where the prefix decides the category.
Keys are stable and never reused; persisted contracts refer to them.

Categories:
  business_establishment   工商设立
  business_change          工商变更
  business_cancellation    工商注销
  business_other           工商其他 (incl. address hosting)
  business_materials       工商物料
  tax                      税务
  bank                     银行
  social_security          社保 / 公积金
  license                  许可业务
"""

CATEGORIES: list[dict] = [
    # ══════════════════════════════════════════════════════════════════════════
    # 工商: Business registration
    # ══════════════════════════════════════════════════════════════════════════
    {
        "category_id": "business_establishment",
        "label": "工商设立",
        "prefixes": ("business_establish_",),
        "output_field": "businessEstablishment",
        "fee_field": "businessServiceFee",
        "items": [
            ("business_establish_limited", "有限责任公司"),
            ("business_establish_branch", "有限责任公司分支机构"),
            ("business_establish_individual", "个人独资企业"),
            ("business_establish_partnership", "合伙企业"),
            ("business_establish_nonprofit", "民办非企业"),
            ("business_establish_joint_stock", "股份有限公司"),
            ("business_establish_self_employed", "个体工商户"),
        ],
    },
    {
        "category_id": "business_change",
        "label": "工商变更",
        "prefixes": ("business_change_",),
        "output_field": "businessChange",
        "fee_field": "businessServiceFee",
        "items": [
            ("business_change_legal_person", "法定代表人"),
            ("business_change_shareholder", "股东股权"),
            ("business_change_capital", "注册资金"),
            ("business_change_name", "公司名称"),
            ("business_change_scope", "经营范围"),
            ("business_change_address", "注册地址"),
            ("business_change_manager", "分公司负责人"),
            ("business_change_directors", "董事/监事人员"),
        ],
    },
    {
        "category_id": "business_cancellation",
        "label": "工商注销",
        "prefixes": ("business_cancel_",),
        "output_field": "businessCancellation",
        "fee_field": "businessServiceFee",
        "items": [
            ("business_cancel_limited", "有限责任公司"),
            ("business_cancel_branch", "有限责任公司分支机构"),
            ("business_cancel_individual", "个人独资企业"),
            ("business_cancel_partnership", "合伙企业"),
            ("business_cancel_foreign", "外商投资企业"),
            ("business_cancel_joint_stock", "股份有限公司"),
            ("business_cancel_self_employed", "个体工商户"),
        ],
    },
    {
        "category_id": "business_other",
        "label": "工商其他",
        "prefixes": ("business_other_", "business_address_"),
        "output_field": "businessOther",
        "fee_field": "businessServiceFee",
        "items": [
            ("business_other_annual_report", "年报公示"),
            ("business_other_remove_exception", "解除异常"),
            ("business_other_info_repair", "信息修复"),
            ("business_other_file_retrieval", "档案调取"),
            ("business_other_license_annual", "许可证年检"),
            ("business_address_small_scale", "地址托管-小规模"),
            ("business_address_general", "地址托管-一般纳税人"),
        ],
    },
    {
        "category_id": "business_materials",
        "label": "工商物料",
        "prefixes": ("business_material_",),
        "output_field": "businessMaterials",
        "fee_field": "businessServiceFee",
        "items": [
            ("business_material_seal", "备案章"),
            ("business_material_rubber", "胶皮章"),
            ("business_material_crystal", "水晶章"),
            ("business_material_kt_board", "KT板牌子"),
            ("business_material_copper", "铜牌"),
        ],
    },
    # ══════════════════════════════════════════════════════════════════════════
    # 税务: Tax
    # ══════════════════════════════════════════════════════════════════════════
    {
        "category_id": "tax",
        "label": "税务",
        "prefixes": ("tax_",),
        "output_field": "taxMatters",
        "fee_field": "taxServiceFee",
        "items": [
            ("tax_assessment", "核定税种"),
            ("tax_filing", "报税"),
            ("tax_cancellation", "注销"),
            ("tax_invoice_apply", "申请发票"),
            ("tax_invoice_issue", "代开发票"),
            ("tax_change", "税务变更"),
            ("tax_remove_exception", "解除异常"),
            ("tax_supplement", "补充申报"),
            ("tax_software", "记账软件"),
            ("tax_invoice_software", "开票软件"),
        ],
    },
    # ══════════════════════════════════════════════════════════════════════════
    # 银行: Banking
    # ══════════════════════════════════════════════════════════════════════════
    {
        "category_id": "bank",
        "label": "银行",
        "prefixes": ("bank_",),
        "output_field": "bankMatters",
        "fee_field": "bankServiceFee",
        "items": [
            ("bank_general_account", "一般账户设立"),
            ("bank_basic_account", "基本账户设立"),
            ("bank_foreign_account", "外币账户设立"),
            ("bank_info_change", "信息变更"),
            ("bank_cancel", "银行账户注销"),
            ("bank_financing", "融资业务（开通平台手续）"),
            ("bank_loan", "贷款服务"),
        ],
    },
    # ══════════════════════════════════════════════════════════════════════════
    # 社保 / 公积金: Social insurance and housing fund
    # ══════════════════════════════════════════════════════════════════════════
    {
        "category_id": "social_security",
        "label": "社保",
        "prefixes": ("social_security_", "fund_"),
        "output_field": "socialSecurity",
        "fee_field": "socialSecurityServiceFee",
        "items": [
            ("social_security_open", "社保开户"),
            ("social_security_hosting", "社保托管"),
            ("social_security_cancel", "社保账户注销"),
            ("fund_open", "公积金开户"),
            ("fund_hosting", "公积金托管"),
            ("fund_change", "公积金变更"),
        ],
    },
    # ══════════════════════════════════════════════════════════════════════════
    # 许可业务: Licensing
    # ══════════════════════════════════════════════════════════════════════════
    {
        "category_id": "license",
        "label": "许可业务",
        "prefixes": ("license_",),
        "output_field": "licenseBusiness",
        "fee_field": "licenseServiceFee",
        "items": [
            ("license_food", "食品经营许可证"),
            ("license_health", "卫生许可证"),
            ("license_catering", "餐饮许可证"),
            ("license_transport", "道路运输许可证"),
            ("license_medical", "二类医疗器械备案"),
            ("license_other", "其他许可证"),
            ("license_prepackaged", "预包装食品备案"),
        ],
    },
]

# Category-level fee fields, in the order they appear on a contract.
# otherServiceFee carries no category; it is never required.
FEE_FIELD_LABELS: dict[str, str] = {
    "businessServiceFee": "工商服务费",
    "taxServiceFee": "税务服务费",
    "bankServiceFee": "银行服务费",
    "socialSecurityServiceFee": "社保服务费",
    "licenseServiceFee": "许可业务服务费",
    "otherServiceFee": "其他服务费",
}

# Service-group wording used in the "fee required" message, per fee field.
FEE_FIELD_GROUP_LABELS: dict[str, str] = {
    "businessServiceFee": "工商服务项目",
    "taxServiceFee": "税务服务项目",
    "bankServiceFee": "银行服务项目",
    "socialSecurityServiceFee": "社保服务项目",
    "licenseServiceFee": "许可业务项目",
}

SIGNATORIES: dict[str, dict] = {
    "保定如你心意企业管理咨询有限公司": {
        "title": "保定如你心意企业管理咨询有限公司",
        "english_title": "Baoding Ru Ni Xin Yi Enterprise Management Consulting Co., Ltd.",
        "address": "河北省保定市定兴县东落堡镇东落堡村264号",
        "phone": "13831247565",
        "footer": "保定如你心意企业管理咨询有限公司Tel: 13831247565",
    },
    "定兴县金盾企业管理咨询有限公司": {
        "title": "定兴县金盾企业管理咨询有限公司",
        "english_title": "Dingxing County Golden Shield Enterprise Management Consulting Co., Ltd.",
        "address": "河北省保定市定兴县定兴镇北肖庄村",
        "phone": "13582229111",
        "footer": "定兴县金盾企业管理咨询有限公司Tel: 13582229111",
    },
}
