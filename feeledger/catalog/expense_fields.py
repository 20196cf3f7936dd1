"""
Expense record fee fields and their group partition.

Every atomic fee field belongs to exactly one group; the grand total is
written back into TOTAL_FIELD, which is not itself part of the partition.
"""

EXPENSE_FEE_GROUPS: dict[str, str] = {
    "license": "办照费用",
    "agency": "代理记账",
    "value_added": "增值服务",
    "social_insurance": "社保代理",
    "change": "变更业务",
    "administrative_license": "行政许可",
    "other": "其他业务",
}

# field → group, in form order
EXPENSE_FEE_PARTITION: dict[str, str] = {
    "licenseFee": "license",
    "brandFee": "license",
    "recordSealFee": "license",
    "generalSealFee": "license",
    "agencyFee": "agency",
    "accountingSoftwareFee": "agency",
    "addressFee": "agency",
    "invoiceSoftwareFee": "value_added",
    "statisticalReportFee": "value_added",
    "socialInsuranceAgencyFee": "social_insurance",
    "changeFee": "change",
    "administrativeLicenseFee": "administrative_license",
    "otherBusinessFee": "other",
}

EXPENSE_FEE_LABELS: dict[str, str] = {
    "licenseFee": "办照费用",
    "brandFee": "牌子费",
    "recordSealFee": "备案章费用",
    "generalSealFee": "一般刻章费用",
    "agencyFee": "代理费",
    "accountingSoftwareFee": "记账软件费",
    "addressFee": "地址费",
    "invoiceSoftwareFee": "开票软件费",
    "statisticalReportFee": "统计报表费",
    "socialInsuranceAgencyFee": "社保代理费",
    "changeFee": "变更收费",
    "administrativeLicenseFee": "行政许可收费",
    "otherBusinessFee": "其他业务收费",
}

TOTAL_FIELD = "totalFee"
