"""Default chart of accounts template.

Five root groups numbered by ten-thousands (assets 1xxxx, liabilities 2xxxx,
equity 3xxxx, income 4xxxx, expenses 5xxxx). Parents always precede their
children. Contra accounts carry the opposite balance type of their group.
"""

from bizdesk.domain.entities import AccountType, BalanceType

DEBIT = BalanceType.DEBIT
CREDIT = BalanceType.CREDIT

ROOT_ACCOUNT_TYPES = {
    "1": AccountType.ASSET,
    "2": AccountType.LIABILITY,
    "3": AccountType.EQUITY,
    "4": AccountType.INCOME,
    "5": AccountType.EXPENSE,
}

# Default parent of country tax accounts: Taxes Payable
TAX_PARENT_CODE = "21400"

# (code, name, parent code, is group, balance type)
DEFAULT_CHART_OF_ACCOUNTS = [
    ("10000", "Assets", None, True, DEBIT),
    ("20000", "Liabilities", None, True, CREDIT),
    ("30000", "Equity", None, True, CREDIT),
    ("40000", "Income", None, True, CREDIT),
    ("50000", "Expenses", None, True, DEBIT),
    ("11000", "Current Assets", "10000", True, DEBIT),
    ("12000", "Fixed Assets", "10000", True, DEBIT),
    ("13000", "Intangible Assets", "10000", True, DEBIT),
    ("14000", "Investments", "10000", True, DEBIT),
    ("15000", "Other Assets", "10000", True, DEBIT),
    ("21000", "Current Liabilities", "20000", True, CREDIT),
    ("22000", "Long-term Liabilities", "20000", True, CREDIT),
    ("23000", "Provisions", "20000", True, CREDIT),
    ("31000", "Share Capital", "30000", True, CREDIT),
    ("32000", "Retained Earnings", "30000", False, CREDIT),
    ("33000", "Reserves", "30000", True, CREDIT),
    ("34000", "Drawings/Dividends", "30000", True, DEBIT),
    ("41000", "Sales Revenue", "40000", True, CREDIT),
    ("42000", "Service Revenue", "40000", True, CREDIT),
    ("43000", "Other Income", "40000", True, CREDIT),
    ("51000", "Cost of Goods Sold", "50000", True, DEBIT),
    ("52000", "Operating Expenses", "50000", True, DEBIT),
    ("53000", "Financial Expenses", "50000", True, DEBIT),
    ("54000", "Depreciation & Amortization", "50000", True, DEBIT),
    ("55000", "Taxes", "50000", True, DEBIT),
    ("11100", "Cash & Cash Equivalents", "11000", True, DEBIT),
    ("11200", "Accounts Receivable", "11000", True, DEBIT),
    ("11300", "Inventory", "11000", True, DEBIT),
    ("11400", "Prepaid Expenses", "11000", True, DEBIT),
    ("11500", "Other Current Assets", "11000", True, DEBIT),
    ("12100", "Land & Buildings", "12000", True, DEBIT),
    ("12200", "Plant & Machinery", "12000", True, DEBIT),
    ("12300", "Furniture & Fixtures", "12000", True, DEBIT),
    ("12400", "Vehicles", "12000", True, DEBIT),
    ("12500", "Computer Equipment", "12000", True, DEBIT),
    ("12600", "Accumulated Depreciation", "12000", True, CREDIT),
    ("13100", "Goodwill", "13000", False, DEBIT),
    ("13200", "Patents & Trademarks", "13000", True, DEBIT),
    ("13300", "Software & Licenses", "13000", True, DEBIT),
    ("13400", "Accumulated Amortization", "13000", True, CREDIT),
    ("14100", "Short-term Investments", "14000", True, DEBIT),
    ("14200", "Long-term Investments", "14000", True, DEBIT),
    ("15100", "Deferred Tax Assets", "15000", False, DEBIT),
    ("15200", "Security Deposits", "15000", True, DEBIT),
    ("15300", "Loans to Employees", "15000", True, DEBIT),
    ("21100", "Accounts Payable", "21000", True, CREDIT),
    ("21200", "Short-term Loans", "21000", True, CREDIT),
    ("21300", "Accrued Expenses", "21000", True, CREDIT),
    ("21400", "Taxes Payable", "21000", True, CREDIT),
    ("21500", "Current Portion of Long-term Debt", "21000", False, CREDIT),
    ("21600", "Unearned Revenue", "21000", True, CREDIT),
    ("22100", "Long-term Loans", "22000", True, CREDIT),
    ("22200", "Bonds Payable", "22000", False, CREDIT),
    ("22300", "Deferred Tax Liabilities", "22000", False, CREDIT),
    ("23100", "Provision for Employee Benefits", "23000", True, CREDIT),
    ("23200", "Provision for Warranties", "23000", False, CREDIT),
    ("23300", "Provision for Restructuring", "23000", False, CREDIT),
    ("31100", "Common Stock", "31000", False, CREDIT),
    ("31200", "Preferred Stock", "31000", False, CREDIT),
    ("31300", "Additional Paid-in Capital", "31000", False, CREDIT),
    ("33100", "Capital Reserves", "33000", False, CREDIT),
    ("33200", "Revenue Reserves", "33000", False, CREDIT),
    ("33300", "Statutory Reserves", "33000", False, CREDIT),
    ("34100", "Owner's Drawings", "34000", False, DEBIT),
    ("34200", "Dividends Paid", "34000", False, DEBIT),
    ("41100", "Product Sales", "41000", True, CREDIT),
    ("41200", "Sales Returns & Allowances", "41000", False, DEBIT),
    ("41300", "Sales Discounts", "41000", False, DEBIT),
    ("42100", "Service Fees", "42000", False, CREDIT),
    ("42200", "Maintenance Contracts", "42000", False, CREDIT),
    ("42300", "Consulting Fees", "42000", False, CREDIT),
    ("43100", "Interest Income", "43000", False, CREDIT),
    ("43200", "Dividend Income", "43000", False, CREDIT),
    ("43300", "Rental Income", "43000", False, CREDIT),
    ("43400", "Gain on Sale of Assets", "43000", False, CREDIT),
    ("43500", "Foreign Exchange Gain", "43000", False, CREDIT),
    ("51100", "Direct Materials", "51000", False, DEBIT),
    ("51200", "Direct Labor", "51000", False, DEBIT),
    ("51300", "Manufacturing Overhead", "51000", True, DEBIT),
    ("51400", "Purchases", "51000", False, DEBIT),
    ("51500", "Freight In", "51000", False, DEBIT),
    ("52100", "Salaries & Wages", "52000", True, DEBIT),
    ("52200", "Rent Expense", "52000", False, DEBIT),
    ("52300", "Utilities", "52000", True, DEBIT),
    ("52400", "Office Supplies", "52000", False, DEBIT),
    ("52500", "Insurance", "52000", True, DEBIT),
    ("52600", "Repairs & Maintenance", "52000", True, DEBIT),
    ("52700", "Advertising & Marketing", "52000", True, DEBIT),
    ("52800", "Travel & Entertainment", "52000", True, DEBIT),
    ("52900", "Professional Fees", "52000", True, DEBIT),
    ("53100", "Interest Expense", "53000", False, DEBIT),
    ("53200", "Bank Charges", "53000", False, DEBIT),
    ("53300", "Foreign Exchange Loss", "53000", False, DEBIT),
    ("54100", "Depreciation Expense", "54000", False, DEBIT),
    ("54200", "Amortization Expense", "54000", False, DEBIT),
    ("55100", "Income Tax Expense", "55000", False, DEBIT),
    ("55200", "Property Tax", "55000", False, DEBIT),
    ("55300", "Sales Tax", "55000", False, DEBIT),
]

# country code -> [(code, name)], all credit ledgers under TAX_PARENT_CODE
COUNTRY_TAX_ACCOUNTS = {
    "IN": [
        ("21401", "CGST Payable"),
        ("21402", "SGST Payable"),
        ("21403", "IGST Payable"),
        ("21404", "TDS Payable"),
        ("21405", "TCS Payable"),
    ],
    "US": [("21401", "Sales Tax Payable")],
    "GB": [("21401", "VAT Payable")],
    "CA": [("21401", "GST/HST Payable")],
    "AU": [("21401", "GST Payable")],
    "DE": [("21401", "VAT Payable")],
    "FR": [("21401", "TVA à payer")],
    "JP": [("21401", "Consumption Tax Payable")],
    "SG": [("21401", "GST Payable")],
    "AE": [("21401", "VAT Payable")],
}


def account_type_for_code(code: str) -> AccountType:
    """Return the account type implied by the leading digit of a template code."""
    return ROOT_ACCOUNT_TYPES[code[0]]
