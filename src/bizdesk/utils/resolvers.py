"""Utilities for resolving user-facing names and codes to IDs."""

from bizdesk.domain.chart_of_accounts import ChartOfAccountsService
from bizdesk.domain.company import CompanyService
from bizdesk.domain.role import RoleService


def _as_int(value: str | int) -> int | None:
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def resolve_company(company_service: CompanyService, company: str | int) -> int:
    """Resolve company name or ID to company ID.

    A value that parses as an integer is treated as an ID; anything else is
    matched against company names.

    Raises:
        ValueError: If the company is not found
    """
    company_id = _as_int(company)
    if company_id is not None:
        if company_service.get_company(company_id) is None:
            raise ValueError(f"Company ID {company_id} not found")
        return company_id

    for existing in company_service.list_companies():
        if existing.name == company:
            return existing.id
    raise ValueError(f"Company '{company}' not found")


def resolve_role(role_service: RoleService, role: str | int) -> int:
    """Resolve role name or ID to role ID.

    Raises:
        ValueError: If the role is not found
    """
    role_id = _as_int(role)
    if role_id is not None:
        if role_service.get_role(role_id) is None:
            raise ValueError(f"Role ID {role_id} not found")
        return role_id

    existing = role_service.get_role_by_name(str(role))
    if existing is None:
        raise ValueError(f"Role '{role}' not found")
    return existing.id


def resolve_account(
    coa_service: ChartOfAccountsService, company_id: int, account: str | int
) -> int:
    """Resolve an account code or ID within a company to an account ID.

    Account codes are numeric too, so the code is tried first and the value
    is only treated as an ID when no account in the company has that code.

    Raises:
        ValueError: If the account is not found in the company
    """
    by_code = coa_service.get_account_by_code(company_id, str(account).strip())
    if by_code is not None:
        return by_code.id

    account_id = _as_int(account)
    if account_id is not None:
        existing = coa_service.get_account(account_id)
        if existing is not None and existing.company_id == company_id:
            return account_id
    raise ValueError(f"Account '{account}' not found")
