"""Chart of accounts domain service."""

import logging
from decimal import Decimal
from typing import Any, Optional

from bizdesk.database.base import Database
from bizdesk.domain.coa_template import (
    COUNTRY_TAX_ACCOUNTS,
    DEFAULT_CHART_OF_ACCOUNTS,
    TAX_PARENT_CODE,
    account_type_for_code,
)
from bizdesk.domain.entities import AccountType, BalanceType, LedgerAccount
from bizdesk.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    company_not_found,
)

logger = logging.getLogger(__name__)


class ChartOfAccountsService:
    """Service for managing a company's chart of accounts."""

    def __init__(self, db: Database):
        """Initialize chart of accounts service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        company_id: int,
        code: str,
        name: str,
        parent_id: Optional[int] = None,
        is_group: bool = False,
        opening_balance: Decimal = Decimal("0"),
        account_type: "AccountType | str | None" = None,
        balance_type: "BalanceType | str | None" = None,
        description: Optional[str] = None,
    ) -> int:
        """Create a ledger account or group.

        Accounts under a parent inherit the parent's account type and balance
        type; root accounts must state both.

        Returns:
            Account ID

        Raises:
            NotFoundError: If the company or parent does not exist
            ValidationError: If a required field is missing, the parent is not a
                group or belongs to another company, or the opening balance is
                negative or finer than a cent
            ConflictError: If the code is already used in the company
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        code = (code or "").strip()
        name = (name or "").strip()
        if not code:
            raise ValidationError("Account code is required.")
        if not name:
            raise ValidationError("Account name is required.")

        opening_balance = Decimal(opening_balance)
        if opening_balance < 0:
            raise ValidationError("Opening balance cannot be negative.")
        if opening_balance != opening_balance.quantize(Decimal("0.01")):
            raise ValidationError("Opening balance cannot have more than 2 decimal places.")

        if parent_id is not None:
            parent = self.require_account(parent_id)
            if parent.company_id != company_id:
                raise ValidationError(f"Parent account {parent_id} belongs to another company")
            if not parent.is_group:
                raise ValidationError(
                    f"Parent account '{parent.name}' is a ledger, not a group"
                )
            account_type = parent.account_type
            balance_type = parent.balance_type
        elif account_type is None or balance_type is None:
            raise ValidationError("Root accounts need an account type and a balance type.")

        try:
            account_type = AccountType(account_type)
            balance_type = BalanceType(balance_type)
        except ValueError as e:
            raise ValidationError(str(e))

        if self.db.get_ledger_account_by_code(company_id, code) is not None:
            raise ConflictError(f"Account code '{code}' already exists")

        account_id = self.db.create_ledger_account(
            company_id=company_id,
            code=code,
            name=name,
            account_type=account_type.value,
            balance_type=balance_type.value,
            parent_id=parent_id,
            is_group=is_group,
            opening_balance=opening_balance,
            description=description,
        )
        logger.info("Created %s %s %s for company %s", "group" if is_group else "ledger", code, name, company_id)
        return account_id

    def get_account(self, account_id: int) -> Optional[LedgerAccount]:
        """Get ledger account by ID."""
        return self.db.get_ledger_account(account_id)

    def require_account(self, account_id: int) -> LedgerAccount:
        """Get ledger account by ID or raise NotFoundError."""
        account = self.db.get_ledger_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def get_account_by_code(self, company_id: int, code: str) -> Optional[LedgerAccount]:
        """Get a company's ledger account by code."""
        return self.db.get_ledger_account_by_code(company_id, code)

    def list_accounts(self, company_id: int, ledgers_only: bool = False) -> list[LedgerAccount]:
        """List a company's accounts by code, optionally only posting targets."""
        accounts = self.db.list_ledger_accounts(company_id)
        if ledgers_only:
            return [a for a in accounts if not a.is_group]
        return accounts

    def account_tree(self, company_id: int) -> list[dict[str, Any]]:
        """Get the chart of accounts as nested dictionaries."""
        return self.db.get_account_tree(company_id)

    def seed_default_chart(self, company_id: int, country_code: Optional[str] = None) -> int:
        """Populate the default chart of accounts for a company.

        Existing codes are kept untouched, so running twice creates nothing the
        second time. Country tax ledgers are added under Taxes Payable when the
        country (argument, or the company's own) has a template.

        Returns:
            Number of accounts created
        """
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        country_code = (country_code or company.country_code or "").upper()

        rows = [
            (code, name, parent_code, is_group, balance_type)
            for code, name, parent_code, is_group, balance_type in DEFAULT_CHART_OF_ACCOUNTS
        ]
        rows.extend(
            (code, name, TAX_PARENT_CODE, False, BalanceType.CREDIT)
            for code, name in COUNTRY_TAX_ACCOUNTS.get(country_code, [])
        )

        ids_by_code = {a.code: a.id for a in self.db.list_ledger_accounts(company_id)}
        created = 0
        for code, name, parent_code, is_group, balance_type in rows:
            if code in ids_by_code:
                continue
            ids_by_code[code] = self.db.create_ledger_account(
                company_id=company_id,
                code=code,
                name=name,
                account_type=account_type_for_code(code).value,
                balance_type=balance_type.value,
                parent_id=ids_by_code.get(parent_code) if parent_code else None,
                is_group=is_group,
            )
            created += 1

        logger.info("Seeded %s account(s) for company %s (%s)", created, company_id, country_code or "-")
        return created
