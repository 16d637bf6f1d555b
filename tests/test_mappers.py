"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from bizdesk.database.models import (
    Company as ORMCompany,
    Role as ORMRole,
    ProjectCategory as ORMProjectCategory,
    Milestone as ORMMilestone,
    ChartOfAccount as ORMChartOfAccount,
    JournalEntryItem as ORMJournalEntryItem,
)
from bizdesk.database.mappers import (
    company_to_domain,
    role_to_domain,
    project_category_to_domain,
    milestone_to_domain,
    ledger_account_to_domain,
    movement_to_domain,
)
from bizdesk.domain.entities import (
    AccountType,
    BalanceType,
    BillingType,
    Company,
    Frequency,
    LedgerAccount,
    MilestoneStatus,
    Movement,
    RecurrenceRule,
    Role,
)


class TestCompanyMapper:
    """Tests for Company mapper."""

    def test_company_to_domain(self):
        orm_company = ORMCompany(id=1, name="Acme", country_code="IN", created_at=datetime.now(UTC))
        company = company_to_domain(orm_company)

        assert isinstance(company, Company)
        assert company.name == "Acme"
        assert company.country_code == "IN"
        assert company.created_at == orm_company.created_at


class TestRoleMapper:
    """Tests for Role mapper."""

    def test_role_to_domain(self):
        orm_role = ORMRole(
            id=3,
            name="Clerk",
            description=None,
            permissions={"sales": {"view": True, "create": False}},
            is_system_role=False,
            created_at=datetime.now(UTC),
        )
        role = role_to_domain(orm_role)

        assert isinstance(role, Role)
        assert role.permissions == {"sales": {"view": True, "create": False}}
        assert role.is_system_role is False

    def test_non_boolean_grants_become_false(self):
        orm_role = ORMRole(
            id=3, name="Odd", permissions={"sales": {"view": 1, "create": "yes"}},
            is_system_role=False, created_at=datetime.now(UTC),
        )
        assert role_to_domain(orm_role).permissions == {"sales": {"view": False, "create": False}}

    def test_missing_permissions(self):
        orm_role = ORMRole(id=3, name="Empty", permissions=None, is_system_role=True, created_at=datetime.now(UTC))
        role = role_to_domain(orm_role)
        assert role.permissions == {}
        assert role.is_system_role is True


class TestProjectCategoryMapper:
    """Tests for ProjectCategory mapper."""

    def test_recurring_category(self):
        orm_category = ORMProjectCategory(
            id=2,
            company_id=1,
            name="Annual Filing",
            description=None,
            is_recurring_category=True,
            recurrence_frequency="yearly",
            recurrence_due_day=30,
            recurrence_due_month=9,
            billing_type="recurring",
            created_at=datetime.now(UTC),
        )
        category = project_category_to_domain(orm_category)

        assert category.frequency is Frequency.YEARLY
        assert category.billing_type is BillingType.RECURRING
        assert category.recurrence_rule == RecurrenceRule(Frequency.YEARLY, 30, 9)

    def test_one_off_category(self):
        orm_category = ORMProjectCategory(
            id=2, company_id=1, name="Audit", is_recurring_category=False,
            recurrence_frequency=None, billing_type="fixed_price", created_at=datetime.now(UTC),
        )
        category = project_category_to_domain(orm_category)
        assert category.frequency is None
        assert category.recurrence_rule is None


class TestMilestoneMapper:
    """Tests for Milestone mapper."""

    def test_milestone_to_domain(self):
        orm_milestone = ORMMilestone(
            id=4, project_id=2, milestone_name="Launch", due_date=date(2024, 9, 1),
            status="delayed", completed_date=None, notes="Vendor slip",
        )
        milestone = milestone_to_domain(orm_milestone)

        assert milestone.name == "Launch"
        assert milestone.status is MilestoneStatus.DELAYED
        assert milestone.notes == "Vendor slip"


class TestLedgerMappers:
    """Tests for chart of accounts and movement mappers."""

    def test_ledger_account_to_domain(self):
        orm_account = ORMChartOfAccount(
            id=9,
            company_id=1,
            account_code="11110",
            account_name="Cash in Hand",
            account_type="asset",
            parent_account_id=5,
            is_group=False,
            balance_type="debit",
            opening_balance=Decimal("250.00"),
            comment="Main till",
            created_at=datetime.now(UTC),
        )
        account = ledger_account_to_domain(orm_account)

        assert isinstance(account, LedgerAccount)
        assert account.code == "11110"
        assert account.account_type is AccountType.ASSET
        assert account.balance_type is BalanceType.DEBIT
        assert account.opening_balance == Decimal("250.00")
        assert account.description == "Main till"

    def test_ledger_account_without_opening_balance(self):
        orm_account = ORMChartOfAccount(
            id=9, company_id=1, account_code="10000", account_name="Assets", account_type="asset",
            is_group=True, balance_type="debit", opening_balance=None, created_at=datetime.now(UTC),
        )
        assert ledger_account_to_domain(orm_account).opening_balance == Decimal("0")

    def test_movement_to_domain(self):
        orm_item = ORMJournalEntryItem(
            id=11, account_id=9, posting_date=date(2024, 1, 5),
            debit_amount=Decimal("500.00"), credit_amount=None,
            entry_no="JV-1", user_remark="Opening sale",
        )
        movement = movement_to_domain(orm_item)

        assert isinstance(movement, Movement)
        assert movement.debit_amount == Decimal("500.00")
        assert movement.credit_amount == Decimal("0")
        assert movement.entry_no == "JV-1"
        assert movement.remark == "Opening sale"
