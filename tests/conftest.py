"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from bizdesk.database.factories import create_sqlite_database
from bizdesk.domain.category import ProjectCategoryService
from bizdesk.domain.chart_of_accounts import ChartOfAccountsService
from bizdesk.domain.company import CompanyService
from bizdesk.domain.entities import Movement
from bizdesk.domain.ledger_service import LedgerService
from bizdesk.domain.membership import MembershipService
from bizdesk.domain.milestone import MilestoneService
from bizdesk.domain.project import ProjectService
from bizdesk.domain.role import RoleService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create temporary file
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store path for CLI tests
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def role_service(temp_db):
    """Create a RoleService with a temporary database."""
    return RoleService(temp_db)


@pytest.fixture
def membership_service(temp_db):
    """Create a MembershipService with a temporary database."""
    return MembershipService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a ProjectCategoryService with a temporary database."""
    return ProjectCategoryService(temp_db)


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def milestone_service(temp_db):
    """Create a MilestoneService with a temporary database."""
    return MilestoneService(temp_db)


@pytest.fixture
def coa_service(temp_db):
    """Create a ChartOfAccountsService with a temporary database."""
    return ChartOfAccountsService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def sample_company(company_service):
    """Create a sample company for testing."""
    company_id = company_service.create_company(name="Acme Traders", country_code="IN")
    return company_service.get_company(company_id)


@pytest.fixture
def sample_roles(role_service):
    """Seed default roles plus a narrow Accountant role; return name -> Role."""
    role_service.seed_default_roles()
    role_service.create_role(
        name="Accountant",
        permissions={"accounting": {"view": True, "post": True, "reports": True}},
    )
    return {role.name: role for role in role_service.list_roles()}


@pytest.fixture
def cash_account(coa_service, sample_company):
    """Create a root group with one debit ledger under it."""
    group_id = coa_service.create_account(
        company_id=sample_company.id,
        code="10000",
        name="Assets",
        is_group=True,
        account_type="asset",
        balance_type="debit",
    )
    ledger_id = coa_service.create_account(
        company_id=sample_company.id,
        code="11110",
        name="Cash in Hand",
        parent_id=group_id,
        opening_balance=Decimal("1000"),
    )
    return coa_service.get_account(ledger_id)


@pytest.fixture
def make_movement():
    """Factory for in-memory movements."""
    def _make(id, posting_date=date(2024, 1, 1), debit="0", credit="0"):
        return Movement(
            id=id,
            account_id=1,
            posting_date=posting_date,
            debit_amount=None if debit is None else Decimal(debit),
            credit_amount=None if credit is None else Decimal(credit),
        )
    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
