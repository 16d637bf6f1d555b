"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bizdesk.domain.entities import (
    Company,
    Role,
    Membership,
    ProjectCategory,
    Project,
    Milestone,
    LedgerAccount,
    Movement,
)


class Database(ABC):
    """Abstract database interface for bizdesk."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(self, name: str, country_code: Optional[str] = None) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def get_company_by_name(self, name: str) -> Optional[Company]:
        """Get company by name."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies."""
        pass

    # Role operations
    @abstractmethod
    def create_role(
        self,
        name: str,
        description: Optional[str],
        permissions: dict[str, dict[str, bool]],
        is_system_role: bool = False,
    ) -> int:
        """Create a role. Returns role ID."""
        pass

    @abstractmethod
    def get_role(self, role_id: int) -> Optional[Role]:
        """Get role by ID."""
        pass

    @abstractmethod
    def get_role_by_name(self, name: str) -> Optional[Role]:
        """Get role by name."""
        pass

    @abstractmethod
    def list_roles(self) -> list[Role]:
        """List all roles ordered by name."""
        pass

    @abstractmethod
    def update_role(
        self,
        role_id: int,
        name: str,
        description: Optional[str],
        permissions: dict[str, dict[str, bool]],
        is_system_role: bool,
    ) -> None:
        """Replace a role's editable fields."""
        pass

    @abstractmethod
    def delete_role_if_unreferenced(self, role_id: int) -> bool:
        """Delete a role only if no membership references it.

        The reference check and the delete must be a single atomic statement.
        Returns True if the role was deleted.
        """
        pass

    # Membership operations
    @abstractmethod
    def count_memberships_for_role(self, role_id: int) -> int:
        """Count memberships referencing a role."""
        pass

    @abstractmethod
    def upsert_membership(self, user_id: str, company_id: int, role_id: int, is_active: bool = True) -> int:
        """Create or replace the (user, company) membership. Returns membership ID."""
        pass

    @abstractmethod
    def get_membership(self, user_id: str, company_id: int) -> Optional[Membership]:
        """Get the membership of a user in a company."""
        pass

    @abstractmethod
    def list_memberships(
        self, company_id: Optional[int] = None, user_id: Optional[str] = None
    ) -> list[Membership]:
        """List memberships, optionally filtered by company or user."""
        pass

    @abstractmethod
    def delete_membership(self, user_id: str, company_id: int) -> None:
        """Remove a user's membership in a company."""
        pass

    # Project category operations
    @abstractmethod
    def create_project_category(
        self,
        company_id: int,
        name: str,
        description: Optional[str],
        is_recurring: bool,
        frequency: Optional[str],
        due_day: Optional[int],
        due_month: Optional[int],
        billing_type: str,
    ) -> int:
        """Create a project category. Returns category ID."""
        pass

    @abstractmethod
    def get_project_category(self, category_id: int) -> Optional[ProjectCategory]:
        """Get project category by ID."""
        pass

    @abstractmethod
    def list_project_categories(self, company_id: int) -> list[ProjectCategory]:
        """List a company's project categories ordered by name."""
        pass

    @abstractmethod
    def update_project_category(
        self,
        category_id: int,
        name: str,
        description: Optional[str],
        is_recurring: bool,
        frequency: Optional[str],
        due_day: Optional[int],
        due_month: Optional[int],
        billing_type: str,
    ) -> None:
        """Replace a project category's fields."""
        pass

    # Project operations
    @abstractmethod
    def create_project(
        self,
        company_id: int,
        name: str,
        category_id: Optional[int] = None,
        is_recurring: bool = False,
        frequency: Optional[str] = None,
        recurrence_due_date: Optional[date] = None,
    ) -> int:
        """Create a project. Returns project ID."""
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def list_projects(self, company_id: int, recurring_only: bool = False) -> list[Project]:
        """List a company's projects.

        Recurring-only listings are ordered by due date, others by name.
        """
        pass

    @abstractmethod
    def update_project_recurrence(
        self,
        project_id: int,
        recurrence_due_date: Optional[date],
        last_recurrence_created_at: Optional[date],
    ) -> None:
        """Update a project's recurrence tracking fields."""
        pass

    # Milestone operations
    @abstractmethod
    def create_milestone(
        self,
        project_id: int,
        name: str,
        due_date: date,
        status: str,
        completed_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a milestone. Returns milestone ID."""
        pass

    @abstractmethod
    def get_milestone(self, milestone_id: int) -> Optional[Milestone]:
        """Get milestone by ID."""
        pass

    @abstractmethod
    def list_milestones(self, project_id: int) -> list[Milestone]:
        """List a project's milestones ordered by due date."""
        pass

    @abstractmethod
    def update_milestone(
        self,
        milestone_id: int,
        name: str,
        due_date: date,
        status: str,
        completed_date: Optional[date],
        notes: Optional[str],
    ) -> None:
        """Replace a milestone's fields."""
        pass

    # Chart of accounts operations
    @abstractmethod
    def create_ledger_account(
        self,
        company_id: int,
        code: str,
        name: str,
        account_type: str,
        balance_type: str,
        parent_id: Optional[int] = None,
        is_group: bool = False,
        opening_balance: Decimal = Decimal("0"),
        description: Optional[str] = None,
    ) -> int:
        """Create a chart of accounts node. Returns account ID."""
        pass

    @abstractmethod
    def get_ledger_account(self, account_id: int) -> Optional[LedgerAccount]:
        """Get ledger account by ID."""
        pass

    @abstractmethod
    def get_ledger_account_by_code(self, company_id: int, code: str) -> Optional[LedgerAccount]:
        """Get a company's ledger account by code."""
        pass

    @abstractmethod
    def list_ledger_accounts(self, company_id: int) -> list[LedgerAccount]:
        """List a company's ledger accounts ordered by code."""
        pass

    @abstractmethod
    def get_account_tree(self, company_id: int) -> list[dict[str, Any]]:
        """Get a company's chart of accounts as nested dictionaries.

        Each node carries its entity under 'account' and its sub-nodes under
        'children'.
        """
        pass

    # Movement operations
    @abstractmethod
    def create_movement(
        self,
        account_id: int,
        posting_date: date,
        debit_amount: Decimal,
        credit_amount: Decimal,
        entry_no: Optional[str] = None,
        remark: Optional[str] = None,
    ) -> int:
        """Create a posting line. Returns movement ID."""
        pass

    @abstractmethod
    def list_movements(
        self,
        account_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Movement]:
        """List an account's movements within an inclusive date range.

        No ordering is guaranteed; callers sort.
        """
        pass
