"""Domain model entities for bizdesk.

These are pure data classes representing business concepts, independent of
database schema. Store rows are converted into these at the database edge so
the domain logic never handles loosely typed records.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Frequency(str, Enum):
    """How often a recurring category spawns work."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class BillingType(str, Enum):
    """Billing model of a project category."""

    FIXED_PRICE = "fixed_price"
    TIME_BASED = "time_based"
    RECURRING = "recurring"


class MilestoneStatus(str, Enum):
    """Milestone status, always set explicitly by a user."""

    PLANNED = "planned"
    ACHIEVED = "achieved"
    DELAYED = "delayed"
    CANCELLED = "cancelled"


class AccountType(str, Enum):
    """Top-level classification of a ledger account."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"


class BalanceType(str, Enum):
    """Side on which an account normally carries its balance."""

    DEBIT = "debit"
    CREDIT = "credit"

    @classmethod
    def of(cls, amount: Decimal) -> "BalanceType":
        """Side a debit-positive balance falls on; zero counts as debit."""
        return cls.DEBIT if amount >= 0 else cls.CREDIT


@dataclass(frozen=True)
class Company:
    """Tenant company."""

    id: int
    name: str
    country_code: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class PermissionEntry:
    """One (module, action) capability in the permission catalog."""

    module: str
    action: str
    description: str


@dataclass(frozen=True)
class Role:
    """Named bundle of module/action grants."""

    id: int
    name: str
    description: Optional[str]
    permissions: dict[str, dict[str, bool]]
    is_system_role: bool
    created_at: datetime


@dataclass(frozen=True)
class Membership:
    """A user's membership in a company, carrying exactly one role."""

    id: int
    user_id: str
    company_id: int
    role_id: int
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class RecurrenceRule:
    """Recurrence parameters of a category-driven record."""

    frequency: Frequency
    due_day: Optional[int] = None
    due_month: Optional[int] = None


@dataclass(frozen=True)
class ProjectCategory:
    """Project category, optionally recurring."""

    id: int
    company_id: int
    name: str
    description: Optional[str]
    is_recurring: bool
    frequency: Optional[Frequency]
    due_day: Optional[int]
    due_month: Optional[int]
    billing_type: BillingType
    created_at: datetime

    @property
    def recurrence_rule(self) -> Optional[RecurrenceRule]:
        """Return the recurrence rule, or None when the category does not recur."""
        if not self.is_recurring or self.frequency is None:
            return None
        return RecurrenceRule(self.frequency, self.due_day, self.due_month)


@dataclass(frozen=True)
class Project:
    """Project entity with the recurrence tracking fields."""

    id: int
    company_id: int
    name: str
    category_id: Optional[int]
    is_recurring: bool
    frequency: Optional[Frequency]
    recurrence_due_date: Optional[date]
    last_recurrence_created_at: Optional[date]
    created_at: datetime


@dataclass(frozen=True)
class Milestone:
    """Project milestone."""

    id: int
    project_id: int
    name: str
    due_date: date
    status: MilestoneStatus
    completed_date: Optional[date]
    notes: Optional[str]


@dataclass(frozen=True)
class LedgerAccount:
    """Chart of accounts node. Groups organise; leaves receive postings."""

    id: int
    company_id: int
    code: str
    name: str
    account_type: AccountType
    parent_id: Optional[int]
    is_group: bool
    balance_type: BalanceType
    opening_balance: Decimal
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Movement:
    """A single debit/credit posting line against a ledger account."""

    id: int
    account_id: int
    posting_date: Optional[date]
    debit_amount: Optional[Decimal]
    credit_amount: Optional[Decimal]
    entry_no: Optional[str] = None
    remark: Optional[str] = None


@dataclass(frozen=True)
class LedgerEntry:
    """A movement with the running balance after applying it."""

    movement: Movement
    balance_after: Decimal


@dataclass(frozen=True)
class LedgerReport:
    """Running-balance report for one account over a period."""

    opening_balance: Decimal
    balance_type: BalanceType
    total_debit: Decimal
    total_credit: Decimal
    closing_balance: Decimal
    entries: tuple[LedgerEntry, ...] = field(default_factory=tuple)

    @property
    def closing_side(self) -> BalanceType:
        """Side the closing balance falls on (debit-positive arithmetic)."""
        return BalanceType.of(self.closing_balance)
