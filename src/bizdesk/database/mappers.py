"""Mapper functions to convert between domain models and SQLAlchemy models.

Rows leave the database layer only as frozen domain entities, so column
naming and storage types stay isolated here.
"""

from decimal import Decimal

from bizdesk.domain import entities as domain
from bizdesk.database.models import (
    Company as ORMCompany,
    Role as ORMRole,
    Membership as ORMMembership,
    ProjectCategory as ORMProjectCategory,
    Project as ORMProject,
    Milestone as ORMMilestone,
    ChartOfAccount as ORMChartOfAccount,
    JournalEntryItem as ORMJournalEntryItem,
)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        country_code=orm_company.country_code,
        created_at=orm_company.created_at,
    )


def role_to_domain(orm_role: ORMRole) -> domain.Role:
    """Convert SQLAlchemy Role model to domain Role entity."""
    permissions = {
        module: {action: granted is True for action, granted in actions.items()}
        for module, actions in (orm_role.permissions or {}).items()
    }
    return domain.Role(
        id=orm_role.id,
        name=orm_role.name,
        description=orm_role.description,
        permissions=permissions,
        is_system_role=bool(orm_role.is_system_role),
        created_at=orm_role.created_at,
    )


def membership_to_domain(orm_membership: ORMMembership) -> domain.Membership:
    """Convert SQLAlchemy Membership model to domain Membership entity."""
    return domain.Membership(
        id=orm_membership.id,
        user_id=orm_membership.user_id,
        company_id=orm_membership.company_id,
        role_id=orm_membership.role_id,
        is_active=bool(orm_membership.is_active),
        created_at=orm_membership.created_at,
    )


def project_category_to_domain(orm_category: ORMProjectCategory) -> domain.ProjectCategory:
    """Convert SQLAlchemy ProjectCategory model to domain ProjectCategory entity."""
    frequency = orm_category.recurrence_frequency
    return domain.ProjectCategory(
        id=orm_category.id,
        company_id=orm_category.company_id,
        name=orm_category.name,
        description=orm_category.description,
        is_recurring=bool(orm_category.is_recurring_category),
        frequency=domain.Frequency(frequency) if frequency else None,
        due_day=orm_category.recurrence_due_day,
        due_month=orm_category.recurrence_due_month,
        billing_type=domain.BillingType(orm_category.billing_type),
        created_at=orm_category.created_at,
    )


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    frequency = orm_project.recurrence_frequency
    return domain.Project(
        id=orm_project.id,
        company_id=orm_project.company_id,
        name=orm_project.name,
        category_id=orm_project.category_id,
        is_recurring=bool(orm_project.is_recurring),
        frequency=domain.Frequency(frequency) if frequency else None,
        recurrence_due_date=orm_project.recurrence_due_date,
        last_recurrence_created_at=orm_project.last_recurrence_created_at,
        created_at=orm_project.created_at,
    )


def milestone_to_domain(orm_milestone: ORMMilestone) -> domain.Milestone:
    """Convert SQLAlchemy Milestone model to domain Milestone entity."""
    return domain.Milestone(
        id=orm_milestone.id,
        project_id=orm_milestone.project_id,
        name=orm_milestone.milestone_name,
        due_date=orm_milestone.due_date,
        status=domain.MilestoneStatus(orm_milestone.status),
        completed_date=orm_milestone.completed_date,
        notes=orm_milestone.notes,
    )


def ledger_account_to_domain(orm_account: ORMChartOfAccount) -> domain.LedgerAccount:
    """Convert SQLAlchemy ChartOfAccount model to domain LedgerAccount entity."""
    return domain.LedgerAccount(
        id=orm_account.id,
        company_id=orm_account.company_id,
        code=orm_account.account_code,
        name=orm_account.account_name,
        account_type=domain.AccountType(orm_account.account_type),
        parent_id=orm_account.parent_account_id,
        is_group=bool(orm_account.is_group),
        balance_type=domain.BalanceType(orm_account.balance_type),
        opening_balance=Decimal(orm_account.opening_balance or 0),
        description=orm_account.comment,
        created_at=orm_account.created_at,
    )


def movement_to_domain(orm_item: ORMJournalEntryItem) -> domain.Movement:
    """Convert SQLAlchemy JournalEntryItem model to domain Movement entity."""
    return domain.Movement(
        id=orm_item.id,
        account_id=orm_item.account_id,
        posting_date=orm_item.posting_date,
        debit_amount=Decimal(orm_item.debit_amount or 0),
        credit_amount=Decimal(orm_item.credit_amount or 0),
        entry_no=orm_item.entry_no,
        remark=orm_item.user_remark,
    )
