"""SQLAlchemy models for bizdesk database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    JSON,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Company(Base):
    """Tenant company model."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    country_code = Column(String(2), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    memberships = relationship("Membership", back_populates="company", cascade="all, delete-orphan")


class Role(Base):
    """User role model with a JSON grant map."""

    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    permissions = Column(JSON, nullable=False, default=dict)
    is_system_role = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    memberships = relationship("Membership", back_populates="role")


class Membership(Base):
    """User-company-role membership model."""

    __tablename__ = "users_companies"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    role_id = Column(Integer, ForeignKey("user_roles.id"), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "company_id", name="uq_user_company"),)

    # Relationships
    company = relationship("Company", back_populates="memberships")
    role = relationship("Role", back_populates="memberships")


class ProjectCategory(Base):
    """Project category model with recurrence parameters."""

    __tablename__ = "project_categories"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    is_recurring_category = Column(Boolean, default=False, nullable=False)
    recurrence_frequency = Column(String, nullable=True)
    recurrence_due_day = Column(Integer, nullable=True)
    recurrence_due_month = Column(Integer, nullable=True)
    billing_type = Column(String, default="fixed_price", nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("company_id", "name", name="uq_company_category_name"),)

    # Relationships
    projects = relationship("Project", back_populates="category")


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    name = Column(String, nullable=False)
    category_id = Column(Integer, ForeignKey("project_categories.id"), nullable=True)
    is_recurring = Column(Boolean, default=False, nullable=False)
    recurrence_frequency = Column(String, nullable=True)
    recurrence_due_date = Column(Date, nullable=True)
    last_recurrence_created_at = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    category = relationship("ProjectCategory", back_populates="projects")
    milestones = relationship("Milestone", back_populates="project", cascade="all, delete-orphan")


class Milestone(Base):
    """Project milestone model."""

    __tablename__ = "milestones"

    id = Column(Integer, primary_key=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    milestone_name = Column(String, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String, default="planned", nullable=False)
    completed_date = Column(Date, nullable=True)
    notes = Column(String, nullable=True)

    # Relationships
    project = relationship("Project", back_populates="milestones")


class ChartOfAccount(Base):
    """Chart of accounts model with hierarchical structure."""

    __tablename__ = "chart_of_accounts"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)
    account_code = Column(String, nullable=False)
    account_name = Column(String, nullable=False)
    account_type = Column(String, nullable=False)
    parent_account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=True)
    is_group = Column(Boolean, default=False, nullable=False)
    balance_type = Column(String, default="debit", nullable=False)
    opening_balance = Column(Numeric(14, 2), default=0, nullable=False)
    comment = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("company_id", "account_code", name="uq_company_account_code"),)

    # Relationships
    parent = relationship("ChartOfAccount", remote_side=[id], backref="children")
    entry_items = relationship("JournalEntryItem", back_populates="account")


class JournalEntryItem(Base):
    """Journal posting line model."""

    __tablename__ = "journal_entry_items"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    posting_date = Column(Date, nullable=False)
    debit_amount = Column(Numeric(14, 2), default=0, nullable=False)
    credit_amount = Column(Numeric(14, 2), default=0, nullable=False)
    entry_no = Column(String, nullable=True)
    user_remark = Column(String, nullable=True)

    # Relationships
    account = relationship("ChartOfAccount", back_populates="entry_items")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
