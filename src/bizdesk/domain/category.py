"""Project category domain service."""

import logging
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import BillingType, ProjectCategory, RecurrenceRule
from bizdesk.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    company_not_found,
)
from bizdesk.domain.recurrence import validate_recurrence

logger = logging.getLogger(__name__)


def parse_billing_type(value: "BillingType | str") -> BillingType:
    """Coerce a billing type name into a BillingType."""
    try:
        return BillingType(value)
    except ValueError:
        allowed = ", ".join(b.value for b in BillingType)
        raise ValidationError(f"Unknown billing type '{value}'. Allowed: {allowed}")


def validate_category(
    name: str,
    is_recurring: bool,
    frequency: Optional[str],
    due_day: Optional[int],
    due_month: Optional[int],
) -> tuple[str, Optional[RecurrenceRule]]:
    """Validate category form input.

    Returns:
        Tuple of (stripped name, recurrence rule or None when not recurring)

    Raises:
        ValidationError: If the name is blank or the recurrence is invalid
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Category Name is required.")
    if not is_recurring:
        return name, None
    return name, validate_recurrence(frequency, due_day, due_month)


class ProjectCategoryService:
    """Service for managing project categories and their recurrence rules."""

    def __init__(self, db: Database):
        """Initialize project category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_unique(self, company_id: int, name: str, category_id: Optional[int] = None) -> None:
        for existing in self.db.list_project_categories(company_id):
            if existing.name == name and existing.id != category_id:
                raise ConflictError(f"Project category '{name}' already exists")

    def create_category(
        self,
        company_id: int,
        name: str,
        description: Optional[str] = None,
        is_recurring: bool = False,
        frequency: Optional[str] = None,
        due_day: Optional[int] = None,
        due_month: Optional[int] = None,
        billing_type: "BillingType | str" = BillingType.FIXED_PRICE,
    ) -> int:
        """Create a project category.

        Recurrence parameters are validated before anything is stored, and are
        discarded when the category is not recurring.

        Returns:
            Category ID

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the name or recurrence parameters are invalid
            ConflictError: If the company already has a category with the name
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        name, rule = validate_category(name, is_recurring, frequency, due_day, due_month)
        billing = parse_billing_type(billing_type)
        self._check_unique(company_id, name)

        category_id = self.db.create_project_category(
            company_id=company_id,
            name=name,
            description=description or None,
            is_recurring=rule is not None,
            frequency=rule.frequency.value if rule else None,
            due_day=rule.due_day if rule else None,
            due_month=rule.due_month if rule else None,
            billing_type=billing.value,
        )
        logger.info("Created project category %s (%s)", category_id, name)
        return category_id

    def update_category(
        self,
        category_id: int,
        name: str,
        description: Optional[str] = None,
        is_recurring: bool = False,
        frequency: Optional[str] = None,
        due_day: Optional[int] = None,
        due_month: Optional[int] = None,
        billing_type: "BillingType | str" = BillingType.FIXED_PRICE,
    ) -> None:
        """Replace a project category's fields, validating as create_category does."""
        existing = self.require_category(category_id)
        name, rule = validate_category(name, is_recurring, frequency, due_day, due_month)
        billing = parse_billing_type(billing_type)
        self._check_unique(existing.company_id, name, category_id)

        self.db.update_project_category(
            category_id=category_id,
            name=name,
            description=description or None,
            is_recurring=rule is not None,
            frequency=rule.frequency.value if rule else None,
            due_day=rule.due_day if rule else None,
            due_month=rule.due_month if rule else None,
            billing_type=billing.value,
        )
        logger.info("Updated project category %s (%s)", category_id, name)

    def get_category(self, category_id: int) -> Optional[ProjectCategory]:
        """Get project category by ID."""
        return self.db.get_project_category(category_id)

    def require_category(self, category_id: int) -> ProjectCategory:
        """Get project category by ID or raise NotFoundError."""
        category = self.db.get_project_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_categories(self, company_id: int) -> list[ProjectCategory]:
        """List a company's project categories."""
        return self.db.list_project_categories(company_id)
