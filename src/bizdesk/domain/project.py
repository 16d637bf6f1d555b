"""Project domain service with recurrence tracking."""

import logging
from datetime import date
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import Project
from bizdesk.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    company_not_found,
    project_not_found,
)
from bizdesk.domain.recurrence import next_due_date_for_rule

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for managing projects.

    A project created under a recurring category copies the category's
    frequency and gets its first due date computed once from its start date.
    Later due dates advance only when a recurrence is recorded.
    """

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_project(
        self,
        company_id: int,
        name: str,
        category_id: Optional[int] = None,
        start_date: Optional[date] = None,
    ) -> int:
        """Create a project.

        Args:
            company_id: Owning company ID
            name: Project name
            category_id: Optional project category ID
            start_date: Date the first due date is computed from (defaults to today)

        Returns:
            Project ID

        Raises:
            ValidationError: If the name is blank or the category belongs to
                another company
            NotFoundError: If the company or category does not exist
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Project Name is required.")
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

        rule = None
        if category_id is not None:
            category = self.db.get_project_category(category_id)
            if category is None:
                raise NotFoundError(category_not_found(category_id))
            if category.company_id != company_id:
                raise ValidationError(
                    f"Project category {category_id} does not belong to company {company_id}"
                )
            rule = category.recurrence_rule

        due_date = None
        if rule is not None:
            due_date = next_due_date_for_rule(rule, start_date or date.today())

        project_id = self.db.create_project(
            company_id=company_id,
            name=name,
            category_id=category_id,
            is_recurring=rule is not None,
            frequency=rule.frequency.value if rule else None,
            recurrence_due_date=due_date,
        )
        logger.info("Created project %s (%s), next due %s", project_id, name, due_date)
        return project_id

    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        return self.db.get_project(project_id)

    def require_project(self, project_id: int) -> Project:
        """Get project by ID or raise NotFoundError."""
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))
        return project

    def list_projects(self, company_id: int) -> list[Project]:
        """List a company's projects by name."""
        return self.db.list_projects(company_id)

    def upcoming_recurring(self, company_id: int, limit: int = 10) -> list[Project]:
        """List recurring projects soonest-due first."""
        return self.db.list_projects(company_id, recurring_only=True)[:limit]

    def record_recurrence(self, project_id: int, on_date: Optional[date] = None) -> Project:
        """Record that the current recurrence was created and advance the due date.

        The next due date is computed from the current due date using the
        category's rule, so late recording does not shift the schedule.

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If the project is not recurring or its category
                no longer recurs
        """
        project = self.require_project(project_id)
        if not project.is_recurring or project.category_id is None:
            raise ValidationError(f"Project {project_id} is not recurring")

        category = self.db.get_project_category(project.category_id)
        rule = category.recurrence_rule if category is not None else None
        if rule is None:
            raise ValidationError(
                f"Category of project {project_id} no longer defines a recurrence"
            )

        on_date = on_date or date.today()
        base = project.recurrence_due_date or on_date
        next_date = next_due_date_for_rule(rule, base)
        self.db.update_project_recurrence(
            project_id=project_id,
            recurrence_due_date=next_date,
            last_recurrence_created_at=on_date,
        )
        logger.info("Project %s recurrence recorded on %s, next due %s", project_id, on_date, next_date)
        return self.require_project(project_id)
