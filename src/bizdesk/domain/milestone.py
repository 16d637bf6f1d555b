"""Milestone domain service."""

import logging
from datetime import date
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import Milestone, MilestoneStatus
from bizdesk.domain.errors import (
    NotFoundError,
    ValidationError,
    milestone_not_found,
    project_not_found,
)

logger = logging.getLogger(__name__)


def validate_milestone(
    name: str,
    due_date: Optional[date],
    status: "MilestoneStatus | str",
    completed_date: Optional[date],
    today: Optional[date] = None,
) -> tuple[str, MilestoneStatus]:
    """Validate milestone form input.

    Returns:
        Tuple of (stripped name, parsed status)

    Raises:
        ValidationError: If the name or due date is missing, the status is
            unknown, an achieved milestone has no completed date, or the
            completed date lies in the future
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Milestone Name is required.")
    if due_date is None:
        raise ValidationError("Due Date is required.")
    try:
        parsed_status = MilestoneStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in MilestoneStatus)
        raise ValidationError(f"Unknown milestone status '{status}'. Allowed: {allowed}")

    if parsed_status is MilestoneStatus.ACHIEVED and completed_date is None:
        raise ValidationError("Completed Date is required for achieved milestones.")
    if completed_date is not None and completed_date > (today or date.today()):
        raise ValidationError("Completed Date cannot be in the future.")
    return name, parsed_status


class MilestoneService:
    """Service for managing project milestones."""

    def __init__(self, db: Database):
        """Initialize milestone service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_milestone(
        self,
        project_id: int,
        name: str,
        due_date: date,
        status: "MilestoneStatus | str" = MilestoneStatus.PLANNED,
        completed_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a milestone.

        Returns:
            Milestone ID

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If validate_milestone rejects the input
        """
        if self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))
        name, parsed_status = validate_milestone(name, due_date, status, completed_date)

        milestone_id = self.db.create_milestone(
            project_id=project_id,
            name=name,
            due_date=due_date,
            status=parsed_status.value,
            completed_date=completed_date,
            notes=notes or None,
        )
        logger.info("Created milestone %s for project %s", milestone_id, project_id)
        return milestone_id

    def update_milestone(
        self,
        milestone_id: int,
        name: str,
        due_date: date,
        status: "MilestoneStatus | str",
        completed_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Replace a milestone's fields, validating as create_milestone does."""
        if self.db.get_milestone(milestone_id) is None:
            raise NotFoundError(milestone_not_found(milestone_id))
        name, parsed_status = validate_milestone(name, due_date, status, completed_date)

        self.db.update_milestone(
            milestone_id=milestone_id,
            name=name,
            due_date=due_date,
            status=parsed_status.value,
            completed_date=completed_date,
            notes=notes or None,
        )
        logger.info("Updated milestone %s to %s", milestone_id, parsed_status.value)

    def get_milestone(self, milestone_id: int) -> Optional[Milestone]:
        """Get milestone by ID."""
        return self.db.get_milestone(milestone_id)

    def list_milestones(self, project_id: int) -> list[Milestone]:
        """List a project's milestones by due date."""
        return self.db.list_milestones(project_id)

    def status_counts(self, project_id: int) -> dict[MilestoneStatus, int]:
        """Count a project's milestones per status."""
        counts = {status: 0 for status in MilestoneStatus}
        for milestone in self.db.list_milestones(project_id):
            counts[milestone.status] += 1
        return counts
