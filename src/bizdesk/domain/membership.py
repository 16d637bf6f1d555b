"""Membership domain service: who holds which role in which company."""

import logging
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import Membership, Role
from bizdesk.domain.errors import (
    NotFoundError,
    PermissionDenied,
    ValidationError,
    company_not_found,
    role_not_found,
)
from bizdesk.domain.permissions import has_permission

logger = logging.getLogger(__name__)


class MembershipService:
    """Service for user-company-role memberships and effective permissions."""

    def __init__(self, db: Database):
        """Initialize membership service.

        Args:
            db: Database instance
        """
        self.db = db

    def assign_role(self, user_id: str, company_id: int, role_id: int, is_active: bool = True) -> int:
        """Assign a role to a user in a company.

        A user holds one role per company; assigning again replaces it.

        Returns:
            Membership ID

        Raises:
            ValidationError: If the user ID is blank
            NotFoundError: If the company or role does not exist
        """
        user_id = (user_id or "").strip()
        if not user_id:
            raise ValidationError("User ID is required")
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        if self.db.get_role(role_id) is None:
            raise NotFoundError(role_not_found(role_id))

        membership_id = self.db.upsert_membership(
            user_id=user_id, company_id=company_id, role_id=role_id, is_active=is_active
        )
        logger.info("Assigned role %s to %s in company %s", role_id, user_id, company_id)
        return membership_id

    def set_active(self, user_id: str, company_id: int, is_active: bool) -> None:
        """Activate or deactivate a membership without changing its role."""
        membership = self.get_membership(user_id, company_id)
        if membership is None:
            raise NotFoundError(f"User '{user_id}' is not a member of company {company_id}")
        self.db.upsert_membership(
            user_id=user_id,
            company_id=company_id,
            role_id=membership.role_id,
            is_active=is_active,
        )

    def remove(self, user_id: str, company_id: int) -> None:
        """Remove a user's membership in a company."""
        self.db.delete_membership(user_id, company_id)
        logger.info("Removed %s from company %s", user_id, company_id)

    def get_membership(self, user_id: str, company_id: int) -> Optional[Membership]:
        """Get the membership of a user in a company."""
        return self.db.get_membership(user_id, company_id)

    def list_memberships(
        self, company_id: Optional[int] = None, user_id: Optional[str] = None
    ) -> list[Membership]:
        """List memberships, optionally filtered by company or user."""
        return self.db.list_memberships(company_id=company_id, user_id=user_id)

    def count_for_role(self, role_id: int) -> int:
        """Count memberships referencing a role."""
        return self.db.count_memberships_for_role(role_id)

    def role_for(self, user_id: str, company_id: int) -> Optional[Role]:
        """Return the role of an active membership, or None."""
        membership = self.db.get_membership(user_id, company_id)
        if membership is None or not membership.is_active:
            return None
        return self.db.get_role(membership.role_id)

    def effective_permission(self, user_id: str, company_id: int, module: str, action: str) -> bool:
        """Evaluate a permission for a user in a company.

        No membership, an inactive membership, or a role without the grant all
        evaluate to False.
        """
        return has_permission(self.role_for(user_id, company_id), module, action)

    def require_permission(self, user_id: str, company_id: int, module: str, action: str) -> None:
        """Raise PermissionDenied unless the user holds the grant."""
        if not self.effective_permission(user_id, company_id, module, action):
            logger.warning("Denied %s:%s to %s in company %s", module, action, user_id, company_id)
            raise PermissionDenied(module, action)
