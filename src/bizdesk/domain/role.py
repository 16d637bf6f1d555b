"""Role domain service."""

import logging
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import Role
from bizdesk.domain.errors import (
    ConflictError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
    role_delete_blocked,
    role_not_found,
)
from bizdesk.domain.permissions import (
    GrantMap,
    full_grant_map,
    build_grant_map,
    granted_permissions,
    iter_catalog,
    set_permission,
    unknown_permissions,
)

logger = logging.getLogger(__name__)

# name -> (description, is_system_role, grant map factory)
DEFAULT_ROLES = {
    "Admin": ("Full access to every module", True, full_grant_map),
    "Viewer": (
        "Read-only access to every module",
        False,
        lambda: build_grant_map(
            (entry.module, entry.action) for entry in iter_catalog() if entry.action == "view"
        ),
    ),
}


class RoleService:
    """Service for managing roles and their grant maps."""

    def __init__(self, db: Database):
        """Initialize role service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, name: str, permissions: GrantMap) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Role Name is required.")
        unknown = unknown_permissions(permissions)
        if unknown:
            listed = ", ".join(f"{module}:{action}" for module, action in unknown)
            raise ValidationError(f"Unknown permission(s): {listed}")
        if not granted_permissions(permissions):
            raise ValidationError("At least one permission must be selected.")
        return name

    @staticmethod
    def _normalize(permissions: GrantMap) -> GrantMap:
        """Rebuild a grant map through set_permission so all-false modules are pruned."""
        normalized: GrantMap = {}
        for module, actions in permissions.items():
            for action, granted in actions.items():
                normalized = set_permission(normalized, module, action, granted is True)
        return normalized

    def create_role(
        self,
        name: str,
        permissions: GrantMap,
        description: Optional[str] = None,
        is_system_role: bool = False,
    ) -> int:
        """Create a role.

        Args:
            name: Role name
            permissions: Grant map (module -> action -> bool)
            description: Optional description
            is_system_role: Mark as a system role (cannot be deleted)

        Returns:
            Role ID

        Raises:
            ValidationError: If the name is blank, no permission is granted, or a
                permission is not in the catalog
            ConflictError: If a role with the same name exists
        """
        name = self._validate(name, permissions)
        if self.db.get_role_by_name(name) is not None:
            raise ConflictError(f"Role with name '{name}' already exists")

        role_id = self.db.create_role(
            name=name,
            description=description,
            permissions=self._normalize(permissions),
            is_system_role=is_system_role,
        )
        logger.info("Created role %s (%s)", role_id, name)
        return role_id

    def get_role(self, role_id: int) -> Optional[Role]:
        """Get role by ID."""
        return self.db.get_role(role_id)

    def require_role(self, role_id: int) -> Role:
        """Get role by ID or raise NotFoundError."""
        role = self.db.get_role(role_id)
        if role is None:
            raise NotFoundError(role_not_found(role_id))
        return role

    def get_role_by_name(self, name: str) -> Optional[Role]:
        """Get role by name."""
        return self.db.get_role_by_name(name)

    def list_roles(self) -> list[Role]:
        """List all roles ordered by name."""
        return self.db.list_roles()

    def update_role(
        self,
        role_id: int,
        name: str,
        permissions: GrantMap,
        description: Optional[str] = None,
        is_system_role: bool = False,
    ) -> None:
        """Update a role.

        A system role stays a system role regardless of ``is_system_role``.

        Raises:
            NotFoundError: If the role does not exist
            ValidationError: On the same conditions as create_role
            ConflictError: If another role already uses the name
        """
        existing = self.require_role(role_id)
        name = self._validate(name, permissions)
        other = self.db.get_role_by_name(name)
        if other is not None and other.id != role_id:
            raise ConflictError(f"Role with name '{name}' already exists")

        self.db.update_role(
            role_id=role_id,
            name=name,
            description=description,
            permissions=self._normalize(permissions),
            is_system_role=existing.is_system_role or is_system_role,
        )
        logger.info("Updated role %s (%s)", role_id, name)

    def set_permission(self, role_id: int, module: str, action: str, granted: bool) -> Role:
        """Toggle a single grant on a stored role.

        Raises:
            NotFoundError: If the role does not exist
            ValidationError: If the permission is unknown or the change would
                leave the role without any granted permission
        """
        role = self.require_role(role_id)
        permissions = set_permission(role.permissions, module, action, granted)
        self.update_role(
            role_id=role.id,
            name=role.name,
            permissions=permissions,
            description=role.description,
            is_system_role=role.is_system_role,
        )
        return self.require_role(role_id)

    def delete_role(self, role_id: int) -> None:
        """Delete a role that no membership references.

        The reference check and the delete run as one conditional statement.

        Raises:
            NotFoundError: If the role does not exist
            ValidationError: If the role is a system role
            ReferentialIntegrityError: If users are still assigned to the role
        """
        role = self.require_role(role_id)
        if role.is_system_role:
            raise ValidationError(f"Cannot delete system role '{role.name}'")

        if not self.db.delete_role_if_unreferenced(role_id):
            count = self.db.count_memberships_for_role(role_id)
            if count == 0 and self.db.get_role(role_id) is None:
                raise NotFoundError(role_not_found(role_id))
            logger.warning("Refused to delete role %s: %s membership(s)", role_id, count)
            raise ReferentialIntegrityError(role_delete_blocked(role_id, count))
        logger.info("Deleted role %s (%s)", role_id, role.name)

    def seed_default_roles(self) -> list[int]:
        """Create the default roles that do not exist yet.

        Returns:
            IDs of the roles created
        """
        created = []
        for name, (description, is_system_role, grants) in DEFAULT_ROLES.items():
            if self.db.get_role_by_name(name) is not None:
                continue
            created.append(
                self.create_role(
                    name=name,
                    permissions=grants(),
                    description=description,
                    is_system_role=is_system_role,
                )
            )
        return created
