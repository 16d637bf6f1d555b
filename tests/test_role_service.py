"""Tests for RoleService."""

import pytest

from bizdesk.domain.errors import (
    ConflictError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)
from bizdesk.domain.permissions import full_grant_map, has_permission


def test_create_role(role_service):
    role_id = role_service.create_role(
        name="  Sales Rep ",
        permissions={"sales": {"view": True, "create": True}},
        description="Field sales",
    )

    role = role_service.get_role(role_id)
    assert role.name == "Sales Rep"
    assert role.description == "Field sales"
    assert role.permissions == {"sales": {"view": True, "create": True}}
    assert role.is_system_role is False


def test_create_role_requires_name(role_service):
    with pytest.raises(ValidationError, match="Role Name is required."):
        role_service.create_role(name="   ", permissions={"sales": {"view": True}})


def test_create_role_requires_a_grant(role_service):
    with pytest.raises(ValidationError, match="At least one permission must be selected."):
        role_service.create_role(name="Empty", permissions={})
    with pytest.raises(ValidationError, match="At least one permission"):
        role_service.create_role(name="All off", permissions={"sales": {"view": False}})


def test_create_role_rejects_unknown_permission(role_service):
    with pytest.raises(ValidationError, match="Unknown permission\\(s\\): sales:fly"):
        role_service.create_role(name="Bad", permissions={"sales": {"view": True, "fly": True}})


def test_create_role_duplicate_name(role_service):
    role_service.create_role(name="Clerk", permissions={"sales": {"view": True}})
    with pytest.raises(ConflictError, match="already exists"):
        role_service.create_role(name="Clerk", permissions={"crm": {"view": True}})


def test_create_role_prunes_all_false_modules(role_service):
    role_id = role_service.create_role(
        name="Pruned",
        permissions={"sales": {"view": True}, "crm": {"view": False, "create": False}},
    )
    assert role_service.get_role(role_id).permissions == {"sales": {"view": True}}


def test_list_roles_ordered_by_name(role_service):
    for name in ["Zeta", "Alpha", "Mid"]:
        role_service.create_role(name=name, permissions={"sales": {"view": True}})
    assert [r.name for r in role_service.list_roles()] == ["Alpha", "Mid", "Zeta"]


def test_update_role(role_service):
    role_id = role_service.create_role(name="Clerk", permissions={"sales": {"view": True}})

    role_service.update_role(
        role_id, name="Senior Clerk", permissions={"purchase": {"view": True, "approve": True}}
    )

    role = role_service.get_role(role_id)
    assert role.name == "Senior Clerk"
    assert role.permissions == {"purchase": {"view": True, "approve": True}}


def test_update_role_validates(role_service):
    role_id = role_service.create_role(name="Clerk", permissions={"sales": {"view": True}})
    with pytest.raises(ValidationError):
        role_service.update_role(role_id, name="Clerk", permissions={})


def test_update_role_name_conflict(role_service):
    role_service.create_role(name="A", permissions={"sales": {"view": True}})
    b = role_service.create_role(name="B", permissions={"sales": {"view": True}})
    with pytest.raises(ConflictError):
        role_service.update_role(b, name="A", permissions={"sales": {"view": True}})


def test_update_missing_role(role_service):
    with pytest.raises(NotFoundError):
        role_service.update_role(999, name="X", permissions={"sales": {"view": True}})


def test_system_flag_is_sticky(role_service):
    role_id = role_service.create_role(
        name="Root", permissions=full_grant_map(), is_system_role=True
    )
    role_service.update_role(role_id, name="Root", permissions=full_grant_map(), is_system_role=False)
    assert role_service.get_role(role_id).is_system_role is True


def test_set_permission_toggles_and_prunes(role_service):
    role_id = role_service.create_role(
        name="Clerk", permissions={"sales": {"view": True}, "crm": {"view": True}}
    )

    role = role_service.set_permission(role_id, "crm", "create", True)
    assert has_permission(role, "crm", "create")

    role_service.set_permission(role_id, "crm", "create", False)
    role = role_service.set_permission(role_id, "crm", "view", False)
    assert "crm" not in role.permissions
    assert has_permission(role, "crm", "view") is False
    assert has_permission(role, "sales", "view") is True


def test_set_permission_cannot_remove_last_grant(role_service):
    role_id = role_service.create_role(name="Clerk", permissions={"sales": {"view": True}})
    with pytest.raises(ValidationError, match="At least one permission"):
        role_service.set_permission(role_id, "sales", "view", False)


def test_delete_unreferenced_role(role_service):
    role_id = role_service.create_role(name="Temp", permissions={"sales": {"view": True}})
    role_service.delete_role(role_id)
    assert role_service.get_role(role_id) is None


def test_delete_role_blocked_by_membership(role_service, membership_service, sample_company):
    role_id = role_service.create_role(name="Used", permissions={"sales": {"view": True}})
    membership_service.assign_role("alice", sample_company.id, role_id)

    with pytest.raises(ReferentialIntegrityError, match="1 user currently assigned"):
        role_service.delete_role(role_id)
    assert role_service.get_role(role_id) is not None


def test_delete_role_blocked_by_inactive_membership(role_service, membership_service, sample_company):
    role_id = role_service.create_role(name="Used", permissions={"sales": {"view": True}})
    membership_service.assign_role("alice", sample_company.id, role_id, is_active=False)

    with pytest.raises(ReferentialIntegrityError):
        role_service.delete_role(role_id)


def test_delete_role_after_membership_removed(role_service, membership_service, sample_company):
    role_id = role_service.create_role(name="Used", permissions={"sales": {"view": True}})
    membership_service.assign_role("alice", sample_company.id, role_id)
    membership_service.remove("alice", sample_company.id)

    role_service.delete_role(role_id)
    assert role_service.get_role(role_id) is None


def test_delete_system_role(role_service):
    role_service.seed_default_roles()
    admin = role_service.get_role_by_name("Admin")
    with pytest.raises(ValidationError, match="Cannot delete system role 'Admin'"):
        role_service.delete_role(admin.id)


def test_delete_missing_role(role_service):
    with pytest.raises(NotFoundError):
        role_service.delete_role(12345)


def test_atomic_delete_returns_false_when_referenced(temp_db, role_service, membership_service, sample_company):
    role_id = role_service.create_role(name="Used", permissions={"sales": {"view": True}})
    membership_service.assign_role("bob", sample_company.id, role_id)

    assert temp_db.delete_role_if_unreferenced(role_id) is False
    membership_service.remove("bob", sample_company.id)
    assert temp_db.delete_role_if_unreferenced(role_id) is True
    assert temp_db.delete_role_if_unreferenced(role_id) is False


def test_seed_default_roles_is_idempotent(role_service):
    created = role_service.seed_default_roles()
    assert len(created) == 2
    assert role_service.seed_default_roles() == []

    admin = role_service.get_role_by_name("Admin")
    viewer = role_service.get_role_by_name("Viewer")
    assert admin.is_system_role
    assert admin.permissions == full_grant_map()
    assert has_permission(viewer, "accounting", "view")
    assert not has_permission(viewer, "accounting", "post")
