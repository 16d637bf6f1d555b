"""Permission catalog and grant-map evaluation.

A role carries a sparse grant map ``module -> action -> bool``. Anything not
present in the map is denied.
"""

from typing import Iterable, Mapping, Optional

from bizdesk.domain.entities import PermissionEntry, Role

GrantMap = dict[str, dict[str, bool]]

_CRUD = ("view", "create", "update", "delete")


def _crud(noun: str, **extra: str) -> dict[str, str]:
    actions = {action: f"{action.capitalize()} {noun}" for action in _CRUD}
    actions.update(extra)
    return actions


# module -> action -> description
ALL_PERMISSIONS: dict[str, dict[str, str]] = {
    "dashboard": {"view": "View dashboard"},
    "sales": _crud("sales documents", approve="Approve sales invoices"),
    "purchase": _crud("purchase documents", approve="Approve purchase orders"),
    "inventory": _crud("inventory items and stock"),
    "accounting": _crud(
        "ledgers and vouchers",
        post="Post journal entries",
        reports="View accounting reports",
    ),
    "crm": _crud("leads, opportunities and campaigns"),
    "project": _crud("projects, tasks and milestones"),
    "hr": _crud("employee records"),
    "manufacturing": _crud("production orders"),
    "compliance": _crud("compliance tasks"),
    "reports": {"view": "View reports", "export": "Export reports"},
    "company_management": _crud("companies and periods"),
    "user_management": _crud("users"),
    "role_management": _crud("roles"),
}


def iter_catalog() -> list[PermissionEntry]:
    """Return the catalog as a flat list of entries in declaration order."""
    return [
        PermissionEntry(module=module, action=action, description=description)
        for module, actions in ALL_PERMISSIONS.items()
        for action, description in actions.items()
    ]


def is_known_permission(module: str, action: str) -> bool:
    """Return True if (module, action) exists in the catalog."""
    return action in ALL_PERMISSIONS.get(module, {})


def has_permission(role: Optional[Role], module: str, action: str) -> bool:
    """Evaluate a single grant on a role.

    Missing role, module or action all resolve to False.
    """
    if role is None:
        return False
    return grants_allow(role.permissions, module, action)


def grants_allow(grants: Optional[Mapping[str, Mapping[str, bool]]], module: str, action: str) -> bool:
    """Evaluate a single grant on a raw grant map."""
    if not grants:
        return False
    actions = grants.get(module)
    if not actions:
        return False
    return actions.get(action) is True


def has_any_permission(roles: Iterable[Role], module: str, action: str) -> bool:
    """Union evaluation over several roles.

    Memberships carry a single role, so nothing in the application calls this
    with more than one; it exists for callers that opt into union semantics.
    """
    return any(has_permission(role, module, action) for role in roles)


def set_permission(grants: Optional[Mapping[str, Mapping[str, bool]]], module: str, action: str, granted: bool) -> GrantMap:
    """Return a copy of ``grants`` with one action toggled.

    A module whose actions are all False is removed from the map.
    """
    updated: GrantMap = {m: dict(actions) for m, actions in (grants or {}).items()}
    updated.setdefault(module, {})[action] = granted

    if not granted and not any(updated[module].values()):
        del updated[module]
    return updated


def granted_permissions(grants: Optional[Mapping[str, Mapping[str, bool]]]) -> list[tuple[str, str]]:
    """List (module, action) pairs that are granted."""
    return [
        (module, action)
        for module, actions in (grants or {}).items()
        for action, granted in actions.items()
        if granted is True
    ]


def unknown_permissions(grants: Optional[Mapping[str, Mapping[str, bool]]]) -> list[tuple[str, str]]:
    """List (module, action) pairs in ``grants`` that the catalog does not define."""
    return [
        (module, action)
        for module, actions in (grants or {}).items()
        for action in actions
        if not is_known_permission(module, action)
    ]


def build_grant_map(pairs: Iterable[tuple[str, str]]) -> GrantMap:
    """Build a grant map granting every (module, action) pair given."""
    grants: GrantMap = {}
    for module, action in pairs:
        grants = set_permission(grants, module, action, True)
    return grants


def full_grant_map() -> GrantMap:
    """Grant map with every catalog permission granted."""
    return build_grant_map((entry.module, entry.action) for entry in iter_catalog())


def parse_permission(token: str) -> tuple[str, str]:
    """Parse a ``module:action`` token.

    Raises:
        ValueError: If the token is not of the form module:action
    """
    module, sep, action = token.strip().partition(":")
    if not sep or not module or not action:
        raise ValueError(f"Invalid permission '{token}'. Use the form module:action")
    return module, action
