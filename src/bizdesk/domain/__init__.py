"""Domain layer for bizdesk application."""

# Services are resolved lazily: the database layer imports domain.entities,
# and services import the database layer.
_SERVICES = {
    "CompanyService": "bizdesk.domain.company",
    "RoleService": "bizdesk.domain.role",
    "MembershipService": "bizdesk.domain.membership",
    "ProjectCategoryService": "bizdesk.domain.category",
    "ProjectService": "bizdesk.domain.project",
    "MilestoneService": "bizdesk.domain.milestone",
    "ChartOfAccountsService": "bizdesk.domain.chart_of_accounts",
    "LedgerService": "bizdesk.domain.ledger_service",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
