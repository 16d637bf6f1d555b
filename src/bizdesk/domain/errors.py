"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class RecurrenceRangeError(ValidationError):
    """A recurrence parameter is missing or outside its allowed range."""

    def __init__(self, field: str, low: int, high: int, frequency: str):
        self.field = field
        self.low = low
        self.high = high
        self.frequency = frequency
        super().__init__(
            f"{field} must be between {low} and {high} for {frequency} recurrence"
        )


class MalformedMovementError(ValidationError):
    """A ledger movement has a missing date or a missing/negative amount."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class ReferentialIntegrityError(DomainError):
    """Operation blocked because other records still reference the entity."""


class PermissionDenied(DomainError):
    """The acting user's role does not grant the requested action."""

    def __init__(self, module: str, action: str):
        self.module = module
        self.action = action
        super().__init__(f"You do not have permission to {action} {module.replace('_', ' ')}")


def company_not_found(company_id: int) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def role_not_found(role_id: int) -> str:
    """Return message for missing role."""
    return f"Role {role_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing project category."""
    return f"Project category {category_id} not found"


def project_not_found(project_id: int) -> str:
    """Return message for missing project."""
    return f"Project {project_id} not found"


def milestone_not_found(milestone_id: int) -> str:
    """Return message for missing milestone."""
    return f"Milestone {milestone_id} not found"


def account_not_found(account_id: int) -> str:
    """Return message for missing ledger account."""
    return f"Ledger account {account_id} not found"


def role_delete_blocked(role_id: int, membership_count: int) -> str:
    """Return message when a role still has members assigned."""
    return (
        f"Cannot delete role {role_id}: {membership_count} "
        f"user{'s' if membership_count != 1 else ''} currently assigned. "
        "Please reassign them first."
    )
