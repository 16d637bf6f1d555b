"""Tests for ProjectCategoryService."""

import pytest

from bizdesk.domain.category import validate_category
from bizdesk.domain.entities import BillingType, Frequency, RecurrenceRule
from bizdesk.domain.errors import (
    ConflictError,
    NotFoundError,
    RecurrenceRangeError,
    ValidationError,
)


def test_create_one_off_category(category_service, sample_company):
    category_id = category_service.create_category(sample_company.id, "Audit", description="Statutory audit")

    category = category_service.get_category(category_id)
    assert category.name == "Audit"
    assert category.is_recurring is False
    assert category.recurrence_rule is None
    assert category.billing_type is BillingType.FIXED_PRICE


def test_create_recurring_category(category_service, sample_company):
    category_id = category_service.create_category(
        sample_company.id,
        "GST Return",
        is_recurring=True,
        frequency="monthly",
        due_day=20,
        billing_type="recurring",
    )

    category = category_service.get_category(category_id)
    assert category.is_recurring is True
    assert category.recurrence_rule == RecurrenceRule(Frequency.MONTHLY, 20)
    assert category.billing_type is BillingType.RECURRING


def test_non_recurring_clears_recurrence_fields(category_service, sample_company):
    category_id = category_service.create_category(
        sample_company.id, "Consulting", is_recurring=False, frequency="weekly", due_day=99
    )

    category = category_service.get_category(category_id)
    assert category.frequency is None
    assert category.due_day is None
    assert category.due_month is None


def test_invalid_recurrence_is_not_saved(category_service, sample_company):
    with pytest.raises(RecurrenceRangeError, match="due_day must be between 1 and 7"):
        category_service.create_category(
            sample_company.id, "Payroll", is_recurring=True, frequency="weekly", due_day=8
        )
    assert category_service.list_categories(sample_company.id) == []


def test_recurring_requires_frequency(category_service, sample_company):
    with pytest.raises(ValidationError, match="frequency is required"):
        category_service.create_category(sample_company.id, "Payroll", is_recurring=True)


def test_category_name_required():
    with pytest.raises(ValidationError, match="Category Name is required."):
        validate_category(" ", False, None, None, None)


def test_unknown_billing_type(category_service, sample_company):
    with pytest.raises(ValidationError, match="Unknown billing type"):
        category_service.create_category(sample_company.id, "Audit", billing_type="barter")


def test_duplicate_name_per_company(category_service, company_service, sample_company):
    category_service.create_category(sample_company.id, "Audit")
    with pytest.raises(ConflictError):
        category_service.create_category(sample_company.id, "Audit")

    other_id = company_service.create_company("Globex")
    category_service.create_category(other_id, "Audit")


def test_unknown_company(category_service):
    with pytest.raises(NotFoundError):
        category_service.create_category(999, "Audit")


def test_update_category(category_service, sample_company):
    category_id = category_service.create_category(sample_company.id, "Filing")

    category_service.update_category(
        category_id, "Annual Filing", is_recurring=True, frequency="yearly", due_day=30, due_month=9
    )

    category = category_service.get_category(category_id)
    assert category.name == "Annual Filing"
    assert category.recurrence_rule == RecurrenceRule(Frequency.YEARLY, 30, 9)


def test_update_category_to_one_off(category_service, sample_company):
    category_id = category_service.create_category(
        sample_company.id, "Filing", is_recurring=True, frequency="quarterly"
    )
    category_service.update_category(category_id, "Filing")
    assert category_service.get_category(category_id).recurrence_rule is None


def test_update_missing_category(category_service):
    with pytest.raises(NotFoundError, match="Project category 5 not found"):
        category_service.update_category(5, "X")
