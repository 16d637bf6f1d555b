"""Tests for ProjectService and recurrence tracking."""

from datetime import date

import pytest

from bizdesk.domain.entities import Frequency
from bizdesk.domain.errors import NotFoundError, ValidationError


@pytest.fixture
def monthly_category(category_service, sample_company):
    return category_service.create_category(
        sample_company.id, "GST Return", is_recurring=True, frequency="monthly", due_day=31
    )


def test_create_plain_project(project_service, sample_company):
    project_id = project_service.create_project(sample_company.id, "Website")

    project = project_service.get_project(project_id)
    assert project.name == "Website"
    assert project.is_recurring is False
    assert project.frequency is None
    assert project.recurrence_due_date is None


def test_create_project_in_recurring_category(project_service, sample_company, monthly_category):
    project_id = project_service.create_project(
        sample_company.id, "GST FY24", category_id=monthly_category, start_date=date(2024, 1, 31)
    )

    project = project_service.get_project(project_id)
    assert project.is_recurring is True
    assert project.frequency is Frequency.MONTHLY
    assert project.recurrence_due_date == date(2024, 2, 29)
    assert project.last_recurrence_created_at is None


def test_create_project_in_one_off_category(project_service, category_service, sample_company):
    category_id = category_service.create_category(sample_company.id, "Audit")
    project_id = project_service.create_project(sample_company.id, "Audit 2024", category_id=category_id)
    assert project_service.get_project(project_id).is_recurring is False


def test_create_project_validation(project_service, company_service, sample_company, monthly_category):
    with pytest.raises(ValidationError):
        project_service.create_project(sample_company.id, "  ")
    with pytest.raises(NotFoundError):
        project_service.create_project(999, "X")
    with pytest.raises(NotFoundError):
        project_service.create_project(sample_company.id, "X", category_id=999)

    other_id = company_service.create_company("Globex")
    with pytest.raises(ValidationError, match="does not belong"):
        project_service.create_project(other_id, "X", category_id=monthly_category)


def test_record_recurrence_advances_from_due_date(project_service, sample_company, monthly_category):
    project_id = project_service.create_project(
        sample_company.id, "GST", category_id=monthly_category, start_date=date(2024, 1, 31)
    )

    # Recorded late: the schedule still advances from the due date
    project = project_service.record_recurrence(project_id, on_date=date(2024, 3, 5))
    assert project.last_recurrence_created_at == date(2024, 3, 5)
    assert project.recurrence_due_date == date(2024, 3, 31)

    project = project_service.record_recurrence(project_id, on_date=date(2024, 3, 31))
    assert project.recurrence_due_date == date(2024, 4, 30)


def test_record_recurrence_on_one_off_project(project_service, sample_company):
    project_id = project_service.create_project(sample_company.id, "Website")
    with pytest.raises(ValidationError, match="not recurring"):
        project_service.record_recurrence(project_id)


def test_record_recurrence_after_category_stops_recurring(
    project_service, category_service, sample_company, monthly_category
):
    project_id = project_service.create_project(sample_company.id, "GST", category_id=monthly_category)
    category_service.update_category(monthly_category, "GST Return")

    with pytest.raises(ValidationError, match="no longer defines a recurrence"):
        project_service.record_recurrence(project_id)


def test_upcoming_recurring(project_service, category_service, sample_company, monthly_category):
    weekly = category_service.create_category(
        sample_company.id, "Payroll", is_recurring=True, frequency="weekly", due_day=5
    )
    project_service.create_project(sample_company.id, "Plain")
    gst = project_service.create_project(
        sample_company.id, "GST", category_id=monthly_category, start_date=date(2024, 1, 10)
    )
    payroll = project_service.create_project(
        sample_company.id, "Payroll", category_id=weekly, start_date=date(2024, 1, 1)
    )

    upcoming = project_service.upcoming_recurring(sample_company.id)
    assert [p.id for p in upcoming] == [payroll, gst]
    assert [p.id for p in project_service.upcoming_recurring(sample_company.id, limit=1)] == [payroll]


def test_list_projects_by_name(project_service, sample_company):
    project_service.create_project(sample_company.id, "Beta")
    project_service.create_project(sample_company.id, "Alpha")
    assert [p.name for p in project_service.list_projects(sample_company.id)] == ["Alpha", "Beta"]
