"""Tests for CLI date filter helpers."""

from datetime import date, timedelta
from decimal import Decimal

import click
import pytest
from click.testing import CliRunner

from bizdesk.cli.date_filters import period_options, resolve_cli_date_range
from bizdesk.cli.main import cli
from bizdesk.utils.date_parser import PERIODS

# Wednesday in the second quarter
TODAY = date(2024, 5, 15)


def _resolve(today=TODAY, start_date=None, end_date=None, default_range=None, **flags):
    period_flags = {period: flags.get(period.replace("-", "_"), False) for period in PERIODS}
    ctx = click.Context(click.Command("report"))
    return resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags,
        default_range=default_range,
        today=today,
    )


@pytest.mark.parametrize("flag,expected", [
    ("this_week", (date(2024, 5, 13), TODAY)),
    ("this_month", (date(2024, 5, 1), TODAY)),
    ("this_quarter", (date(2024, 4, 1), TODAY)),
    ("this_year", (date(2024, 1, 1), TODAY)),
    ("last_week", (date(2024, 5, 6), date(2024, 5, 12))),
    ("last_month", (date(2024, 4, 1), date(2024, 4, 30))),
    ("last_quarter", (date(2024, 1, 1), date(2024, 3, 31))),
    ("last_year", (date(2023, 1, 1), date(2023, 12, 31))),
])
def test_period_flag_ranges(flag, expected):
    """this-* periods stop at today; last-* periods are complete."""
    assert _resolve(**{flag: True}) == expected


def test_quarters_across_year_boundary():
    january = date(2024, 1, 10)
    assert _resolve(today=january, last_quarter=True) == (date(2023, 10, 1), date(2023, 12, 31))
    assert _resolve(today=january, this_quarter=True) == (date(2024, 1, 1), january)


def test_relative_explicit_dates_use_reference_day():
    start, end = _resolve(start_date="last month", end_date="yesterday")
    assert (start, end) == (date(2024, 4, 1), date(2024, 5, 14))


def test_open_ended_range():
    assert _resolve(end_date="2024-03-31") == (None, date(2024, 3, 31))


def test_default_range_only_without_filters():
    default = (date(2020, 1, 1), date(2020, 1, 31))
    assert _resolve(default_range=default) == default
    assert _resolve(default_range=default, this_month=True) == (date(2024, 5, 1), TODAY)
    assert _resolve() == (None, None)


@pytest.mark.parametrize("kwargs,message", [
    ({"this_month": True, "last_quarter": True}, "Only one period option"),
    ({"this_year": True, "end_date": "2024-03-31"}, "cannot be combined"),
    ({"start_date": "someday"}, "Invalid start date"),
    ({"end_date": "31/31/2024"}, "Invalid end date"),
])
def test_rejected_filters_exit(capsys, kwargs, message):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(**kwargs)

    assert excinfo.value.exit_code == 1
    assert message in capsys.readouterr().err


def test_period_options_collects_flags():
    seen = {}

    @click.command()
    @period_options
    def report(start_date, end_date, period_flags):
        seen.update(start_date=start_date, end_date=end_date, period_flags=period_flags)

    result = CliRunner().invoke(report, ["--last-quarter", "--end-date", "today"])

    assert result.exit_code == 0
    assert seen["start_date"] is None
    assert seen["end_date"] == "today"
    assert [p for p, on in seen["period_flags"].items() if on] == ["last-quarter"]
    assert list(seen["period_flags"]) == list(PERIODS)


def test_ledger_report_with_period_flag(cli_runner, temp_db, ledger_service, sample_company, cash_account):
    today = date.today()
    ledger_service.post_movement(cash_account.id, today, debit=Decimal("75"), remark="Counter sale")
    ledger_service.post_movement(
        cash_account.id, today - timedelta(days=400), credit=Decimal("30"), remark="Old refund"
    )

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "--company", sample_company.name,
         "ledger", "report", cash_account.code, "--this-month"],
    )

    assert result.exit_code == 0, result.output
    assert f"Period: {today.replace(day=1).isoformat()} to {today.isoformat()}" in result.output
    assert "Counter sale" in result.output
    assert "Old refund" not in result.output
    assert "1,075.00 Debit" in result.output
