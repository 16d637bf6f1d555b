"""Tests for ledger running-balance accumulation."""

from datetime import date
from decimal import Decimal

import pytest

from bizdesk.domain.entities import BalanceType
from bizdesk.domain.errors import MalformedMovementError, ValidationError
from bizdesk.domain.ledger import compute_ledger_report, sort_movements, validate_movement


def test_opening_debit_credit_closing(make_movement):
    """Opening 1000, debit 500 then credit 200 closes at 1300."""
    movements = [
        make_movement(1, date(2024, 1, 5), debit="500"),
        make_movement(2, date(2024, 1, 9), credit="200"),
    ]

    report = compute_ledger_report(Decimal("1000"), movements)

    assert report.opening_balance == Decimal("1000")
    assert report.total_debit == Decimal("500")
    assert report.total_credit == Decimal("200")
    assert report.closing_balance == Decimal("1300")
    assert [e.balance_after for e in report.entries] == [Decimal("1500"), Decimal("1300")]
    assert report.closing_side is BalanceType.DEBIT


def test_closing_equals_opening_plus_totals(make_movement):
    movements = [
        make_movement(1, date(2024, 2, 1), debit="10.50"),
        make_movement(2, date(2024, 2, 2), credit="99.99"),
        make_movement(3, date(2024, 2, 3), debit="0.49", credit="0.10"),
    ]

    report = compute_ledger_report(Decimal("25"), movements)

    assert report.closing_balance == report.opening_balance + report.total_debit - report.total_credit
    assert report.closing_balance == Decimal("-64.10")
    assert report.closing_side is BalanceType.CREDIT


def test_movements_are_sorted_by_date(make_movement):
    movements = [
        make_movement(1, date(2024, 3, 10), credit="100"),
        make_movement(2, date(2024, 3, 1), debit="300"),
    ]

    report = compute_ledger_report(Decimal("0"), movements)

    assert [e.movement.id for e in report.entries] == [2, 1]
    assert [e.balance_after for e in report.entries] == [Decimal("300"), Decimal("200")]


def test_same_date_ties_break_on_id(make_movement):
    same_day = date(2024, 4, 1)
    movements = [
        make_movement(7, same_day, credit="50"),
        make_movement(3, same_day, debit="80"),
        make_movement(5, same_day, debit="20"),
    ]

    assert [m.id for m in sort_movements(movements)] == [3, 5, 7]
    report = compute_ledger_report(Decimal("0"), movements)
    assert [e.balance_after for e in report.entries] == [Decimal("80"), Decimal("100"), Decimal("50")]


def test_report_is_idempotent_and_input_untouched(make_movement):
    movements = [
        make_movement(2, date(2024, 1, 2), credit="5"),
        make_movement(1, date(2024, 1, 1), debit="15"),
    ]
    before = list(movements)

    first = compute_ledger_report(Decimal("100"), movements, BalanceType.CREDIT)
    second = compute_ledger_report(Decimal("100"), movements, BalanceType.CREDIT)

    assert first == second
    assert repr(first) == repr(second)
    assert movements == before


def test_empty_movements(make_movement):
    report = compute_ledger_report(Decimal("42"), [])

    assert report.entries == ()
    assert report.closing_balance == Decimal("42")
    assert report.total_debit == report.total_credit == Decimal("0")


def test_balance_type_is_carried(make_movement):
    report = compute_ledger_report(Decimal("0"), [], "credit")
    assert report.balance_type is BalanceType.CREDIT


@pytest.mark.parametrize("kwargs,message", [
    ({"posting_date": None, "debit": "1"}, "no posting date"),
    ({"debit": None}, "no debit amount"),
    ({"credit": None}, "no credit amount"),
    ({"debit": "-1"}, "negative debit amount"),
    ({"credit": "-0.01"}, "negative credit amount"),
])
def test_malformed_movements_are_rejected(make_movement, kwargs, message):
    bad = make_movement(9, **kwargs)

    with pytest.raises(MalformedMovementError, match=message):
        validate_movement(bad)
    with pytest.raises(ValidationError):
        compute_ledger_report(Decimal("0"), [make_movement(1, debit="5"), bad])
