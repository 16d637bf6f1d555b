"""Ledger running-balance accumulation."""

from decimal import Decimal
from typing import Iterable

from bizdesk.domain.entities import (
    BalanceType,
    LedgerEntry,
    LedgerReport,
    Movement,
)
from bizdesk.domain.errors import MalformedMovementError

ZERO = Decimal("0")


def validate_movement(movement: Movement) -> None:
    """Reject movements that cannot be accumulated.

    Raises:
        MalformedMovementError: If the date is missing or an amount is missing or negative
    """
    if movement.posting_date is None:
        raise MalformedMovementError(f"Movement {movement.id} has no posting date")
    for label, amount in (("debit", movement.debit_amount), ("credit", movement.credit_amount)):
        if amount is None:
            raise MalformedMovementError(f"Movement {movement.id} has no {label} amount")
        if amount < 0:
            raise MalformedMovementError(
                f"Movement {movement.id} has a negative {label} amount ({amount})"
            )


def sort_movements(movements: Iterable[Movement]) -> list[Movement]:
    """Order movements by posting date, then by id."""
    return sorted(movements, key=lambda m: (m.posting_date, m.id))


def compute_ledger_report(
    opening_balance: Decimal,
    movements: Iterable[Movement],
    balance_type: BalanceType = BalanceType.DEBIT,
) -> LedgerReport:
    """Build the running-balance report for one account.

    Balances use debit-positive arithmetic: each movement adds its debit and
    subtracts its credit. Input is not mutated.

    Args:
        opening_balance: Balance before the first movement
        movements: Posting lines in any order
        balance_type: Normal side of the account, carried onto the report

    Returns:
        LedgerReport with totals, closing balance and one entry per movement

    Raises:
        MalformedMovementError: If any movement fails validate_movement
    """
    movements = list(movements)
    for movement in movements:
        validate_movement(movement)

    opening = Decimal(opening_balance)
    running = opening
    total_debit = ZERO
    total_credit = ZERO
    entries = []

    for movement in sort_movements(movements):
        running += movement.debit_amount - movement.credit_amount
        total_debit += movement.debit_amount
        total_credit += movement.credit_amount
        entries.append(LedgerEntry(movement=movement, balance_after=running))

    return LedgerReport(
        opening_balance=opening,
        balance_type=BalanceType(balance_type),
        total_debit=total_debit,
        total_credit=total_credit,
        closing_balance=running,
        entries=tuple(entries),
    )
