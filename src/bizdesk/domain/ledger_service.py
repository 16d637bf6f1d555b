"""Ledger posting and reporting service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from bizdesk.database.base import Database
from bizdesk.domain.entities import BalanceType, LedgerReport
from bizdesk.domain.errors import NotFoundError, ValidationError, account_not_found
from bizdesk.domain.ledger import compute_ledger_report

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")


class LedgerService:
    """Service for posting movements and building ledger reports."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def post_movement(
        self,
        account_id: int,
        posting_date: date,
        debit: Decimal = ZERO,
        credit: Decimal = ZERO,
        entry_no: Optional[str] = None,
        remark: Optional[str] = None,
    ) -> int:
        """Post a single debit or credit line to a ledger.

        Args:
            account_id: Target ledger account ID
            posting_date: Posting date
            debit: Debit amount (zero for a credit line)
            credit: Credit amount (zero for a debit line)
            entry_no: Optional voucher/entry number
            remark: Optional narration

        Returns:
            Movement ID

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If the account is a group, the date is missing, an
                amount is negative or finer than a cent, or not exactly one
                side is positive
        """
        account = self.db.get_ledger_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        if account.is_group:
            raise ValidationError(
                f"Account '{account.name}' is a group and cannot receive postings"
            )
        if posting_date is None:
            raise ValidationError("Posting date is required.")

        debit = Decimal(debit or 0)
        credit = Decimal(credit or 0)
        if debit < 0 or credit < 0:
            raise ValidationError("Debit and credit amounts cannot be negative.")
        if debit != debit.quantize(CENT) or credit != credit.quantize(CENT):
            raise ValidationError("Amounts cannot have more than 2 decimal places.")
        if (debit > 0) == (credit > 0):
            raise ValidationError("Exactly one of debit or credit must be greater than zero.")

        movement_id = self.db.create_movement(
            account_id=account_id,
            posting_date=posting_date,
            debit_amount=debit,
            credit_amount=credit,
            entry_no=entry_no,
            remark=remark,
        )
        logger.info(
            "Posted movement %s to %s on %s (Dr %s / Cr %s)",
            movement_id, account.code, posting_date, debit, credit,
        )
        return movement_id

    def ledger_report(
        self,
        account_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> LedgerReport:
        """Build the running-balance report of an account over a date range.

        Opening balances are stored as amounts on the account's normal side,
        so a credit account's opening balance enters the debit-positive
        running balance negated. Movements in the inclusive range are
        accumulated in date order.

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If start_date is after end_date
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError("Start date must not be after end date.")
        account = self.db.get_ledger_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        opening = account.opening_balance
        if account.balance_type is BalanceType.CREDIT:
            opening = -opening

        movements = self.db.list_movements(account_id, start_date=start_date, end_date=end_date)
        return compute_ledger_report(opening, movements, account.balance_type)
