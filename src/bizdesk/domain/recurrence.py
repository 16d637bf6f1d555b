"""Recurrence rule validation and due-date arithmetic."""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from bizdesk.domain.entities import Frequency, RecurrenceRule
from bizdesk.domain.errors import RecurrenceRangeError, ValidationError

# frequency -> ((field, low, high), ...)
_RANGES: dict[Frequency, tuple[tuple[str, int, int], ...]] = {
    Frequency.DAILY: (),
    Frequency.WEEKLY: (("due_day", 1, 7),),
    Frequency.MONTHLY: (("due_day", 1, 31),),
    Frequency.QUARTERLY: (),
    Frequency.YEARLY: (("due_day", 1, 31), ("due_month", 1, 12)),
}


def parse_frequency(value: "Frequency | str | None") -> Frequency:
    """Coerce a frequency name into a Frequency.

    Raises:
        ValidationError: If the value is empty or not a known frequency
    """
    if isinstance(value, Frequency):
        return value
    if not value:
        raise ValidationError("Recurrence frequency is required for recurring categories")
    try:
        return Frequency(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in Frequency)
        raise ValidationError(f"Unknown recurrence frequency '{value}'. Allowed: {allowed}")


def validate_recurrence(
    frequency: "Frequency | str | None",
    due_day: Optional[int],
    due_month: Optional[int],
) -> RecurrenceRule:
    """Check recurrence parameters against the ranges for their frequency.

    weekly takes a due day 1-7 (Monday-Sunday), monthly a due day 1-31, and
    yearly a due day 1-31 plus a due month 1-12. daily and quarterly take no
    parameters; any given are ignored.

    Returns:
        The validated rule

    Raises:
        RecurrenceRangeError: If a required parameter is missing or out of range
        ValidationError: If the frequency is missing or unknown
    """
    freq = parse_frequency(frequency)
    values = {"due_day": due_day, "due_month": due_month}

    for field, low, high in _RANGES[freq]:
        value = values[field]
        if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
            raise RecurrenceRangeError(field, low, high, freq.value)

    if not _RANGES[freq]:
        return RecurrenceRule(freq)
    if freq is Frequency.YEARLY:
        return RecurrenceRule(freq, due_day, due_month)
    return RecurrenceRule(freq, due_day)


def next_due_date(
    frequency: "Frequency | str",
    due_day: Optional[int],
    due_month: Optional[int],
    from_date: date,
) -> date:
    """Compute the next due date strictly after ``from_date``.

    Inputs are expected to have passed validate_recurrence. Days beyond the
    end of the target month clamp to its last day.
    """
    freq = Frequency(frequency)

    if freq is Frequency.DAILY:
        return from_date + timedelta(days=1)

    if freq is Frequency.WEEKLY:
        days_ahead = (due_day - from_date.isoweekday()) % 7
        return from_date + timedelta(days=days_ahead or 7)

    if freq is Frequency.MONTHLY:
        # relativedelta clamps day to the month's length
        return from_date + relativedelta(months=1, day=due_day)

    if freq is Frequency.QUARTERLY:
        quarter_start = from_date.replace(month=(from_date.month - 1) // 3 * 3 + 1, day=1)
        return quarter_start + relativedelta(months=3)

    candidate = from_date + relativedelta(month=due_month, day=due_day)
    if candidate <= from_date:
        candidate = from_date + relativedelta(years=1, month=due_month, day=due_day)
    return candidate


def next_due_date_for_rule(rule: RecurrenceRule, from_date: date) -> date:
    """Convenience wrapper taking a RecurrenceRule."""
    return next_due_date(rule.frequency, rule.due_day, rule.due_month, from_date)
