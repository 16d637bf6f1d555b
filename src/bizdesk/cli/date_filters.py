"""CLI helpers for date range resolution."""

from datetime import date
from functools import wraps

import click

from bizdesk.utils.date_parser import PERIODS, get_date_range, parse_date


def period_options(command):
    """Attach --start-date/--end-date and one flag per named period.

    The decorated command receives a single ``period_flags`` keyword argument
    mapping period names to whether their flag was given.
    """
    @wraps(command)
    def wrapper(*args, **kwargs):
        kwargs["period_flags"] = {
            period: kwargs.pop(period.replace("-", "_")) for period in PERIODS
        }
        return command(*args, **kwargs)

    for period in reversed(PERIODS):
        label = period.replace("-", " ")
        wrapper = click.option(f"--{period}", is_flag=True, help=f"Filter to {label}")(wrapper)
    wrapper = click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")(wrapper)
    wrapper = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')"
    )(wrapper)
    return wrapper


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
    today: date | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates.

    ``today`` anchors period flags and relative dates; it defaults to the
    current date.
    """
    selected = [period for period, is_set in period_flags.items() if is_set]
    flag_list = ", ".join(f"--{period}" for period in period_flags)

    if len(selected) > 1:
        click.echo(
            f"Error: Only one period option ({flag_list}) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0], today=today)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date, today=today)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is None and end is None and default_range is not None:
        start, end = default_range

    return start, end
