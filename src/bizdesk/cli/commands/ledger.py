"""Ledger posting and report commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.date_filters import period_options, resolve_cli_date_range
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import current_company_or_exit, parse_date_or_exit, resolve_account_or_exit
from bizdesk.domain.chart_of_accounts import ChartOfAccountsService
from bizdesk.domain.entities import BalanceType
from bizdesk.domain.ledger_service import LedgerService
from bizdesk.utils.amount_parser import parse_amount


def _with_side(amount) -> str:
    side = "Dr" if BalanceType.of(amount) is BalanceType.DEBIT else "Cr"
    return f"{abs(amount):>12,.2f} {side}"


@click.group()
def ledger_group():
    """Post movements and view ledger reports."""
    pass


@ledger_group.command("post")
@click.argument("account", metavar="ACCOUNT")
@click.option("--date", "posting_date", default="today", show_default=True, help="Posting date")
@click.option("--debit", help="Debit amount")
@click.option("--credit", help="Credit amount")
@click.option("--entry-no", help="Voucher or journal entry number")
@click.option("--remark", help="Narration")
@click.pass_context
def post_movement(ctx, account: str, posting_date: str, debit: str | None, credit: str | None,
                  entry_no: str | None, remark: str | None):
    """Post a debit or a credit to a ledger.

    ACCOUNT can be an account code or ID.

    Examples:
        bizdesk ledger post 11110 --debit 5000 --remark "Cash sale"
        bizdesk ledger post 21100 --credit "1,250.00" --date 2025-04-03 --entry-no JV-0042
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "post")
    account_id = resolve_account_or_exit(ctx, company_id, account)
    on = parse_date_or_exit(ctx, posting_date, "posting date")

    try:
        debit_amount = parse_amount(debit) if debit else 0
        credit_amount = parse_amount(credit) if credit else 0
        movement_id = LedgerService(ctx.obj["db"]).post_movement(
            account_id=account_id,
            posting_date=on,
            debit=debit_amount,
            credit=credit_amount,
            entry_no=entry_no,
            remark=remark,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Posted movement {movement_id} on {on.isoformat()}")


@ledger_group.command("report")
@click.argument("account", metavar="ACCOUNT")
@period_options
@click.pass_context
def ledger_report(ctx, account: str, start_date: str | None, end_date: str | None, period_flags: dict[str, bool]):
    """Show a ledger with running balance.

    ACCOUNT can be an account code or ID. Without a date filter every
    movement is included.

    Examples:
        bizdesk ledger report 11110 --this-month
        bizdesk ledger report 40000 --start-date 2025-04-01 --end-date 2025-06-30
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "reports")
    account_id = resolve_account_or_exit(ctx, company_id, account)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=period_flags
    )

    db = ctx.obj["db"]
    account_obj = ChartOfAccountsService(db).require_account(account_id)
    try:
        report = LedgerService(db).ledger_report(account_id, start_date=start, end_date=end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nLedger: {account_obj.code} {account_obj.name}")
    if start or end:
        click.echo(f"Period: {start.isoformat() if start else '...'} to {end.isoformat() if end else '...'}")
    click.echo("-" * 92)
    click.echo(f"{'Date':10s}  {'Entry':10s}  {'Remark':30s} {'Debit':>12s} {'Credit':>12s} {'Balance':>12s}")
    click.echo("-" * 92)
    click.echo(f"{'':10s}  {'':10s}  {'Opening balance':30s} {'':>12s} {'':>12s} {_with_side(report.opening_balance)}")
    for entry in report.entries:
        m = entry.movement
        debit = f"{m.debit_amount:,.2f}" if m.debit_amount else ""
        credit = f"{m.credit_amount:,.2f}" if m.credit_amount else ""
        click.echo(
            f"{m.posting_date.isoformat():10s}  {(m.entry_no or '')[:10]:10s}  {(m.remark or '')[:30]:30s} "
            f"{debit:>12s} {credit:>12s} {_with_side(entry.balance_after)}"
        )
    click.echo("-" * 92)
    click.echo(f"{'':10s}  {'':10s}  {'Totals':30s} {report.total_debit:>12,.2f} {report.total_credit:>12,.2f}")
    click.echo(
        f"{'':10s}  {'':10s}  {'Closing balance':30s} {'':>12s} {'':>12s} "
        f"{abs(report.closing_balance):>12,.2f} {report.closing_side.value.title()}"
    )


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
