"""Chart of accounts commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import current_company_or_exit, resolve_account_or_exit
from bizdesk.domain.chart_of_accounts import ChartOfAccountsService
from bizdesk.domain.company import CompanyService
from bizdesk.domain.entities import AccountType, BalanceType
from bizdesk.utils.amount_parser import parse_amount


def print_account_tree(nodes: list[dict], indent: int = 0) -> None:
    """Recursively print the account tree."""
    for node in nodes:
        account = node["account"]
        prefix = "  " * indent
        label = f"{account.code} {account.name}"
        if account.is_group:
            click.echo(f"{prefix}{label}")
        else:
            side = "Dr" if account.balance_type is BalanceType.DEBIT else "Cr"
            click.echo(f"{prefix}{label:<{60 - len(prefix)}} {side}")
        if node.get("children"):
            print_account_tree(node["children"], indent + 1)


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("code")
@click.argument("name")
@click.option("--parent", help="Parent group code or ID (type and balance are inherited)")
@click.option("--group", "is_group", is_flag=True, help="Create a group instead of a ledger")
@click.option("--opening-balance", default="0", help="Opening balance (ledgers only)")
@click.option("--type", "account_type", type=click.Choice([t.value for t in AccountType]), help="Account type (root accounts only)")
@click.option("--balance", "balance_type", type=click.Choice([b.value for b in BalanceType]), help="Normal balance side (root accounts only)")
@click.option("--description", help="Account description")
@click.pass_context
def create_account(ctx, code: str, name: str, parent: str | None, is_group: bool, opening_balance: str,
                   account_type: str | None, balance_type: str | None, description: str | None):
    """Create a ledger account or group.

    Examples:
        bizdesk account create 11150 "HDFC Current Account" --parent 11100 --opening-balance 25000
        bizdesk account create 60000 "Suspense" --group --type asset --balance debit
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "create")
    service = ChartOfAccountsService(ctx.obj["db"])
    parent_id = resolve_account_or_exit(ctx, company_id, parent) if parent else None

    try:
        amount = parse_amount(opening_balance)
        account_id = service.create_account(
            company_id=company_id,
            code=code,
            name=name,
            parent_id=parent_id,
            is_group=is_group,
            opening_balance=amount,
            account_type=account_type,
            balance_type=balance_type,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    kind = "group" if is_group else "ledger"
    click.echo(f"Created {kind} {code} '{name.strip()}' (ID: {account_id})")


@account_group.command("list")
@click.option("--ledgers-only", is_flag=True, help="Only accounts that accept postings")
@click.pass_context
def list_accounts(ctx, ledgers_only: bool):
    """List accounts of the selected company by code."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "view")

    accounts = ChartOfAccountsService(ctx.obj["db"]).list_accounts(company_id, ledgers_only=ledgers_only)
    if not accounts:
        click.echo("No accounts found. Run 'account init-coa' to create the default chart.")
        return

    click.echo(f"\n{'Code':8s} {'Name':40s} {'Type':10s} {'Balance':7s} {'Opening':>14s}")
    click.echo("-" * 83)
    for a in accounts:
        opening = "" if a.is_group else f"{a.opening_balance:,.2f}"
        name = f"[{a.name}]" if a.is_group else a.name
        click.echo(f"{a.code:8s} {name:40s} {a.account_type.value:10s} {a.balance_type.value:7s} {opening:>14s}")


@account_group.command("tree")
@click.pass_context
def account_tree(ctx):
    """Show the chart of accounts as a tree."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "view")

    tree = ChartOfAccountsService(ctx.obj["db"]).account_tree(company_id)
    if not tree:
        click.echo("No accounts found. Run 'account init-coa' to create the default chart.")
        return
    print_account_tree(tree)


@account_group.command("init-coa")
@click.option("--country", help="Country code for tax ledgers (defaults to the company's)")
@click.pass_context
def init_coa(ctx, country: str | None):
    """Create the default chart of accounts for the selected company.

    Accounts whose code already exists are skipped, so this can be re-run.
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "accounting", "create")
    company = CompanyService(ctx.obj["db"]).require_company(company_id)

    try:
        created = ChartOfAccountsService(ctx.obj["db"]).seed_default_chart(company_id, country_code=country)
    except ValueError as e:
        handle_domain_error(ctx, e)
    if created:
        click.echo(f"Created {created} account(s) for '{company.name}'")
    else:
        click.echo("Chart of accounts already initialized.")


def register_commands(cli):
    """Register chart of accounts commands with main CLI."""
    cli.add_command(account_group, name="account")
