"""Project category commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import current_company_or_exit
from bizdesk.domain.category import ProjectCategoryService
from bizdesk.domain.entities import BillingType, Frequency

FREQUENCIES = [f.value for f in Frequency]
BILLING_TYPES = [b.value for b in BillingType]


def describe_recurrence(category) -> str:
    """Short human description of a category's recurrence."""
    rule = category.recurrence_rule
    if rule is None:
        return "one-off"
    parts = [rule.frequency.value]
    if rule.due_month is not None:
        parts.append(f"month {rule.due_month}")
    if rule.due_day is not None:
        parts.append(f"day {rule.due_day}")
    return ", ".join(parts)


def recurrence_options(command):
    """Options shared by category create and update."""
    for option in reversed([
        click.option("--description", help="Category description"),
        click.option("--recurring", "is_recurring", is_flag=True, help="Projects in this category recur"),
        click.option("--frequency", type=click.Choice(FREQUENCIES, case_sensitive=False), help="Recurrence frequency"),
        click.option("--due-day", type=int, help="Due day (weekday 1-7, day of month 1-31)"),
        click.option("--due-month", type=int, help="Due month 1-12 (yearly recurrence)"),
        click.option(
            "--billing-type",
            type=click.Choice(BILLING_TYPES, case_sensitive=False),
            default=BillingType.FIXED_PRICE.value,
            show_default=True,
            help="How projects in this category are billed",
        ),
    ]):
        command = option(command)
    return command


@click.group()
def category_group():
    """Manage project categories."""
    pass


@category_group.command("create")
@click.argument("name")
@recurrence_options
@click.pass_context
def create_category(ctx, name: str, **fields):
    """Create a project category in the selected company.

    Examples:
        bizdesk category create "Audit"
        bizdesk category create "GST Return" --recurring --frequency monthly --due-day 20
        bizdesk category create "Annual Filing" --recurring --frequency yearly --due-month 9 --due-day 30
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "create")
    service = ProjectCategoryService(ctx.obj["db"])

    try:
        category_id = service.create_category(company_id=company_id, name=name, **fields)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created project category '{name.strip()}' (ID: {category_id})")


@category_group.command("update")
@click.argument("category_id", type=int)
@click.argument("name")
@recurrence_options
@click.pass_context
def update_category(ctx, category_id: int, name: str, **fields):
    """Replace a project category's settings."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "update")
    service = ProjectCategoryService(ctx.obj["db"])

    try:
        if service.require_category(category_id).company_id != company_id:
            raise ValueError(f"Project category {category_id} not found")
        service.update_category(category_id=category_id, name=name, **fields)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated project category '{name.strip()}'")


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List project categories of the selected company."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "view")

    categories = ProjectCategoryService(ctx.obj["db"]).list_categories(company_id)
    if not categories:
        click.echo("No project categories found.")
        return

    click.echo("\nProject categories:")
    click.echo("-" * 70)
    for c in categories:
        click.echo(
            f"ID: {c.id:3d} | {c.name:25s} | {describe_recurrence(c):22s} | {c.billing_type.value}"
        )


def register_commands(cli):
    """Register project category commands with main CLI."""
    cli.add_command(category_group, name="category")
