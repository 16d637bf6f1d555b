"""Company management commands."""

import click
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.domain.company import CompanyService
from bizdesk.domain.membership import MembershipService
from bizdesk.domain.role import RoleService


@click.group()
def company_group():
    """Manage companies."""
    pass


@company_group.command("create")
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--country", help="ISO country code (e.g. IN, US); selects tax accounts for init-coa")
@click.pass_context
def create_company(ctx, name: str, country: str | None):
    """Create a new company.

    When an acting user is set, that user becomes the company's Admin.

    Examples:
        bizdesk company create "Acme Traders" --country IN
        bizdesk --user alice company create "Globex"
    """
    db = ctx.obj["db"]
    user = ctx.obj.get("user")
    service = CompanyService(db)

    try:
        company_id = service.create_company(name=name, country_code=country)
        click.echo(f"Created company '{name.strip()}' (ID: {company_id})")
        if user:
            role_service = RoleService(db)
            role_service.seed_default_roles()
            admin = role_service.get_role_by_name("Admin")
            MembershipService(db).assign_role(user, company_id, admin.id)
            click.echo(f"Assigned role 'Admin' to '{user}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List companies.

    With an acting user, only companies where the user may view company
    settings are listed.
    """
    db = ctx.obj["db"]
    user = ctx.obj.get("user")

    companies = CompanyService(db).list_companies()
    if user:
        memberships = MembershipService(db)
        companies = [
            c for c in companies
            if memberships.effective_permission(user, c.id, "company_management", "view")
        ]
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 60)
    for c in companies:
        click.echo(f"ID: {c.id:3d} | {c.name:30s} | Country: {c.country_code or '-'}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
