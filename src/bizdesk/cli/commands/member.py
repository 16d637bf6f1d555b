"""Company membership commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import current_company_or_exit, resolve_role_or_exit
from bizdesk.domain.membership import MembershipService
from bizdesk.domain.role import RoleService


@click.group()
def member_group():
    """Manage users' roles in the selected company."""
    pass


@member_group.command("assign")
@click.argument("user_id", metavar="USER")
@click.argument("role", metavar="ROLE")
@click.pass_context
def assign_member(ctx, user_id: str, role: str):
    """Assign ROLE to USER in the selected company.

    A user holds one role per company; assigning again replaces it.

    Example:
        bizdesk --company "Acme Traders" member assign bob Accountant
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "user_management", "update")
    role_id = resolve_role_or_exit(ctx, role)

    try:
        MembershipService(ctx.obj["db"]).assign_role(user_id, company_id, role_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Assigned role '{role}' to '{user_id}'")


@member_group.command("list")
@click.pass_context
def list_members(ctx):
    """List memberships of the selected company."""
    db = ctx.obj["db"]
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "user_management", "view")

    memberships = MembershipService(db).list_memberships(company_id=company_id)
    if not memberships:
        click.echo("No members found.")
        return

    roles = {r.id: r.name for r in RoleService(db).list_roles()}
    click.echo("\nMembers:")
    click.echo("-" * 60)
    for m in memberships:
        status = "active" if m.is_active else "inactive"
        click.echo(f"{m.user_id:20s} | {roles.get(m.role_id, '?'):20s} | {status}")


def _set_active(ctx, user_id: str, is_active: bool) -> None:
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "user_management", "update")
    try:
        MembershipService(ctx.obj["db"]).set_active(user_id, company_id, is_active)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"{'Activated' if is_active else 'Deactivated'} '{user_id}'")


@member_group.command("activate")
@click.argument("user_id", metavar="USER")
@click.pass_context
def activate_member(ctx, user_id: str):
    """Reactivate USER's membership."""
    _set_active(ctx, user_id, True)


@member_group.command("deactivate")
@click.argument("user_id", metavar="USER")
@click.pass_context
def deactivate_member(ctx, user_id: str):
    """Deactivate USER's membership; the role assignment is kept."""
    _set_active(ctx, user_id, False)


@member_group.command("remove")
@click.argument("user_id", metavar="USER")
@click.pass_context
def remove_member(ctx, user_id: str):
    """Remove USER from the selected company."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "user_management", "delete")
    try:
        MembershipService(ctx.obj["db"]).remove(user_id, company_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Removed '{user_id}'")


def register_commands(cli):
    """Register membership commands with main CLI."""
    cli.add_command(member_group, name="member")
