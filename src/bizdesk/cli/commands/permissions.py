"""Permission catalog and permission check commands."""

import click
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import current_company_or_exit
from bizdesk.domain.membership import MembershipService
from bizdesk.domain.permissions import is_known_permission, iter_catalog, parse_permission


@click.command("permissions")
@click.option("--module", help="Only list actions of this module")
def list_permissions(module: str | None):
    """List every module:action permission that roles can grant."""
    current = None
    for entry in iter_catalog():
        if module and entry.module != module:
            continue
        if entry.module != current:
            click.echo(f"\n{entry.module}")
            current = entry.module
        click.echo(f"  {entry.module + ':' + entry.action:32s} {entry.description}")


@click.command("check")
@click.argument("user_id", metavar="USER")
@click.argument("permission", metavar="MODULE:ACTION")
@click.pass_context
def check_permission(ctx, user_id: str, permission: str):
    """Check whether USER holds MODULE:ACTION in the selected company.

    Exits with status 0 when allowed and 1 when denied.

    Example:
        bizdesk --company "Acme Traders" check bob accounting:post
    """
    try:
        module, action = parse_permission(permission)
    except ValueError as e:
        handle_domain_error(ctx, e)
    if not is_known_permission(module, action):
        click.echo(f"Warning: '{permission}' is not in the permission catalog", err=True)

    company_id = current_company_or_exit(ctx)
    allowed = MembershipService(ctx.obj["db"]).effective_permission(user_id, company_id, module, action)
    click.echo(f"{user_id} {'may' if allowed else 'may not'} {action} {module.replace('_', ' ')}")
    if not allowed:
        ctx.exit(1)


def register_commands(cli):
    """Register permission commands with main CLI."""
    cli.add_command(list_permissions)
    cli.add_command(check_permission)
