"""Role management commands."""

import click
from bizdesk.cli.authorization import authorize_current_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import resolve_role_or_exit
from bizdesk.domain.permissions import build_grant_map, granted_permissions, parse_permission
from bizdesk.domain.role import RoleService


def _grant_map_or_exit(ctx, tokens: tuple[str, ...]):
    try:
        return build_grant_map(parse_permission(token) for token in tokens)
    except ValueError as e:
        handle_domain_error(ctx, e)


@click.group()
def role_group():
    """Manage roles and their permissions."""
    pass


@role_group.command("create")
@click.argument("name", metavar="ROLE_NAME")
@click.option(
    "--grant", "-g", "grants", multiple=True, metavar="MODULE:ACTION",
    help="Permission to grant (repeatable), e.g. sales:view",
)
@click.option("--description", help="Role description")
@click.option("--system", "is_system_role", is_flag=True, help="Mark as a system role (cannot be deleted)")
@click.pass_context
def create_role(ctx, name: str, grants: tuple[str, ...], description: str | None, is_system_role: bool):
    """Create a new role.

    Examples:
        bizdesk role create "Accountant" -g accounting:view -g accounting:post
        bizdesk role create "Sales Rep" -g sales:view -g sales:create --description "Field sales"
    """
    authorize_current_or_exit(ctx, "role_management", "create")
    service = RoleService(ctx.obj["db"])
    permissions = _grant_map_or_exit(ctx, grants)

    try:
        role_id = service.create_role(
            name=name,
            permissions=permissions,
            description=description,
            is_system_role=is_system_role,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created role '{name.strip()}' (ID: {role_id})")


@role_group.command("list")
@click.pass_context
def list_roles(ctx):
    """List all roles."""
    authorize_current_or_exit(ctx, "role_management", "view")
    service = RoleService(ctx.obj["db"])

    roles = service.list_roles()
    if not roles:
        click.echo("No roles found. Run 'role seed' to create the default roles.")
        return

    click.echo("\nRoles:")
    click.echo("-" * 70)
    for role in roles:
        marker = " [system]" if role.is_system_role else ""
        count = len(granted_permissions(role.permissions))
        click.echo(f"ID: {role.id:3d} | {role.name:20s} | {count:3d} permission(s){marker}")


@role_group.command("show")
@click.argument("role", metavar="ROLE")
@click.pass_context
def show_role(ctx, role: str):
    """Show a role's granted permissions.

    ROLE can be a role name or ID.
    """
    authorize_current_or_exit(ctx, "role_management", "view")
    service = RoleService(ctx.obj["db"])
    role_obj = service.require_role(resolve_role_or_exit(ctx, role))

    click.echo(f"\nRole: {role_obj.name} (ID: {role_obj.id})")
    if role_obj.description:
        click.echo(f"Description: {role_obj.description}")
    if role_obj.is_system_role:
        click.echo("System role")
    click.echo("Permissions:")
    for module, action in granted_permissions(role_obj.permissions):
        click.echo(f"  {module}:{action}")


@role_group.command("update")
@click.argument("role", metavar="ROLE")
@click.option("--name", "new_name", help="New role name")
@click.option("--description", help="New description")
@click.option(
    "--grant", "-g", "grants", multiple=True, metavar="MODULE:ACTION",
    help="Replace the permissions with these (repeatable)",
)
@click.pass_context
def update_role(ctx, role: str, new_name: str | None, description: str | None, grants: tuple[str, ...]):
    """Update a role's name, description or permissions.

    ROLE can be a role name or ID. Options not given keep their current value.
    """
    authorize_current_or_exit(ctx, "role_management", "update")
    service = RoleService(ctx.obj["db"])
    role_id = resolve_role_or_exit(ctx, role)
    existing = service.require_role(role_id)
    permissions = _grant_map_or_exit(ctx, grants) if grants else existing.permissions

    try:
        service.update_role(
            role_id=role_id,
            name=new_name if new_name is not None else existing.name,
            permissions=permissions,
            description=description if description is not None else existing.description,
            is_system_role=existing.is_system_role,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated role '{new_name or existing.name}'")


def _toggle(ctx, role: str, tokens: tuple[str, ...], granted: bool) -> None:
    authorize_current_or_exit(ctx, "role_management", "update")
    service = RoleService(ctx.obj["db"])
    role_id = resolve_role_or_exit(ctx, role)

    try:
        for token in tokens:
            module, action = parse_permission(token)
            updated = service.set_permission(role_id, module, action, granted)
    except ValueError as e:
        handle_domain_error(ctx, e)
    verb = "Granted" if granted else "Revoked"
    click.echo(f"{verb} {', '.join(tokens)} on role '{updated.name}'")


@role_group.command("grant")
@click.argument("role", metavar="ROLE")
@click.argument("permissions", nargs=-1, required=True, metavar="MODULE:ACTION...")
@click.pass_context
def grant_permission(ctx, role: str, permissions: tuple[str, ...]):
    """Grant permissions to a role.

    Example:
        bizdesk role grant "Accountant" accounting:reports reports:export
    """
    _toggle(ctx, role, permissions, True)


@role_group.command("revoke")
@click.argument("role", metavar="ROLE")
@click.argument("permissions", nargs=-1, required=True, metavar="MODULE:ACTION...")
@click.pass_context
def revoke_permission(ctx, role: str, permissions: tuple[str, ...]):
    """Revoke permissions from a role."""
    _toggle(ctx, role, permissions, False)


@role_group.command("delete")
@click.argument("role", metavar="ROLE")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_role(ctx, role: str, yes: bool):
    """Delete a role.

    ROLE can be a role name or ID. System roles and roles still assigned to
    users cannot be deleted.
    """
    authorize_current_or_exit(ctx, "role_management", "delete")
    service = RoleService(ctx.obj["db"])
    role_id = resolve_role_or_exit(ctx, role)
    role_obj = service.require_role(role_id)

    if not yes and not click.confirm(f"Are you sure you want to delete role '{role_obj.name}' (ID: {role_id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_role(role_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted role '{role_obj.name}'")


@role_group.command("seed")
@click.pass_context
def seed_roles(ctx):
    """Create the default Admin and Viewer roles if missing."""
    authorize_current_or_exit(ctx, "role_management", "create")
    created = RoleService(ctx.obj["db"]).seed_default_roles()
    if created:
        click.echo(f"Created {len(created)} default role(s)")
    else:
        click.echo("Default roles already exist.")


def register_commands(cli):
    """Register role commands with main CLI."""
    cli.add_command(role_group, name="role")
