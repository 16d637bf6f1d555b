"""Project commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import (
    current_company_or_exit,
    parse_date_or_exit,
    project_in_company_or_exit,
)
from bizdesk.domain.project import ProjectService


@click.group()
def project_group():
    """Manage projects and recurring work."""
    pass


@project_group.command("create")
@click.argument("name")
@click.option("--category", "category_id", type=int, help="Project category ID")
@click.option("--start-date", help="Date the first due date is computed from (default: today)")
@click.pass_context
def create_project(ctx, name: str, category_id: int | None, start_date: str | None):
    """Create a project in the selected company.

    Projects in a recurring category get their first due date from the
    category's schedule.

    Example:
        bizdesk project create "GST Return FY25" --category 2 --start-date 2025-04-01
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "create")
    service = ProjectService(ctx.obj["db"])
    start = parse_date_or_exit(ctx, start_date, "start date")

    try:
        project_id = service.create_project(
            company_id=company_id, name=name, category_id=category_id, start_date=start
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    project = service.get_project(project_id)
    click.echo(f"Created project '{project.name}' (ID: {project_id})")
    if project.recurrence_due_date is not None:
        click.echo(f"Next due: {project.recurrence_due_date.isoformat()}")


@project_group.command("list")
@click.pass_context
def list_projects(ctx):
    """List projects of the selected company."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "view")

    projects = ProjectService(ctx.obj["db"]).list_projects(company_id)
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 70)
    for p in projects:
        due = p.recurrence_due_date.isoformat() if p.recurrence_due_date else "-"
        freq = p.frequency.value if p.frequency else "one-off"
        click.echo(f"ID: {p.id:3d} | {p.name:30s} | {freq:9s} | Due: {due}")


@project_group.command("upcoming")
@click.option("--limit", type=int, default=10, show_default=True, help="Maximum number of projects")
@click.pass_context
def upcoming_projects(ctx, limit: int):
    """List recurring projects, soonest due first."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "view")

    projects = ProjectService(ctx.obj["db"]).upcoming_recurring(company_id, limit=limit)
    if not projects:
        click.echo("No recurring projects found.")
        return

    for p in projects:
        due = p.recurrence_due_date.isoformat() if p.recurrence_due_date else "-"
        click.echo(f"{due}  {p.name} ({p.frequency.value}, ID: {p.id})")


@project_group.command("record-recurrence")
@click.argument("project_id", type=int)
@click.option("--on", "on_date", help="Date the recurrence was created (default: today)")
@click.pass_context
def record_recurrence(ctx, project_id: int, on_date: str | None):
    """Record that a recurring project's current occurrence was created.

    The due date advances by one period from the current due date.
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "update")
    service = ProjectService(ctx.obj["db"])
    project_in_company_or_exit(ctx, project_id, company_id)
    on = parse_date_or_exit(ctx, on_date, "date")

    try:
        project = service.record_recurrence(project_id, on_date=on)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded recurrence of '{project.name}'. Next due: {project.recurrence_due_date.isoformat()}")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
