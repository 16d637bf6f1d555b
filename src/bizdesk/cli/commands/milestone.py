"""Milestone commands."""

import click
from bizdesk.cli.authorization import authorize_or_exit
from bizdesk.cli.error_handling import handle_domain_error
from bizdesk.cli.resolution import (
    current_company_or_exit,
    parse_date_or_exit,
    project_in_company_or_exit,
)
from bizdesk.domain.entities import MilestoneStatus
from bizdesk.domain.milestone import MilestoneService

STATUSES = [s.value for s in MilestoneStatus]


@click.group()
def milestone_group():
    """Manage project milestones."""
    pass


@milestone_group.command("add")
@click.argument("project_id", type=int)
@click.argument("name")
@click.option("--due", "due_date", required=True, help="Due date")
@click.option("--status", type=click.Choice(STATUSES, case_sensitive=False), default="planned", show_default=True)
@click.option("--completed", "completed_date", help="Completed date (required when achieved)")
@click.option("--notes", help="Free-form notes")
@click.pass_context
def add_milestone(ctx, project_id: int, name: str, due_date: str, status: str, completed_date: str | None, notes: str | None):
    """Add a milestone to a project.

    Example:
        bizdesk milestone add 3 "Draft return filed" --due 2025-05-20
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "create")
    db = ctx.obj["db"]
    project_in_company_or_exit(ctx, project_id, company_id)
    due = parse_date_or_exit(ctx, due_date, "due date")
    completed = parse_date_or_exit(ctx, completed_date, "completed date")

    try:
        milestone_id = MilestoneService(db).create_milestone(
            project_id=project_id,
            name=name,
            due_date=due,
            status=status,
            completed_date=completed,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created milestone '{name.strip()}' (ID: {milestone_id})")


@milestone_group.command("update")
@click.argument("milestone_id", type=int)
@click.option("--name", help="New name")
@click.option("--due", "due_date", help="New due date")
@click.option("--status", type=click.Choice(STATUSES, case_sensitive=False))
@click.option("--completed", "completed_date", help="Completed date")
@click.option("--notes", help="Notes")
@click.pass_context
def update_milestone(ctx, milestone_id: int, name: str | None, due_date: str | None, status: str | None, completed_date: str | None, notes: str | None):
    """Update a milestone. Options not given keep their current value.

    Example:
        bizdesk milestone update 7 --status achieved --completed today
    """
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "update")
    db = ctx.obj["db"]
    service = MilestoneService(db)
    existing = service.get_milestone(milestone_id)
    if existing is None:
        click.echo(f"Error: Milestone {milestone_id} not found", err=True)
        ctx.exit(1)
    project_in_company_or_exit(ctx, existing.project_id, company_id)

    due = parse_date_or_exit(ctx, due_date, "due date") or existing.due_date
    completed = parse_date_or_exit(ctx, completed_date, "completed date") or existing.completed_date
    try:
        service.update_milestone(
            milestone_id=milestone_id,
            name=name if name is not None else existing.name,
            due_date=due,
            status=status or existing.status,
            completed_date=completed,
            notes=notes if notes is not None else existing.notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated milestone {milestone_id}")


@milestone_group.command("list")
@click.argument("project_id", type=int)
@click.pass_context
def list_milestones(ctx, project_id: int):
    """List a project's milestones by due date."""
    company_id = current_company_or_exit(ctx)
    authorize_or_exit(ctx, company_id, "project", "view")
    db = ctx.obj["db"]
    project_in_company_or_exit(ctx, project_id, company_id)

    service = MilestoneService(db)
    milestones = service.list_milestones(project_id)
    if not milestones:
        click.echo("No milestones found.")
        return

    for m in milestones:
        done = f" (completed {m.completed_date.isoformat()})" if m.completed_date else ""
        click.echo(f"ID: {m.id:3d} | {m.due_date.isoformat()} | {m.status.value:9s} | {m.name}{done}")

    counts = service.status_counts(project_id)
    click.echo("\n" + ", ".join(f"{status.value}: {count}" for status, count in counts.items()))


def register_commands(cli):
    """Register milestone commands with main CLI."""
    cli.add_command(milestone_group, name="milestone")
