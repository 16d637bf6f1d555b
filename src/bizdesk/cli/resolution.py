"""CLI helpers that resolve user input to domain objects, or exit with an error."""

from __future__ import annotations

from datetime import date

import click

from bizdesk.domain.chart_of_accounts import ChartOfAccountsService
from bizdesk.domain.company import CompanyService
from bizdesk.domain.project import ProjectService
from bizdesk.domain.role import RoleService
from bizdesk.utils.date_parser import parse_date
from bizdesk.utils.resolvers import resolve_account, resolve_company, resolve_role


def current_company_or_exit(ctx: click.Context) -> int:
    """Resolve the company selected with --company/BIZDESK_COMPANY, or exit."""
    company = ctx.obj.get("company")
    if not company:
        click.echo(
            "Error: No company selected. Use --company or set BIZDESK_COMPANY.", err=True
        )
        ctx.exit(1)
    try:
        return resolve_company(CompanyService(ctx.obj["db"]), company)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def resolve_role_or_exit(ctx: click.Context, role: str | int) -> int:
    """Resolve role name or ID, or exit with a CLI error."""
    try:
        return resolve_role(RoleService(ctx.obj["db"]), role)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def resolve_account_or_exit(ctx: click.Context, company_id: int, account: str | int) -> int:
    """Resolve account code or ID within a company, or exit with a CLI error."""
    try:
        return resolve_account(ChartOfAccountsService(ctx.obj["db"]), company_id, account)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def project_in_company_or_exit(ctx: click.Context, project_id: int, company_id: int):
    """Get a project of the selected company, or exit with a CLI error."""
    project = ProjectService(ctx.obj["db"]).get_project(project_id)
    if project is None or project.company_id != company_id:
        click.echo(f"Error: Project {project_id} not found", err=True)
        ctx.exit(1)
    return project


def parse_date_or_exit(ctx: click.Context, value: str | None, label: str) -> date | None:
    """Parse an optional CLI date, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid {label}: {exc}", err=True)
        ctx.exit(1)
