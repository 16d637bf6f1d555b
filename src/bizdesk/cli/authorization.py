"""CLI permission checks for the acting user."""

import click

from bizdesk.domain.errors import PermissionDenied
from bizdesk.domain.membership import MembershipService


def authorize_or_exit(ctx: click.Context, company_id: int | None, module: str, action: str) -> None:
    """Exit unless the acting user may perform ``action`` on ``module``.

    Without --user/BIZDESK_USER the CLI runs as the local administrator and
    no check is made. With a user, the check is made against the user's
    membership in ``company_id``, which then must be known.
    """
    user = ctx.obj.get("user")
    if not user:
        return
    if company_id is None:
        click.echo(
            "Error: A company is required to check permissions. Use --company or set BIZDESK_COMPANY.",
            err=True,
        )
        ctx.exit(1)
    try:
        MembershipService(ctx.obj["db"]).require_permission(user, company_id, module, action)
    except PermissionDenied as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def authorize_current_or_exit(ctx: click.Context, module: str, action: str) -> None:
    """Like authorize_or_exit, against the company selected with --company."""
    if not ctx.obj.get("user"):
        return
    from bizdesk.cli.resolution import current_company_or_exit
    authorize_or_exit(ctx, current_company_or_exit(ctx), module, action)
