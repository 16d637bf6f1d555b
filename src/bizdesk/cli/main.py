"""Main CLI entry point."""

import logging

import click
from bizdesk.database.factories import create_database

# Import and register all commands at module level
from bizdesk.cli.commands import (
    account,
    category,
    company,
    ledger,
    member,
    milestone,
    permissions,
    project,
    role,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BIZDESK_DB_PATH environment variable)",
    envvar="BIZDESK_DB_PATH",
)
@click.option("--user", help="Acting user ID for permission checks", envvar="BIZDESK_USER")
@click.option("--company", help="Company name or ID to work in", envvar="BIZDESK_COMPANY")
@click.option("-v", "--verbose", is_flag=True, help="Log service activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, user: str | None, company: str | None, verbose: bool):
    """Bizdesk - Business back office.

    Manage companies, roles and memberships, recurring projects and their
    milestones, and a chart of accounts with ledger postings and reports.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["user"] = user
    ctx.obj["company"] = company

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
role.register_commands(cli)
member.register_commands(cli)
permissions.register_commands(cli)
category.register_commands(cli)
project.register_commands(cli)
milestone.register_commands(cli)
account.register_commands(cli)
ledger.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
