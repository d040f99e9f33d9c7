"""Main CLI entry point."""

import logging

import click
from bankrec.database.factories import create_sqlite_database

# Import and register all commands at module level
from bankrec.cli.commands import account, import_cmd, transaction


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BANKREC_DB_PATH environment variable)",
    envvar="BANKREC_DB_PATH",
)
@click.option(
    "--user",
    help="Tenant whose accounts and transactions are used",
    envvar="BANKREC_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user: str | None, verbose: bool):
    """Bankrec - Bank statement import and reconciliation.

    Import bank statements into accounts with validation, automatic
    categorization and duplicate detection.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path, user_id=user)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
import_cmd.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
