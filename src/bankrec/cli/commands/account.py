"""Account management commands."""

import click
from bankrec.cli.error_handling import handle_domain_error, resolve_account_or_exit
from bankrec.domain.account import AccountService
from bankrec.domain.entities import ACCOUNT_TYPES
from bankrec.domain.errors import DomainError


@click.group()
def account_group():
    """Manage bank accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--bank", help="Bank name (defaults to account name if not provided)")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(ACCOUNT_TYPES),
    default="checking",
    show_default=True,
    help="Account type",
)
@click.option("--currency", default="USD", show_default=True, help="ISO currency code")
@click.pass_context
def create_account(ctx, name: str, bank: str | None, account_type: str, currency: str):
    """Create a new account.

    If --bank is not provided, the bank name will be set to the account name.

    Examples:
        bankrec account create "Chase"
        bankrec account create "My Checking" --bank "Chase"
        bankrec account create "Business Card" --bank "Amex" --type credit_card
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    # If bank not provided, use account name as bank name
    bank_name = bank if bank is not None else name

    try:
        account_id = service.create_account(
            name=name, bank_name=bank_name, account_type=account_type, currency=currency
        )
        click.echo(f"Created account '{name}' (ID: {account_id})")
        if bank is None:
            click.echo(f"Bank name set to '{bank_name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        status = "active" if acc.is_active else "inactive"
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | Bank: {acc.bank_name:15s} | "
            f"{acc.account_type} {acc.currency} | {status}"
        )


def _set_active(ctx, account: str, is_active: bool) -> None:
    db = ctx.obj["db"]
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        service.set_active(account_id, is_active)
    except DomainError as e:
        handle_domain_error(ctx, e)

    state = "Activated" if is_active else "Deactivated"
    click.echo(f"{state} account {account_id}")


@account_group.command("activate")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def activate_account(ctx, account: str) -> None:
    """Activate an account so statements can be imported into it.

    ACCOUNT can be an account name or ID.
    """
    _set_active(ctx, account, True)


@account_group.command("deactivate")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def deactivate_account(ctx, account: str) -> None:
    """Deactivate an account; imports into it are rejected.

    ACCOUNT can be an account name or ID.
    """
    _set_active(ctx, account, False)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
