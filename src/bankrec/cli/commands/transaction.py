"""Transaction listing commands."""

import click
from bankrec.cli.error_handling import resolve_account_or_exit
from bankrec.domain.account import AccountService


@click.group()
def transaction_group():
    """View imported transactions."""
    pass


@transaction_group.command("list")
@click.argument("account", metavar="ACCOUNT")
@click.option("--uncategorized", is_flag=True, help="Only show transactions without a category")
@click.pass_context
def list_transactions(ctx, account: str, uncategorized: bool) -> None:
    """List imported transactions for an account.

    ACCOUNT can be an account name or ID.

    Examples:
        bankrec transaction list "Chase"
        bankrec transaction list 1 --uncategorized
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    transactions = db.list_bank_transactions(account_id)
    if uncategorized:
        transactions = [t for t in transactions if not t.category]

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'Date':<12} {'Type':<7} {'Amount':>12}  {'Category':<16} Description")
    click.echo("-" * 80)
    for txn in transactions:
        sign = "-" if txn.type == "debit" else "+"
        click.echo(
            f"{txn.transaction_date.isoformat():<12} {txn.type:<7} "
            f"{sign + format(txn.amount, ',.2f'):>12}  {(txn.category or ''):<16} {txn.description}"
        )
    click.echo(f"\nTotal: {len(transactions)} transaction(s)")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
