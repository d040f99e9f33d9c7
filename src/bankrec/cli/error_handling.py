"""CLI helpers for reporting failures and resolving accounts."""

import logging
from typing import NoReturn, Sequence

import click

from bankrec.domain.account import AccountService
from bankrec.domain.errors import DomainError
from bankrec.utils.account_resolver import resolve_account

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError) -> NoReturn:
    """Render a domain error on stderr and exit with status 1."""
    logger.debug("Command %s failed", ctx.info_name, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_errors(ctx: click.Context, errors: Sequence[str], indent: str = "    ") -> NoReturn:
    """Echo each error line on stderr, then exit with status 1."""
    for error in errors:
        click.echo(f"{indent}{error}", err=True)
    ctx.exit(1)


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | int
) -> int:
    """Resolve an account name or ID, exiting with an error if it is unknown."""
    try:
        return resolve_account(account_service, account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
