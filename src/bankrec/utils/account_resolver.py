"""Resolve account references given on the command line."""

from typing import Optional

from bankrec.domain.account import AccountService
from bankrec.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve an account name or ID to an account ID.

    Numeric references ("3" or 3) are always treated as IDs; anything else is
    matched against account names exactly. Inactive accounts still resolve.

    Args:
        account_service: AccountService for the current tenant
        account: Account name, ID, or ID as a string

    Returns:
        Account ID

    Raises:
        NotFoundError: If no account matches
    """
    account_id = _as_id(account)
    if account_id is not None:
        if account_service.get_account(account_id) is None:
            raise NotFoundError(f"Account ID {account_id} not found")
        return account_id

    matches = [acc.id for acc in account_service.list_accounts() if acc.name == account]
    if not matches:
        raise NotFoundError(f"Account '{account}' not found")
    return matches[0]


def _as_id(account: str | int) -> Optional[int]:
    if isinstance(account, int):
        return account
    try:
        return int(account)
    except (TypeError, ValueError):
        return None
