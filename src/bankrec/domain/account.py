"""Account domain service."""

import logging
from typing import Optional
from bankrec.database.base import Database
from bankrec.domain.entities import ACCOUNT_TYPES, BankAccount
from bankrec.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_name_taken,
    account_not_found,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing bank accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        bank_name: str,
        account_type: str = "checking",
        currency: str = "USD",
    ) -> int:
        """Create a new active account.

        Args:
            name: Account name
            bank_name: Bank name
            account_type: One of checking, savings, credit_card, business
            currency: ISO currency code

        Returns:
            Account ID

        Raises:
            ValidationError: If the account type or currency is invalid
            ConflictError: If account name already exists
        """
        if account_type not in ACCOUNT_TYPES:
            raise ValidationError(
                f"Invalid account type '{account_type}'. Must be one of: {', '.join(ACCOUNT_TYPES)}"
            )
        if len(currency) != 3 or not currency.isalpha():
            raise ValidationError(f"Invalid currency code '{currency}'")

        # Check if account with same name exists
        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(account_name_taken(name))

        return self.db.create_account(
            name=name,
            bank_name=bank_name,
            account_type=account_type,
            currency=currency.upper(),
        )

    def get_account(self, account_id: int) -> Optional[BankAccount]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[BankAccount]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def is_active_account(self, account_id: int) -> bool:
        """Return True if the account exists and is active.

        Lookup failures are logged and treated as an unusable account.
        """
        try:
            account = self.db.get_account(account_id)
        except Exception:
            logger.exception("Error validating bank account %s", account_id)
            return False
        return account is not None and account.is_active

    def set_active(self, account_id: int, is_active: bool) -> None:
        """Activate or deactivate an account.

        Raises:
            NotFoundError: If account not found
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        self.db.set_account_active(account_id, is_active)
