"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

from bankrec.domain.entities import BankAccount, BankTransaction


class Database(ABC):
    """Abstract database interface for bankrec.

    Every query and insert is scoped to the tenant the database was opened for.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        bank_name: str,
        account_type: str = "checking",
        currency: str = "USD",
    ) -> int:
        """Create a new active account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[BankAccount]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[BankAccount]:
        """List all accounts."""
        pass

    @abstractmethod
    def set_account_active(self, account_id: int, is_active: bool) -> None:
        """Activate or deactivate an account."""
        pass

    # Transaction operations
    @abstractmethod
    def create_bank_transaction(
        self,
        bank_account_id: int,
        transaction_date: date,
        description: str,
        amount: Decimal,
        type: str,
        reference: Optional[str] = None,
        balance: Optional[Decimal] = None,
        category: Optional[str] = None,
        merchant: Optional[str] = None,
        is_reconciled: bool = False,
        notes: Optional[str] = None,
    ) -> BankTransaction:
        """Insert a transaction. Returns the persisted transaction."""
        pass

    @abstractmethod
    def list_bank_transactions(self, bank_account_id: int) -> list[BankTransaction]:
        """List transactions for an account ordered by date."""
        pass
