"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from bankrec.domain import entities as domain
from bankrec.database.models import (
    BankAccount as ORMBankAccount,
    BankTransaction as ORMBankTransaction,
)


def account_to_domain(orm_account: ORMBankAccount) -> domain.BankAccount:
    """Convert SQLAlchemy BankAccount model to domain BankAccount entity."""
    return domain.BankAccount(
        id=orm_account.id,
        name=orm_account.name,
        bank_name=orm_account.bank_name,
        account_type=orm_account.account_type,
        currency=orm_account.currency,
        is_active=orm_account.is_active,
        user_id=orm_account.user_id,
        created_at=orm_account.created_at,
    )


def bank_transaction_to_domain(orm_transaction: ORMBankTransaction) -> domain.BankTransaction:
    """Convert SQLAlchemy BankTransaction model to domain BankTransaction entity."""
    return domain.BankTransaction(
        id=orm_transaction.id,
        bank_account_id=orm_transaction.bank_account_id,
        user_id=orm_transaction.user_id,
        transaction_date=orm_transaction.transaction_date,
        description=orm_transaction.description,
        amount=orm_transaction.amount,
        type=orm_transaction.type,
        reference=orm_transaction.reference,
        balance=orm_transaction.balance,
        category=orm_transaction.category,
        merchant=orm_transaction.merchant,
        is_reconciled=orm_transaction.is_reconciled,
        notes=orm_transaction.notes,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )
