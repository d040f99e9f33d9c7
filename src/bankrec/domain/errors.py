"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


ACCOUNT_REJECTED = "Bank account not found or access denied"
PDF_NOT_IMPLEMENTED = "PDF import not yet implemented"


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_name_taken(name: str) -> str:
    """Return message for an account name that is already in use."""
    return f"Account with name '{name}' already exists"


def save_failed(description: str, reason: str) -> str:
    """Return message for a transaction that could not be persisted."""
    return f"Failed to save transaction: {description} - {reason}"


def import_failed(reason: str) -> str:
    """Return message for an import run aborted by an unexpected error."""
    return f"Import failed: {reason}"


def intra_batch_duplicate(rows: list[int]) -> str:
    """Return warning for identical rows found within one import batch."""
    row_numbers = ", ".join(str(row + 1) for row in rows)
    return f"Rows {row_numbers} are identical within this file"
