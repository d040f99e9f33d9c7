"""Structural validation of imported transactions."""

import logging
from decimal import Decimal
from typing import Sequence

from bankrec.config import DEFAULT_LARGE_AMOUNT_THRESHOLD, DEFAULT_MAX_DESCRIPTION_LENGTH
from bankrec.domain.entities import (
    TRANSACTION_TYPES,
    ImportedTransaction,
    ImportValidationResult,
    ValidationIssue,
)
from bankrec.utils.date_parser import is_valid_date

logger = logging.getLogger(__name__)


class ImportValidator:
    """Checks each candidate transaction for structural correctness."""

    def __init__(
        self,
        large_amount_threshold: Decimal = DEFAULT_LARGE_AMOUNT_THRESHOLD,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ):
        """Initialize validator.

        Args:
            large_amount_threshold: Amounts above this produce a warning
            max_description_length: Descriptions longer than this produce a warning
        """
        self.large_amount_threshold = Decimal(large_amount_threshold)
        self.max_description_length = max_description_length

    def validate(self, transactions: Sequence[ImportedTransaction]) -> ImportValidationResult:
        """Validate every row independently.

        All rules are evaluated for every row, so one row can contribute
        several errors. Row indices are zero-based positions in the input.

        Args:
            transactions: Parsed candidate transactions

        Returns:
            ImportValidationResult; is_valid is False iff any row has an error
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for index, transaction in enumerate(transactions):
            errors.extend(self._row_errors(index, transaction))
            warnings.extend(self._row_warnings(index, transaction))

        if errors:
            logger.info("Validation found %d error(s) in %d row(s)", len(errors), len(transactions))

        return ImportValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def _row_errors(self, row: int, transaction: ImportedTransaction) -> list[ValidationIssue]:
        issues = []

        if not is_valid_date(transaction.date):
            issues.append(ValidationIssue(row, "date", "Invalid date format"))

        if not transaction.description or not transaction.description.strip():
            issues.append(ValidationIssue(row, "description", "Description is required"))

        if not _is_positive(transaction.amount):
            issues.append(ValidationIssue(row, "amount", "Amount must be greater than zero"))

        if transaction.type not in TRANSACTION_TYPES:
            issues.append(ValidationIssue(row, "type", "Type must be debit or credit"))

        return issues

    def _row_warnings(self, row: int, transaction: ImportedTransaction) -> list[ValidationIssue]:
        issues = []

        if _is_positive(transaction.amount) and transaction.amount > self.large_amount_threshold:
            issues.append(
                ValidationIssue(row, "amount", "Large transaction amount - please verify")
            )

        if transaction.description and len(transaction.description) > self.max_description_length:
            issues.append(
                ValidationIssue(
                    row, "description", "Description is very long and may be truncated"
                )
            )

        return issues


def _is_positive(amount) -> bool:
    # NaN and non-numeric values are never positive
    try:
        return amount is not None and Decimal(amount) > 0
    except (ArithmeticError, TypeError, ValueError):
        return False
