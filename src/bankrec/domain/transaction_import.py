"""Transaction import domain service.

Runs one statement import through a fixed pipeline:

    account check -> parse -> validate -> categorize -> duplicates -> persist

Account, parse and validation failures abort the run before anything is
saved. Persistence is attempted row by row; a failed row is reported and the
remaining rows are still saved.
"""

import logging
from typing import Optional

from bankrec.config import ImportSettings
from bankrec.database.base import Database
from bankrec.domain.account import AccountService
from bankrec.domain.categorization import Categorizer
from bankrec.domain.duplicates import DuplicateDetector
from bankrec.domain.entities import (
    FILE_TYPE_CSV,
    BankTransaction,
    DateRange,
    ImportedTransaction,
    ImportSummary,
    TransactionImportConfig,
    TransactionImportResult,
)
from bankrec.domain.errors import (
    ACCOUNT_REJECTED,
    PDF_NOT_IMPLEMENTED,
    import_failed,
    intra_batch_duplicate,
    save_failed,
)
from bankrec.domain.validation import ImportValidator
from bankrec.parsing.base import TransactionParser
from bankrec.parsing.csv_parser import CSVTransactionParser
from bankrec.utils.date_parser import parse_date

logger = logging.getLogger(__name__)


class TransactionImportService:
    """Service for importing bank statements into an account."""

    def __init__(
        self,
        db: Database,
        parser: Optional[TransactionParser] = None,
        categorizer: Optional[Categorizer] = None,
        settings: Optional[ImportSettings] = None,
    ):
        """Initialize transaction import service.

        Args:
            db: Database instance used for account lookup and persistence
            parser: Statement parser (defaults to CSVTransactionParser)
            categorizer: Categorizer with the rule table to apply
            settings: Validator thresholds (defaults to ImportSettings())
        """
        self.db = db
        self.settings = settings or ImportSettings()
        self.account_service = AccountService(db)
        self.parser = parser or CSVTransactionParser()
        self.categorizer = categorizer or Categorizer()
        self.validator = ImportValidator(
            large_amount_threshold=self.settings.large_amount_threshold,
            max_description_length=self.settings.max_description_length,
        )

    def import_transactions(
        self, file_contents: str, config: TransactionImportConfig
    ) -> TransactionImportResult:
        """Import a statement into the configured account.

        Never raises: every failure is reported through the returned result.

        Args:
            file_contents: Raw statement contents
            config: Import configuration for this run

        Returns:
            TransactionImportResult; success is True iff no errors were recorded
        """
        try:
            return self._run(file_contents, config)
        except Exception as e:
            logger.exception("Import into account %s failed", config.bank_account_id)
            return _rejected([import_failed(str(e) or type(e).__name__)])

    def _run(self, file_contents: str, config: TransactionImportConfig) -> TransactionImportResult:
        account_id = config.bank_account_id

        if not self.account_service.is_active_account(account_id):
            logger.warning("Rejected import: account %s missing or inactive", account_id)
            return _rejected([ACCOUNT_REJECTED])

        if config.file_type != FILE_TYPE_CSV:
            logger.warning("Rejected import: file type '%s' is not supported", config.file_type)
            return _rejected([PDF_NOT_IMPLEMENTED])

        parse_result = self.parser.parse(file_contents, config.csv_mapping, config.date_format)
        if not parse_result.success:
            logger.warning("Rejected import: parser reported %d error(s)", len(parse_result.errors))
            return _rejected(list(parse_result.errors))
        imported = list(parse_result.transactions)

        validation = self.validator.validate(imported)
        warnings = [issue.format() for issue in validation.warnings]
        if not validation.is_valid:
            logger.warning("Rejected import: %d validation error(s)", len(validation.errors))
            return _rejected([issue.format() for issue in validation.errors], warnings)

        categorized = self.categorizer.categorize(imported)

        # Rows repeated within the file are not deduplicated, only reported
        for rows in parse_result.duplicates:
            warnings.append(intra_batch_duplicate(rows))

        duplicate_indices: set[int] = set()
        if config.skip_duplicates:
            existing = self.db.list_bank_transactions(account_id)
            detector = DuplicateDetector(
                fuzzy_match=config.fuzzy_match,
                date_tolerance_days=config.date_tolerance_days,
            )
            duplicate_indices = set(detector.detect(categorized, existing))

        to_import = [
            transaction
            for index, transaction in enumerate(categorized)
            if index not in duplicate_indices
        ]

        saved, errors = self._persist(account_id, to_import)
        errors = list(parse_result.errors) + errors

        logger.info(
            "Imported %d transaction(s) into account %s, skipped %d duplicate(s), %d error(s)",
            len(saved),
            account_id,
            len(duplicate_indices),
            len(errors),
        )
        return TransactionImportResult(
            success=not errors,
            imported_count=len(saved),
            duplicates_skipped=len(duplicate_indices),
            errors=errors,
            transactions=saved,
            warnings=warnings,
        )

    def _persist(
        self, account_id: int, transactions: list[ImportedTransaction]
    ) -> tuple[list[BankTransaction], list[str]]:
        """Save each transaction individually, collecting failures per row."""
        saved: list[BankTransaction] = []
        errors: list[str] = []
        for transaction in transactions:
            try:
                saved.append(self._save(account_id, transaction))
            except Exception as e:
                logger.warning("Failed to save transaction '%s': %s", transaction.description, e)
                errors.append(save_failed(transaction.description, str(e) or type(e).__name__))
        return saved, errors

    def _save(self, account_id: int, transaction: ImportedTransaction) -> BankTransaction:
        return self.db.create_bank_transaction(
            bank_account_id=account_id,
            transaction_date=parse_date(transaction.date),
            description=transaction.description,
            amount=transaction.amount,
            type=transaction.type,
            reference=transaction.reference,
            balance=transaction.balance,
            category=transaction.category,
            merchant=transaction.merchant,
            is_reconciled=False,
            notes=None,
        )


def get_import_summary(result: TransactionImportResult) -> ImportSummary:
    """Build a read-only summary of a completed import.

    Args:
        result: Result returned by TransactionImportService.import_transactions

    Returns:
        ImportSummary; the date range is empty when nothing was imported
    """
    dates = sorted(t.transaction_date for t in result.transactions)
    categorized_count = sum(1 for t in result.transactions if t.category)

    return ImportSummary(
        total_processed=result.imported_count + result.duplicates_skipped,
        successful_imports=result.imported_count,
        duplicates_skipped=result.duplicates_skipped,
        errors_count=len(result.errors),
        categorized_count=categorized_count,
        date_range=DateRange(
            earliest=dates[0].isoformat() if dates else "",
            latest=dates[-1].isoformat() if dates else "",
        ),
    )


def _rejected(errors: list[str], warnings: Optional[list[str]] = None) -> TransactionImportResult:
    return TransactionImportResult(
        success=False,
        imported_count=0,
        duplicates_skipped=0,
        errors=errors,
        transactions=[],
        warnings=warnings or [],
    )
