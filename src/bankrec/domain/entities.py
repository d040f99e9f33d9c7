"""Domain model entities for bankrec.

These are pure data classes representing business concepts, independent of
database schema. Parsers produce ImportedTransaction records; the repository
hands back BankTransaction records once a row has been persisted.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, date
from decimal import Decimal
from typing import Optional

DEBIT = "debit"
CREDIT = "credit"
TRANSACTION_TYPES = (DEBIT, CREDIT)

FILE_TYPE_CSV = "csv"
FILE_TYPE_PDF = "pdf"

ACCOUNT_TYPES = ("checking", "savings", "credit_card", "business")


@dataclass(frozen=True)
class BankAccount:
    """Bank account domain entity."""

    id: int
    name: str
    bank_name: str
    account_type: str
    currency: str
    is_active: bool
    user_id: str
    created_at: datetime


@dataclass(frozen=True)
class ImportedTransaction:
    """A candidate transaction produced by a statement parser.

    The amount is always a positive magnitude; the direction is carried by
    ``type``. ``category`` stays None until the categorizer has run.
    """

    date: str
    description: str
    amount: Decimal
    type: str
    reference: Optional[str] = None
    balance: Optional[Decimal] = None
    category: Optional[str] = None
    merchant: Optional[str] = None

    def with_category(self, category: Optional[str]) -> "ImportedTransaction":
        """Return a copy of this transaction with the category set."""
        return replace(self, category=category)


@dataclass(frozen=True)
class BankTransaction:
    """Persisted bank transaction domain entity."""

    id: int
    bank_account_id: int
    user_id: str
    transaction_date: date
    description: str
    amount: Decimal
    type: str
    reference: Optional[str]
    balance: Optional[Decimal]
    category: Optional[str]
    merchant: Optional[str]
    is_reconciled: bool
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CSVColumnMapping:
    """Maps transaction fields to CSV header names."""

    date: str = "Date"
    description: str = "Description"
    amount: str = "Amount"
    type: Optional[str] = None
    balance: Optional[str] = None
    reference: Optional[str] = None
    merchant: Optional[str] = None

    def items(self) -> list[tuple[str, str]]:
        """Return (field, column) pairs for every mapped field."""
        pairs = [
            ("date", self.date),
            ("description", self.description),
            ("amount", self.amount),
            ("type", self.type),
            ("balance", self.balance),
            ("reference", self.reference),
            ("merchant", self.merchant),
        ]
        return [(name, column) for name, column in pairs if column]


@dataclass(frozen=True)
class TransactionImportConfig:
    """Input contract for one import run."""

    bank_account_id: int
    file_type: str = FILE_TYPE_CSV
    csv_mapping: Optional[CSVColumnMapping] = None
    date_format: Optional[str] = None
    skip_duplicates: bool = True
    fuzzy_match: bool = False
    date_tolerance_days: int = 0


@dataclass(frozen=True)
class ValidationIssue:
    """A single row-scoped validation error or warning."""

    row: int
    field: str
    message: str

    def format(self) -> str:
        """Render the issue using 1-based row numbers."""
        return f"Row {self.row + 1}: {self.field} - {self.message}"


@dataclass(frozen=True)
class ImportValidationResult:
    """Outcome of validating a batch of imported transactions."""

    is_valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class CSVParseResult:
    """Outcome of parsing a statement file.

    ``duplicates`` lists groups of row indices that are identical within the
    parsed batch. The import service turns each group into a warning.
    """

    success: bool
    transactions: list[ImportedTransaction] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    duplicates: list[list[int]] = field(default_factory=list)


@dataclass(frozen=True)
class TransactionImportResult:
    """Result of a single import run."""

    success: bool
    imported_count: int
    duplicates_skipped: int
    errors: list[str] = field(default_factory=list)
    transactions: list[BankTransaction] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DateRange:
    """Earliest and latest ISO dates, empty strings when unknown."""

    earliest: str
    latest: str


@dataclass(frozen=True)
class ImportSummary:
    """Read-only report derived from a TransactionImportResult."""

    total_processed: int
    successful_imports: int
    duplicates_skipped: int
    errors_count: int
    categorized_count: int
    date_range: DateRange


@dataclass(frozen=True)
class CategoryRule:
    """An ordered categorization rule: any keyword hit assigns the category."""

    keywords: tuple[str, ...]
    category: str
