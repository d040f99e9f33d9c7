"""CSV statement parser."""

import csv
import io
import logging
import re
from decimal import Decimal
from typing import Optional

from bankrec.domain.duplicates import find_intra_batch_duplicates
from bankrec.domain.entities import (
    TRANSACTION_TYPES,
    CSVColumnMapping,
    CSVParseResult,
    ImportedTransaction,
)
from bankrec.parsing.base import TransactionParser
from bankrec.utils.amount_parser import parse_amount, split_amount
from bankrec.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("date", "description", "amount")
_DELIMITERS = (",", ";", "\t", "|")

_MERCHANT_PATTERNS = (
    re.compile(r"^([A-Z][A-Z0-9\s&.-]+?)(?:\s+#\d+|\s+\d{4}|\s+[A-Z]{2,3}\s|\s+WEB|\s+ONLINE)", re.I),
    re.compile(r"^([A-Z][A-Z0-9\s&.-]+?)(?:\s+\d+)", re.I),
    re.compile(r"^([A-Z]{3,})", re.I),
)


def extract_merchant(description: str) -> Optional[str]:
    """Guess the merchant name from the leading words of a description.

    "STARBUCKS #123 MAIN ST" gives "STARBUCKS"; "AMAZON.COM WEB PURCHASE"
    gives "AMAZON.COM".
    """
    for pattern in _MERCHANT_PATTERNS:
        match = pattern.match(description)
        if match and len(match.group(1)) > 2:
            return match.group(1).strip()
    return None


class CSVTransactionParser(TransactionParser):
    """Parses delimited bank statements using a column mapping."""

    def parse(
        self,
        file_contents: str,
        csv_mapping: Optional[CSVColumnMapping] = None,
        date_format: Optional[str] = None,
    ) -> CSVParseResult:
        """Parse CSV text into candidate transactions.

        Args:
            file_contents: Full CSV text including the header row
            csv_mapping: Header names per field (defaults to Date/Description/Amount)
            date_format: Optional explicit date layout, e.g. "DD/MM/YYYY"

        Returns:
            CSVParseResult; success is False if any row could not be parsed
        """
        mapping = csv_mapping or CSVColumnMapping()

        if not file_contents or not file_contents.strip():
            return CSVParseResult(success=False, errors=["CSV data is empty"])

        text = file_contents.lstrip("\ufeff").strip()
        reader = csv.DictReader(io.StringIO(text), delimiter=_detect_delimiter(text))
        headers = [h.strip() for h in (reader.fieldnames or [])]
        reader.fieldnames = headers

        errors = []
        for field_name in REQUIRED_FIELDS:
            column = getattr(mapping, field_name)
            if not column or column not in headers:
                errors.append(f'Required column "{column or field_name}" not found in CSV')
        if errors:
            return CSVParseResult(success=False, errors=errors)

        rows = list(reader)
        if not rows:
            return CSVParseResult(
                success=False,
                errors=["CSV must contain at least a header row and one data row"],
            )

        transactions = []
        for row_num, row in enumerate(rows, start=2):  # Start at 2 (header is row 1)
            if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
                continue
            try:
                transactions.append(self._parse_row(row, mapping, date_format))
            except ValueError as e:
                errors.append(f"Row {row_num}: {e}")

        duplicates = find_intra_batch_duplicates(transactions)
        logger.debug(
            "Parsed %d transaction(s) with %d error(s)", len(transactions), len(errors)
        )
        return CSVParseResult(
            success=not errors,
            transactions=transactions,
            errors=errors,
            duplicates=duplicates,
        )

    def _parse_row(
        self,
        row: dict,
        mapping: CSVColumnMapping,
        date_format: Optional[str],
    ) -> ImportedTransaction:
        values = {
            field_name: (row.get(column) or "").strip()
            for field_name, column in mapping.items()
        }

        if not values["date"]:
            raise ValueError("Date is required")
        txn_date = parse_date(values["date"], date_format)

        description = values["description"]
        if not description:
            raise ValueError("Description is required")

        if not values["amount"]:
            raise ValueError("Amount is required")
        amount, txn_type = split_amount(values["amount"])

        # An explicit type column overrides the sign of the amount
        explicit_type = values.get("type", "").lower()
        if explicit_type in TRANSACTION_TYPES:
            txn_type = explicit_type

        return ImportedTransaction(
            date=txn_date.isoformat(),
            description=description,
            amount=amount,
            type=txn_type,
            reference=values.get("reference") or None,
            balance=_optional_amount(values.get("balance")),
            merchant=values.get("merchant") or extract_merchant(description),
        )


def _detect_delimiter(text: str) -> str:
    # Pick the candidate that splits the header row most often
    header = text.splitlines()[0]
    best = max(_DELIMITERS, key=header.count)
    return best if header.count(best) > 0 else ","


def _optional_amount(value: Optional[str]) -> Optional[Decimal]:
    if not value:
        return None
    try:
        return parse_amount(value)
    except ValueError:
        return None
