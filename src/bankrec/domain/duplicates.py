"""Duplicate detection against previously imported transactions."""

import logging
import re
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from bankrec.domain.entities import BankTransaction, ImportedTransaction
from bankrec.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

AMOUNT_TOLERANCE = Decimal("0.01")

_NOISE = re.compile(r"[\W\d_]+")


def normalize_description(description: Optional[str]) -> str:
    """Lowercase, drop digits and punctuation, and collapse whitespace."""
    if not description:
        return ""
    return " ".join(_NOISE.sub(" ", description.lower()).split())


def fuzzy_description_match(first: Optional[str], second: Optional[str]) -> bool:
    """Return True if one normalized description contains the other.

    "STARBUCKS #4821" and "starbucks main st" match because "starbucks" is
    contained in "starbucks main st". When either side normalizes to an empty
    string the descriptions must match exactly instead. An empty string is
    contained in every description, so "#1234" would otherwise be a fuzzy
    duplicate of anything.
    """
    normalized_first = normalize_description(first)
    normalized_second = normalize_description(second)
    if not normalized_first or not normalized_second:
        return exact_description_match(first, second)
    return normalized_first in normalized_second or normalized_second in normalized_first


def exact_description_match(first: Optional[str], second: Optional[str]) -> bool:
    """Case-insensitive comparison of trimmed descriptions."""
    return _description_key(first) == _description_key(second)


class DuplicateDetector:
    """Flags candidate transactions that already exist for an account."""

    def __init__(self, fuzzy_match: bool = False, date_tolerance_days: int = 0):
        """Initialize duplicate detector.

        Args:
            fuzzy_match: Compare descriptions by normalized containment
            date_tolerance_days: Maximum day difference for two dates to match
        """
        if date_tolerance_days < 0:
            raise ValueError("date_tolerance_days must not be negative")
        self.fuzzy_match = fuzzy_match
        self.date_tolerance_days = date_tolerance_days

    def detect(
        self,
        candidates: Sequence[ImportedTransaction],
        existing: Sequence[BankTransaction],
    ) -> list[int]:
        """Return indices of candidates that duplicate an existing transaction.

        A candidate is a duplicate when any existing transaction matches on
        date (within tolerance), amount (within 0.01), type and description.
        Candidates are not compared with each other.

        Args:
            candidates: Incoming transactions, in input order
            existing: Transactions already persisted for the same account

        Returns:
            Ascending list of candidate indices
        """
        duplicate_indices = []
        for index, candidate in enumerate(candidates):
            candidate_date = _as_date(candidate.date)
            if candidate_date is None:
                continue
            if any(self.is_duplicate(candidate, candidate_date, other) for other in existing):
                duplicate_indices.append(index)

        logger.debug(
            "Compared %d candidate(s) with %d existing transaction(s): %d duplicate(s)",
            len(candidates),
            len(existing),
            len(duplicate_indices),
        )
        return duplicate_indices

    def is_duplicate(
        self,
        candidate: ImportedTransaction,
        candidate_date: date,
        existing: BankTransaction,
    ) -> bool:
        """Apply the composite equality rule to one candidate/existing pair."""
        if abs((candidate_date - existing.transaction_date).days) > self.date_tolerance_days:
            return False

        if abs(Decimal(candidate.amount) - Decimal(existing.amount)) > AMOUNT_TOLERANCE:
            return False

        if candidate.type != existing.type:
            return False

        if self.fuzzy_match:
            return fuzzy_description_match(candidate.description, existing.description)
        return exact_description_match(candidate.description, existing.description)


def find_intra_batch_duplicates(candidates: Sequence[ImportedTransaction]) -> list[list[int]]:
    """Group indices of candidates that are identical within one batch.

    Rows are identical when date, trimmed lowercase description, amount and
    type all match. Only groups with more than one row are returned, in order
    of first appearance.
    """
    groups: dict[tuple, list[int]] = {}
    for index, candidate in enumerate(candidates):
        key = (
            candidate.date,
            _description_key(candidate.description),
            Decimal(candidate.amount),
            candidate.type,
        )
        groups.setdefault(key, []).append(index)
    return [indices for indices in groups.values() if len(indices) > 1]


def _description_key(description: Optional[str]) -> str:
    return (description or "").strip().lower()


def _as_date(value) -> Optional[date]:
    if isinstance(value, date):
        return value
    try:
        return parse_date(value)
    except ValueError:
        return None
