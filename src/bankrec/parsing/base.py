"""Abstract statement parser interface."""

from abc import ABC, abstractmethod
from typing import Optional

from bankrec.domain.entities import CSVColumnMapping, CSVParseResult


class TransactionParser(ABC):
    """Turns raw statement contents into candidate transactions."""

    @abstractmethod
    def parse(
        self,
        file_contents: str,
        csv_mapping: Optional[CSVColumnMapping] = None,
        date_format: Optional[str] = None,
    ) -> CSVParseResult:
        """Parse statement contents.

        Implementations report problems through the result instead of raising.
        """
        pass
