"""Statement parsers for bankrec."""

from bankrec.parsing.base import TransactionParser
from bankrec.parsing.csv_parser import CSVTransactionParser

__all__ = ["TransactionParser", "CSVTransactionParser"]
