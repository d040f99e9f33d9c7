"""Utility functions for bankrec."""

from bankrec.utils.date_parser import parse_date, is_valid_date
from bankrec.utils.amount_parser import parse_amount, split_amount
from bankrec.utils.account_resolver import resolve_account

__all__ = ["parse_date", "is_valid_date", "parse_amount", "split_amount", "resolve_account"]
