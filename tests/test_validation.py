"""Tests for import validation."""

from decimal import Decimal

import pytest

from bankrec.domain.entities import ValidationIssue
from bankrec.domain.validation import ImportValidator


@pytest.fixture
def validator():
    return ImportValidator()


def test_valid_transaction_passes(validator, make_transaction):
    """A well-formed transaction produces no errors or warnings."""
    result = validator.validate([make_transaction()])

    assert result.is_valid is True
    assert result.errors == []
    assert result.warnings == []


def test_empty_batch_is_valid(validator):
    """An empty batch is trivially valid."""
    result = validator.validate([])

    assert result.is_valid is True


def test_invalid_date_rejected(validator, make_transaction):
    """Unparseable dates are reported against the date field."""
    result = validator.validate([make_transaction(date="invalid-date")])

    assert result.is_valid is False
    assert result.errors == [ValidationIssue(0, "date", "Invalid date format")]


def test_impossible_calendar_date_rejected(validator, make_transaction):
    """A date that does not exist on the calendar is invalid."""
    result = validator.validate([make_transaction(date="2024-02-30")])

    assert [e.field for e in result.errors] == ["date"]


def test_partial_date_rejected(validator, make_transaction):
    """A bare day number is not filled in from the current month."""
    result = validator.validate([make_transaction(date="5")])

    assert result.errors == [ValidationIssue(0, "date", "Invalid date format")]


def test_blank_description_rejected(validator, make_transaction):
    """Whitespace-only descriptions are treated as missing."""
    result = validator.validate([make_transaction(description="   ")])

    assert result.errors == [ValidationIssue(0, "description", "Description is required")]


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-0.01"), Decimal("-100")])
def test_non_positive_amount_rejected(validator, make_transaction, amount):
    """Zero and negative amounts always produce an amount error."""
    result = validator.validate([make_transaction(amount=amount)])

    assert ValidationIssue(0, "amount", "Amount must be greater than zero") in result.errors


def test_amount_error_reported_alongside_other_errors(validator, make_transaction):
    """The amount rule is checked even when other fields on the row are invalid."""
    result = validator.validate(
        [make_transaction(date="nope", description="", amount=Decimal("-5"), type="refund")]
    )

    assert [e.field for e in result.errors] == ["date", "description", "amount", "type"]


def test_invalid_type_rejected(validator, make_transaction):
    """Only debit and credit are accepted."""
    result = validator.validate([make_transaction(type="DEBIT")])

    assert result.errors == [ValidationIssue(0, "type", "Type must be debit or credit")]


def test_rows_validated_independently(validator, make_transaction):
    """Every row is checked and errors carry zero-based row indices."""
    result = validator.validate(
        [
            make_transaction(),
            make_transaction(amount=Decimal("0")),
            make_transaction(),
            make_transaction(description=""),
        ]
    )

    assert [(e.row, e.field) for e in result.errors] == [(1, "amount"), (3, "description")]


def test_large_amount_is_warning_only(validator, make_transaction):
    """Amounts above the threshold warn but do not invalidate the batch."""
    result = validator.validate([make_transaction(amount=Decimal("10000.01"))])

    assert result.is_valid is True
    assert result.warnings == [
        ValidationIssue(0, "amount", "Large transaction amount - please verify")
    ]


def test_threshold_amount_does_not_warn(validator, make_transaction):
    """The threshold itself is not considered large."""
    result = validator.validate([make_transaction(amount=Decimal("10000"))])

    assert result.warnings == []


def test_long_description_is_warning_only(validator, make_transaction):
    """Descriptions over 255 characters warn about truncation."""
    result = validator.validate([make_transaction(description="x" * 256)])

    assert result.is_valid is True
    assert result.warnings == [
        ValidationIssue(0, "description", "Description is very long and may be truncated")
    ]


def test_custom_thresholds(make_transaction):
    """Thresholds can be configured per validator."""
    validator = ImportValidator(large_amount_threshold=Decimal("40"), max_description_length=5)

    result = validator.validate([make_transaction(description="Coffee Shop")])

    assert {w.field for w in result.warnings} == {"amount", "description"}


def test_issue_format_uses_one_based_rows():
    """Formatted issues use 1-based row numbers for display."""
    issue = ValidationIssue(0, "amount", "Amount must be greater than zero")

    assert issue.format() == "Row 1: amount - Amount must be greater than zero"
