"""Tests for the CSV statement parser."""

from decimal import Decimal

import pytest

from bankrec.domain.entities import CSVColumnMapping
from bankrec.parsing.csv_parser import CSVTransactionParser, extract_merchant


@pytest.fixture
def parser():
    return CSVTransactionParser()


def test_parse_sample_statement(parser, sample_csv, csv_mapping):
    """All mapped columns are read from a well-formed statement."""
    result = parser.parse(sample_csv, csv_mapping)

    assert result.success is True
    assert result.errors == []
    assert len(result.transactions) == 4

    first = result.transactions[0]
    assert first.date == "2024-01-15"
    assert first.description == "Coffee Shop Purchase"
    assert first.amount == Decimal("4.50")
    assert first.type == "debit"
    assert first.balance == Decimal("1000.50")
    assert first.reference == "REF123"
    assert first.category is None

    assert [t.type for t in result.transactions] == ["debit", "credit", "debit", "debit"]


def test_default_mapping_uses_standard_headers(parser):
    """Without a mapping the Date, Description and Amount headers are used."""
    result = parser.parse("Date,Description,Amount\n2024-01-15,Coffee,-4.50\n")

    assert result.success is True
    assert result.transactions[0].description == "Coffee"


@pytest.mark.parametrize("contents", ["", "   \n  "])
def test_empty_input(parser, contents):
    """Empty files are rejected outright."""
    result = parser.parse(contents)

    assert result.success is False
    assert result.errors == ["CSV data is empty"]


def test_header_only(parser):
    """A header without data rows is an error."""
    result = parser.parse("Date,Description,Amount\n")

    assert result.success is False
    assert result.errors == ["CSV must contain at least a header row and one data row"]


def test_missing_required_column(parser):
    """Every missing required column is reported by header name."""
    result = parser.parse("Description,Amount\nCoffee,-4.50\n")

    assert result.success is False
    assert result.errors == ['Required column "Date" not found in CSV']


def test_custom_column_names(parser):
    """Mappings can point fields at any header name."""
    mapping = CSVColumnMapping(date="Posted", description="Details", amount="Value")
    contents = "Posted,Details,Value\n2024-02-01,Rent,-900.00\n"

    result = parser.parse(contents, mapping)

    assert result.transactions[0].amount == Decimal("900.00")
    assert result.transactions[0].type == "debit"


def test_header_names_trimmed(parser):
    """Whitespace around header names is ignored."""
    result = parser.parse(" Date , Description , Amount \n2024-01-15,Coffee,-4.50\n")

    assert result.success is True


def test_day_first_date_format(parser):
    """DD/MM/YYYY dates are converted to ISO format."""
    result = parser.parse(
        "Date,Description,Amount\n15/01/2024,Coffee,-4.50\n", date_format="DD/MM/YYYY"
    )

    assert result.transactions[0].date == "2024-01-15"


def test_date_not_matching_explicit_format(parser):
    """A date that does not fit the configured layout is a row error."""
    result = parser.parse(
        "Date,Description,Amount\n2024-01-15,Coffee,-4.50\n", date_format="DD/MM/YYYY"
    )

    assert result.success is False
    assert result.errors == ["Row 2: Invalid date format: 2024-01-15"]


@pytest.mark.parametrize(
    "raw, amount, txn_type",
    [
        ("$4.50", Decimal("4.50"), "credit"),
        ('"4,500.99"', Decimal("4500.99"), "credit"),
        ("(100.00)", Decimal("100.00"), "debit"),
        ("-$25.99", Decimal("25.99"), "debit"),
    ],
)
def test_amount_formats(parser, raw, amount, txn_type):
    """Currency symbols, separators and parentheses are understood."""
    result = parser.parse(f"Date,Description,Amount\n2024-01-15,Item,{raw}\n")

    assert result.success is True
    assert result.transactions[0].amount == amount
    assert result.transactions[0].type == txn_type


def test_explicit_type_column_overrides_sign(parser):
    """A debit/credit column wins over the sign of the amount."""
    mapping = CSVColumnMapping(type="Type")
    contents = "Date,Description,Amount,Type\n2024-01-15,Card payment,4.50,Debit\n"

    result = parser.parse(contents, mapping)

    assert result.transactions[0].type == "debit"
    assert result.transactions[0].amount == Decimal("4.50")


def test_unknown_type_value_falls_back_to_sign(parser):
    mapping = CSVColumnMapping(type="Type")
    contents = "Date,Description,Amount,Type\n2024-01-15,Card payment,-4.50,POS\n"

    result = parser.parse(contents, mapping)

    assert result.transactions[0].type == "debit"


def test_row_errors_reported_with_file_line_numbers(parser):
    """Row numbers count the header as row 1."""
    contents = (
        "Date,Description,Amount\n"
        "2024-01-15,Coffee,-4.50\n"
        "2024-01-16,,-10.00\n"
        "2024-01-17,Lunch,abc\n"
        ",Dinner,-20.00\n"
    )

    result = parser.parse(contents)

    assert result.success is False
    assert result.errors == [
        "Row 3: Description is required",
        "Row 4: Invalid amount: abc",
        "Row 5: Date is required",
    ]
    assert [t.description for t in result.transactions] == ["Coffee"]


def test_missing_amount_value(parser):
    result = parser.parse("Date,Description,Amount\n2024-01-15,Coffee,\n")

    assert result.errors == ["Row 2: Amount is required"]


def test_blank_rows_skipped(parser):
    """Rows with no values at all are ignored."""
    contents = "Date,Description,Amount\n2024-01-15,Coffee,-4.50\n,,\n2024-01-16,Tea,-3.00\n"

    result = parser.parse(contents)

    assert result.success is True
    assert len(result.transactions) == 2


def test_byte_order_mark_stripped(parser):
    """A UTF-8 byte order mark before the header is ignored."""
    result = parser.parse("\ufeffDate,Description,Amount\n2024-01-15,Coffee,-4.50\n")

    assert result.success is True


@pytest.mark.parametrize("delimiter", [";", "\t", "|"])
def test_alternative_delimiters(parser, delimiter):
    """Semicolon, tab and pipe separated statements are detected."""
    contents = delimiter.join(["Date", "Description", "Amount"]) + "\n"
    contents += delimiter.join(["2024-01-15", "Coffee", "-4.50"]) + "\n"

    result = parser.parse(contents)

    assert result.success is True
    assert result.transactions[0].amount == Decimal("4.50")


def test_optional_columns_left_empty(parser):
    """Unparseable balances and empty references become None."""
    mapping = CSVColumnMapping(balance="Balance", reference="Reference")
    contents = "Date,Description,Amount,Balance,Reference\n2024-01-15,Coffee,-4.50,n/a,\n"

    result = parser.parse(contents, mapping)

    assert result.transactions[0].balance is None
    assert result.transactions[0].reference is None


def test_identical_rows_reported(parser):
    """Identical rows are returned as a duplicate group."""
    contents = (
        "Date,Description,Amount\n"
        "2024-01-15,Coffee,-4.50\n"
        "2024-01-15,Coffee,-4.50\n"
        "2024-01-16,Tea,-3.00\n"
    )

    result = parser.parse(contents)

    assert result.success is True
    assert len(result.transactions) == 3
    assert result.duplicates == [[0, 1]]


def test_merchant_extracted_from_description(parser):
    contents = (
        "Date,Description,Amount\n"
        "2024-01-15,STARBUCKS #123 MAIN ST,-4.50\n"
        "2024-01-16,AMAZON.COM WEB PURCHASE,-25.99\n"
    )

    result = parser.parse(contents)

    assert [t.merchant for t in result.transactions] == ["STARBUCKS", "AMAZON.COM"]


def test_merchant_column_preferred(parser):
    mapping = CSVColumnMapping(merchant="Merchant")
    contents = "Date,Description,Amount,Merchant\n2024-01-15,STARBUCKS #123,-4.50,Starbucks Coffee\n"

    result = parser.parse(contents, mapping)

    assert result.transactions[0].merchant == "Starbucks Coffee"


@pytest.mark.parametrize(
    "description, merchant",
    [
        ("STARBUCKS #123 MAIN ST", "STARBUCKS"),
        ("AMAZON.COM WEB PURCHASE", "AMAZON.COM"),
        ("SHELL 1234 HIGHWAY", "SHELL"),
        ("12", None),
    ],
)
def test_extract_merchant(description, merchant):
    assert extract_merchant(description) == merchant
