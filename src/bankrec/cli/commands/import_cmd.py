"""Statement import command."""

from pathlib import Path

import click
from bankrec.cli.error_handling import handle_domain_error, report_errors, resolve_account_or_exit
from bankrec.config import ImportSettings
from bankrec.domain.account import AccountService
from bankrec.domain.categorization import Categorizer, load_category_rules
from bankrec.domain.entities import (
    FILE_TYPE_CSV,
    FILE_TYPE_PDF,
    CSVColumnMapping,
    TransactionImportConfig,
)
from bankrec.domain.errors import DomainError
from bankrec.domain.transaction_import import TransactionImportService, get_import_summary
from bankrec.utils.date_parser import DATE_FORMATS


@click.command("import")
@click.argument("statement_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--file-type",
    type=click.Choice([FILE_TYPE_CSV, FILE_TYPE_PDF]),
    help="Statement type (defaults to the file extension)",
)
@click.option("--date-column", default="Date", show_default=True)
@click.option("--description-column", default="Description", show_default=True)
@click.option("--amount-column", default="Amount", show_default=True)
@click.option("--type-column", help="Column holding debit/credit")
@click.option("--balance-column", help="Column holding the running balance")
@click.option("--reference-column", help="Column holding the reference code")
@click.option("--merchant-column", help="Column holding the merchant name")
@click.option("--date-format", type=click.Choice(list(DATE_FORMATS)), help="Statement date layout")
@click.option(
    "--skip-duplicates/--keep-duplicates",
    default=True,
    show_default=True,
    help="Skip rows that already exist in the account",
)
@click.option("--fuzzy", is_flag=True, help="Match duplicate descriptions loosely")
@click.option("--date-tolerance", type=click.IntRange(min=0), help="Days two dates may differ by")
@click.option("--rules", type=click.Path(exists=True, dir_okay=False), help="JSON category rules")
@click.pass_context
def import_statement(
    ctx,
    statement_file: str,
    account: str,
    file_type: str | None,
    date_column: str,
    description_column: str,
    amount_column: str,
    type_column: str | None,
    balance_column: str | None,
    reference_column: str | None,
    merchant_column: str | None,
    date_format: str | None,
    skip_duplicates: bool,
    fuzzy: bool,
    date_tolerance: int | None,
    rules: str | None,
):
    """Import transactions from a bank statement.

    Examples:
        bankrec import january.csv --account "Chase"
        bankrec import export.csv --account 1 --date-format DD/MM/YYYY --fuzzy
    """
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        settings = ImportSettings.from_env()
        categorizer = Categorizer(load_category_rules(rules)) if rules else Categorizer()
    except DomainError as e:
        handle_domain_error(ctx, e)

    path = Path(statement_file)
    if file_type is None:
        file_type = FILE_TYPE_PDF if path.suffix.lower() == ".pdf" else FILE_TYPE_CSV

    config = TransactionImportConfig(
        bank_account_id=account_id,
        file_type=file_type,
        csv_mapping=CSVColumnMapping(
            date=date_column,
            description=description_column,
            amount=amount_column,
            type=type_column,
            balance=balance_column,
            reference=reference_column,
            merchant=merchant_column,
        ),
        date_format=date_format,
        skip_duplicates=skip_duplicates,
        fuzzy_match=fuzzy or settings.fuzzy_match,
        date_tolerance_days=(
            settings.date_tolerance_days if date_tolerance is None else date_tolerance
        ),
    )

    # PDF statements are not decoded; the import service rejects them
    contents = ""
    if file_type != FILE_TYPE_PDF:
        try:
            contents = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            click.echo(f"Error: {statement_file} is not UTF-8 text: {e}", err=True)
            ctx.exit(1)

    service = TransactionImportService(db, categorizer=categorizer, settings=settings)
    result = service.import_transactions(contents, config)
    summary = get_import_summary(result)

    click.echo("\nImport complete:" if result.success else "\nImport finished with errors:")
    click.echo(f"  Imported: {summary.successful_imports} transactions")
    click.echo(f"  Skipped: {summary.duplicates_skipped} duplicates")
    click.echo(f"  Categorized: {summary.categorized_count}")
    if summary.date_range.earliest:
        click.echo(f"  Dates: {summary.date_range.earliest} to {summary.date_range.latest}")
    if result.warnings:
        click.echo(f"  Warnings: {len(result.warnings)}")
        for warning in result.warnings:
            click.echo(f"    {warning}")
    if result.errors:
        click.echo(f"  Errors: {summary.errors_count}")
        report_errors(ctx, result.errors)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)

