"""Domain layer for bankrec application."""

_EXPORTS = {
    "TransactionImportService": "bankrec.domain.transaction_import",
    "get_import_summary": "bankrec.domain.transaction_import",
    "AccountService": "bankrec.domain.account",
    "ImportValidator": "bankrec.domain.validation",
    "Categorizer": "bankrec.domain.categorization",
    "DuplicateDetector": "bankrec.domain.duplicates",
}

__all__ = list(_EXPORTS)


# Services import the database layer, which imports domain entities, so
# services are resolved lazily to avoid circular imports.
def __getattr__(name):
    if name in _EXPORTS:
        from importlib import import_module

        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
