"""Keyword-based transaction categorization."""

import json
from pathlib import Path
from typing import Optional, Sequence

from bankrec.domain.entities import CategoryRule, ImportedTransaction
from bankrec.domain.errors import ValidationError

# Rule order is priority order: the first rule with a matching keyword wins.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        ("starbucks", "mcdonald", "kfc", "burger", "pizza", "restaurant", "cafe", "coffee"),
        "Food & Dining",
    ),
    CategoryRule(
        ("shell", "bp", "mobil", "gas", "fuel", "petrol", "taxi", "uber", "lyft"),
        "Transportation",
    ),
    CategoryRule(("amazon", "walmart", "target", "mall", "store", "shop"), "Shopping"),
    CategoryRule(
        ("electric", "power", "water", "gas company", "internet", "phone"), "Utilities"
    ),
    CategoryRule(("salary", "wages", "payroll", "deposit", "income"), "Income"),
    CategoryRule(("atm", "bank fee", "transfer", "withdrawal"), "Banking"),
    CategoryRule(("pharmacy", "doctor", "medical", "hospital", "clinic"), "Healthcare"),
)


class Categorizer:
    """Assigns categories from an ordered keyword rule table."""

    def __init__(self, rules: Sequence[CategoryRule] = DEFAULT_CATEGORY_RULES):
        """Initialize categorizer.

        Args:
            rules: Ordered rule table; earlier rules take precedence
        """
        self.rules = tuple(
            CategoryRule(tuple(k.lower() for k in rule.keywords), rule.category)
            for rule in rules
        )

    def categorize_description(self, description: Optional[str]) -> Optional[str]:
        """Return the category for a description, or None if no rule matches."""
        if not description:
            return None
        text = description.lower()
        for rule in self.rules:
            if any(keyword in text for keyword in rule.keywords):
                return rule.category
        return None

    def categorize(
        self, transactions: Sequence[ImportedTransaction]
    ) -> list[ImportedTransaction]:
        """Return new transactions with categories assigned.

        Transactions that match no rule keep whatever category they already had.
        The input sequence is not modified.
        """
        result = []
        for transaction in transactions:
            category = self.categorize_description(transaction.description)
            if category is None:
                result.append(transaction)
            else:
                result.append(transaction.with_category(category))
        return result


def load_category_rules(path: str | Path) -> list[CategoryRule]:
    """Load an ordered rule table from a JSON file.

    The file holds a list of objects, each with a "category" string and a
    "keywords" list, e.g. ``[{"category": "Groceries", "keywords": ["tesco"]}]``.

    Raises:
        ValidationError: If the file is not valid JSON or a rule is malformed
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Category rules file '{path}' is not valid JSON: {e}")

    if not isinstance(raw, list):
        raise ValidationError(f"Category rules file '{path}' must contain a list of rules")

    rules = []
    for position, entry in enumerate(raw, start=1):
        if not isinstance(entry, dict):
            raise ValidationError(f"Rule {position}: expected an object")
        category = entry.get("category")
        keywords = entry.get("keywords")
        if not isinstance(category, str) or not category.strip():
            raise ValidationError(f"Rule {position}: 'category' must be a non-empty string")
        if not isinstance(keywords, list) or not all(isinstance(k, str) and k for k in keywords):
            raise ValidationError(f"Rule {position}: 'keywords' must be a list of strings")
        rules.append(CategoryRule(tuple(keywords), category.strip()))
    return rules
