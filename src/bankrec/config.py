"""Import settings loaded from the environment."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from bankrec.domain.errors import ValidationError

DEFAULT_LARGE_AMOUNT_THRESHOLD = Decimal("10000")
DEFAULT_MAX_DESCRIPTION_LENGTH = 255

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ImportSettings:
    """Tunable thresholds for the validator and duplicate detector."""

    large_amount_threshold: Decimal = DEFAULT_LARGE_AMOUNT_THRESHOLD
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH
    date_tolerance_days: int = 0
    fuzzy_match: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ImportSettings":
        """Build settings from BANKREC_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ImportSettings with unset variables left at their defaults

        Raises:
            ValidationError: If a variable holds an unparseable value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        threshold = defaults.large_amount_threshold
        raw = env.get("BANKREC_LARGE_AMOUNT")
        if raw is not None:
            try:
                threshold = Decimal(raw.strip())
            except InvalidOperation:
                raise ValidationError(f"BANKREC_LARGE_AMOUNT must be a number, got '{raw}'")

        return cls(
            large_amount_threshold=threshold,
            max_description_length=_int_from_env(
                env, "BANKREC_MAX_DESCRIPTION", defaults.max_description_length
            ),
            date_tolerance_days=_int_from_env(
                env, "BANKREC_DATE_TOLERANCE", defaults.date_tolerance_days
            ),
            fuzzy_match=_bool_from_env(env, "BANKREC_FUZZY_MATCH", defaults.fuzzy_match),
        )


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got '{raw}'")
    if value < 0:
        raise ValidationError(f"{name} must not be negative, got {value}")
    return value


def _bool_from_env(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name} must be a boolean, got '{raw}'")
