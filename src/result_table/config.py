"""Runtime settings for identifier validation."""

from __future__ import annotations

from functools import cache

from core_types import DEFAULT_MAX_IDENTIFIER_LENGTH, PositiveInt
from serde_msgspec import StructBaseStrict, convert
from utils.env_utils import env_bool, env_int

MAX_IDENTIFIER_LENGTH_ENV = "RESULT_TABLE_MAX_IDENTIFIER_LENGTH"
REJECT_RESERVED_KEYWORDS_ENV = "RESULT_TABLE_REJECT_RESERVED_KEYWORDS"


class TableSettings(StructBaseStrict, frozen=True):
    """Validation settings shared by identifiers and tables."""

    max_identifier_length: PositiveInt = DEFAULT_MAX_IDENTIFIER_LENGTH
    reject_reserved_keywords: bool = True


def table_settings_from_env() -> TableSettings:
    """Build TableSettings from environment variables.

    Unset or malformed variables fall back to the defaults.

    Returns
    -------
    TableSettings
        Settings derived from environment variables.

    Raises
    ------
    msgspec.ValidationError
        Raised when a variable parses but violates a field constraint.
    """
    payload: dict[str, object] = {
        "max_identifier_length": env_int(
            MAX_IDENTIFIER_LENGTH_ENV,
            default=DEFAULT_MAX_IDENTIFIER_LENGTH,
        ),
        "reject_reserved_keywords": env_bool(REJECT_RESERVED_KEYWORDS_ENV, default=True),
    }
    return convert(payload, target_type=TableSettings)


@cache
def table_settings() -> TableSettings:
    """Return process-wide settings, read once from the environment.

    Returns
    -------
    TableSettings
        Cached settings.
    """
    return table_settings_from_env()


__all__ = [
    "MAX_IDENTIFIER_LENGTH_ENV",
    "REJECT_RESERVED_KEYWORDS_ENV",
    "TableSettings",
    "table_settings",
    "table_settings_from_env",
]
