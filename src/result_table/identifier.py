"""Validated SQL identifiers used as column keys."""

from __future__ import annotations

import re

from sqlglot.tokens import Tokenizer, TokenType

from core_types import IDENTIFIER_PATTERN
from result_table.config import table_settings
from result_table.errors import IdentifierParseError
from serde_msgspec import StructBaseHotPath

_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)

# Clause keywords only. Type and function words such as ``date`` or ``json``
# stay usable as column names.
_RESERVED_TOKEN_TYPES = frozenset(
    {
        TokenType.ALIAS,
        TokenType.ALL,
        TokenType.AND,
        TokenType.BETWEEN,
        TokenType.CASE,
        TokenType.DISTINCT,
        TokenType.ELSE,
        TokenType.EXCEPT,
        TokenType.EXISTS,
        TokenType.FROM,
        TokenType.GROUP_BY,
        TokenType.HAVING,
        TokenType.IN,
        TokenType.INTERSECT,
        TokenType.INTO,
        TokenType.IS,
        TokenType.JOIN,
        TokenType.LIKE,
        TokenType.LIMIT,
        TokenType.NOT,
        TokenType.NULL,
        TokenType.OFFSET,
        TokenType.ON,
        TokenType.OR,
        TokenType.ORDER_BY,
        TokenType.SELECT,
        TokenType.THEN,
        TokenType.UNION,
        TokenType.WHEN,
        TokenType.WHERE,
        TokenType.WITH,
    }
)

# Multi-word keywords such as ``GROUP BY`` reserve each of their words.
RESERVED_WORDS: frozenset[str] = frozenset(
    word.lower()
    for phrase, token_type in Tokenizer.KEYWORDS.items()
    if token_type in _RESERVED_TOKEN_TYPES
    for word in phrase.split()
)


def validate_identifier_name(name: str) -> None:
    """Validate an already-normalized identifier name.

    Raises
    ------
    IdentifierParseError
        Raised when the name is empty, too long, malformed, or reserved.
    """
    settings = table_settings()
    if not name:
        raise IdentifierParseError(name, "identifier must not be empty")
    if len(name) > settings.max_identifier_length:
        msg = f"identifier exceeds {settings.max_identifier_length} characters"
        raise IdentifierParseError(name, msg)
    if _IDENTIFIER_RE.fullmatch(name) is None:
        msg = "identifier must match " + IDENTIFIER_PATTERN
        raise IdentifierParseError(name, msg)
    if settings.reject_reserved_keywords and name in RESERVED_WORDS:
        raise IdentifierParseError(name, "identifier is a reserved SQL keyword")


class Identifier(StructBaseHotPath, frozen=True, order=True):
    """Lowercase SQL identifier naming a table column.

    Construct from raw text with :meth:`parse`; direct construction expects a
    name that is already normalized and validates it unchanged.
    """

    name: str

    def __post_init__(self) -> None:
        validate_identifier_name(self.name)

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse raw text into an identifier.

        Returns
        -------
        Identifier
            Normalized identifier.
        """
        return cls(name=text.lower())

    def __str__(self) -> str:
        return self.name


__all__ = ["RESERVED_WORDS", "Identifier", "validate_identifier_name"]
