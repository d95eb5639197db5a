"""Tests for column identifier parsing and validation."""

from __future__ import annotations

import msgspec
import pytest

from result_table.config import (
    MAX_IDENTIFIER_LENGTH_ENV,
    REJECT_RESERVED_KEYWORDS_ENV,
)
from result_table.errors import IdentifierParseError
from result_table.identifier import RESERVED_WORDS, Identifier


def test_parse_normalizes_case() -> None:
    """Ensure parsing lowercases the identifier text."""
    assert Identifier.parse("Total_Amount") == Identifier(name="total_amount")
    assert str(Identifier.parse("ABC")) == "abc"


@pytest.mark.parametrize("text", ["a", "_hidden", "col_1", "r0"])
def test_parse_accepts_plain_names(text: str) -> None:
    """Ensure ordinary SQL names parse unchanged."""
    assert Identifier.parse(text).name == text


@pytest.mark.parametrize("text", ["", "1a", "a b", "a-b", "a.b", "ñame", "'a'"])
def test_parse_rejects_malformed_text(text: str) -> None:
    """Ensure malformed text raises an identifier parse error."""
    with pytest.raises(IdentifierParseError):
        Identifier.parse(text)


@pytest.mark.parametrize("text", ["select", "FROM", "where", "group", "Order", "by", "and"])
def test_parse_rejects_reserved_keywords(text: str) -> None:
    """Ensure SQL clause keywords are not accepted as identifiers."""
    with pytest.raises(IdentifierParseError, match="reserved"):
        Identifier.parse(text)


@pytest.mark.parametrize(
    "text",
    [
        "date",
        "time",
        "text",
        "timestamp",
        "uuid",
        "json",
        "first",
        "index",
        "end",
        "left",
        "comment",
        "row",
        "range",
        "filter",
        "format",
    ],
)
def test_parse_accepts_type_and_function_words(text: str) -> None:
    """Ensure type and function names remain usable as column names."""
    assert text not in RESERVED_WORDS
    assert Identifier.parse(text).name == text


def test_reserved_keywords_allowed_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure keyword rejection can be switched off through the environment."""
    monkeypatch.setenv(REJECT_RESERVED_KEYWORDS_ENV, "false")
    assert Identifier.parse("select").name == "select"


def test_length_limit_defaults_to_64() -> None:
    """Ensure identifiers longer than the default limit are rejected."""
    assert Identifier.parse("a" * 64).name == "a" * 64
    with pytest.raises(IdentifierParseError, match="64"):
        Identifier.parse("a" * 65)


def test_length_limit_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the identifier length limit follows the environment."""
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, "4")
    assert Identifier.parse("abcd").name == "abcd"
    with pytest.raises(IdentifierParseError):
        Identifier.parse("abcde")


def test_direct_construction_requires_normalized_name() -> None:
    """Ensure direct construction validates without normalizing case."""
    with pytest.raises(IdentifierParseError):
        Identifier(name="Upper")


def test_parse_error_is_value_error() -> None:
    """Ensure identifier errors are ValueErrors carrying the input text."""
    with pytest.raises(ValueError, match="Invalid identifier") as info:
        Identifier.parse("1st")
    assert isinstance(info.value, IdentifierParseError)
    assert info.value.text == "1st"


def test_identifiers_are_hashable_and_ordered() -> None:
    """Ensure identifiers work as dict keys and sort by name."""
    names = [Identifier.parse(text) for text in ("b", "a", "c")]
    assert sorted(names) == [Identifier.parse("a"), Identifier.parse("b"), Identifier.parse("c")]
    assert {Identifier.parse("a"): 1}[Identifier(name="a")] == 1


def test_identifier_msgspec_round_trip() -> None:
    """Ensure identifiers encode as structs and re-validate on decode."""
    raw = msgspec.json.encode(Identifier.parse("a"))
    assert msgspec.json.decode(raw, type=Identifier) == Identifier.parse("a")
    with pytest.raises(msgspec.ValidationError):
        msgspec.json.decode(b'{"name": "Bad Name"}', type=Identifier)
