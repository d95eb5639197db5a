"""Tests for environment-backed table settings."""

from __future__ import annotations

import logging

import msgspec
import pytest

from result_table.config import (
    MAX_IDENTIFIER_LENGTH_ENV,
    REJECT_RESERVED_KEYWORDS_ENV,
    TableSettings,
    table_settings,
    table_settings_from_env,
)
from utils.env_utils import env_bool, env_int


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure unset variables produce the default settings."""
    monkeypatch.delenv(MAX_IDENTIFIER_LENGTH_ENV, raising=False)
    monkeypatch.delenv(REJECT_RESERVED_KEYWORDS_ENV, raising=False)
    assert table_settings_from_env() == TableSettings()
    assert TableSettings().max_identifier_length == 64
    assert TableSettings().reject_reserved_keywords


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure valid variables override the defaults."""
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, " 12 ")
    monkeypatch.setenv(REJECT_RESERVED_KEYWORDS_ENV, "no")
    settings = table_settings_from_env()
    assert settings.max_identifier_length == 12
    assert not settings.reject_reserved_keywords


def test_malformed_values_fall_back(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Ensure unparsable variables log a warning and keep the defaults."""
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, "many")
    monkeypatch.setenv(REJECT_RESERVED_KEYWORDS_ENV, "sometimes")
    with caplog.at_level(logging.WARNING, logger="utils.env_utils"):
        settings = table_settings_from_env()
    assert settings == TableSettings()
    assert "expected an integer" in caplog.text
    assert "expected a boolean" in caplog.text


def test_non_positive_length_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure constraint violations surface as validation errors."""
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, "0")
    with pytest.raises(msgspec.ValidationError):
        table_settings_from_env()


def test_cached_accessor_reads_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the cached accessor ignores changes until cleared."""
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, "8")
    assert table_settings().max_identifier_length == 8
    monkeypatch.setenv(MAX_IDENTIFIER_LENGTH_ENV, "9")
    assert table_settings().max_identifier_length == 8
    table_settings.cache_clear()
    assert table_settings().max_identifier_length == 9


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure env helpers parse switches and integers, and default when blank."""
    monkeypatch.setenv("RESULT_TABLE_TEST_FLAG", " On ")
    monkeypatch.setenv("RESULT_TABLE_TEST_OFF", "off")
    monkeypatch.setenv("RESULT_TABLE_TEST_COUNT", "7")
    monkeypatch.setenv("RESULT_TABLE_TEST_BLANK", "  ")
    assert env_bool("RESULT_TABLE_TEST_FLAG", default=False) is True
    assert env_bool("RESULT_TABLE_TEST_OFF", default=True) is False
    assert env_bool("RESULT_TABLE_TEST_BLANK", default=True) is True
    assert env_bool("RESULT_TABLE_TEST_MISSING", default=False) is False
    assert env_int("RESULT_TABLE_TEST_COUNT", default=0) == 7
    assert env_int("RESULT_TABLE_TEST_BLANK", default=3) == 3
    assert env_int("RESULT_TABLE_TEST_MISSING", default=3) == 3
