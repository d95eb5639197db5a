"""Typed readers for the environment variables behind table settings."""

from __future__ import annotations

import logging
import os

_LOGGER = logging.getLogger(__name__)

_BOOL_WORDS: dict[str, bool] = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def _raw_env(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean switch such as ``yes`` or ``off``.

    Unset, blank, or unrecognized values yield ``default``; unrecognized
    values are also logged.

    Returns
    -------
    bool
        Parsed switch value.
    """
    raw = _raw_env(name)
    if raw is None:
        return default
    value = _BOOL_WORDS.get(raw.lower())
    if value is None:
        _LOGGER.warning("Ignoring %s=%r; expected a boolean, using %s", name, raw, default)
        return default
    return value


def env_int(name: str, *, default: int) -> int:
    """Read an integer, falling back to ``default`` when unset or malformed.

    Returns
    -------
    int
        Parsed integer.
    """
    raw = _raw_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        _LOGGER.warning("Ignoring %s=%r; expected an integer, using %d", name, raw, default)
        return default


__all__ = ["env_bool", "env_int"]
