"""Shared msgspec struct bases and JSON helpers."""

from __future__ import annotations

import msgspec


class StructBaseStrict(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Base struct for settings and reports that reject unknown fields."""


class StructBaseHotPath(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=False,
    gc=False,
    cache_hash=True,
):
    """Base struct for small immutable values created in bulk, like identifiers."""


# Sorted keys keep CLI output stable across runs.
JSON_ENCODER = msgspec.json.Encoder(order="sorted")


def dumps_json(obj: object, *, pretty: bool = False) -> bytes:
    """Encode structs, lists, and dicts as JSON.

    Returns
    -------
    bytes
        Compact payload, or an indented one when ``pretty`` is set.
    """
    raw = JSON_ENCODER.encode(obj)
    return msgspec.json.format(raw, indent=2) if pretty else raw


def loads_json[T](buf: bytes | str, *, target_type: type[T]) -> T:
    """Decode and validate a JSON payload as ``target_type``.

    Returns
    -------
    T
        Decoded value.

    Raises
    ------
    msgspec.ValidationError
        Raised when the payload does not match ``target_type``.
    """
    return msgspec.json.decode(buf, type=target_type)


def convert[T](obj: object, *, target_type: type[T]) -> T:
    """Validate builtin data, such as values read from the environment.

    Returns
    -------
    T
        Converted value.

    Raises
    ------
    msgspec.ValidationError
        Raised when ``obj`` violates a field type or constraint.
    """
    return msgspec.convert(obj, type=target_type)


__all__ = [
    "JSON_ENCODER",
    "StructBaseHotPath",
    "StructBaseStrict",
    "convert",
    "dumps_json",
    "loads_json",
]
