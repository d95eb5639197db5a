"""Shared type aliases and small typing helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated

from msgspec import Meta

IDENTIFIER_PATTERN = "^[a-z_][a-z0-9_]*$"
DEFAULT_MAX_IDENTIFIER_LENGTH = 64

PositiveInt = Annotated[int, Meta(gt=0)]
NonNegativeInt = Annotated[int, Meta(ge=0)]

IdentifierStr = Annotated[
    str,
    Meta(
        pattern=IDENTIFIER_PATTERN,
        title="Identifier",
        description="Normalized lowercase SQL identifier.",
    ),
]

type IntBounds = tuple[int, int]


def signed_bounds(bits: int) -> IntBounds:
    """Return the inclusive range of a two's-complement integer of ``bits`` width.

    Returns
    -------
    tuple[int, int]
        Minimum and maximum representable values.
    """
    half = 1 << (bits - 1)
    return -half, half - 1


def clamp(value: int, bounds: IntBounds) -> int:
    """Clamp an integer into an inclusive range.

    Returns
    -------
    int
        Value limited to ``bounds``.
    """
    low, high = bounds
    return max(low, min(high, value))


def first_or_none[T](values: Iterable[T]) -> T | None:
    """Return the first element of an iterable, or ``None`` when it is empty.

    Returns
    -------
    T | None
        First element when present.
    """
    return next(iter(values), None)


__all__ = [
    "DEFAULT_MAX_IDENTIFIER_LENGTH",
    "IDENTIFIER_PATTERN",
    "IdentifierStr",
    "IntBounds",
    "NonNegativeInt",
    "PositiveInt",
    "clamp",
    "first_or_none",
    "signed_bounds",
]
