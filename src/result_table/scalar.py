"""Opaque scalar capability that scalar columns are generic over."""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """Protocol for field-element values stored in scalar columns.

    Implementations own their arithmetic; tables and columns only store,
    compare, and hash scalar values.
    """

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Return the scalar representing a signed integer."""
        ...

    def __int__(self) -> int:
        """Return the canonical signed integer view of the scalar."""
        ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


__all__ = ["Scalar"]
