"""Reference scalar type for tests and benchmarks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

# Order of the Curve25519 prime-order subgroup.
CURVE25519_ORDER = 2**252 + 27742317777372353535851937790883648493


@dataclass(frozen=True, slots=True)
class TestScalar:
    """Integer residue modulo the Curve25519 group order."""

    __test__: ClassVar[bool] = False

    residue: int

    def __post_init__(self) -> None:
        if not 0 <= self.residue < CURVE25519_ORDER:
            msg = f"TestScalar residue out of range: {self.residue}."
            raise ValueError(msg)

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Return the scalar congruent to ``value``."""
        return cls(value % CURVE25519_ORDER)

    def __int__(self) -> int:
        if self.residue > CURVE25519_ORDER // 2:
            return self.residue - CURVE25519_ORDER
        return self.residue


__all__ = ["CURVE25519_ORDER", "TestScalar"]
