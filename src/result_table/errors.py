"""Error taxonomy for result tables and their inputs."""

from __future__ import annotations


class TableError(ValueError):
    """Base error for table construction failures."""


class ColumnLengthMismatchError(TableError):
    """Raised when the columns of a table disagree on row count.

    The reference length is taken from the first column in insertion order;
    ``column`` names the first column found to differ from it.
    """

    def __init__(self, *, column: str, expected: int, actual: int) -> None:
        self.column = column
        self.expected = expected
        self.actual = actual
        msg = (
            "Columns have different lengths: "
            f"column {column!r} has {actual} rows, expected {expected}."
        )
        super().__init__(msg)


class IdentifierParseError(ValueError):
    """Raised when text is not a well-formed column identifier."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid identifier {text!r}: {reason}.")


class ArenaReleasedError(RuntimeError):
    """Raised when a column buffer is read after its arena was released."""


__all__ = [
    "ArenaReleasedError",
    "ColumnLengthMismatchError",
    "IdentifierParseError",
    "TableError",
]
