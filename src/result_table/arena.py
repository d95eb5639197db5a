"""Arena-owned backing storage for borrowed column views.

Columns never own their values. Producers allocate buffers in a
:class:`ColumnArena` and hand out :class:`ArenaSlice` views; a view stays
readable only while its arena is alive. Use the arena as a context manager so
the release point is explicit::

    with ColumnArena() as arena:
        values = arena.alloc([1, 2, 3])
        table = Table.try_from_iter([(Identifier.parse("a"), BigIntColumn(values))])
        consume(table)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Self, overload

from result_table.errors import ArenaReleasedError

if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


class ColumnArena:
    """Owner of immutable buffers that column views borrow from."""

    __slots__ = ("_buffers", "_label", "_released")

    def __init__(self, *, label: str | None = None) -> None:
        self._buffers: list[tuple[object, ...]] = []
        self._label = label
        self._released = False

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    @property
    def alive(self) -> bool:
        """Return whether views into this arena may still be read."""
        return not self._released

    @property
    def num_buffers(self) -> int:
        """Return the number of buffers allocated so far."""
        return len(self._buffers)

    def alloc[T](self, values: Iterable[T]) -> ArenaSlice[T]:
        """Copy values into a new arena buffer and return a view of it.

        Parameters
        ----------
        values
            Values to store. They are materialized exactly once.

        Returns
        -------
        ArenaSlice[T]
            Read-only view covering the whole buffer.

        Raises
        ------
        ArenaReleasedError
            Raised when the arena was already released.
        """
        if self._released:
            msg = f"Cannot allocate in released arena {self._label or id(self)!r}."
            raise ArenaReleasedError(msg)
        buffer = tuple(values)
        self._buffers.append(buffer)
        index = len(self._buffers) - 1
        _LOGGER.debug("Allocated arena buffer %d with %d values", index, len(buffer))
        return ArenaSlice(self, index, range(len(buffer)))

    def release(self) -> None:
        """Drop every buffer; outstanding views become unreadable."""
        if self._released:
            return
        _LOGGER.debug("Releasing arena with %d buffers", len(self._buffers))
        self._buffers.clear()
        self._released = True

    def _buffer(self, index: int) -> tuple[object, ...]:
        if self._released:
            msg = f"Column storage in arena {self._label or id(self)!r} was released."
            raise ArenaReleasedError(msg)
        return self._buffers[index]

    def __repr__(self) -> str:
        state = "released" if self._released else "alive"
        return f"ColumnArena(label={self._label!r}, buffers={len(self._buffers)}, {state})"


class ArenaSlice[T](Sequence[T]):
    """Zero-copy, read-only view of rows in an arena buffer."""

    __slots__ = ("_arena", "_index", "_rows")

    def __init__(self, arena: ColumnArena, index: int, rows: range) -> None:
        self._arena = arena
        self._index = index
        self._rows = rows

    @property
    def arena(self) -> ColumnArena:
        """Return the arena that owns the backing buffer."""
        return self._arena

    def __len__(self) -> int:
        return len(self._rows)

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> ArenaSlice[T]: ...

    def __getitem__(self, key: int | slice) -> T | ArenaSlice[T]:
        if isinstance(key, slice):
            return ArenaSlice(self._arena, self._index, self._rows[key])
        buffer = self._arena._buffer(self._index)  # noqa: SLF001
        return buffer[self._rows[key]]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        buffer = self._arena._buffer(self._index)  # noqa: SLF001
        for row in self._rows:
            yield buffer[row]  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(left == right for left, right in zip(self, other, strict=True))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._arena.alive:
            return f"ArenaSlice(<released>, len={len(self)})"
        return f"ArenaSlice({list(self)!r})"


__all__ = ["ArenaSlice", "ColumnArena"]
