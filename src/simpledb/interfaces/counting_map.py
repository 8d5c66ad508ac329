"""Protocol definition for CountingMap."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Entry, Key, Value


@runtime_checkable
class CountingMap(Protocol):
    """Tombstone-capable mapping that counts live occurrences of each value."""

    def contains(self, key: Key) -> bool:
        """Return True if key has any entry, tombstones included."""
        ...

    def get(self, key: Key) -> Value | None:
        """Return the value for key; None if absent or tombstoned."""
        ...

    def set(self, key: Key, value: Value) -> None:
        """Store value for key, updating occurrence counts."""
        ...

    def delete(self, key: Key) -> None:
        """Replace key's entry with a tombstone."""
        ...

    def discard(self, key: Key) -> None:
        """Remove key's entry entirely, tombstone included."""
        ...

    def count(self, value: Value) -> int:
        """Return the number of live entries holding value."""
        ...

    def compact(self) -> None:
        """Drop every tombstoned entry."""
        ...

    def items(self) -> Iterator[Entry]:
        """Iterate entries in key order, tombstones as None."""
        ...
