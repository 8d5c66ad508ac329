"""Tombstone-capable map with a value occurrence index.

Uses sortedcontainers.SortedDict so entries iterate in key order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Entry, Key, Value


class SimpleCountingMap:
    """Flat key/value mapping that tracks how many keys hold each value.

    An entry is either a value or a tombstone (None). A tombstone records
    "deleted here", which is different from the key never being mentioned.

    Invariants:
        - occurrences[v] equals the number of entries whose value is v
        - Values with no live entries are absent from occurrences
        - Keys are always maintained in sorted order
    """

    def __init__(self):
        """Initialize empty map."""
        self._entries: SortedDict = SortedDict()
        self._occurrences: dict[Value, int] = {}

    def contains(self, key: Key) -> bool:
        """Return True if key has any entry, tombstones included."""
        return key in self._entries

    __contains__ = contains

    def get(self, key: Key) -> Value | None:
        """Return the value for key; None if absent or tombstoned.

        Use contains() to tell a tombstone apart from a missing key.
        """
        return self._entries.get(key)

    def set(self, key: Key, value: Value) -> None:
        """Store value for key, retiring the count of the previous value."""
        self._occurrences[value] = self._occurrences.get(value, 0) + 1
        self.delete(key)
        self._entries[key] = value

    def delete(self, key: Key) -> None:
        """Store a tombstone for key.

        A key with no entry still gets one so that it shadows ancestors.
        """
        old_value = self._entries.get(key)
        if old_value is not None:
            self._decrement(old_value)
        self._entries[key] = None

    def discard(self, key: Key) -> None:
        """Remove key's entry entirely, tombstone included."""
        old_value = self._entries.pop(key, None)
        if old_value is not None:
            self._decrement(old_value)

    def count(self, value: Value) -> int:
        """Return the number of live entries holding value."""
        return self._occurrences.get(value, 0)

    def compact(self) -> None:
        """Remove every tombstoned entry."""
        for key in [k for k, v in self._entries.items() if v is None]:
            del self._entries[key]

    def items(self) -> Iterator[Entry]:
        """Return iterator of all entries in sorted key order."""
        yield from self._entries.items()

    def _decrement(self, value: Value) -> None:
        remaining = self._occurrences.get(value, 0) - 1
        if remaining > 0:
            self._occurrences[value] = remaining
        else:
            self._occurrences.pop(value, None)

    def __len__(self) -> int:
        return len(self._entries)
