"""Protocol definition for a transaction layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Entry, Key, Value


@runtime_checkable
class Layer(Protocol):
    """One level of transaction nesting over an optional parent."""

    @property
    def parent(self) -> Layer | None:
        """The enclosing layer, or None for the base layer."""
        ...

    def get(self, key: Key) -> Value | None:
        """Return the value visible from this layer."""
        ...

    def set(self, key: Key, value: Value) -> None:
        """Write value for key in this layer only."""
        ...

    def delete(self, key: Key) -> None:
        """Hide key in this layer, shadowing any ancestor value."""
        ...

    def count(self, value: Value) -> int:
        """Return how many keys visible from this layer hold value."""
        ...

    def items(self) -> Iterator[Entry]:
        """Iterate this layer's own entries, tombstones included."""
        ...

    def compact(self) -> None:
        """Drop this layer's own tombstones."""
        ...
