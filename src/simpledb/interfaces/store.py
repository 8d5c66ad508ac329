"""Protocol definition for a transactional store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import Key, Value


@runtime_checkable
class TransactionalStore(Protocol):
    """Public API for the nested-transaction key/value store."""

    def get(self, key: Key) -> Value | None:
        """Return the visible value for key or None if not present."""
        ...

    def set(self, key: Key, value: Value) -> None:
        """Write value for key in the innermost open transaction."""
        ...

    def delete(self, key: Key) -> None:
        """Delete key in the innermost open transaction."""
        ...

    def count(self, value: Value) -> int:
        """Return the number of keys whose visible value equals value."""
        ...

    def begin(self) -> None:
        """Open a new nested transaction."""
        ...

    def commit(self) -> bool:
        """Make every open transaction permanent; False if none open."""
        ...

    def rollback(self) -> bool:
        """Discard the innermost transaction; False if none open."""
        ...
