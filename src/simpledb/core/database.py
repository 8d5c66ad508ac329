"""Database implementation - main public API.

Orchestrates the stack of transaction layers.
"""

from __future__ import annotations

import logging

from .types import Key, Value
from ..components.layer import TransactionLayer

logger = logging.getLogger(__name__)


class Database:
    """In-memory key/value store with nested transactions.

    Public API:
        - get(key): Visible value or None
        - set(key, value): Write in the innermost transaction
        - delete(key): Delete in the innermost transaction
        - count(value): Number of keys holding value
        - begin(): Open a nested transaction
        - rollback(): Discard the innermost transaction
        - commit(): Make all open transactions permanent

    Invariants:
        - The base layer is always at the bottom of the chain
        - depth equals the number of layers above the base layer
        - The base layer holds no tombstones after a commit
    """

    def __init__(self):
        self._current = TransactionLayer()
        self._depth = 0

    @property
    def depth(self) -> int:
        """Number of open transactions."""
        return self._depth

    @property
    def current_layer(self) -> TransactionLayer:
        """The innermost open layer, or the base layer when none is open."""
        return self._current

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    def get(self, key: Key) -> Value | None:
        """Retrieve the visible value for key."""
        return self._current.get(key)

    def set(self, key: Key, value: Value) -> None:
        """Insert or update key with value."""
        self._current.set(key, value)

    def delete(self, key: Key) -> None:
        """Delete key; deleting a missing key is a no-op."""
        self._current.delete(key)

    def count(self, value: Value) -> int:
        """Return the number of keys whose visible value equals value."""
        return self._current.count(value)

    def begin(self) -> None:
        """Start a new transaction nested in the current one."""
        self._current = TransactionLayer(parent=self._current)
        self._depth += 1
        logger.debug(f"Began transaction, depth {self._depth}")

    def rollback(self) -> bool:
        """Discard the innermost transaction.

        Returns:
            True if a transaction was rolled back, False if none was open.
        """
        parent = self._current.parent
        if parent is None:
            logger.debug("Rollback requested with no open transaction")
            return False

        self._current = parent
        self._depth -= 1
        logger.debug(f"Rolled back transaction, depth {self._depth}")
        return True

    def commit(self) -> bool:
        """Commit all open transactions into the base layer.

        Returns:
            True if transactions were committed, False if none was open.
        """
        if self._current.parent is None:
            logger.debug("Commit requested with no open transaction")
            return False

        folded = self._depth
        while self._current.parent is not None:
            parent = self._current.parent
            for key, value in self._current.items():
                if value is not None:
                    parent.set(key, value)
                else:
                    parent.delete(key)
            self._current = parent
            self._depth -= 1
            logger.debug(f"Folded layer into parent, depth {self._depth}")

        self._current.compact()
        logger.info(f"Committed {folded} transaction(s)")
        return True

    def snapshot(self) -> dict[Key, Value]:
        """Return every visible key/value pair in key order."""
        keys: set[Key] = set()
        layer: TransactionLayer | None = self._current
        while layer is not None:
            keys.update(key for key, _ in layer.items())
            layer = layer.parent

        result: dict[Key, Value] = {}
        for key in sorted(keys):
            value = self._current.get(key)
            if value is not None:
                result[key] = value
        return result
