"""Transaction layer: local writes stacked over an optional parent layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .counting_map import SimpleCountingMap

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Entry, Key, Value


class TransactionLayer:
    """One level of transaction nesting.

    Reads fall through to the parent chain for keys this layer has never
    touched. Writes and deletes land in the local map only, so discarding
    the layer leaves every ancestor untouched.

    The shadow adjustment corrects value counts for keys whose value is
    inherited from an ancestor but hidden here. It is recorded once per key
    per layer, the first time the layer touches the key; later changes to
    that key are tracked by the local map's own counts.

    Invariants:
        - count(v) == max(0, local.count(v) + parent.count(v) + shadow[v])
        - Ancestors are never mutated through a child layer
    """

    def __init__(self, parent: TransactionLayer | None = None):
        self._local = SimpleCountingMap()
        self._parent = parent
        self._shadow_adjustment: dict[Value, int] = {}

    @property
    def parent(self) -> TransactionLayer | None:
        return self._parent

    @property
    def is_base(self) -> bool:
        return self._parent is None

    @property
    def depth(self) -> int:
        """Number of ancestors above this layer (0 for the base layer)."""
        depth = 0
        layer = self._parent
        while layer is not None:
            depth += 1
            layer = layer._parent
        return depth

    def get(self, key: Key) -> Value | None:
        """Return the value for key from the nearest layer that has an entry.

        A local tombstone hides any ancestor value.
        """
        layer: TransactionLayer | None = self
        while layer is not None:
            if layer._local.contains(key):
                return layer._local.get(key)
            layer = layer._parent
        return None

    def set(self, key: Key, value: Value) -> None:
        # Delete first so an inherited value is shadowed exactly once
        self.delete(key)
        self._local.set(key, value)

    def delete(self, key: Key) -> None:
        if not self._local.contains(key) and self._parent is not None:
            inherited = self._parent.get(key)
            if inherited is not None:
                self._shadow_adjustment[inherited] = (
                    self._shadow_adjustment.get(inherited, 0) - 1
                )
        if self._parent is None:
            # Nothing below the base layer for a tombstone to hide
            self._local.discard(key)
        else:
            self._local.delete(key)

    def count(self, value: Value) -> int:
        """Return how many keys visible from this layer hold value.

        Folds from the base layer upward, clamping to zero at every level.
        """
        chain = []
        layer: TransactionLayer | None = self
        while layer is not None:
            chain.append(layer)
            layer = layer._parent

        total = 0
        for layer in reversed(chain):
            total = max(
                0,
                layer._local.count(value)
                + total
                + layer._shadow_adjustment.get(value, 0),
            )
        return total

    def items(self) -> Iterator[Entry]:
        """Return iterator of this layer's own entries in key order."""
        return self._local.items()

    def compact(self) -> None:
        """Drop local tombstones. Only safe on the base layer."""
        self._local.compact()

    def __len__(self) -> int:
        return len(self._local)
