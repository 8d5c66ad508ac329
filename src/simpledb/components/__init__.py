"""Building blocks of the layered store."""

from .counting_map import SimpleCountingMap
from .layer import TransactionLayer

__all__ = ["SimpleCountingMap", "TransactionLayer"]
