"""Protocols implemented by simpledb components."""

from .counting_map import CountingMap
from .layer import Layer
from .store import TransactionalStore

__all__ = ["CountingMap", "Layer", "TransactionalStore"]
