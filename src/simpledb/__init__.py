"""simpledb - in-memory key/value store with nested transactions."""

from .core.config import ShellConfig
from .core.database import Database
from .core.errors import (
    SimpleDBError,
    CommandError,
    UnknownCommandError,
    MissingArgumentError,
)
from .core.types import Key, Value, Entry

__all__ = [
    "ShellConfig",
    "Database",
    "SimpleDBError",
    "CommandError",
    "UnknownCommandError",
    "MissingArgumentError",
    "Key",
    "Value",
    "Entry",
]
