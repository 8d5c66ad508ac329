"""Exception hierarchy for simpledb.

The store itself never raises; these cover the command protocol layer.
"""

from __future__ import annotations


class SimpleDBError(Exception):
    """Base exception for all simpledb errors."""
    pass


class CommandError(SimpleDBError):
    """Raised when a protocol command cannot be executed."""
    pass


class UnknownCommandError(CommandError):
    """Raised when a command name is not recognized."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"unknown command: {command}")


class MissingArgumentError(CommandError):
    """Raised when a command is given fewer arguments than it needs."""

    def __init__(self, command: str, expected: tuple[str, ...]):
        self.command = command
        self.expected = expected
        usage = " ".join([command, *expected])
        super().__init__(f"missing argument(s), usage: {usage}")
