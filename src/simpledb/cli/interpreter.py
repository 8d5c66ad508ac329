"""Line-oriented command interpreter for the simpledb protocol.

Each line is whitespace-tokenized into ``COMMAND [ARGS...]``:

    SET name value      GET name        UNSET name      NUMEQUALTO value
    BEGIN               ROLLBACK        COMMIT          END
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TextIO

from ..core.config import ShellConfig
from ..core.database import Database
from ..core.errors import CommandError, MissingArgumentError, UnknownCommandError

if TYPE_CHECKING:
    from ..interfaces.store import TransactionalStore

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """Parses protocol lines and dispatches them to a store.

    Args:
        store: Store to operate on; a fresh Database when omitted
        config: Output literals and prompt settings
    """

    def __init__(
        self,
        store: TransactionalStore | None = None,
        config: ShellConfig | None = None,
    ):
        self.store = store if store is not None else Database()
        self.config = config or ShellConfig()
        self._finished = False
        self._commands: dict[str, tuple[tuple[str, ...], Callable[..., str | None]]] = {
            "SET": (("name", "value"), self._set),
            "GET": (("name",), self._get),
            "UNSET": (("name",), self._unset),
            "NUMEQUALTO": (("value",), self._count),
            "BEGIN": ((), self._begin),
            "ROLLBACK": ((), self._rollback),
            "COMMIT": ((), self._commit),
            "END": ((), self._end),
        }

    @property
    def finished(self) -> bool:
        """True once END has been executed."""
        return self._finished

    def execute(self, line: str) -> str | None:
        """Execute a single command line.

        Returns:
            The text to print, or None for commands with no output.

        Raises:
            UnknownCommandError: If the command name is not recognized.
            MissingArgumentError: If too few arguments were given.
        """
        tokens = line.split()
        if not tokens:
            return None

        name = tokens[0].upper()
        if name not in self._commands:
            raise UnknownCommandError(tokens[0])

        params, handler = self._commands[name]
        args = tokens[1:]
        if len(args) < len(params):
            raise MissingArgumentError(name, params)

        # Surplus arguments are ignored
        return handler(*args[: len(params)])

    def run(self, stream: TextIO, out: TextIO) -> int:
        """Read and execute commands until END or end of input.

        Rejected commands print a diagnostic and the loop continues.

        Returns:
            Process exit status.
        """
        while not self._finished:
            if self.config.show_prompt:
                out.write(self.config.prompt)
                out.flush()

            line = stream.readline()
            if not line:
                break

            try:
                result = self.execute(line)
            except CommandError as e:
                logger.warning(f"Rejected command {line.strip()!r}: {e}")
                out.write(f"ERROR: {e}\n")
                continue

            if result is not None:
                out.write(f"{result}\n")

        return 0

    def _set(self, name: str, value: str) -> None:
        self.store.set(name, value)

    def _get(self, name: str) -> str:
        value = self.store.get(name)
        return self.config.null_literal if value is None else value

    def _unset(self, name: str) -> None:
        self.store.delete(name)

    def _count(self, value: str) -> str:
        return str(self.store.count(value))

    def _begin(self) -> None:
        self.store.begin()

    def _rollback(self) -> str | None:
        if not self.store.rollback():
            return self.config.no_transaction_message
        return None

    def _commit(self) -> str | None:
        if not self.store.commit():
            return self.config.no_transaction_message
        return None

    def _end(self) -> None:
        self._finished = True
