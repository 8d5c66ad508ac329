"""Configuration for the simpledb command shell.

Defines the tunable parameters of the line-oriented interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShellConfig:
    """Configuration parameters for the command interpreter and CLI.

    Attributes:
        prompt: Text written before each line is read
        show_prompt: Whether the prompt is written at all
        null_literal: Output of GET for a key with no visible value
        no_transaction_message: Output of COMMIT/ROLLBACK with nothing open
        log_level: Name of the logging level configured by the CLI
    """

    prompt: str = "> "
    show_prompt: bool = False
    null_literal: str = "NULL"
    no_transaction_message: str = "NO TRANSACTION"
    log_level: str = "WARNING"
