# Console entry point: runs the command interpreter over stdin or a file.
from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path

from simpledb.cli.interpreter import CommandInterpreter
from simpledb.core.config import ShellConfig
from simpledb.core.database import Database

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="simpledb",
        description="In-memory key/value store with nested transactions",
    )
    p.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="File of commands to run (default: read stdin)",
    )
    p.add_argument(
        "--prompt",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show a prompt (default: only when stdin is a terminal)",
    )
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.prompt is None:
        show_prompt = args.input is None and sys.stdin.isatty()
    else:
        show_prompt = args.prompt

    config = ShellConfig(show_prompt=show_prompt, log_level=args.log_level)
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    interpreter = CommandInterpreter(Database(), config)

    if args.input is None:
        # Undecodable bytes become U+FFFD instead of ending the session
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        return interpreter.run(sys.stdin, sys.stdout)

    try:
        stream = args.input.open("r", encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Error opening {args.input}: {e}", file=sys.stderr)
        return 2

    with stream:
        logger.info(f"Running commands from {args.input}")
        return interpreter.run(stream, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
