#!/usr/bin/env python3
"""simpledb nested transaction walkthrough.

Sets a key across two nested transactions and rolls both back, printing the
visible value after each step.

Usage:
    python demo/simpledb_demo.py --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging

from simpledb import Database


def run_demo() -> None:
    """Walk through begin/set/rollback at two nesting levels."""
    db = Database()
    db.begin()
    db.set("a", "10")
    print(f"a = {db.get('a')}")  # 10
    db.begin()
    db.set("a", "20")
    print(f"a = {db.get('a')}")  # 20
    db.rollback()
    print(f"a = {db.get('a')}")  # 10
    db.rollback()
    print(f"a = {db.get('a')}")  # None


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="simpledb transaction demo")
    p.add_argument("--log-level", default="WARNING", help="Logging level")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper()))

    run_demo()


if __name__ == "__main__":
    main()
