"""Common type definitions for simpledb.

Defines fundamental types used across all components.
"""

from __future__ import annotations

# Core primitive types
Key = str
Value = str
# A tombstone is stored as None
Entry = tuple[Key, Value | None]
