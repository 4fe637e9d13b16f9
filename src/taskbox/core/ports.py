# src/taskbox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from typing import Protocol


class KeyValueStorage(Protocol):
    """
    String key -> string value storage (the shape of browser localStorage).

    write() replaces the value stored under key.
    read() returns None for a missing key.
    """

    def write(self, key: str, value: str) -> None: ...
    def read(self, key: str) -> str | None: ...
    def clear(self) -> None: ...
