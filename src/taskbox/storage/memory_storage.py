# src/taskbox/storage/memory_storage.py

from __future__ import annotations


class InMemoryStorage:
    """Dict-backed KeyValueStorage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def write(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes += 1

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def clear(self) -> None:
        self._data.clear()

    def close(self) -> None:
        return
