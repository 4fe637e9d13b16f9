# tests/fakes.py

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingStorage:
    """
    Fake KeyValueStorage for unit tests.

    - keeps values in a dict
    - records every write for assertions
    """

    data: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    cleared: int = 0

    def write(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.data[key] = value

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def clear(self) -> None:
        self.data.clear()
        self.cleared += 1

    def reset_calls(self) -> None:
        self.writes.clear()

    def last_payload(self) -> list[dict]:
        assert self.writes, "no writes recorded"
        return json.loads(self.writes[-1][1])


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id-") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"


class FailingStorage(RecordingStorage):
    """RecordingStorage whose write() fails like a full disk."""

    def write(self, key: str, value: str) -> None:
        raise OSError("disk full")
