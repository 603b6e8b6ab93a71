"""In-memory record store used by tests and throwaway sessions."""

from __future__ import annotations

from typing import Optional


class InMemoryRecordStore:
    """Dictionary-backed record store with the same contract as the SQLite one."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set_many(self, values: dict[str, str]) -> None:
        self.values.update(values)
        self.writes += 1


__all__ = ["InMemoryRecordStore"]
