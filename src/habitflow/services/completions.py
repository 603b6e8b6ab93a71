"""Sparse per-date, per-habit completion flags."""

from __future__ import annotations

from datetime import date
from typing import Union

from .serialization import CompletionMap

DateKey = Union[date, str]


def date_key(day: DateKey) -> str:
    """Normalize a date or ISO string to the ``YYYY-MM-DD`` key."""

    if isinstance(day, date):
        return day.isoformat()
    return date.fromisoformat(day).isoformat()


class CompletionStore:
    """Owns the ``date -> habit id -> bool`` map.

    Entries are only ever created or flipped, never removed, so flags for
    deleted habits stay in the map.
    """

    def __init__(self, completions: CompletionMap | None = None):
        self._data: CompletionMap = {
            day: dict(flags) for day, flags in (completions or {}).items()
        }

    def toggle(self, habit_id: str, day: DateKey) -> bool:
        """Flip the flag for ``(day, habit_id)`` and return the new value."""

        key = date_key(day)
        flags = dict(self._data.get(key, {}))
        flags[habit_id] = not flags.get(habit_id, False)
        self._data[key] = flags
        return flags[habit_id]

    def is_completed(self, habit_id: str, day: DateKey) -> bool:
        return bool(self._data.get(date_key(day), {}).get(habit_id, False))

    def completed_ids(self, day: DateKey) -> set[str]:
        return {hid for hid, done in self._data.get(date_key(day), {}).items() if done}

    def total_completed(self) -> int:
        """Count every true flag across all dates and habit ids, orphans included."""

        return sum(1 for flags in self._data.values() for done in flags.values() if done)

    def completed_days(self, habit_id: str) -> set[date]:
        return {
            date.fromisoformat(day)
            for day, flags in self._data.items()
            if flags.get(habit_id, False)
        }

    def raw(self) -> CompletionMap:
        return {day: dict(flags) for day, flags in self._data.items()}


__all__ = ["CompletionStore", "DateKey", "date_key"]
