"""Habit list operations: create with palette assignment, delete, lookup."""

from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..models.habit import HABIT_COLORS, HABIT_ICONS, Habit

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def new_habit_id(taken: Iterable[str] = ()) -> str:
    """Return a fresh base-36 identifier not present in ``taken``."""

    taken_ids = set(taken)
    while True:
        candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in taken_ids:
            return candidate


def palette_for(position: int) -> tuple[str, str]:
    """Return the (color, icon) pair for the habit at list ``position``."""

    return HABIT_COLORS[position % len(HABIT_COLORS)], HABIT_ICONS[position % len(HABIT_ICONS)]


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""

    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HabitStore:
    """Ordered habit list; insertion order is display order."""

    def __init__(self, habits: Iterable[Habit] = ()):
        self._habits: list[Habit] = list(habits)

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self):
        return iter(list(self._habits))

    def list_all(self) -> list[Habit]:
        return list(self._habits)

    def ids(self) -> list[str]:
        return [habit.id for habit in self._habits]

    def get(self, habit_id: str) -> Optional[Habit]:
        return next((h for h in self._habits if h.id == habit_id), None)

    def add(self, name: str, *, now: datetime | None = None) -> Optional[Habit]:
        """Append a habit named ``name``; blank names are ignored and return None."""

        if not name or not name.strip():
            return None
        color, icon = palette_for(len(self._habits))
        habit = Habit(
            id=new_habit_id(self.ids()),
            name=name,
            color=color,
            icon=icon,
            created_at=iso_timestamp(now),
        )
        self._habits.append(habit)
        return habit

    def delete(self, habit_id: str) -> bool:
        """Remove the habit with ``habit_id``; returns False when nothing matched."""

        remaining = [h for h in self._habits if h.id != habit_id]
        removed = len(remaining) != len(self._habits)
        self._habits = remaining
        return removed


__all__ = ["HabitStore", "iso_timestamp", "new_habit_id", "palette_for"]
