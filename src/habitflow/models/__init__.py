"""Tracker model exports."""

from .habit import HABIT_COLORS, HABIT_ICONS, Habit
from .profile import UserProfile
from .record import StoredRecord

__all__ = [
    "HABIT_COLORS",
    "HABIT_ICONS",
    "Habit",
    "StoredRecord",
    "UserProfile",
]
