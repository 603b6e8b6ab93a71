"""Tracker dialogs."""

from .habit_dialog import build_habit_dialog, show_habit_dialog
from .profile_dialog import build_profile_dialog, show_profile_dialog

__all__ = [
    "build_habit_dialog",
    "build_profile_dialog",
    "show_habit_dialog",
    "show_profile_dialog",
]
