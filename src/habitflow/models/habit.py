"""Habit tracking data structures."""

from __future__ import annotations

from sqlmodel import Field, SQLModel

HABIT_COLORS: tuple[str, ...] = (
    "bg-blue-500",
    "bg-purple-500",
    "bg-emerald-500",
    "bg-orange-500",
    "bg-pink-500",
)
HABIT_ICONS: tuple[str, ...] = ("🧘", "📚", "💧", "💪", "🍎", "🏃", "💻")


class Habit(SQLModel):
    """A user-defined habit tracked for daily completion.

    Habits are never edited after creation; the only lifecycle event is deletion.
    """

    id: str = Field(min_length=1)
    name: str
    color: str = HABIT_COLORS[0]
    icon: str = HABIT_ICONS[0]
    created_at: str = Field(description="ISO-8601 creation timestamp")
