"""Derived views over the habit list and completion map.

Two numbers drive the dashboard:

* the rolling seven-day series, counting completions of the habits that exist
  *now* on each of the last seven days (a deleted habit disappears from past
  days too), and
* the 30-day goal ratio, which divides *all-time* completions (orphans
  included) by ``habit_count * 30``.

Both formulas are kept exactly as the dashboard has always displayed them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from ..models.habit import Habit
from .completions import CompletionStore

WEEK_DAYS = 7
GOAL_WINDOW_DAYS = 30
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(slots=True, frozen=True)
class ActivityPoint:
    """One bar of the weekly activity chart."""

    label: str
    completed_count: int
    day: date


@dataclass(slots=True, frozen=True)
class GoalRatio:
    """Completed vs remaining shares for the goal donut."""

    completed_share: int
    remaining_share: int
    total_possible: int

    @property
    def percentage(self) -> int:
        # ``or 1`` keeps the no-habits case at 0%
        return round_half_up(self.completed_share / (self.total_possible or 1) * 100)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like a browser's Math.round."""

    return math.floor(value + 0.5)


def weekday_label(day: date) -> str:
    return WEEKDAY_LABELS[day.weekday()]


def weekly_activity(
    habits: Iterable[Habit],
    completions: CompletionStore,
    *,
    today: date | None = None,
) -> tuple[ActivityPoint, ...]:
    """Return completion counts for the last seven days, oldest first."""

    today = today or date.today()
    habit_ids = {habit.id for habit in habits}
    points: list[ActivityPoint] = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        count = len(habit_ids & completions.completed_ids(day))
        points.append(ActivityPoint(label=weekday_label(day), completed_count=count, day=day))
    return tuple(points)


def goal_ratio(habit_count: int, completions: CompletionStore) -> GoalRatio:
    """Compare lifetime completions against the nominal 30-day window."""

    total_possible = habit_count * GOAL_WINDOW_DAYS
    total_completed = completions.total_completed()
    return GoalRatio(
        completed_share=total_completed,
        remaining_share=max(0, total_possible - total_completed),
        total_possible=total_possible,
    )


def compute_streaks(days: Iterable[date], *, today: date | None = None) -> tuple[int, int]:
    """Return (current_streak, longest_streak) from a collection of completed days."""

    today = today or date.today()
    done = set(days)

    # Current streak: walk backwards from today until a gap.
    current = 0
    cursor = today
    while cursor in done:
        current += 1
        cursor -= timedelta(days=1)

    longest = 0
    run = 0
    last_day: date | None = None
    for day in sorted(done):
        run = run + 1 if last_day is not None and day == last_day + timedelta(days=1) else 1
        longest = max(longest, run)
        last_day = day

    return current, longest


__all__ = [
    "ActivityPoint",
    "GOAL_WINDOW_DAYS",
    "GoalRatio",
    "WEEKDAY_LABELS",
    "compute_streaks",
    "goal_ratio",
    "round_half_up",
    "weekday_label",
    "weekly_activity",
]
