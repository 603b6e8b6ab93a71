"""Tracker state and derived analytics."""

from .analytics import ActivityPoint, GoalRatio, compute_streaks, goal_ratio, weekly_activity
from .calendar_nav import CalendarNavigator, CellState
from .completions import CompletionStore
from .habits import HabitStore
from .persistence import TrackerPersistence, TrackerSnapshot
from .profile import ProfileStore
from .tracker import HabitTracker, ViewState

__all__ = [
    "ActivityPoint",
    "CalendarNavigator",
    "CellState",
    "CompletionStore",
    "GoalRatio",
    "HabitStore",
    "HabitTracker",
    "ProfileStore",
    "TrackerPersistence",
    "TrackerSnapshot",
    "ViewState",
    "compute_streaks",
    "goal_ratio",
    "weekly_activity",
]
