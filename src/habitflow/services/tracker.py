"""Application state container for the habit tracker.

``HabitTracker`` owns the habit list, completion map and profile, loads them
once from its persistence collaborator and writes the whole snapshot back
after every mutation. Derived analytics are memoized until the next change.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from ..config import BaseConfig
from ..devtools import dev_log
from ..logging_config import get_logger
from ..models.habit import Habit
from ..models.profile import UserProfile
from .analytics import ActivityPoint, GoalRatio, compute_streaks, goal_ratio, weekly_activity
from .calendar_nav import CalendarNavigator, CellState
from .completions import CompletionStore, DateKey
from .habits import HabitStore
from .persistence import Persistence, TrackerSnapshot
from .profile import ProfileStore
from .serialization import CompletionMap

logger = get_logger(__name__)

VIEW_MONTHLY = "monthly"
VIEW_DAILY = "daily"
VIEWS = (VIEW_MONTHLY, VIEW_DAILY)


@dataclass
class ViewState:
    """Transient UI state; never persisted."""

    view: str = VIEW_MONTHLY
    adding_habit: bool = False
    pending_habit_name: str = ""
    editing_profile: bool = False

    def show_view(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view '{view}'")
        self.view = view

    def open_add_habit(self) -> None:
        self.view = VIEW_DAILY
        self.adding_habit = True

    def close_add_habit(self) -> None:
        self.adding_habit = False

    def clear_pending_habit(self) -> None:
        self.pending_habit_name = ""
        self.adding_habit = False

    def open_profile(self) -> None:
        self.editing_profile = True

    def close_profile(self) -> None:
        self.editing_profile = False


class HabitTracker:
    """Habits, completions and profile plus the operations that mutate them."""

    def __init__(
        self,
        persistence: Persistence,
        *,
        clock: Callable[[], date] | None = None,
        config: BaseConfig | None = None,
    ):
        self.persistence = persistence
        self.config = config
        self._clock = clock or date.today
        snapshot = persistence.load()
        self.habit_store = HabitStore(snapshot.habits)
        self.completion_store = CompletionStore(snapshot.completions)
        self.profile_store = ProfileStore(snapshot.profile)
        self.view_state = ViewState()
        self.calendar = CalendarNavigator.for_today(self.today())
        self.revision = 0
        self._memo: dict[tuple[Any, ...], Any] = {}

    # ------------------------------------------------------------------ state

    def today(self) -> date:
        return self._clock()

    @property
    def habits(self) -> list[Habit]:
        return self.habit_store.list_all()

    @property
    def completions(self) -> CompletionMap:
        return self.completion_store.raw()

    @property
    def profile(self) -> UserProfile:
        return self.profile_store.profile

    def snapshot(self) -> TrackerSnapshot:
        return TrackerSnapshot(
            habits=self.habits,
            completions=self.completions,
            profile=self.profile,
        )

    def _commit(self, action: str, **context: Any) -> None:
        self.revision += 1
        self._memo.clear()
        self.persistence.save(self.snapshot())
        logger.info(action, extra={"revision": self.revision, **context})
        dev_log(self.config, action, context=context)

    # -------------------------------------------------------------- mutations

    def add_habit(self, name: str) -> Optional[Habit]:
        """Create a habit; blank names are ignored without surfacing an error."""

        habit = self.habit_store.add(name)
        if habit is None:
            logger.debug("Ignoring blank habit name")
            return None
        self.view_state.clear_pending_habit()
        self.view_state.show_view(VIEW_DAILY)
        self._commit("Habit created", habit_id=habit.id, color=habit.color, icon=habit.icon)
        return habit

    def submit_pending_habit(self) -> Optional[Habit]:
        """Create a habit from the add dialog's pending input."""

        return self.add_habit(self.view_state.pending_habit_name)

    def delete_habit(self, habit_id: str) -> bool:
        """Remove a habit; its completion flags stay in the map."""

        if not self.habit_store.delete(habit_id):
            return False
        self._commit("Habit deleted", habit_id=habit_id)
        return True

    def toggle_completion(self, habit_id: str, day: DateKey | None = None) -> bool:
        day = day if day is not None else self.today()
        done = self.completion_store.toggle(habit_id, day)
        self._commit("Completion toggled", habit_id=habit_id, day=str(day), completed=done)
        return done

    def set_profile_name(self, name: str) -> None:
        self.profile_store.set_name(name)
        self._commit("Profile name updated")

    def set_profile_photo(self, photo: str) -> None:
        self.profile_store.set_photo(photo)
        self._commit("Profile photo updated", has_photo=bool(photo))

    def set_profile_weight(self, weight: str) -> None:
        self.profile_store.set_weight(weight)
        self._commit("Profile weight updated")

    def set_profile_height(self, height: str) -> None:
        self.profile_store.set_height(height)
        self._commit("Profile height updated")

    # ---------------------------------------------------------------- queries

    def is_completed(self, habit_id: str, day: DateKey | None = None) -> bool:
        return self.completion_store.is_completed(habit_id, day if day is not None else self.today())

    def _memoized(self, key: tuple[Any, ...], compute: Callable[[], Any]) -> Any:
        # Cached values are tuples or frozen dataclasses; callers share them
        if key not in self._memo:
            self._memo[key] = compute()
        return self._memo[key]

    def weekly_activity(self) -> tuple[ActivityPoint, ...]:
        today = self.today()
        return self._memoized(
            ("weekly", today),
            lambda: weekly_activity(self.habit_store, self.completion_store, today=today),
        )

    def goal_ratio(self) -> GoalRatio:
        return self._memoized(
            ("goal",),
            lambda: goal_ratio(len(self.habit_store), self.completion_store),
        )

    def streaks(self, habit_id: str) -> tuple[int, int]:
        today = self.today()
        return self._memoized(
            ("streaks", habit_id, today),
            lambda: compute_streaks(self.completion_store.completed_days(habit_id), today=today),
        )

    def cell_state(self, habit_id: str, day: int) -> CellState:
        """State of one monthly-grid cell for the month under the calendar cursor."""

        completed = self.completion_store.is_completed(habit_id, self.calendar.date_for(day))
        return self.calendar.cell_state(completed, day, today=self.today())


__all__ = ["HabitTracker", "VIEW_DAILY", "VIEW_MONTHLY", "ViewState"]
