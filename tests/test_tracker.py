"""Tests for the HabitTracker state container."""

from __future__ import annotations

from datetime import timedelta

import pytest

from habitflow.infra.repositories import InMemoryRecordStore
from habitflow.models.habit import HABIT_COLORS, HABIT_ICONS, Habit
from habitflow.models.profile import UserProfile
from habitflow.services.calendar_nav import CellState
from habitflow.services.serialization import COMPLETIONS_KEY, HABITS_KEY, encode_habits
from habitflow.services.tracker import VIEW_DAILY, VIEW_MONTHLY, ViewState


class TestHabitLifecycle:
    def test_blank_name_changes_nothing(self, tracker, record_store):
        tracker.view_state.pending_habit_name = "   "

        assert tracker.add_habit("") is None
        assert tracker.submit_pending_habit() is None
        assert tracker.habits == []
        assert record_store.writes == 0

    def test_add_assigns_palette_and_persists(self, tracker, tracker_factory):
        read = tracker.add_habit("Read")
        run = tracker.add_habit("Run")

        assert (read.color, read.icon) == (HABIT_COLORS[0], HABIT_ICONS[0])
        assert (run.color, run.icon) == (HABIT_COLORS[1], HABIT_ICONS[1])
        assert tracker_factory().habits == [read, run]

    def test_add_clears_pending_input_and_shows_daily_list(self, tracker):
        tracker.view_state.open_add_habit()
        tracker.view_state.pending_habit_name = "Meditate"

        habit = tracker.submit_pending_habit()

        assert habit.name == "Meditate"
        assert tracker.view_state.pending_habit_name == ""
        assert tracker.view_state.adding_habit is False
        assert tracker.view_state.view == VIEW_DAILY

    def test_delete_keeps_orphaned_completions(self, tracker, today):
        habit = tracker.add_habit("Read")
        tracker.toggle_completion(habit.id, today)

        assert tracker.delete_habit(habit.id) is True

        assert tracker.habits == []
        assert tracker.completions == {today.isoformat(): {habit.id: True}}
        assert tracker.is_completed(habit.id, today) is True
        assert tracker.weekly_activity()[-1].completed_count == 0
        assert tracker.goal_ratio().completed_share == 1

    def test_delete_unknown_habit_does_not_write(self, tracker, record_store):
        tracker.add_habit("Read")
        writes = record_store.writes

        assert tracker.delete_habit("missing") is False
        assert record_store.writes == writes


class TestCompletions:
    def test_toggle_defaults_to_today(self, tracker, today):
        habit = tracker.add_habit("Read")

        assert tracker.toggle_completion(habit.id) is True
        assert tracker.is_completed(habit.id) is True
        assert tracker.completions == {today.isoformat(): {habit.id: True}}

    def test_toggle_twice_restores_flag(self, tracker, today):
        a = tracker.add_habit("A")
        b = tracker.add_habit("B")
        tracker.toggle_completion(b.id, today)

        tracker.toggle_completion(a.id, today)
        tracker.toggle_completion(a.id, today)

        assert tracker.is_completed(a.id, today) is False
        assert tracker.is_completed(b.id, today) is True

    def test_every_mutation_is_written_through(self, tracker, record_store, today):
        habit = tracker.add_habit("Read")
        tracker.toggle_completion(habit.id, today)
        tracker.set_profile_name("Sam")

        assert record_store.writes == 3
        assert habit.id in record_store.get(HABITS_KEY)
        assert today.isoformat() in record_store.get(COMPLETIONS_KEY)


class TestAnalytics:
    def test_weekly_series_counts_today(self, tracker, today):
        a = tracker.add_habit("A")
        tracker.add_habit("B")
        tracker.toggle_completion(a.id, today)

        assert tracker.weekly_activity()[-1].completed_count == 1

    def test_memoized_until_next_mutation(self, tracker, today):
        habit = tracker.add_habit("A")
        first = tracker.weekly_activity()

        assert tracker.weekly_activity() is first
        assert isinstance(first, tuple)
        with pytest.raises(AttributeError):
            first[-1].completed_count = 99

        tracker.toggle_completion(habit.id, today)
        second = tracker.weekly_activity()

        assert second is not first
        assert second[-1].completed_count == 1

    def test_goal_ratio_with_no_habits(self, tracker):
        assert tracker.goal_ratio().percentage == 0

    def test_goal_ratio_counts_all_time(self, tracker, today):
        habit = tracker.add_habit("A")
        for offset in range(40):
            tracker.toggle_completion(habit.id, today - timedelta(days=offset))

        ratio = tracker.goal_ratio()

        assert ratio.completed_share == 40
        assert ratio.remaining_share == 0
        assert ratio.percentage == 133

    def test_streaks(self, tracker, today):
        habit = tracker.add_habit("A")
        for offset in (0, 1, 2, 5, 6, 7, 8):
            tracker.toggle_completion(habit.id, today - timedelta(days=offset))

        assert tracker.streaks(habit.id) == (3, 4)


class TestMonthlyGrid:
    def test_cell_state_follows_calendar_cursor(self, tracker, today):
        habit = tracker.add_habit("A")
        tracker.toggle_completion(habit.id, "2026-09-30")

        assert tracker.cell_state(habit.id, today.day) is CellState.OPEN
        assert tracker.cell_state(habit.id, 1) is CellState.MISSED

        tracker.calendar.previous_month()

        assert tracker.cell_state(habit.id, 30) is CellState.COMPLETED
        assert tracker.cell_state(habit.id, 29) is CellState.MISSED


class TestProfile:
    def test_setters_replace_single_fields(self, tracker, tracker_factory):
        tracker.set_profile_name("Sam")
        tracker.set_profile_weight("70")
        tracker.set_profile_height("abc")
        tracker.set_profile_photo("data:image/png;base64,AAAA")

        expected = UserProfile(name="Sam", photo="data:image/png;base64,AAAA", weight="70", height="abc")
        assert tracker.profile == expected
        assert tracker_factory().profile == expected

    def test_profile_property_is_a_copy(self, tracker):
        profile = tracker.profile
        profile.name = "changed"

        assert tracker.profile.name == ""


class TestRestart:
    def test_reload_reproduces_state(self, tracker, tracker_factory, today):
        a = tracker.add_habit("A")
        tracker.add_habit("B")
        tracker.toggle_completion(a.id, today)
        tracker.set_profile_name("Sam")

        reloaded = tracker_factory()

        assert reloaded.snapshot() == tracker.snapshot()

    def test_view_state_is_not_persisted(self, tracker, tracker_factory):
        tracker.add_habit("A")

        assert tracker.view_state.view == VIEW_DAILY
        assert tracker_factory().view_state.view == VIEW_MONTHLY


class TestViewState:
    def test_unknown_view_rejected(self):
        with pytest.raises(ValueError):
            ViewState().show_view("yearly")

    def test_open_add_switches_to_daily(self):
        state = ViewState()

        state.open_add_habit()

        assert state.view == VIEW_DAILY
        assert state.adding_habit is True

    def test_profile_dialog_flags(self):
        state = ViewState()

        state.open_profile()
        assert state.editing_profile is True
        state.close_profile()
        assert state.editing_profile is False


class TestCorruptCompletions:
    def test_bad_date_key_falls_back_to_empty_map(self, tracker_factory, today):
        habit = Habit(id="a", name="Read", color=HABIT_COLORS[0], icon=HABIT_ICONS[0], created_at="2026-10-01T08:00:00.000Z")
        store = InMemoryRecordStore(
            {
                HABITS_KEY: encode_habits([habit]),
                COMPLETIONS_KEY: '{"not-a-date": {"a": true}, "2026-10-19": {"a": true}}',
            }
        )

        tracker = tracker_factory(store=store)

        assert tracker.habits == [habit]
        assert tracker.completions == {}
        assert tracker.streaks("a") == (0, 0)
        assert tracker.weekly_activity()[-1].completed_count == 0
        assert tracker.toggle_completion("a", today) is True
