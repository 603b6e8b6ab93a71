"""Tracker view: profile header, weekly/goal charts, monthly grid and daily list."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable

import flet as ft

from ...devtools import dev_log
from ...logging_config import get_logger
from ...models.habit import Habit
from ...services.calendar_nav import CellState
from ...services.profile import greeting, height_label, weight_label
from ...services.tracker import VIEW_DAILY, VIEW_MONTHLY
from ..charts import ChartFiles
from ..components import build_card, empty_state, profile_avatar
from ..components.dialogs import show_habit_dialog, show_profile_dialog

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)

CELL_COLORS = {
    CellState.COMPLETED: ft.Colors.GREEN,
    CellState.MISSED: ft.Colors.SURFACE_CONTAINER_HIGHEST,
    CellState.OPEN: ft.Colors.SURFACE,
}
CELL_ICONS = {
    CellState.COMPLETED: ft.Icons.CHECK,
    CellState.MISSED: ft.Icons.CLOSE,
    CellState.OPEN: None,
}


def build_tracker_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the single tracker screen."""

    tracker = ctx.tracker
    if ctx.charts is None:
        ctx.charts = ChartFiles(Path(ctx.config.DATA_DIR) / "charts")
    charts = ctx.charts
    body = ft.Column(spacing=24, expand=True, scroll=ft.ScrollMode.AUTO)

    def _snack(message: str) -> None:
        page.snack_bar = ft.SnackBar(content=ft.Text(message))
        page.snack_bar.open = True
        page.update()

    def _run(label: str, action: Callable[[], object]) -> None:
        """Apply a tracker mutation, then redraw; storage errors surface as a snack bar."""
        try:
            action()
        except Exception as exc:
            logger.error(f"{label} failed", exc_info=True)
            dev_log(ctx.config, f"{label} failed", exc=exc)
            _snack(f"{label} failed: {exc}")
            return
        refresh()

    def _toggle(habit_id: str, day) -> None:
        _run("Toggle", lambda: tracker.toggle_completion(habit_id, day))

    def _delete(habit: Habit) -> None:
        _run("Delete", lambda: tracker.delete_habit(habit.id))

    def _show_view(view: str) -> None:
        tracker.view_state.show_view(view)
        refresh()

    def _step_month(forward: bool) -> None:
        if forward:
            tracker.calendar.next_month()
        else:
            tracker.calendar.previous_month()
        refresh()

    def _open_add(_=None) -> None:
        show_habit_dialog(ctx, page, on_save_callback=refresh)
        refresh()

    def _open_profile(_=None) -> None:
        show_profile_dialog(ctx, page, on_close_callback=refresh)

    def _header() -> ft.Control:
        profile = tracker.profile
        chips: list[ft.Control] = []
        for icon, label in (
            (ft.Icons.MONITOR_WEIGHT, weight_label(profile)),
            (ft.Icons.STRAIGHTEN, height_label(profile)),
        ):
            if label:
                chips.append(ft.Chip(label=ft.Text(label), leading=ft.Icon(icon, size=14)))
        if not profile.name:
            chips.append(ft.TextButton("Set up profile", on_click=_open_profile))

        current = tracker.view_state.view
        toggle = ft.SegmentedButton(
            selected={current},
            segments=[
                ft.Segment(value=VIEW_MONTHLY, label=ft.Text("Monthly"), icon=ft.Icon(ft.Icons.CALENDAR_MONTH)),
                ft.Segment(value=VIEW_DAILY, label=ft.Text("Daily Tasks"), icon=ft.Icon(ft.Icons.CHECKLIST)),
            ],
            on_change=lambda e: _show_view(next(iter(e.control.selected), VIEW_MONTHLY)),
        )
        return ft.Row(
            controls=[
                ft.Row(
                    controls=[
                        ft.Container(
                            content=profile_avatar(profile.photo),
                            width=64,
                            height=64,
                            border_radius=16,
                            alignment=ft.alignment.center,
                            bgcolor=ft.Colors.SURFACE_CONTAINER_HIGHEST,
                            on_click=_open_profile,
                            tooltip="Profile settings",
                        ),
                        ft.Column(
                            controls=[
                                ft.Text(greeting(profile), size=24, weight=ft.FontWeight.BOLD),
                                ft.Row(chips, spacing=8),
                            ],
                            spacing=4,
                        ),
                    ],
                    spacing=16,
                ),
                toggle,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    def _analytics() -> ft.Control:
        weekly, goal = charts.render(tracker.weekly_activity(), tracker.goal_ratio())
        return ft.ResponsiveRow(
            controls=[
                ft.Container(
                    content=build_card("Weekly Activity", ft.Image(src=str(weekly), height=190), ft.Icons.BAR_CHART),
                    col={"md": 8},
                ),
                ft.Container(
                    content=build_card("30-Day Goal", ft.Image(src=str(goal), height=190), ft.Icons.PIE_CHART),
                    col={"md": 4},
                ),
            ]
        )

    def _grid_cell(habit: Habit, day: int) -> ft.Control:
        state = tracker.cell_state(habit.id, day)
        icon = CELL_ICONS[state]
        return ft.Container(
            content=ft.Icon(icon, size=14, color=ft.Colors.WHITE if state is CellState.COMPLETED else None)
            if icon
            else None,
            width=32,
            height=32,
            border_radius=8,
            bgcolor=CELL_COLORS[state],
            border=ft.border.all(1, ft.Colors.OUTLINE_VARIANT),
            alignment=ft.alignment.center,
            on_click=lambda _e, hid=habit.id, key=tracker.calendar.date_key(day): _toggle(hid, key),
        )

    def _monthly() -> ft.Control:
        cal = tracker.calendar
        header_cells: list[ft.Control] = [ft.Container(ft.Text("HABIT", size=11, weight=ft.FontWeight.BOLD), width=160)]
        for day in cal.days():
            header_cells.append(
                ft.Column(
                    controls=[
                        ft.Text(cal.weekday_name(day).upper(), size=9, color=ft.Colors.ON_SURFACE_VARIANT),
                        ft.Text(str(day), size=11, weight=ft.FontWeight.BOLD),
                    ],
                    width=32,
                    spacing=0,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                )
            )
        rows: list[ft.Control] = [ft.Row(header_cells, spacing=4)]
        for habit in tracker.habits:
            rows.append(
                ft.Row(
                    [
                        ft.Container(ft.Text(f"{habit.icon}  {habit.name}", no_wrap=True, weight=ft.FontWeight.BOLD), width=160),
                        *[_grid_cell(habit, day) for day in cal.days()],
                    ],
                    spacing=4,
                )
            )
        if not tracker.habits:
            rows.append(empty_state("No habits tracked yet.", "Create your first habit", _open_add))

        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text(cal.month_label, size=20, weight=ft.FontWeight.BOLD),
                                ft.IconButton(ft.Icons.CHEVRON_LEFT, tooltip="Previous month", on_click=lambda _: _step_month(False)),
                                ft.IconButton(ft.Icons.CHEVRON_RIGHT, tooltip="Next month", on_click=lambda _: _step_month(True)),
                            ]
                        ),
                        ft.FilledButton("New Habit", icon=ft.Icons.ADD, on_click=_open_add),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                ft.Row([ft.Column(rows, spacing=6)], scroll=ft.ScrollMode.AUTO),
            ],
            spacing=16,
        )

    def _daily_row(habit: Habit) -> ft.Control:
        done = tracker.is_completed(habit.id)
        current, longest = tracker.streaks(habit.id)
        return ft.Card(
            content=ft.Container(
                content=ft.Row(
                    controls=[
                        ft.Row(
                            controls=[
                                ft.Text(habit.icon, size=28),
                                ft.Column(
                                    controls=[
                                        ft.Text(habit.name, size=16, weight=ft.FontWeight.BOLD),
                                        ft.Text(
                                            f"Daily Goal · streak {current} (best {longest})",
                                            size=12,
                                            color=ft.Colors.ON_SURFACE_VARIANT,
                                        ),
                                    ],
                                    spacing=2,
                                ),
                            ],
                            spacing=16,
                        ),
                        ft.Row(
                            controls=[
                                ft.IconButton(
                                    icon=ft.Icons.DELETE_OUTLINE,
                                    tooltip="Delete habit",
                                    on_click=lambda _e, h=habit: _delete(h),
                                ),
                                ft.IconButton(
                                    icon=ft.Icons.CHECK_CIRCLE if done else ft.Icons.CHECK_CIRCLE_OUTLINE,
                                    icon_color=ft.Colors.GREEN if done else ft.Colors.ON_SURFACE_VARIANT,
                                    icon_size=36,
                                    tooltip="Mark done today",
                                    on_click=lambda _e, hid=habit.id: _toggle(hid, tracker.today()),
                                ),
                            ]
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                padding=16,
            )
        )

    def _daily() -> ft.Control:
        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text("Daily Tasks", size=20, weight=ft.FontWeight.BOLD),
                        ft.FilledButton("Add Task", icon=ft.Icons.ADD, on_click=_open_add),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                *[_daily_row(habit) for habit in tracker.habits],
            ],
            spacing=12,
        )

    def refresh() -> None:
        main = _monthly() if tracker.view_state.view == VIEW_MONTHLY else _daily()
        body.controls = [_header(), _analytics(), ft.Divider(), main]
        page.update()

    refresh()

    return ft.View(route="/", controls=[body], padding=24)
