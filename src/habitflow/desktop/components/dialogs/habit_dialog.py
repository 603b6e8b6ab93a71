"""New-habit dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import flet as ft

from ....logging_config import get_logger

if TYPE_CHECKING:
    from ...context import AppContext

logger = get_logger(__name__)


def build_habit_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_save_callback: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    """Build the add-habit dialog bound to the tracker's pending input.

    Submitting a blank name leaves the dialog open and changes nothing.
    """
    tracker = ctx.tracker
    state = tracker.view_state

    name_field = ft.TextField(
        label="Habit Name",
        value=state.pending_habit_name,
        hint_text="e.g. Morning Yoga",
        autofocus=True,
        width=400,
    )

    def _on_change(e: ft.ControlEvent) -> None:
        state.pending_habit_name = e.control.value or ""

    def _submit(_) -> None:
        state.pending_habit_name = name_field.value or ""
        try:
            habit = tracker.submit_pending_habit()
        except Exception as exc:
            logger.error("Failed to save habit", exc_info=True)
            page.snack_bar = ft.SnackBar(
                content=ft.Text(f"Failed to save: {exc}"),
                bgcolor=ft.Colors.ERROR,
            )
            page.snack_bar.open = True
            page.update()
            return
        if habit is None:
            return
        page.close(dialog)
        page.snack_bar = ft.SnackBar(content=ft.Text(f"Tracking '{habit.name}'"))
        page.snack_bar.open = True
        page.update()
        if on_save_callback:
            on_save_callback()

    def _dismiss(_) -> None:
        state.close_add_habit()
        page.close(dialog)
        page.update()

    name_field.on_change = _on_change
    name_field.on_submit = _submit

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("New Habit"),
        content=ft.Column(controls=[name_field], tight=True, width=420),
        actions=[
            ft.TextButton("Cancel", on_click=_dismiss),
            ft.FilledButton("Start Tracking", on_click=_submit),
        ],
    )
    return dialog


def show_habit_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_save_callback: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    """Open the add-habit dialog and switch the tracker into adding mode."""

    ctx.tracker.view_state.open_add_habit()
    dialog = build_habit_dialog(ctx, page, on_save_callback)
    page.open(dialog)
    return dialog
