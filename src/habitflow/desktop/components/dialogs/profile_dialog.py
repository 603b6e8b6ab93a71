"""Profile settings dialog with asynchronous photo selection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import flet as ft

from ....devtools import dev_log
from ....logging_config import get_logger
from ....services.photo import PhotoReader

if TYPE_CHECKING:
    from ...context import AppContext

logger = get_logger(__name__)


def build_profile_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_close_callback: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    """Build the profile dialog.

    Text fields write straight through to the tracker. The photo reader lives
    as long as the dialog; closing it cancels any read still in flight.
    """
    tracker = ctx.tracker
    profile = tracker.profile

    preview = ft.Image(src_base64=None, width=96, height=96, fit=ft.ImageFit.COVER, visible=False)
    placeholder = ft.Icon(ft.Icons.PERSON, size=48, color=ft.Colors.ON_SURFACE_VARIANT)

    def _show_photo(uri: str) -> None:
        has_photo = bool(uri)
        preview.src_base64 = uri.split(",", 1)[1] if has_photo else None
        preview.visible = has_photo
        placeholder.visible = not has_photo

    def _photo_loaded(uri: str) -> None:
        tracker.set_profile_photo(uri)
        _show_photo(uri)
        page.update()

    reader = PhotoReader(on_loaded=_photo_loaded)
    ctx.photo_reader = reader
    _show_photo(profile.photo)

    name_field = ft.TextField(label="Display Name", hint_text="Your Name", value=profile.name, width=360)
    weight_field = ft.TextField(
        label="Weight (kg)",
        hint_text="70",
        value=profile.weight,
        keyboard_type=ft.KeyboardType.NUMBER,
        width=170,
    )
    height_field = ft.TextField(
        label="Height (cm)",
        hint_text="175",
        value=profile.height,
        keyboard_type=ft.KeyboardType.NUMBER,
        width=170,
    )

    name_field.on_change = lambda e: tracker.set_profile_name(e.control.value or "")
    weight_field.on_change = lambda e: tracker.set_profile_weight(e.control.value or "")
    height_field.on_change = lambda e: tracker.set_profile_height(e.control.value or "")

    def _on_pick(e: ft.FilePickerResultEvent) -> None:
        selected = e.files[0] if e.files else None
        if not selected or not selected.path:
            dev_log(ctx.config, "Photo picker dismissed")
            return
        dev_log(ctx.config, "Photo selected", context={"path": selected.path})
        page.run_task(reader.read, selected.path)

    def _pick_photo(_) -> None:
        if ctx.file_picker is None:
            page.snack_bar = ft.SnackBar(content=ft.Text("File picker is not available."))
            page.snack_bar.open = True
            page.update()
            return
        ctx.file_picker.on_result = _on_pick
        ctx.file_picker.pick_files(allow_multiple=False, file_type=ft.FilePickerFileType.IMAGE)

    def _close(_) -> None:
        reader.close()
        ctx.photo_reader = None
        if ctx.file_picker is not None:
            ctx.file_picker.on_result = None
        tracker.view_state.close_profile()
        page.close(dialog)
        page.update()
        if on_close_callback:
            on_close_callback()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Profile Settings"),
        content=ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Stack(controls=[placeholder, preview], width=96, height=96),
                        ft.IconButton(icon=ft.Icons.CAMERA_ALT, tooltip="Choose photo", on_click=_pick_photo),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                name_field,
                ft.Row(controls=[weight_field, height_field], spacing=16),
            ],
            tight=True,
            spacing=16,
            width=380,
        ),
        actions=[ft.FilledButton("Save Profile", on_click=_close)],
        on_dismiss=lambda _: reader.close(),
    )
    return dialog


def show_profile_dialog(
    ctx: AppContext,
    page: ft.Page,
    on_close_callback: Optional[Callable[[], None]] = None,
) -> ft.AlertDialog:
    ctx.tracker.view_state.open_profile()
    dialog = build_profile_dialog(ctx, page, on_close_callback)
    page.open(dialog)
    return dialog
