"""Controller helpers for page-level wiring."""

from __future__ import annotations

from typing import TYPE_CHECKING

import flet as ft

from ..devtools import dev_log

if TYPE_CHECKING:
    from .context import AppContext


def attach_file_picker(ctx: AppContext, page: ft.Page) -> ft.FilePicker:
    """Create the shared file picker; dialogs install their own result handler."""

    picker = ft.FilePicker()
    ctx.file_picker = picker
    if page.overlay is None:
        page.overlay = [picker]
    else:
        page.overlay.append(picker)
    page.update()
    dev_log(ctx.config, "File picker attached")
    return picker


def close_page(ctx: AppContext) -> None:
    """Cancel any pending photo read and remove chart images when the window goes away."""

    if ctx.photo_reader is not None:
        ctx.photo_reader.close()
        ctx.photo_reader = None
    if ctx.charts is not None:
        ctx.charts.discard()


__all__ = ["attach_file_picker", "close_page"]
