"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..devtools import dev_log
from ..logging_config import setup_logging
from . import controllers
from .context import create_app_context
from .views import build_tracker_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()

    logger = setup_logging(ctx.config)
    logger.info("HabitFlow desktop application starting")

    def on_page_close(_):
        logger.info("Application closing")
        controllers.close_page(ctx)

    page.on_close = on_page_close

    ctx.page = page
    page.title = "Tracker (DEV)" if ctx.dev_mode else "Tracker"
    if ctx.dev_mode:
        dev_log(ctx.config, "Dev mode enabled", context={"data_dir": ctx.config.DATA_DIR})
    page.theme_mode = ft.ThemeMode.LIGHT
    page.padding = 0
    page.window.width = 1280
    page.window.height = 860
    page.window.min_width = 1024
    page.window.min_height = 640

    controllers.attach_file_picker(ctx, page)

    def _on_error(e: ft.ControlEvent):  # pragma: no cover (UI callback)
        msg = getattr(e, "data", None) or "<no-data>"
        logger.error("Flet page error", extra={"event": "error", "data": msg})
        page.snack_bar = ft.SnackBar(content=ft.Text(f"UI error: {msg}"))
        page.snack_bar.open = True
        page.update()

    page.on_error = _on_error

    page.views.clear()
    page.views.append(build_tracker_view(ctx, page))
    page.update()


def run() -> None:
    """Console-script entry point."""

    ft.app(target=main)


if __name__ == "__main__":
    run()
