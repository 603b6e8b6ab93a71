"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional

import flet as ft


def build_card(title: str, content: ft.Control, icon: Optional[str] = None) -> ft.Card:
    """Card with an uppercase caption row above ``content``."""

    caption: list[ft.Control] = []
    if icon:
        caption.append(ft.Icon(icon, size=16, color=ft.Colors.PRIMARY))
    caption.append(
        ft.Text(title.upper(), size=12, weight=ft.FontWeight.BOLD, color=ft.Colors.ON_SURFACE_VARIANT)
    )
    return ft.Card(
        content=ft.Container(
            content=ft.Column([ft.Row(caption, spacing=6), content], spacing=12),
            padding=20,
        ),
        elevation=1,
    )


def empty_state(message: str, action_label: str, on_action) -> ft.Container:
    """Centered placeholder shown when no habits exist yet."""

    return ft.Container(
        content=ft.Column(
            controls=[
                ft.Icon(ft.Icons.CALENDAR_MONTH, size=48, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, weight=ft.FontWeight.BOLD, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.TextButton(action_label, on_click=on_action),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=8,
        ),
        padding=48,
        alignment=ft.alignment.center,
    )


def profile_avatar(photo: str, size: int = 56) -> ft.Control:
    """Photo thumbnail from a data URI, or a person icon when no photo is set."""

    if photo and "," in photo:
        return ft.Image(
            src_base64=photo.split(",", 1)[1],
            width=size,
            height=size,
            fit=ft.ImageFit.COVER,
            border_radius=12,
        )
    return ft.Icon(ft.Icons.PERSON, size=size * 0.6, color=ft.Colors.ON_SURFACE_VARIANT)
