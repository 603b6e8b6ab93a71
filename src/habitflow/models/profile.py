"""Singleton user profile record."""

from __future__ import annotations

from sqlmodel import SQLModel


class UserProfile(SQLModel):
    """Display name, photo data URI and free-text body measurements."""

    name: str = ""
    photo: str = ""
    weight: str = ""
    height: str = ""
