"""Profile record with field-level replace."""

from __future__ import annotations

from ..models.profile import UserProfile


class ProfileStore:
    """Holds the single :class:`UserProfile`; setters replace one field, unvalidated."""

    def __init__(self, profile: UserProfile | None = None):
        self._profile = profile.model_copy() if profile else UserProfile()

    @property
    def profile(self) -> UserProfile:
        return self._profile.model_copy()

    def _replace(self, **changes: str) -> None:
        self._profile = self._profile.model_copy(update=changes)

    def set_name(self, name: str) -> None:
        self._replace(name=name)

    def set_photo(self, photo: str) -> None:
        self._replace(photo=photo)

    def set_weight(self, weight: str) -> None:
        self._replace(weight=weight)

    def set_height(self, height: str) -> None:
        self._replace(height=height)


def greeting(profile: UserProfile) -> str:
    return f"Welcome, {profile.name}" if profile.name else "My Progress"


def weight_label(profile: UserProfile) -> str | None:
    return f"{profile.weight}kg" if profile.weight else None


def height_label(profile: UserProfile) -> str | None:
    return f"{profile.height}cm" if profile.height else None


__all__ = ["ProfileStore", "greeting", "height_label", "weight_label"]
