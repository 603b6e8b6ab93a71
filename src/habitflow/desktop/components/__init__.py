"""Reusable UI components for the desktop app."""

from .widgets import build_card, empty_state, profile_avatar

__all__ = ["build_card", "empty_state", "profile_avatar"]
