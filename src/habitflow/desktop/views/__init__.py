"""Desktop views."""

from .tracker import build_tracker_view

__all__ = ["build_tracker_view"]
