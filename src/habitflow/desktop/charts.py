"""Chart helpers for Flet views."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from habitflow.services.analytics import ActivityPoint, GoalRatio

BAR_COLOR = "#3b82f6"
TRACK_COLOR = "#f1f5f9"
LABEL_COLOR = "#94a3b8"


def _save(fig, directory: Path | None) -> Path:
    if directory is not None:
        directory.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(delete=False, suffix=".png", dir=directory) as tmp:
        fig.savefig(tmp.name, bbox_inches="tight", dpi=100, transparent=True)
        path = Path(tmp.name)
    plt.close(fig)
    return path


def weekly_activity_png(points: Sequence[ActivityPoint], directory: Path | None = None) -> Path:
    """Render the seven-day completion bars and return the PNG path."""

    fig, ax = plt.subplots(figsize=(7, 2.6))
    labels = [p.label for p in points]
    counts = [p.completed_count for p in points]
    ax.bar(range(len(points)), counts, color=BAR_COLOR, width=0.45)
    ax.set_xticks(range(len(points)))
    ax.set_xticklabels(labels, color=LABEL_COLOR, fontsize=10)
    ax.yaxis.set_visible(False)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.tick_params(axis="x", length=0)
    if not any(counts):
        ax.set_ylim(0, 1)
    return _save(fig, directory)


def goal_donut_png(ratio: GoalRatio, directory: Path | None = None) -> Path:
    """Render the completed/remaining donut with the percentage in the middle."""

    fig, ax = plt.subplots(figsize=(2.6, 2.6))
    values = [ratio.completed_share, ratio.remaining_share]
    if not any(values):
        # An all-zero pie cannot be drawn; show the empty track instead.
        values = [0, 1]
    ax.pie(
        values,
        colors=[BAR_COLOR, TRACK_COLOR],
        startangle=90,
        counterclock=False,
        wedgeprops={"width": 0.25, "edgecolor": "white"},
    )
    ax.text(0, 0.08, f"{ratio.percentage}%", ha="center", va="center", fontsize=18, fontweight="bold", color="#1e293b")
    ax.text(0, -0.22, "DONE", ha="center", va="center", fontsize=8, color=LABEL_COLOR)
    ax.set_aspect("equal")
    return _save(fig, directory)


class ChartFiles:
    """Tracks the PNGs currently on screen and removes each set once it is replaced."""

    def __init__(self, directory: Path | None = None):
        self.directory = directory
        self.current: list[Path] = []

    def render(self, points: Sequence[ActivityPoint], ratio: GoalRatio) -> tuple[Path, Path]:
        weekly = weekly_activity_png(points, self.directory)
        donut = goal_donut_png(ratio, self.directory)
        self.discard()
        self.current = [weekly, donut]
        return weekly, donut

    def discard(self) -> None:
        for path in self.current:
            path.unlink(missing_ok=True)
        self.current = []


__all__ = ["ChartFiles", "goal_donut_png", "weekly_activity_png"]
