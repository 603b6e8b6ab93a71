"""Month cursor for the monthly completion grid."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .analytics import weekday_label

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class CellState(str, Enum):
    COMPLETED = "completed"
    MISSED = "missed"
    OPEN = "open"


@dataclass
class CalendarNavigator:
    """Tracks the displayed (year, month), independent of today's date."""

    year: int
    month: int

    @classmethod
    def for_today(cls, today: date | None = None) -> "CalendarNavigator":
        today = today or date.today()
        return cls(year=today.year, month=today.month)

    def previous_month(self) -> None:
        self._shift(-1)

    def next_month(self) -> None:
        self._shift(1)

    def _shift(self, months: int) -> None:
        index = self.year * 12 + (self.month - 1) + months
        self.year, month_index = divmod(index, 12)
        self.month = month_index + 1

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def month_label(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def days(self) -> range:
        return range(1, self.days_in_month + 1)

    def date_for(self, day: int) -> date:
        return date(self.year, self.month, day)

    def date_key(self, day: int) -> str:
        return self.date_for(day).isoformat()

    def weekday_name(self, day: int) -> str:
        return weekday_label(self.date_for(day))

    def is_past_date(self, day: int, *, today: date | None = None) -> bool:
        """True when the day falls strictly before today's local calendar date."""

        return self.date_for(day) < (today or date.today())

    def cell_state(self, completed: bool, day: int, *, today: date | None = None) -> CellState:
        if completed:
            return CellState.COMPLETED
        if self.is_past_date(day, today=today):
            return CellState.MISSED
        return CellState.OPEN


__all__ = ["CalendarNavigator", "CellState", "MONTH_NAMES"]
