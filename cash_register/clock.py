"""Time sources for the register."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single date."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed

    def __repr__(self) -> str:
        return f"FixedClock({self.fixed.isoformat()})"
