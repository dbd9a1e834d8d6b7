"""
Clock collaborators - supply "today" as a DayOfWeek.
"""
from datetime import datetime
from typing import Protocol

from .models import DayOfWeek


class Clock(Protocol):
    def today(self) -> DayOfWeek:
        ...


class SystemClock:
    """Reads the local weekday from the host clock."""

    def today(self) -> DayOfWeek:
        return DayOfWeek.from_weekday(datetime.now().weekday())


class FixedClock:
    """Always answers the same day. Handy for tests and explicit quotes."""

    def __init__(self, day: DayOfWeek):
        self.day = DayOfWeek(day)

    def today(self) -> DayOfWeek:
        return self.day
