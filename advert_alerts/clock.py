from __future__ import annotations

from datetime import date
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date: ...


class SystemClock:
    """Reads the current local date from the system clock."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Always reports the same date. Used for back-dated manual runs."""

    def __init__(self, day: date):
        self.day = day

    def today(self) -> date:
        return self.day
