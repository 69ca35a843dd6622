"""
Working-day date arithmetic for plans.

A working day is Monday..Friday and not listed in the configured holidays.
Plans only run on working days, so a plan of N days ends on its N-th working
day.
"""

from collections.abc import Iterable
from datetime import date, timedelta

_ONE_DAY = timedelta(days=1)


class WorkingDayCalculator:
    """Pure date calculator; holds nothing but the holiday set."""

    def __init__(self, holidays: Iterable[date] = ()):
        self.holidays = frozenset(holidays)

    def is_working_day(self, day: date) -> bool:
        return day.weekday() < 5 and day not in self.holidays

    def first_working_day(self, day: date) -> date:
        """Return `day` if it is a working day, otherwise the next working day."""
        while not self.is_working_day(day):
            day += _ONE_DAY
        return day

    def calculate_end_date(self, start_date: date, total_days: int, meals_per_day: int) -> date:
        """
        Return the last day of a plan.

        Counting starts at the first working day on/after `start_date`, which
        counts as day one. Every working day carries the full `meals_per_day`,
        so the meal count does not stretch the span.
        """
        if total_days <= 0:
            raise ValueError(f"total_days must be positive, got {total_days}")
        if meals_per_day <= 0:
            raise ValueError(f"meals_per_day must be positive, got {meals_per_day}")

        current = self.first_working_day(start_date)
        remaining = total_days - 1
        while remaining > 0:
            current = self.first_working_day(current + _ONE_DAY)
            remaining -= 1
        return current
