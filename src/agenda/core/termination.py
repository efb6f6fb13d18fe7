"""Bounds on a recurring event - by occurrence count or by inclusive end date."""

from dataclasses import dataclass
from datetime import date

from .frequency import Frequency


@dataclass(frozen=True)
class Termination:
    """
    The last occurrence of a recurring event.

    Both representations are always populated: whichever one the caller
    supplies, the other is derived from `start` and `frequency`, which are
    copied from the owning event when the termination is built.

    Use `Termination.after` (count) or `Termination.until` (end date)
    rather than the constructor.
    """

    start: date
    frequency: Frequency
    termination_date_inclusive: date
    number_of_occurrences: int

    @classmethod
    def after(cls, start: date, frequency: Frequency, number_of_occurrences: int) -> "Termination":
        """
        Terminate after N occurrences.

        A count of zero or less is not rejected; the bound collapses to the
        start date.
        """
        if number_of_occurrences <= 0:
            end = start
        else:
            end = frequency.advance(start, number_of_occurrences - 1)
        return cls(
            start=start,
            frequency=frequency,
            termination_date_inclusive=end,
            number_of_occurrences=number_of_occurrences,
        )

    @classmethod
    def until(cls, start: date, frequency: Frequency, termination_inclusive: date) -> "Termination":
        """
        Terminate on (or before) a date.

        Counts by stepping a cursor forward one unit at a time from `start`
        until it passes the bound. Month and year steps chain from the
        previous cursor, so a month-end start drifts (01-31, 02-28, 03-28).
        """
        if termination_inclusive < start:
            count = 0
        elif frequency in (Frequency.DAILY, Frequency.WEEKLY):
            # Fixed-length steps never drift
            count = frequency.steps_between(start, termination_inclusive) + 1
        else:
            count = 0
            cursor = start
            while cursor <= termination_inclusive:
                count += 1
                try:
                    cursor = frequency.advance(cursor, 1)
                except (OverflowError, ValueError):
                    # Stepped past date.max
                    break
        return cls(
            start=start,
            frequency=frequency,
            termination_date_inclusive=termination_inclusive,
            number_of_occurrences=count,
        )

    def includes(self, day: date) -> bool:
        """Whether `day` falls on or before the last allowed date."""
        return day <= self.termination_date_inclusive
