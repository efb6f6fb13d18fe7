"""Calendar events and the day-membership test - no I/O dependencies."""

import logging
from datetime import date, datetime, timedelta

from .frequency import Frequency
from .repetition import Repetition
from .termination import Termination

logger = logging.getLogger(__name__)


class InvalidEventError(ValueError):
    """Raised when an event is built from missing or impossible values."""


def _as_date(day: date) -> date:
    # datetime is a date subclass but does not compare with plain dates
    return day.date() if isinstance(day, datetime) else day


class Event:
    """
    A titled block of time, optionally repeating.

    Title, start and duration are fixed at construction. A repetition can be
    attached afterwards; exceptions and termination only take effect once it
    exists, and are silently ignored before that.
    """

    def __init__(self, title: str, start: datetime, duration: timedelta):
        if title is None:
            raise InvalidEventError("Event title is required")
        if start is None:
            raise InvalidEventError("Event start is required")
        if duration is None:
            raise InvalidEventError("Event duration is required")
        if duration < timedelta(0):
            raise InvalidEventError(f"Event duration cannot be negative: {duration}")
        try:
            start + duration
        except OverflowError:
            raise InvalidEventError(f"Event end is out of range: {start} + {duration}") from None
        self._title = title
        self._start = start
        self._duration = duration
        self._repetition: Repetition | None = None

    @property
    def title(self) -> str:
        return self._title

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def end(self) -> datetime:
        return self._start + self._duration

    @property
    def repetition(self) -> Repetition | None:
        return self._repetition

    @property
    def is_recurring(self) -> bool:
        return self._repetition is not None

    def set_repetition(self, frequency: Frequency | str) -> None:
        """Make the event repeat. Calling again replaces the whole rule."""
        if isinstance(frequency, str) and not isinstance(frequency, Frequency):
            frequency = Frequency.parse(frequency)
        self._repetition = Repetition(frequency)

    def add_exception(self, day: date) -> None:
        """Skip one occurrence. No-op for a non-recurring event."""
        if self._repetition is None:
            logger.debug(f"Ignoring exception {day} for non-recurring event {self._title!r}")
            return
        self._repetition.add_exception(_as_date(day))

    def set_termination(self, bound: date | int) -> None:
        """
        Bound the repetition by an inclusive end date or an occurrence count.

        No-op for a non-recurring event. Replaces any earlier termination.
        """
        if self._repetition is None:
            logger.debug(f"Ignoring termination {bound} for non-recurring event {self._title!r}")
            return

        start_day = self._start.date()
        frequency = self._repetition.frequency
        if isinstance(bound, date):
            termination = Termination.until(start_day, frequency, _as_date(bound))
        elif isinstance(bound, int) and not isinstance(bound, bool):
            termination = Termination.after(start_day, frequency, bound)
        else:
            raise TypeError(f"Termination must be a date or a count, got {type(bound).__name__}")
        self._repetition.set_termination(termination)

    @property
    def number_of_occurrences(self) -> int:
        """Occurrence count, or 0 when the event is unbounded."""
        if self._repetition is None or self._repetition.termination is None:
            return 0
        return self._repetition.termination.number_of_occurrences

    @property
    def termination_date(self) -> date | None:
        """Last allowed date, or None when the event is unbounded."""
        if self._repetition is None or self._repetition.termination is None:
            return None
        return self._repetition.termination.termination_date_inclusive

    def is_in_day(self, day: date) -> bool:
        """
        Check whether the event is present on a calendar date.

        A one-off event covers every date from its start to its end,
        both boundary dates included. A recurring event is present on a date
        that is on/after the start, within the termination bound, not an
        exception, and reachable from the start date in whole frequency
        steps.
        """
        day = _as_date(day)
        start_day = self._start.date()

        if self._repetition is None:
            return start_day <= day <= self.end.date()

        if day < start_day:
            return False

        termination = self._repetition.termination
        if termination is not None and not termination.includes(day):
            return False

        if self._repetition.is_excluded(day):
            return False

        frequency = self._repetition.frequency
        diff = frequency.steps_between(start_day, day)
        if diff < 0:
            return False

        # Month/year steps clamp at month end, so rebuild the date to confirm.
        return frequency.advance(start_day, diff) == day

    def occurrences_between(self, first: date, last: date) -> list[date]:
        """Dates in [first, last] on which the event is present, ascending."""
        first, last = _as_date(first), _as_date(last)
        days = []
        current = first
        while current <= last:
            if self.is_in_day(current):
                days.append(current)
            current += timedelta(days=1)
        return days

    def __repr__(self) -> str:
        return f"Event(title={self._title!r}, start={self._start.isoformat()}, duration={self._duration})"
