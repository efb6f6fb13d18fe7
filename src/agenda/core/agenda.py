"""Ordered event collection and conflict checks - no I/O dependencies."""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from .event import Event

logger = logging.getLogger(__name__)


@dataclass
class TimeSlot:
    """A half-open [start, end) interval."""

    start: datetime
    end: datetime

    @classmethod
    def of(cls, event: Event) -> "TimeSlot":
        return cls(start=event.start, end=event.end)

    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() / 60)

    def format(self) -> str:
        return f"{self.start.strftime('%Y-%m-%d %H:%M')}-{self.end.strftime('%H:%M')} ({self.duration_minutes()} min)"

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check if this slot overlaps with another. Touching slots do not."""
        return self.start < other.end and other.start < self.end


class Agenda:
    """Events in insertion order, queried by linear scan."""

    def __init__(self, events: list[Event] | None = None):
        self._events: list[Event] = list(events or [])

    def add_event(self, event: Event) -> None:
        self._events.append(event)

    @property
    def all_events(self) -> list[Event]:
        return list(self._events)

    def events_in_day(self, day: date) -> list[Event]:
        """Events present on `day`, in insertion order."""
        return [e for e in self._events if e.is_in_day(day)]

    def find_by_title(self, title: str) -> list[Event]:
        """Events whose title matches exactly."""
        return [e for e in self._events if e.title == title]

    def conflicts_with(self, candidate: Event) -> list[Event]:
        """
        Stored events whose first slot overlaps the candidate's.

        Only each event's own [start, start + duration) is compared;
        later occurrences of recurring events are not expanded.
        """
        slot = TimeSlot.of(candidate)
        conflicts = [e for e in self._events if TimeSlot.of(e).overlaps(slot)]
        if conflicts:
            logger.debug(f"{candidate.title!r} conflicts with {len(conflicts)} event(s)")
        return conflicts

    def is_free_for(self, candidate: Event) -> bool:
        """True if no stored event overlaps the candidate."""
        return not self.conflicts_with(candidate)

    def __len__(self) -> int:
        return len(self._events)
