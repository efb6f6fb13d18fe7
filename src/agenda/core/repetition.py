"""Repetition rule attached to an event."""

from dataclasses import dataclass, field
from datetime import date

from .frequency import Frequency
from .termination import Termination


@dataclass
class Repetition:
    """A frequency, the dates it skips, and an optional bound."""

    frequency: Frequency
    exceptions: set[date] = field(default_factory=set)
    termination: Termination | None = None

    def add_exception(self, day: date) -> None:
        """Skip `day`. Adding the same date twice is harmless."""
        self.exceptions.add(day)

    def set_termination(self, termination: Termination) -> None:
        """Replace any previous bound."""
        self.termination = termination

    def is_excluded(self, day: date) -> bool:
        return day in self.exceptions
