"""Functional core - pure scheduling logic with no I/O."""

from .frequency import Frequency
from .termination import Termination
from .repetition import Repetition
from .event import Event, InvalidEventError
from .agenda import Agenda, TimeSlot

__all__ = [
    # Recurrence
    "Frequency",
    "Termination",
    "Repetition",
    # Events
    "Event",
    "InvalidEventError",
    # Collection
    "Agenda",
    "TimeSlot",
]
