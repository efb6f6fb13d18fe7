"""Agenda - recurring calendar events with exceptions and bounded termination."""

__version__ = "0.1.0"
