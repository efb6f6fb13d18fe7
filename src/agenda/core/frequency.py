"""Calendar step units - the only place month/year arithmetic lives."""

from datetime import date, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta


class Frequency(str, Enum):
    """Fixed spacing between two successive occurrences."""

    DAILY = "days"
    WEEKLY = "weeks"
    MONTHLY = "months"
    YEARLY = "years"

    @classmethod
    def parse(cls, text: str) -> "Frequency":
        """Parse 'weekly', 'WEEKS', 'week' etc. into a Frequency."""
        key = text.strip().lower()
        for freq in cls:
            if key in (freq.value, freq.value[:-1], freq.name.lower()):
                return freq
        raise ValueError(f"Unknown frequency: {text!r}")

    def _delta(self, steps: int) -> timedelta | relativedelta:
        match self:
            case Frequency.DAILY:
                return timedelta(days=steps)
            case Frequency.WEEKLY:
                return timedelta(weeks=steps)
            case Frequency.MONTHLY:
                return relativedelta(months=steps)
            case Frequency.YEARLY:
                return relativedelta(years=steps)

    def advance(self, start: date, steps: int) -> date:
        """
        Move `start` forward (or back) by `steps` units.

        Months and years clamp to the last valid day of the target month,
        so 2025-01-31 + 1 month is 2025-02-28 and 2024-02-29 + 1 year is
        2025-02-28.
        """
        return start + self._delta(steps)

    def steps_between(self, start: date, end: date) -> int:
        """
        Number of whole steps from `start` to `end`, truncated toward zero.

        For end >= start this is the largest k with advance(start, k) <= end,
        so advance(start, steps_between(start, d)) == d exactly when d is
        reachable from start.
        """
        match self:
            case Frequency.DAILY:
                return (end - start).days
            case Frequency.WEEKLY:
                days = (end - start).days
                return days // 7 if days >= 0 else -(-days // 7)
            case Frequency.MONTHLY:
                estimate = (end.year - start.year) * 12 + (end.month - start.month)
            case Frequency.YEARLY:
                estimate = end.year - start.year

        # The estimate ignores day-of-month, so it is off by at most one.
        if end >= start:
            if estimate > 0 and self.advance(start, estimate) > end:
                estimate -= 1
        elif estimate < 0 and self.advance(start, estimate) < end:
            estimate += 1
        return estimate
