"""Tests for calendar step arithmetic."""

from datetime import date

import pytest

from agenda.core.frequency import Frequency


class TestParse:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("days", Frequency.DAILY),
            ("day", Frequency.DAILY),
            ("WEEKLY", Frequency.WEEKLY),
            (" month ", Frequency.MONTHLY),
            ("Yearly", Frequency.YEARLY),
            ("years", Frequency.YEARLY),
        ],
    )
    def test_accepts_value_name_and_singular(self, text, expected):
        assert Frequency.parse(text) is expected

    def test_rejects_unknown(self):
        with pytest.raises(ValueError, match="fortnightly"):
            Frequency.parse("fortnightly")


class TestAdvance:
    def test_daily_and_weekly(self):
        start = date(2025, 1, 15)
        assert Frequency.DAILY.advance(start, 20) == date(2025, 2, 4)
        assert Frequency.WEEKLY.advance(start, 2) == date(2025, 1, 29)
        assert Frequency.DAILY.advance(start, -15) == date(2024, 12, 31)

    def test_month_end_clamps_to_february(self):
        assert Frequency.MONTHLY.advance(date(2025, 1, 31), 1) == date(2025, 2, 28)
        assert Frequency.MONTHLY.advance(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_month_end_does_not_drift(self):
        # Each step is measured from the start, not from the previous step
        assert Frequency.MONTHLY.advance(date(2025, 1, 31), 2) == date(2025, 3, 31)
        assert Frequency.MONTHLY.advance(date(2025, 1, 31), 3) == date(2025, 4, 30)

    def test_leap_day_yearly(self):
        leap_day = date(2024, 2, 29)
        assert Frequency.YEARLY.advance(leap_day, 1) == date(2025, 2, 28)
        assert Frequency.YEARLY.advance(leap_day, 4) == date(2028, 2, 29)


class TestStepsBetween:
    def test_days(self):
        assert Frequency.DAILY.steps_between(date(2025, 1, 1), date(2025, 1, 5)) == 4
        assert Frequency.DAILY.steps_between(date(2025, 1, 5), date(2025, 1, 1)) == -4

    @pytest.mark.parametrize(
        "end,expected",
        [
            (date(2025, 1, 21), 0),
            (date(2025, 1, 22), 1),
            (date(2025, 1, 28), 1),
            (date(2025, 1, 9), 0),
            (date(2025, 1, 8), -1),
        ],
    )
    def test_weeks_truncate_toward_zero(self, end, expected):
        assert Frequency.WEEKLY.steps_between(date(2025, 1, 15), end) == expected

    @pytest.mark.parametrize(
        "end,expected",
        [
            (date(2025, 1, 31), 0),
            (date(2025, 2, 27), 0),
            (date(2025, 2, 28), 1),
            (date(2025, 3, 1), 1),
            (date(2025, 3, 30), 1),
            (date(2025, 3, 31), 2),
        ],
    )
    def test_months_from_month_end(self, end, expected):
        assert Frequency.MONTHLY.steps_between(date(2025, 1, 31), end) == expected

    def test_months_backwards(self):
        start = date(2025, 3, 15)
        assert Frequency.MONTHLY.steps_between(start, date(2025, 2, 20)) == 0
        assert Frequency.MONTHLY.steps_between(start, date(2025, 2, 15)) == -1

    @pytest.mark.parametrize(
        "end,expected",
        [
            (date(2025, 2, 27), 0),
            (date(2025, 2, 28), 1),
            (date(2025, 3, 1), 1),
            (date(2028, 2, 28), 3),
            (date(2028, 2, 29), 4),
        ],
    )
    def test_years_from_leap_day(self, end, expected):
        assert Frequency.YEARLY.steps_between(date(2024, 2, 29), end) == expected
