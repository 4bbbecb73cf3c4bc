"""
Unit tests for timeslot parsing.

Format: '<Weekday> HH:MM-HH:MM'. Anything else parses to None.
"""

import unittest

from termplanner.model import Weekday
from termplanner.timeslots import is_morning, parse_timeslot, slot_weekday


class TestParseTimeslot(unittest.TestCase):
    def test_normal_slot(self) -> None:
        parsed = parse_timeslot("Monday 10:15-12:00")
        self.assertIsNotNone(parsed)
        assert parsed is not None

        self.assertIs(parsed.day, Weekday.MONDAY)
        self.assertEqual(parsed.start, 615)
        self.assertEqual(parsed.end, 720)

    def test_extra_whitespace_is_accepted(self) -> None:
        parsed = parse_timeslot("  Saturday   08:00-10:00 ")
        self.assertIsNotNone(parsed)
        assert parsed is not None
        self.assertIs(parsed.day, Weekday.SATURDAY)
        self.assertEqual(parsed.start, 480)

    def test_wrong_token_count_returns_none(self) -> None:
        self.assertIsNone(parse_timeslot("Monday"))
        self.assertIsNone(parse_timeslot("Monday 10:00 - 12:00"))
        self.assertIsNone(parse_timeslot(""))

    def test_missing_dash_returns_none(self) -> None:
        self.assertIsNone(parse_timeslot("Monday 10:00"))

    def test_non_numeric_time_returns_none(self) -> None:
        self.assertIsNone(parse_timeslot("Monday 10:xx-12:00"))
        self.assertIsNone(parse_timeslot("Monday 1000-1200"))

    def test_loose_integer_syntax_returns_none(self) -> None:
        self.assertIsNone(parse_timeslot("Monday 1_0:00-12:00"))
        self.assertIsNone(parse_timeslot("Monday +9:00-12:00"))
        self.assertIsNone(parse_timeslot("Monday \u0660\u0669:00-12:00"))
        self.assertIsNone(parse_timeslot("Monday 10:0-12:00"))

    def test_out_of_range_time_returns_none(self) -> None:
        self.assertIsNone(parse_timeslot("Monday 99:99-100:00"))
        self.assertIsNone(parse_timeslot("Monday 24:00-25:00"))
        self.assertIsNone(parse_timeslot("Monday 10:60-12:00"))

    def test_single_digit_hour_is_accepted(self) -> None:
        parsed = parse_timeslot("Monday 8:00-9:30")
        self.assertIsNotNone(parsed)
        assert parsed is not None
        self.assertEqual((parsed.start, parsed.end), (480, 570))

    def test_unknown_day_returns_none(self) -> None:
        # Friday is not part of the academic week
        self.assertIsNone(parse_timeslot("Friday 10:00-12:00"))

    def test_slot_weekday_ignores_time_part(self) -> None:
        self.assertIs(slot_weekday("Wednesday 10-12"), Weekday.WEDNESDAY)
        self.assertIsNone(slot_weekday("Someday 10:00-12:00"))
        self.assertIsNone(slot_weekday(""))

    def test_is_morning(self) -> None:
        self.assertTrue(is_morning("Sunday 10:00-12:00"))
        self.assertFalse(is_morning("Sunday 11:00-12:30"))
        self.assertFalse(is_morning("garbage"))


if __name__ == "__main__":
    unittest.main()
