"""
Unit tests for group scoring.

Rules:
- day off respected: +100, violated: -50
- shift preference satisfied: +50 (no penalty otherwise)
- always: -2 per course in the group
"""

import unittest

from termplanner.model import (
    Category,
    Course,
    Instructor,
    Session,
    ShiftPreference,
    StudentPreferences,
    Weekday,
)
from termplanner.scoring import pick_best_group, score_group


def _course(code: str, group: str, *timeslots: str) -> Course:
    return Course(
        id=code.lower(),
        code=code,
        name=code,
        instructors=(Instructor("x", "X"),),
        category=Category.SPECIALIZED,
        sessions=tuple(Session(ts, "Room 1") for ts in timeslots),
        group=group,
    )


class TestScoreGroup(unittest.TestCase):
    def test_load_penalty_only_without_preferences(self) -> None:
        courses = [_course("A", "G1", "Monday 08:00-10:00"), _course("B", "G1", "Monday 10:00-12:00")]
        scored = score_group("G1", courses, StudentPreferences())
        self.assertEqual(scored.score, -4)
        self.assertEqual(len(scored.rationale), 1)

    def test_day_off_respected(self) -> None:
        prefs = StudentPreferences(day_off=Weekday.WEDNESDAY)
        scored = score_group("G1", [_course("A", "G1", "Monday 08:00-10:00")], prefs)
        self.assertEqual(scored.score, 100 - 2)
        self.assertIn("Wednesday", scored.rationale[0])

    def test_day_off_violated(self) -> None:
        prefs = StudentPreferences(day_off=Weekday.WEDNESDAY)
        scored = score_group("G1", [_course("A", "G1", "Wednesday 08:00-10:00")], prefs)
        self.assertEqual(scored.score, -50 - 2)
        self.assertIn("Wednesday", scored.rationale[0])

    def test_day_off_beats_otherwise_identical_group(self) -> None:
        prefs = StudentPreferences(day_off=Weekday.SUNDAY)
        free = score_group("G1", [_course("A", "G1", "Monday 08:00-10:00")], prefs)
        busy = score_group("G2", [_course("B", "G2", "Sunday 08:00-10:00")], prefs)
        self.assertGreater(free.score, busy.score)

    def test_more_morning(self) -> None:
        prefs = StudentPreferences(shift=ShiftPreference.MORE_MORNING)
        courses = [_course("A", "G1", "Monday 08:00-10:00", "Monday 13:00-15:00")]
        # 1 morning vs 1 afternoon: ties count as satisfied
        self.assertEqual(score_group("G1", courses, prefs).score, 50 - 2)

    def test_more_afternoon_not_satisfied_has_no_penalty(self) -> None:
        prefs = StudentPreferences(shift=ShiftPreference.MORE_AFTERNOON)
        courses = [_course("A", "G1", "Monday 08:00-10:00", "Tuesday 08:00-10:00")]
        scored = score_group("G1", courses, prefs)
        self.assertEqual(scored.score, -2)
        self.assertEqual(len(scored.rationale), 1)

    def test_no_morning(self) -> None:
        prefs = StudentPreferences(shift=ShiftPreference.NO_MORNING)
        ok = score_group("G1", [_course("A", "G1", "Monday 13:00-15:00")], prefs)
        bad = score_group("G2", [_course("B", "G2", "Monday 10:00-12:00")], prefs)
        self.assertEqual(ok.score, 48)
        self.assertEqual(bad.score, -2)

    def test_no_afternoon_counts_unparseable_as_afternoon(self) -> None:
        prefs = StudentPreferences(shift=ShiftPreference.NO_AFTERNOON)
        ok = score_group("G1", [_course("A", "G1", "Monday 08:00-12:00")], prefs)
        bad = score_group("G2", [_course("B", "G2", "Monday 08:00-12:00", "TBA")], prefs)
        self.assertEqual(ok.score, 48)
        self.assertEqual(bad.score, -2)


class TestPickBestGroup(unittest.TestCase):
    def test_no_groups_returns_none(self) -> None:
        self.assertIsNone(pick_best_group({}, StudentPreferences()))

    def test_tie_goes_to_first_group(self) -> None:
        groups = {
            "G1": [_course("A", "G1", "Saturday 10:00-12:00")],
            "G2": [_course("B", "G2", "Saturday 10:00-12:00")],
        }
        best = pick_best_group(groups, StudentPreferences())
        assert best is not None
        self.assertEqual(best.name, "G1")

    def test_lighter_group_wins(self) -> None:
        groups = {
            "G1": [_course("A", "G1", "Saturday 10:00-12:00"), _course("B", "G1", "Sunday 10:00-12:00")],
            "G2": [_course("C", "G2", "Saturday 10:00-12:00")],
        }
        best = pick_best_group(groups, StudentPreferences())
        assert best is not None
        self.assertEqual(best.name, "G2")
        self.assertEqual(best.score, -2)


if __name__ == "__main__":
    unittest.main()
