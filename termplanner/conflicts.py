"""
Conflict detection.

Two timeslots conflict when they fall on the same weekday and their
minute intervals overlap:
    start < other_end AND end > other_start
Touching endpoints (one class ends at 10:00, the next starts at 10:00)
are NOT a conflict. Unparseable timeslots never conflict.
"""

from __future__ import annotations

from typing import Sequence

from termplanner.model import Course
from termplanner.timeslots import parse_timeslot


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and a_end > b_start


def timeslots_conflict(a: str, b: str) -> bool:
    pa = parse_timeslot(a)
    pb = parse_timeslot(b)
    if pa is None or pb is None or pa.day != pb.day:
        return False
    return _overlaps(pa.start, pa.end, pb.start, pb.end)


def courses_conflict(a: Course, b: Course) -> bool:
    """
    True if any timeslot of course a conflicts with any timeslot of course b.
    """
    for ts1 in a.timeslots:
        for ts2 in b.timeslots:
            if timeslots_conflict(ts1, ts2):
                return True
    return False


def course_list_has_conflict(courses: Sequence[Course]) -> bool:
    """
    True if any two distinct entries of the list conflict.
    """
    # O(n^2 * k^2) is fine for catalog sizes of a few dozen courses
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            if courses_conflict(courses[i], courses[j]):
                return True
    return False


def find_course_conflicts(courses: Sequence[Course]) -> list[tuple[Course, Course]]:
    """
    Find conflicting course pairs (A,B), each pair appears once (i<j).
    """
    out: list[tuple[Course, Course]] = []
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            if courses_conflict(courses[i], courses[j]):
                out.append((courses[i], courses[j]))
    return out
