"""
Schedule suggestion (the engine entry point).

suggest_schedule() is a pure function of its inputs:
- partition the catalog into exclusive groups and the general pool
- score every group and pick the winner
- greedily add preferred, then other, general courses that do not conflict
- sort the result by weekday and start time and explain the decision

It never raises for data problems: malformed timeslots never conflict,
preferences pointing at unknown courses never match, and an empty catalog
returns an empty schedule.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from termplanner.conflicts import course_list_has_conflict
from termplanner.groups import partition_courses
from termplanner.model import (
    Course,
    Instructor,
    ScheduleItem,
    ScheduleResult,
    StudentPreferences,
)
from termplanner.scoring import GroupScore, pick_best_group
from termplanner.timeslots import parse_timeslot

logger = logging.getLogger(__name__)

GENERAL_ONLY = "General only"


def _matched_instructor(course: Course, prefs: StudentPreferences) -> Optional[Instructor]:
    """
    Return the preferred instructor of a general course, if the student named one.
    """
    for pref in prefs.instructor_preferences:
        if pref.course_code != course.code:
            continue
        ins = course.instructor_by_id(pref.instructor_id)
        if ins is not None:
            return ins
    return None


def sort_key(course: Course) -> Tuple[int, int, int]:
    """
    Order by weekday then start time of the course's first timeslot.
    Courses without a parseable first slot go last.
    """
    parsed = parse_timeslot(course.timeslots[0]) if course.timeslots else None
    if parsed is None:
        return (1, 0, 0)
    return (0, parsed.day.index, parsed.start)


def compose_rationale(group: str, lines: Iterable[str]) -> str:
    return f"Group {group} selected because: " + " ".join(lines)


def _try_add(accepted: List[Course], course: Course) -> bool:
    if course_list_has_conflict(accepted + [course]):
        logger.debug("rejected %s: conflicts with current schedule", course.code)
        return False
    accepted.append(course)
    logger.debug("added %s", course.code)
    return True


def _general_only(general_pool: Sequence[Course], prefs: StudentPreferences) -> Tuple[List[Course], str]:
    accepted: List[Course] = []
    for course in general_pool:
        if _matched_instructor(course, prefs) is not None:
            _try_add(accepted, course)

    if not general_pool:
        rationale = "No courses were available, so the schedule is empty."
    else:
        rationale = (
            "The schedule was built from general courses and your instructor "
            "preferences only, because no exclusive groups were defined."
        )
    return accepted, rationale


def assemble_schedule(
    best: GroupScore, general_pool: Sequence[Course], prefs: StudentPreferences
) -> Tuple[List[Course], List[str], str]:
    """
    Merge the winning group with as many general courses as fit.

    Returns (sorted courses, conflicts, rationale).
    """
    # the group itself is taken as-is; intra-group conflicts are not checked
    accepted: List[Course] = list(best.courses)
    conflicts: List[str] = []
    notes: List[str] = []

    preferred: List[Tuple[Course, Instructor]] = []
    others: List[Course] = []
    for course in general_pool:
        ins = _matched_instructor(course, prefs)
        if ins is not None:
            preferred.append((course, ins))
        else:
            others.append(course)

    for course, ins in preferred:
        if _try_add(accepted, course):
            notes.append(
                f"General course {course.name} with your preferred instructor "
                f"({ins.name}) was added without conflicts."
            )
        else:
            conflicts.append(course.label)

    for course in others:
        if not _try_add(accepted, course) and course.label not in conflicts:
            conflicts.append(course.label)

    accepted.sort(key=sort_key)
    return accepted, conflicts, compose_rationale(best.name, best.rationale + notes)


def suggest_schedule(
    available_courses: Sequence[Course],
    preferences: StudentPreferences,
    student_id: Optional[str] = None,
    term: Optional[str] = None,
) -> ScheduleResult:
    """
    Suggest a conflict-free timetable for one student.

    student_id and term are passed through to the result untouched.
    """
    part = partition_courses(available_courses)

    best = pick_best_group(part.groups, preferences)
    if best is None:
        courses, rationale = _general_only(part.general_pool, preferences)
        return ScheduleResult(
            recommended_group=GENERAL_ONLY,
            schedule=tuple(ScheduleItem.from_course(c) for c in courses),
            conflicts=(),
            rationale=rationale,
            student_id=student_id,
            term=term,
        )

    logger.debug("recommended group %s (score %d)", best.name, best.score)
    courses, conflicts, rationale = assemble_schedule(best, part.general_pool, preferences)
    return ScheduleResult(
        recommended_group=best.name,
        schedule=tuple(ScheduleItem.from_course(c) for c in courses),
        conflicts=tuple(conflicts),
        rationale=rationale,
        student_id=student_id,
        term=term,
    )
