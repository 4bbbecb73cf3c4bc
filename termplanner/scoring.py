"""
Group scoring.

Each exclusive group gets a heuristic score against the student's soft
preferences, together with human-readable rationale lines:

1. Day off (if set): +100 if no class of the group is on that day, else -50.
2. Shift (if set): +50 when the morning/afternoon split matches the wish.
   There is no penalty when it does not.
3. Load: -2 per course in the group, always.

The highest score wins. Ties go to the group encountered first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from termplanner.model import Course, ShiftPreference, StudentPreferences
from termplanner.timeslots import is_morning, slot_weekday

logger = logging.getLogger(__name__)

DAY_OFF_BONUS = 100
DAY_OFF_PENALTY = 50
SHIFT_BONUS = 50
LOAD_PENALTY = 2


@dataclass
class GroupScore:
    name: str
    score: int
    courses: List[Course]
    rationale: List[str] = field(default_factory=list)


def _shift_note(shift: ShiftPreference, morning: int, afternoon: int) -> Optional[str]:
    if shift is ShiftPreference.MORE_MORNING and morning >= afternoon:
        return "Most classes are in the morning shift."
    if shift is ShiftPreference.MORE_AFTERNOON and afternoon >= morning:
        return "Most classes are in the afternoon shift."
    if shift is ShiftPreference.NO_MORNING and morning == 0:
        return "No class is in the morning shift."
    if shift is ShiftPreference.NO_AFTERNOON and afternoon == 0:
        return "No class is in the afternoon shift."
    return None


def score_group(name: str, courses: Sequence[Course], prefs: StudentPreferences) -> GroupScore:
    result = GroupScore(name=name, score=0, courses=list(courses))

    if prefs.day_off is not None:
        day = prefs.day_off
        busy = any(slot_weekday(ts) is day for c in courses for ts in c.timeslots)
        if not busy:
            result.score += DAY_OFF_BONUS
            result.rationale.append(f"{day.value} is completely free.")
        else:
            result.score -= DAY_OFF_PENALTY
            result.rationale.append(f"Unfortunately there are classes on {day.value}.")

    if prefs.shift is not None:
        slots = [ts for c in courses for ts in c.timeslots]
        # unparseable slots count as afternoon
        morning = sum(1 for ts in slots if is_morning(ts))
        afternoon = len(slots) - morning
        note = _shift_note(prefs.shift, morning, afternoon)
        if note:
            result.score += SHIFT_BONUS
            result.rationale.append(note)

    result.score -= LOAD_PENALTY * len(courses)
    result.rationale.append("The number of courses in the group was factored into the score.")

    logger.debug("group %s scored %d", name, result.score)
    return result


def pick_best_group(groups: Dict[str, List[Course]], prefs: StudentPreferences) -> Optional[GroupScore]:
    """
    Score every group in iteration order and return the best one,
    or None when there are no groups.
    """
    best: Optional[GroupScore] = None
    for name, courses in groups.items():
        scored = score_group(name, courses, prefs)
        # strict '>' keeps the first group on ties
        if best is None or scored.score > best.score:
            best = scored
    return best
