"""
Splitting the catalog into exclusive groups and the general pool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from termplanner.model import Course

logger = logging.getLogger(__name__)


@dataclass
class Partition:
    # group id -> courses, in catalog encounter order (dicts keep insertion order)
    groups: Dict[str, List[Course]] = field(default_factory=dict)
    general_pool: List[Course] = field(default_factory=list)
    # non-general courses without a group; they are not scheduled
    ungrouped: List[Course] = field(default_factory=list)


def partition_courses(courses: Iterable[Course]) -> Partition:
    """
    General courses go to the pool even if they carry a group id.
    Every other course is bucketed by its group id.
    """
    part = Partition()
    for course in courses:
        if course.is_general:
            part.general_pool.append(course)
        elif course.group:
            part.groups.setdefault(course.group, []).append(course)
        else:
            part.ungrouped.append(course)

    if part.ungrouped:
        logger.warning(
            "Ignoring %d non-general course(s) without a group: %s",
            len(part.ungrouped),
            ", ".join(c.code for c in part.ungrouped),
        )
    return part
