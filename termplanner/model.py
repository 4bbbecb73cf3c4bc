"""
Central data model definitions used across the project.

This module defines the canonical structure of courses, preferences and
results so that:
- all modules share the same field names
- string values (weekdays, categories, shift variants) are parsed once at the
  boundary into closed enums instead of being compared ad hoc
- each course keeps its timeslots and locations together as sessions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Weekday(Enum):
    """
    The six-day academic week, in display order.
    """

    SATURDAY = "Saturday"
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"

    @property
    def index(self) -> int:
        return _WEEKDAY_ORDER.index(self)

    @classmethod
    def parse(cls, text: str) -> "Weekday":
        """
        Resolve a day name (case-insensitive). Raises ValueError for unknown days.
        """
        key = str(text).strip().lower()
        for day in cls:
            if day.value.lower() == key:
                return day
        raise ValueError(f"Unknown weekday: {text!r}")


_WEEKDAY_ORDER = list(Weekday)


class Category(Enum):
    GENERAL = "general"
    SPECIALIZED = "specialized"
    PEDAGOGICAL = "pedagogical"
    CULTURAL = "cultural"

    @classmethod
    def parse(cls, text: str) -> "Category":
        key = str(text).strip().lower()
        for cat in cls:
            if cat.value == key:
                return cat
        raise ValueError(f"Unknown course category: {text!r}")


class ShiftPreference(Enum):
    """
    Soft preference for when classes should take place.

    Morning means a class that ends at or before 12:00.
    """

    MORE_MORNING = "more-morning"
    MORE_AFTERNOON = "more-afternoon"
    NO_MORNING = "no-morning"
    NO_AFTERNOON = "no-afternoon"

    @classmethod
    def parse(cls, text: str) -> "ShiftPreference":
        key = str(text).strip().lower()
        for shift in cls:
            if shift.value == key:
                return shift
        raise ValueError(f"Unknown shift preference: {text!r}")


@dataclass(frozen=True)
class Instructor:
    id: str
    name: str


@dataclass(frozen=True)
class Session:
    """
    One weekly meeting of a course: a timeslot string such as
    'Monday 10:00-12:00' and the room it takes place in.
    """

    timeslot: str
    location: str


@dataclass(frozen=True)
class Course:
    """
    Represents one offered course as read from the catalog.

    Non-general courses with a group belong to that exclusive group;
    general courses are freely combinable.
    """

    id: str
    code: str
    name: str
    instructors: Tuple[Instructor, ...]
    category: Category
    sessions: Tuple[Session, ...] = ()
    group: Optional[str] = None

    @property
    def timeslots(self) -> Tuple[str, ...]:
        return tuple(s.timeslot for s in self.sessions)

    @property
    def locations(self) -> Tuple[str, ...]:
        return tuple(s.location for s in self.sessions)

    @property
    def is_general(self) -> bool:
        return self.category is Category.GENERAL

    def instructor_by_id(self, instructor_id: str) -> Optional[Instructor]:
        for ins in self.instructors:
            if ins.id == instructor_id:
                return ins
        return None

    @property
    def label(self) -> str:
        # used in conflict lists
        return f"{self.name} ({self.code})"


@dataclass(frozen=True)
class InstructorPreference:
    """
    Which instructor the student wants for a given general course.
    """

    course_code: str
    instructor_id: str


@dataclass(frozen=True)
class StudentPreferences:
    day_off: Optional[Weekday] = None
    shift: Optional[ShiftPreference] = None
    instructor_preferences: Tuple[InstructorPreference, ...] = ()


@dataclass(frozen=True)
class ScheduleItem:
    """
    One line of the suggested timetable.
    """

    course_code: str
    course_name: str
    instructor: str
    timeslots: Tuple[str, ...]
    locations: Tuple[str, ...]
    group: Optional[str] = None

    @property
    def timeslot(self) -> str:
        return " / ".join(self.timeslots)

    @property
    def location(self) -> str:
        return " / ".join(self.locations)

    @classmethod
    def from_course(cls, course: Course) -> "ScheduleItem":
        return cls(
            course_code=course.code,
            course_name=course.name,
            instructor=", ".join(i.name for i in course.instructors),
            timeslots=course.timeslots,
            locations=course.locations,
            group=course.group,
        )


@dataclass(frozen=True)
class ScheduleResult:
    """
    Output of one engine run. student_id and term are carried for display only.
    """

    recommended_group: Optional[str]
    schedule: Tuple[ScheduleItem, ...] = ()
    conflicts: Tuple[str, ...] = ()
    rationale: str = ""
    student_id: Optional[str] = None
    term: Optional[str] = None
