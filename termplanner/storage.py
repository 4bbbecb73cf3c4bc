"""
JSON storage for course catalogs and student preferences.

This is the boundary between raw records (as produced by an import step or
typed in by hand) and the validated domain objects the engine works with:

- catalog.json      {"courses": [ {id, code, name, instructors, category,
                                    timeslots, locations, group}, ... ]}
- preferences.json  {"day_off", "shift", "instructor_preferences": [...]}

Unlike the engine, this module raises: a missing file or an unknown
category is a hard error the caller has to report.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from termplanner.model import (
    Category,
    Course,
    Instructor,
    InstructorPreference,
    ScheduleResult,
    Session,
    ShiftPreference,
    StudentPreferences,
    Weekday,
)

# used when a record has fewer locations than timeslots
LOCATION_PLACEHOLDER = "Not specified"


class CatalogError(ValueError):
    """
    Raised for unreadable files and invalid catalog/preference records.
    """


def _read_json(path: str | Path) -> Any:
    p = Path(path)
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CatalogError(f"File not found: {p}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Cannot read {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid JSON in {p}: {exc}") from exc


def _write_json(path: str | Path, payload: Any) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def _str_list(value: Any, what: str) -> list[str]:
    """
    Accept a list, a single string or nothing. Anything else is rejected.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise CatalogError(f"{what} must be a list or a string, got {type(value).__name__}")
    return [str(x) for x in value]


# ---------------------------------------------------------------------------
# Courses
# ---------------------------------------------------------------------------


def course_from_dict(data: dict[str, Any]) -> Course:
    """
    Build a Course from a raw record.

    timeslots and locations are paired by position; missing locations are
    padded with a placeholder and surplus locations are dropped.
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Course record must be an object, got {type(data).__name__}")

    code = str(data.get("code", "")).strip()
    if not code:
        raise CatalogError(f"Course record without code: {data!r}")

    try:
        category = Category.parse(data.get("category", ""))
    except ValueError as exc:
        raise CatalogError(f"{code}: {exc}") from exc

    raw_instructors = data.get("instructors") or []
    if isinstance(raw_instructors, (str, dict)):
        # a single instructor given without the surrounding list
        raw_instructors = [raw_instructors]
    if not isinstance(raw_instructors, list):
        raise CatalogError(f"{code}: instructors must be a list, got {type(raw_instructors).__name__}")

    instructors = []
    for raw in raw_instructors:
        if isinstance(raw, dict):
            name = str(raw.get("name", "")).strip()
            iid = str(raw.get("id", "") or name).strip()
        else:
            name = str(raw).strip()
            iid = name
        if name:
            instructors.append(Instructor(id=iid, name=name))
    if not instructors:
        raise CatalogError(f"{code}: course needs at least one instructor")

    timeslots = _str_list(data.get("timeslots"), f"{code}: timeslots")
    locations = _str_list(data.get("locations"), f"{code}: locations")
    locations += [LOCATION_PLACEHOLDER] * (len(timeslots) - len(locations))
    sessions = tuple(Session(ts, loc) for ts, loc in zip(timeslots, locations))

    group = data.get("group")
    group = str(group).strip() if group else None

    return Course(
        id=str(data.get("id") or code),
        code=code,
        name=str(data.get("name", "")).strip() or code,
        instructors=tuple(instructors),
        category=category,
        sessions=sessions,
        group=group or None,
    )


def course_to_dict(course: Course) -> dict[str, Any]:
    return {
        "id": course.id,
        "code": course.code,
        "name": course.name,
        "instructors": [{"id": i.id, "name": i.name} for i in course.instructors],
        "category": course.category.value,
        "timeslots": list(course.timeslots),
        "locations": list(course.locations),
        "group": course.group,
    }


def load_catalog(path: str | Path) -> list[Course]:
    """
    Load a course catalog. Accepts {"courses": [...]} or a bare list.
    """
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("courses", [])
    if not isinstance(data, list):
        raise CatalogError(f"{path}: expected a list of courses")
    return [course_from_dict(d) for d in data]


def save_catalog(courses: Iterable[Course], path: str | Path) -> None:
    _write_json(path, {"courses": [course_to_dict(c) for c in courses]})


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------


def preferences_from_dict(data: dict[str, Any]) -> StudentPreferences:
    if not isinstance(data, dict):
        raise CatalogError("Preferences must be an object")

    try:
        day_off = Weekday.parse(data["day_off"]) if data.get("day_off") else None
        shift = ShiftPreference.parse(data["shift"]) if data.get("shift") else None
    except ValueError as exc:
        raise CatalogError(str(exc)) from exc

    prefs = []
    for raw in data.get("instructor_preferences") or []:
        if not isinstance(raw, dict):
            raise CatalogError(f"Invalid instructor preference: {raw!r}")
        code = str(raw.get("course_code", "")).strip()
        iid = str(raw.get("instructor_id", "")).strip()
        if code and iid:
            prefs.append(InstructorPreference(course_code=code, instructor_id=iid))

    return StudentPreferences(day_off=day_off, shift=shift, instructor_preferences=tuple(prefs))


def preferences_to_dict(prefs: StudentPreferences) -> dict[str, Any]:
    return {
        "day_off": prefs.day_off.value if prefs.day_off else None,
        "shift": prefs.shift.value if prefs.shift else None,
        "instructor_preferences": [
            {"course_code": p.course_code, "instructor_id": p.instructor_id}
            for p in prefs.instructor_preferences
        ],
    }


def load_preferences(path: str | Path) -> StudentPreferences:
    return preferences_from_dict(_read_json(path))


def save_preferences(prefs: StudentPreferences, path: str | Path) -> None:
    _write_json(path, preferences_to_dict(prefs))


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def result_to_dict(result: ScheduleResult) -> dict[str, Any]:
    """
    JSON shape of a result. Single timeslots/locations are emitted as a
    string, several as a list.
    """

    def one_or_many(values: tuple[str, ...]) -> Any:
        return values[0] if len(values) == 1 else list(values)

    return {
        "studentId": result.student_id,
        "term": result.term,
        "recommendedGroup": result.recommended_group,
        "schedule": [
            {
                "courseCode": item.course_code,
                "courseName": item.course_name,
                "instructor": item.instructor,
                "timeslot": one_or_many(item.timeslots),
                "location": one_or_many(item.locations),
                "group": item.group,
            }
            for item in result.schedule
        ],
        "conflicts": list(result.conflicts),
        "rationale": result.rationale,
    }
