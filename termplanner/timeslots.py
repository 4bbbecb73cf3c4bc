"""
Timeslot parsing.

A timeslot is a recurring weekly wall-clock interval written as

    '<Weekday> <HH:MM>-<HH:MM>'      e.g. 'Monday 10:00-12:00'

Parsing never raises: anything that does not match returns None, and an
unparseable slot simply never conflicts with anything.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from termplanner.model import Weekday

# 12:00 in minutes since midnight; a slot ending at or before it is "morning"
NOON = 12 * 60


class ParsedSlot(NamedTuple):
    day: Weekday
    start: int
    end: int


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    hh, mm = parts
    # plain ASCII digits only; int() alone would accept '+9', '1_0' or '٠٩'
    if not (1 <= len(hh) <= 2 and len(mm) == 2 and (hh + mm).isascii() and (hh + mm).isdigit()):
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(hh)
    m = int(mm)
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def slot_weekday(timeslot: str) -> Optional[Weekday]:
    """
    Return the weekday a timeslot starts with, ignoring the time part.
    """
    tokens = str(timeslot).split()
    if not tokens:
        return None
    try:
        return Weekday.parse(tokens[0])
    except ValueError:
        return None


def parse_timeslot(timeslot: str) -> Optional[ParsedSlot]:
    """
    Parse 'Weekday HH:MM-HH:MM' into (day, start minutes, end minutes).
    Returns None on any structural mismatch.
    """
    tokens = str(timeslot).split()
    if len(tokens) != 2:
        return None

    day = slot_weekday(timeslot)
    if day is None:
        return None

    if "-" not in tokens[1]:
        return None
    start_s, end_s = tokens[1].split("-", 1)

    try:
        start = time_to_minutes(start_s)
        end = time_to_minutes(end_s)
    except ValueError:
        return None

    return ParsedSlot(day=day, start=start, end=end)


def is_morning(timeslot: str) -> bool:
    parsed = parse_timeslot(timeslot)
    return parsed is not None and parsed.end <= NOON
