"""
termplanner – weekly timetable suggestions from a course catalog.
"""

from termplanner.scheduler import GENERAL_ONLY, suggest_schedule

__all__ = ["GENERAL_ONLY", "suggest_schedule"]
