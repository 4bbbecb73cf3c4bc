"""
CLI (Command Line Interface).

Quick terminal commands around the scheduling engine, e.g.:

    termplanner suggest catalog.json --day-off Wednesday --shift more-morning
    termplanner suggest catalog.json --prefer GE101=dr-nikzad --json
    termplanner search catalog.json <text>
    termplanner conflicts catalog.json [CODE ...]

Catalog and preference files are JSON (see termplanner.storage).
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from termplanner.conflicts import find_course_conflicts
from termplanner.model import (
    Course,
    InstructorPreference,
    ScheduleResult,
    ShiftPreference,
    StudentPreferences,
    Weekday,
)
from termplanner.scheduler import suggest_schedule
from termplanner.storage import CatalogError, load_catalog, load_preferences, result_to_dict

console = Console()


def _parse_prefer(value: str) -> InstructorPreference:
    """
    argparse type for --prefer CODE=INSTRUCTOR_ID.
    """
    code, sep, iid = value.partition("=")
    if not sep or not code.strip() or not iid.strip():
        raise argparse.ArgumentTypeError(f"expected CODE=INSTRUCTOR_ID, got {value!r}")
    return InstructorPreference(course_code=code.strip(), instructor_id=iid.strip())


def _enum_arg(enum_cls):
    def convert(value: str):
        try:
            return enum_cls.parse(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    return convert


def _build_preferences(args: argparse.Namespace) -> StudentPreferences:
    """
    Start from the preferences file (if any) and apply command line overrides.
    """
    prefs = load_preferences(args.preferences) if args.preferences else StudentPreferences()
    if args.day_off is not None:
        prefs = replace(prefs, day_off=args.day_off)
    if args.shift is not None:
        prefs = replace(prefs, shift=args.shift)
    if args.prefer:
        prefs = replace(prefs, instructor_preferences=prefs.instructor_preferences + tuple(args.prefer))
    return prefs


def _print_result(result: ScheduleResult) -> None:
    header = "Suggested schedule"
    if result.student_id or result.term:
        header += f" for {result.student_id or '?'} ({result.term or '-'})"
    console.print(f"[bold]{header}[/]")
    console.print(f"Recommended group: [bold cyan]{result.recommended_group}[/]")

    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Course")
    table.add_column("Instructor", style="magenta")
    table.add_column("Time")
    table.add_column("Location")
    table.add_column("Group", style="green")
    for item in result.schedule:
        table.add_row(
            item.course_code,
            item.course_name,
            item.instructor,
            item.timeslot,
            item.location,
            item.group or "",
        )
    console.print(table)

    if result.conflicts:
        console.print(f"[yellow]Not scheduled because of conflicts ({len(result.conflicts)}):[/]")
        for label in result.conflicts:
            console.print(f"- {label}")

    console.print(result.rationale)


def _cmd_suggest(args: argparse.Namespace, courses: list[Course]) -> int:
    prefs = _build_preferences(args)
    result = suggest_schedule(courses, prefs, student_id=args.student_id, term=args.term)

    if args.json:
        # plain print keeps the output machine-readable
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        _print_result(result)
    return 0


def _cmd_search(args: argparse.Namespace, courses: list[Course]) -> int:
    """
    Search courses by substring match in code, name, or instructor names.
    """
    query = (args.text or "").strip().lower()
    if not query:
        console.print("Please provide a search text.")
        return 1

    matches: list[Course] = []
    for c in courses:
        hay = " ".join([c.code, c.name] + [i.name for i in c.instructors]).lower()
        if query in hay:
            matches.append(c)

    if not matches:
        console.print("No results.")
        return 0

    # show max 20
    for c in matches[:20]:
        group = f" | {c.group}" if c.group else ""
        console.print(f"{c.code} | {c.name} | {c.category.value}{group}")
    if len(matches) > 20:
        console.print(f"... and {len(matches) - 20} more results")

    return 0


def _cmd_conflicts(args: argparse.Namespace, courses: list[Course]) -> int:
    """
    Print conflicting course pairs among the selected codes (or the whole catalog).
    """
    codes = {c.strip().upper() for c in args.codes if c.strip()}
    selected = [c for c in courses if not codes or c.code.upper() in codes]

    pairs = find_course_conflicts(selected)
    if not pairs:
        console.print("No conflicts found.")
        return 0

    console.print(f"Conflicts found: {len(pairs)}")
    for a, b in pairs:
        console.print(f"- {a.code} {a.name} ({', '.join(a.timeslots)})  <->  {b.code} {b.name} ({', '.join(b.timeslots)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="termplanner", description="Weekly timetable planner")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine decisions to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_suggest = sub.add_parser("suggest", help="Suggest a conflict-free schedule")
    p_suggest.add_argument("catalog", type=str, help="Catalog JSON file")
    p_suggest.add_argument("--preferences", type=str, default=None, help="Preferences JSON file")
    p_suggest.add_argument(
        "--day-off",
        type=_enum_arg(Weekday),
        default=None,
        help="Preferred free day (" + ", ".join(d.value for d in Weekday) + ")",
    )
    p_suggest.add_argument(
        "--shift",
        type=_enum_arg(ShiftPreference),
        default=None,
        help="Shift preference (" + ", ".join(s.value for s in ShiftPreference) + ")",
    )
    p_suggest.add_argument(
        "--prefer",
        type=_parse_prefer,
        action="append",
        default=[],
        metavar="CODE=INSTRUCTOR_ID",
        help="Preferred instructor for a general course (repeatable)",
    )
    p_suggest.add_argument("--student-id", type=str, default=None)
    p_suggest.add_argument("--term", type=str, default=None)
    p_suggest.add_argument("--json", action="store_true", help="Print the result as JSON")

    p_search = sub.add_parser("search", help="Search for courses")
    p_search.add_argument("catalog", type=str, help="Catalog JSON file")
    p_search.add_argument("text", type=str, help="Search text")

    p_conf = sub.add_parser("conflicts", help="Show conflicts among courses")
    p_conf.add_argument("catalog", type=str, help="Catalog JSON file")
    p_conf.add_argument("codes", nargs="*", help="Course codes to check (default: all)")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        courses = load_catalog(args.catalog)
        if args.command == "suggest":
            raise SystemExit(_cmd_suggest(args, courses))
        if args.command == "search":
            raise SystemExit(_cmd_search(args, courses))
        if args.command == "conflicts":
            raise SystemExit(_cmd_conflicts(args, courses))
    except CatalogError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise SystemExit(1)

    raise SystemExit(2)
