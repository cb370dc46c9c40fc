from __future__ import annotations

import logging
import re
import sys
from typing import List, Optional

from student_reports.config import APP_NAME, APP_VERSION, LOG_FORMAT, LOG_LEVEL, ReportSettings
from student_reports.core.errors import FileOpenError, InvalidTaskError, UsageError
from student_reports.core.nested_loader import parse_nested
from student_reports.core.report_writer import write_report
from student_reports.core.reports import run
from student_reports.core.tabular_loader import parse_tabular

logger = logging.getLogger(__name__)

TASK_ARG_RE = re.compile(r"--TASK=([+-]?\d+)")


def parse_task_argument(args: List[str]) -> int:
    """Return the task number from ['--TASK=<n>'], or raise UsageError."""
    if len(args) != 1:
        raise UsageError(f"Expected exactly one argument, got {len(args)}")
    match = TASK_ARG_RE.fullmatch(args[0])
    if match is None:
        raise UsageError(f"Malformed argument: {args[0]!r}")
    return int(match.group(1))


def _configure_logging() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None, settings: Optional[ReportSettings] = None) -> int:
    """
    Run one report. Returns the process exit status (0 ok, 1 failure).

    Every failure prints a single line to stdout.
    """
    argv = list(sys.argv if argv is None else argv)
    prog = argv[0] if argv else "student-reports"
    settings = settings or ReportSettings()

    try:
        task = parse_task_argument(argv[1:])
    except UsageError as exc:
        logger.debug("Usage error: %s", exc)
        print(f'Usage: {prog} --TASK="<task_number>"')
        return 1

    try:
        curricular = parse_tabular(settings.curricular_path, max_records=settings.max_records)
        extracurricular = parse_nested(settings.extracurricular_path, max_records=settings.max_records)
    except FileOpenError as exc:
        logger.error("Input not readable: %s (%s)", exc.path, exc.__cause__)
        print(f"Error: Could not open file {exc.path}")
        return 1

    try:
        output = open(settings.output_path, "w", newline="", encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot create %s (%s)", settings.output_path, exc)
        print("Error: Could not create output file")
        return 1

    with output:
        try:
            table = run(task, curricular, extracurricular)
        except InvalidTaskError as exc:
            logger.debug("%s", exc)
            print("Error: Invalid task number")
            return 1
        write_report(table, output)

    logger.info("Task %s written to %s", task, settings.output_path)
    return 0


def run_cli() -> None:
    _configure_logging()
    logger.info("%s %s starting", APP_NAME, APP_VERSION)
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
