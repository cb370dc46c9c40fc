from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import logging

from student_reports.core.errors import InvalidTaskError
from student_reports.core.records import CurricularRecord, ExtracurricularRecord

logger = logging.getLogger(__name__)

# Thresholds used by the report predicates
HIGH_SCORE_THRESHOLD = 90
LOW_SCORE_THRESHOLD = 60
FULL_ATTENDANCE = 100

Row = Tuple[Any, ...]


@dataclass
class ReportTable:
    header: Tuple[str, ...]
    rows: List[Row] = field(default_factory=list)


@dataclass(frozen=True)
class ReportVariant:
    task: int
    description: str
    header: Tuple[str, ...]
    build: Callable[[Sequence[CurricularRecord], Sequence[ExtracurricularRecord]], List[Row]]


# ---------------------------------------------------------------------------
# Correlation lookup
# ---------------------------------------------------------------------------

def find_by_id(
    record_id: int,
    records: Sequence[ExtracurricularRecord],
) -> Optional[ExtracurricularRecord]:
    """
    Return the first extracurricular record with this id, or None.

    Linear scan; duplicates later in the sequence are never returned.
    """
    for rec in records:
        if rec.record_id == record_id:
            return rec
    return None


# ---------------------------------------------------------------------------
# Row builders (one per task)
# ---------------------------------------------------------------------------

def _high_scores(curricular, extracurricular) -> List[Row]:
    return [(c.record_id, c.exam_score) for c in curricular if c.exam_score > HIGH_SCORE_THRESHOLD]


def _all_extracurricular(curricular, extracurricular) -> List[Row]:
    return [
        (e.activities_label, e.physical_activity, e.record_id, e.sleep_hours)
        for e in extracurricular
    ]


def _merged_high_scores(curricular, extracurricular) -> List[Row]:
    rows: List[Row] = []
    for c in curricular:
        if c.exam_score <= HIGH_SCORE_THRESHOLD:
            continue
        ext = find_by_id(c.record_id, extracurricular)
        if ext is None:
            continue
        rows.append(
            (
                c.record_id,
                c.hours_studied,
                c.attendance,
                c.tutoring_sessions,
                c.exam_score,
                ext.activities_label,
                ext.physical_activity,
                ext.sleep_hours,
            )
        )
    return rows


def _full_attendance(curricular, extracurricular) -> List[Row]:
    return [(c.record_id, c.exam_score) for c in curricular if c.attendance == FULL_ATTENDANCE]


def _sleep_at_least_study(curricular, extracurricular) -> List[Row]:
    rows: List[Row] = []
    for c in curricular:
        ext = find_by_id(c.record_id, extracurricular)
        if ext is not None and ext.sleep_hours >= c.hours_studied:
            rows.append((c.record_id, c.exam_score))
    return rows


def _low_scores_with_activities(curricular, extracurricular) -> List[Row]:
    rows: List[Row] = []
    for c in curricular:
        if c.exam_score >= LOW_SCORE_THRESHOLD:
            continue
        ext = find_by_id(c.record_id, extracurricular)
        if ext is not None:
            rows.append((c.record_id, c.exam_score, ext.activities_label))
    return rows


REPORTS: Dict[int, ReportVariant] = {
    v.task: v
    for v in [
        ReportVariant(
            task=1,
            description="Students who scored above 90",
            header=("Record_ID", "Exam_Score"),
            build=_high_scores,
        ),
        ReportVariant(
            task=2,
            description="All extracurricular records",
            header=("Extracurricular_Activities", "Physical_Activity", "Record_ID", "Sleep_Hours"),
            build=_all_extracurricular,
        ),
        ReportVariant(
            task=3,
            description="Merged data for students scoring above 90",
            header=(
                "Record_ID",
                "Hours_Studied",
                "Attendance",
                "Tutoring_Sessions",
                "Exam_Score",
                "Extracurricular_Activities",
                "Physical_Activity",
                "Sleep_Hours",
            ),
            build=_merged_high_scores,
        ),
        ReportVariant(
            task=4,
            description="Students with 100% attendance",
            header=("Record_ID", "Exam_Score"),
            build=_full_attendance,
        ),
        ReportVariant(
            task=5,
            description="Students who sleep at least as many hours as they study",
            header=("Record_ID", "Exam_Score"),
            build=_sleep_at_least_study,
        ),
        ReportVariant(
            task=6,
            description="Students who scored below 60",
            header=("Record_ID", "Exam_Score", "Extracurricular_Activities"),
            build=_low_scores_with_activities,
        ),
    ]
}


def available_tasks() -> List[int]:
    return sorted(REPORTS)


def get_variant(task: int) -> ReportVariant:
    try:
        return REPORTS[task]
    except KeyError:
        raise InvalidTaskError(task) from None


def run(
    task: int,
    curricular: Sequence[CurricularRecord],
    extracurricular: Sequence[ExtracurricularRecord],
) -> ReportTable:
    """
    Build the report for a task.

    Rows follow the curricular input order (task 2 follows the
    extracurricular order). Raises InvalidTaskError for tasks outside 1..6.
    """
    variant = get_variant(task)
    logger.info(
        "Building report %s (%s) from %s curricular / %s extracurricular records",
        task, variant.description, len(curricular), len(extracurricular),
    )
    rows = variant.build(curricular, extracurricular)
    logger.info("Report %s produced %s rows", task, len(rows))
    return ReportTable(header=variant.header, rows=rows)
