from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from student_reports.core.text_utils import trim


@dataclass(frozen=True)
class CurricularRecord:
    """One data line of the curricular CSV file."""
    record_id: int
    hours_studied: int
    attendance: int  # percentage, 0..100 (not validated)
    tutoring_sessions: int
    exam_score: int


@dataclass(frozen=True)
class ExtracurricularRecord:
    """One '- ' block of the extracurricular file."""
    record_id: int = 0
    extracurricular_activities: bool = False
    physical_activity: int = 0
    sleep_hours: int = 0

    @property
    def activities_label(self) -> str:
        return "Yes" if self.extracurricular_activities else "No"


# Optional sign then digits, anchored at the start of the trimmed text
LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def leading_int_text(value: Any) -> Optional[str]:
    """Return the leading integer text of a field ('7 hours' -> '7'), or None."""
    if value is None:
        return None
    match = LEADING_INT_RE.match(trim(str(value)))
    return match.group(0) if match else None


def coerce_int(value: Any) -> int:
    """
    Best-effort integer parsing shared by both loaders.

    Rules:
      - surrounding whitespace is ignored
      - only the leading [+-]digits run is read ('7:30' -> 7, '1e3' -> 1)
      - no leading digits, None / missing fields become 0
      - values outside the int64 range become 0
    """
    text = leading_int_text(value)
    if text is None:
        return 0
    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        return 0
    return number


def coerce_int_series(series: pd.Series) -> pd.Series:
    """Apply coerce_int to every cell of a column, returning int64 values."""
    return series.map(coerce_int).astype("int64")
