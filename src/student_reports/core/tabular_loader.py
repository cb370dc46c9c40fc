from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from student_reports.config import MAX_RECORDS
from student_reports.core.errors import FileOpenError
from student_reports.core.records import CurricularRecord, coerce_int_series

logger = logging.getLogger(__name__)

# Positional field order of a curricular data line
CURRICULAR_COLUMNS = [
    "record_id",
    "hours_studied",
    "attendance",
    "tutoring_sessions",
    "exam_score",
]


def _read_data_lines(path: Path, max_records: int) -> List[str]:
    """
    Return the raw data lines of the file, header excluded.

    The first line is dropped unconditionally, whatever it contains. Reading
    stops once max_records lines have been collected.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            f.readline()  # header
            lines: List[str] = []
            for line in f:
                if len(lines) >= max_records:
                    logger.warning("Record cap of %s reached in %s; remaining lines ignored.", max_records, path)
                    break
                lines.append(line)
    except OSError as exc:
        raise FileOpenError(path) from exc
    return lines


def _split_fields(lines: List[str]) -> pd.DataFrame:
    """
    Split lines at commas into a frame of raw text fields.

    Lines with fewer than five fields are padded with None; extra fields
    are dropped.
    """
    width = len(CURRICULAR_COLUMNS)
    rows = []
    for line in lines:
        parts = line.split(",")[:width]
        parts += [None] * (width - len(parts))
        rows.append(parts)
    return pd.DataFrame(rows, columns=CURRICULAR_COLUMNS, dtype=object)


def parse_tabular(
    path: Union[str, Path],
    max_records: Optional[int] = None,
) -> List[CurricularRecord]:
    """
    Read the curricular CSV file into records, in file order.

    Every data line yields exactly one record: fields that are missing or do
    not parse as numbers are recorded as 0 (see coerce_int). Nothing else is
    validated, so duplicate ids and out-of-range attendance pass through.

    Raises FileOpenError if the file cannot be opened.
    """
    path = Path(path)
    cap = MAX_RECORDS if max_records is None else int(max_records)

    lines = _read_data_lines(path, cap)
    if not lines:
        logger.info("Read 0 curricular records from %s", path)
        return []

    raw = _split_fields(lines)
    df = pd.DataFrame({col: coerce_int_series(raw[col]) for col in CURRICULAR_COLUMNS})

    records = [
        CurricularRecord(
            record_id=int(row.record_id),
            hours_studied=int(row.hours_studied),
            attendance=int(row.attendance),
            tutoring_sessions=int(row.tutoring_sessions),
            exam_score=int(row.exam_score),
        )
        for row in df.itertuples(index=False)
    ]

    logger.info("Read %s curricular records from %s", len(records), path)
    return records
