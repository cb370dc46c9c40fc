from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO, Union

import pandas as pd

from student_reports.core.errors import FileOpenError
from student_reports.core.reports import ReportTable

logger = logging.getLogger(__name__)


def to_frame(table: ReportTable) -> pd.DataFrame:
    return pd.DataFrame.from_records(table.rows, columns=list(table.header))


def write_report(table: ReportTable, destination: Union[str, Path, TextIO]) -> None:
    """
    Write the header line and one comma-separated line per row.

    destination may be an open text handle (left open) or a path, which is
    created or truncated. Raises FileOpenError if the path cannot be opened.
    """
    df = to_frame(table)

    if hasattr(destination, "write"):
        df.to_csv(destination, index=False, lineterminator="\n")
    else:
        path = Path(destination)
        try:
            with open(path, "w", newline="", encoding="utf-8") as f:
                df.to_csv(f, index=False, lineterminator="\n")
        except OSError as exc:
            raise FileOpenError(path, f"Could not create output file {path}") from exc

    logger.info("Wrote %s rows under header %s", len(df), ",".join(table.header))
