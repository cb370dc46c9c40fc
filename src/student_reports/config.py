from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

# ---------------------------------------------------------------------------
# App identity
# ---------------------------------------------------------------------------

APP_NAME = "Student Records Report Tool"
APP_VERSION = "0.1.0"

# ---------------------------------------------------------------------------
# Input / output locations
#
# Paths are relative to the working directory the tool is launched from:
#   data/a1-data-curricular.csv        (tabular curricular records)
#   data/a1-data-extracurricular.yaml  (nested extracurricular records)
#   output.csv                         (report, overwritten on every run)
# ---------------------------------------------------------------------------

DATA_DIR = Path("data")
CURRICULAR_PATH = DATA_DIR / "a1-data-curricular.csv"
EXTRACURRICULAR_PATH = DATA_DIR / "a1-data-extracurricular.yaml"
OUTPUT_PATH = Path("output.csv")

# Soft cap on records read from each input file
MAX_RECORDS = 6608

# ---------------------------------------------------------------------------
# Logging
#
# Diagnostics for the user go to stdout; log records go to stderr and stay
# quiet unless the level is lowered here.
# ---------------------------------------------------------------------------

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True)
class ReportSettings:
    """Locations and limits used for a single run."""
    curricular_path: Path = CURRICULAR_PATH
    extracurricular_path: Path = EXTRACURRICULAR_PATH
    output_path: Path = OUTPUT_PATH
    max_records: int = MAX_RECORDS
