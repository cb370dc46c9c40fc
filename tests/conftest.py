import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import student_reports
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from student_reports.config import ReportSettings  # noqa: E402


CURRICULAR_CSV = (
    "Record_ID,Hours_Studied,Attendance,Tutoring_Sessions,Exam_Score\n"
    "1,5,90,2,95\n"
    "2,3,100,1,55\n"
    "3,4,100,0,91\n"
    "4,8,70,3,40\n"
)

EXTRACURRICULAR_YAML = (
    "records:\n"
    "- Extracurricular_Activities: 'Yes'\n"
    "  Physical_Activity: 3\n"
    "  Record_ID: 1\n"
    "  Sleep_Hours: 7\n"
    "- Extracurricular_Activities: 'No'\n"
    "  Physical_Activity: 1\n"
    "  Record_ID: 2\n"
    "  Sleep_Hours: 6\n"
    "- Extracurricular_Activities: 'Yes'\n"
    "  Physical_Activity: 5\n"
    "  Record_ID: 4\n"
    "  Sleep_Hours: 8\n"
)


# Common test fixtures
@pytest.fixture
def write_file(tmp_path: Path):
    """Return a helper that writes text to a file under tmp_path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def data_workspace(tmp_path: Path, write_file) -> ReportSettings:
    """Create both input files and return settings pointing at them."""
    return ReportSettings(
        curricular_path=write_file("data/curricular.csv", CURRICULAR_CSV),
        extracurricular_path=write_file("data/extracurricular.yaml", EXTRACURRICULAR_YAML),
        output_path=tmp_path / "output.csv",
    )
