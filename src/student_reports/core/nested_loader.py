from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from student_reports.config import MAX_RECORDS
from student_reports.core.errors import FileOpenError
from student_reports.core.records import ExtracurricularRecord, coerce_int
from student_reports.core.text_utils import trim

logger = logging.getLogger(__name__)

LIST_ITEM_MARKER = "- "
SECTION_HEADER = "records:"

# Keys understood inside a block, mapped to ExtracurricularRecord fields
ACTIVITIES_KEY = "Extracurricular_Activities"
INT_KEYS = {
    "Record_ID": "record_id",
    "Sleep_Hours": "sleep_hours",
    "Physical_Activity": "physical_activity",
}


class ParserState(Enum):
    SCANNING = "scanning"    # no record started yet
    IN_RECORD = "in_record"  # key:value lines belong to the latest record


class LineKind(Enum):
    BLANK = "blank"
    SECTION = "section"
    NEW_RECORD = "new_record"
    FIELD = "field"
    IGNORED = "ignored"


def transition(state: ParserState, line: str) -> Tuple[ParserState, LineKind]:
    """
    Classify one trimmed line and return the state after it.

    A list-item line always opens a record. A field line only counts once a
    record is open; before that it is ignored.
    """
    if not line:
        return state, LineKind.BLANK
    if line == SECTION_HEADER:
        return state, LineKind.SECTION
    if line.startswith(LIST_ITEM_MARKER):
        return ParserState.IN_RECORD, LineKind.NEW_RECORD
    if state is ParserState.IN_RECORD:
        return state, LineKind.FIELD
    return state, LineKind.IGNORED


def _strip_single_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        return trim(value[1:-1])
    return value


def apply_key_value(line: str, fields: Dict[str, Any]) -> None:
    """
    Apply one 'Key: value' line to the fields of the open record.

    The line is split at its first colon. Lines without a colon and unknown
    keys leave the fields untouched.
    """
    key, sep, raw_value = line.partition(":")
    if not sep:
        return

    key = trim(key)
    value = trim(raw_value)

    if key == ACTIVITIES_KEY:
        fields["extracurricular_activities"] = _strip_single_quotes(value) == "Yes"
    elif key in INT_KEYS:
        fields[INT_KEYS[key]] = coerce_int(value)


def parse_nested_lines(lines: List[str], max_records: Optional[int] = None) -> List[ExtracurricularRecord]:
    """
    Run the block parser over already-read lines.

    Returns one record per list-item line, in order, stopping once
    max_records records have been started.
    """
    cap = MAX_RECORDS if max_records is None else int(max_records)

    state = ParserState.SCANNING
    blocks: List[Dict[str, Any]] = []

    for raw in lines:
        line = trim(raw)
        next_state, kind = transition(state, line)

        if kind is LineKind.NEW_RECORD:
            if len(blocks) >= cap:
                logger.warning("Record cap of %s reached; remaining blocks ignored.", cap)
                break
            blocks.append({})
            rest = trim(line[len(LIST_ITEM_MARKER):])
            if rest:
                apply_key_value(rest, blocks[-1])
        elif kind is LineKind.FIELD:
            apply_key_value(line, blocks[-1])
        elif kind is LineKind.IGNORED:
            logger.debug("Ignoring line outside any record: %r", line)

        state = next_state

    return [ExtracurricularRecord(**fields) for fields in blocks]


def parse_nested(
    path: Union[str, Path],
    max_records: Optional[int] = None,
) -> List[ExtracurricularRecord]:
    """
    Read the extracurricular file into records, in file order.

    The format is a flat list of blocks:

        records:
        - Record_ID: 1
          Extracurricular_Activities: 'Yes'
          Physical_Activity: 3
          Sleep_Hours: 7

    Indentation is not significant. Fields missing from a block default to
    0 / False; a key repeated inside a block keeps its last value.

    Raises FileOpenError if the file cannot be opened.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
    except OSError as exc:
        raise FileOpenError(path) from exc

    records = parse_nested_lines(lines, max_records=max_records)
    logger.info("Read %s extracurricular records from %s", len(records), path)
    return records
