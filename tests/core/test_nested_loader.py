"""
Unit Tests for the extracurricular block parser.
"""

import pytest

from student_reports.core.errors import FileOpenError
from student_reports.core.nested_loader import (
    LineKind,
    ParserState,
    apply_key_value,
    parse_nested,
    parse_nested_lines,
    transition,
)
from student_reports.core.records import ExtracurricularRecord


class TestTransition:
    """Tests for the line classifier / state machine."""

    def test_transition_when_blank_then_state_unchanged(self):
        assert transition(ParserState.SCANNING, "") == (ParserState.SCANNING, LineKind.BLANK)
        assert transition(ParserState.IN_RECORD, "") == (ParserState.IN_RECORD, LineKind.BLANK)

    def test_transition_when_section_header_then_state_unchanged(self):
        assert transition(ParserState.IN_RECORD, "records:") == (ParserState.IN_RECORD, LineKind.SECTION)

    def test_transition_when_list_item_then_opens_record(self):
        assert transition(ParserState.SCANNING, "- Record_ID: 1") == (ParserState.IN_RECORD, LineKind.NEW_RECORD)
        assert transition(ParserState.IN_RECORD, "- Record_ID: 2") == (ParserState.IN_RECORD, LineKind.NEW_RECORD)

    def test_transition_when_field_before_any_record_then_ignored(self):
        assert transition(ParserState.SCANNING, "Record_ID: 1") == (ParserState.SCANNING, LineKind.IGNORED)

    def test_transition_when_field_inside_record_then_field(self):
        assert transition(ParserState.IN_RECORD, "Sleep_Hours: 7") == (ParserState.IN_RECORD, LineKind.FIELD)

    def test_transition_when_dash_without_space_then_not_a_marker(self):
        assert transition(ParserState.IN_RECORD, "-Record_ID: 1")[1] is LineKind.FIELD


class TestApplyKeyValue:
    """Tests for a single key:value line."""

    @pytest.mark.parametrize("value", ["'Yes'", "Yes", "' Yes '"])
    def test_activities_when_yes_variants_then_true(self, value):
        fields = {}
        apply_key_value(f"Extracurricular_Activities: {value}", fields)
        assert fields["extracurricular_activities"] is True

    @pytest.mark.parametrize("value", ["'No'", "No", "yes", "'Yes", "Maybe", ""])
    def test_activities_when_anything_else_then_false(self, value):
        fields = {}
        apply_key_value(f"Extracurricular_Activities: {value}", fields)
        assert fields["extracurricular_activities"] is False

    def test_apply_when_value_contains_colon_then_leading_digits_kept(self):
        fields = {}
        apply_key_value("Sleep_Hours: 7:30", fields)
        assert fields["sleep_hours"] == 7

    def test_apply_when_value_has_trailing_text_then_leading_digits_kept(self):
        fields = {}
        apply_key_value("Physical_Activity: 3 hours", fields)
        assert fields["physical_activity"] == 3

    def test_apply_when_no_colon_then_untouched(self):
        fields = {}
        apply_key_value("Record_ID 5", fields)
        assert fields == {}

    def test_apply_when_unknown_key_then_untouched(self):
        fields = {}
        apply_key_value("Name: 'Ada'", fields)
        assert fields == {}


class TestParseNested:
    """Tests for parse_nested() and parse_nested_lines()."""

    def test_parse_when_block_then_fields_match(self, write_file):
        path = write_file(
            "e.yaml",
            "records:\n"
            "- Extracurricular_Activities: 'Yes'\n"
            "  Physical_Activity: 3\n"
            "  Record_ID: 12\n"
            "  Sleep_Hours: 7\n",
        )
        assert parse_nested(path) == [
            ExtracurricularRecord(
                record_id=12,
                extracurricular_activities=True,
                physical_activity=3,
                sleep_hours=7,
            )
        ]

    def test_parse_when_marker_line_bare_then_next_lines_fill_record(self):
        lines = ["-  \n", "- Record_ID: 1\n", "  Sleep_Hours: 4\n"]
        # "-" alone is not a marker after trimming, so only one record starts
        assert parse_nested_lines(lines) == [ExtracurricularRecord(record_id=1, sleep_hours=4)]

    def test_parse_when_fields_before_first_marker_then_ignored(self):
        lines = ["Record_ID: 99\n", "- Record_ID: 1\n"]
        assert parse_nested_lines(lines) == [ExtracurricularRecord(record_id=1)]

    def test_parse_when_missing_fields_then_defaults(self):
        lines = ["records:\n", "- Record_ID: 3\n", "\n", "- Sleep_Hours: x\n"]
        assert parse_nested_lines(lines) == [
            ExtracurricularRecord(record_id=3),
            ExtracurricularRecord(),
        ]

    def test_parse_when_cap_reached_then_stops(self):
        lines = [f"- Record_ID: {i}\n" for i in range(5)]
        records = parse_nested_lines(lines, max_records=2)
        assert [r.record_id for r in records] == [0, 1]

    def test_parse_when_empty_file_then_no_records(self, write_file):
        assert parse_nested(write_file("e.yaml", "")) == []

    def test_parse_when_missing_file_then_raises_file_open(self, tmp_path):
        with pytest.raises(FileOpenError):
            parse_nested(tmp_path / "missing.yaml")
