"""Tier 1 unit tests: Multi-error collection, line recovery and error rendering."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from tests.helpers import collect_errors
from header_parser import (
    HeaderSyntaxError, ParseError, ParseErrorCollection, Suggestion,
    parse, parse_with_diagnostics,
)


class TestLineRecovery:
    def test_bad_line_does_not_hide_next_line(self):
        contents, errors = parse_with_diagnostics("0 5000|0|100\n0|1|0|5\n")
        assert contents is None
        assert len(errors) == 1
        assert errors[0].range == (1, 2)
        assert errors[0].suggestion == Suggestion.UBER_GROUP

    def test_one_error_per_bad_line(self):
        errors = collect_errors("0|\n1|2|0|5\n#\n")
        assert [e.range for e in errors] == [(2, 3), (12, 13)]
        assert errors[0].suggestion == Suggestion.UBER_ID
        assert errors[1].suggestion == Suggestion.ANNOTATION

    def test_errors_on_consecutive_lines(self):
        errors = collect_errors("@\n@\n@")
        assert [e.start for e in errors] == [0, 2, 4]

    def test_good_lines_between_errors(self):
        text = "0|1|0|5\n0|x\n0|2|0|5\n!!bogus\n0|3|0|5\n"
        errors = collect_errors(text)
        assert len(errors) == 2

    def test_missing_newline_after_statement(self):
        errors = collect_errors("0|1|0|5 #x")
        assert len(errors) == 1
        assert errors[0].range == (8, 9)

    def test_error_at_end_of_input(self):
        errors = collect_errors("0|1")
        assert errors[0].range == (3, 3)
        assert errors[0].suggestion == Suggestion.UBER_ID

    def test_error_on_newline_token(self):
        errors = collect_errors("0|1|0|\n0|2|0|5")
        assert len(errors) == 1
        assert errors[0].range == (6, 7)

    def test_recovery_after_unterminated_string(self):
        errors = collect_errors('!!icon 2|8 file:"abc\n!!icon 2|8 bogus:1\n')
        assert [e.message for e in errors] == ["Unterminated string", "Invalid icon kind"]

    def test_errors_are_in_source_order(self):
        errors = collect_errors("#\n0|\n@\n")
        starts = [e.start for e in errors]
        assert starts == sorted(starts)

    def test_skip_validate_does_not_leak_past_error(self):
        contents, errors = parse_with_diagnostics("// skip-validate\n@\n0|1|0|5\n")
        assert len(errors) == 1
        assert contents is None


class TestSuccess:
    def test_no_errors_yields_contents(self):
        contents, errors = parse_with_diagnostics("0|1|0|5\n")
        assert len(contents) == 1
        assert errors.is_empty()
        assert not errors

    def test_parse_raises_with_every_error(self):
        text = "@\n0|1|0|5\n#\n"
        with pytest.raises(HeaderSyntaxError) as exc:
            parse(text, filename="bad.wotwrh")
        assert len(exc.value.errors) == 2
        assert exc.value.filename == "bad.wotwrh"
        assert "2 error(s) in bad.wotwrh" in str(exc.value)


class TestFormatting:
    def test_location(self):
        text = "0|1|0|5\n  @"
        err = collect_errors(text)[0]
        assert err.location(text) == (2, 3)

    def test_location_first_column(self):
        assert ParseError("x", 0, 1).location("abc") == (1, 1)

    def test_format_with_suggestion(self):
        text = "0 5000|0|100\n"
        err = collect_errors(text)[0]
        assert err.format(text, "a.wotwrh") == "a.wotwrh:L1:2: Expected uber group [uber group]"

    def test_format_without_suggestion(self):
        err = ParseError("Expected newline", 8, 9)
        assert err.format("0|1|0|5 #x") == "<input>:L1:9: Expected newline"

    def test_collection_format(self):
        text = "@\n@\n"
        _, errors = parse_with_diagnostics(text)
        lines = errors.format(text, "f").splitlines()
        assert lines == [
            "f:L1:1: Expected expression [expression]",
            "f:L2:1: Expected expression [expression]",
        ]

    def test_with_suggestion(self):
        err = ParseError("Expected integer", 0, 1).with_suggestion(Suggestion.INTEGER)
        assert err.suggestion == Suggestion.INTEGER


class TestErrorCollection:
    def test_push_and_index(self):
        errors = ParseErrorCollection()
        assert errors.is_empty()
        errors.push(ParseError("a", 0, 1))
        errors.push(ParseError("b", 2, 3))
        assert len(errors) == 2
        assert errors[1].message == "b"
        assert [e.message for e in errors] == ["a", "b"]

    def test_equality(self):
        assert ParseError("a", 0, 1, Suggestion.ZONE) == ParseError("a", 0, 1, Suggestion.ZONE)
        assert ParseError("a", 0, 1) != ParseError("a", 0, 2)
