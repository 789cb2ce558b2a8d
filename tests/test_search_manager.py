"""
Tests for multi-buffer searches and report rendering.
"""

import logging
import re
from unittest.mock import patch

from compsearch.buffer.schemas import Buffer
from compsearch.core.exceptions import PatternSyntaxError
from compsearch.core.settings import NO_OCCURRENCES
from compsearch.search.search_manager import SearchManager
from compsearch.search.search_schemas import ReportStatus


PATTERN_NOTE_SENTINEL = (
    "No occurrences found in any component\n\n"
    "Note: Pattern mode is enabled. Parentheses are treated as literal. "
    "Other special characters like . * + - ? must be escaped with \\"
)


def _re_error(pattern: str) -> str:
    try:
        re.compile(pattern)
    except re.error as e:
        return str(e)
    raise AssertionError(f"{pattern!r} compiled")


def test_multiline_report_text():
    report = SearchManager.search({"Comp": "foo\nbar foo\nbaz"}, "foo")

    assert report.status == ReportStatus.OK
    assert report.counts == {"Comp": 2}
    assert report.text == "\n".join([
        "2 occurrences found in component: Comp",
        "  [1] Line 1, Column 1:",
        "      foo",
        "      ^",
        "  [2] Line 2, Column 5:",
        "      bar foo",
        "          ^",
    ])


def test_buffers_reported_in_iteration_order():
    buffers = {"A.code": "x", "B.code": "nothing", "C.code": "xx"}
    report = SearchManager.search(buffers, "x")

    assert list(report.counts) == ["A.code", "C.code"]
    assert report.total_occurrences == 3
    assert report.entries[0] == "1 occurrence found in component: A.code"
    assert report.entries[4] == "2 occurrences found in component: C.code"
    assert len(report.entries) == (1 + 3) + (1 + 3 * 2)


def test_accepts_buffer_models():
    buffers = [Buffer(label="One", text="needle"), Buffer(label="Two", text="hay")]
    report = SearchManager.search(buffers, "needle")
    assert report.counts == {"One": 1}


def test_empty_registry_gives_sentinel():
    report = SearchManager.search({}, "anything")
    assert report.status == ReportStatus.EMPTY
    assert report.text == NO_OCCURRENCES
    assert report.text == "No occurrences found in any component"
    assert report.entries == []


def test_no_matches_gives_sentinel():
    report = SearchManager.search({"A": "abc", "B": "def"}, "xyz")
    assert report.text == "No occurrences found in any component"


def test_pattern_mode_sentinel_has_note():
    report = SearchManager.search({"A": "abc"}, "x+", use_patterns=True)
    assert report.status == ReportStatus.EMPTY
    assert report.text == PATTERN_NOTE_SENTINEL


def test_empty_search_string_reports_nothing():
    report = SearchManager.search({"A": "abc"}, "")
    assert report.status == ReportStatus.EMPTY
    assert report.text == NO_OCCURRENCES


def test_invalid_pattern_aborts_before_scanning():
    with patch("compsearch.search.search_manager.count_occurrences") as mock_count:
        report = SearchManager.search({"A": "[a"}, "[a", use_patterns=True)

    mock_count.assert_not_called()
    assert report.status == ReportStatus.ERROR
    assert not report.ok
    assert report.text == (
        "Invalid pattern: [a\n\n"
        f"Error: {_re_error('[a')}\n\n"
        "Reminder: In pattern mode, these characters must be escaped with \\:\n"
        ". [ ] * + - ? ^ $ \\"
    )


def test_invalid_pattern_message_shows_the_entered_string():
    """The message quotes the user's string, not the escaped one."""
    report = SearchManager.search({"A": "x"}, "([a", use_patterns=True)
    assert report.text.startswith("Invalid pattern: ([a\n\nError: ")


def test_parentheses_in_pattern_mode_do_not_error():
    report = SearchManager.search({"A": "print(gain)"}, "print(", use_patterns=True)
    assert report.status == ReportStatus.OK
    assert report.counts == {"A": 1}


def test_count_error_replaces_report():
    buffers = {"A": "abc", "B": "abc"}
    with patch(
        "compsearch.search.search_manager.count_occurrences",
        side_effect=[1, PatternSyntaxError("b", "boom")]
    ):
        report = SearchManager.search(buffers, "b")

    assert report.status == ReportStatus.ERROR
    assert report.text == "Pattern error: boom"
    assert report.entries == []
    assert report.counts == {}


def test_locate_error_discards_partial_results():
    buffers = {"A": "abc", "B": "abc"}
    with patch(
        "compsearch.search.search_manager.locate_occurrences",
        side_effect=[[], PatternSyntaxError("b", "boom")]
    ):
        report = SearchManager.search(buffers, "b")

    assert report.status == ReportStatus.ERROR
    assert report.text == "Pattern error during search: boom"
    assert report.entries == []


def test_search_registry_single_control(registry):
    report = SearchManager.search_registry(registry, "print")
    assert report.text == "\n".join([
        "1 occurrence found in component: Mixer",
        "  [1] Line 3, Column 1:",
        "      print(gain)",
        "      ^",
    ])


def test_search_registry_all_controls(registry):
    report = SearchManager.search_registry(registry, "print", search_all_controls=True)
    assert report.counts == {"Mixer.code": 1, "Logger.label": 1}


def test_search_registry_other_control(registry):
    report = SearchManager.search_registry(registry, "gain", control_name="label")
    assert report.counts == {"Mixer": 1}


def test_search_registry_indented_line(registry):
    report = SearchManager.search_registry(registry, "return")
    assert report.entries == [
        "1 occurrence found in component: Router",
        "  [1] Line 2, Column 3:",
        "      return x",
        "        ^",
    ]


def test_report_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="compsearch"):
        report = SearchManager.search({"A": "abc"}, "b")
    assert report.text in caplog.text


def test_error_report_is_logged_as_warning(caplog):
    with caplog.at_level(logging.INFO, logger="compsearch"):
        SearchManager.search({"A": "abc"}, "[a", use_patterns=True)
    assert any(
        record.levelno == logging.WARNING and "Invalid pattern: [a" in record.getMessage()
        for record in caplog.records
    )


def test_oversized_repeat_count_is_an_invalid_pattern():
    """re raises OverflowError rather than re.error for huge repeat counts."""
    report = SearchManager.search({"A": "aaa"}, "a{4294967296}", use_patterns=True)

    assert report.status == ReportStatus.ERROR
    assert report.text.startswith("Invalid pattern: a{4294967296}\n\nError: ")
    assert report.entries == []
