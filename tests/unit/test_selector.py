"""Unit tests for mdinclude.ranges.selector."""
from __future__ import annotations

import pytest

from mdinclude.directives.nodes import Position
from mdinclude.ranges import RangeSelector, Selection, select_range

TEXT = "a b c\nd e f\ng h i"


@pytest.fixture()
def selector() -> RangeSelector:
    return RangeSelector()


# ===========================================================================
# Line ranges
# ===========================================================================


class TestLineRanges:
    def test_no_start_returns_text_unchanged(self) -> None:
        assert select_range(TEXT) == TEXT

    def test_empty_start_returns_text_unchanged(self) -> None:
        assert select_range(TEXT, "") == TEXT

    def test_end_without_start_is_ignored(self) -> None:
        assert select_range(TEXT, None, "2") == TEXT

    def test_start_only_selects_that_line(self) -> None:
        assert select_range(TEXT, "2") == "d e f"

    def test_end_line_is_exclusive(self) -> None:
        assert select_range(TEXT, "1", "3") == "a b c\nd e f"

    def test_equal_start_and_end_lines_is_empty(self) -> None:
        assert select_range(TEXT, "2", "2") == ""

    def test_end_before_start_is_empty(self) -> None:
        assert select_range(TEXT, "3", "2") == ""

    def test_end_past_last_line_takes_the_rest(self) -> None:
        assert select_range(TEXT, "2", "99") == "d e f\ng h i"

    def test_start_past_last_line_is_empty(self) -> None:
        assert select_range(TEXT, "10") == ""

    def test_line_zero_is_clamped_to_first_line(self) -> None:
        assert select_range(TEXT, "0") == "a b c"

    def test_crlf_line_breaks(self) -> None:
        assert select_range("x\r\ny\r\nz", "2") == "y"

    def test_whole_lines_are_copied_verbatim(self) -> None:
        assert select_range("a   b  c\nnext", "1") == "a   b  c"

    def test_accepts_position_objects(self) -> None:
        assert select_range(TEXT, Position(3)) == "g h i"  # type: ignore[arg-type]

    def test_invalid_position_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid range position"):
            select_range(TEXT, "two")


# ===========================================================================
# Word ranges
# ===========================================================================


class TestWordRanges:
    def test_word_range_within_one_line(self) -> None:
        assert select_range(TEXT, "1.1", "1.2") == "b"

    def test_start_word_without_end_takes_rest_of_line(self) -> None:
        assert select_range(TEXT, "2.1") == "e f"

    def test_word_zero_keeps_the_line_verbatim(self) -> None:
        assert select_range("a   b  c", "1.0") == "a   b  c"

    def test_start_word_collapses_whitespace(self) -> None:
        assert select_range("a   b  c", "1.1") == "b c"

    def test_word_range_across_lines(self) -> None:
        assert select_range(TEXT, "1.1", "3.2") == "b c\nd e f\ng h"

    def test_end_word_zero_drops_the_end_line(self) -> None:
        assert select_range(TEXT, "1", "2.0") == "a b c\n"

    def test_end_word_only(self) -> None:
        assert select_range(TEXT, "1", "2.1") == "a b c\nd"

    def test_start_word_past_line_end_is_empty(self) -> None:
        assert select_range(TEXT, "1.9") == ""


# ===========================================================================
# Selection flags
# ===========================================================================


class TestSelectionFlags:
    def test_whole_text_has_no_omissions(self, selector: RangeSelector) -> None:
        assert selector.select(TEXT) == Selection(TEXT, False, False)

    def test_middle_line_omits_both_sides(self, selector: RangeSelector) -> None:
        selection = selector.select(TEXT, "2")
        assert selection.omitted_before is True
        assert selection.omitted_after is True

    def test_all_lines_selected_has_no_omissions(self, selector: RangeSelector) -> None:
        selection = selector.select(TEXT, "1", "4")
        assert selection.text == TEXT
        assert selection.omitted_before is False
        assert selection.omitted_after is False

    def test_trailing_newline_is_not_content(self, selector: RangeSelector) -> None:
        selection = selector.select(TEXT + "\n", "3")
        assert selection.text == "g h i"
        assert selection.omitted_before is True
        assert selection.omitted_after is False

    def test_start_word_counts_as_omission_before(self, selector: RangeSelector) -> None:
        selection = selector.select("a b c", "1.1")
        assert selection.omitted_before is True
        assert selection.omitted_after is False

    def test_end_word_counts_as_omission_after(self, selector: RangeSelector) -> None:
        selection = selector.select("a b c", "1.0", "1.2")
        assert selection.text == "a b"
        assert selection.omitted_before is False
        assert selection.omitted_after is True
