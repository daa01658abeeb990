"""Unit tests for mdinclude.quote.formatter."""
from __future__ import annotations

import pytest

from mdinclude.directives import InclusionDirective, Position, QuoteMode
from mdinclude.quote import QuoteFormatter, source_link, word_column
from mdinclude.settings import IncludeSettings


def _directive(quote: QuoteMode = QuoteMode.INHERIT) -> InclusionDirective:
    return InclusionDirective(
        syntax="commonmark", target="n.md", offset=0, length=7, raw=":(n.md)", quote=quote
    )


class TestWordColumn:
    @pytest.mark.parametrize(
        ("line", "word", "expected"),
        [
            ("a b c", 0, 1),
            ("a b c", 2, 5),
            ("alpha beta gamma", 1, 7),
            ("alpha   beta gamma", 2, 12),
        ],
    )
    def test_column(self, line: str, word: int, expected: int) -> None:
        assert word_column(line, word) == expected


class TestSourceLink:
    def test_posix_path(self) -> None:
        assert source_link("/docs/a.md", 2, 3) == "vscode://file//docs/a.md:2:3"

    def test_backslashes_become_slashes(self) -> None:
        assert source_link("C:\\docs\\a.md", 2, 3) == "vscode://file/C:/docs/a.md:2:3"

    def test_custom_scheme(self) -> None:
        assert source_link("/a.md", 1, 1, "cursor") == "cursor://file//a.md:1:1"


class TestQuoteFormatterApplies:
    def test_explicit_quote_wins_over_global_off(self) -> None:
        formatter = QuoteFormatter(IncludeSettings(quote_formatting=False))
        assert formatter.applies(_directive(QuoteMode.QUOTE)) is True

    def test_explicit_noquote_wins_over_global_on(self) -> None:
        formatter = QuoteFormatter(IncludeSettings(quote_formatting=True))
        assert formatter.applies(_directive(QuoteMode.NOQUOTE)) is False

    @pytest.mark.parametrize("enabled", [True, False])
    def test_inherit_follows_global_setting(self, enabled: bool) -> None:
        formatter = QuoteFormatter(IncludeSettings(quote_formatting=enabled))
        assert formatter.applies(_directive()) is enabled


class TestQuoteFormatterQuote:
    def setup_method(self) -> None:
        self.formatter = QuoteFormatter()

    def test_every_line_is_prefixed(self) -> None:
        assert self.formatter.quote("a\nb") == "> a\n> b"

    def test_blank_lines_get_a_bare_marker(self) -> None:
        assert self.formatter.quote("a\n\n   \nb") == "> a\n>\n>\n> b"

    def test_crlf_is_normalised(self) -> None:
        assert self.formatter.quote("x\r\ny") == "> x\n> y"


class TestQuoteFormatterCitation:
    def test_default_citation_points_at_line_one(self) -> None:
        formatter = QuoteFormatter()
        assert formatter.citation("/docs/notes.md") == (
            "> [Source: notes.md](vscode://file//docs/notes.md:1:1)"
        )

    def test_start_line_is_used(self) -> None:
        formatter = QuoteFormatter()
        citation = formatter.citation("/docs/notes.md", Position(4))
        assert citation.endswith("notes.md:4:1)")

    def test_word_offset_column_comes_from_original_line(self) -> None:
        formatter = QuoteFormatter()
        original = "l1\nl2\nalpha  beta gamma"
        citation = formatter.citation("/docs/notes.md", Position(3, 2), original)
        assert citation.endswith("notes.md:3:12)")

    def test_word_offset_past_end_of_file_keeps_column_one(self) -> None:
        formatter = QuoteFormatter()
        citation = formatter.citation("/docs/notes.md", Position(10, 1), "short")
        assert citation.endswith("notes.md:10:1)")

    def test_label_and_scheme_come_from_settings(self) -> None:
        settings = IncludeSettings(quote_source_label="From", quote_link_scheme="cursor")
        citation = QuoteFormatter(settings).citation("/docs/notes.md")
        assert citation == "> [From: notes.md](cursor://file//docs/notes.md:1:1)"


class TestQuoteFormatterFormat:
    def test_quote_with_citation(self) -> None:
        formatter = QuoteFormatter()
        assert formatter.format("x\ny", "/d/n.md") == (
            "> x\n> y\n>\n> [Source: n.md](vscode://file//d/n.md:1:1)"
        )

    def test_quote_without_citation(self) -> None:
        formatter = QuoteFormatter(IncludeSettings(quote_include_source=False))
        assert formatter.format("x\ny", "/d/n.md") == "> x\n> y"
