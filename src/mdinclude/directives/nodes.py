"""Data model for include directives.

An ``InclusionDirective`` is one occurrence of an include marker inside a
document buffer. It records where the marker sits (so the expander can
splice over it), what it points at, which part of the target to take and
whether the result should be quoted.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

_POSITION_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+)(?:\.(\d+))?\s*$")


class QuoteMode(Enum):
    """Per-directive quoting override.

    INHERIT
        No modifier given; the global ``quote_formatting`` setting decides.
    QUOTE
        ``{quote}``: always quote.
    NOQUOTE
        ``{noquote}``: never quote.
    """

    INHERIT = "inherit"
    QUOTE = "quote"
    NOQUOTE = "noquote"

    @classmethod
    def parse(cls, value: str | None) -> QuoteMode:
        """Map a captured modifier (case-insensitive) to a ``QuoteMode``."""
        if not value:
            return cls.INHERIT
        return cls(value.strip().lower())


@dataclass(frozen=True)
class Position:
    """A point in a file addressed as ``line`` or ``line.word``.

    Parameters
    ----------
    line:
        1-based line number.
    word:
        0-based word index within the line, or ``None`` when the position
        named a whole line.
    """

    line: int
    word: int | None = None

    @classmethod
    def parse(cls, value: str) -> Position:
        """Parse ``"N"`` or ``"N.W"``.

        Raises
        ------
        ValueError
            If ``value`` does not follow either shape.
        """
        match = _POSITION_RE.match(value)
        if match is None:
            raise ValueError(f"Invalid range position {value!r}: expected 'N' or 'N.W'")
        word = match.group(2)
        return cls(line=int(match.group(1)), word=int(word) if word is not None else None)

    def __str__(self) -> str:
        return str(self.line) if self.word is None else f"{self.line}.{self.word}"


@dataclass(frozen=True)
class InclusionDirective:
    """A single include directive found in a document.

    Parameters
    ----------
    syntax:
        Name of the syntax that matched, e.g. ``"commonmark"``.
    target:
        Referenced path, trimmed of surrounding whitespace.
    offset:
        0-based character offset of the match in the scanned buffer.
    length:
        Length of the matched text.
    raw:
        The matched text itself.
    start:
        First position to include, or ``None`` for the whole file.
    end:
        Exclusive end position, or ``None``.
    quote:
        Quoting override carried by the directive.
    label:
        Bracketed label text (``:[label|alt](...)`` syntax only).
    alt:
        Alternate text after ``|`` in the bracketed label.
    """

    syntax: str
    target: str
    offset: int
    length: int
    raw: str
    start: Position | None = None
    end: Position | None = None
    quote: QuoteMode = QuoteMode.INHERIT
    label: str | None = None
    alt: str | None = None

    @property
    def end_offset(self) -> int:
        """Offset just past the matched text."""
        return self.offset + self.length

    @property
    def range_text(self) -> str:
        """The range as written after ``#L``, or ``""`` when absent."""
        if self.start is None:
            return ""
        if self.end is None:
            return str(self.start)
        return f"{self.start}-{self.end}"
