"""Range selector: cut a file down to a line/word range.

Positions are written ``N`` (line N, 1-based) or ``N.W`` (line N from word
W, 0-based, where a word is a maximal run of non-whitespace). The end
position is exclusive:

- no end: exactly the start line;
- end ``N``: stop before line N, so ``1-3`` keeps lines 1 and 2;
- end ``N.W``: keep line N up to, not including, word W.

Once a word boundary is involved, the first selected line (and the last
one, when several are selected) is re-joined with single spaces between
the surviving words. Interior lines are copied verbatim.

Usage
-----
::

    from mdinclude.ranges import select_range

    select_range("a b c\\nd e f\\ng h i", "2")         # "d e f"
    select_range("a b c\\nd e f\\ng h i", "1.1", "1.2")  # "b"
    select_range("a b c\\nd e f\\ng h i", "1", "3")      # "a b c\\nd e f"
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Union

from mdinclude.directives.nodes import Position

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")

PositionLike = Union[str, Position, None]


@dataclass(frozen=True)
class Selection:
    """The outcome of a range selection.

    Parameters
    ----------
    text:
        The selected text.
    omitted_before:
        True if content preceding the selection was cut away.
    omitted_after:
        True if content following the selection was cut away.
    """

    text: str
    omitted_before: bool = False
    omitted_after: bool = False


def _coerce(value: PositionLike) -> Position | None:
    if value is None or isinstance(value, Position):
        return value
    if not value.strip():
        return None
    return Position.parse(value)


class RangeSelector:
    """Slices text by line and word positions."""

    def select(self, text: str, start: PositionLike = None, end: PositionLike = None) -> Selection:
        """Select the part of ``text`` between ``start`` and ``end``.

        Parameters
        ----------
        text:
            The full file content.
        start:
            First position to keep. ``None`` returns ``text`` unchanged.
        end:
            Exclusive end position. Ignored when ``start`` is ``None``.

        Returns
        -------
        Selection
            The selected text plus whether anything was cut on either side.

        Raises
        ------
        ValueError
            If a string position is neither ``N`` nor ``N.W``.
        """
        start_pos = _coerce(start)
        end_pos = _coerce(end)
        if start_pos is None:
            return Selection(text)

        lines = _LINE_BREAK.split(text)
        start_index = max(start_pos.line - 1, 0)
        start_word = start_pos.word or 0

        end_word: int | None = None
        if end_pos is None:
            end_index = start_index + 1
        elif end_pos.word is None:
            end_index = max(end_pos.line - 1, 0)
        else:
            end_index = end_pos.line
            end_word = end_pos.word

        selected = lines[start_index:end_index]
        if not selected:
            return Selection("")

        last_words = len(selected[-1].split())
        if start_word > 0 or end_word is not None:
            first = selected[0].split()
            if len(selected) == 1:
                selected[0] = " ".join(first[start_word:end_word])
            else:
                selected[0] = " ".join(first[start_word:])
                selected[-1] = " ".join(selected[-1].split()[:end_word])

        # A trailing newline does not count as a line of content
        content_lines = len(lines) - 1 if lines[-1] == "" else len(lines)
        omitted_before = start_index > 0 or start_word > 0
        omitted_after = start_index + len(selected) < content_lines or (
            end_word is not None and end_word < last_words
        )
        return Selection("\n".join(selected), omitted_before, omitted_after)


def select_range(text: str, start: PositionLike = None, end: PositionLike = None) -> str:
    """Return the part of ``text`` between ``start`` and ``end``.

    See :meth:`RangeSelector.select` for the position rules.
    """
    return RangeSelector().select(text, start, end).text
