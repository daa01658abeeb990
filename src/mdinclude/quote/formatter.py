"""Quote formatter: render included content as a Markdown block quote.

Every line is prefixed with ``>``; when source citations are enabled a
blank quoted line and a link back to the included file follow::

    > included text
    >
    > [Source: notes.md](vscode://file//home/me/docs/notes.md:3:7)

The link position is the directive's start position. Its column is
derived from the *original* file line, not the sliced text, because a
word offset has already been cut away from the latter.
"""
from __future__ import annotations

import os
import re
from typing import Final

from mdinclude.directives.nodes import InclusionDirective, Position, QuoteMode
from mdinclude.settings import IncludeSettings

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")

QUOTE_MARKER: Final[str] = ">"


def word_column(line: str, word: int) -> int:
    """Return the 1-based column at which word ``word`` of ``line`` begins.

    Each word before it contributes its length plus one separating space,
    so runs of whitespace count as a single character.
    """
    return 1 + sum(len(token) + 1 for token in line.split()[:word])


def source_link(path: str, line: int, column: int, scheme: str = "vscode") -> str:
    """Return the citation URL for ``path`` at ``line``:``column``."""
    normalized = path.replace("\\", "/")
    return f"{scheme}://file/{normalized}:{line}:{column}"


class QuoteFormatter:
    """Wraps included content as a block quote with an optional citation.

    Parameters
    ----------
    settings:
        Supplies the global quoting default and the citation options.
    """

    def __init__(self, settings: IncludeSettings | None = None) -> None:
        self._settings = settings or IncludeSettings()

    def applies(self, directive: InclusionDirective) -> bool:
        """Return True if ``directive``'s content should be quoted.

        An explicit ``{quote}`` or ``{noquote}`` wins over the global
        ``quote_formatting`` setting.
        """
        if directive.quote is QuoteMode.QUOTE:
            return True
        if directive.quote is QuoteMode.NOQUOTE:
            return False
        return self._settings.quote_formatting

    def quote(self, content: str) -> str:
        """Prefix every line of ``content`` with a quote marker."""
        quoted = [
            f"{QUOTE_MARKER} {line}" if line.strip() else QUOTE_MARKER
            for line in _LINE_BREAK.split(content)
        ]
        return "\n".join(quoted)

    def citation(
        self,
        source_path: str,
        start: Position | None = None,
        original: str | None = None,
    ) -> str:
        """Return the citation line for ``source_path``.

        Parameters
        ----------
        source_path:
            Absolute path of the included file.
        start:
            Start position of the directive's range, if any.
        original:
            The full, unsliced file content; needed only when ``start``
            carries a word offset.
        """
        line = start.line if start is not None else 1
        column = 1
        if start is not None and start.word and original is not None:
            lines = _LINE_BREAK.split(original)
            index = line - 1
            if 0 <= index < len(lines):
                column = word_column(lines[index], start.word)
        label = self._settings.quote_source_label
        link = source_link(source_path, line, column, self._settings.quote_link_scheme)
        return f"{QUOTE_MARKER} [{label}: {os.path.basename(source_path)}]({link})"

    def format(
        self,
        content: str,
        source_path: str,
        start: Position | None = None,
        original: str | None = None,
    ) -> str:
        """Quote ``content`` and, if enabled, append the source citation."""
        quoted = self.quote(content)
        if not self._settings.quote_include_source:
            return quoted
        return "\n".join([quoted, QUOTE_MARKER, self.citation(source_path, start, original)])
