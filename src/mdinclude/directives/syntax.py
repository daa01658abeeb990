"""Directive syntaxes: the regular expressions that recognise include markers.

Two syntaxes are built in:

``commonmark``
    ``:[label|alt](path/to/file.md#L2-5){quote}``. The bracketed label and
    its ``|`` are optional; the parenthesised target is required and may
    not contain ``)`` or ``#``.

``markdown-it``
    ``!!! include( path/to/file.md #L2.1-5 ) {noquote} !!!``. The keyword
    is case-insensitive and whitespace is free around every part.

Both accept the same range suffix, ``#L<start>`` or ``#L<start>-<end>``
where each position is ``N`` or ``N.W``, and the same optional
``{quote}``/``{noquote}`` modifier.

Every syntax exposes the same named groups (``target``, ``start``,
``end``, ``quote``, plus ``label``/``alt`` for commonmark), so a single
``extract`` turns any match into an :class:`InclusionDirective`.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar, Final

from mdinclude.directives.nodes import InclusionDirective, Position, QuoteMode
from mdinclude.errors import SettingsError
from mdinclude.plugins.registry import PluginRegistry

SYNTAX_ENTRYPOINT_GROUP: Final[str] = "mdinclude.syntaxes"

_POSITION: Final[str] = r"\d+(?:\.\d+)?"

COMMONMARK_PATTERN: Final[re.Pattern[str]] = re.compile(
    r":(?:\[(?P<label>[^|\]]*)\|?(?P<alt>[^\]]*)\])?"
    r"\((?P<target>[^)#]+)"
    rf"(?:#L(?P<start>{_POSITION})(?:-(?P<end>{_POSITION}))?)?"
    r"\)"
    r"(?:\{(?P<quote>quote|noquote)\})?",
    re.IGNORECASE,
)

MARKDOWN_IT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"!{3}\s*include\s*\(\s*(?P<target>.+?)"
    rf"(?:\s*#L(?P<start>{_POSITION})(?:-(?P<end>{_POSITION}))?)?"
    r"\s*\)\s*"
    r"(?:\{\s*(?P<quote>quote|noquote)\s*\}\s*)?"
    r"!{3}",
    re.IGNORECASE,
)


class DirectiveSyntax(ABC):
    """One surface syntax for include directives.

    Subclasses provide ``name`` and a compiled ``pattern`` with at least a
    ``target`` named group.
    """

    name: ClassVar[str] = ""

    @property
    @abstractmethod
    def pattern(self) -> re.Pattern[str]:
        """The compiled directive pattern."""

    def search(self, content: str, pos: int = 0) -> InclusionDirective | None:
        """Return the first directive at or after ``pos``, or ``None``."""
        match = self.pattern.search(content, pos)
        return self.extract(match) if match is not None else None

    def finditer(self, content: str) -> Iterator[InclusionDirective]:
        """Yield every non-overlapping directive in ``content``."""
        for match in self.pattern.finditer(content):
            yield self.extract(match)

    def extract(self, match: re.Match[str]) -> InclusionDirective:
        """Normalise a regex match into an ``InclusionDirective``.

        Raises
        ------
        ValueError
            If the captured range or quote modifier is malformed.
        """
        groups = match.groupdict()
        start = groups.get("start")
        end = groups.get("end")
        return InclusionDirective(
            syntax=self.name,
            target=(groups["target"] or "").strip(),
            offset=match.start(),
            length=match.end() - match.start(),
            raw=match.group(0),
            start=Position.parse(start) if start else None,
            end=Position.parse(end) if end else None,
            quote=QuoteMode.parse(groups.get("quote")),
            label=groups.get("label"),
            alt=groups.get("alt"),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


syntax_registry: PluginRegistry[DirectiveSyntax] = PluginRegistry(DirectiveSyntax, "syntaxes")


@syntax_registry.register("commonmark")
class CommonmarkSyntax(DirectiveSyntax):
    """``:[label|alt](file#Lstart-end){quote}``"""

    name = "commonmark"
    pattern = COMMONMARK_PATTERN


@syntax_registry.register("markdown-it")
class MarkdownItSyntax(DirectiveSyntax):
    """``!!! include(file #Lstart-end) {quote} !!!``"""

    name = "markdown-it"
    pattern = MARKDOWN_IT_PATTERN


class CustomPatternSyntax(DirectiveSyntax):
    """A user-supplied directive regex from the ``custom_pattern`` setting.

    The pattern is compiled case-insensitively and must define a
    ``target`` group; ``start``, ``end`` and ``quote`` are optional.
    """

    name = "custom"

    def __init__(self, source: str) -> None:
        try:
            self._pattern = re.compile(source, re.IGNORECASE)
        except re.error as exc:
            raise SettingsError(f"not a valid regular expression: {exc}", key="custom_pattern") from exc
        if "target" not in self._pattern.groupindex:
            raise SettingsError("pattern must define a named group 'target'", key="custom_pattern")

    @property
    def pattern(self) -> re.Pattern[str]:
        """The user pattern, compiled case-insensitively."""
        return self._pattern

    def extract(self, match: re.Match[str]) -> InclusionDirective:
        try:
            return super().extract(match)
        except ValueError as exc:
            raise SettingsError(
                f"match {match.group(0)!r} is not a usable directive: {exc}",
                key="custom_pattern",
            ) from exc
