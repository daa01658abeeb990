"""Diagnostics recorded while expanding a document.

Not-found and circular includes are resolved by splicing a message into
the text, so expansion always succeeds. Each such substitution is also
recorded as an ``IncludeDiagnostic`` so callers (and ``mdinclude check``)
can report them without searching the output for message templates.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Why a directive was replaced by a message."""

    NOT_FOUND = "INC001"
    CIRCULAR = "INC002"

    @property
    def code(self) -> str:
        """Short code shown in reports, such as ``INC001``."""
        return self.value


@dataclass(frozen=True)
class IncludeDiagnostic:
    """A single unresolved include.

    Parameters
    ----------
    kind:
        Not found or circular.
    message:
        The filled-in message template that replaced the directive.
    parent:
        Absolute path of the file containing the directive.
    target:
        Resolved absolute path the directive pointed at.
    directive:
        The raw directive text.
    line:
        1-based line of the directive in the buffer being expanded.
    col:
        1-based column of the directive in that buffer.
    """

    kind: DiagnosticKind
    message: str
    parent: str
    target: str
    directive: str
    line: int
    col: int

    @property
    def code(self) -> str:
        """Short code shown in reports, such as ``INC001``."""
        return self.kind.code

    def __str__(self) -> str:
        return f"[{self.code}] {self.parent}:{self.line}:{self.col}: {self.message}"


def offset_to_position(content: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based ``(line, column)`` pair."""
    line = content.count("\n", 0, offset) + 1
    line_start = content.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1
