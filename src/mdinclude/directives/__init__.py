"""Directive module.

Exports the directive data model, the built-in syntaxes, and the
``DirectiveMatcher``.
"""
from __future__ import annotations

from mdinclude.directives.matcher import DirectiveMatcher
from mdinclude.directives.nodes import InclusionDirective, Position, QuoteMode
from mdinclude.directives.syntax import (
    COMMONMARK_PATTERN,
    MARKDOWN_IT_PATTERN,
    SYNTAX_ENTRYPOINT_GROUP,
    CommonmarkSyntax,
    CustomPatternSyntax,
    DirectiveSyntax,
    MarkdownItSyntax,
    syntax_registry,
)

__all__ = [
    "COMMONMARK_PATTERN",
    "MARKDOWN_IT_PATTERN",
    "SYNTAX_ENTRYPOINT_GROUP",
    "CommonmarkSyntax",
    "CustomPatternSyntax",
    "DirectiveMatcher",
    "DirectiveSyntax",
    "InclusionDirective",
    "MarkdownItSyntax",
    "Position",
    "QuoteMode",
    "syntax_registry",
]
