"""Resolver module.

Exports the ``Expander``, its result and diagnostic types, and the
filesystem capability it runs against.
"""
from __future__ import annotations

from mdinclude.resolver.diagnostics import DiagnosticKind, IncludeDiagnostic
from mdinclude.resolver.expander import Expander, ExpansionResult, fill_template
from mdinclude.resolver.filesystem import FileSystem, LocalFileSystem

__all__ = [
    "DiagnosticKind",
    "Expander",
    "ExpansionResult",
    "FileSystem",
    "IncludeDiagnostic",
    "LocalFileSystem",
    "fill_template",
]
