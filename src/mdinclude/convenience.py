"""Convenience API for mdinclude: a file-bound document wrapper.

The top-level ``mdinclude`` module already exposes ``expand`` and
``expand_file``. ``IncludeDocument`` adds a small object for the common
"load a file, look at its directives, expand it" flow.

Example
-------
::

    from mdinclude import IncludeDocument

    doc = IncludeDocument("docs/index.md")
    for directive in doc.directives():
        print(directive.target)
    text = doc.expand()
"""
from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdinclude.directives.nodes import InclusionDirective
    from mdinclude.resolver.diagnostics import IncludeDiagnostic
    from mdinclude.resolver.filesystem import FileSystem
    from mdinclude.settings import IncludeSettings


class IncludeDocument:
    """A Markdown file whose includes can be listed, checked and expanded.

    Parameters
    ----------
    path:
        Path of the document; made absolute on construction.
    settings:
        Expansion settings; defaults to ``IncludeSettings()``.
    filesystem:
        Filesystem capability; defaults to the local disk.

    Raises
    ------
    IncludeReadError
        If the document itself cannot be read.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        settings: "IncludeSettings | None" = None,
        filesystem: "FileSystem | None" = None,
    ) -> None:
        from mdinclude.resolver.expander import Expander

        self._expander = Expander(settings, filesystem)
        self._path = os.path.abspath(os.fspath(path))
        self._source = self._expander.read(self._path)

    @property
    def path(self) -> str:
        """Absolute path of the document."""
        return self._path

    @property
    def source(self) -> str:
        """The document text as read from disk."""
        return self._source

    def directives(self) -> list["InclusionDirective"]:
        """Return the directives in the document, without resolving them."""
        return self._expander.matcher.find_all(self._source)

    def expand(self) -> str:
        """Return the document with every include expanded."""
        return self._expander.expand(self._source, self._path)

    def check(self) -> list["IncludeDiagnostic"]:
        """Expand the document and return its unresolved includes."""
        return self._expander.expand_with_report(self._source, self._path).diagnostics

    def is_clean(self) -> bool:
        """Return True if every include resolves."""
        return not self.check()

    def __repr__(self) -> str:
        return f"IncludeDocument(path={self._path!r})"
