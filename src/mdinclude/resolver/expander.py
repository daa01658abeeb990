"""Expander: recursively splice included files into a document.

For each active syntax in turn, the expander finds the first directive in
the buffer, replaces it with the resolved content and scans again from the
top, until that syntax no longer matches. Rescanning from the start keeps
offsets valid after every splice.

Resolving one directive:

1. Resolve the target against the including file's directory.
2. Missing file: splice the not-found message.
3. Target already on the inclusion chain (the including file or one of
   its ancestors): splice the circular-reference message without reading
   the file.
4. Otherwise read the file, select the requested range, expand the
   selection recursively, add omission markers and quote it if asked.

The inclusion chain is an immutable tuple extended on each recursive call,
so two siblings including the same file (a diamond) are not circular.

Usage
-----
::

    from mdinclude.resolver import Expander
    from mdinclude.settings import IncludeSettings

    expander = Expander(IncludeSettings(quote_formatting=True))
    text = expander.expand(source, "/docs/index.md")
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from mdinclude.directives.matcher import DirectiveMatcher
from mdinclude.directives.nodes import InclusionDirective
from mdinclude.directives.syntax import DirectiveSyntax
from mdinclude.errors import IncludeReadError
from mdinclude.plugins.registry import PluginRegistry
from mdinclude.quote.formatter import QuoteFormatter
from mdinclude.ranges.selector import RangeSelector, Selection
from mdinclude.resolver.diagnostics import DiagnosticKind, IncludeDiagnostic, offset_to_position
from mdinclude.resolver.filesystem import FileSystem, LocalFileSystem
from mdinclude.settings import IncludeSettings

logger = logging.getLogger(__name__)


def fill_template(template: str, file: str, parent: str = "") -> str:
    """Substitute ``{{FILE}}`` and ``{{PARENT}}`` in a message template."""
    return template.replace("{{FILE}}", file).replace("{{PARENT}}", parent)


@dataclass
class ExpansionResult:
    """Expanded text plus the unresolved includes met along the way.

    Parameters
    ----------
    text:
        The fully expanded document.
    diagnostics:
        One entry per not-found or circular substitution, in the order
        they were made.
    """

    text: str
    diagnostics: list[IncludeDiagnostic] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        """Return True if any directive could not be resolved."""
        return bool(self.diagnostics)


class Expander:
    """Resolves include directives recursively.

    Parameters
    ----------
    settings:
        Expansion settings; defaults to ``IncludeSettings()``.
    filesystem:
        Path resolution and file access; defaults to the local disk.
    registry:
        Registry used to look up plugin syntaxes named in the settings.

    Raises
    ------
    SettingsError
        If the settings name an unknown plugin syntax or carry an unusable
        custom pattern.
    """

    def __init__(
        self,
        settings: IncludeSettings | None = None,
        filesystem: FileSystem | None = None,
        registry: PluginRegistry[DirectiveSyntax] | None = None,
    ) -> None:
        self._settings = settings or IncludeSettings()
        self._fs: FileSystem = filesystem or LocalFileSystem()
        self._matcher = DirectiveMatcher(self._settings, registry)
        self._selector = RangeSelector()
        self._formatter = QuoteFormatter(self._settings)

    @property
    def settings(self) -> IncludeSettings:
        """Settings this expander was built with."""
        return self._settings

    @property
    def matcher(self) -> DirectiveMatcher:
        """Matcher used to find directives in each buffer."""
        return self._matcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def expand(self, content: str, path: str | None, processed: tuple[str, ...] = ()) -> str:
        """Expand every directive in ``content``.

        Parameters
        ----------
        content:
            The document text.
        path:
            Absolute path of the document; relative targets resolve
            against its directory. ``None`` returns ``content`` unchanged.
        processed:
            Absolute paths of the documents that (transitively) include
            this one. A directive pointing at any of them, or at ``path``,
            is circular.

        Returns
        -------
        str
            The expanded text.

        Raises
        ------
        IncludeReadError
            If an existing, non-circular target cannot be read. The whole
            expansion is abandoned.
        """
        return self.expand_with_report(content, path, processed).text

    def expand_with_report(
        self, content: str, path: str | None, processed: tuple[str, ...] = ()
    ) -> ExpansionResult:
        """Expand ``content`` and collect a diagnostic for every unresolved include.

        Same semantics as :meth:`expand`.
        """
        if path is None:
            logger.debug("No document path; skipping include expansion")
            return ExpansionResult(content)
        diagnostics: list[IncludeDiagnostic] = []
        text = self._expand(content, path, tuple(processed), diagnostics)
        return ExpansionResult(text, diagnostics)

    def expand_file(self, path: str) -> ExpansionResult:
        """Read ``path`` through the filesystem capability and expand it.

        Raises
        ------
        IncludeReadError
            If the root file or any included file cannot be read.
        """
        root = self._fs.resolve(os.getcwd(), path)
        return self.expand_with_report(self.read(root), root)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _expand(
        self,
        content: str,
        path: str,
        processed: tuple[str, ...],
        diagnostics: list[IncludeDiagnostic],
    ) -> str:
        chain = processed + (path,)
        for syntax in self._matcher.syntaxes():
            directive = self._matcher.find_first(content, syntax)
            while directive is not None:
                replacement = self._resolve(directive, content, path, chain, diagnostics)
                content = content[: directive.offset] + replacement + content[directive.end_offset :]
                directive = self._matcher.find_first(content, syntax)
        return content

    def _resolve(
        self,
        directive: InclusionDirective,
        content: str,
        parent: str,
        chain: tuple[str, ...],
        diagnostics: list[IncludeDiagnostic],
    ) -> str:
        child = self._fs.resolve(os.path.dirname(parent), directive.target)

        if not self._fs.exists(child):
            message = fill_template(self._settings.not_found_message, child, parent)
            logger.info("Included file %s not found (referenced from %s)", child, parent)
            diagnostics.append(
                self._diagnostic(DiagnosticKind.NOT_FOUND, message, directive, content, parent, child)
            )
            return message

        if child in chain:
            message = fill_template(self._settings.circular_message, child, parent)
            logger.info("Circular include of %s from %s", child, parent)
            diagnostics.append(
                self._diagnostic(DiagnosticKind.CIRCULAR, message, directive, content, parent, child)
            )
            return message

        logger.debug("Including %s (range %r) into %s", child, directive.range_text, parent)
        original = self.read(child)
        selection = self._selector.select(original, directive.start, directive.end)
        expanded = self._expand(selection.text, child, chain, diagnostics)
        expanded = self._mark_omissions(expanded, selection)
        if self._formatter.applies(directive):
            expanded = self._formatter.format(expanded, child, directive.start, original)
        return expanded

    def read(self, path: str) -> str:
        """Read ``path`` through the filesystem capability.

        Raises
        ------
        IncludeReadError
            If the file cannot be read or decoded.
        """
        try:
            return self._fs.read(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise IncludeReadError(path, exc) from exc

    def _mark_omissions(self, text: str, selection: Selection) -> str:
        if not self._settings.omission_indicator:
            return text
        marker = self._settings.omission_marker
        parts = [text]
        if selection.omitted_before:
            parts.insert(0, marker)
        if selection.omitted_after:
            parts.append(marker)
        return "\n".join(parts)

    @staticmethod
    def _diagnostic(
        kind: DiagnosticKind,
        message: str,
        directive: InclusionDirective,
        content: str,
        parent: str,
        child: str,
    ) -> IncludeDiagnostic:
        line, col = offset_to_position(content, directive.offset)
        return IncludeDiagnostic(
            kind=kind,
            message=message,
            parent=parent,
            target=child,
            directive=directive.raw,
            line=line,
            col=col,
        )
