"""Directive matcher: picks the active syntaxes and finds directives with them.

The expander consumes one directive at a time and rescans from the start
of the buffer after every splice, so the matcher's main operation is
``find_first``. ``find_all`` exists for listing directives without
resolving them (the ``directives`` CLI command).
"""
from __future__ import annotations

import logging

from mdinclude.directives.nodes import InclusionDirective
from mdinclude.directives.syntax import (
    SYNTAX_ENTRYPOINT_GROUP,
    CommonmarkSyntax,
    CustomPatternSyntax,
    DirectiveSyntax,
    MarkdownItSyntax,
    syntax_registry,
)
from mdinclude.errors import SettingsError
from mdinclude.plugins.registry import PluginNotFoundError, PluginRegistry
from mdinclude.settings import IncludeSettings

logger = logging.getLogger(__name__)


class DirectiveMatcher:
    """Finds include directives using the syntaxes enabled in ``settings``.

    Syntaxes apply in a fixed order: commonmark, markdown-it, the custom
    pattern, then any plugin syntaxes named in ``settings.syntaxes``.

    Parameters
    ----------
    settings:
        The settings that enable or disable each syntax.
    registry:
        Where plugin syntaxes are looked up. Defaults to the global
        syntax registry.

    Raises
    ------
    SettingsError
        If ``settings.syntaxes`` names a syntax that is not installed.
    """

    def __init__(
        self,
        settings: IncludeSettings | None = None,
        registry: PluginRegistry[DirectiveSyntax] | None = None,
    ) -> None:
        self._settings = settings or IncludeSettings()
        self._registry = registry if registry is not None else syntax_registry
        self._syntaxes = self._build_syntaxes()

    def _build_syntaxes(self) -> list[DirectiveSyntax]:
        settings = self._settings
        syntaxes: list[DirectiveSyntax] = []
        if settings.commonmark_regex:
            syntaxes.append(CommonmarkSyntax())
        if settings.markdown_it_regex:
            syntaxes.append(MarkdownItSyntax())
        if settings.custom_pattern:
            syntaxes.append(CustomPatternSyntax(settings.custom_pattern))
        if settings.syntaxes:
            self._registry.load_entrypoints(SYNTAX_ENTRYPOINT_GROUP)
            for name in settings.syntaxes:
                try:
                    syntaxes.append(self._registry.get(name)())
                except PluginNotFoundError as exc:
                    raise SettingsError(
                        f"no directive syntax named {name!r} is installed", key="syntaxes"
                    ) from exc
        logger.debug("Active directive syntaxes: %s", [s.name for s in syntaxes])
        return syntaxes

    def syntaxes(self) -> list[DirectiveSyntax]:
        """Return the active syntaxes in application order."""
        return list(self._syntaxes)

    def find_first(self, content: str, syntax: DirectiveSyntax) -> InclusionDirective | None:
        """Return the earliest ``syntax`` directive in ``content``, or ``None``."""
        return syntax.search(content)

    def find_all(self, content: str) -> list[InclusionDirective]:
        """Return the directives of every active syntax, sorted by offset.

        Each syntax scans independently, so a region matched by two
        syntaxes is reported once per syntax.
        """
        found: list[InclusionDirective] = []
        for syntax in self._syntaxes:
            found.extend(syntax.finditer(content))
        found.sort(key=lambda directive: directive.offset)
        return found

    def has_directives(self, content: str) -> bool:
        """Return True if any active syntax matches ``content``."""
        return any(syntax.search(content) is not None for syntax in self._syntaxes)
