"""Entry trigger: hook include expansion into a host rendering pipeline.

The host supplies a callable returning the path of the active document
(or ``None`` when there is none). The trigger expands the source text
against that path. It follows the core-rule convention of Markdown
pipelines such as markdown-it: the hook receives a state object and
rewrites its ``src`` attribute in place.

Example
-------
::

    from mdinclude.trigger import IncludeTrigger

    trigger = IncludeTrigger(lambda: editor.active_path)
    html_source = trigger.process(editor.text)

    # or, as a pipeline rule
    md.core.ruler.before("normalize", "include", trigger)
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from mdinclude.resolver.expander import Expander
from mdinclude.resolver.filesystem import FileSystem
from mdinclude.settings import IncludeSettings

logger = logging.getLogger(__name__)

DocumentPathProvider = Callable[[], "str | None"]


class IncludeTrigger:
    """Expands the active document's text against its path.

    Parameters
    ----------
    provider:
        Returns the absolute path of the active document, or ``None``.
    settings:
        Expansion settings; defaults to ``IncludeSettings()``.
    filesystem:
        Filesystem capability; defaults to the local disk.
    """

    def __init__(
        self,
        provider: DocumentPathProvider,
        settings: IncludeSettings | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self._provider = provider
        self._expander = Expander(settings, filesystem)

    def process(self, text: str) -> str:
        """Return ``text`` with includes expanded, or unchanged with no active document."""
        path = self._provider()
        if not path:
            logger.debug("No active document; leaving source untouched")
            return text
        return self._expander.expand(text, path)

    def __call__(self, state: Any) -> None:
        """Pipeline hook: replace ``state.src`` with its expansion.

        ``state.src`` is only assigned once expansion succeeds.
        """
        state.src = self.process(state.src)
