"""mdinclude: recursive, cycle-safe file inclusion for Markdown.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import mdinclude

    # Expand a document held in memory; targets resolve next to the path
    text = mdinclude.expand(source, "/docs/index.md")

    # Expand a file from disk, with settings
    settings = mdinclude.load_settings(".mdinclude.yml")
    text = mdinclude.expand_file("docs/index.md", settings)

    # List directives without resolving them
    for directive in mdinclude.find_directives(source):
        print(directive.target, directive.range_text)

    # Cut a file down to lines/words
    mdinclude.select_range("a b c\\nd e f", "1.1", "1.2")  # "b"

    mdinclude.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from mdinclude.directives.nodes import InclusionDirective
    from mdinclude.settings import IncludeSettings


def expand(
    content: str,
    path: str | None,
    settings: "IncludeSettings | None" = None,
) -> str:
    """Expand every include directive in ``content``.

    Parameters
    ----------
    content:
        Markdown source text.
    path:
        Absolute path of the document. ``None`` leaves ``content``
        unchanged, since relative targets have nothing to resolve against.
    settings:
        Expansion settings; defaults to ``IncludeSettings()``.

    Returns
    -------
    str
        The expanded text.

    Raises
    ------
    mdinclude.errors.IncludeReadError
        If an included file exists but cannot be read.
    """
    from mdinclude.resolver.expander import Expander

    return Expander(settings).expand(content, path)


def expand_file(path: str | Path, settings: "IncludeSettings | None" = None) -> str:
    """Read the Markdown file at ``path`` and expand its includes.

    Parameters
    ----------
    path:
        Path of the document, absolute or relative to the working directory.
    settings:
        Expansion settings; defaults to ``IncludeSettings()``.

    Returns
    -------
    str
        The expanded text.

    Raises
    ------
    mdinclude.errors.IncludeReadError
        If the document or an included file cannot be read.
    """
    from mdinclude.resolver.expander import Expander

    return Expander(settings).expand_file(str(path)).text


def find_directives(
    content: str, settings: "IncludeSettings | None" = None
) -> list["InclusionDirective"]:
    """List the include directives in ``content`` without resolving them.

    Returns
    -------
    list[InclusionDirective]
        Directives of every enabled syntax, ordered by offset.
    """
    from mdinclude.directives.matcher import DirectiveMatcher

    return DirectiveMatcher(settings).find_all(content)


def select_range(text: str, start: str | None = None, end: str | None = None) -> str:
    """Return the ``start``..``end`` line/word range of ``text``.

    Positions are ``"N"`` or ``"N.W"``; ``end`` is exclusive.
    """
    from mdinclude.ranges.selector import select_range as _select_range

    return _select_range(text, start, end)


def load_settings(path: str | Path) -> "IncludeSettings":
    """Load ``IncludeSettings`` from a YAML file.

    Raises
    ------
    mdinclude.errors.SettingsError
        If the file is unreadable or holds malformed settings.
    """
    from mdinclude.settings import load_settings as _load_settings

    return _load_settings(path)


from mdinclude.convenience import IncludeDocument  # noqa: E402

__all__ = [
    "__version__",
    "IncludeDocument",
    "expand",
    "expand_file",
    "find_directives",
    "load_settings",
    "select_range",
]
