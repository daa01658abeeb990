"""Plugin subsystem for mdinclude.

Directive syntaxes beyond the built-in two are discovered from the
``mdinclude.syntaxes`` entry-point group and stored in a
:class:`PluginRegistry`.
"""
from __future__ import annotations

from mdinclude.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = [
    "PluginAlreadyRegisteredError",
    "PluginNotFoundError",
    "PluginRegistry",
]
