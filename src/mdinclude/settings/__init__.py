"""Settings module.

Exports ``IncludeSettings`` and the YAML loading helpers.
"""
from __future__ import annotations

from mdinclude.settings.settings import (
    DEFAULT_CIRCULAR_MESSAGE,
    DEFAULT_NOT_FOUND_MESSAGE,
    SETTINGS_FILENAMES,
    IncludeSettings,
    find_settings_file,
    load_settings,
)

__all__ = [
    "DEFAULT_CIRCULAR_MESSAGE",
    "DEFAULT_NOT_FOUND_MESSAGE",
    "SETTINGS_FILENAMES",
    "IncludeSettings",
    "find_settings_file",
    "load_settings",
]
