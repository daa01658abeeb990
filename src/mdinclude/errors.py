"""Exception types for mdinclude.

Not-found and circular includes are never raised: the expander splices a
message into the document instead. The exceptions here cover the failures
that abandon a whole expansion (an unreadable file) or stop it before it
starts (bad settings).
"""
from __future__ import annotations


class IncludeError(Exception):
    """Base class for all mdinclude errors."""


class IncludeReadError(IncludeError):
    """Raised when an existing, non-circular include target cannot be read.

    The error propagates to the root caller; no partially expanded
    document is returned.

    Parameters
    ----------
    path:
        Absolute path of the file that failed to read.
    cause:
        The underlying exception (``OSError`` or ``UnicodeDecodeError``).
    """

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"Cannot read included file {path!r}: {cause}")
        self.path = path
        self.cause = cause


class SettingsError(IncludeError, ValueError):
    """Raised when include settings are malformed.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    key:
        The offending settings key, when one can be named.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        prefix = f"Invalid setting {key!r}: " if key else "Invalid settings: "
        super().__init__(prefix + message)
        self.key = key
        self.settings_message = message
