"""Include settings: defaults, mapping conversion, and YAML loading.

Settings are resolved once per root expansion and never mutated. Hosts
usually spell keys in camelCase (``commonmarkRegex``, ``quoteSourceLabel``)
while Python callers use the dataclass field names; both are accepted.

Usage
-----
::

    from mdinclude.settings import IncludeSettings, load_settings

    settings = IncludeSettings(quote_formatting=True)
    settings = IncludeSettings.from_mapping({"quoteSourceLabel": "From"})
    settings = load_settings(".mdinclude.yml")
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final

import yaml

from mdinclude.errors import SettingsError

DEFAULT_NOT_FOUND_MESSAGE: Final[str] = "File '{{FILE}}' not found"
DEFAULT_CIRCULAR_MESSAGE: Final[str] = "Circular reference between '{{FILE}}' and '{{PARENT}}'"
DEFAULT_SOURCE_LABEL: Final[str] = "Source"
DEFAULT_LINK_SCHEME: Final[str] = "vscode"
DEFAULT_OMISSION_MARKER: Final[str] = "[...]"

SETTINGS_FILENAMES: Final[tuple[str, ...]] = (".mdinclude.yml", ".mdinclude.yaml")

# Top-level sections unwrapped by ``load_settings``
_SECTION_KEYS: Final[tuple[str, ...]] = ("include", "markdown-include")

# Empty strings fall back to the default for these fields
_FALLBACK_FIELDS: Final[frozenset[str]] = frozenset(
    {"not_found_message", "circular_message", "quote_source_label", "quote_link_scheme"}
)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class IncludeSettings:
    """Immutable configuration for one expansion.

    Parameters
    ----------
    commonmark_regex:
        Enable the ``:[label](file)`` directive syntax.
    markdown_it_regex:
        Enable the ``!!! include(file) !!!`` directive syntax.
    custom_pattern:
        Optional extra directive regex with a ``target`` named group and
        optional ``start``, ``end`` and ``quote`` groups.
    not_found_message:
        Template spliced in for missing files; ``{{FILE}}`` is the
        resolved path.
    circular_message:
        Template spliced in for circular includes; ``{{FILE}}`` is the
        resolved path and ``{{PARENT}}`` the including file.
    quote_formatting:
        Quote included content unless a directive says ``{noquote}``.
    quote_include_source:
        Append a source citation to quoted content.
    quote_source_label:
        Label text of the citation link.
    quote_link_scheme:
        URI scheme of the citation link.
    omission_indicator:
        Mark content cut away by a line/word range.
    omission_marker:
        Text of the omission line.
    syntaxes:
        Names of extra registered directive syntaxes to apply after the
        built-in ones.
    """

    commonmark_regex: bool = True
    markdown_it_regex: bool = True
    custom_pattern: str | None = None
    not_found_message: str = DEFAULT_NOT_FOUND_MESSAGE
    circular_message: str = DEFAULT_CIRCULAR_MESSAGE
    quote_formatting: bool = False
    quote_include_source: bool = True
    quote_source_label: str = DEFAULT_SOURCE_LABEL
    quote_link_scheme: str = DEFAULT_LINK_SCHEME
    omission_indicator: bool = False
    omission_marker: str = DEFAULT_OMISSION_MARKER
    syntaxes: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "custom_pattern":
                if value is not None:
                    self._check_custom_pattern(value)
            elif item.name == "syntaxes":
                if not isinstance(value, tuple) or not all(isinstance(v, str) for v in value):
                    raise SettingsError("expected a list of syntax names", key=item.name)
            elif isinstance(item.default, bool):
                if not isinstance(value, bool):
                    raise SettingsError(f"expected true or false, got {value!r}", key=item.name)
            elif not isinstance(value, str):
                raise SettingsError(f"expected a string, got {value!r}", key=item.name)

    @staticmethod
    def _check_custom_pattern(value: object) -> None:
        if not isinstance(value, str):
            raise SettingsError(f"expected a regular expression, got {value!r}", key="custom_pattern")
        try:
            compiled = re.compile(value)
        except re.error as exc:
            raise SettingsError(f"not a valid regular expression: {exc}", key="custom_pattern") from exc
        if "target" not in compiled.groupindex:
            raise SettingsError("pattern must define a named group 'target'", key="custom_pattern")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> IncludeSettings:
        """Build settings from a camelCase or snake_case mapping.

        Missing keys keep their defaults. ``None`` values, and empty
        strings for the message and label fields, also fall back to the
        defaults.

        Raises
        ------
        SettingsError
            On unknown keys or values of the wrong type.
        """
        known = {item.name: item for item in fields(cls)}
        aliases = {_camel(name): name for name in known}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = key if key in known else aliases.get(key)
            if name is None:
                raise SettingsError("unknown key", key=str(key))
            if value is None or (name in _FALLBACK_FIELDS and value == ""):
                continue
            if name == "syntaxes":
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise SettingsError(f"expected a list, got {value!r}", key=key)
                value = tuple(value)
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a camelCase mapping."""
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            result[_camel(item.name)] = list(value) if isinstance(value, tuple) else value
        return result

    def replace(self, **changes: Any) -> IncludeSettings:
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


def load_settings(path: str | Path) -> IncludeSettings:
    """Load settings from a YAML file.

    The file holds either the settings mapping itself or a single
    ``include:`` (or ``markdown-include:``) section containing it. An
    empty file yields the defaults.

    Raises
    ------
    SettingsError
        When the file cannot be read, is not valid YAML, or holds
        malformed settings.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"cannot read {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"{path} is not valid YAML: {exc}") from exc

    if data is None:
        return IncludeSettings()
    if not isinstance(data, dict):
        raise SettingsError(f"{path} must contain a mapping")
    for section in _SECTION_KEYS:
        if section in data and isinstance(data[section], dict):
            data = data[section]
            break
    return IncludeSettings.from_mapping(data)


def find_settings_file(directory: str | Path) -> Path | None:
    """Return the first settings file found in ``directory``, if any."""
    for name in SETTINGS_FILENAMES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None
