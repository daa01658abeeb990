#!/usr/bin/env python3
"""Example: Quoting, ranges and settings

Demonstrates quoting included snippets with a source citation, cutting
files down to word ranges, omission markers, and loading settings from
a ``.mdinclude.yml`` file.

Usage:
    python examples/02_quoting_and_settings.py

Requirements:
    pip install mdinclude
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from mdinclude.resolver import Expander
from mdinclude.settings import IncludeSettings, find_settings_file, load_settings

SETTINGS_YAML = """\
include:
  quoteFormatting: true
  quoteSourceLabel: Quoted from
  omissionIndicator: true
"""

SPEECH = "We choose to go to the Moon in this decade\nand do the other things\n"


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "speech.md").write_text(SPEECH, encoding="utf-8")
        (root / ".mdinclude.yml").write_text(SETTINGS_YAML, encoding="utf-8")
        document = root / "essay.md"
        source = (
            "Kennedy said:\n\n:(speech.md#L1.3-1.7)\n\n"
            "Unquoted, whole file:\n\n:(speech.md){noquote}\n"
        )

        # Settings file found next to the document
        settings_file = find_settings_file(root)
        settings = load_settings(settings_file) if settings_file else IncludeSettings()
        print(f"Settings: {settings.to_dict()}\n")

        print(Expander(settings).expand(source, str(document)))

        # Same document with quoting switched off globally
        plain = settings.replace(quote_formatting=False, omission_indicator=False)
        print(Expander(plain).expand(source, str(document)))


if __name__ == "__main__":
    main()
