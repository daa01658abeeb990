"""Integration tests: expand a small documentation tree end to end.

The tree mixes both directive syntaxes, nested includes across
directories, line and word ranges, quoting with citations, omission
markers and settings loaded from a ``.mdinclude.yml`` file.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from mdinclude import IncludeDocument, expand_file
from mdinclude.resolver import DiagnosticKind
from mdinclude.settings import find_settings_file, load_settings

_INDEX = """\
# Handbook

:[Intro](chapters/intro.md)

!!! include(chapters/usage.md #L2-4) !!!

:[Snippet](snippets/code.md#L1.2){quote}
"""

_SETTINGS = """\
include:
  omissionIndicator: true
  quoteSourceLabel: From
"""


@pytest.fixture()
def handbook(tmp_path: Path) -> Path:
    files = {
        "docs/index.md": _INDEX,
        "docs/.mdinclude.yml": _SETTINGS,
        "docs/chapters/intro.md": "Welcome.\n:(../snippets/license.md)",
        "docs/chapters/usage.md": "## Usage\nstep one\nstep two\nstep three\n",
        "docs/snippets/license.md": "MIT licensed.",
        "docs/snippets/code.md": "run the tool now\nsecond",
        "loop/a.md": "A\n:(../other/b.md)",
        "other/b.md": "B\n!!! include(../loop/a.md) !!!",
    }
    for relative, content in files.items():
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return tmp_path


class TestHandbookExpansion:
    def test_full_expansion(self, handbook: Path) -> None:
        docs = handbook / "docs"
        settings_file = find_settings_file(docs)
        assert settings_file is not None
        settings = load_settings(settings_file)

        code = docs / "snippets" / "code.md"
        expected = (
            "# Handbook\n"
            "\n"
            "Welcome.\n"
            "MIT licensed.\n"
            "\n"
            "[...]\n"
            "step one\n"
            "step two\n"
            "[...]\n"
            "\n"
            "> [...]\n"
            "> tool now\n"
            "> [...]\n"
            ">\n"
            f"> [From: code.md](vscode://file/{code}:1:9)\n"
        )
        assert expand_file(docs / "index.md", settings) == expected

    def test_default_settings_skip_markers_and_label(self, handbook: Path) -> None:
        text = expand_file(handbook / "docs" / "index.md")
        assert "[...]" not in text
        assert "> tool now\n>\n> [Source: code.md]" in text

    def test_document_is_clean(self, handbook: Path) -> None:
        assert IncludeDocument(handbook / "docs" / "index.md").is_clean() is True


class TestCrossDirectoryCycle:
    def test_cycle_is_reported_once(self, handbook: Path) -> None:
        a = handbook / "loop" / "a.md"
        b = handbook / "other" / "b.md"
        doc = IncludeDocument(a)
        assert doc.expand() == f"A\nB\nCircular reference between '{a}' and '{b}'"
        [diagnostic] = doc.check()
        assert diagnostic.kind is DiagnosticKind.CIRCULAR
        assert diagnostic.parent == str(b)

    def test_entering_the_cycle_from_the_other_side(self, handbook: Path) -> None:
        a = handbook / "loop" / "a.md"
        b = handbook / "other" / "b.md"
        assert expand_file(b) == f"B\nA\nCircular reference between '{b}' and '{a}'"
