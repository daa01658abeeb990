#!/usr/bin/env python3
"""Example: Quickstart: mdinclude

Minimal working example: write a small documentation tree, list its
include directives, expand it, and look at what could not be resolved.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install mdinclude
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import mdinclude

INDEX = """\
# Project

:[Intro](intro.md)

!!! include(changelog.md #L1-3) !!!

:(not-written-yet.md)
"""

FILES = {
    "index.md": INDEX,
    "intro.md": "A tool that does one thing well.\n:(index.md)",
    "changelog.md": "## 1.1\n- faster\n## 1.0\n- first release\n",
}


def main() -> None:
    print(f"mdinclude version: {mdinclude.__version__}")

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for name, content in FILES.items():
            (root / name).write_text(content, encoding="utf-8")
        index = root / "index.md"

        # Step 1: List directives without resolving them
        for directive in mdinclude.find_directives(INDEX):
            print(f"  {directive.syntax:<12} {directive.target} {directive.range_text}")

        # Step 2: Expand the whole tree
        print("\nExpanded:")
        print(mdinclude.expand_file(index))

        # Step 3: Report what could not be resolved
        doc = mdinclude.IncludeDocument(index)
        for diagnostic in doc.check():
            print(f"  [{diagnostic.code}] line {diagnostic.line}: {diagnostic.message}")


if __name__ == "__main__":
    main()
