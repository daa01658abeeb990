"""Sample documentation tree shared by the mdinclude benchmarks."""
from __future__ import annotations

from pathlib import Path

_CHAPTER = "\n".join(f"Chapter line {n} with a few words in it." for n in range(1, 41))

SAMPLE_FILES: dict[str, str] = {
    "index.md": (
        "# Handbook\n\n"
        ":[Intro](chapters/intro.md)\n\n"
        "!!! include(chapters/usage.md #L30-42) !!!\n\n"
        ":[Reference](chapters/reference.md#L1.2-10.3){quote}\n\n"
        ":(chapters/missing.md)\n"
    ),
    "chapters/intro.md": "Welcome.\n:(../snippets/license.md)\n:(../snippets/badges.md)\n",
    "chapters/usage.md": _CHAPTER + "\n:(../snippets/code.md)\n",
    "chapters/reference.md": _CHAPTER,
    "snippets/license.md": "Released under the MIT license.\n:(../index.md)\n",
    "snippets/badges.md": "![build](badge.svg)\n",
    "snippets/code.md": "```sh\nmdinclude expand index.md\n```\n",
}


def build_tree(root: Path) -> Path:
    """Write the sample tree under ``root`` and return the index path."""
    for relative, content in SAMPLE_FILES.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root / "index.md"
