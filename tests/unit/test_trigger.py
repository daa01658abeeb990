"""Unit tests for mdinclude.trigger.IncludeTrigger."""
from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from mdinclude.errors import IncludeReadError
from mdinclude.settings import IncludeSettings
from mdinclude.trigger import IncludeTrigger


class _UnreadableFileSystem:
    def resolve(self, base_dir: str, ref: str) -> str:
        return f"{base_dir}/{ref}"

    def exists(self, path: str) -> bool:
        return True

    def read(self, path: str) -> str:
        raise PermissionError(13, "Permission denied", path)


@pytest.fixture()
def docs(tmp_path: Path) -> Path:
    (tmp_path / "part.md").write_text("included", encoding="utf-8")
    (tmp_path / "other").mkdir()
    (tmp_path / "other" / "part.md").write_text("other part", encoding="utf-8")
    return tmp_path


class TestIncludeTriggerProcess:
    def test_no_active_document_leaves_text(self) -> None:
        trigger = IncludeTrigger(lambda: None)
        assert trigger.process("x :(part.md)") == "x :(part.md)"

    def test_empty_path_leaves_text(self) -> None:
        trigger = IncludeTrigger(lambda: "")
        assert trigger.process(":(part.md)") == ":(part.md)"

    def test_expands_against_active_document(self, docs: Path) -> None:
        trigger = IncludeTrigger(lambda: str(docs / "index.md"))
        assert trigger.process("x :(part.md)") == "x included"

    def test_provider_is_consulted_on_every_call(self, docs: Path) -> None:
        active = {"path": str(docs / "index.md")}
        trigger = IncludeTrigger(lambda: active["path"])
        assert trigger.process(":(part.md)") == "included"
        active["path"] = str(docs / "other" / "index.md")
        assert trigger.process(":(part.md)") == "other part"

    def test_settings_are_applied(self, docs: Path) -> None:
        settings = IncludeSettings(quote_formatting=True, quote_include_source=False)
        trigger = IncludeTrigger(lambda: str(docs / "index.md"), settings)
        assert trigger.process(":(part.md)") == "> included"


class TestIncludeTriggerHook:
    def test_rewrites_state_src(self, docs: Path) -> None:
        state = SimpleNamespace(src="!!! include(part.md) !!!")
        IncludeTrigger(lambda: str(docs / "index.md"))(state)
        assert state.src == "included"

    def test_read_failure_leaves_state_untouched(self) -> None:
        state = SimpleNamespace(src="before :(part.md)")
        trigger = IncludeTrigger(lambda: "/docs/index.md", filesystem=_UnreadableFileSystem())
        with pytest.raises(IncludeReadError):
            trigger(state)
        assert state.src == "before :(part.md)"
