from __future__ import annotations

import os
from pathlib import Path

import pytest

from sitebuilder.builder.output import atomic_write_text


def test_atomic_write_creates_parents_and_replaces(tmp_path: Path) -> None:
    target = tmp_path / "about" / "index.html"
    atomic_write_text(target, "<p>one</p>\n")
    atomic_write_text(target, "<p>two</p>\n")
    assert target.read_text(encoding="utf-8") == "<p>two</p>\n"
    assert sorted(p.name for p in target.parent.iterdir()) == ["index.html"]


def test_failed_write_removes_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "index.html"
    target.write_text("previous", encoding="utf-8")

    def failing_fsync(fd: int) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "fsync", failing_fsync)
    with pytest.raises(OSError, match="disk full"):
        atomic_write_text(target, "<p>new</p>")

    assert target.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["index.html"]


def test_failed_replace_removes_temp_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "pages" / "home.html"

    def failing_replace(src: str, dst: str) -> None:
        raise PermissionError("read-only")

    monkeypatch.setattr(os, "replace", failing_replace)
    with pytest.raises(PermissionError):
        atomic_write_text(target, "<p>new</p>")

    assert list(target.parent.iterdir()) == []
