"""Shared fixtures for filesystem procedure tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

TEXT_LINES = ["first line", "second line", "third line"]


@pytest.fixture()
def files_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def text_file(files_tmp: Path) -> Path:
    path = files_tmp / "input.txt"
    path.write_text("\n".join(TEXT_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def binary_file(files_tmp: Path) -> Path:
    """A 2500-byte file: two full 1024-byte chunks and one short one."""
    path = files_tmp / "image.jpg"
    path.write_bytes(bytes(range(256)) * 9 + bytes(196))
    return path


@pytest.fixture()
def tree(files_tmp: Path) -> list[Path]:
    """Create a small tree under root/ and return every path in it, depth-first, root first."""
    root = files_tmp / "root"
    root.mkdir(exist_ok=True)
    (root / "a" / "b").mkdir(parents=True)
    (root / "c").mkdir()
    (root / "a" / "one.txt").write_text("1")
    (root / "a" / "b" / "two.txt").write_text("2")
    (root / "three.txt").write_text("3")
    return [
        root,
        root / "a",
        root / "a" / "b",
        root / "a" / "b" / "two.txt",
        root / "a" / "one.txt",
        root / "c",
        root / "three.txt",
    ]
