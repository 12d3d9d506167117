from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from filekit.types import DemoConfig

if TYPE_CHECKING:
    from pathlib import Path

JPEG_BYTES = b"\xff\xd8\xff\xe0" + bytes(3000) + b"\xff\xd9"


@pytest.fixture()
def demo_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory holding the demo's default input files."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exampleInput.txt").write_text("Line one\nLine two\n", encoding="utf-8")
    (tmp_path / "coffee.jpg").write_bytes(JPEG_BYTES)
    return tmp_path


@pytest.fixture()
def demo_config(demo_dir: Path) -> DemoConfig:
    """Demo configuration with every path inside demo_dir."""
    walk_root = demo_dir / "tree"
    (walk_root / "sub").mkdir(parents=True)
    (walk_root / "sub" / "leaf.txt").write_text("leaf")
    return DemoConfig(
        input_text_path=str(demo_dir / "exampleInput.txt"),
        output_text_path=str(demo_dir / "exampleOutput.txt"),
        binary_input_path=str(demo_dir / "coffee.jpg"),
        copied_text_path=str(demo_dir / "copiedText.txt"),
        copied_binary_path=str(demo_dir / "secondCup.jpg"),
        walk_root_path=str(walk_root),
    )
