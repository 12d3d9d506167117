"""Tests for the demo orchestrator."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from filekit.app import APPEND_BYTES_TEXT, APPEND_WRITER_TEXT, DEMO_LINES, FileToolkitDemo
from filekit.files.reader import read_all_lines
from filekit.types import DemoConfig


class TestFileToolkitDemo:
    @pytest.fixture(autouse=True)
    def _setup(self, demo_config: DemoConfig) -> None:
        self.config = demo_config
        self.out = io.StringIO()
        self.err = io.StringIO()

    def _demo(self, config: DemoConfig | None = None) -> FileToolkitDemo:
        return FileToolkitDemo(config or self.config, out=self.out, err=self.err)

    def test_full_run_succeeds(self) -> None:
        result = self._demo().run()
        assert result.success is True
        assert [s.step for s in result.steps] == ["inspect", "walk", "read", "write", "copy"]
        assert all(s.success for s in result.steps)
        assert self.err.getvalue() == ""

    def test_sections_printed_in_order(self) -> None:
        self._demo().run()
        output = self.out.getvalue()
        headers = [
            "--Displaying some file information--",
            "--Demonstrating walk functionality--",
            "--Reading From files--",
            "--Writing to files--",
            "--Copying files--",
        ]
        positions = [output.index(h) for h in headers]
        assert positions == sorted(positions)

    def test_file_information(self) -> None:
        self._demo().display_file_information()
        output = self.out.getvalue()
        name = self.config.input_text_path
        assert f"Does file {name} exist? true" in output
        assert f"Is {name} a directory? false" in output
        assert f"Is {name} a regular file? true" in output
        assert f"Size of {name}: 18 bytes" in output
        assert f"{name} content type is text/plain" in output
        assert f"{self.config.binary_input_path} content type is image/jpeg" in output

    def test_file_information_for_missing_input(self, demo_dir: Path) -> None:
        config = self.config.model_copy(update={"input_text_path": str(demo_dir / "absent.txt")})
        self._demo(config).display_file_information()
        output = self.out.getvalue()
        assert "exist? false" in output
        assert "Size of" not in output

    def test_walk_lists_root_and_children(self) -> None:
        self._demo().walk()
        lines = self.out.getvalue().splitlines()
        root = Path(self.config.walk_root_path)
        assert lines[1] == str(root)
        assert str(root / "sub") in lines
        assert str(root / "sub" / "leaf.txt") in lines

    def test_read_prints_lines_three_ways_and_counts(self) -> None:
        self._demo().read()
        output = self.out.getvalue()
        assert output.count("Line one") == 3
        assert output.count("Line two") == 3
        size = Path(self.config.binary_input_path).stat().st_size
        assert f"contains {size} bytes" in output
        assert f"Read all the bytes in {-(-size // 1024)} times through our loop" in output

    def test_chunk_size_is_configurable(self) -> None:
        config = self.config.model_copy(update={"chunk_size": 1})
        self._demo(config).read()
        size = Path(self.config.binary_input_path).stat().st_size
        assert f"Read all the bytes in {size} times" in self.out.getvalue()

    def test_write_produces_lines_and_appends(self) -> None:
        self._demo().write()
        assert read_all_lines(self.config.output_text_path) == [
            *DEMO_LINES,
            APPEND_BYTES_TEXT + APPEND_WRITER_TEXT,
        ]

    def test_write_overwrites_previous_output(self) -> None:
        self._demo().write()
        self._demo().write()
        assert len(read_all_lines(self.config.output_text_path)) == len(DEMO_LINES) + 1

    def test_copy_overwrites_destinations(self) -> None:
        Path(self.config.copied_text_path).write_text("stale")
        self._demo().copy()
        assert Path(self.config.copied_text_path).read_bytes() == Path(self.config.input_text_path).read_bytes()
        assert Path(self.config.copied_binary_path).read_bytes() == Path(self.config.binary_input_path).read_bytes()
        resolved = str(Path(self.config.copied_binary_path).resolve())
        assert f"Copied {self.config.binary_input_path} to {resolved}" in self.out.getvalue()

    def test_stops_at_first_failure(self, demo_dir: Path) -> None:
        config = self.config.model_copy(update={"walk_root_path": str(demo_dir / "no-such-dir")})
        result = self._demo(config).run()

        assert result.success is False
        assert [s.step for s in result.steps] == ["inspect", "walk"]
        assert result.steps[-1].error_kind == "not_found"
        assert "--Reading From files--" not in self.out.getvalue()
        assert not Path(config.output_text_path).exists()

    def test_failure_reported_on_stderr(self, demo_dir: Path) -> None:
        missing = demo_dir / "gone.jpg"
        config = self.config.model_copy(update={"binary_input_path": str(missing)})
        result = self._demo(config).run()

        assert result.success is False
        assert result.steps[-1].step == "read"
        assert self.err.getvalue().startswith("IO Exception ")
        assert str(missing) in self.err.getvalue()
        assert result.error is not None

    def test_buffer_limit_is_configurable(self) -> None:
        config = self.config.model_copy(update={"max_buffer_size": 10})
        result = self._demo(config).run()

        assert result.success is False
        assert result.steps[-1].step == "read"
        assert result.steps[-1].error_kind == "out_of_resources"
