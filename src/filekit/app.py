"""Demo orchestrator: inspect, walk, read, write and copy over configured paths."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from filekit.errors import attempt
from filekit.files import (
    append_bytes,
    append_text,
    copy,
    inspect,
    open_line_cursor,
    read_all_bytes,
    read_all_lines,
    read_chunked,
    read_lines,
    walk,
    write_lines,
)
from filekit.infrastructure.logger import logger
from filekit.types import DemoConfig, DemoResult, Err, StepResult

if TYPE_CHECKING:
    from collections.abc import Callable

DEMO_LINES = [
    "This is a line of text.",
    "This is another line of uninspired text.",
    "I could go on...",
]
APPEND_BYTES_TEXT = "This is a line to append"
APPEND_WRITER_TEXT = "This line was appended using a buffered writer"


def _yes_no(value: bool) -> str:
    return "true" if value else "false"


class FileToolkitDemo:
    """Runs each toolkit procedure in turn and reports on stdout."""

    def __init__(self, config: DemoConfig | None = None, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.config = config or DemoConfig()
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _print(self, line: str = "") -> None:
        print(line, file=self.out)

    def display_file_information(self) -> None:
        self._print("--Displaying some file information--")
        name = self.config.input_text_path
        meta = inspect(name)
        self._print(f"Does file {name} exist? {_yes_no(meta.exists)}")
        self._print(f"Is {name} a directory? {_yes_no(meta.is_directory)}")
        self._print(f"Is {name} a regular file? {_yes_no(meta.is_regular_file)}")
        self._print(
            f"{name} permissions (rwx): {_yes_no(meta.readable)} {_yes_no(meta.writable)} {_yes_no(meta.executable)}"
        )
        if meta.exists and meta.last_modified is not None:
            modified = meta.last_modified.astimezone().strftime("%a %b %d %H:%M:%S %Z %Y")
            self._print(f"{name} was last modified on {modified}")
            self._print(f"Size of {name}: {meta.size_bytes} bytes")
        self._print(f"{name} content type is {meta.content_type}")

        binary_name = self.config.binary_input_path
        self._print(f"{binary_name} content type is {inspect(binary_name).content_type}")
        self._print()

    def walk(self) -> None:
        self._print("--Demonstrating walk functionality--")
        for path in walk(self.config.walk_root_path, max_depth=self.config.walk_max_depth):
            self._print(str(path))
        self._print()

    def read(self) -> None:
        self._print("--Reading From files--")
        text_path = self.config.input_text_path

        self._print("Using 'read_lines'")
        with read_lines(text_path) as lines:
            for line in lines:
                self._print(line)
        self._print()

        self._print("Using 'read_all_lines'")
        for line in read_all_lines(text_path):
            self._print(line)
        self._print()

        self._print("Using 'open_line_cursor'")
        with open_line_cursor(text_path) as cursor:
            while (line := cursor.read_line()) is not None:
                self._print(line)
        self._print()

        binary_path = self.config.binary_input_path

        self._print("Using 'read_all_bytes'")
        data = read_all_bytes(binary_path, max_size=self.config.max_buffer_size)
        self._print(f"Binary file {binary_path} contains {len(data)} bytes")
        self._print()

        self._print("Using 'read_chunked'")
        counter = sum(1 for _chunk in read_chunked(binary_path, self.config.chunk_size))
        self._print(f"Read all the bytes in {counter} times through our loop")
        self._print()

    def write(self) -> None:
        self._print("--Writing to files--")
        path = self.config.output_text_path
        write_lines(path, DEMO_LINES)
        append_bytes(path, APPEND_BYTES_TEXT.encode("utf-8"))
        append_text(path, APPEND_WRITER_TEXT)
        self._print(f"Wrote {len(DEMO_LINES)} lines and 2 appends to {path}")
        self._print()

    def copy(self) -> None:
        self._print("--Copying files--")
        pairs = [
            (self.config.input_text_path, self.config.copied_text_path),
            (self.config.binary_input_path, self.config.copied_binary_path),
        ]
        for source, destination in pairs:
            target = copy(source, destination, overwrite=True)
            self._print(f"Copied {source} to {target}")
        self._print()

    def steps(self) -> list[tuple[str, Callable[[], None]]]:
        return [
            ("inspect", self.display_file_information),
            ("walk", self.walk),
            ("read", self.read),
            ("write", self.write),
            ("copy", self.copy),
        ]

    def run(self) -> DemoResult:
        """Run every step in order, stopping at the first failure."""
        results: list[StepResult] = []

        for name, step in self.steps():
            logger.info("Step started", step=name)
            outcome = attempt(step)
            if isinstance(outcome, Err):
                logger.error("Step failed", step=name, kind=outcome.kind, error=outcome.message)
                print(f"IO Exception {outcome.message}", file=self.err)
                results.append(StepResult(step=name, success=False, error_kind=outcome.kind, error=outcome.message))
                return DemoResult(success=False, steps=results, error=outcome.message)
            logger.info("Step finished", step=name)
            results.append(StepResult(step=name, success=True))

        return DemoResult(success=True, steps=results)
