"""Filekit domain types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

ErrorKind = Literal["not_found", "already_exists", "permission", "io", "out_of_resources"]

DEFAULT_CHUNK_SIZE: int = 1024
DEFAULT_MAX_BUFFER_SIZE: int = 256 * 1024 * 1024  # 256MB


class FileMetadata(BaseModel):
    """Point-in-time snapshot of a path's metadata."""

    model_config = ConfigDict(frozen=True)

    path: Path
    exists: bool
    is_directory: bool = False
    is_regular_file: bool = False
    is_symbolic_link: bool = False
    readable: bool = False
    writable: bool = False
    executable: bool = False
    last_modified: datetime | None = None
    size_bytes: int | None = Field(default=None, ge=0)
    content_type: str | None = None


class DemoConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_text_path: str = "exampleInput.txt"
    output_text_path: str = "exampleOutput.txt"
    binary_input_path: str = "coffee.jpg"
    copied_text_path: str = "copiedText.txt"
    copied_binary_path: str = "secondCup.jpg"
    walk_root_path: str = "."
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)
    max_buffer_size: int = Field(default=DEFAULT_MAX_BUFFER_SIZE, ge=1)
    walk_max_depth: int | None = Field(default=None, ge=0)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err


class StepResult(BaseModel):
    step: str
    success: bool
    error_kind: ErrorKind | None = None
    error: str | None = None


class DemoResult(BaseModel):
    success: bool
    steps: list[StepResult]
    error: str | None = None
