"""Configuration constants, .env parsing, and demo path settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from filekit.types import DemoConfig


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


# Environment variable -> DemoConfig field
ENV_FIELDS: dict[str, str] = {
    "FILEKIT_INPUT_TEXT": "input_text_path",
    "FILEKIT_OUTPUT_TEXT": "output_text_path",
    "FILEKIT_BINARY_INPUT": "binary_input_path",
    "FILEKIT_COPIED_TEXT": "copied_text_path",
    "FILEKIT_COPIED_BINARY": "copied_binary_path",
    "FILEKIT_WALK_ROOT": "walk_root_path",
    "FILEKIT_CHUNK_SIZE": "chunk_size",
    "FILEKIT_WALK_MAX_DEPTH": "walk_max_depth",
    "FILEKIT_MAX_BUFFER_SIZE": "max_buffer_size",
}

DEFAULT_CONFIG_FILE = "filekit.yaml"


def _env_overrides() -> dict[str, str]:
    """Collect DemoConfig fields set via os.environ, falling back to .env."""
    from_file = read_env_file(list(ENV_FIELDS))
    overrides: dict[str, str] = {}
    for env_key, field_name in ENV_FIELDS.items():
        value = os.environ.get(env_key) or from_file.get(env_key)
        if value:
            overrides[field_name] = value
    return overrides


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"{config_file}: invalid YAML: {err}") from err
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_file}: expected a mapping at the top level")

    unknown = set(raw) - set(DemoConfig.model_fields)
    if unknown:
        raise ValueError(f"{config_file}: unknown settings: {', '.join(sorted(unknown))}")
    return raw


def load_config(config_file: str | Path | None = None, **overrides: Any) -> DemoConfig:
    """Build the demo configuration.

    Precedence, lowest first: built-in defaults, .env, environment, the YAML
    config file, then keyword overrides. When ``config_file`` is None,
    ``filekit.yaml`` in the working directory is used if present.
    """
    values: dict[str, Any] = _env_overrides()

    if config_file is not None:
        values.update(_read_config_file(Path(config_file)))
    else:
        default_file = Path.cwd() / DEFAULT_CONFIG_FILE
        if default_file.is_file():
            values.update(_read_config_file(default_file))

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return DemoConfig(**values)
    except ValidationError as err:
        raise ValueError(f"Invalid configuration: {err}") from err
