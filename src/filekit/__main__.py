"""Entry point: python -m filekit"""

from __future__ import annotations

import argparse
import sys

from filekit.app import FileToolkitDemo
from filekit.infrastructure.config import load_config
from filekit.infrastructure.logger import install_exception_hooks, logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="filekit", description="Inspect, walk, read, write and copy files")
    parser.add_argument("--config", type=str, help="YAML file with demo paths (default: ./filekit.yaml if present)")
    parser.add_argument("--walk-root", type=str, help="Directory to walk (overrides configuration)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, walk_root_path=args.walk_root)
    except (OSError, ValueError) as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return 2

    logger.debug("Loaded configuration", **config.model_dump())
    result = FileToolkitDemo(config).run()
    return 0 if result.success else 1


def run() -> None:
    install_exception_hooks()
    sys.exit(main())


if __name__ == "__main__":
    run()
