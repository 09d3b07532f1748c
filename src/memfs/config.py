"""Configuration loading from environment variables and memfs.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "memfs.toml"


@dataclass
class MemfsConfig:
    """Presentation and logging settings for a session."""

    prompt: str = "file-cli> "
    preview_length: int = 50
    separator_width: int = 40
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> MemfsConfig:
    """Load configuration from environment variables and optional memfs.toml.

    Priority: environment variables > memfs.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.memfs/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".memfs" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    return MemfsConfig(
        prompt=os.getenv("MEMFS_PROMPT", file_data.get("prompt", "file-cli> ")),
        preview_length=int(os.getenv("MEMFS_PREVIEW_LENGTH", file_data.get("preview_length", 50))),
        separator_width=int(
            os.getenv("MEMFS_SEPARATOR_WIDTH", file_data.get("separator_width", 40))
        ),
        log_level=os.getenv("MEMFS_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
