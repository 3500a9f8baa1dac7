"""Configuration loading from environment variables and skinmemo.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_PRESETS_DIR = Path.home() / ".skinmemo" / "presets"
_CONFIG_FILENAME = "skinmemo.toml"


@dataclass
class SkinMemoConfig:
    """Top-level skinmemo configuration."""

    presets_dir: Path = _DEFAULT_PRESETS_DIR
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> SkinMemoConfig:
    """Load configuration from environment variables and optional skinmemo.toml.

    Priority: environment variables > skinmemo.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.skinmemo/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".skinmemo" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    presets_data = file_data.get("presets", {})

    return SkinMemoConfig(
        presets_dir=Path(
            os.getenv("SKINMEMO_PRESETS_DIR", presets_data.get("dir", str(_DEFAULT_PRESETS_DIR)))
        ).expanduser(),
        log_level=os.getenv("SKINMEMO_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
