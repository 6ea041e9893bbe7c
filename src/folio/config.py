"""Configuration loading from environment variables and folio.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_DATA_DIR = Path("data")
_CONFIG_FILENAME = "folio.toml"


@dataclass
class ServerConfig:
    """HTTP API configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "*"


@dataclass
class ActivityConfig:
    """Activity feed configuration."""

    limit: int = 50


@dataclass
class FolioConfig:
    """Top-level folio configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    activity: ActivityConfig = field(default_factory=ActivityConfig)
    data_dir: Path = _DEFAULT_DATA_DIR
    pid_file: Path = Path.home() / ".folio" / "folio.pid"
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> FolioConfig:
    """Load configuration from environment variables and optional folio.toml.

    Priority: environment variables > folio.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.folio/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".folio" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    server_data = file_data.get("server", {})
    activity_data = file_data.get("activity", {})

    config = FolioConfig(
        server=ServerConfig(
            host=os.getenv("FOLIO_HOST", server_data.get("host", "0.0.0.0")),
            port=int(os.getenv("FOLIO_PORT", server_data.get("port", 3000))),
            cors_origin=os.getenv("FOLIO_CORS_ORIGIN", server_data.get("cors_origin", "*")),
        ),
        activity=ActivityConfig(
            limit=int(os.getenv("FOLIO_ACTIVITY_LIMIT", activity_data.get("limit", 50))),
        ),
        data_dir=Path(
            os.getenv("FOLIO_DATA_DIR", file_data.get("data_dir", str(_DEFAULT_DATA_DIR)))
        ),
        pid_file=Path(
            file_data.get("pid_file", str(Path.home() / ".folio" / "folio.pid"))
        ).expanduser(),
        log_level=os.getenv("FOLIO_LOG_LEVEL", file_data.get("log_level", "INFO")),
    )
    if config.activity.limit < 1:
        raise ValueError(f"activity.limit must be at least 1, got {config.activity.limit}")
    return config
