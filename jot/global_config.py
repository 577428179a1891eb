"""Global configuration storage for jot.

Stores user preferences in ~/.jot/config.json. Set JOT_HOME to keep
everything somewhere else.
"""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

DEFAULT_ASSISTANT_NAME = "Jot"


class JotConfig(BaseModel):
    """User preferences.

    Empty paths mean "inside the config directory".
    """

    data_file: str = ""
    log_dir: str = ""
    assistant_name: str = DEFAULT_ASSISTANT_NAME


def get_config_dir() -> Path:
    """Get the jot config directory."""
    config_dir = Path(os.environ.get("JOT_HOME") or Path.home() / ".jot")
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_global_config() -> JotConfig:
    """Load global configuration, falling back to defaults."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return JotConfig(**data)
        except (json.JSONDecodeError, TypeError, ValidationError):
            pass
    return JotConfig()  # defaults


def save_global_config(config: JotConfig) -> None:
    """Save global configuration."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(config.model_dump(), indent=2),
        encoding="utf-8",
    )


def resolve_data_file(config: JotConfig, override: str | None = None) -> Path:
    """Pick the task file: explicit override, then config, then the default."""
    if override:
        return Path(override).expanduser()
    if config.data_file:
        return Path(config.data_file).expanduser()
    return get_config_dir() / "tasks.json"


def resolve_log_dir(config: JotConfig) -> Path:
    if config.log_dir:
        return Path(config.log_dir).expanduser()
    return get_config_dir()
