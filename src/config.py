"""Configuration and file locations for weekly-todo.

The only required setting is the base data directory, taken from
$XDG_DATA_HOME. Everything else is derived from it.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from errors import ConfigError

APP_NAME = "weekly-todo"
VERSION = "0.1.0"

DATA_DIR_ENV = "XDG_DATA_HOME"
STATE_FILENAME = "TODO"
HISTORY_FILENAME = "TODO.log"


@dataclass(frozen=True)
class Config:
    state_dir: Path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        raw = env.get(DATA_DIR_ENV)
        if not raw:
            raise ConfigError(f"Failed reading environment variable ${DATA_DIR_ENV}: not set")
        return cls(state_dir=Path(raw))

    @property
    def state_file(self) -> Path:
        return self.state_dir / STATE_FILENAME

    @property
    def history_file(self) -> Path:
        return self.state_dir / HISTORY_FILENAME


def state_file_path(config: Config) -> Path:
    """Return where the week's state is persisted."""
    return config.state_file
