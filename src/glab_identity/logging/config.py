"""
Logging configuration for glab-setup-git-identity.

Levels come from the environment (GLAB_SETUP_GIT_IDENTITY_LOG_LEVEL) and,
for the CLI, from --verbose. Log files live in a per-platform data directory.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from glab_identity.constants import (
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
    LOG_RETENTION_DAYS,
    SENSITIVE_KEYS,
)

# Library loggers whose INFO records are progress messages for the user
PROGRESS_LOGGERS = ("glab_identity.identity", "glab_identity.gitlab")


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["LogLevel"]:
        """Case-insensitive lookup; None for empty or unknown names"""
        name = (value or "").strip().upper()
        return cls.__members__.get(name)


@dataclass
class LogConfig:
    """Where logs go and how much of them reaches the terminal"""

    log_filename: str = f"{LOG_FILE_NAME}.log"
    log_retention_days: int = LOG_RETENTION_DAYS

    file_level: LogLevel = LogLevel.INFO
    console_level: LogLevel = LogLevel.WARNING

    # INFO records from these logger trees are echoed to the console as plain
    # progress lines, independent of console_level
    echo_loggers: Tuple[str, ...] = ()

    log_commands: bool = True
    sensitive_keys: Tuple[str, ...] = SENSITIVE_KEYS

    @classmethod
    def from_environment(cls) -> "LogConfig":
        """Defaults, with the file level taken from the environment when set"""
        config = cls()
        env_level = LogLevel.parse(os.environ.get(ENV_LOG_LEVEL))
        if env_level is not None:
            config.file_level = env_level
        return config

    @classmethod
    def for_cli(cls, verbose: bool = False) -> "LogConfig":
        """
        Configuration for a command line run.

        Verbose runs write everything, including each subprocess call, to both
        the file and stderr. Normal runs show library progress messages and
        anything at WARNING or above.
        """
        config = cls.from_environment()
        if verbose:
            config.file_level = LogLevel.DEBUG
            config.console_level = LogLevel.DEBUG
        else:
            config.echo_loggers = PROGRESS_LOGGERS
        return config

    @property
    def log_file_path(self) -> Path:
        return get_log_directory() / self.log_filename


def _platform_log_directory() -> Path:
    system = platform.system().lower()

    if system == "windows":
        appdata = Path(os.environ.get("APPDATA", ""))
        base_dir = appdata if appdata.exists() else Path.home()
        return base_dir / LOG_FILE_NAME / "logs"

    if system == "darwin":
        return Path.home() / "Library" / "Logs" / LOG_FILE_NAME

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    base_dir = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base_dir / LOG_FILE_NAME / "logs"


def get_log_directory() -> Path:
    """
    Create and return the log directory.

    %APPDATA%/glab-setup-git-identity/logs on Windows,
    ~/Library/Logs/glab-setup-git-identity on macOS and
    $XDG_DATA_HOME (or ~/.local/share)/glab-setup-git-identity/logs elsewhere.
    Falls back to ./logs when that directory cannot be created.
    """
    log_dir = _platform_log_directory()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        log_dir = Path.cwd() / "logs"
        log_dir.mkdir(exist_ok=True)
    return log_dir
