"""
glab-setup-git-identity Logging Module

This module provides logging for the glab-setup-git-identity CLI and library.
It includes cross-platform log storage, subprocess call tracking and automatic
sanitization of tokens before anything reaches a log file or the terminal.

Key Features:
- Single log file with daily rotation
- Cross-platform log directory detection
- Command call logging with exit code and duration
- Automatic sanitization of tokens in argument vectors
- Configurable log levels, console verbosity follows --verbose
"""

from .logger import (
    get_logger,
    setup_logging,
    LogLevel,
    log_command_call,
)
from .config import LogConfig
from .utils import sanitize_data, sanitize_command_args, get_log_directory

__all__ = [
    "get_logger",
    "setup_logging",
    "log_command_call",
    "LogLevel",
    "LogConfig",
    "sanitize_data",
    "sanitize_command_args",
    "get_log_directory",
]
