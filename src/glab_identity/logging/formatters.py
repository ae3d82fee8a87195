"""
Custom formatters for glab-setup-git-identity logging.

This module provides specialized formatters for subprocess call records
and for general application logs.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from .utils import sanitize_data
from glab_identity.constants import SENSITIVE_KEYS

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class GlabIdentityFormatter(logging.Formatter):
    """
    Default formatter for log entries.

    Token values in the message and its arguments are masked before the
    record is rendered.
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        sensitive_keys: Optional[Tuple[str, ...]] = None,
    ):
        self.sensitive_keys = sensitive_keys or SENSITIVE_KEYS
        fmt = "%(levelname)s [%(name)s] %(message)s"
        if include_timestamps:
            fmt = "%(asctime)s " + fmt
        super().__init__(fmt=fmt, datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, (dict, list, str)):
            record.msg = sanitize_data(record.msg, self.sensitive_keys)
        if isinstance(record.args, dict):
            record.args = sanitize_data(record.args, self.sensitive_keys)
        elif isinstance(record.args, (tuple, list)):
            record.args = tuple(
                sanitize_data(arg, self.sensitive_keys)
                if isinstance(arg, (dict, list, str))
                else arg
                for arg in record.args
            )

        return super().format(record)


class CommandCallFormatter(logging.Formatter):
    """
    Specialized formatter for subprocess call records.

    Renders the (already sanitized) argument vector, the exit code
    and the wall-clock duration on a single line.
    """

    def __init__(self, include_timestamps: bool = True):
        self.include_timestamps = include_timestamps
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        argv = getattr(record, "command_argv", [])
        exit_code = getattr(record, "command_exit_code", "---")
        duration = round(getattr(record, "command_duration", 0) * 1000, 2)

        # Example: 2026-02-02 17:27:34 DEBUG [glab_identity.exec] glab auth status -> 0 (120.5ms)
        line = (
            f"{record.levelname} [{record.name}] "
            f"{' '.join(argv)} -> {exit_code} ({duration}ms)"
        )
        if self.include_timestamps:
            timestamp = datetime.fromtimestamp(record.created).strftime(TIMESTAMP_FORMAT)
            line = f"{timestamp} {line}"

        lines = [line]
        error = getattr(record, "command_error", None)
        if error:
            lines.append(f"    Error: {error}")

        return "\n".join(lines)


class MultiplexFormatter(logging.Formatter):
    """
    Formatter that delegates to different formatters based on the log record.

    Uses CommandCallFormatter for command records and the default formatter
    for everything else.
    """

    def __init__(
        self, default_formatter: logging.Formatter, command_formatter: logging.Formatter
    ):
        self.default_formatter = default_formatter
        self.command_formatter = command_formatter
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        if hasattr(record, "command_argv"):
            return self.command_formatter.format(record)
        return self.default_formatter.format(record)
