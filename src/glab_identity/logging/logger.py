"""
Main logging module for glab-setup-git-identity.

This module provides the primary logging interface, logger setup with daily
rotation, and the structured record used for every subprocess invocation.
"""

import logging
import logging.handlers
import sys
from typing import Optional, Dict, Sequence

from rich.markup import escape

from glab_identity.utils import console
from .config import LogConfig, LogLevel
from .formatters import GlabIdentityFormatter, CommandCallFormatter, MultiplexFormatter
from .utils import cleanup_old_logs, sanitize_command_args, sanitize_string


ROOT_LOGGER_NAME = "glab_identity"
COMMAND_LOGGER_NAME = "glab_identity.exec"

# Global logger registry
_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False
_log_config: Optional[LogConfig] = None


class ConsoleEchoHandler(logging.Handler):
    """
    Prints INFO records from selected logger trees as plain console lines.

    Library code reports progress ("Git credential helper configured for ...")
    at INFO; this is how a normal CLI run shows it without the level and
    logger name prefix of the stderr diagnostics handler.
    """

    def __init__(self, logger_names: Sequence[str]):
        super().__init__(level=logging.INFO)
        self.logger_names = tuple(logger_names)
        self.addFilter(self._is_progress_record)

    def _is_progress_record(self, record: logging.LogRecord) -> bool:
        if record.levelno != logging.INFO:
            return False
        return any(
            record.name == name or record.name.startswith(name + ".")
            for name in self.logger_names
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            console.info(escape(sanitize_string(record.getMessage())))
        except Exception:
            self.handleError(record)


def _build_formatter(config: LogConfig, include_timestamps: bool) -> logging.Formatter:
    default_formatter = GlabIdentityFormatter(
        include_timestamps=include_timestamps,
        sensitive_keys=config.sensitive_keys,
    )
    return MultiplexFormatter(
        default_formatter, CommandCallFormatter(include_timestamps=include_timestamps)
    )


def _level(level: LogLevel) -> int:
    return getattr(logging, level.value)


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the logging system.

    Args:
        config: LogConfig instance, LogConfig.from_environment() if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured, _log_config

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        config = LogConfig.from_environment()

    _log_config = config

    file_level = _level(config.file_level)
    console_level = _level(config.console_level)
    levels = [file_level, console_level]
    if config.echo_loggers:
        levels.append(logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(min(levels))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Daily rotating file handler; a log directory we cannot write to must not
    # stop the CLI from working
    try:
        log_file_path = config.log_file_path
        file_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_file_path,
            when='midnight',
            interval=1,
            backupCount=config.log_retention_days,
            encoding='utf-8',
            utc=False
        )
    except OSError:
        log_file_path = None
    else:
        file_handler.setLevel(file_level)
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setFormatter(_build_formatter(config, include_timestamps=True))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(_build_formatter(config, include_timestamps=False))
    root_logger.addHandler(console_handler)

    if config.echo_loggers:
        root_logger.addHandler(ConsoleEchoHandler(config.echo_loggers))

    # Command records always reach the handlers; the handler levels decide
    command_logger = logging.getLogger(COMMAND_LOGGER_NAME)
    command_logger.setLevel(logging.DEBUG)
    command_logger.disabled = not config.log_commands

    if log_file_path is not None:
        try:
            cleanup_old_logs(log_file_path.parent, config.log_retention_days)
        except OSError:
            pass

    _logging_configured = True

    root_logger.debug(
        f"Logging initialized - File: {log_file_path}, "
        f"Level: {config.file_level.value}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'glab_identity.gitlab.client')

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def log_command_call(
    command: str,
    args: Sequence[str],
    exit_code: Optional[int] = None,
    duration: Optional[float] = None,
    error: Optional[str] = None,
    logger_name: str = COMMAND_LOGGER_NAME
) -> None:
    """
    Log a subprocess invocation with structured information.

    Token values in the argument vector are masked before logging.

    Args:
        command: Executable name
        args: Arguments passed to the executable
        exit_code: Process exit code
        duration: Run time in seconds
        error: stderr text or spawn error, if the command failed
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)

    extra = {
        "command_argv": [command] + sanitize_command_args(args),
        "command_exit_code": exit_code,
        "command_duration": duration or 0,
    }
    if error:
        extra["command_error"] = sanitize_string(error)

    # Non-zero exits are often expected (unset keys, not logged in); callers
    # decide whether they are errors
    if exit_code:
        logger.info("Command failed", extra=extra)
    else:
        logger.debug("Command completed", extra=extra)
