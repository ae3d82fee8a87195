"""
Utility functions for glab-setup-git-identity logging.

This module provides helper functions for data sanitization
and log file housekeeping.
"""

import re
from typing import Any, Dict, List, Sequence, Tuple
from pathlib import Path
from datetime import datetime, timedelta
from glab_identity.constants import LOG_FILE_NAME, SENSITIVE_FLAGS

MASK = "***"


def sanitize_data(data: Any, sensitive_keys: Tuple[str, ...]) -> Any:
    """
    Recursively sanitize sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to sanitize (dict, list, str, or other)
        sensitive_keys: Tuple of keys/patterns to sanitize

    Returns:
        Any: Sanitized data with sensitive values replaced
    """
    if isinstance(data, dict):
        return sanitize_dict(data, sensitive_keys)
    elif isinstance(data, list):
        return sanitize_list(data, sensitive_keys)
    elif isinstance(data, str):
        return sanitize_string(data)
    else:
        return data


def sanitize_dict(data: Dict[str, Any], sensitive_keys: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Sanitize sensitive values in a dictionary.

    Args:
        data: Dictionary to sanitize
        sensitive_keys: Keys to sanitize

    Returns:
        Dict: Sanitized dictionary
    """
    sanitized = {}

    for key, value in data.items():
        key_lower = str(key).lower()

        is_sensitive = any(
            sensitive_key.lower() in key_lower
            for sensitive_key in sensitive_keys
        )

        if is_sensitive:
            if isinstance(value, str) and len(value) > 8:
                # Keep a short prefix so token types (glpat-, etc.) stay recognizable
                sanitized[key] = f"{value[:4]}...{value[-4:]}"
            else:
                sanitized[key] = MASK
        else:
            sanitized[key] = sanitize_data(value, sensitive_keys)

    return sanitized


def sanitize_list(data: List[Any], sensitive_keys: Tuple[str, ...]) -> List[Any]:
    """Sanitize sensitive values in a list."""
    return [sanitize_data(item, sensitive_keys) for item in data]


def sanitize_string(data: str) -> str:
    """
    Sanitize sensitive patterns in strings (command lines, URLs).

    Args:
        data: String to sanitize

    Returns:
        str: Sanitized string
    """
    sanitized = data

    patterns = [
        # Bearer tokens
        (r'Bearer\s+[A-Za-z0-9\-._~+/]+=*', 'Bearer ***'),
        # Token flags on a rendered command line
        (r'(--(?:job-)?token[ =])\S+', r'\1***'),
        # GitLab personal/project/group access tokens
        (r'gl(?:pat|dt|rt|cbt|ptt)-[A-Za-z0-9_\-]{8,}', '***'),
        # URL parameters with sensitive names
        (r'([?&](?:token|private_token|key|secret|password)=)[^&\s]+', r'\1***'),
    ]

    for pattern, replacement in patterns:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

    return sanitized


def sanitize_command_args(args: Sequence[str]) -> List[str]:
    """
    Mask the values that follow token flags in an argument vector.

    Args:
        args: Argument vector as passed to a subprocess

    Returns:
        List[str]: Copy of the argument vector safe to log
    """
    sanitized = []
    mask_next = False
    for arg in args:
        if mask_next:
            sanitized.append(MASK)
            mask_next = False
            continue
        flag, sep, _ = arg.partition("=")
        if flag in SENSITIVE_FLAGS:
            if sep:
                sanitized.append(f"{flag}={MASK}")
            else:
                sanitized.append(arg)
                mask_next = True
            continue
        sanitized.append(arg)
    return sanitized


def cleanup_old_logs(log_directory: Path, retention_days: int = 30) -> int:
    """
    Clean up old log files based on retention policy.

    Args:
        log_directory: Directory containing log files
        retention_days: Number of days to retain logs

    Returns:
        int: Number of files cleaned up
    """
    if not log_directory.exists():
        return 0

    cutoff_date = datetime.now() - timedelta(days=retention_days)
    cleaned_count = 0

    for log_file in log_directory.glob(f"{LOG_FILE_NAME}.log.*"):
        try:
            if log_file.stat().st_mtime < cutoff_date.timestamp():
                log_file.unlink()
                cleaned_count += 1
        except OSError:
            continue

    return cleaned_count


def get_log_directory() -> Path:
    """Get the log directory path (imported from config for convenience)."""
    from .config import get_log_directory as _get_log_directory
    return _get_log_directory()
