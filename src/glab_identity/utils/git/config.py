"""
Reading and writing git configuration values through the git executable.
"""

import logging
from typing import Optional

from glab_identity.exceptions import ConfigWriteError
from glab_identity.logging import get_logger
from glab_identity.models import Scope, ScopeLike, to_scope
from glab_identity.utils import executor

GIT_EXECUTABLE = "git"

logger = get_logger("glab_identity.utils.git.config")


def set_config(
    key: str,
    value: str,
    scope: ScopeLike = Scope.GLOBAL,
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Set a git config value with `git config --<scope> <key> <value>`.

    Raises:
        ConfigWriteError: If git exits with a non-zero status
    """
    log = log or logger
    scope = to_scope(scope)

    log.debug(f"Setting git config {key} = {value} ({scope.value})")
    result = executor.run(GIT_EXECUTABLE, ["config", scope.flag, key, value])

    if not result.ok:
        raise ConfigWriteError(key, result.stderr)

    log.debug(f"Successfully set git config {key}")


def add_config(
    key: str,
    value: str,
    scope: ScopeLike = Scope.GLOBAL,
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Append a value to a multi-valued key with `git config --<scope> --add`.

    Raises:
        ConfigWriteError: If git exits with a non-zero status
    """
    log = log or logger
    scope = to_scope(scope)

    log.debug(f"Adding git config {key} = {value} ({scope.value})")
    result = executor.run(GIT_EXECUTABLE, ["config", scope.flag, "--add", key, value])

    if not result.ok:
        raise ConfigWriteError(key, result.stderr)


def get_config(
    key: str,
    scope: ScopeLike = Scope.GLOBAL,
    log: Optional[logging.Logger] = None,
) -> Optional[str]:
    """
    Read a git config value with `git config --<scope> <key>`.

    Any non-zero exit means "not set"; this function never raises for it.

    Returns:
        Optional[str]: The value, or None when the key is not set
    """
    log = log or logger
    scope = to_scope(scope)

    log.debug(f"Getting git config {key} ({scope.value})")
    result = executor.run(GIT_EXECUTABLE, ["config", scope.flag, key])

    if not result.ok:
        log.debug(f"Git config {key} not set")
        return None

    log.debug(f"Git config {key} = {result.stdout}")
    return result.stdout
