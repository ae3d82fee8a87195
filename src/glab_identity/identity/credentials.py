"""
Git credential helper configuration for GitLab hosts.

The GitLab CLI has no `auth setup-git` command, so git is pointed at
`glab auth git-credential` here. Without it HTTPS pushes and pulls fail with
"could not read Username".
"""

import logging
from typing import Optional

from glab_identity.constants import (
    CREDENTIAL_HELPER_TEMPLATE,
    CREDENTIAL_URL_TEMPLATE,
    DEFAULT_HOSTNAME,
)
from glab_identity.exceptions import ConfigWriteError
from glab_identity.gitlab.client import resolve_executable_path
from glab_identity.logging import get_logger
from glab_identity.models import Scope
from glab_identity.utils.git.config import add_config, get_config, set_config

logger = get_logger("glab_identity.identity.credentials")


def credential_helper_key(hostname: str) -> str:
    """git config key holding the helper chain for a GitLab host"""
    return f"credential.{CREDENTIAL_URL_TEMPLATE.format(hostname=hostname)}.helper"


def setup_git_credential_helper(
    hostname: str = DEFAULT_HOSTNAME,
    force: bool = False,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Configure glab as the global git credential helper for a GitLab host.

    An existing helper for the host is left alone unless `force` is set.
    Otherwise the helper chain for the host is reset with an empty value and
    `!<glab path> auth git-credential` is added to it.

    Args:
        hostname: GitLab hostname
        force: Replace a helper that is already configured
        log: Logger to use instead of the module logger

    Returns:
        bool: True when a helper is configured, False if adding it failed

    Raises:
        ToolNotFoundError: If glab is not installed
    """
    log = log or logger
    log.debug("Configuring git credential helper for GitLab CLI...")

    glab_path = resolve_executable_path(log=log)
    key = credential_helper_key(hostname)
    credential_helper = CREDENTIAL_HELPER_TEMPLATE.format(glab_path=glab_path)

    existing = get_config(key, Scope.GLOBAL, log=log)
    if existing and not force:
        log.debug(f"Existing credential helper found for {hostname}: {existing}")
        log.info(
            f"Git credential helper already configured for {hostname}. "
            "Use force to overwrite."
        )
        return True

    log.debug(f"Clearing existing credential helpers for {key}...")
    try:
        set_config(key, "", Scope.GLOBAL, log=log)
    except ConfigWriteError as e:
        # Nothing to clear, or several values git refuses to overwrite in place
        log.debug(f"Could not clear credential helper chain: {e.stderr}")

    log.debug(f"Setting credential helper: {credential_helper}")
    try:
        add_config(key, credential_helper, Scope.GLOBAL, log=log)
    except ConfigWriteError as e:
        log.error(f"Failed to set git credential helper: {e.stderr}")
        return False

    log.info(f"Git credential helper configured for {hostname}")
    log.debug(f"  Key: {key}")
    log.debug(f"  Helper: {credential_helper}")
    return True
