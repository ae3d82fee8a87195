"""
Applying and inspecting git identity (user.name / user.email).
"""

import logging
from typing import Optional

from glab_identity.constants import GIT_USER_EMAIL_KEY, GIT_USER_NAME_KEY
from glab_identity.gitlab.client import get_user_info
from glab_identity.logging import get_logger
from glab_identity.models import GitIdentity, Scope, ScopeLike, UserInfo, to_scope
from glab_identity.utils.git.config import get_config, set_config

logger = get_logger("glab_identity.identity.setup")


def setup_identity(
    hostname: Optional[str] = None,
    scope: ScopeLike = Scope.GLOBAL,
    dry_run: bool = False,
    log: Optional[logging.Logger] = None,
) -> UserInfo:
    """
    Set git user.name and user.email from the authenticated GitLab account.

    In dry-run mode the account is still fetched but git config is not
    touched. Writes are sequential and not transactional: if user.name
    cannot be written, user.email is not attempted.

    Args:
        hostname: GitLab hostname, glab's default host when None
        scope: git config scope to write
        dry_run: Only report what would be configured
        log: Logger to use instead of the module logger

    Returns:
        UserInfo: The GitLab identity that was (or would be) configured

    Raises:
        ApiError: If the GitLab user record cannot be fetched or is incomplete
        ConfigWriteError: If a git config write fails
    """
    log = log or logger
    scope = to_scope(scope)

    log.info("Fetching GitLab user information...")
    user = get_user_info(hostname, log=log)
    log.info(f"GitLab user: {user.username}")
    log.info(f"GitLab email: {user.email}")

    if dry_run:
        log.info("DRY MODE: Would configure the following:")
        log.info(f'  git config {scope.flag} {GIT_USER_NAME_KEY} "{user.username}"')
        log.info(f'  git config {scope.flag} {GIT_USER_EMAIL_KEY} "{user.email}"')
        return user

    log.info(f"Configuring git ({scope.value})...")
    set_config(GIT_USER_NAME_KEY, user.username, scope, log=log)
    set_config(GIT_USER_EMAIL_KEY, user.email, scope, log=log)
    log.info("Git identity configured successfully")

    return user


def verify_identity(
    scope: ScopeLike = Scope.GLOBAL, log: Optional[logging.Logger] = None
) -> GitIdentity:
    """Read the current user.name and user.email; unset keys come back as None"""
    log = log or logger
    scope = to_scope(scope)
    username = get_config(GIT_USER_NAME_KEY, scope, log=log)
    email = get_config(GIT_USER_EMAIL_KEY, scope, log=log)
    return GitIdentity(username=username, email=email)
