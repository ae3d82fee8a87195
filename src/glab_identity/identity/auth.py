"""
Making sure glab is logged in before identity is configured.
"""

import logging
from typing import Callable, Optional

from glab_identity.exceptions import GlabIdentityError
from glab_identity.gitlab.client import check_authenticated, login
from glab_identity.identity.credentials import setup_git_credential_helper
from glab_identity.logging import get_logger
from glab_identity.models import AuthOptions

logger = get_logger("glab_identity.identity.auth")


def _try_setup_credential_helper(hostname: str, log: logging.Logger) -> bool:
    """Credential helper setup as a best-effort step; failures become warnings"""
    try:
        configured = setup_git_credential_helper(hostname, log=log)
    except GlabIdentityError as e:
        log.warning(f"Failed to setup git credential helper: {e}")
        return False

    if not configured:
        log.warning(
            "Failed to setup git credential helper. "
            "HTTPS git operations may require manual authentication."
        )
    return configured


def ensure_authenticated(
    options: Optional[AuthOptions] = None,
    log: Optional[logging.Logger] = None,
    before_login: Optional[Callable[[], None]] = None,
) -> bool:
    """
    Log glab in when needed and configure the git credential helper.

    When glab is already authenticated the credential helper setup is still
    attempted on every call. When it is not, `glab auth login` runs first;
    if that fails the credential helper is left untouched.

    Args:
        options: Login options, defaults when None
        log: Logger to use instead of the module logger
        before_login: Called once right before `glab auth login` runs

    Returns:
        bool: False only if a login was needed and failed
    """
    log = log or logger
    options = options or AuthOptions()

    if check_authenticated(options.hostname, log=log):
        _try_setup_credential_helper(options.hostname, log)
        return True

    log.info("GitLab CLI is not authenticated. Starting authentication...")
    if before_login is not None:
        before_login()
    if not login(options, log=log):
        return False

    _try_setup_credential_helper(options.hostname, log)
    return True
