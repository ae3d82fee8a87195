"""
glab-setup-git-identity

Configure git user.name / user.email from the account the GitLab CLI (glab)
is logged in with, and register glab as git's credential helper.
"""

from glab_identity.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigWriteError,
    ConfigurationError,
    GlabIdentityError,
    ToolNotFoundError,
)
from glab_identity.gitlab.client import (
    build_login_args,
    check_authenticated,
    fetch_user_record,
    get_email,
    get_user_info,
    get_username,
    login,
    resolve_executable_path,
)
from glab_identity.identity import (
    ensure_authenticated,
    setup_git_credential_helper,
    setup_identity,
    verify_identity,
)
from glab_identity.models import (
    DEFAULT_AUTH_OPTIONS,
    ApiProtocol,
    AuthOptions,
    GitIdentity,
    GitProtocol,
    Scope,
    UserInfo,
)
from glab_identity.utils.executor import ExecResult, run
from glab_identity.utils.git.config import add_config, get_config, set_config

__version__ = "1.0.0"

__all__ = [
    "ApiError",
    "ApiProtocol",
    "AuthOptions",
    "AuthenticationError",
    "ConfigWriteError",
    "ConfigurationError",
    "DEFAULT_AUTH_OPTIONS",
    "ExecResult",
    "GitIdentity",
    "GitProtocol",
    "GlabIdentityError",
    "Scope",
    "ToolNotFoundError",
    "UserInfo",
    "add_config",
    "build_login_args",
    "check_authenticated",
    "ensure_authenticated",
    "fetch_user_record",
    "get_config",
    "get_email",
    "get_user_info",
    "get_username",
    "login",
    "resolve_executable_path",
    "run",
    "set_config",
    "setup_git_credential_helper",
    "setup_identity",
    "verify_identity",
]
