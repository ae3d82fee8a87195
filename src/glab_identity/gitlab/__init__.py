"""
GitLab CLI (glab) integration.
"""

from glab_identity.gitlab.client import (
    build_login_args,
    check_authenticated,
    fetch_user_record,
    get_email,
    get_user_info,
    get_username,
    login,
    parse_user_record,
    resolve_executable_path,
)

__all__ = [
    "build_login_args",
    "check_authenticated",
    "fetch_user_record",
    "get_email",
    "get_user_info",
    "get_username",
    "login",
    "parse_user_record",
    "resolve_executable_path",
]
