"""
Thin wrapper around the GitLab CLI (glab).

glab is treated as an opaque executable: every function here builds an
argument vector, runs it through the executor and interprets the exit code
and stdout. The user record is parsed here rather than with glab's --jq flag,
which is not available in every glab version.
"""

import json
import logging
import platform
from typing import Any, Dict, List, Optional

from glab_identity.constants import GLAB_EXECUTABLE
from glab_identity.exceptions import ApiError, ToolNotFoundError
from glab_identity.logging import get_logger
from glab_identity.models import AuthMethod, AuthOptions, UserInfo
from glab_identity.utils import executor

logger = get_logger("glab_identity.gitlab.client")

NO_USERNAME_MESSAGE = (
    "No username found in GitLab user data. "
    "Please ensure your GitLab account has a username."
)
NO_EMAIL_MESSAGE = (
    "No email found on GitLab account. "
    "Please set a primary email in your GitLab settings."
)


def _hostname_args(hostname: Optional[str]) -> List[str]:
    return ["--hostname", hostname] if hostname else []


def resolve_executable_path(log: Optional[logging.Logger] = None) -> str:
    """
    Get the full path to the glab executable.

    Uses `where` on Windows and `which` elsewhere, so no particular
    installation method is assumed.

    Returns:
        str: Path of the first glab found on PATH

    Raises:
        ToolNotFoundError: If glab is not installed
    """
    log = log or logger
    log.debug("Detecting glab installation path...")

    lookup = "where" if platform.system().lower() == "windows" else "which"
    result = executor.run(lookup, [GLAB_EXECUTABLE])

    if not result.ok or not result.stdout.strip():
        raise ToolNotFoundError(GLAB_EXECUTABLE)

    glab_path = result.stdout.splitlines()[0].strip()
    log.debug(f"Found glab at: {glab_path}")
    return glab_path


def check_authenticated(
    hostname: Optional[str] = None, log: Optional[logging.Logger] = None
) -> bool:
    """
    Check whether glab has working credentials.

    Runs `glab auth status [--hostname H]`. Never raises: any failure,
    including glab being missing, is reported as not authenticated.
    """
    log = log or logger
    log.debug("Checking GitLab CLI authentication status...")

    result = executor.run(GLAB_EXECUTABLE, ["auth", "status"] + _hostname_args(hostname))

    if not result.ok:
        log.debug(f"GitLab CLI is not authenticated: {result.stderr}")
        return False

    log.debug("GitLab CLI is authenticated")
    return True


def build_login_args(options: AuthOptions) -> List[str]:
    """
    Build the `glab auth login` argument vector.

    Exactly one of --job-token, --token or --stdin is added, in that order
    of precedence. With none of them glab runs its interactive login.
    """
    args = ["auth", "login"]

    if options.hostname:
        args.extend(["--hostname", options.hostname])
    if options.git_protocol:
        args.extend(["--git-protocol", _enum_value(options.git_protocol)])
    if options.api_protocol:
        args.extend(["--api-protocol", _enum_value(options.api_protocol)])
    if options.api_host:
        args.extend(["--api-host", options.api_host])
    if options.use_keyring:
        args.append("--use-keyring")

    method = options.auth_method()
    if method == AuthMethod.JOB_TOKEN:
        args.extend(["--job-token", options.job_token])
    elif method == AuthMethod.TOKEN:
        args.extend(["--token", options.token])
    elif method == AuthMethod.STDIN:
        args.append("--stdin")

    return args


def _enum_value(value: Any) -> str:
    return getattr(value, "value", value)


def login(options: AuthOptions, log: Optional[logging.Logger] = None) -> bool:
    """
    Run `glab auth login` interactively.

    glab shares this process's terminal so any remaining prompts work.
    In stdin mode, `options.stdin_token` (if set) is piped to glab followed
    by a newline; otherwise glab reads this process's stdin directly.

    Returns:
        bool: True only if glab exited with status 0
    """
    log = log or logger
    args = build_login_args(options)

    piped_input = None
    if options.auth_method() == AuthMethod.STDIN and options.stdin_token:
        piped_input = f"{options.stdin_token}\n"

    # The argument vector is sanitized by the formatter before it is written
    log.debug(f"Running: glab {' '.join(args)}")

    result = executor.run(
        GLAB_EXECUTABLE, args, capture=False, piped_input=piped_input
    )

    if not result.ok:
        log.error(f"GitLab CLI authentication failed (exit code {result.exit_code})")
        if result.stderr:
            log.debug(result.stderr)
        return False

    log.info("GitLab CLI authentication successful")
    return True


def fetch_user_record(
    hostname: Optional[str] = None, log: Optional[logging.Logger] = None
) -> str:
    """
    Run `glab api user` and return its raw stdout.

    Raises:
        ApiError: If glab exits with a non-zero status; the message carries stderr
    """
    log = log or logger
    log.debug("Fetching GitLab user record...")

    result = executor.run(GLAB_EXECUTABLE, ["api", "user"] + _hostname_args(hostname))

    if not result.ok:
        raise ApiError(f"Failed to get GitLab user info: {result.stderr}", result.stderr)

    return result.stdout


def parse_user_record(raw: str) -> Dict[str, Any]:
    """
    Decode the JSON object printed by `glab api user`.

    Raises:
        ApiError: If the text is not a JSON object; the message embeds the raw text
    """
    try:
        user_data = json.loads(raw.strip())
    except ValueError as e:
        raise ApiError(
            f"Failed to parse GitLab user data: {e}. Raw output: {raw}", raw
        ) from e

    if not isinstance(user_data, dict):
        raise ApiError(
            f"Failed to parse GitLab user data: expected a JSON object. Raw output: {raw}",
            raw,
        )
    return user_data


def _require_field(user_data: Dict[str, Any], field: str, message: str, raw: str) -> str:
    value = user_data.get(field)
    if not value or not isinstance(value, str):
        raise ApiError(message, raw)
    return value


def get_username(
    hostname: Optional[str] = None, log: Optional[logging.Logger] = None
) -> str:
    """Get the GitLab username of the authenticated account"""
    log = log or logger
    raw = fetch_user_record(hostname, log=log)
    username = _require_field(parse_user_record(raw), "username", NO_USERNAME_MESSAGE, raw)
    log.debug(f"GitLab username: {username}")
    return username


def get_email(
    hostname: Optional[str] = None, log: Optional[logging.Logger] = None
) -> str:
    """Get the primary email of the authenticated account"""
    log = log or logger
    raw = fetch_user_record(hostname, log=log)
    email = _require_field(parse_user_record(raw), "email", NO_EMAIL_MESSAGE, raw)
    log.debug(f"GitLab primary email: {email}")
    return email


def get_user_info(
    hostname: Optional[str] = None, log: Optional[logging.Logger] = None
) -> UserInfo:
    """
    Get username and primary email from a single `glab api user` call.

    Raises:
        ApiError: If the call fails, the output is not JSON, or either
            field is missing or empty
    """
    log = log or logger
    log.debug("Getting GitLab user information...")

    raw = fetch_user_record(hostname, log=log)
    user_data = parse_user_record(raw)
    username = _require_field(user_data, "username", NO_USERNAME_MESSAGE, raw)
    email = _require_field(user_data, "email", NO_EMAIL_MESSAGE, raw)

    log.debug(f"GitLab username: {username}")
    log.debug(f"GitLab primary email: {email}")
    return UserInfo(username=username, email=email)
