"""
The default command: authenticate glab, configure the credential helper and
apply the GitLab identity to git config.
"""

from dataclasses import asdict
from typing import Optional

import typer

from glab_identity import __version__
from glab_identity.constants import APP_NAME
from glab_identity.exceptions import AuthenticationError
from glab_identity.identity import ensure_authenticated, setup_identity
from glab_identity.logging import LogConfig, get_logger, setup_logging
from glab_identity.models import ApiProtocol, GitProtocol
from glab_identity.utils.console import err_console, error, plain, warning
from .shared.cli_options import (
    API_HOST_OPTION,
    API_PROTOCOL_OPTION,
    DRY_RUN_OPTION,
    GIT_PROTOCOL_OPTION,
    GLOBAL_OPTION,
    HOSTNAME_OPTION,
    JOB_TOKEN_OPTION,
    LOCAL_OPTION,
    STDIN_OPTION,
    TOKEN_OPTION,
    USE_KEYRING_OPTION,
    VERBOSE_OPTION,
    VERIFY_OPTION,
    CliOptions,
)
from .shared.messages import (
    display_results,
    print_headless_auth_instructions,
    print_login_failure_help,
)
from .shared.validation import validate_options
from .verify import run_verify


def version_callback(value: bool) -> None:
    if value:
        plain(f"{APP_NAME} {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Progress lines on a normal run, full debug output with --verbose"""
    setup_logging(LogConfig.for_cli(verbose), force_reconfigure=True)


def run_setup(options: CliOptions) -> None:
    """
    Authenticate, then configure (or preview) the git identity.

    Raises:
        AuthenticationError: If glab needed a login and it failed
    """
    logger = get_logger("glab_identity.commands.setup")

    authenticated = ensure_authenticated(
        options.to_auth_options(),
        before_login=lambda: print_headless_auth_instructions(options.hostname),
    )
    if not authenticated:
        print_login_failure_help(options.hostname)
        raise AuthenticationError(options.hostname)

    # dict payloads are sanitized by the log formatter
    logger.debug("Options: %s", asdict(options))

    if options.dry_run:
        plain()
        warning("DRY MODE - No actual changes will be made")

    plain()
    user = setup_identity(
        hostname=options.hostname, scope=options.scope, dry_run=options.dry_run
    )
    display_results(user, options.scope, options.dry_run)


def setup_command(
    global_scope: bool = GLOBAL_OPTION,
    local_scope: bool = LOCAL_OPTION,
    verbose: bool = VERBOSE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verify: bool = VERIFY_OPTION,
    hostname: str = HOSTNAME_OPTION,
    token: Optional[str] = TOKEN_OPTION,
    stdin: bool = STDIN_OPTION,
    git_protocol: GitProtocol = GIT_PROTOCOL_OPTION,
    api_protocol: ApiProtocol = API_PROTOCOL_OPTION,
    api_host: Optional[str] = API_HOST_OPTION,
    use_keyring: bool = USE_KEYRING_OPTION,
    job_token: Optional[str] = JOB_TOKEN_OPTION,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Set up git identity (user.name / user.email) from your GitLab account.

    Uses the GitLab CLI (glab): logs in if needed, registers glab as git's
    credential helper, then writes the account's username and primary email
    to git config.
    """
    options = CliOptions(
        global_scope=global_scope,
        local_scope=local_scope,
        verbose=verbose,
        dry_run=dry_run,
        verify=verify,
        hostname=hostname,
        token=token,
        stdin=stdin,
        git_protocol=git_protocol,
        api_protocol=api_protocol,
        api_host=api_host,
        use_keyring=use_keyring,
        job_token=job_token,
    )
    configure_logging(options.verbose)
    logger = get_logger("glab_identity.commands.setup")

    try:
        validate_options(options)

        if options.verify:
            run_verify(options.scope)
            return

        run_setup(options)
    except typer.Exit:
        raise
    except Exception as e:
        logger.info(f"Setup failed: {e}")
        plain()
        error(f"Error: {e}")
        if options.verbose:
            err_console.print_exception()
        raise typer.Exit(1)
