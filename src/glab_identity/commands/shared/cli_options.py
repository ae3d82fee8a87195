"""
CLI option declarations and the parsed options structure.

Every option resolves as: explicit flag > environment variable > built-in
default. Typer reads the environment variables named in `envvar`.
"""

from dataclasses import dataclass
from typing import Optional

import typer

from glab_identity import constants
from glab_identity.models import ApiProtocol, AuthOptions, GitProtocol, Scope


GLOBAL_OPTION = typer.Option(
    False, "--global", "-g", help="Set git config globally (default)"
)
LOCAL_OPTION = typer.Option(
    False,
    "--local",
    "-l",
    envvar=constants.ENV_LOCAL,
    help="Set git config locally (in current repository)",
)
VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", envvar=constants.ENV_VERBOSE, help="Enable verbose output"
)
DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    "--dry",
    envvar=constants.ENV_DRY_RUN,
    help="Dry run mode - show what would be done without making changes",
)
VERIFY_OPTION = typer.Option(
    False, "--verify", help="Verify current git identity configuration"
)
HOSTNAME_OPTION = typer.Option(
    constants.DEFAULT_HOSTNAME,
    "--hostname",
    envvar=constants.ENV_AUTH_HOSTNAME,
    help="GitLab hostname to authenticate with",
)
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    envvar=constants.ENV_AUTH_TOKEN,
    show_envvar=False,
    help="GitLab access token",
)
STDIN_OPTION = typer.Option(False, "--stdin", help="Read token from standard input")
GIT_PROTOCOL_OPTION = typer.Option(
    GitProtocol(constants.DEFAULT_GIT_PROTOCOL),
    "--git-protocol",
    "-p",
    envvar=constants.ENV_AUTH_GIT_PROTOCOL,
    case_sensitive=False,
    help="Protocol for git operations: ssh, https, or http",
)
API_PROTOCOL_OPTION = typer.Option(
    ApiProtocol(constants.DEFAULT_API_PROTOCOL),
    "--api-protocol",
    envvar=constants.ENV_AUTH_API_PROTOCOL,
    case_sensitive=False,
    help="Protocol for API calls: https or http",
)
API_HOST_OPTION = typer.Option(
    None, "--api-host", envvar=constants.ENV_AUTH_API_HOST, help="Custom API host URL"
)
USE_KEYRING_OPTION = typer.Option(
    constants.DEFAULT_USE_KEYRING,
    "--use-keyring",
    envvar=constants.ENV_AUTH_USE_KEYRING,
    help="Store token in system keyring",
)
JOB_TOKEN_OPTION = typer.Option(
    None,
    "--job-token",
    "-j",
    envvar=constants.ENV_AUTH_JOB_TOKEN,
    show_envvar=False,
    help="CI job token for authentication",
)


@dataclass
class CliOptions:
    """Options after flag/environment/default resolution"""

    global_scope: bool = False
    local_scope: bool = False
    verbose: bool = False
    dry_run: bool = False
    verify: bool = False
    hostname: str = constants.DEFAULT_HOSTNAME
    token: Optional[str] = None
    stdin: bool = False
    git_protocol: GitProtocol = GitProtocol(constants.DEFAULT_GIT_PROTOCOL)
    api_protocol: ApiProtocol = ApiProtocol(constants.DEFAULT_API_PROTOCOL)
    api_host: Optional[str] = None
    use_keyring: bool = constants.DEFAULT_USE_KEYRING
    job_token: Optional[str] = None

    @property
    def scope(self) -> Scope:
        return Scope.LOCAL if self.local_scope else Scope.GLOBAL

    def to_auth_options(self) -> AuthOptions:
        return AuthOptions(
            hostname=self.hostname,
            token=self.token,
            job_token=self.job_token,
            git_protocol=self.git_protocol,
            api_protocol=self.api_protocol,
            api_host=self.api_host,
            use_keyring=self.use_keyring,
            read_token_from_stdin=self.stdin,
            verbose=self.verbose,
        )
