"""
Value types shared by the GitLab CLI shim, the git config accessor
and the identity operations.

All of them are built fresh per call and never cached.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from glab_identity.constants import (
    DEFAULT_API_PROTOCOL,
    DEFAULT_GIT_PROTOCOL,
    DEFAULT_HOSTNAME,
    DEFAULT_USE_KEYRING,
)


class Scope(str, Enum):
    """git config file tier"""
    GLOBAL = "global"
    LOCAL = "local"

    @property
    def flag(self) -> str:
        return f"--{self.value}"


class GitProtocol(str, Enum):
    SSH = "ssh"
    HTTPS = "https"
    HTTP = "http"


class ApiProtocol(str, Enum):
    HTTPS = "https"
    HTTP = "http"


class AuthMethod(str, Enum):
    """How a token reaches `glab auth login`"""
    JOB_TOKEN = "job-token"
    TOKEN = "token"
    STDIN = "stdin"
    INTERACTIVE = "interactive"


ScopeLike = Union[Scope, str]


def to_scope(scope: ScopeLike) -> Scope:
    """Accept either a Scope or its string value ('global' / 'local')"""
    if isinstance(scope, Scope):
        return scope
    return Scope(str(scope).lower())


@dataclass
class AuthOptions:
    """
    Options for `glab auth login`.

    Only one authentication method is used per login, chosen in the order
    job_token > token > read_token_from_stdin. When reading from stdin,
    `stdin_token` is piped to glab if given; otherwise glab reads the
    caller's own standard input.
    """

    hostname: str = DEFAULT_HOSTNAME
    token: Optional[str] = None
    job_token: Optional[str] = None
    git_protocol: GitProtocol = GitProtocol(DEFAULT_GIT_PROTOCOL)
    api_protocol: ApiProtocol = ApiProtocol(DEFAULT_API_PROTOCOL)
    api_host: Optional[str] = None
    use_keyring: bool = DEFAULT_USE_KEYRING
    read_token_from_stdin: bool = False
    stdin_token: Optional[str] = None
    verbose: bool = False

    def auth_method(self) -> AuthMethod:
        if self.job_token:
            return AuthMethod.JOB_TOKEN
        if self.token:
            return AuthMethod.TOKEN
        if self.read_token_from_stdin:
            return AuthMethod.STDIN
        return AuthMethod.INTERACTIVE


DEFAULT_AUTH_OPTIONS = AuthOptions()


@dataclass(frozen=True)
class UserInfo:
    """GitLab account identity; both fields are always non-empty"""
    username: str
    email: str


@dataclass(frozen=True)
class GitIdentity:
    """Current user.name / user.email in one git config scope"""
    username: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.username) and bool(self.email)
