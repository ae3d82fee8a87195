"""
Error types raised by glab-setup-git-identity.

Only genuine failures are raised. A git config key that is not set or a
GitLab CLI that is not authenticated are ordinary results (None / False).
"""

from typing import List, Optional

from glab_identity.constants import GLAB_INSTALL_URL


class GlabIdentityError(Exception):
    """Base class for all errors raised by this package"""


class ToolNotFoundError(GlabIdentityError):
    """The GitLab CLI executable could not be located"""

    def __init__(self, executable: str = "glab"):
        self.executable = executable
        super().__init__(
            f"{executable} CLI not found. Please install {executable}: {GLAB_INSTALL_URL}"
        )


class AuthenticationError(GlabIdentityError):
    """GitLab CLI login did not succeed"""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"GitLab CLI authentication with {hostname} failed")


class ApiError(GlabIdentityError):
    """The GitLab user record could not be fetched or interpreted"""

    def __init__(self, message: str, raw_output: Optional[str] = None):
        self.raw_output = raw_output
        super().__init__(message)


class ConfigWriteError(GlabIdentityError):
    """A git config write exited with a non-zero status"""

    def __init__(self, key: str, stderr: str):
        self.key = key
        self.stderr = stderr
        super().__init__(f"Failed to set git config {key}: {stderr}")


class ConfigurationError(GlabIdentityError):
    """Conflicting command-line options"""

    def __init__(self, conflicts: List[str]):
        self.conflicts = list(conflicts)
        super().__init__("; ".join(self.conflicts))
