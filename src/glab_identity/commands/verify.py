"""
The --verify mode: show authentication status and the current git identity.
"""

from glab_identity.constants import GLAB_EXECUTABLE
from glab_identity.identity import verify_identity
from glab_identity.logging import get_logger
from glab_identity.models import Scope
from glab_identity.utils import executor
from glab_identity.utils.console import info, plain, success, warning
from .shared.messages import display_identity

logger = get_logger("glab_identity.commands.verify")


def run_verify(scope: Scope) -> None:
    """
    Print glab's own auth status followed by user.name and user.email.

    Informational only: an unauthenticated glab or unset keys are shown,
    not treated as failures.
    """
    info("Verifying git identity configuration...")
    plain()

    plain("1. GitLab CLI authentication status:")
    plain("   $ glab auth status")
    plain()
    # glab prints its own report; its exit code does not matter here
    result = executor.run(GLAB_EXECUTABLE, ["auth", "status"], capture=False)
    if not result.ok:
        logger.debug(f"glab auth status exited with {result.exit_code}")
        if result.stderr:
            warning(result.stderr)
    plain()

    identity = verify_identity(scope)
    display_identity(identity, scope)

    success("Verification complete!")
