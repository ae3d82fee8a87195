"""
Identity operations composed from the GitLab CLI shim and git config access.
"""

from glab_identity.identity.auth import ensure_authenticated
from glab_identity.identity.credentials import (
    credential_helper_key,
    setup_git_credential_helper,
)
from glab_identity.identity.setup import setup_identity, verify_identity

__all__ = [
    "credential_helper_key",
    "ensure_authenticated",
    "setup_git_credential_helper",
    "setup_identity",
    "verify_identity",
]
