"""
Git utilities package.
"""

from glab_identity.utils.git.config import add_config, get_config, set_config

__all__ = [
    "add_config",
    "get_config",
    "set_config",
]
