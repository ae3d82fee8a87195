"""
Shared pieces of the command-line front end.
"""

from .cli_options import CliOptions
from .validation import find_option_conflicts, validate_options

__all__ = ["CliOptions", "find_option_conflicts", "validate_options"]
