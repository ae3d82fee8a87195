"""
Validation of mutually exclusive CLI options.

Runs over the parsed options before any operation starts, so a conflict is
reported as a ConfigurationError rather than a parser-specific usage error.
"""

from typing import List

from glab_identity.exceptions import ConfigurationError
from .cli_options import CliOptions


def find_option_conflicts(options: CliOptions) -> List[str]:
    """Return one message per pair of options that cannot be combined"""
    conflicts = []
    if options.global_scope and options.local_scope:
        conflicts.append("Arguments global and local are mutually exclusive")
    if options.token and options.stdin:
        conflicts.append("Arguments token and stdin are mutually exclusive")
    if options.token and options.job_token:
        conflicts.append("Arguments token and job-token are mutually exclusive")
    if options.job_token and options.stdin:
        conflicts.append("Arguments job-token and stdin are mutually exclusive")
    return conflicts


def validate_options(options: CliOptions) -> None:
    """
    Raise if the options contain conflicting choices.

    Raises:
        ConfigurationError: Listing every conflict found
    """
    conflicts = find_option_conflicts(options)
    if conflicts:
        raise ConfigurationError(conflicts)
