"""
Subprocess execution for the external `glab` and `git` executables.

Every call spawns exactly one process and returns an ExecResult. A non-zero
exit never raises here; callers branch on `exit_code`.
"""

import subprocess
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from glab_identity.constants import SPAWN_FAILURE_EXIT_CODE
from glab_identity.logging import get_logger, log_command_call

logger = get_logger("glab_identity.utils.executor")


@dataclass(frozen=True)
class ExecResult:
    """Outcome of one external command"""
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def run(
    command: str,
    args: Optional[Sequence[str]] = None,
    capture: bool = True,
    inherit_stdin: bool = False,
    piped_input: Optional[str] = None,
) -> ExecResult:
    """
    Run an external program.

    Args:
        command: Executable name or path
        args: Argument vector (never passed through a shell)
        capture: Buffer stdout/stderr and return them with trailing whitespace
            removed. When False the child shares this process's stdout/stderr
            and the returned stdout/stderr are empty.
        inherit_stdin: In capture mode, let the child read this process's
            stdin instead of an empty stream
        piped_input: Text written to the child's stdin, which is then closed.
            Takes precedence over stdin inheritance in both modes.

    Returns:
        ExecResult: exit code and captured output. If the executable cannot be
            spawned, exit_code is SPAWN_FAILURE_EXIT_CODE and stderr explains why.
    """
    args = list(args or [])
    argv = [command] + args

    # Undecodable bytes in git config values or glab output become U+FFFD
    kwargs = {"encoding": "utf-8", "errors": "replace", "check": False}
    if capture:
        kwargs["capture_output"] = True
    if piped_input is not None:
        kwargs["input"] = piped_input
    elif capture and not inherit_stdin:
        kwargs["stdin"] = subprocess.DEVNULL

    started = time.monotonic()
    try:
        completed = subprocess.run(argv, **kwargs)
    except OSError as e:
        result = ExecResult(
            exit_code=SPAWN_FAILURE_EXIT_CODE,
            stderr=f"Failed to run '{command}': {e}",
        )
    else:
        result = ExecResult(
            exit_code=completed.returncode,
            stdout=(completed.stdout or "").rstrip() if capture else "",
            stderr=(completed.stderr or "").rstrip() if capture else "",
        )

    log_command_call(
        command,
        args,
        exit_code=result.exit_code,
        duration=time.monotonic() - started,
        error=result.stderr if not result.ok else None,
    )
    return result
