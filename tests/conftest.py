"""Shared pytest configuration and fixtures for the glab-setup-git-identity test suite.

This module provides:
- A fake command runner standing in for the `git`, `glab` and `which`/`where`
  executables, with an in-memory git config store
- Test configuration (paths, markers)
"""
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pytest


# Add src/ to path so test modules can import the glab_identity package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from glab_identity.utils.executor import ExecResult  # noqa: E402


@dataclass
class RecordedCall:
    command: str
    args: List[str]
    capture: bool
    piped_input: Optional[str]

    @property
    def argv(self) -> List[str]:
        return [self.command] + self.args


@dataclass
class FakeCommandRunner:
    """Answers executor.run calls the way git and glab would"""

    glab_path: Optional[str] = "/usr/local/bin/glab"
    auth_status_code: int = 0
    login_code: int = 0
    user_record: str = json.dumps(
        {"id": 1, "username": "ada", "email": "ada@example.com", "name": "Ada Lovelace"}
    )
    api_exit_code: int = 0
    api_stderr: str = ""
    failing_keys: set = field(default_factory=set)
    config: Dict[str, Dict[str, List[str]]] = field(
        default_factory=lambda: {"global": {}, "local": {}}
    )
    calls: List[RecordedCall] = field(default_factory=list)

    def __call__(self, command, args=None, capture=True, inherit_stdin=False, piped_input=None):
        args = list(args or [])
        self.calls.append(RecordedCall(command, args, capture, piped_input))
        if command in ("which", "where"):
            if self.glab_path:
                return ExecResult(0, self.glab_path)
            return ExecResult(1)
        if command == "git":
            return self._git(args)
        if command == "glab":
            return self._glab(args)
        return ExecResult(127, "", f"Failed to run '{command}'")

    def _git(self, args):
        assert args[0] == "config"
        store = self.config[args[1].lstrip("-")]
        rest = args[2:]

        if rest[0] == "--add":
            key, value = rest[1], rest[2]
            if key in self.failing_keys:
                return ExecResult(255, "", "error: could not lock config file")
            store.setdefault(key, []).append(value)
            return ExecResult(0)

        if len(rest) == 1:
            values = store.get(rest[0])
            if not values:
                return ExecResult(1)
            return ExecResult(0, values[-1])

        key, value = rest
        if key in self.failing_keys:
            return ExecResult(255, "", "error: could not lock config file")
        if len(store.get(key, [])) > 1:
            return ExecResult(5, "", f"warning: {key} has multiple values")
        store[key] = [value]
        return ExecResult(0)

    def _glab(self, args):
        if args[:2] == ["auth", "status"]:
            stderr = "" if self.auth_status_code == 0 else "No token provided"
            return ExecResult(self.auth_status_code, "", stderr)
        if args[:2] == ["auth", "login"]:
            return ExecResult(self.login_code)
        if args[:2] == ["api", "user"]:
            if self.api_exit_code:
                return ExecResult(self.api_exit_code, "", self.api_stderr)
            return ExecResult(0, self.user_record)
        return ExecResult(1, "", f"unknown command {args}")

    def value(self, scope: str, key: str) -> Optional[str]:
        values = self.config[scope].get(key)
        return values[-1] if values else None

    def argvs(self, command: Optional[str] = None) -> List[List[str]]:
        return [c.argv for c in self.calls if command is None or c.command == command]

    def config_writes(self) -> List[List[str]]:
        return [
            c.argv for c in self.calls
            if c.command == "git" and len(c.args) > 3
        ]


@pytest.fixture
def fake_runner(mocker):
    """Route every executor.run call through a FakeCommandRunner."""
    runner = FakeCommandRunner()
    mocker.patch("glab_identity.utils.executor.run", side_effect=runner)
    return runner


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (runs real git)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
