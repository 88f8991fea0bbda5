"""Shared pytest fixtures for remotekeeper tests."""

from __future__ import annotations

from typing import Optional

import pytest

from remotekeeper.config.constants import ENV_VAR_DEFINITIONS
from remotekeeper.exceptions import SyncCliError
from remotekeeper.services.remote_manager import RemoteManager


class FakeRunner:
    """Stand-in for run_rclone that records calls and replays canned outcomes.

    Outcomes are registered per argument prefix; the longest matching prefix
    wins and unmatched calls return "".
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.envs: list[Optional[dict]] = []
        self._outcomes: list[tuple[tuple[str, ...], Optional[str], Optional[str]]] = []

    def on(self, *prefix: str, output: str = "", error: Optional[str] = None) -> "FakeRunner":
        self._outcomes.append((prefix, output, error))
        return self

    def __call__(self, args, env=None) -> str:
        args = list(args)
        self.calls.append(args)
        self.envs.append(env)

        matches = [o for o in self._outcomes if tuple(args[: len(o[0])]) == o[0]]
        if not matches:
            return ""
        _, output, error = max(matches, key=lambda o: len(o[0]))
        if error is not None:
            raise SyncCliError(error, command=" ".join(args[:2]), exit_code=1, stderr=error)
        return output

    def commands(self, *prefix: str) -> list[list[str]]:
        """Recorded calls starting with ``prefix``."""
        return [c for c in self.calls if tuple(c[: len(prefix)]) == prefix]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's REMOTEKEEPER_* settings out of the tests."""
    for name in ENV_VAR_DEFINITIONS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REMOTEKEEPER_CONFIG_DIR", str(tmp_path / "config"))
    return tmp_path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def drive_fetcher():
    """Drive lookup double that must not be reached unless a test says so."""
    calls: list[str] = []

    def fetch(token: str) -> list[str]:
        calls.append(token)
        return ["drive_id", "drive-123", "drive_type", "personal"]

    fetch.calls = calls
    return fetch


@pytest.fixture
def manager(fake_runner, drive_fetcher) -> RemoteManager:
    return RemoteManager(runner=fake_runner, drive_fetcher=drive_fetcher)
