"""Shared fixtures: a fake engine binary standing in for subprocess.run."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field

import pytest

from enginectl.client import Client
from enginectl.execution import runner as runner_module
from enginectl.infrastructure.config import EngineConfig


@dataclass
class FakeEngine:
    """Records every argument vector and replies with queued outputs."""

    calls: list[list[str]] = field(default_factory=list)
    replies: list[tuple[int, str, str]] = field(default_factory=list)

    def reply(self, stdout: str = "", stderr: str = "", exit_code: int = 0) -> None:
        self.replies.append((exit_code, stdout, stderr))

    @property
    def last_args(self) -> list[str]:
        """Arguments of the most recent call, without the binary."""
        return self.calls[-1][1:]

    def __call__(self, argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        assert kwargs.get("capture_output") is True
        assert kwargs.get("text") is True
        self.calls.append(list(argv))
        exit_code, stdout, stderr = self.replies.pop(0) if self.replies else (0, "", "")
        return subprocess.CompletedProcess(argv, exit_code, stdout, stderr)


@pytest.fixture
def engine(monkeypatch: pytest.MonkeyPatch) -> FakeEngine:
    fake = FakeEngine()
    monkeypatch.setattr(runner_module.subprocess, "run", fake)
    return fake


@pytest.fixture
def client(engine: FakeEngine) -> Client:
    return Client(EngineConfig())
