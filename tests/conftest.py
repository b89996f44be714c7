"""Shared fakes for external processes.

The pipeline talks to find/fd, fzf and tmux through subprocess. Tests swap
those boundaries for recorders so no real selector or tmux server is needed.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

import pytest


class FakeRun:
    """Stand-in for subprocess.run returning canned output per call."""

    def __init__(self, stdout: str = '', returncode: int = 0) -> None:
        self.stdout = stdout
        self.returncode = returncode
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, object]] = []

    def __call__(self, args: Sequence[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        self.kwargs.append(kwargs)
        return subprocess.CompletedProcess(list(args), self.returncode, stdout=self.stdout, stderr='')


class FakeSelector:
    """Records the candidates it was shown and returns a fixed selection."""

    def __init__(self, selection: str | None) -> None:
        self.selection = selection
        self.candidates: list[str] | None = None

    def select(self, candidates: Sequence[str]) -> str | None:
        self.candidates = list(candidates)
        return self.selection


class FakeMultiplexer:
    """Records tmux calls; every operation succeeds unless listed in fail."""

    def __init__(self, existing: Sequence[str] = (), fail: Sequence[str] = ()) -> None:
        self.existing = set(existing)
        self.fail = set(fail)
        self.calls: list[tuple[str, ...]] = []

    def has_session(self, name: str) -> bool:
        self.calls.append(('has_session', name))
        return name in self.existing

    def new_session_detached(self, name: str, directory: str) -> bool:
        return self._record('new_session_detached', name, directory)

    def new_session_or_attach(self, name: str, directory: str) -> bool:
        return self._record('new_session_or_attach', name, directory)

    def attach_session(self, name: str) -> bool:
        return self._record('attach_session', name)

    def switch_client(self, name: str) -> bool:
        return self._record('switch_client', name)

    @property
    def operations(self) -> list[str]:
        """Call names after the existence check."""
        return [call[0] for call in self.calls if call[0] != 'has_session']

    def _record(self, operation: str, *args: str) -> bool:
        self.calls.append((operation, *args))
        return operation not in self.fail


class RecordingLogger:
    """LoggerProtocol implementation keeping messages per level."""

    def __init__(self) -> None:
        self.messages: dict[str, list[str]] = {'progress': [], 'info': [], 'warning': [], 'error': []}

    def progress(self, message: str) -> None:
        self.messages['progress'].append(message)

    def info(self, message: str) -> None:
        self.messages['info'].append(message)

    def warning(self, message: str) -> None:
        self.messages['warning'].append(message)

    def error(self, message: str) -> None:
        self.messages['error'].append(message)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    run = FakeRun()
    monkeypatch.setattr(subprocess, 'run', run)
    return run
