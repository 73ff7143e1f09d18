"""Shared fixtures for dev-kit tests"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from dev_kit.core.reporter import Reporter
from dev_kit.utils.command_runner import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """Scripted command runner.

    Responses are matched on the longest registered argv prefix; anything
    unscripted succeeds with empty output. Every call is recorded.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.responses: Dict[Tuple[str, ...], CommandResult] = {}
        self.side_effects: Dict[Tuple[str, ...], object] = {}

    def on(self, *prefix: str, exit_code: int = 0, stdout: str = "", stderr: str = "") -> 'FakeRunner':
        self.responses[tuple(prefix)] = CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
        return self

    def when(self, *prefix: str, action=None) -> 'FakeRunner':
        """Run ``action(argv)`` when a call matches prefix"""
        self.side_effects[tuple(prefix)] = action
        return self

    def run(self, argv: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        argv = [str(a) for a in argv]
        self.calls.append(argv)

        for prefix, action in self.side_effects.items():
            if tuple(argv[:len(prefix)]) == prefix:
                action(argv)

        best = None
        for prefix, response in self.responses.items():
            if tuple(argv[:len(prefix)]) == prefix:
                if best is None or len(prefix) > len(best[0]):
                    best = (prefix, response)

        if best is None:
            return CommandResult(exit_code=0, argv=argv)

        response = best[1]
        return CommandResult(
            exit_code=response.exit_code,
            stdout=response.stdout,
            stderr=response.stderr,
            argv=argv
        )

    def called(self, *prefix: str) -> bool:
        return any(tuple(call[:len(prefix)]) == prefix for call in self.calls)


class RecordingReporter(Reporter):
    """Reporter collecting (level, message) events"""

    def __init__(self):
        self.events: List[Tuple[str, str]] = []

    def step(self, message):
        self.events.append(("step", message))

    def info(self, message, detail=None):
        self.events.append(("info", message))

    def success(self, message, detail=None):
        self.events.append(("success", message))

    def warning(self, message, detail=None):
        self.events.append(("warning", message))

    def error(self, message, detail=None):
        self.events.append(("error", message))

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.events if lvl == level]


def write_json_file(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


def read_json_file(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def project(tmp_path):
    """A node project on main with a clean tree"""
    write_json_file(tmp_path / "package.json", {
        "name": "demo-app",
        "version": "1.0.0",
        "scripts": {"start": "node index.js"},
        "dependencies": {"express": "^4.18.0"},
    })
    return tmp_path
