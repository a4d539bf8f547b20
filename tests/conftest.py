"""Shared test fixtures and configuration."""

import json
import subprocess
import tempfile
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from gitu.identities import Store


class FakeGitRun:
    """Stands in for subprocess.run and records every git invocation."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.returncodes: dict[str, int] = {}
        self.stderr = ""
        self.missing_binary = False

    def fail_on(self, key: str, returncode: int = 1, stderr: str = "") -> None:
        self.returncodes[key] = returncode
        self.stderr = stderr

    def __call__(self, args, **kwargs):
        if self.missing_binary:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        self.calls.append(list(args))
        key = args[-1] if "--unset" in args else args[-2]
        returncode = self.returncodes.get(key, 0)
        return subprocess.CompletedProcess(
            args, returncode, stdout="", stderr=self.stderr if returncode else ""
        )

    @property
    def keys(self) -> list[str]:
        """Configuration keys touched, in call order."""
        return [call[-1] if "--unset" in call else call[-2] for call in self.calls]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def home(temp_dir: Path, monkeypatch) -> Path:
    """Point the home directory at a temporary location."""
    home_dir = temp_dir / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    for var in ("GITU_STORE_PATH", "GITU_SCOPE", "GITU_GIT_EXECUTABLE", "GITU_SSH_EXECUTABLE", "GITU_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return home_dir


@pytest.fixture
def store_path(temp_dir: Path) -> Path:
    """Path for an identity store file."""
    return temp_dir / "gitu.json"


@pytest.fixture
def fake_git(monkeypatch) -> FakeGitRun:
    """Replace subprocess.run used by the git runner."""
    fake = FakeGitRun()
    monkeypatch.setattr("gitu.switch.git.subprocess.run", fake)
    return fake


@pytest.fixture
def sample_store() -> Store:
    """Store with two identities, work being current."""
    return (
        Store()
        .add("work", "Jane Doe", "jane@co.com", "~/.ssh/id_work")
        .add("personal", "Jane", "jane@home.org")
    )


@pytest.fixture
def write_store():
    """Write raw store data (dict or text) to a path."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data, indent=2))
        return path

    return _write


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
