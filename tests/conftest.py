"""
Pytest configuration and shared fixtures for ukol-provisioner tests.

No test touches the real system: subprocess.run is replaced by FakeRunner
and every path points into tmp_path.
"""

import io
import logging
import subprocess
from typing import Dict, List, Tuple

import pytest

from ukol_provisioner.context import ProvisionContext
from ukol_provisioner.lib.env import ProvisionPaths
from ukol_provisioner.logging_utils import ProgressReporter


class FakeRunner:
    """Stand-in for subprocess.run that records argv lists."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.failures: Dict[Tuple[str, ...], int] = {}
        self.stdout: Dict[Tuple[str, ...], str] = {("losetup",): "/dev/loop7\n"}

    def fail_on(self, *prefix: str, returncode: int = 1) -> None:
        self.failures[tuple(prefix)] = returncode

    def respond(self, *prefix: str, stdout: str) -> None:
        self.stdout[tuple(prefix)] = stdout

    @staticmethod
    def _match(argv, table):
        for prefix, value in table.items():
            if tuple(argv[: len(prefix)]) == prefix:
                return value
        return None

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        rc = self._match(argv, self.failures)
        if rc is not None:
            return subprocess.CompletedProcess(argv, rc, "", "simulated failure")
        return subprocess.CompletedProcess(argv, 0, self._match(argv, self.stdout) or "", "")

    def programs(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_run(monkeypatch):
    runner = FakeRunner()
    monkeypatch.setattr("ukol_provisioner.lib.command.subprocess.run", runner)
    return runner


@pytest.fixture
def paths(tmp_path) -> ProvisionPaths:
    return ProvisionPaths(
        backing_file=str(tmp_path / "ukol.img"),
        mount_point=str(tmp_path / "www" / "ukol"),
        fstab=str(tmp_path / "fstab"),
        repo_file=str(tmp_path / "yum.repos.d" / "ukol.repo"),
        state_default=str(tmp_path / "run.json"),
        log_default=str(tmp_path / "provision.log"),
    )


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def ctx(paths, out) -> ProvisionContext:
    return ProvisionContext(packages=("pkgA", "pkgB"), paths=paths, reporter=ProgressReporter(out))


@pytest.fixture(autouse=True)
def reset_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    for attr in ("_ukol_configured", "_ukol_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
    root.setLevel(level)
