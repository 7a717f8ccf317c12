import io
import subprocess

import pytest
from rich.console import Console

from git_worklog.models import TrackerCredentials


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Keep real WORKLOG_* variables and .env files out of the tests."""
    for key in ("EMAIL", "PASSWORD", "TYPE", "URL", "VERSION"):
        monkeypatch.delenv(f"WORKLOG_{key}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def creds():
    return TrackerCredentials(
        email="dev@example.com",
        password="s3cret",
        base_url="https://jira.example.com",
        api_version="2",
    )


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def err_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def git_branches(monkeypatch):
    """Make ``git branch`` print the given listing."""

    def _set(listing):
        monkeypatch.setattr(
            "git_worklog.branch.subprocess.run",
            lambda *args, **kwargs: completed(listing),
        )

    return _set
