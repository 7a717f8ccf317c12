"""Tests for reading and writing the worklog.* git config section."""

import pytest

from git_worklog import config
from git_worklog.errors import InvalidConfigurationError

from conftest import completed

STORED = (
    "worklog.email dev@example.com\n"
    "worklog.password pass word\n"
    "worklog.type pre-push\n"
    "worklog.url https://jira.example.com\n"
    "worklog.version 3\n"
)


@pytest.fixture
def git_config(monkeypatch):
    """Fake ``git config``; returns the list of argument lists it was called with."""
    calls = []

    def _set(stdout="", returncode=0, stderr=""):
        def fake_run(args, **kwargs):
            calls.append(args)
            return completed(stdout, returncode, stderr)

        monkeypatch.setattr("git_worklog.config.subprocess.run", fake_run)
        return calls

    return _set


class TestReadGitConfig:
    def test_parses_section(self, git_config):
        calls = git_config(STORED)
        assert config.read_git_config() == {
            "email": "dev@example.com",
            "password": "pass word",
            "type": "pre-push",
            "url": "https://jira.example.com",
            "version": "3",
        }
        assert calls[0][:3] == ["git", "config", "--local"]
        assert "--get-regexp" in calls[0]

    def test_nothing_stored(self, git_config):
        git_config("", returncode=1)
        assert config.read_git_config() == {}

    def test_ignores_unknown_keys(self, git_config):
        git_config("worklog.email a@b\nworklog.colour blue\n")
        assert config.read_git_config() == {"email": "a@b"}

    def test_git_error(self, git_config):
        git_config("", returncode=128, stderr="fatal: --local can only be used inside a git repository")
        with pytest.raises(InvalidConfigurationError):
            config.read_git_config()


class TestGetWorklogConfig:
    def test_absent(self, git_config):
        git_config("", returncode=1)
        assert config.get_worklog_config() is None

    def test_credentials(self, git_config):
        git_config(STORED)
        creds = config.get_worklog_config()
        assert creds.email == "dev@example.com"
        assert creds.password == "pass word"
        assert creds.base_url == "https://jira.example.com"
        assert creds.api_version == "3"
        assert creds.hook_type == "pre-push"

    def test_defaults_for_optional_keys(self, git_config):
        git_config("worklog.email a@b\nworklog.password x\nworklog.url https://j\n")
        creds = config.get_worklog_config()
        assert creds.api_version == "2"
        assert creds.hook_type == "pre-commit"

    def test_environment_overrides(self, git_config, monkeypatch):
        git_config(STORED)
        monkeypatch.setenv("WORKLOG_PASSWORD", "from-env")
        assert config.get_worklog_config().password == "from-env"

    def test_dotenv_file(self, git_config, tmp_path):
        git_config("", returncode=1)
        (tmp_path / ".env").write_text(
            "WORKLOG_EMAIL=ci@example.com\nWORKLOG_PASSWORD=token\nWORKLOG_URL=https://jira.example.com\n"
        )
        creds = config.get_worklog_config()
        assert creds.email == "ci@example.com"

    @pytest.mark.parametrize("stored", [
        "worklog.email a@b\nworklog.url https://j\n",
        "worklog.email a@b\nworklog.password x\nworklog.url http://j\n",
        "worklog.email a@b\nworklog.password x\nworklog.url https://j\nworklog.version 4\n",
        "worklog.email a@b\nworklog.password x\nworklog.url https://j\nworklog.type post-merge\n",
    ])
    def test_unusable_config(self, git_config, stored):
        git_config(stored)
        with pytest.raises(InvalidConfigurationError):
            config.get_worklog_config()


class TestSaveWorklogConfig:
    def test_writes_each_key(self, git_config):
        calls = git_config()
        config.save_worklog_config({"email": "a@b", "version": "2", "confirmPassword": "x"})
        assert calls == [
            ["git", "config", "--local", "worklog.email", "a@b"],
            ["git", "config", "--local", "worklog.version", "2"],
        ]

    def test_write_failure(self, git_config):
        git_config(returncode=3, stderr="error: could not lock config file")
        with pytest.raises(InvalidConfigurationError):
            config.save_worklog_config({"email": "a@b"})
