"""config

Reads and writes the ``worklog.*`` section of the local repository's git
config, which is where the setup wizard keeps credentials and preferences:

- worklog.email / worklog.password: Jira login used for basic auth
- worklog.type: git hook the check is installed as
- worklog.url: Jira base url, must be https
- worklog.version: Jira REST API version ("2" or "3")

Any value may be overridden through the environment (or a ``.env`` file in the
working directory) with ``WORKLOG_<KEY>``, e.g. ``WORKLOG_PASSWORD``.
"""

from __future__ import annotations

import logging
import os
import subprocess

from dotenv import dotenv_values, find_dotenv

from .errors import InvalidConfigurationError
from .models import API_VERSIONS, HOOK_TYPES, TrackerCredentials

logger = logging.getLogger(__name__)

SECTION = "worklog"
KEYS = ("email", "password", "type", "url", "version")


def _git_config(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", "config", "--local", *args],
        capture_output=True,
        text=True,
    )


def read_git_config() -> dict:
    """Return the ``worklog.*`` entries of the local git config as a dict."""
    result = _git_config("--get-regexp", rf"^{SECTION}\.")
    # exit status 1 means no matching key
    if result.returncode == 1:
        return {}
    if result.returncode != 0:
        raise InvalidConfigurationError(
            f"Could not read git config: {result.stderr.strip()}"
        )
    values = {}
    for line in result.stdout.splitlines():
        name, _, value = line.partition(" ")
        key = name[len(SECTION) + 1:]
        if key in KEYS:
            values[key] = value
    return values


def _env_overrides() -> dict:
    dotenv_path = find_dotenv(usecwd=True)
    env = dict(dotenv_values(dotenv_path)) if dotenv_path else {}
    env.update(os.environ)
    overrides = {}
    for key in KEYS:
        value = env.get(f"WORKLOG_{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


def validate_url(url: str) -> bool:
    return url.startswith("https://")


def get_worklog_config():
    """Return stored ``TrackerCredentials``, or None when nothing is configured.

    Raises InvalidConfigurationError when a configuration exists but cannot be
    used (missing fields, plain http url, unknown API version).
    """
    values = read_git_config()
    values.update(_env_overrides())
    if not values:
        return None
    logger.debug("Loaded worklog config keys: %s", sorted(values))

    missing = [k for k in ("email", "password", "url") if not values.get(k)]
    if missing:
        raise InvalidConfigurationError(
            f"Worklog configuration is incomplete, missing: {', '.join(missing)}. "
            "Run `git-worklog configure --reconfigure`"
        )
    if not validate_url(values["url"]):
        raise InvalidConfigurationError(f"Jira url must start with https://, got {values['url']}")
    version = values.get("version") or "2"
    if version not in API_VERSIONS:
        raise InvalidConfigurationError(f"Unsupported Jira REST API version: {version}")
    hook_type = values.get("type") or "pre-commit"
    if hook_type not in HOOK_TYPES:
        raise InvalidConfigurationError(f"Unsupported hook type: {hook_type}")

    return TrackerCredentials(
        email=values["email"],
        password=values["password"],
        base_url=values["url"],
        api_version=version,
        hook_type=hook_type,
    )


def save_worklog_config(values: dict) -> None:
    """Persist wizard answers into the local git config."""
    for key in KEYS:
        if key not in values:
            continue
        result = _git_config(f"{SECTION}.{key}", str(values[key]))
        if result.returncode != 0:
            raise InvalidConfigurationError(
                f"Could not write {SECTION}.{key}: {result.stderr.strip()}"
            )
    logger.debug("Saved worklog config keys: %s", sorted(k for k in values if k in KEYS))
