"""hook

Runs the worklog check the way a git hook needs it: load config, read the
issue key from the branch, ask Jira for worklogs, print a report and turn the
verdict into an exit status. Also installs the hook script itself.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from rich.console import Console

from .branch import extract_issue_key
from .config import get_worklog_config
from .core import fetch_worklog
from .errors import ConfigurationMissingError, InvalidConfigurationError, WorklogError
from .models import HOOK_TYPES, TrackerCredentials
from .policy import evaluate, render_report

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1

HOOK_MARKER = "# installed by git-worklog"
HOOK_TEMPLATE = """#!/bin/sh
{marker}
exec "{python}" -m git_worklog check
"""


class HookRunner:
    """One verification run, from branch name to exit status.

    Every error short-circuits the run and exits non-zero, so a failed or
    aborted check blocks the git operation just like a missing worklog.
    """

    def __init__(self, config: TrackerCredentials | None, console: Console = None, err_console: Console = None):
        self.config = config
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def verify(self):
        """Return ``(result, None)`` or ``(None, error)`` without printing anything."""
        if self.config is None:
            return None, ConfigurationMissingError()
        key, error = extract_issue_key()
        if error:
            return None, error
        logger.debug("Checking worklog for %s", key)
        summary, error = fetch_worklog(key, self.config)
        if error:
            return None, error
        return evaluate(summary), None

    def run(self) -> int:
        result, error = self.verify()
        if error:
            self.err_console.print(str(error), style="red", markup=False, highlight=False)
            return EXIT_FAILED
        render_report(result, self.console, self.err_console)
        return EXIT_PASSED if result.passed else EXIT_FAILED


def hooks_dir() -> Path:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--git-path", "hooks"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (FileNotFoundError, subprocess.CalledProcessError) as e:
        raise InvalidConfigurationError(f"Not a git repository, cannot install hook: {e}")
    return Path(result.stdout.strip()).resolve()


def install_hook(hook_type: str, target_dir: Path = None, force: bool = False) -> Path:
    """Write the hook script for ``hook_type`` and make it executable."""
    if hook_type not in HOOK_TYPES:
        raise InvalidConfigurationError(f"Unsupported hook type: {hook_type}")
    target_dir = Path(target_dir) if target_dir else hooks_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / hook_type
    if path.exists() and HOOK_MARKER not in path.read_text(encoding="utf-8") and not force:
        raise InvalidConfigurationError(
            f"{path} already exists and was not installed by git-worklog, use --force to replace it"
        )
    path.write_text(HOOK_TEMPLATE.format(marker=HOOK_MARKER, python=sys.executable), encoding="utf-8")
    os.chmod(path, 0o755)
    logger.debug("Wrote %s", path)
    return path


def run_check(console: Console = None, err_console: Console = None) -> int:
    """Load the stored configuration and run the check once."""
    err_console = err_console or Console(stderr=True)
    try:
        config = get_worklog_config()
    except WorklogError as e:
        err_console.print(str(e), style="red", markup=False, highlight=False)
        return EXIT_FAILED
    return HookRunner(config, console, err_console).run()
