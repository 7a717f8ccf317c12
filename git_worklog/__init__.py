"""git_worklog package

Git hook that refuses a commit or push until work time is logged in Jira on
the issue named by the current branch (``DN-3815-fix-bug`` -> ``DN-3815``).

Public API:
- extract_issue_key: issue key of the checked-out branch
- fetch_worklog: worklog summary of an issue
- evaluate: pass/fail verdict for a summary
- HookRunner: the whole check, returning an exit status

CLI entrypoint exposed via setup.py as `git-worklog`.
"""

__version__ = "0.4.0"

from .branch import extract_issue_key  # noqa: E402
from .core import fetch_worklog  # noqa: E402
from .hook import HookRunner  # noqa: E402
from .policy import evaluate  # noqa: E402

__all__ = [
    "extract_issue_key",
    "fetch_worklog",
    "evaluate",
    "HookRunner",
    "__version__",
]
