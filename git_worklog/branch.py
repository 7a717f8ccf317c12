import logging
import re
import subprocess

from .errors import BranchNamingConventionError, NoCurrentBranchError

logger = logging.getLogger(__name__)

ISSUE_KEY_PATTERN = re.compile(r"^\w+-\d+")
CURRENT_MARKER = "* "


def list_branches():
    """Return ``[(name, is_current), ...]`` as listed by ``git branch``."""
    try:
        result = subprocess.run(
            ["git", "branch", "--no-color"],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError:
        raise NoCurrentBranchError("git executable not found")
    except subprocess.CalledProcessError as e:
        raise NoCurrentBranchError((e.stderr or "").strip())
    branches = []
    for line in result.stdout.splitlines():
        if not line.strip():
            continue
        # every line carries a two character prefix: "* ", "+ " or "  "
        branches.append((line[2:].strip(), line.startswith(CURRENT_MARKER)))
    return branches


def current_branch():
    for name, is_current in list_branches():
        if is_current:
            return name
    raise NoCurrentBranchError("no branch is checked out")


def parse_issue_key(branch):
    """Extract the issue key from the start of a branch name.

    ``"DN-3815-add-login"`` -> ``"DN-3815"``.
    """
    match = ISSUE_KEY_PATTERN.match(branch or "")
    if not match:
        raise BranchNamingConventionError(branch)
    return match.group(0)


def extract_issue_key():
    """Return ``(issue_key, None)`` for the checked-out branch, or ``(None, error)``."""
    try:
        branch = current_branch()
        logger.debug("Current branch: %s", branch)
        return parse_issue_key(branch), None
    except (NoCurrentBranchError, BranchNamingConventionError) as e:
        return None, e
