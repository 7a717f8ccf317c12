from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

API_VERSIONS = ("2", "3")
HOOK_TYPES = ("pre-commit", "post-commit", "pre-push")


@dataclass(frozen=True)
class TrackerCredentials:
    email: str
    password: str
    base_url: str
    api_version: str = "2"
    hook_type: str = "pre-commit"


@dataclass(frozen=True)
class WorklogEntry:
    author_display_name: str
    time_spent: str


@dataclass(frozen=True)
class WorklogSummary:
    """Worklogs registered on one issue.

    ``total_count`` is what Jira reports and may exceed ``len(entries)`` when
    the response is paginated.
    """

    issue_key: str
    total_count: int
    entries: Tuple[WorklogEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class VerificationResult:
    passed: bool
    summary: WorklogSummary
