"""Error kinds raised or returned by the worklog check.

Every error is terminal for the current invocation; the hook runner prints
``str(error)`` and exits non-zero.
"""


class WorklogError(Exception):
    """Base class for everything the check can fail with."""


class NoCurrentBranchError(WorklogError):
    def __init__(self, detail=""):
        msg = "Could not determine the current git branch"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class BranchNamingConventionError(WorklogError):
    def __init__(self, branch):
        self.branch = branch
        super().__init__(f"Branch name {branch} does not match naming convention")


class ConfigurationMissingError(WorklogError):
    def __init__(self):
        super().__init__(
            "Configuration for worklog was not found! To setup one: `git-worklog configure`"
        )


class InvalidConfigurationError(WorklogError):
    pass


class TransportError(WorklogError):
    pass


class MalformedResponseError(WorklogError):
    def __init__(self, reason, body):
        self.body = body
        super().__init__(f"Unexpected response from Jira ({reason}): {body!r}")


class TrackerApiError(WorklogError):
    def __init__(self, status_code, body=""):
        self.status_code = status_code
        self.body = body
        msg = f"Jira responded with HTTP {status_code}"
        if body:
            msg += f": {body}"
        super().__init__(msg)
