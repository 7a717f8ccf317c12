import json
import logging

import requests
from jira import JIRA
from jira.exceptions import JIRAError

from .errors import MalformedResponseError, TrackerApiError, TransportError
from .models import WorklogEntry, WorklogSummary

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
WORKLOG_PATH = "{base_url}/rest/api/{version}/issue/{key}/worklog"


def worklog_url(key, creds):
    return WORKLOG_PATH.format(
        base_url=creds.base_url.rstrip("/"),
        version=creds.api_version,
        key=key,
    )


def connect_to_jira(creds):
    """Build a Jira client that only prepares a basic-auth session.

    No request is made here: server info and credential validation are
    skipped, and the session never retries.
    """
    return JIRA(
        server=creds.base_url.rstrip("/"),
        basic_auth=(creds.email, creds.password),
        options={
            "rest_api_version": creds.api_version,
            "headers": {"Accept": "application/json"},
        },
        validate=False,
        get_server_info=False,
        max_retries=0,
        timeout=REQUEST_TIMEOUT,
    )


def parse_worklog(key, body):
    """Decode a worklog response body into a WorklogSummary."""
    try:
        data = json.loads(body)
    except ValueError:
        raise MalformedResponseError("not valid JSON", body)
    if not isinstance(data, dict):
        raise MalformedResponseError("expected a JSON object", body)
    total = data.get("total")
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise MalformedResponseError("missing or invalid 'total'", body)

    entries = []
    for work in data.get("worklogs") or []:
        if not isinstance(work, dict):
            continue
        author = work.get("author") or {}
        name = author.get("displayName") if isinstance(author, dict) else None
        spent = work.get("timeSpent")
        entries.append(
            WorklogEntry(
                author_display_name="" if name is None else str(name),
                time_spent="" if spent is None else str(spent),
            )
        )
    return WorklogSummary(issue_key=key, total_count=total, entries=tuple(entries))


def fetch_worklog(key, creds, jira=None):
    """GET the worklogs of ``key``.

    Returns ``(summary, None)`` on success and ``(None, error)`` otherwise,
    where error is a TransportError, TrackerApiError or MalformedResponseError.
    """
    url = worklog_url(key, creds)
    logger.debug("GET %s", url)
    try:
        jira = jira or connect_to_jira(creds)
        # raw session: JIRA.worklogs() drops the "total" field
        response = jira._session.get(url)
    except JIRAError as e:
        return None, TrackerApiError(e.status_code, e.text or "")
    except requests.exceptions.RequestException as e:
        return None, TransportError(f"Could not reach Jira at {creds.base_url}: {e}")

    logger.debug("Jira responded with HTTP %s", response.status_code)
    # the jira session raises on most error statuses, this covers the rest
    if not 200 <= response.status_code < 300:
        return None, TrackerApiError(response.status_code, response.text)
    try:
        return parse_worklog(key, response.text), None
    except MalformedResponseError as e:
        return None, e
