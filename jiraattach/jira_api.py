"""Jira REST API calls for attachments and comments.

Talks to the REST endpoints directly with requests so the multipart body,
headers and expected status codes stay under our control.
"""

from pathlib import Path

import requests
from requests.auth import HTTPBasicAuth

from jiraattach.config import split_auth
from jiraattach.errors import (
    CommentRejectedError,
    EmptyResponseError,
    NetworkError,
    ResponseParseError,
    UploadRejectedError,
)
from jiraattach.multipart import build_file_body
from jiraattach.types import Attachment, Comment

TIMEOUT = 5

# Disables Jira's XSRF check for non-browser clients
XSRF_HEADERS = {"X-Atlassian-Token": "nocheck"}

_session: requests.Session | None = None


def set_session(session: requests.Session) -> None:
    """Override the HTTP session for testing."""
    global _session
    _session = session


def reset_session() -> None:
    """Drop the current HTTP session."""
    global _session
    _session = None


def get_session() -> requests.Session:
    """Get the shared HTTP session, creating it on first use."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def issue_url(base_url: str, key: str, resource: str) -> str:
    """Build an issue resource URL under /rest/api/2."""
    return f"{base_url}/rest/api/2/issue/{key}/{resource}"


def basic_auth(auth: str) -> HTTPBasicAuth:
    """Basic auth from a 'username:password' string, encoded as UTF-8."""
    user, password = split_auth(auth)
    return HTTPBasicAuth(user.encode("utf-8"), password.encode("utf-8"))


def _post(
    session: requests.Session,
    url: str,
    auth: str,
    headers: dict,
    **kwargs,
) -> requests.Response:
    try:
        return session.post(
            url,
            headers={**headers, **XSRF_HEADERS},
            auth=basic_auth(auth),
            timeout=TIMEOUT,
            **kwargs,
        )
    except requests.RequestException as e:
        raise NetworkError(f"error sending request: {e}") from e


def attach_file(
    session: requests.Session,
    base_url: str,
    auth: str,
    key: str,
    path: str | Path,
) -> Attachment:
    """Upload a file as an attachment to a Jira issue.

    Args:
        session: HTTP session
        base_url: Jira instance URL
        auth: Credentials as 'username:password'
        key: Issue key (e.g., PROJ-123)
        path: Path to the file to upload

    Returns:
        The first attachment in the server's response

    Raises:
        FileOpenError: File cannot be read
        EncodingError: Form body cannot be written
        NetworkError: Request failed in transport
        UploadRejectedError: Server answered with a status other than 200
        ResponseParseError: Response body is not a list of attachments
        EmptyResponseError: Response list is empty
    """
    body, content_type = build_file_body(path)

    r = _post(
        session,
        issue_url(base_url, key, "attachments"),
        auth,
        {"Content-Type": content_type},
        data=body,
    )

    if r.status_code != 200:
        raise UploadRejectedError(r.status_code, r.text)

    try:
        data = r.json()
    except ValueError as e:
        raise ResponseParseError(f"error decoding attachment response: {e}") from e

    # null decodes as an empty list
    if data is None:
        data = []

    if not isinstance(data, list):
        raise ResponseParseError(
            f"error decoding attachment response: expected a list, got {type(data).__name__}"
        )

    try:
        attachments = [Attachment.from_dict(item) for item in data]
    except TypeError as e:
        raise ResponseParseError(f"error decoding attachment response: {e}") from e

    if not attachments:
        raise EmptyResponseError("failed to add attachment for unknown reason")
    return attachments[0]


def add_comment(
    session: requests.Session,
    base_url: str,
    auth: str,
    key: str,
    message: str,
) -> None:
    """Add a comment to a Jira issue.

    Raises:
        NetworkError: Request failed in transport
        CommentRejectedError: Server answered with a status other than 201
    """
    r = _post(
        session,
        issue_url(base_url, key, "comment"),
        auth,
        {"Content-Type": "application/json"},
        json=Comment(message).to_dict(),
    )

    if r.status_code != 201:
        raise CommentRejectedError(r.status_code, r.text)
