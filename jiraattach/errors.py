"""Errors raised while attaching a file to a Jira issue.

Every error is terminal: nothing is retried. The CLI prints the message and
exits with a non-zero status.
"""


class JiraAttachError(Exception):
    """Base class for all jiraattach errors."""


class ArgumentError(JiraAttachError):
    """Required command-line arguments are missing."""


class ConfigReadError(JiraAttachError):
    """Config file could not be opened or read."""


class ConfigParseError(JiraAttachError):
    """Config file is not valid JSON of the expected shape."""


class FileOpenError(JiraAttachError):
    """Attachment file does not exist or is unreadable."""


class EncodingError(JiraAttachError):
    """Multipart form body could not be written."""


class NetworkError(JiraAttachError):
    """Request could not be sent or no response was received."""


class ResponseParseError(JiraAttachError):
    """Successful response body could not be decoded."""


class EmptyResponseError(JiraAttachError):
    """Upload succeeded but the server returned no attachment."""


class RejectedError(JiraAttachError):
    """Server answered with an unexpected status code.

    Keeps the raw status and body so remote failures (auth, permissions,
    unknown issue key) can be diagnosed from the message alone.
    """

    action = "complete request"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"failed to {self.action}, status_code={status_code} respbody={body}"
        )


class UploadRejectedError(RejectedError):
    """Attachment endpoint did not answer 200."""

    action = "add attachment"


class CommentRejectedError(RejectedError):
    """Comment endpoint did not answer 201."""

    action = "add comment"
