"""Build multipart/form-data bodies for attachment uploads."""

import os
from pathlib import Path

from urllib3.fields import RequestField
from urllib3.filepost import encode_multipart_formdata

from jiraattach.errors import EncodingError, FileOpenError

FIELD_NAME = "file"
PART_CONTENT_TYPE = "application/octet-stream"


def format_header_param(name: str, value: str) -> str:
    """Format a Content-Disposition parameter, backslash-escaping \\ and "."""
    value = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'{name}="{value}"'


def build_file_body(path: str | Path) -> tuple[bytes, str]:
    """Encode a file as a single-part multipart form.

    The part's filename is the path exactly as given, not its base name.

    Args:
        path: Path to the file to encode

    Returns:
        Tuple of (body, content_type). The content type carries a fresh
        random boundary.
    """
    name = os.fspath(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileOpenError(f"error reading attachment, {name}: {e}") from e

    field = RequestField(
        FIELD_NAME, data, filename=name, header_formatter=format_header_param
    )
    field.make_multipart(content_type=PART_CONTENT_TYPE)

    try:
        return encode_multipart_formdata([field])
    except ValueError as e:
        raise EncodingError(f"error writing form body: {e}") from e
