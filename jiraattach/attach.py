"""Attach a file to a Jira issue and link it in a comment."""

import argparse
import sys
from pathlib import Path

from jiraattach.config import load_config
from jiraattach.errors import ArgumentError, JiraAttachError
from jiraattach.jira_api import add_comment, attach_file, get_session
from jiraattach.types import Attachment


def comment_text(attachment: Attachment) -> str:
    """Jira wiki markup linking to an attachment."""
    return f"File attached: [{attachment.filename}|{attachment.content}]"


def run(
    config_path: str | Path,
    key: str,
    path: str | Path,
    comment: bool = True,
) -> Attachment:
    """Upload a file to an issue, then comment with a link to it.

    The comment is only attempted after a successful upload. If it fails,
    the attachment stays on the issue.

    Args:
        config_path: Path to the JSON config file
        key: Issue key (e.g., PROJ-123)
        path: Path to the file to upload
        comment: Post a comment linking to the attachment

    Returns:
        The created attachment
    """
    config = load_config(config_path)
    session = get_session()

    print(f"Uploading {path} to {key}...")
    attachment = attach_file(session, config.jira_url, config.auth, key, path)
    print(f"Attached {attachment.filename}: {attachment.content}")

    if not comment:
        return attachment

    add_comment(session, config.jira_url, config.auth, key, comment_text(attachment))
    print(f"Comment added to {key}")
    return attachment


def attach_command(args: argparse.Namespace) -> None:
    """Handle the command line invocation."""
    try:
        if not args.key or not args.path:
            raise ArgumentError("key and path are required")
        run(args.config, args.key, args.path, comment=not args.no_comment)
    except JiraAttachError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
