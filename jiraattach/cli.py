"""jiraattach CLI - Main entry point."""

import argparse

from jiraattach import __version__
from jiraattach.attach import attach_command
from jiraattach.config import default_config_path

DESCRIPTION = """\
Attach the file at the given path to an issue. A comment will
automatically be added to the issue with a link to the attachment."""

EPILOG = """\
config:
  The config file must be a JSON formatted file and contain the
  following properties.

  jira_url - URL for the Jira instance.

  auth - API authentication credentials. The expected format is
         'username:password'.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jiraattach",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-config",
        "--config",
        default=str(default_config_path()),
        help="Path to config file (default: %(default)s)",
    )
    parser.add_argument(
        "-no-comment",
        "--no-comment",
        action="store_true",
        help="Don't create comment with link to attachment",
    )
    parser.add_argument(
        "key",
        nargs="?",
        help="Key of the Jira issue to attach the file to (e.g., PROJ-123)",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Path to the file to attach",
    )
    # Trailing arguments are ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    attach_command(args)


if __name__ == "__main__":
    main()
