"""jiraattach - attach a file to a Jira issue and link it in a comment."""

from importlib.metadata import version

__version__ = version("jiraattach")
