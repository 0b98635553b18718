"""jiraattach configuration."""

import json
from dataclasses import dataclass
from pathlib import Path

from jiraattach.errors import ConfigParseError, ConfigReadError

CONFIG_DIR = Path.home() / ".config" / "jiraattach"
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass(frozen=True)
class Config:
    """Jira instance URL and credentials."""

    jira_url: str = ""
    auth: str = ""

    def credentials(self) -> tuple[str, str]:
        """Split auth into (username, password).

        Splits on the first colon, so passwords may contain colons.
        Without a colon both parts are empty.
        """
        return split_auth(self.auth)


def split_auth(auth: str) -> tuple[str, str]:
    """Split a 'username:password' string."""
    if ":" not in auth:
        return "", ""
    user, _, password = auth.partition(":")
    return user, password


def default_config_path() -> Path:
    """Get the default config file path (~/.config/jiraattach/config.json)."""
    return CONFIG_FILE


def load_config(path: str | Path) -> Config:
    """Load config from a JSON file.

    Args:
        path: Path to the config file

    Returns:
        Parsed Config

    Raises:
        ConfigReadError: File cannot be read
        ConfigParseError: File is not a JSON object with string fields
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ConfigReadError(f"unable to read config file: {e}") from e

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"failed to decode config: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError("failed to decode config: expected a JSON object")

    values = {}
    for field in ("jira_url", "auth"):
        value = data.get(field)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigParseError(
                f"failed to decode config: {field} must be a string"
            )
        values[field] = value

    return Config(**values)
