"""Data types exchanged with the Jira REST API."""

from dataclasses import dataclass


@dataclass
class Attachment:
    """Attachment metadata returned by the attachments endpoint."""

    content: str
    filename: str

    @classmethod
    def from_dict(cls, data: dict) -> "Attachment":
        """Build from a JSON object, ignoring unknown fields.

        Raises:
            TypeError: data is not an object or a known field is not a string
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected attachment object, got {type(data).__name__}")
        values = {}
        for field in ("content", "filename"):
            value = data.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise TypeError(f"attachment {field} must be a string")
            values[field] = value
        return cls(**values)


@dataclass
class Comment:
    """Payload for the comment endpoint."""

    body: str

    def to_dict(self) -> dict:
        return {"body": self.body}
