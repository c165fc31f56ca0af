"""
Data models for RefHeap API responses.
"""

from dataclasses import dataclass, fields
from typing import Any

from .exceptions import DecodeError

# Python attribute -> key used by RefHeap (the service is case sensitive)
WIRE_NAMES = {
    "paste_id": "paste-id",
    "lines": "lines",
    "views": "views",
    "date": "date",
    "language": "language",
    "private": "private",
    "url": "url",
    "user": "user",
    "contents": "contents",
}


def _check_type(name: str, value: Any, expected: type) -> Any:
    # bool is a subclass of int, but a JSON `true` is not a line count
    if expected is int and isinstance(value, bool):
        raise DecodeError(f"Field '{name}' should be a number, got {value!r}")
    if not isinstance(value, expected):
        raise DecodeError(f"Field '{name}' should be {expected.__name__}, got {type(value).__name__}")
    return value


@dataclass
class Paste:
    """
    A paste on RefHeap.

    Only ``paste_id`` and the fields you want to send (``contents``, ``language``,
    ``private``) need to be set by hand; everything else is filled in from the
    service response after each successful operation.
    """
    paste_id: str = ""
    lines: int = 0
    views: int = 0
    date: str = ""
    language: str = ""
    private: bool = False
    url: str = ""
    user: str = ""
    contents: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Paste":
        """Create a paste from a decoded response."""
        paste = cls()
        paste.update_from(data)
        return paste

    def update_from(self, data: dict[str, Any]) -> None:
        """
        Overwrite fields with the values of a decoded response.

        All values are validated before the first assignment, so a bad response
        leaves the paste exactly as it was.

        :param data: Decoded JSON object from the service
        :raises DecodeError: If a field has the wrong type
        """
        updates = {}
        for f in fields(self):
            key = WIRE_NAMES[f.name]
            if key not in data:
                continue
            value = data[key]
            if value is None:
                # null means "no value", e.g. the user of an anonymous paste
                updates[f.name] = f.default
            else:
                updates[f.name] = _check_type(key, value, type(f.default))
        for name, value in updates.items():
            setattr(self, name, value)

    def to_dict(self) -> dict[str, Any]:
        """Convert the paste to a mapping using the wire field names."""
        return {WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}

    @property
    def is_anonymous(self) -> bool:
        """Check if the paste has no owner."""
        return not self.user


@dataclass
class HighlightedPaste:
    """Response from the highlight endpoint."""
    content: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HighlightedPaste":
        value = data.get("content")
        if value is None:
            return cls()
        return cls(content=_check_type("content", value, str))
