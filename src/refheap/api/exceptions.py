"""
Custom exceptions for the RefHeap API client.
"""

from typing import Any


class RefheapError(Exception):
    """Base exception for RefHeap client errors."""

    def __init__(self, message: str = "", status_code: int | None = None,
                 response_data: dict[str, Any] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class ServiceError(RefheapError):
    """The service answered with an ``error`` message instead of paste data."""

    @property
    def message(self) -> str:
        return str(self)


class DecodeError(RefheapError):
    """Response body is not the JSON we expected."""
    pass


class ConfigError(RefheapError, ValueError):
    """Config could not be constructed from the given positional arguments."""

    def __init__(self, arguments: list[str] | tuple[str, ...]):
        self.arguments = list(arguments)
        super().__init__(f"Config could not be constructed from these args: {self.arguments}")
