"""A client for the RefHeap pastebin API."""

from .api import (
    RefheapClient,
    Config,
    ConfigManager,
    new_config,
    Paste,
    HighlightedPaste,
    RefheapError,
    ServiceError,
    DecodeError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "RefheapClient",
    "Config",
    "ConfigManager",
    "new_config",
    "Paste",
    "HighlightedPaste",
    "RefheapError",
    "ServiceError",
    "DecodeError",
    "ConfigError",
]
