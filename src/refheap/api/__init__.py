"""RefHeap API client module."""

from .client import (
    RefheapClient,
    parse_body,
    get,
    get_paste,
    create,
    save,
    delete,
    fork,
    get_highlighted,
)
from .exceptions import (
    RefheapError,
    ServiceError,
    DecodeError,
    ConfigError,
)
from .models import Paste, HighlightedPaste
from .config import Config, ConfigManager, new_config, REFHEAP_URL

__all__ = [
    "RefheapClient",
    "parse_body",
    "get",
    "get_paste",
    "create",
    "save",
    "delete",
    "fork",
    "get_highlighted",
    "RefheapError",
    "ServiceError",
    "DecodeError",
    "ConfigError",
    "Paste",
    "HighlightedPaste",
    "Config",
    "ConfigManager",
    "new_config",
    "REFHEAP_URL",
]
