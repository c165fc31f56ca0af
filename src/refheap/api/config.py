"""Configuration management for the RefHeap API client."""

import os
import tomllib
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, asdict

from .exceptions import ConfigError

# Default URL for refheap, the official site
REFHEAP_URL = "https://www.refheap.com/api"
DEFAULT_TIMEOUT = 30
ENV_NAMES = ("REFHEAP_URL", "REFHEAP_USER", "REFHEAP_TOKEN", "REFHEAP_TIMEOUT")


_TOML_ESCAPES = {'\\': '\\\\', '"': '\\"', '\n': '\\n', '\r': '\\r', '\t': '\\t'}


def _escape_string(value: str) -> str:
    """Escape a value for a TOML basic string."""
    out = []
    for ch in value:
        if ch in _TOML_ESCAPES:
            out.append(_TOML_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7f:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return ''.join(out)


def _parse_timeout(value: Any, source: str) -> float:
    """Convert a configured timeout to seconds."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid timeout in {source}: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout in {source}: {value!r}")


# Simple TOML writer function to avoid tomli_w dependency
def _write_toml(data: Dict[str, Any], file_path: Path) -> None:
    """Write data to TOML file using raw Python."""
    lines = []

    def _format_value(value: Any) -> str:
        if isinstance(value, bool):
            return str(value).lower()
        elif isinstance(value, (int, float)):
            return str(value)
        else:
            return f'"{_escape_string(str(value))}"'

    def _write_section(section_name: str, section_data: Dict[str, Any]) -> None:
        lines.append(f"[{section_name}]")
        for key, value in section_data.items():
            lines.append(f"{key} = {_format_value(value)}")
        lines.append("")  # Empty line after section

    # Add header comment
    lines.append("# RefHeap client configuration")
    lines.append("")

    for key, value in data.items():
        if isinstance(value, dict):
            _write_section(key, value)
        else:
            lines.append(f"{key} = {_format_value(value)}")

    with open(file_path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines))


@dataclass
class Config:
    """
    Configuration for the RefHeap client.

    Fields:
        base_url -- The URL to refheap's API.
        username -- The username to authenticate with.
        token    -- The API token to authenticate with.
        timeout  -- Request timeout in seconds.
    """

    base_url: str = REFHEAP_URL
    username: str = ""
    token: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_defaults(cls) -> "Config":
        """Anonymous config for the official site."""
        return cls()

    @classmethod
    def with_base_url(cls, base_url: str) -> "Config":
        """Anonymous config for a custom RefHeap instance."""
        return cls(base_url=base_url)

    @classmethod
    def with_credentials(cls, username: str, token: str) -> "Config":
        """Authenticated config for the official site."""
        return cls(username=username, token=token)

    @classmethod
    def full(cls, base_url: str, username: str, token: str) -> "Config":
        """Authenticated config for a custom RefHeap instance."""
        return cls(base_url=base_url, username=username, token=token)

    @property
    def is_authenticated(self) -> bool:
        return self.username != ""

    def auth_fields(self) -> Dict[str, str]:
        """
        Authentication fields to add to a request.

        The token is sent whenever a username is set, even if it's empty; without
        a username nothing is sent at all.
        """
        if not self.is_authenticated:
            return {}
        return {"username": self.username, "token": self.token}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        # Handle both flat format and [refheap] section format
        if "refheap" in data:
            data = data["refheap"]

        return cls(
            base_url=data.get("base_url") or REFHEAP_URL,
            username=data.get("username", ""),
            token=data.get("token", ""),
            timeout=_parse_timeout(data.get("timeout", DEFAULT_TIMEOUT), "config")
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        if not cls.env_is_set():
            raise ValueError("None of the REFHEAP_* environment variables are set")

        return cls(
            base_url=os.getenv("REFHEAP_URL") or REFHEAP_URL,
            username=os.getenv("REFHEAP_USER", ""),
            token=os.getenv("REFHEAP_TOKEN", ""),
            timeout=_parse_timeout(os.getenv("REFHEAP_TIMEOUT", DEFAULT_TIMEOUT), "REFHEAP_TIMEOUT")
        )

    @staticmethod
    def env_is_set() -> bool:
        """Check if any of the REFHEAP_* environment variables is set."""
        return any(os.getenv(name) for name in ENV_NAMES)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from TOML file.

        Args:
            config_path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If file doesn't exist or has invalid format
        """
        if not config_path.exists():
            raise ValueError(f"Configuration file not found: {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse TOML configuration file {config_path}: {e}")
        return cls.from_dict(data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to TOML file.

        Args:
            config_path: Path to save TOML configuration file
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)
        _write_toml({"refheap": self.to_dict()}, config_path)


def new_config(*args: str) -> Config:
    """
    Build a config from up to three positional strings.

    - no arguments: anonymous config for the official site
    - one argument: a custom URL (for example a local refheap instance)
    - two arguments: username and token, official URL
    - three arguments: URL, username and token, in that order

    :raises ConfigError: For any other number of arguments
    """
    if len(args) == 0:
        return Config.from_defaults()
    elif len(args) == 1:
        return Config.with_base_url(args[0])
    elif len(args) == 2:
        return Config.with_credentials(args[0], args[1])
    elif len(args) == 3:
        return Config.full(args[0], args[1], args[2])
    raise ConfigError(args)


class ConfigManager:
    """Manages client configuration loading and saving."""

    DEFAULT_CONFIG_PATH = Path.home() / ".refheap" / "config.toml"

    @classmethod
    def load_config(cls, config_path: Optional[Path] = None) -> Config:
        """Load configuration from various sources.

        Priority order:
        1. Provided config_path
        2. Environment variables
        3. Default config file
        4. Anonymous defaults

        Args:
            config_path: Optional path to config file

        Returns:
            Config instance

        Raises:
            ValueError: If the chosen source holds an invalid value
        """
        if config_path and config_path.exists():
            return Config.from_file(config_path)

        # A broken REFHEAP_* value is an error, not a reason to drop the credentials
        if Config.env_is_set():
            return Config.from_env()

        if cls.DEFAULT_CONFIG_PATH.exists():
            return Config.from_file(cls.DEFAULT_CONFIG_PATH)

        return Config.from_defaults()

    @classmethod
    def save_config(cls, config: Config, config_path: Optional[Path] = None) -> Path:
        """Save configuration to file.

        Args:
            config: Config instance to save
            config_path: Optional path to save config file (defaults to DEFAULT_CONFIG_PATH)

        Returns:
            The path written
        """
        path = config_path or cls.DEFAULT_CONFIG_PATH
        config.save_to_file(path)
        return path
