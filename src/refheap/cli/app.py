from dataclasses import dataclass, field
from pathlib import Path

import httpx
import typer

from ..api import Config, ConfigManager, RefheapClient

__all__ = ['app', 'app_state']

app = typer.Typer(
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Command line client for the [cyan]RefHeap[/cyan] pastebin.",
)


@dataclass
class AppState:
    """Options shared by all commands."""
    config_path: Path | None = None
    overrides: dict[str, str] = field(default_factory=dict)
    transport: httpx.BaseTransport | None = None

    @property
    def config(self) -> Config:
        """The loaded configuration with command line overrides applied."""
        config = ConfigManager.load_config(self.config_path)
        for key, value in self.overrides.items():
            setattr(config, key, value)
        return config

    def client(self) -> RefheapClient:
        return RefheapClient(self.config, transport=self.transport)


app_state = AppState()


@app.callback()
def setup(
        config_path: Path | None = typer.Option(
            None, "--config", "-c", dir_okay=False,
            help="Path to the TOML config file (default: ~/.refheap/config.toml)",
            envvar="REFHEAP_CONFIG"
        ),
        url: str | None = typer.Option(
            None, "--url", help="RefHeap API URL"
        ),
        user: str | None = typer.Option(
            None, "--user", "-u", help="Username to authenticate with"
        ),
        token: str | None = typer.Option(
            None, "--token", "-t", help="API token to authenticate with"
        ),
):
    """
    Command line client for the RefHeap pastebin.

    CONFIGURATION:
        Config file: ~/.refheap/config.toml
        Environment: REFHEAP_URL, REFHEAP_USER, REFHEAP_TOKEN, REFHEAP_TIMEOUT
    """
    app_state.config_path = config_path
    app_state.overrides = {}
    if url is not None:
        app_state.overrides['base_url'] = url
    if user is not None:
        app_state.overrides['username'] = user
    if token is not None:
        app_state.overrides['token'] = token
