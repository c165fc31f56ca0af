"""Configuration commands."""
import typer
from rich.console import Console
from rich.table import Table

from ..app import app, app_state
from ..utils.api_error_handler import APIErrorHandler
from ...api import Config, ConfigManager, REFHEAP_URL

__all__ = []

console = Console()
config_app = typer.Typer(help="Show and save the client configuration.")
app.add_typer(config_app, name="config")


def mask_token(token: str) -> str:
    """Hide most of a token, keeping enough to recognize it."""
    if not token:
        return ""
    return f"{token[:4]}...{token[-4:]}" if len(token) > 12 else "***"


@config_app.command()
def show():
    """
    Show the configuration in use (after environment and command line overrides).
    """
    with APIErrorHandler(console):
        config = app_state.config

    table = Table(title="RefHeap Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("API URL", config.base_url)
    table.add_row("User", config.username or "[yellow]anonymous[/yellow]")
    table.add_row("Token", mask_token(config.token))
    table.add_row("Timeout", f"{config.timeout}s")

    console.print(table)


@config_app.command()
def configure(
        url: str = typer.Option(
            REFHEAP_URL, "--url",
            help="RefHeap API URL"
        ),
        user: str = typer.Option(
            "", "--user", "-u",
            prompt="Username (empty for anonymous)",
            help="Username to authenticate with"
        ),
        token: str = typer.Option(
            "", "--token", "-t",
            prompt="API token", hide_input=True,
            help="API token to authenticate with"
        ),
        timeout: float = typer.Option(
            30, "--timeout",
            help="Request timeout in seconds"
        )
):
    """
    Save the client configuration to a TOML file.

    The file is written to the path given with --config, or ~/.refheap/config.toml.
    """
    config = Config(base_url=url, username=user, token=token, timeout=timeout)
    path = ConfigManager.save_config(config, app_state.config_path)
    console.print(f"[green]✓[/green] Configuration saved to [cyan]{path}[/cyan]")
