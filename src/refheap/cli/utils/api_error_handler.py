"""Centralized API error handling utilities for CLI commands."""

import httpx
from rich.console import Console
from typer import Exit

from refheap.api import RefheapError, ServiceError, DecodeError, ConfigError


class APIErrorHandler:
    """Context manager that provides centralized API error handling."""

    def __init__(self, console: Console | None = None):
        if not console:
            console = Console()
        self.console = console

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            return False

        if issubclass(exc_type, ServiceError):
            self._handle_service_error(exc_value)
        elif issubclass(exc_type, DecodeError):
            self._handle_decode_error(exc_value)
        elif issubclass(exc_type, ConfigError):
            self.console.print(f"[red]Configuration error:[/red] {exc_value}")
        elif issubclass(exc_type, RefheapError):
            self.console.print(f"[red]RefHeap error:[/red] {exc_value}")
        elif issubclass(exc_type, httpx.TimeoutException):
            self.console.print(f"[red]Timeout:[/red] RefHeap did not answer in time ({exc_value})")
            self.console.print("[yellow]Hint:[/yellow] Raise [cyan]timeout[/cyan] in your config "
                               "or set [cyan]REFHEAP_TIMEOUT[/cyan]")
        elif issubclass(exc_type, httpx.HTTPError):
            self._handle_network_error(exc_value)
        elif issubclass(exc_type, ValueError):
            # Unreadable config file, missing paste ID...
            self.console.print(f"[red]Error:[/red] {exc_value}")
        else:
            return False  # Let other exceptions propagate

        raise Exit(1)

    def _handle_service_error(self, e: ServiceError):
        """Handle errors reported by the service."""
        error_msg = str(e).lower()
        self.console.print(f"[red]RefHeap said:[/red] {e}")

        if "does not exist" in error_msg or e.status_code == 404:
            self.console.print("[yellow]Check the paste ID. Deleted pastes can't be fetched.[/yellow]")
        elif "not authorized" in error_msg or "token" in error_msg or e.status_code in (401, 403):
            self.console.print("[yellow]Hint:[/yellow] Editing and deleting require the owner's "
                               "[cyan]--user[/cyan] and [cyan]--token[/cyan]")

    def _handle_decode_error(self, e: DecodeError):
        """Handle responses that aren't RefHeap JSON."""
        self.console.print(f"[red]Unexpected response:[/red] {e}")
        if e.status_code:
            self.console.print(f"[dim]HTTP status: {e.status_code}[/dim]")
        self.console.print("[yellow]Hint:[/yellow] Make sure the API URL points at a RefHeap "
                           "instance, e.g. [cyan]https://www.refheap.com/api[/cyan]")

    def _handle_network_error(self, e: httpx.HTTPError):
        """Handle connection level failures."""
        self.console.print(f"[red]Network error:[/red] {e}")
        self.console.print("[yellow]If this persists, please check:[/yellow]")
        self.console.print("  • Your internet connection")
        self.console.print("  • The configured API URL")
