"""Utility functions for CLI commands."""

import logging
import math
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from projectboard.client import ProjectClient, ProjectState
from projectboard.config import Config

console = Console()


def setup_logging(level: str = "warning") -> None:
    """Route log records to stderr through rich."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        console.print(f"[red]❌ Unknown log level: {level}[/red]")
        raise typer.Exit(1)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def get_config() -> Config:
    """Get config for the current project directory."""
    return Config()


def get_state(url: Optional[str] = None) -> ProjectState:
    """Build a ProjectState for the configured server and load its snapshot.

    Exits with status 1 if the configuration is invalid or the server
    cannot be reached.

    Args:
        url: Override for the configured API URL
    """
    try:
        settings = get_config().load()
    except ValueError as e:
        console.print(f"[red]❌ Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    client = ProjectClient(url or settings.api_url, timeout=settings.timeout)
    state = ProjectState(client)
    if not state.refresh():
        console.print(f"[red]❌ Could not reach {client.base_url}[/red]")
        raise typer.Exit(1)
    return state


def parse_number(value: Optional[str]) -> float:
    """Parse a numeric form field, falling back to 0."""
    if value is None:
        return 0
    try:
        number = float(value)
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0
