"""Main entry point for ProjectBoard API server."""

import os
import uvicorn
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from projectboard.config import Config


cli = typer.Typer(
    name="projectboard-server",
    help="ProjectBoard API server",
    add_completion=False,
)
console = Console()


@cli.callback()
def main():
    """ProjectBoard API server."""


@cli.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
    project_dir: Optional[Path] = typer.Option(
        None, "--project-dir", "-d", help="Project directory"
    ),
):
    """Start the ProjectBoard API server."""
    config = Config(project_dir)
    try:
        settings = config.load()
    except ValueError as e:
        console.print(f"[red]❌ Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    host = host or settings.host
    port = port or settings.port

    # The app factory reads its project directory from the environment
    os.environ["PROJECTBOARD_PROJECT_DIR"] = str(config.project_dir.resolve())

    console.print("[green]Starting ProjectBoard API server[/green]")
    console.print(f"Database: {config.database_path}")
    console.print(f"Host: {host}:{port}")

    uvicorn.run(
        "projectboard.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
