"""Main CLI entry point for ProjectBoard."""

from datetime import date
from typing import Optional

import typer

from projectboard.cli import views
from projectboard.cli.utils import console, get_config, get_state, parse_number, setup_logging

app = typer.Typer(
    name="projectboard",
    help="ProjectBoard - track projects, deadlines and clients",
    add_completion=False,
    invoke_without_command=True,
)

URL_OPTION = typer.Option(None, "--url", "-u", help="API URL (overrides config)")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option("warning", "--log-level", help="Logging level"),
):
    """
    ProjectBoard - track projects, deadlines and clients
    """
    setup_logging(log_level)
    if ctx.invoked_subcommand is None:
        # No subcommand was invoked, show help
        console.print(ctx.get_help())
        raise typer.Exit(0)


def _parse_month(value: Optional[str]) -> tuple:
    if not value:
        today = date.today()
        return today.year, today.month
    try:
        year, month = (int(part) for part in value.split("-", 1))
        date(year, month, 1)
    except ValueError:
        console.print(f"[red]❌ Invalid month '{value}', expected YYYY-MM[/red]")
        raise typer.Exit(1)
    return year, month


@app.command()
def init():
    """Write a default projectboard.toml in the current directory."""
    config = get_config()
    try:
        config.init()
    except FileExistsError:
        console.print(f"[red]❌ Config already exists at {config.config_path}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Wrote {config.config_path}[/green]")


@app.command()
def dashboard(
    month: Optional[str] = typer.Option(
        None, "--month", "-m", help="Calendar month to show (YYYY-MM)"
    ),
    url: Optional[str] = URL_OPTION,
):
    """Show the deadline calendar, charts and project table."""
    year, month_number = _parse_month(month)
    state = get_state(url)
    console.print(views.dashboard(state.projects, year, month_number))


@app.command(name="list")
def list_projects(url: Optional[str] = URL_OPTION):
    """List all projects."""
    state = get_state(url)
    projects = state.projects
    if not projects:
        console.print("[yellow]No projects found[/yellow]")
        return
    console.print(views.project_table(projects))


@app.command()
def clients(url: Optional[str] = URL_OPTION):
    """List clients derived from the projects."""
    state = get_state(url)
    console.print(views.clients_table(state.projects))


@app.command()
def show(
    project_id: int = typer.Argument(..., help="Project ID"),
    url: Optional[str] = URL_OPTION,
):
    """Show every field of a project."""
    state = get_state(url)
    project = state.get(project_id)
    if project is None:
        console.print(f"[red]❌ Project {project_id} not found[/red]")
        raise typer.Exit(1)
    console.print(views.project_details(project))


@app.command()
def add(
    title: str = typer.Option("", "--title", "-t", help="Project title"),
    deadline: str = typer.Option("", "--deadline", "-d", help="Deadline (YYYY-MM-DD)"),
    person: str = typer.Option("", "--person", "-p", help="Person in charge"),
    client: str = typer.Option("", "--client", "-c", help="Client name"),
    contact: str = typer.Option("", "--contact", help="Client contact"),
    achievements: Optional[str] = typer.Option(None, "--achievements", "-a", help="Achievement (%)"),
    price: Optional[str] = typer.Option(None, "--price", help="Price"),
    finished: bool = typer.Option(False, "--finished", help="Mark as completed"),
    description: str = typer.Option("", "--description", help="Description"),
    url: Optional[str] = URL_OPTION,
):
    """Add a new project.

    Examples:
        projectboard add --title Website --deadline 2024-12-01 --person Alice
        projectboard add -t Shop -d 2025-01-15 -p Bob --client Acme --price 1200
    """
    if not title or not deadline or not person:
        console.print("[red]❌ Title, deadline and person are required.[/red]")
        raise typer.Exit(1)

    payload = {
        "title": title,
        "deadline": deadline,
        "person": person,
        "client": client,
        "contact": contact,
        "achievements": parse_number(achievements),
        "price": parse_number(price),
        "finished": 1 if finished else 0,
        "description": description,
    }

    state = get_state(url)
    created = state.add(payload)
    if created is None:
        raise typer.Exit(1)

    console.print(f"[green]✅ Added project '{created.title}'[/green]")
    console.print(f"[cyan]   ID: {created.id}[/cyan]")


@app.command()
def finish(
    project_id: int = typer.Argument(..., help="Project ID"),
    url: Optional[str] = URL_OPTION,
):
    """Toggle the completion flag of a project."""
    state = get_state(url)
    project = state.get(project_id)
    if project is None:
        console.print(f"[red]❌ Project {project_id} not found[/red]")
        raise typer.Exit(1)

    updated = state.toggle_finish(project)
    if updated is None:
        raise typer.Exit(1)

    status = "completed" if updated.finished else "pending"
    console.print(f"[green]✅ Project '{updated.title}' marked as {status}[/green]")


@app.command()
def delete(
    project_id: int = typer.Argument(..., help="Project ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
    url: Optional[str] = URL_OPTION,
):
    """Delete a project."""
    if not yes:
        console.print(f"[yellow]⚠️  About to delete project {project_id}[/yellow]")
        if not typer.confirm("Are you sure you want to proceed?"):
            console.print("Operation cancelled.")
            raise typer.Exit(0)

    state = get_state(url)
    if not state.remove(project_id):
        raise typer.Exit(1)

    console.print(f"[green]✅ Deleted project {project_id}[/green]")


@app.command()
def version():
    """Show ProjectBoard version."""
    from projectboard import __version__

    typer.echo(f"ProjectBoard version {__version__}")


if __name__ == "__main__":
    app()
