"""Rich renderables for the dashboard and clients views."""

import calendar
from typing import List, Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from projectboard.managers.reports import (
    completion_summary,
    deadlines_by_day,
    derive_clients,
    revenue_by_project,
)
from projectboard.models import Project

FINISHED_STYLE = "green"
PENDING_STYLE = "blue"
BAR_WIDTH = 40


def _format_number(value) -> str:
    if value is None:
        return ""
    value = float(value)
    return str(int(value)) if value.is_integer() else f"{value:g}"


def project_table(projects: Sequence[Project]) -> Table:
    """Table of all projects, one row each."""
    table = Table(title="Projects")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Deadline")
    table.add_column("Person")
    table.add_column("Client")
    table.add_column("Contact")
    table.add_column("Achievement (%)", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Completed")

    for p in projects:
        table.add_row(
            str(p.id),
            p.title,
            p.deadline,
            p.person,
            p.client or "",
            p.contact or "",
            _format_number(p.achievements),
            _format_number(p.price),
            Text("Yes", style=FINISHED_STYLE) if p.finished else Text("No", style="yellow"),
        )

    return table


def deadline_calendar(projects: Sequence[Project], year: int, month: int) -> Table:
    """Month grid with each project placed on its deadline day."""
    days = deadlines_by_day(projects, year, month)

    table = Table(
        title=f"Project Deadlines - {calendar.month_name[month]} {year}",
        show_lines=True,
    )
    for name in calendar.day_abbr:
        table.add_column(name, vertical="top", min_width=8)

    for week in calendar.Calendar().monthdayscalendar(year, month):
        cells = []
        for day in week:
            if day == 0:
                cells.append("")
                continue
            cell = Text(str(day), style="bold")
            for p in days.get(day, []):
                cell.append("\n")
                cell.append(p.title, style=FINISHED_STYLE if p.finished else PENDING_STYLE)
            cells.append(cell)
        table.add_row(*cells)

    return table


def _bar_chart(title: str, rows: List[tuple], style: str) -> Panel:
    peak = max((value for _, value in rows), default=0)
    chart = Table.grid(padding=(0, 1))
    chart.add_column(justify="right")
    chart.add_column()
    chart.add_column(justify="right")

    for label, value in rows:
        width = int(round(BAR_WIDTH * value / peak)) if peak > 0 else 0
        chart.add_row(str(label), Text("█" * width, style=style), _format_number(value))

    return Panel(chart, title=title, expand=False)


def charts(projects: Sequence[Project]) -> Group:
    """Completion summary and per-project revenue bar charts."""
    summary = completion_summary(projects)
    summary_chart = _bar_chart(
        "Project Completion Summary",
        [("Completed", summary["completed"]), ("Pending", summary["pending"])],
        FINISHED_STYLE,
    )
    revenue_chart = _bar_chart("Project Revenue", revenue_by_project(projects), PENDING_STYLE)
    return Group(summary_chart, revenue_chart)


def dashboard(projects: Sequence[Project], year: int, month: int) -> Group:
    """Calendar, charts and project table."""
    return Group(
        deadline_calendar(projects, year, month),
        charts(projects),
        project_table(projects),
    )


def clients_table(projects: Sequence[Project]) -> Table:
    """Clients derived from the project list."""
    table = Table(title="Clients")
    table.add_column("Client Name", style="cyan")
    table.add_column("Contact")
    table.add_column("# Projects", justify="right")

    for client in derive_clients(projects):
        table.add_row(client.name, client.contact, str(client.count))

    return table


def project_details(project: Project) -> Panel:
    """All fields of one project."""
    lines = [
        f"Title: {project.title}",
        f"Deadline: {project.deadline}",
        f"Person: {project.person}",
        f"Client: {project.client or ''}",
        f"Contact: {project.contact or ''}",
        f"Achievement: {_format_number(project.achievements)}%",
        f"Price: {_format_number(project.price)}",
        f"Completed: {'Yes' if project.finished else 'No'}",
        f"Description: {project.description or ''}",
    ]
    return Panel(Text("\n".join(lines)), title=f"Project {project.id}", expand=False)
