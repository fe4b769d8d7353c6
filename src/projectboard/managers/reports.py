"""Views derived from a project snapshot.

Everything here is a pure function of the list it is given: nothing is
cached or persisted, so callers recompute on every render.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from projectboard.models import ClientSummary, Project


def derive_clients(projects: Iterable[Project]) -> List[ClientSummary]:
    """Group projects by client name.

    Projects without a client are skipped. Clients appear in first-seen
    order; each keeps the first non-empty contact found among its projects.
    """
    clients: Dict[str, ClientSummary] = {}

    for project in projects:
        name = (project.client or "").strip()
        if not name:
            continue

        summary = clients.get(name)
        if summary is None:
            clients[name] = ClientSummary(name=name, contact=project.contact or "", count=1)
            continue

        summary.count += 1
        if not summary.contact and project.contact:
            summary.contact = project.contact

    return list(clients.values())


def completion_summary(projects: Iterable[Project]) -> Dict[str, int]:
    """Count completed and pending projects."""
    total = 0
    completed = 0
    for project in projects:
        total += 1
        if project.finished:
            completed += 1
    return {"completed": completed, "pending": total - completed}


def revenue_by_project(projects: Iterable[Project]) -> List[Tuple[str, float]]:
    """Return (title, price) pairs in snapshot order."""
    return [(project.title, float(project.price or 0)) for project in projects]


def parse_deadline(value: Optional[str]) -> Optional[date]:
    """Parse a deadline string, returning None when it isn't an ISO date."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def deadlines_by_day(projects: Iterable[Project], year: int, month: int) -> Dict[int, List[Project]]:
    """Map each day of the given month to the projects due that day."""
    days: Dict[int, List[Project]] = {}
    for project in projects:
        deadline = parse_deadline(project.deadline)
        if deadline is None or deadline.year != year or deadline.month != month:
            continue
        days.setdefault(deadline.day, []).append(project)
    return days
