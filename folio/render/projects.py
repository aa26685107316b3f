from __future__ import annotations

from datetime import datetime

from folio.core.dates import format_date, parse_date
from folio.core.models import Project
from folio.core.nodes import Element


UNDATED_HEADING = "Undated"


def _sort_key(project: Project) -> datetime:
    return parse_date(project.date) or datetime.min


def _year_label(project: Project) -> str:
    parsed = parse_date(project.date)
    return str(parsed.year) if parsed is not None else UNDATED_HEADING


def render_projects(container: Element, projects: list[Project]) -> None:
    """Append projects newest first, with an h2 heading at each change of year.

    Sorts ``projects`` in place.
    """
    projects.sort(key=_sort_key, reverse=True)
    current_year: str | None = None
    for project in projects:
        year = _year_label(project)
        if year != current_year:
            current_year = year
            container.append(Element("h2", text=year))

        item = Element("div", "project-item")
        item.append(Element("span", "project-date", text=format_date(project.date)))
        if project.link:
            attrs = {"href": project.link, "target": "_blank", "rel": "noopener noreferrer"}
        else:
            attrs = {"href": "#", "target": "_self", "rel": ""}
        item.append(Element("a", "project-title", text=project.title, attrs=attrs))
        item.append(Element("p", text=project.description))
        container.append(item)
