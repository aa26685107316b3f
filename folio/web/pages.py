"""Section pages: fetch a data document, run its renderer, wrap it in the page shell."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from folio.core.config import Settings
from folio.core.fetcher import FetchError, fetch_json
from folio.core.models import MediaEntry, Photo, Project, Record, Skill, parse_records
from folio.core.nodes import Element
from folio.render.media import render_media
from folio.render.photos import render_photos
from folio.render.projects import render_projects
from folio.render.skills import render_skills
from folio.web.page_shell import NAV_ITEMS, SERVER_LINKS, SiteLinks, page_html


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    name: str
    heading: str
    model: type[Record]
    render: Callable[[Element, Any], None]


@dataclass
class SectionData:
    name: str
    payload: Any = None
    error: str | None = None


SECTIONS: dict[str, Section] = {
    "projects": Section("projects", "Projects", Project, render_projects),
    "skills": Section("skills", "Skills", Skill, render_skills),
    "photos": Section("photos", "Photography", Photo, render_photos),
    "media": Section("media", "Books & Movies", MediaEntry, render_media),
}


async def load_section(settings: Settings, name: str) -> SectionData:
    source = settings.data_source(name)
    try:
        payload = await fetch_json(source)
    except (FetchError, ValueError) as exc:
        logger.warning("Could not load %s section from %s: %s", name, source, exc)
        return SectionData(name=name, error=str(exc))
    return SectionData(name=name, payload=payload)


def section_element(data: SectionData) -> Element:
    section = SECTIONS[data.name]
    container = Element("section", id=data.name)
    container.append(Element("h1", text=section.heading))
    if data.error is not None:
        container.append(Element("p", "load-error", text=data.error))
        return container
    section.render(container, parse_records(section.model, data.payload))
    return container


def section_page_html(settings: Settings, data: SectionData, links: SiteLinks = SERVER_LINKS) -> str:
    return page_html(settings.site_title, section_element(data).to_html(), active=data.name, links=links)


async def render_section_page(settings: Settings, name: str) -> str:
    return section_page_html(settings, await load_section(settings, name))


def render_home_page(settings: Settings, links: SiteLinks = SERVER_LINKS) -> str:
    container = Element("section", id="home")
    container.append(Element("h1", text=settings.site_title))
    listing = Element("ul")
    for name, label in NAV_ITEMS:
        entry = Element("li")
        entry.append(Element("a", text=label, attrs={"href": links.section(name)}))
        listing.append(entry)
    container.append(listing)
    return page_html(settings.site_title, container.to_html(), links=links)
