from __future__ import annotations

from folio.core.models import MEDIA_TYPES, MediaEntry
from folio.core.nodes import Element


EMPTY_MEDIA_MESSAGE = "No books or movies logged yet."
META_SEPARATOR = " • "


def group_by_type(items: list[MediaEntry]) -> dict[str, list[MediaEntry]]:
    """Bucket entries into the fixed media types; other types are dropped."""
    groups: dict[str, list[MediaEntry]] = {media_type: [] for media_type in MEDIA_TYPES}
    for item in items:
        if item.type in groups:
            groups[item.type].append(item)
    return groups


def meta_line(entry: MediaEntry) -> str:
    details: list[str] = []
    if entry.author:
        details.append(f"Author: {entry.author}")
    if entry.director:
        details.append(f"Director: {entry.director}")
    if entry.year:
        details.append(f"Year: {entry.year}")
    return META_SEPARATOR.join(details)


def render_media(container: Element, items: list[MediaEntry] | None) -> None:
    if not items:
        container.append(Element("p", text=EMPTY_MEDIA_MESSAGE))
        return

    for media_type, entries in group_by_type(items).items():
        if not entries:
            continue
        container.append(Element("h2", text=f"{media_type}s"))
        for entry in entries:
            item = Element("div", "media-item")
            title = Element("h3")
            title.append(Element("span", "type", text=media_type))
            title.append(entry.title)
            item.append(title)
            item.append(Element("p", text=meta_line(entry)))
            if entry.description:
                item.append(Element("p", text=entry.description))
            container.append(item)
