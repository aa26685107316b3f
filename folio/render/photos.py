from __future__ import annotations

from folio.core.models import Photo
from folio.core.nodes import Element


EMPTY_PHOTOS_MESSAGE = "No photographs uploaded yet."


def render_photos(container: Element, photos: list[Photo] | None) -> None:
    if not photos:
        container.append(Element("p", text=EMPTY_PHOTOS_MESSAGE))
        return

    gallery = Element("div", "gallery")
    for photo in photos:
        figure = Element("figure")
        figure.append(Element("img", attrs={"src": photo.image, "alt": photo.title}))
        figure.append(Element("figcaption", text=photo.title))
        gallery.append(figure)
    container.append(gallery)
