from folio.core.models import Photo
from folio.core.nodes import Element
from folio.render.photos import EMPTY_PHOTOS_MESSAGE, render_photos


def test_empty_or_missing_input_renders_placeholder_only() -> None:
    for photos in ([], None):
        container = Element("section")
        render_photos(container, photos)

        assert [child.tag for child in container.elements] == ["p"]
        assert container.text_content == EMPTY_PHOTOS_MESSAGE
        assert container.find_all("div", "gallery") == []


def test_one_gallery_with_a_figure_per_photo() -> None:
    photos = [
        Photo(title="Harbor", description="unused", image="/img/harbor.jpg"),
        Photo(title="Ridge", image="/img/ridge.jpg"),
    ]
    container = Element("section")

    render_photos(container, photos)

    galleries = container.find_all("div", "gallery")
    assert len(galleries) == 1
    figures = galleries[0].find_all("figure")
    assert len(figures) == 2
    image = figures[0].find_all("img")[0]
    assert image.attrs == {"src": "/img/harbor.jpg", "alt": "Harbor"}
    assert figures[0].find_all("figcaption")[0].text_content == "Harbor"
    assert "unused" not in container.to_html()
