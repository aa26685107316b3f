import json
from pathlib import Path

from folio.core.nodes import Document, Element
from folio.core.theme import (
    THEME_KEY,
    THEME_TOGGLE_ID,
    JsonPreferenceStore,
    MemoryPreferenceStore,
    ThemeController,
    init_theme,
)


def _document(with_toggle: bool = True) -> Document:
    document = Document(Element("body"))
    if with_toggle:
        document.body.append(Element("button", id=THEME_TOGGLE_ID))
    return document


def test_no_stored_preference_follows_ambient_dark() -> None:
    document = _document()
    init_theme(document, MemoryPreferenceStore(), prefers_dark=True)

    assert document.body.has_class("dark")


def test_stored_light_wins_over_ambient_dark() -> None:
    document = _document()
    controller = init_theme(document, MemoryPreferenceStore({THEME_KEY: "light"}), prefers_dark=lambda: True)

    assert controller.initial_theme() == "light"
    assert not document.body.has_class("dark")
    assert document.body.classes == []


def test_toggle_flips_state_and_persists_opposite() -> None:
    store = MemoryPreferenceStore({THEME_KEY: "dark"})
    document = _document()
    init_theme(document, store)

    toggle = document.get_element_by_id(THEME_TOGGLE_ID)
    toggle.click()
    assert not document.body.has_class("dark")
    assert store.get(THEME_KEY) == "light"

    toggle.click()
    assert document.body.has_class("dark")
    assert store.get(THEME_KEY) == "dark"


def test_missing_control_is_silent() -> None:
    store = MemoryPreferenceStore()
    document = _document(with_toggle=False)

    theme = ThemeController(store, prefers_dark=True).init(document)

    assert theme == "dark"
    assert document.body.has_class("dark")
    assert store.get(THEME_KEY) is None


def test_unknown_stored_value_falls_back_to_ambient() -> None:
    controller = ThemeController(MemoryPreferenceStore({THEME_KEY: "sepia"}), prefers_dark=False)
    assert controller.initial_theme() == "light"


def test_json_store_persists_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "state" / "preferences.json"
    ThemeController(JsonPreferenceStore(path), prefers_dark=True).toggle_stored()

    assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "light"}
    assert JsonPreferenceStore(path).get(THEME_KEY) == "light"


def test_json_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("[broken", encoding="utf-8")
    store = JsonPreferenceStore(path)

    assert store.get(THEME_KEY) is None
    store.set(THEME_KEY, "dark")
    assert store.get(THEME_KEY) == "dark"
