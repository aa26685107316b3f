from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from folio.core.nodes import Document


THEME_KEY = "theme"
THEME_TOGGLE_ID = "theme-toggle"
DARK = "dark"
LIGHT = "light"


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    def __init__(self, values: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonPreferenceStore:
    """Preferences kept as one JSON object on disk."""

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(payload, dict):
            return {}
        return {str(key): str(value) for key, value in payload.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        payload = self._read()
        payload[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


class ThemeController:
    def __init__(self, store: PreferenceStore, prefers_dark: bool | Callable[[], bool] = False):
        self.store = store
        self._prefers_dark = prefers_dark

    def prefers_dark(self) -> bool:
        if callable(self._prefers_dark):
            return bool(self._prefers_dark())
        return bool(self._prefers_dark)

    def stored_theme(self) -> str | None:
        value = self.store.get(THEME_KEY)
        if value in {DARK, LIGHT}:
            return value
        return None

    def initial_theme(self) -> str:
        stored = self.stored_theme()
        if stored is not None:
            return stored
        return DARK if self.prefers_dark() else LIGHT

    def init(self, document: Document) -> str:
        """Apply the effective theme to ``document.body`` and bind the toggle control if present."""
        theme = self.initial_theme()
        if theme == DARK:
            document.body.add_class(DARK)

        control = document.get_element_by_id(THEME_TOGGLE_ID)
        if control is not None:
            control.add_event_listener("click", lambda _: self.toggle(document))
        return theme

    def toggle(self, document: Document) -> str:
        theme = DARK if document.body.toggle_class(DARK) else LIGHT
        self.store.set(THEME_KEY, theme)
        return theme

    def toggle_stored(self) -> str:
        """Flip the persisted preference without a document, starting from the effective theme."""
        theme = LIGHT if self.initial_theme() == DARK else DARK
        self.store.set(THEME_KEY, theme)
        return theme


def init_theme(
    document: Document,
    store: PreferenceStore,
    prefers_dark: bool | Callable[[], bool] = False,
) -> ThemeController:
    controller = ThemeController(store, prefers_dark=prefers_dark)
    controller.init(document)
    return controller
