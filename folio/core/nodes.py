"""Minimal element tree that renderers append to and pages serialize to HTML."""

from __future__ import annotations

import html
from collections.abc import Callable, Iterator
from typing import Union


VOID_TAGS = {"img", "br", "hr", "meta", "link", "input"}

Node = Union["Element", str]
Listener = Callable[["Element"], None]


class Element:
    def __init__(
        self,
        tag: str,
        class_name: str | None = None,
        text: str | None = None,
        attrs: dict[str, str] | None = None,
        id: str | None = None,
    ):
        self.tag = tag
        self.classes: list[str] = class_name.split() if class_name else []
        self.attrs: dict[str, str] = dict(attrs or {})
        self.id = id
        self.children: list[Node] = []
        self._listeners: dict[str, list[Listener]] = {}
        if text is not None:
            self.children.append(str(text))

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, class_name={self.class_name!r})"

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    def append(self, child: Node) -> Node:
        self.children.append(child)
        return child

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        self.classes = [item for item in self.classes if item != name]

    def toggle_class(self, name: str) -> bool:
        if self.has_class(name):
            self.remove_class(name)
            return False
        self.add_class(name)
        return True

    def has_class(self, name: str) -> bool:
        return name in self.classes

    @property
    def elements(self) -> list[Element]:
        return [child for child in self.children if isinstance(child, Element)]

    def iter(self) -> Iterator[Element]:
        """Depth-first walk over descendants, excluding self."""
        for child in self.elements:
            yield child
            yield from child.iter()

    def find_all(self, tag: str | None = None, class_name: str | None = None) -> list[Element]:
        return [
            element
            for element in self.iter()
            if (tag is None or element.tag == tag) and (class_name is None or element.has_class(class_name))
        ]

    def get_element_by_id(self, element_id: str) -> Element | None:
        for element in self.iter():
            if element.id == element_id:
                return element
        return None

    @property
    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.text_content if isinstance(child, Element) else child)
        return "".join(parts)

    def add_event_listener(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def dispatch(self, event: str) -> None:
        for listener in list(self._listeners.get(event, [])):
            listener(self)

    def click(self) -> None:
        self.dispatch("click")

    def to_html(self) -> str:
        attrs: list[str] = []
        if self.id:
            attrs.append(f' id="{html.escape(self.id)}"')
        if self.classes:
            attrs.append(f' class="{html.escape(self.class_name)}"')
        for key, value in self.attrs.items():
            attrs.append(f' {key}="{html.escape(str(value))}"')
        opening = f"<{self.tag}{''.join(attrs)}>"
        if self.tag in VOID_TAGS:
            return opening
        inner = "".join(
            child.to_html() if isinstance(child, Element) else html.escape(child, quote=False)
            for child in self.children
        )
        return f"{opening}{inner}</{self.tag}>"


class Document:
    def __init__(self, body: Element | None = None):
        self.body = body or Element("body")

    def get_element_by_id(self, element_id: str) -> Element | None:
        if self.body.id == element_id:
            return self.body
        return self.body.get_element_by_id(element_id)
