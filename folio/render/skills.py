from __future__ import annotations

from folio.core.models import Skill
from folio.core.nodes import Element


def group_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    grouped: dict[str, list[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


def render_skills(container: Element, skills: list[Skill]) -> None:
    for category, entries in group_by_category(skills).items():
        wrapper = Element("div", "skill-category")
        wrapper.append(Element("h3", text=category))
        listing = Element("ul", "skill-list")
        for skill in entries:
            label = f"{skill.name} ({skill.level})" if skill.level else skill.name
            listing.append(Element("li", text=label))
        wrapper.append(listing)
        container.append(wrapper)
