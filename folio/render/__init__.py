from folio.core.dates import format_date
from folio.core.fetcher import fetch_json
from folio.core.theme import init_theme
from folio.render.media import render_media
from folio.render.photos import render_photos
from folio.render.projects import render_projects
from folio.render.skills import render_skills

__all__ = [
    "fetch_json",
    "format_date",
    "init_theme",
    "render_media",
    "render_photos",
    "render_projects",
    "render_skills",
]
