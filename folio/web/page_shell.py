"""Shared HTML shell: <head>, header with navigation, CSS, and the theme script."""

from __future__ import annotations

import html
from dataclasses import dataclass


NAV_ITEMS = (
    ("projects", "Projects"),
    ("skills", "Skills"),
    ("photos", "Photos"),
    ("media", "Books & Movies"),
)


@dataclass(frozen=True)
class SiteLinks:
    """How pages address each other: routes on the live server, sibling files in a static export."""

    prefix: str = "/"
    suffix: str = ""
    home: str = "/"

    def section(self, name: str) -> str:
        return f"{self.prefix}{name}{self.suffix}"


SERVER_LINKS = SiteLinks()
STATIC_LINKS = SiteLinks(prefix="", suffix=".html", home="index.html")


def head_html(title: str) -> str:
    """Return everything inside <head> including meta and all CSS."""
    return f"""\
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{html.escape(title)}</title>
    <style>
      /* ---- Theme tokens ---- */
      :root {{
        --c-bg: #f8f9fb; --c-surface: #ffffff; --c-border: #d5d8de;
        --c-muted: #7b8494; --c-text: #1e2330; --c-accent: #2563eb;
      }}
      body.dark {{
        --c-bg: #0a0c10; --c-surface: #171b22; --c-border: #2a3241;
        --c-muted: #7c889c; --c-text: #c8ced8; --c-accent: #60a5fa;
      }}
      body {{
        margin: 0; background: var(--c-bg); color: var(--c-text);
        font-family: system-ui, -apple-system, sans-serif; line-height: 1.6;
        transition: background 200ms ease, color 200ms ease;
      }}
      main {{ max-width: 880px; margin: 0 auto; padding: 16px 20px 48px; }}
      a {{ color: var(--c-accent); text-decoration: none; }} a:hover {{ text-decoration: underline; }}

      /* Header */
      .site-header {{ display: flex; align-items: center; justify-content: space-between; gap: 12px;
        padding-bottom: 12px; margin-bottom: 20px; border-bottom: 1px solid var(--c-border); flex-wrap: wrap; }}
      .site-header nav {{ display: flex; gap: 14px; flex-wrap: wrap; }}
      .site-header nav a.active {{ font-weight: 600; }}
      #theme-toggle {{ border: 1px solid var(--c-border); background: var(--c-surface); color: var(--c-text);
        border-radius: 6px; padding: 4px 10px; cursor: pointer; }}

      /* Projects */
      .project-item {{ padding: 10px 0; border-bottom: 1px solid var(--c-border); }}
      .project-date {{ display: block; font-size: 12px; color: var(--c-muted); }}
      .project-title {{ font-weight: 600; }}

      /* Skills */
      .skill-category {{ margin-bottom: 16px; }}
      .skill-list {{ padding-left: 1.2em; margin: 4px 0; }}

      /* Photos */
      .gallery {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); gap: 14px; }}
      .gallery figure {{ margin: 0; background: var(--c-surface); border: 1px solid var(--c-border); border-radius: 8px; overflow: hidden; }}
      .gallery img {{ width: 100%; display: block; }}
      .gallery figcaption {{ padding: 6px 10px; font-size: 13px; }}

      /* Media */
      .media-item {{ padding: 8px 0; border-bottom: 1px solid var(--c-border); }}
      .media-item .type {{ font-size: 11px; text-transform: uppercase; color: var(--c-muted); margin-right: 8px; }}

      .load-error {{ color: #dc2626; }}
    </style>"""


def header_html(title: str, active: str | None = None, links: SiteLinks = SERVER_LINKS) -> str:
    """Return the header bar with site title, section links and the theme toggle."""
    anchors = []
    for name, label in NAV_ITEMS:
        css = ' class="active"' if name == active else ""
        anchors.append(f'<a href="{html.escape(links.section(name))}"{css}>{html.escape(label)}</a>')
    return f"""\
      <header class="site-header">
        <a href="{html.escape(links.home)}" class="site-title"><strong>{html.escape(title)}</strong></a>
        <nav>{"".join(anchors)}</nav>
        <button id="theme-toggle" type="button" title="Toggle theme">Theme</button>
      </header>"""


def theme_js() -> str:
    """Return the browser-side theme script: stored choice, else the system preference."""
    return """\
      (function() {
        const body = document.body;
        const savedTheme = localStorage.getItem('theme');
        const prefersDark = window.matchMedia && window.matchMedia('(prefers-color-scheme: dark)').matches;
        if (savedTheme === 'dark' || (!savedTheme && prefersDark)) body.classList.add('dark');
        const toggleBtn = document.getElementById('theme-toggle');
        if (!toggleBtn) return;
        toggleBtn.addEventListener('click', () => {
          body.classList.toggle('dark');
          localStorage.setItem('theme', body.classList.contains('dark') ? 'dark' : 'light');
        });
      })();"""


def page_html(title: str, content: str, active: str | None = None, links: SiteLinks = SERVER_LINKS) -> str:
    return (
        '<!doctype html>\n<html lang="en">\n  <head>\n'
        + head_html(title)
        + "\n  </head>\n"
        + "  <body>\n"
        + "    <main>\n"
        + header_html(title, active, links)
        + "\n"
        + content
        + "\n"
        + "    </main>\n"
        + "    <script>\n"
        + theme_js()
        + "\n"
        + "    </script>\n"
        + "  </body>\n</html>\n"
    )
