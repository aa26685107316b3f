from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from folio.core.config import Settings
from folio.web.page_shell import STATIC_LINKS
from folio.web.pages import SECTIONS, load_section, render_home_page, section_page_html


logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    data_files: list[Path] = field(default_factory=list)


def _write_text(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


async def export_site(settings: Settings, output_dir: Path | None = None) -> ExportResult:
    """Write ``index.html`` and one ``<section>.html`` per section with relative links.

    Every data document that loaded, local or remote, is saved under ``data/``.
    """
    target = output_dir or settings.output_path
    result = ExportResult(output_dir=target)

    result.pages.append(_write_text(target / "index.html", render_home_page(settings, links=STATIC_LINKS)))
    for name in SECTIONS:
        data = await load_section(settings, name)
        page = section_page_html(settings, data, links=STATIC_LINKS)
        result.pages.append(_write_text(target / f"{name}.html", page))
        if data.error is None:
            document = json.dumps(data.payload, indent=2, ensure_ascii=False)
            result.data_files.append(_write_text(target / "data" / f"{name}.json", document + "\n"))

    logger.info("Exported %d pages and %d data files to %s", len(result.pages), len(result.data_files), target)
    return result
