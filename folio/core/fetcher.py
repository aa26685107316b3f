from __future__ import annotations

import asyncio
import json
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any
from urllib.parse import urljoin


logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}")


def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def _read_url(url: str, path: str) -> str:
    request = urllib.request.Request(url=url, headers={"Accept": "application/json"}, method="GET")
    try:
        with urllib.request.urlopen(request) as response:
            status = getattr(response, "status", 200)
            if not 200 <= int(status) < 300:
                raise FetchError(path, reason=f"HTTP {status}")
            return response.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        raise FetchError(path, reason=f"HTTP {exc.code}") from exc
    except urllib.error.URLError as exc:
        raise FetchError(path, reason=f"Connection error: {exc.reason}") from exc


def _read_file(path: str) -> str:
    candidate = Path(path).expanduser()
    if not candidate.is_file():
        raise FetchError(path, reason="not found")
    return candidate.read_text(encoding="utf-8")


async def fetch_json(path: str, *, base_url: str | None = None) -> Any:
    """Retrieve one JSON document and decode it.

    ``path`` is an absolute URL, a path resolved against ``base_url``, or a
    local file path. Raises FetchError naming ``path`` when the document cannot
    be retrieved; a body that is not JSON raises json.JSONDecodeError.
    """
    target = path
    if base_url and not _is_url(path):
        target = urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))

    logger.debug("Fetching %s", target)
    if _is_url(target):
        body = await asyncio.to_thread(_read_url, target, path)
    else:
        body = await asyncio.to_thread(_read_file, target)
    return json.loads(body)
