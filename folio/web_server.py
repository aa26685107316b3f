from __future__ import annotations

import threading
import time
import webbrowser

import uvicorn

from folio.core.config import Settings
from folio.web.pages import SECTIONS


LOOPBACK_ALIASES = {"0.0.0.0", "::", "::0", "[::]"}


def site_url(host: str, port: int) -> str:
    """Address a browser on this machine can reach; wildcard binds map to loopback."""
    if host in LOOPBACK_ALIASES:
        host = "127.0.0.1"
    return f"http://{host}:{port}/"


def _open_when_ready(url: str, delay: float) -> None:
    time.sleep(delay)
    try:
        webbrowser.open(url)
    except webbrowser.Error:
        pass


def run_web_server(
    settings: Settings,
    host: str | None = None,
    port: int | None = None,
    no_open: bool = False,
    open_delay: float = 0.7,
) -> None:
    from folio.app.api import app

    host = host or settings.web_host
    port = port or settings.web_port
    url = site_url(host, port)
    print(f"Serving {settings.site_title} at {url} (data: {settings.data_base_url or settings.data_path})")
    print("Sections: " + ", ".join(f"{url}{name}" for name in SECTIONS))
    if not no_open:
        threading.Thread(target=_open_when_ready, args=(url, open_delay), daemon=True).start()

    uvicorn.run(app, host=host, port=port, log_level="info")
