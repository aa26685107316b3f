from __future__ import annotations

from fastapi import FastAPI

from folio.core.config import get_settings
from folio.web.routes import build_site_router


settings = get_settings()

app = FastAPI(title="Folio", version="0.1.0")
app.include_router(build_site_router(settings=settings))
