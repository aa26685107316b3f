from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from folio.core.config import Settings
from folio.web.pages import SECTIONS, render_home_page, render_section_page


def build_site_router(*, settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "sections": list(SECTIONS)}

    @router.get("/", response_class=HTMLResponse)
    def home() -> HTMLResponse:
        return HTMLResponse(render_home_page(settings))

    @router.get("/data/{name}.json")
    def data_document(name: str) -> Response:
        if name not in SECTIONS:
            raise HTTPException(status_code=404, detail=f"Unknown data document: {name}")
        path = settings.data_path / f"{name}.json"
        if not path.is_file():
            raise HTTPException(status_code=404, detail=f"Data document not found: {name}.json")
        return Response(content=path.read_bytes(), media_type="application/json")

    @router.get("/{name}", response_class=HTMLResponse)
    async def section_page(name: str) -> HTMLResponse:
        if name not in SECTIONS:
            raise HTTPException(status_code=404, detail=f"Page not found: {name}")
        return HTMLResponse(await render_section_page(settings, name))

    return router
