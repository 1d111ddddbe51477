from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException, Query

from edgeboard.models.schemas import HistoryStats, PublishedEntry
from edgeboard.services.clipboard_service import ClipboardService
from edgeboard.services.sink import PanelSink, build_published_entries


def create_app(service: ClipboardService) -> FastAPI:
    """HTTP surface for the history panel, backed by a running service."""
    app = FastAPI(title="EdgeBoard")

    def _format(entries) -> List[PublishedEntry]:
        return build_published_entries(
            entries,
            text_limit=service.config.preview_text_limit,
            code_limit=service.config.preview_code_limit,
        )

    @app.get("/")
    def root():
        return "running"

    @app.get("/history", response_model=List[PublishedEntry])
    def history(limit: int = Query(10, ge=0)):
        return service.published_snapshot(limit)

    @app.get("/history/search", response_model=List[PublishedEntry])
    def search(q: str = ""):
        return _format(service.store.search(q))

    @app.get("/history/stats", response_model=HistoryStats)
    def stats():
        return service.store.stats()

    @app.get("/history/export")
    def export():
        return [entry.to_dict() for entry in service.store.snapshot()]

    @app.post("/history/clear")
    def clear():
        service.clear_history()
        return {"ok": True}

    @app.post("/history/{entry_id}/copy")
    def copy(entry_id: str):
        if service.store.get(entry_id) is None:
            raise HTTPException(status_code=404, detail="unknown entry")
        return {"ok": service.copy_entry(entry_id)}

    @app.get("/panel", response_model=List[PublishedEntry])
    def panel():
        if isinstance(service.sink, PanelSink):
            return service.sink.latest
        return []

    @app.post("/panel/show")
    def show():
        service.show_panel()
        return {"ok": True, "visible": bool(service.sink and service.sink.visible)}

    @app.post("/panel/hide")
    def hide():
        service.hide_panel()
        return {"ok": True, "visible": bool(service.sink and service.sink.visible)}

    return app


def serve(service: ClipboardService, host: str, port: int) -> None:
    uvicorn.run(create_app(service), host=host, port=port, log_level="info")
