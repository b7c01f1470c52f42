"""
api/server.py
FastAPI surface for merged manga details, chapter sync and page resolution.
"""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from config import get_config
from constants import MERGED_SOURCE_ID
from errors import CorruptedMergeError, UnsupportedHostError
from merged.models import SourceChapter

console = Console()
router = APIRouter()


class PageListRequest(BaseModel):
    url: str
    scanlator: Optional[str] = None
    data_saver: Optional[bool] = None
    port_443_only: Optional[bool] = None


# -------------------------------------------------------
# 🧠 Health
# -------------------------------------------------------

@router.get("/health")
async def health():
    return {"status": "ok"}


# -------------------------------------------------------
# 📚 API: Merged manga
# -------------------------------------------------------

async def _load_merged(request: Request, manga_id: int):
    manga = await request.app.state.store.get_manga_by_id(manga_id)
    if manga is None or manga.source != MERGED_SOURCE_ID:
        raise HTTPException(404, "Merged manga not found")
    return manga


@router.get("/api/v1/merged/{manga_id}")
async def get_merged_details(request: Request, manga_id: int):
    """Details shown for a merged manga."""
    manga = await _load_merged(request, manga_id)
    details = await request.app.state.merged.get_manga_details(manga.to_details())
    return asdict(details)


@router.post("/api/v1/merged/{manga_id}/sync")
async def sync_merged(request: Request, manga_id: int, download: bool = True):
    """
    Fetch chapters from every referenced source.
    A source failure is reported as 502 after the other sources are synced.
    """
    manga = await _load_merged(request, manga_id)
    try:
        chapters = await request.app.state.merged.fetch_chapters_and_sync(manga, download)
    except CorruptedMergeError:
        raise
    except Exception as e:
        console.log(f"[red]Sync failed for merged manga {manga_id}:[/red] {escape(str(e))}")
        raise HTTPException(502, f"Chapter sync failed: {e}")
    return [asdict(c) for c in chapters]


# -------------------------------------------------------
# 🖼️ API: Pages
# -------------------------------------------------------

@router.post("/api/v1/pages")
async def get_pages(request: Request, body: PageListRequest):
    """
    Page list of one MangaDex chapter.
    Body: {"url": "/chapter/<id>", "scanlator": "mangaplus", "data_saver": false}
    """
    config = request.app.state.config
    chapter = SourceChapter(url=body.url, scanlator=body.scanlator)
    data_saver = config.data_saver if body.data_saver is None else body.data_saver
    port_443_only = config.use_port_443_only if body.port_443_only is None else body.port_443_only
    pages = await request.app.state.pages.fetch_page_list(chapter, port_443_only, data_saver)
    return [asdict(p) for p in pages]


async def corrupted_merge_handler(request: Request, exc: CorruptedMergeError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def unsupported_host_handler(request: Request, exc: UnsupportedHostError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app(store, merged, pages, config=None):
    app = FastAPI(title="Merged Manga", version="1.0.0")
    app.state.store = store
    app.state.merged = merged
    app.state.pages = pages
    app.state.config = config or get_config()
    app.add_exception_handler(CorruptedMergeError, corrupted_merge_handler)
    app.add_exception_handler(UnsupportedHostError, unsupported_host_handler)
    app.include_router(router)
    return app
