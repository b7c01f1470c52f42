"""
mangadex/service.py
MangaDex API calls needed to resolve chapter pages.
"""

import httpx

from constants import DEFAULT_REQUEST_TIMEOUT, HEADERS
from mangadex.dto import AtHomeResponse, ChapterResponse


def get_chapter_id(url: str) -> str:
    """`/chapter/<uuid>` (or a full chapter url) -> `<uuid>`."""
    return url.rstrip("/").rsplit("/", 1)[-1]


class MangaDexService:
    def __init__(self, api_url="https://api.mangadex.org", client=None):
        self.api_url = api_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=DEFAULT_REQUEST_TIMEOUT, headers=HEADERS)

    @property
    def at_home_server(self):
        return f"{self.api_url}/at-home/server"

    async def view_chapter(self, chapter_id) -> ChapterResponse:
        resp = await self.client.get(f"{self.api_url}/chapter/{chapter_id}")
        resp.raise_for_status()
        return ChapterResponse.from_json(resp.json())

    async def get_at_home_server(self, url, headers=None) -> AtHomeResponse:
        resp = await self.client.get(url, headers=headers)
        resp.raise_for_status()
        return AtHomeResponse.from_json(resp.json())

    async def aclose(self):
        await self.client.aclose()
