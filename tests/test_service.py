"""
Tests for the MangaDex API client.
"""

import httpx
import pytest

from mangadex import MangaDexService, get_chapter_id


def make_service(handler):
    return MangaDexService("https://api.test/", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestChapterId:
    @pytest.mark.parametrize("url, expected", [
        ("/chapter/1b2c", "1b2c"),
        ("/chapter/1b2c/", "1b2c"),
        ("https://mangadex.org/chapter/1b2c", "1b2c"),
        ("1b2c", "1b2c"),
    ])
    def test_last_path_segment(self, url, expected):
        assert get_chapter_id(url) == expected


class TestMangaDexService:
    @pytest.mark.asyncio
    async def test_view_chapter(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={
                "result": "ok",
                "data": {
                    "id": "abc",
                    "type": "chapter",
                    "attributes": {"chapter": "3", "pages": 0, "externalUrl": "https://mangaplus.shueisha.co.jp/viewer/1"},
                },
            })

        service = make_service(handler)
        response = await service.view_chapter("abc")

        assert seen == ["https://api.test/chapter/abc"]
        assert response.id == "abc"
        assert response.attributes.chapter == "3"
        assert response.attributes.pages == 0
        assert response.attributes.external_url == "https://mangaplus.shueisha.co.jp/viewer/1"

    @pytest.mark.asyncio
    async def test_native_chapter_has_no_external_url(self):
        service = make_service(lambda request: httpx.Response(
            200, json={"data": {"id": "abc", "attributes": {"pages": 12, "externalUrl": None}}}
        ))

        response = await service.view_chapter("abc")

        assert response.attributes.pages == 12
        assert response.attributes.external_url is None

    @pytest.mark.asyncio
    async def test_get_at_home_server(self):
        def handler(request):
            assert request.headers["Referer"] == "https://mangadex.org/"
            return httpx.Response(200, json={
                "result": "ok",
                "baseUrl": "https://cdn.example",
                "chapter": {"hash": "h", "data": ["1.png", "2.png"], "dataSaver": ["1s.jpg"]},
            })

        service = make_service(handler)
        response = await service.get_at_home_server(
            f"{service.at_home_server}/abc", {"Referer": "https://mangadex.org/"}
        )

        assert service.at_home_server == "https://api.test/at-home/server"
        assert response.base_url == "https://cdn.example"
        assert response.chapter.hash == "h"
        assert response.chapter.data == ["1.png", "2.png"]
        assert response.chapter.data_saver == ["1s.jpg"]

    @pytest.mark.asyncio
    async def test_http_errors_propagate(self):
        service = make_service(lambda request: httpx.Response(429, json={"result": "error"}))

        with pytest.raises(httpx.HTTPStatusError):
            await service.view_chapter("abc")
        await service.aclose()
