"""
sources/hosts.py
External hosts that serve chapters MangaDex only links to.

Each host carries the scanlator tags it serves, the markers that identify its
image and page urls, and the httpx client and headers its images must be
fetched with. Page-list parsing belongs to the concrete host implementation.
"""

from abc import ABC, abstractmethod

import httpx

from constants import DEFAULT_REQUEST_TIMEOUT, HEADERS


class ExternalHost(ABC):
    name = ""
    # Scanlator tags routed to this host, compared case-insensitively.
    tags = ()
    # Substrings of Page.image_url whose bytes must be fetched by this host.
    image_markers = ()
    # Substrings of Page.url whose image url this host resolves itself.
    locator_markers = ()
    wants_chapter_number = False

    def __init__(self, client=None, headers=None):
        self.headers = dict(headers if headers is not None else HEADERS)
        self.client = client or httpx.AsyncClient(timeout=DEFAULT_REQUEST_TIMEOUT, headers=self.headers)

    @abstractmethod
    async def fetch_page_list(self, external_url, chapter_number=None):
        """Return the Page list for a chapter hosted at `external_url`."""

    async def fetch_image_url(self, page):
        raise NotImplementedError(f"{self.name} does not resolve image urls")

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class MangaPlusHost(ExternalHost):
    name = "mangaplus"
    tags = ("mangaplus",)
    image_markers = ("mangaplus",)


class ComikeyHost(ExternalHost):
    # Comikey chapter pages cannot be listed anymore; only its images are routed.
    name = "comikey"
    tags = ()
    image_markers = ("comikey",)


class BilibiliHost(ExternalHost):
    name = "bilibili comics"
    tags = ("bilibili comics",)
    image_markers = ("/bfs/comic/",)
    locator_markers = ("/bfs/comic/",)
    wants_chapter_number = True


class AzukiHost(ExternalHost):
    name = "azuki manga"
    tags = ("azuki manga",)
    image_markers = ("azuki",)


class MangaHotHost(ExternalHost):
    name = "mangahot"
    tags = ("mangahot",)
    image_markers = ("mangahot",)
