"""
mangadex/page_handler.py
Resolves the pages of a MangaDex chapter and picks how each image is fetched.

Chapters MangaDex only links to are handed to the external host registered
for their scanlator. Everything else is served by MangaDex@Home: a session is
minted per chapter view, and its base url, mint url and mint time are stored
in every page's locator so the session can be refreshed later.
"""

from dataclasses import dataclass

import httpx
from rich.console import Console
from rich.markup import escape

from constants import HEADERS, MANGADEX_SOURCE_ID
from errors import ConfigurationError
from merged.models import Page
from mangadex.service import MangaDexService, get_chapter_id
from sessions.cache import build_session_cache
from sessions.context import SessionContext, now_millis
from sources.routes import HostRegistry

console = Console()


@dataclass
class ImageCall:
    client: httpx.AsyncClient
    request: httpx.Request

    async def execute(self) -> httpx.Response:
        return await self.client.send(self.request)


def page_list_parse(at_home_request_url, at_home, data_saver, minted_at):
    """
    Build pages from an at-home response. Data saver or full quality is
    chosen once for the whole chapter.
    """
    hash_ = at_home.chapter.hash
    if data_saver:
        paths = [f"/data-saver/{hash_}/{name}" for name in at_home.chapter.data_saver]
    else:
        paths = [f"/data/{hash_}/{name}" for name in at_home.chapter.data]

    locator = SessionContext(at_home.base_url, at_home_request_url, minted_at).to_locator()
    return [Page(index, locator, path) for index, path in enumerate(paths)]


class PageHandler:
    def __init__(
        self,
        service,
        hosts,
        session_cache,
        headers=None,
        provider_id=MANGADEX_SOURCE_ID,
        clock=now_millis,
    ):
        self.service = service
        self.hosts = hosts
        self.session_cache = session_cache
        self.headers = dict(headers if headers is not None else HEADERS)
        self.provider_id = provider_id
        self.clock = clock

    def at_home_request_url(self, chapter_id, use_port_443_only=False):
        url = f"{self.service.at_home_server}/{chapter_id}"
        if use_port_443_only:
            url += "?forcePort443=true"
        return url

    async def fetch_page_list(self, chapter, use_port_443_only=False, data_saver=False):
        chapter_id = get_chapter_id(chapter.url)
        response = await self.service.view_chapter(chapter_id)
        attributes = response.attributes

        if attributes.external_url is not None and attributes.pages == 0:
            host = self.hosts.host_for_tag(chapter.scanlator)
            console.log(f"🌐 Chapter {escape(chapter_id)} hosted by {escape(host.name)}: {escape(attributes.external_url)}")
            if host.wants_chapter_number:
                return await host.fetch_page_list(attributes.external_url, attributes.chapter)
            return await host.fetch_page_list(attributes.external_url)

        at_home_request_url = self.at_home_request_url(chapter_id, use_port_443_only)
        minted_at = self.clock()
        await self.session_cache.record_mint(self.provider_id, at_home_request_url, minted_at)
        at_home = await self.service.get_at_home_server(at_home_request_url, self.headers)
        return page_list_parse(at_home_request_url, at_home, data_saver, minted_at)

    async def resolve_image_url(self, page):
        """
        Full image url of a CDN page. The session in the page's locator is
        re-minted first when the session cache reports it stale.
        """
        context = SessionContext.from_locator(page.url)
        base_url = context.base_url
        if await self.session_cache.is_stale(self.provider_id, context.mint_url):
            minted_at = self.clock()
            at_home = await self.service.get_at_home_server(context.mint_url, self.headers)
            await self.session_cache.record_mint(self.provider_id, context.mint_url, minted_at)
            console.log(f"🔑 Re-minted CDN session {escape(context.mint_url)}")
            base_url = at_home.base_url
        return base_url + page.image_url

    async def fetch_image_url(self, page, default):
        host = self.hosts.host_for_locator(page.url)
        if host is not None:
            return await host.fetch_image_url(page)
        return await default(page)

    def get_image_call(self, page):
        """Request for the page image on its host's client, or None for the default transport."""
        host = self.hosts.host_for_image_url(page.image_url)
        if host is None:
            return None
        return ImageCall(host.client, host.client.build_request("GET", page.image_url, headers=host.headers))


def build_page_handler(config, hosts):
    """Page handler wired from config. `hosts` are the installed external host implementations."""
    hosts = list(hosts)
    if not hosts:
        raise ConfigurationError("No external hosts installed; externally hosted chapters could not be resolved")
    return PageHandler(
        MangaDexService(config.mangadex_api_url),
        HostRegistry(hosts),
        build_session_cache(config),
    )
