"""
Shared fakes for the merged source, page handler and Redis-backed helpers.
"""

import asyncio
import itertools

import pytest

from constants import MERGED_SOURCE_ID
from merged.models import Chapter, Manga, MangaDetails, MergedReference, SourceChapter


class FakeStore:
    """In-memory manga store keyed by (url, source)."""

    def __init__(self):
        self._ids = itertools.count(1)
        self.manga = {}
        self.references = {}
        self.categories = {}
        self.updates = []

    def add_manga(self, source, url, **fields):
        manga = Manga(source=source, url=url, id=next(self._ids), **fields)
        self.manga[manga.id] = manga
        return manga

    def add_merged(self, url="merged-1", references=()):
        merged = self.add_manga(MERGED_SOURCE_ID, url, title="Merged")
        self.references[merged.id] = [
            MergedReference(merge_id=merged.id, merge_url=merged.url, source_id=MERGED_SOURCE_ID, url=merged.url)
        ] + [
            MergedReference(merge_id=merged.id, merge_url=merged.url, **ref) for ref in references
        ]
        return merged

    async def get_manga(self, url, source_id):
        return next((m for m in self.manga.values() if m.url == url and m.source == source_id), None)

    async def get_manga_by_id(self, manga_id):
        return self.manga.get(manga_id)

    async def get_merged_references(self, merge_id):
        return list(self.references.get(merge_id, []))

    async def network_to_local(self, manga):
        existing = await self.get_manga(manga.url, manga.source)
        if existing is not None:
            return existing
        manga.id = next(self._ids)
        self.manga[manga.id] = manga
        return manga

    async def update_from_source(self, manga, details, force):
        self.updates.append((manga.id, details, force))
        stored = self.manga[manga.id]
        stored.title = details.title
        stored.author = details.author
        stored.description = details.description
        stored.initialized = True

    async def get_categories(self, manga_id):
        return self.categories.get(manga_id, [])


class FakeSource:
    def __init__(self, source_id, chapters=(), error=None, gate=None, fail_urls=None):
        self.id = source_id
        self.name = f"source-{source_id}"
        self.chapters = list(chapters)
        self.error = error
        self.gate = gate
        self.fail_urls = fail_urls
        self.chapter_calls = []
        self.details_calls = []

    async def get_manga_details(self, manga):
        self.details_calls.append(manga.url)
        if self.error is not None and (self.fail_urls is None or manga.url in self.fail_urls):
            raise self.error
        return MangaDetails(url=manga.url, title=f"{self.name} title", author="author")

    async def get_chapter_list(self, manga):
        self.chapter_calls.append(manga.url)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None and (self.fail_urls is None or manga.url in self.fail_urls):
            raise self.error
        return [SourceChapter(url=f"{manga.url}/{c}", name=c) for c in self.chapters]


class FakeSyncer:
    def __init__(self):
        self._ids = itertools.count(100)
        self.calls = []

    async def sync_chapters(self, chapters, manga, source):
        self.calls.append((source.id, manga.id, [c.url for c in chapters]))
        return [Chapter(manga_id=manga.id, url=c.url, name=c.name, id=next(self._ids)) for c in chapters]


class FakeDownloader:
    def __init__(self):
        self.calls = []

    async def download_chapters(self, manga, chapters):
        self.calls.append((manga.id, [c.url for c in chapters]))


class FakePolicy:
    def __init__(self, answer=True):
        self.answer = answer
        self.calls = []

    async def should_download_new_chapters(self, manga, category_ids):
        self.calls.append((manga.id, list(category_ids)))
        return self.answer


class FakeRedis:
    """The handful of redis.asyncio commands used by the queue and session cache."""

    def __init__(self):
        self.values = {}
        self.lists = {}
        self.hashes = {}

    async def set(self, key, value):
        self.values[key] = str(value)

    async def get(self, key):
        return self.values.get(key)

    async def lpush(self, key, value):
        self.lists.setdefault(key, []).insert(0, value)

    async def hset(self, key, field, value):
        self.hashes.setdefault(key, {})[field] = str(value)

    async def hget(self, key, field):
        return self.hashes.get(key, {}).get(field)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def syncer():
    return FakeSyncer()


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def policy():
    return FakePolicy()


@pytest.fixture
def fake_redis():
    return FakeRedis()


async def settle(rounds=20):
    for _ in range(rounds):
        await asyncio.sleep(0)
