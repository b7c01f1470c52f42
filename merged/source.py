"""
merged/source.py
The merged source: one manga whose chapters come from several sources.
"""

import asyncio
from collections import defaultdict

from rich.console import Console
from rich.markup import escape

from constants import MERGED_FETCH_CONCURRENCY, MERGED_SOURCE_ID
from errors import CorruptedMergeError, UnsupportedOperationError
from merged.contracts import ChapterSyncer, DownloadManager, DownloadPolicy, MangaStore, SourceLookup
from merged.resolver import ReferenceResolver

console = Console()


def require_valid_merge(references, unavailable):
    if not references:
        raise CorruptedMergeError(
            f"Manga references are empty, {unavailable}, merge is likely corrupted"
        )
    if len(references) == 1 and references[0].source_id == MERGED_SOURCE_ID:
        raise CorruptedMergeError(
            "Manga references contain only the merged reference, merge is likely corrupted"
        )


def group_references(references):
    """Group references by source id, leaving out the merged source itself."""
    groups = defaultdict(list)
    for reference in references:
        if reference.source_id == MERGED_SOURCE_ID:
            continue
        groups[reference.source_id].append(reference)
    return dict(groups)


class SyncErrors:
    """
    Errors recorded while fanning out one sync call.

    Every error is kept in the order it was recorded; the last one recorded
    is the one re-raised once the fan-out is over.
    """

    def __init__(self):
        self.errors = []

    def record(self, reference, error):
        self.errors.append((reference, error))
        console.log(f"[red]❌ {reference.source_id} {escape(reference.url)}:[/red] {escape(repr(error))}")

    @property
    def last(self):
        return self.errors[-1][1] if self.errors else None

    def raise_last(self):
        if self.errors:
            raise self.last


class MergedSource:
    id = MERGED_SOURCE_ID
    name = "MergedSource"
    lang = "all"
    base_url = ""
    supports_latest = False

    def __init__(
        self,
        store: MangaStore,
        source_manager: SourceLookup,
        chapter_syncer: ChapterSyncer,
        download_manager: DownloadManager,
        download_policy: DownloadPolicy,
        max_concurrent_sources=MERGED_FETCH_CONCURRENCY,
    ):
        self.store = store
        self.source_manager = source_manager
        self.chapter_syncer = chapter_syncer
        self.download_manager = download_manager
        self.download_policy = download_policy
        self.max_concurrent_sources = max_concurrent_sources
        self.resolver = ReferenceResolver(store, source_manager)

    # -------------------------------------------------------
    # Details
    # -------------------------------------------------------

    async def get_manga_details(self, manga):
        """
        Details to display for a merged manga: those of the info reference if
        one is set and stored locally, else the merged record's own. The url
        always stays the merged manga's.
        """
        merged = await self.store.get_manga(manga.url, self.id)
        if merged is None:
            raise CorruptedMergeError("merged manga not in db")
        references = await self.store.get_merged_references(merged.id)
        require_valid_merge(references, "info unavailable")

        info_reference = next((r for r in references if r.is_info_manga), None) or next(
            (r for r in references if r.url != merged.url), None
        )
        details = None
        if info_reference is not None:
            info_manga = await self.store.get_manga(info_reference.url, info_reference.source_id)
            if info_manga is not None:
                details = info_manga.to_details()
        return (details or merged.to_details()).copy(url=manga.url)

    # -------------------------------------------------------
    # Chapters
    # -------------------------------------------------------

    async def fetch_chapters_for_merged_manga(self, manga, download_chapters=True):
        await self.fetch_chapters_and_sync(manga, download_chapters)

    async def fetch_chapters_and_sync(self, manga, download_chapters=True):
        """
        Fetch and sync chapters from every source the merged manga references.

        Sources are fetched concurrently, at most `max_concurrent_sources` at
        a time. A failing reference contributes no chapters and does not stop
        the others; once all sources are done the last recorded error is
        raised. Chapters synced before that stay synced.
        """
        references = await self.store.get_merged_references(manga.id)
        require_valid_merge(references, "chapters unavailable")

        should_download = download_chapters and await self.download_policy.should_download_new_chapters(
            manga, await self.store.get_categories(manga.id)
        )
        semaphore = asyncio.Semaphore(self.max_concurrent_sources)
        errors = SyncErrors()

        async def sync_group(group):
            async with semaphore:
                chapters = []
                for reference in group:
                    try:
                        chapters.extend(await self._sync_reference(reference, should_download))
                    except Exception as e:
                        errors.record(reference, e)
                return chapters

        groups = group_references(references)
        results = await asyncio.gather(*(sync_group(group) for group in groups.values()))
        chapters = [chapter for result in results for chapter in result]

        console.log(
            f"🔄 Merged {manga.id}: {len(groups)} sources, {len(chapters)} new chapters, {len(errors.errors)} errors"
        )
        errors.raise_last()
        return chapters

    async def _sync_reference(self, reference, should_download):
        loaded = await self.resolver.load(reference)
        if loaded.manga is None or not reference.fetch_chapter_updates:
            return []

        chapter_list = await loaded.source.get_chapter_list(loaded.manga.to_details())
        results = await self.chapter_syncer.sync_chapters(chapter_list, loaded.manga, loaded.source)
        if should_download and reference.download_chapters:
            await self.download_manager.download_chapters(loaded.manga, results)
        return results

    # -------------------------------------------------------
    # Catalogue operations a merged source cannot serve
    # -------------------------------------------------------

    async def get_chapter_list(self, manga):
        raise UnsupportedOperationError("Merged chapters are fetched with fetch_chapters_and_sync")

    async def get_page_list(self, chapter):
        raise UnsupportedOperationError("Pages are served by the source the chapter belongs to")

    async def get_popular_manga(self, page):
        raise UnsupportedOperationError(f"{self.name} has no catalogue")

    async def get_latest_updates(self, page):
        raise UnsupportedOperationError(f"{self.name} has no catalogue")

    async def get_search_manga(self, page, query, filters=None):
        raise UnsupportedOperationError(f"{self.name} has no catalogue")
