"""
merged/contracts.py
Collaborators the merged source depends on. Storage, chapter sync, download
policy and the download worker live outside this package.
"""

from typing import List, Optional, Protocol

from merged.models import Chapter, Manga, MangaDetails, MergedReference, Page, SourceChapter


class Source(Protocol):
    id: int
    name: str

    async def get_manga_details(self, manga: MangaDetails) -> MangaDetails: ...

    async def get_chapter_list(self, manga: MangaDetails) -> List[SourceChapter]: ...

    async def get_page_list(self, chapter: SourceChapter) -> List[Page]: ...


class MangaStore(Protocol):
    async def get_manga(self, url: str, source_id: int) -> Optional[Manga]: ...

    async def get_manga_by_id(self, manga_id: int) -> Optional[Manga]: ...

    async def get_merged_references(self, merge_id: int) -> List[MergedReference]: ...

    async def network_to_local(self, manga: Manga) -> Manga: ...

    async def update_from_source(self, manga: Manga, details: MangaDetails, force: bool) -> None: ...

    async def get_categories(self, manga_id: int) -> List[int]: ...


class SourceLookup(Protocol):
    def get_or_stub(self, source_id: int) -> Source: ...


class ChapterSyncer(Protocol):
    async def sync_chapters(self, chapters: List[SourceChapter], manga: Manga, source: Source) -> List[Chapter]: ...


class DownloadPolicy(Protocol):
    async def should_download_new_chapters(self, manga: Manga, category_ids: List[int]) -> bool: ...


class DownloadManager(Protocol):
    async def download_chapters(self, manga: Manga, chapters: List[Chapter]) -> None: ...
