"""
merged/models.py
Records shared by the merged source, the source manager and the page handler.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional


@dataclass
class MangaDetails:
    """Provider-facing form of a manga, keyed by the provider's own url."""

    url: str
    title: str = ""
    artist: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    genre: List[str] = field(default_factory=list)
    status: int = 0
    thumbnail_url: Optional[str] = None
    initialized: bool = False

    def copy(self, **changes):
        return replace(self, **changes)


@dataclass
class Manga:
    """Local record for one (source, url) pair."""

    source: int
    url: str
    id: Optional[int] = None
    title: str = ""
    artist: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    genre: List[str] = field(default_factory=list)
    status: int = 0
    thumbnail_url: Optional[str] = None
    initialized: bool = False
    favorite: bool = False

    @classmethod
    def create(cls, source, url):
        return cls(source=source, url=url)

    def to_details(self) -> MangaDetails:
        return MangaDetails(
            url=self.url,
            title=self.title,
            artist=self.artist,
            author=self.author,
            description=self.description,
            genre=list(self.genre),
            status=self.status,
            thumbnail_url=self.thumbnail_url,
            initialized=self.initialized,
        )


@dataclass
class MergedReference:
    """
    Pointer from a merged manga to one source's copy of the work.

    `source_id` / `url` identify the copy; `merge_id` / `merge_url` identify
    the merged manga that owns the reference.
    """

    merge_id: int
    merge_url: str
    source_id: int
    url: str
    manga_id: Optional[int] = None
    id: Optional[int] = None
    is_info_manga: bool = False
    fetch_chapter_updates: bool = True
    download_chapters: bool = True


@dataclass
class SourceChapter:
    url: str
    name: str = ""
    chapter_number: float = -1.0
    scanlator: Optional[str] = None
    date_upload: int = 0


@dataclass
class Chapter:
    manga_id: int
    url: str
    name: str = ""
    id: Optional[int] = None
    chapter_number: float = -1.0
    scanlator: Optional[str] = None
    date_upload: int = 0
    read: bool = False


@dataclass
class Page:
    """
    One page of a chapter.

    For CDN-hosted pages `url` is the session locator
    `<baseUrl>,<mintUrl>,<mintedAtMillis>` and `image_url` the CDN path.
    """

    index: int
    url: str = ""
    image_url: Optional[str] = None
