"""
Merged source package.
Resolves merged references and syncs chapters from every referenced source.
"""

from .models import Chapter, Manga, MangaDetails, MergedReference, Page, SourceChapter
from .resolver import LoadedManga, ReferenceResolver
from .source import MergedSource, SyncErrors

__all__ = [
    "Chapter",
    "Manga",
    "MangaDetails",
    "MergedReference",
    "Page",
    "SourceChapter",
    "LoadedManga",
    "ReferenceResolver",
    "MergedSource",
    "SyncErrors",
]
