"""
merged/resolver.py
Turns a merged reference into a live source plus its local manga record.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.markup import escape

from merged.contracts import MangaStore, SourceLookup
from merged.models import Manga, MergedReference

console = Console()


@dataclass
class LoadedManga:
    source: object
    manga: Optional[Manga]
    reference: MergedReference


class ReferenceResolver:
    def __init__(self, store: MangaStore, source_manager: SourceLookup):
        self.store = store
        self.source_manager = source_manager

    async def load(self, reference: MergedReference) -> LoadedManga:
        """
        Resolve `reference` in two steps: look the record up locally, and if
        it does not exist yet create it and fill it from the source.

        A local record whose source differs from the reference's is treated as
        a redirect and served by the record's own source.
        """
        manga = await self.store.get_manga(reference.url, reference.source_id)
        if manga is not None:
            if manga.source != reference.source_id:
                console.log(
                    f"↪️ Reference {escape(reference.url)} redirected: source {reference.source_id} -> {manga.source}"
                )
            return LoadedManga(self.source_manager.get_or_stub(manga.source), manga, reference)

        source = self.source_manager.get_or_stub(reference.source_id)
        new_manga = await self.store.network_to_local(Manga.create(reference.source_id, reference.url))
        details = await source.get_manga_details(new_manga.to_details())
        await self.store.update_from_source(new_manga, details, False)
        console.log(f"🆕 Created local manga {escape(reference.url)} for source {reference.source_id}")
        manga = await self.store.get_manga_by_id(new_manga.id)
        return LoadedManga(source, manga, reference)
