"""
sources/manager.py
Registry of installed sources. Unknown ids resolve to a stub that fails on use.
"""

from rich.console import Console

from errors import SourceNotInstalledError

console = Console()


class StubSource:
    def __init__(self, source_id):
        self.id = source_id
        self.name = str(source_id)

    async def get_manga_details(self, manga):
        raise SourceNotInstalledError(self.id)

    async def get_chapter_list(self, manga):
        raise SourceNotInstalledError(self.id)

    async def get_page_list(self, chapter):
        raise SourceNotInstalledError(self.id)

    def __repr__(self):
        return f"StubSource({self.id})"


class SourceManager:
    def __init__(self, sources=()):
        self._sources = {}
        self._stubs = {}
        for source in sources:
            self.register(source)

    def register(self, source):
        self._sources[source.id] = source

    def get(self, source_id):
        return self._sources.get(source_id)

    def get_or_stub(self, source_id):
        source = self._sources.get(source_id)
        if source is not None:
            return source
        if source_id not in self._stubs:
            console.log(f"⚠️ Source {source_id} not installed, using stub")
            self._stubs[source_id] = StubSource(source_id)
        return self._stubs[source_id]
