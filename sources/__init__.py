"""
Sources package.
Installed sources, external host profiles and the routes between them.
"""

from .hosts import AzukiHost, BilibiliHost, ComikeyHost, ExternalHost, MangaHotHost, MangaPlusHost
from .manager import SourceManager, StubSource
from .routes import HostRegistry

__all__ = [
    "ExternalHost",
    "MangaPlusHost",
    "ComikeyHost",
    "BilibiliHost",
    "AzukiHost",
    "MangaHotHost",
    "SourceManager",
    "StubSource",
    "HostRegistry",
]
