"""
Sessions package.
Tracks when CDN sessions were minted so stale ones can be refreshed.
"""

from .cache import BaseSessionCache, InMemorySessionCache, RedisSessionCache, build_session_cache
from .context import SessionContext, now_millis

__all__ = [
    "BaseSessionCache",
    "InMemorySessionCache",
    "RedisSessionCache",
    "build_session_cache",
    "SessionContext",
    "now_millis",
]
