"""
sessions/cache.py
Mint timestamps of CDN sessions, per provider and request url.

The page handler records a timestamp every time it mints a session; image
fetching asks whether a session is stale before reusing its base url.
"""

import threading

import redis.asyncio as aioredis
from rich.console import Console
from rich.markup import escape

from errors import ConfigurationError
from sessions.context import now_millis

console = Console()


class BaseSessionCache:
    def __init__(self, lifespan, clock=now_millis):
        self.lifespan = lifespan
        self.clock = clock

    async def record_mint(self, provider_id, request_key, timestamp):
        raise NotImplementedError

    async def last_mint(self, provider_id, request_key):
        raise NotImplementedError

    async def is_stale(self, provider_id, request_key, now=None):
        """A session is stale when it was never minted or has outlived the token lifespan."""
        minted_at = await self.last_mint(provider_id, request_key)
        if minted_at is None:
            return True
        now = self.clock() if now is None else now
        return now - minted_at > self.lifespan


class InMemorySessionCache(BaseSessionCache):
    def __init__(self, lifespan, clock=now_millis):
        super().__init__(lifespan, clock)
        self._entries = {}
        self._lock = threading.Lock()

    async def record_mint(self, provider_id, request_key, timestamp):
        with self._lock:
            self._entries[(provider_id, request_key)] = timestamp

    async def last_mint(self, provider_id, request_key):
        with self._lock:
            return self._entries.get((provider_id, request_key))

    def __len__(self):
        with self._lock:
            return len(self._entries)


class RedisSessionCache(BaseSessionCache):
    """One Redis hash per provider: request url -> mint timestamp."""

    def __init__(self, lifespan, redis_url=None, redis=None, clock=now_millis):
        super().__init__(lifespan, clock)
        self.redis_url = redis_url
        self.redis = redis

    async def connect_redis(self):
        if self.redis is None:
            self.redis = aioredis.from_url(self.redis_url, decode_responses=True)

    def _key(self, provider_id):
        return f"cdn_sessions:{provider_id}"

    async def record_mint(self, provider_id, request_key, timestamp):
        await self.connect_redis()
        await self.redis.hset(self._key(provider_id), request_key, timestamp)

    async def last_mint(self, provider_id, request_key):
        await self.connect_redis()
        val = await self.redis.hget(self._key(provider_id), request_key)
        return int(val) if val is not None else None


def build_session_cache(config):
    if config.session_cache_backend == "redis":
        console.log(f"🗄️ CDN sessions cached in Redis ({escape(config.redis_url)})")
        return RedisSessionCache(config.at_home_token_lifespan, redis_url=config.redis_url)
    if config.session_cache_backend != "memory":
        raise ConfigurationError(f"Unknown session cache backend: {config.session_cache_backend}")
    return InMemorySessionCache(config.at_home_token_lifespan)
