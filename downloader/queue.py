"""
downloader/queue.py
Queues newly synced chapters for the download worker through Redis.
"""

import json
import uuid

import redis.asyncio as aioredis
from rich.console import Console
from rich.markup import escape

console = Console()


class RedisDownloadQueue:
    def __init__(self, redis_url=None, queue_key="download_jobs", redis=None):
        self.redis_url = redis_url
        self.queue_key = queue_key
        self.redis = redis

    async def connect_redis(self):
        if self.redis is None:
            self.redis = aioredis.from_url(self.redis_url, decode_responses=True)

    async def download_chapters(self, manga, chapters):
        """Push one job for `chapters` and return its id. Nothing is queued for an empty list."""
        if not chapters:
            return None
        await self.connect_redis()

        job_id = str(uuid.uuid4())
        job = {
            "id": job_id,
            "manga_id": manga.id,
            "source": manga.source,
            "manga_url": manga.url,
            "title": manga.title,
            "chapters": [{"id": c.id, "url": c.url, "name": c.name} for c in chapters],
            "status": "queued",
        }
        await self.redis.set(f"job:{job_id}", json.dumps(job))
        await self.redis.lpush(self.queue_key, json.dumps(job))
        console.log(f"📥 Queued {len(chapters)} chapters of {escape(manga.title or manga.url)}")
        return job_id


def build_download_queue(config):
    return RedisDownloadQueue(redis_url=config.redis_url, queue_key=config.download_queue)
