"""
Downloader package.
Hands newly synced chapters to the download worker.
"""

from .queue import RedisDownloadQueue, build_download_queue

__all__ = ["RedisDownloadQueue", "build_download_queue"]
