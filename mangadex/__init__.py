"""
MangaDex package.
Chapter page resolution through MangaDex@Home and external hosts.
"""

from .page_handler import ImageCall, PageHandler, build_page_handler, page_list_parse
from .service import MangaDexService, get_chapter_id

__all__ = ["ImageCall", "PageHandler", "build_page_handler", "page_list_parse", "MangaDexService", "get_chapter_id"]
