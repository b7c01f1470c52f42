"""
mangadex/dto.py
Typed views of the MangaDex chapter and at-home responses.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ChapterAttributes:
    pages: int = 0
    chapter: Optional[str] = None
    title: Optional[str] = None
    external_url: Optional[str] = None
    translated_language: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            pages=data.get("pages") or 0,
            chapter=data.get("chapter"),
            title=data.get("title"),
            external_url=data.get("externalUrl"),
            translated_language=data.get("translatedLanguage"),
        )


@dataclass
class ChapterResponse:
    id: str
    attributes: ChapterAttributes

    @classmethod
    def from_json(cls, payload):
        data = payload["data"]
        return cls(id=data["id"], attributes=ChapterAttributes.from_json(data.get("attributes") or {}))


@dataclass
class AtHomeChapter:
    hash: str
    data: List[str] = field(default_factory=list)
    data_saver: List[str] = field(default_factory=list)


@dataclass
class AtHomeResponse:
    base_url: str
    chapter: AtHomeChapter

    @classmethod
    def from_json(cls, payload):
        chapter = payload["chapter"]
        return cls(
            base_url=payload["baseUrl"],
            chapter=AtHomeChapter(
                hash=chapter["hash"],
                data=list(chapter.get("data") or []),
                data_saver=list(chapter.get("dataSaver") or []),
            ),
        )
