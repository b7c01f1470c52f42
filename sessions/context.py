"""
sessions/context.py
The CDN session context a page carries in its locator.
"""

import time
from dataclasses import dataclass


def now_millis():
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SessionContext:
    base_url: str
    mint_url: str
    minted_at: int

    def to_locator(self) -> str:
        return f"{self.base_url},{self.mint_url},{self.minted_at}"

    @classmethod
    def from_locator(cls, locator: str) -> "SessionContext":
        try:
            base_url, rest = locator.split(",", 1)
            mint_url, minted_at = rest.rsplit(",", 1)
            return cls(base_url, mint_url, int(minted_at))
        except ValueError:
            raise ValueError(f"Not a CDN page locator: {locator!r}") from None
