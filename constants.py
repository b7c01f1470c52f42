"""
constants.py
Shared identifiers and HTTP defaults.
"""

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/120.0 Safari/537.36",
}
DEFAULT_REQUEST_TIMEOUT = 30.0

# Source id reserved for merged manga; references to it never fan out.
MERGED_SOURCE_ID = 6969
MANGADEX_SOURCE_ID = 2499283573021220255

# Provider groups allowed to fetch at the same time within one sync call.
MERGED_FETCH_CONCURRENCY = 5
