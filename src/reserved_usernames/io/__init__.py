from __future__ import annotations

from .cache import (
    CACHE_TTL_MS,
    CacheRecord,
    delete_cache_file,
    load_fresh_usernames,
    read_cache_record,
    write_cache_record,
)
from .remote import DEFAULT_SOURCES, RemoteSource, fetch_reserved_usernames

__all__ = [
    "CACHE_TTL_MS",
    "CacheRecord",
    "read_cache_record",
    "load_fresh_usernames",
    "write_cache_record",
    "delete_cache_file",
    "RemoteSource",
    "DEFAULT_SOURCES",
    "fetch_reserved_usernames",
]
