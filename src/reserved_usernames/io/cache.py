from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger("reserved_usernames.cache")

CACHE_TTL_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheRecord:
    """On-disk snapshot of the remote list.

    File format: {"usernames": [str, ...], "timestamp": <int ms since epoch>}
    """

    usernames: list[str]
    timestamp: int

    def is_fresh(self, now: int | None = None) -> bool:
        now = now_ms() if now is None else now
        return now - self.timestamp < CACHE_TTL_MS

    def to_dict(self) -> dict:
        return {"usernames": list(self.usernames), "timestamp": int(self.timestamp)}


def read_cache_record(path: str | Path) -> CacheRecord | None:
    """Read a cache record, or None if absent/unreadable. Never raises."""

    p = Path(path)
    if not p.exists():
        return None
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        usernames = data["usernames"]
        timestamp = int(data["timestamp"])
        if not isinstance(usernames, list) or not all(isinstance(u, str) for u in usernames):
            raise ValueError("'usernames' must be a list of strings")
    except (OSError, ValueError, KeyError, TypeError) as e:
        log.warning("Failed to load from cache %s: %s", p, e)
        return None
    return CacheRecord(usernames=usernames, timestamp=timestamp)


def load_fresh_usernames(path: str | Path, *, now: int | None = None) -> list[str] | None:
    record = read_cache_record(path)
    if record is None:
        return None
    if not record.is_fresh(now):
        log.info("Cache %s is stale; ignoring it", path)
        return None
    return record.usernames


def write_cache_record(path: str | Path, usernames: list[str], *, now: int | None = None) -> bool:
    """Persist `usernames` with the current timestamp. Failures are logged, not raised."""

    p = Path(path)
    record = CacheRecord(usernames=list(usernames), timestamp=now_ms() if now is None else now)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(record.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        log.warning("Failed to save cache %s: %s", p, e)
        return False
    return True


def delete_cache_file(path: str | Path) -> bool:
    p = Path(path)
    try:
        if p.exists():
            p.unlink()
            return True
    except OSError as e:
        log.warning("Failed to clear cache %s: %s", p, e)
    return False
