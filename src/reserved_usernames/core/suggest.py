from __future__ import annotations

from typing import Callable, Iterator

SUGGESTION_SUFFIXES: tuple[str, ...] = ("user", "profile", "account", "real", "official", "app")
SUGGESTION_PREFIXES: tuple[str, ...] = ("my", "the", "real", "official", "user")


def _candidates(base: str, count: int) -> Iterator[str]:
    for i in range(1, count + 1):
        yield f"{base}{i}"
    for suffix in SUGGESTION_SUFFIXES:
        yield base + suffix
    for prefix in SUGGESTION_PREFIXES:
        yield prefix + base


def generate_alternatives(base: str, count: int, is_reserved: Callable[[str], bool]) -> list[str]:
    """Collect up to `count` unique candidates for `base` that `is_reserved` rejects.

    Candidates are tried in priority order: numeric suffixes 1..count, then word
    suffixes, then word prefixes. Best effort: fewer than `count` are returned if
    every fixed variant is itself reserved.
    """

    if count <= 0:
        return []

    out: list[str] = []
    seen: set[str] = set()
    for candidate in _candidates(base, count):
        if candidate in seen or is_reserved(candidate):
            continue
        seen.add(candidate)
        out.append(candidate)
        if len(out) >= count:
            break
    return out
