from __future__ import annotations

from typing import Any


def normalize_username(name: Any, *, case_sensitive: bool) -> str | None:
    """Return the storage/lookup form of `name`, or None if it is not a usable username.

    Case-insensitive registries store everything lower-cased, so the same function is
    applied when names enter the set and when they are looked up.
    """

    if not isinstance(name, str) or not name:
        return None
    return name if case_sensitive else name.lower()
