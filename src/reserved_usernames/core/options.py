from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ..io.remote import DEFAULT_SOURCES, RemoteSource

ENV_PREFIX = "RESERVED_USERNAMES_"
DEFAULT_FETCH_TIMEOUT_S = 10.0


def default_cache_file() -> Path:
    return Path.home() / ".cache" / "reserved-usernames" / "reserved-usernames-cache.json"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RegistryOptions:
    """Construction-time configuration for a `ReservedUsernames` registry.

    Notes:
    - `case_sensitive=False` stores and compares everything lower-cased.
    - `sources` are tried in order when refreshing; the first successful mirror wins.
    - `fetch_timeout_s` bounds every remote request (connect + read).
    """

    case_sensitive: bool = False
    custom_reserved: tuple[str, ...] = ()
    auto_update: bool = False
    cache_file: Path = field(default_factory=default_cache_file)
    sources: tuple[RemoteSource, ...] = DEFAULT_SOURCES
    fetch_timeout_s: float = DEFAULT_FETCH_TIMEOUT_S

    def __post_init__(self) -> None:
        # Accept any iterable / path-like and store canonical types.
        custom = self.custom_reserved
        object.__setattr__(self, "custom_reserved", (custom,) if isinstance(custom, str) else tuple(custom))
        object.__setattr__(self, "cache_file", Path(self.cache_file))
        object.__setattr__(self, "sources", tuple(self.sources))
        if float(self.fetch_timeout_s) <= 0:
            raise ValueError("fetch_timeout_s must be > 0")

    def with_overrides(self, **overrides: Any) -> "RegistryOptions":
        """Return a copy with every non-None keyword applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **defaults: Any) -> "RegistryOptions":
        """Build options from `RESERVED_USERNAMES_*` environment variables.

        Explicit `defaults` are used for anything the environment does not set.
        """

        env = os.environ if environ is None else environ
        values: dict[str, Any] = dict(defaults)

        def get(name: str) -> str | None:
            v = env.get(ENV_PREFIX + name)
            return v if v not in (None, "") else None

        parsers = {
            "CASE_SENSITIVE": ("case_sensitive", _parse_bool),
            "AUTO_UPDATE": ("auto_update", _parse_bool),
            "CACHE_FILE": ("cache_file", lambda v: Path(v).expanduser()),
            "CUSTOM": ("custom_reserved", _split_csv),
            "FETCH_TIMEOUT": ("fetch_timeout_s", float),
        }
        for env_name, (field_name, parse) in parsers.items():
            raw = get(env_name)
            if raw is not None:
                values[field_name] = parse(raw)

        return cls(**values)


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in value.split(",") if p.strip())
