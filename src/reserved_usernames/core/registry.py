from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator

import httpx

from ..io.cache import delete_cache_file, load_fresh_usernames, write_cache_record
from ..io.remote import RemoteSource, fetch_reserved_usernames
from .errors import FetchError, InitializationError, InvalidArgumentError
from .events import EventHub, Handler, RegistryEvent
from .fallback import FALLBACK_USERNAMES
from .formats import NameFormat, decode_names, encode_names
from .normalize import normalize_username
from .options import RegistryOptions
from .stats import UsernameStats, compute_stats
from .suggest import generate_alternatives
from .validation import ValidationResult, ValidationRules, validate_username

log = logging.getLogger("reserved_usernames.registry")


@dataclass(frozen=True)
class UsernameCheck:
    username: Any
    is_reserved: bool

    def to_dict(self) -> dict:
        return {"username": self.username, "isReserved": self.is_reserved}


class ReservedUsernames:
    """In-memory set of reserved usernames with an optional remote/cache refresh.

    Construction is cheap and leaves the registry empty. Await `initialize()` (or use
    `await ReservedUsernames.create(...)`) before querying:

    1. fresh cache record (< 24h) -> adopted, else the embedded fallback list
    2. if `auto_update`: fetch the remote list, replace the set, rewrite the cache
    3. merge `custom_reserved`
    4. emit `ready`

    Fetch failures are non-fatal (`fetch_error` event). Anything else raised during
    initialization emits `error` and is re-raised as InitializationError.

    After initialization the set only grows (custom names, imports). A remote refresh
    replaces the base list but keeps custom, added and imported names.
    """

    def __init__(
        self,
        options: RegistryOptions | None = None,
        *,
        case_sensitive: bool | None = None,
        custom_reserved: Iterable[str] | None = None,
        auto_update: bool | None = None,
        cache_file: str | Path | None = None,
        sources: Iterable[RemoteSource] | None = None,
        fetch_timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base = options if options is not None else RegistryOptions()
        self.options = base.with_overrides(
            case_sensitive=case_sensitive,
            custom_reserved=custom_reserved,
            auto_update=auto_update,
            cache_file=cache_file,
            sources=sources,
            fetch_timeout_s=fetch_timeout_s,
        )
        self._transport = transport
        self._lock = threading.RLock()
        # dict keeps insertion order, so snapshots are stable for a given set state.
        self._names: dict[str, None] = {}
        # Names added through add/import; they survive a remote refresh.
        self._added: dict[str, None] = {}
        self._events = EventHub()
        self._ready = False

    @classmethod
    async def create(cls, options: RegistryOptions | None = None, **kwargs: Any) -> "ReservedUsernames":
        """Construct and fully initialize a registry."""
        return await cls(options, **kwargs).initialize()

    # -- configuration -------------------------------------------------

    @property
    def case_sensitive(self) -> bool:
        return self.options.case_sensitive

    @property
    def cache_file(self) -> Path:
        return self.options.cache_file

    @property
    def is_ready(self) -> bool:
        return self._ready

    def normalize(self, name: Any) -> str | None:
        return normalize_username(name, case_sensitive=self.options.case_sensitive)

    # -- events --------------------------------------------------------

    def subscribe(self, event: str | RegistryEvent, handler: Handler) -> Callable[[], None]:
        """Register `handler(payload)` for `ready`, `error`, `updated` or `fetch_error`.

        Returns a callable that removes the subscription.
        """
        return self._events.subscribe(event, handler)

    on = subscribe

    # -- lifecycle -----------------------------------------------------

    async def initialize(self) -> "ReservedUsernames":
        try:
            self._load_initial()
            if self.options.auto_update:
                await self._fetch_latest()
            self._add_many(self.options.custom_reserved)
        except Exception as e:
            log.error("Initialization failed: %s", e)
            self._events.emit(RegistryEvent.ERROR, {"error": e})
            raise InitializationError(f"Failed to initialize reserved usernames: {e}") from e

        self._ready = True
        self._events.emit(RegistryEvent.READY, {"count": len(self)})
        return self

    def _load_initial(self) -> None:
        cached = load_fresh_usernames(self.options.cache_file)
        if cached is not None:
            log.debug("Loaded %d usernames from cache %s", len(cached), self.options.cache_file)
            self._replace(cached)
        else:
            self._replace(FALLBACK_USERNAMES)

    async def _fetch_latest(self) -> bool:
        try:
            names = await fetch_reserved_usernames(
                self.options.sources,
                timeout_s=self.options.fetch_timeout_s,
                transport=self._transport,
            )
        except FetchError as e:
            log.warning("Failed to fetch latest data: %s", e)
            self._events.emit(RegistryEvent.FETCH_ERROR, {"error": e})
            return False

        self._replace(names)
        self._add_many(self.options.custom_reserved)
        self._add_many(self._added)
        write_cache_record(self.options.cache_file, names)
        self._events.emit(RegistryEvent.UPDATED, {"count": len(names)})
        return True

    async def force_update(self) -> bool:
        """Refresh from the remote source regardless of cache age.

        Returns True if the set was replaced with the fetched list. Custom names and
        names added through `add`/`import_usernames` are merged back in.
        """
        return await self._fetch_latest()

    def clear_cache(self) -> bool:
        """Delete the on-disk cache record. The in-memory set is untouched."""
        return delete_cache_file(self.options.cache_file)

    # -- mutation ------------------------------------------------------

    def _replace(self, names: Iterable[str]) -> None:
        fresh: dict[str, None] = {}
        for name in names:
            key = self.normalize(name)
            if key is not None:
                fresh[key] = None
        with self._lock:
            self._names = fresh

    def _add_many(self, names: Iterable[str]) -> None:
        with self._lock:
            for name in names:
                key = self.normalize(name)
                if key is not None:
                    self._names[key] = None

    def _remember(self, names: Iterable[str]) -> None:
        with self._lock:
            for name in names:
                key = self.normalize(name)
                if key is not None:
                    self._added[key] = None
                    self._names[key] = None

    def add(self, *names: str) -> None:
        """Reserve additional names for the lifetime of this registry."""
        self._remember(names)

    # -- queries -------------------------------------------------------

    def is_reserved(self, name: Any) -> bool:
        key = self.normalize(name)
        if key is None:
            return False
        with self._lock:
            return key in self._names

    def __contains__(self, name: object) -> bool:
        return self.is_reserved(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all())

    def check_multiple(self, usernames: list[Any] | tuple[Any, ...]) -> list[UsernameCheck]:
        if not isinstance(usernames, (list, tuple)):
            raise InvalidArgumentError("Input must be a list of usernames")
        return [UsernameCheck(username=u, is_reserved=self.is_reserved(u)) for u in usernames]

    def get_all(self) -> list[str]:
        with self._lock:
            return list(self._names)

    def get_by_pattern(self, pattern: str) -> list[str]:
        if not isinstance(pattern, str):
            return []
        flags = 0 if self.options.case_sensitive else re.IGNORECASE
        try:
            rx = re.compile(pattern, flags)
        except re.error as e:
            log.debug("Ignoring invalid pattern %r: %s", pattern, e)
            return []
        return [n for n in self.get_all() if rx.search(n)]

    def get_by_prefix(self, prefix: str) -> list[str]:
        if not isinstance(prefix, str):
            return []
        needle = prefix if self.options.case_sensitive else prefix.lower()
        return [n for n in self.get_all() if n.startswith(needle)]

    def get_by_suffix(self, suffix: str) -> list[str]:
        if not isinstance(suffix, str):
            return []
        needle = suffix if self.options.case_sensitive else suffix.lower()
        return [n for n in self.get_all() if n.endswith(needle)]

    def get_stats(self) -> UsernameStats:
        return compute_stats(self.get_all())

    def suggest_alternatives(self, username: Any, count: int = 5) -> list[Any]:
        """Suggest non-reserved variants of `username`.

        A name that is not reserved is echoed back as the only suggestion; use
        `is_reserved` to tell that case apart.
        """
        base = self.normalize(username)
        if base is None or not self.is_reserved(base):
            return [username]
        return generate_alternatives(base, int(count), self.is_reserved)

    def validate_username(
        self,
        username: Any,
        rules: ValidationRules | dict[str, Any] | None = None,
    ) -> ValidationResult:
        return validate_username(username, ValidationRules.from_any(rules), self.is_reserved)

    # -- import / export -----------------------------------------------

    def export(self, format: str | NameFormat = NameFormat.JSON) -> str | list[str]:
        return encode_names(self.get_all(), format)

    def import_usernames(self, data: Any, format: str | NameFormat = NameFormat.ARRAY) -> int:
        """Merge names from `data` (json/csv/txt text or a list) into the set.

        Returns the number of names parsed from `data`.
        """
        names = decode_names(data, format)
        self._remember(names)
        return len(names)
