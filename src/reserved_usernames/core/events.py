from __future__ import annotations

import logging
import threading
from enum import Enum
from time import time
from typing import Any, Callable

log = logging.getLogger("reserved_usernames.events")

Handler = Callable[[dict[str, Any]], None]


class RegistryEvent(str, Enum):
    READY = "ready"
    ERROR = "error"
    UPDATED = "updated"
    FETCH_ERROR = "fetch_error"

    @classmethod
    def from_any(cls, value: Any) -> "RegistryEvent":
        if isinstance(value, cls):
            return value
        v = str(value).strip().lower().replace("-", "_")
        # camelCase spelling used by JS-style callers.
        if v == "fetcherror":
            return cls.FETCH_ERROR
        try:
            return cls(v)
        except ValueError:
            raise ValueError(f"Unknown registry event: {value!r}") from None


class EventHub:
    """Per-registry synchronous event dispatch.

    Handlers receive a shallow copy of the payload (with `ts` added). A failing
    handler is logged and skipped; it never breaks the emitter or other handlers.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._subs: dict[RegistryEvent, list[Handler]] = {}

    def subscribe(self, event: str | RegistryEvent, handler: Handler) -> Callable[[], None]:
        ev = RegistryEvent.from_any(event)
        with self._lock:
            self._subs.setdefault(ev, []).append(handler)

        def unsubscribe() -> None:
            with self._lock:
                subs = self._subs.get(ev, [])
                if handler in subs:
                    subs.remove(handler)

        return unsubscribe

    def emit(self, event: str | RegistryEvent, payload: dict[str, Any] | None = None) -> None:
        ev = RegistryEvent.from_any(event)
        data = dict(payload or {})
        data.setdefault("ts", time())
        with self._lock:
            subs = list(self._subs.get(ev, ()))
        for h in subs:
            try:
                h(dict(data))
            except Exception:
                log.exception("Handler for %r event raised", ev.value)
