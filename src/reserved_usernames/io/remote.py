from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..core.errors import FetchError, InvalidArgumentError
from ..core.formats import NameFormat, decode_names

log = logging.getLogger("reserved_usernames.remote")

_UPSTREAM = "https://raw.githubusercontent.com/shouldbee/reserved-usernames/master"


@dataclass(frozen=True)
class RemoteSource:
    """One mirror of the canonical reserved-name list."""

    url: str
    format: NameFormat = NameFormat.JSON

    def __post_init__(self) -> None:
        fmt = NameFormat.from_any(self.format)
        if fmt is NameFormat.ARRAY:
            raise ValueError("Remote sources must be json, txt or csv")
        object.__setattr__(self, "format", fmt)


DEFAULT_SOURCES: tuple[RemoteSource, ...] = (
    RemoteSource(f"{_UPSTREAM}/reserved-usernames.json", NameFormat.JSON),
    RemoteSource(f"{_UPSTREAM}/reserved-usernames.txt", NameFormat.TXT),
    RemoteSource(f"{_UPSTREAM}/reserved-usernames.csv", NameFormat.CSV),
)


def parse_payload(text: str, source: RemoteSource) -> list[str]:
    try:
        names = decode_names(text, source.format)
    except InvalidArgumentError as e:
        raise FetchError(f"Malformed {source.format.value} payload: {e}", url=source.url) from e
    if not names:
        raise FetchError("Remote list is empty", url=source.url)
    return names


async def fetch_from_source(client: httpx.AsyncClient, source: RemoteSource) -> list[str]:
    try:
        r = await client.get(source.url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        raise FetchError(f"Request failed: {e!r}", url=source.url) from e
    if r.status_code != 200:
        raise FetchError(f"HTTP {r.status_code}", url=source.url)
    return parse_payload(r.text, source)


async def fetch_reserved_usernames(
    sources: tuple[RemoteSource, ...],
    *,
    timeout_s: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    """Fetch the canonical list, trying each mirror in order.

    Every request is bounded by `timeout_s`. Raises FetchError (the last mirror's
    failure) if no mirror yields a usable list.
    """

    if not sources:
        raise FetchError("No remote sources configured")

    last_error = FetchError("No remote source returned a usable list")
    async with httpx.AsyncClient(timeout=timeout_s, transport=transport, follow_redirects=True) as client:
        for source in sources:
            try:
                names = await fetch_from_source(client, source)
            except FetchError as e:
                log.debug("Mirror %s failed: %s", source.url, e)
                last_error = e
                continue
            log.info("Fetched %d reserved usernames from %s", len(names), source.url)
            return names

    raise last_error
