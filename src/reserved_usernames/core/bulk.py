from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .registry import ReservedUsernames, UsernameCheck


async def check_bulk(
    registry: "ReservedUsernames",
    usernames: list[Any] | tuple[Any, ...],
    *,
    batch_size: int = 1000,
    pause_s: float = 0.01,
) -> list["UsernameCheck"]:
    """`check_multiple` over large inputs, yielding to the event loop between chunks."""

    if not isinstance(usernames, (list, tuple)):
        raise InvalidArgumentError("Input must be a list of usernames")
    if int(batch_size) < 1:
        raise InvalidArgumentError("batch_size must be >= 1")

    results: list[UsernameCheck] = []
    for start in range(0, len(usernames), batch_size):
        results.extend(registry.check_multiple(list(usernames[start : start + batch_size])))
        if start + batch_size < len(usernames):
            await asyncio.sleep(pause_s)
    return results
