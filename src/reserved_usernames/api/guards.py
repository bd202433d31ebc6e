from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

from fastapi import HTTPException, Request

from ..core.registry import ReservedUsernames


async def _read_json_body(request: Request) -> dict[str, Any]:
    if "application/json" not in request.headers.get("content-type", ""):
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def reserved_username_guard(
    registry: ReservedUsernames,
    *,
    field: str = "username",
    error_message: str = "Username is reserved",
    suggestion_count: int = 5,
) -> Callable[[Request], Awaitable[None]]:
    """Build a FastAPI dependency that rejects requests carrying a reserved username.

    The username is looked up in the JSON body, then path params, then query params.
    A reserved name aborts the request with 400 and `{"error", "suggestions"}`.

    Usage:
        @app.post("/signup", dependencies=[Depends(reserved_username_guard(registry))])
    """

    async def guard(request: Request) -> None:
        body = await _read_json_body(request)
        username = body.get(field) or request.path_params.get(field) or request.query_params.get(field)
        if username and registry.is_reserved(username):
            raise HTTPException(
                status_code=400,
                detail={
                    "error": error_message,
                    "suggestions": registry.suggest_alternatives(username, suggestion_count),
                },
            )

    return guard
