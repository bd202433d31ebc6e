from __future__ import annotations

from fastapi import FastAPI, HTTPException
from starlette.responses import JSONResponse, PlainTextResponse, Response

from ..core.errors import InvalidArgumentError, UnsupportedFormatError
from ..core.formats import NameFormat
from ..core.registry import ReservedUsernames
from .guards import reserved_username_guard


def create_api_app(registry: ReservedUsernames, *, app: FastAPI | None = None) -> FastAPI:
    """Expose `registry` over HTTP.

    Pass `app` to mount the routes on an existing application.
    """

    if app is None:
        app = FastAPI(title="reserved-usernames", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True, "ready": registry.is_ready}

    @app.post("/api/usernames/check")
    def check_usernames(body: dict) -> list[dict]:
        try:
            checks = registry.check_multiple(body.get("usernames"))
        except InvalidArgumentError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return [c.to_dict() for c in checks]

    @app.post("/api/usernames/validate")
    def validate(body: dict) -> dict:
        try:
            result = registry.validate_username(body.get("username"), body.get("rules"))
        except InvalidArgumentError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return result.to_dict()

    @app.get("/api/usernames/{username}")
    def check_username(username: str) -> dict:
        return {"username": username, "isReserved": registry.is_reserved(username)}

    @app.get("/api/usernames/{username}/suggestions")
    def suggestions(username: str, count: int = 5) -> dict:
        if count < 1 or count > 100:
            raise HTTPException(status_code=400, detail="count must be between 1 and 100")
        return {
            "username": username,
            "isReserved": registry.is_reserved(username),
            "suggestions": registry.suggest_alternatives(username, count),
        }

    @app.get("/api/stats")
    def stats() -> dict:
        return registry.get_stats().to_dict()

    @app.get("/api/export")
    def export(format: str = "json") -> Response:
        try:
            fmt = NameFormat.from_any(format)
        except UnsupportedFormatError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if fmt in (NameFormat.JSON, NameFormat.ARRAY):
            return JSONResponse(registry.get_all())
        media_type = "text/csv" if fmt is NameFormat.CSV else "text/plain"
        return PlainTextResponse(str(registry.export(fmt)), media_type=media_type)

    @app.post("/api/refresh")
    async def refresh() -> dict:
        ok = await registry.force_update()
        return {"ok": ok, "count": len(registry)}

    return app


__all__ = ["create_api_app", "reserved_username_guard"]
