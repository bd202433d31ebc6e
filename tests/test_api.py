from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from reserved_usernames import RemoteSource, ReservedUsernames
from reserved_usernames.api import create_api_app, reserved_username_guard
from reserved_usernames.runtime import create_app


def _client(tmp_path: Path, **kwargs) -> tuple[TestClient, ReservedUsernames]:
    reg = asyncio.run(ReservedUsernames.create(cache_file=tmp_path / "cache.json", **kwargs))
    return TestClient(create_api_app(reg)), reg


def test_healthz_and_single_check(tmp_path: Path) -> None:
    client, _ = _client(tmp_path)

    assert client.get("/healthz").json() == {"ok": True, "ready": True}
    assert client.get("/api/usernames/Admin").json() == {"username": "Admin", "isReserved": True}
    assert client.get("/api/usernames/john").json() == {"username": "john", "isReserved": False}


def test_check_many(tmp_path: Path) -> None:
    client, _ = _client(tmp_path)

    r = client.post("/api/usernames/check", json={"usernames": ["api", "john"]})
    assert r.status_code == 200
    assert r.json() == [
        {"username": "api", "isReserved": True},
        {"username": "john", "isReserved": False},
    ]

    bad = client.post("/api/usernames/check", json={"usernames": "api"})
    assert bad.status_code == 400


def test_suggestions_endpoint(tmp_path: Path) -> None:
    client, _ = _client(tmp_path)

    r = client.get("/api/usernames/admin/suggestions", params={"count": 2})
    assert r.json() == {"username": "admin", "isReserved": True, "suggestions": ["admin1", "admin2"]}
    assert client.get("/api/usernames/admin/suggestions", params={"count": 0}).status_code == 400


def test_validate_endpoint(tmp_path: Path) -> None:
    client, _ = _client(tmp_path)

    r = client.post("/api/usernames/validate", json={"username": "ab", "rules": {"minLength": 3}})
    assert r.json() == {
        "username": "ab",
        "isValid": False,
        "errors": ["Username must be at least 3 characters"],
    }

    bad_pattern = client.post("/api/usernames/validate", json={"username": "ab", "rules": {"forbiddenPatterns": ["(["]}})
    assert bad_pattern.status_code == 400

    for rules in ({"minLength": "3"}, {"allowedChars": 5}, {"forbiddenPatterns": [1]}):
        mistyped = client.post("/api/usernames/validate", json={"username": "ab", "rules": rules})
        assert mistyped.status_code == 400, rules


def test_stats_and_export(tmp_path: Path) -> None:
    client, reg = _client(tmp_path)

    stats = client.get("/api/stats").json()
    assert stats["total"] == len(reg)
    assert stats["shortest"] <= stats["longest"]

    assert client.get("/api/export").json() == reg.get_all()
    csv = client.get("/api/export", params={"format": "csv"})
    assert csv.headers["content-type"].startswith("text/csv")
    assert csv.text.splitlines()[0] == "name"
    assert client.get("/api/export", params={"format": "xml"}).status_code == 400


def test_refresh_endpoint(tmp_path: Path) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text='["one", "two"]'))
    client, _ = _client(tmp_path, sources=(RemoteSource("https://m.test/l.json"),), transport=transport)

    r = client.post("/api/refresh")

    assert r.json() == {"ok": True, "count": 2}
    assert client.get("/api/usernames/one").json()["isReserved"] is True
    assert json.loads((tmp_path / "cache.json").read_text(encoding="utf-8"))["usernames"] == ["one", "two"]


def test_guard_rejects_reserved_body_and_path(tmp_path: Path) -> None:
    reg = asyncio.run(ReservedUsernames.create(cache_file=tmp_path / "cache.json"))
    app = FastAPI()
    guard = reserved_username_guard(reg, suggestion_count=2)

    @app.post("/signup", dependencies=[Depends(guard)])
    def signup(body: dict) -> dict:
        return {"created": body["username"]}

    @app.get("/profiles/{username}", dependencies=[Depends(guard)])
    def profile(username: str) -> dict:
        return {"profile": username}

    client = TestClient(app)

    ok = client.post("/signup", json={"username": "john"})
    assert ok.status_code == 200
    assert ok.json() == {"created": "john"}

    rejected = client.post("/signup", json={"username": "Admin"})
    assert rejected.status_code == 400
    assert rejected.json()["detail"] == {"error": "Username is reserved", "suggestions": ["admin1", "admin2"]}

    assert client.get("/profiles/root").status_code == 400
    assert client.get("/profiles/jane").json() == {"profile": "jane"}


def test_runtime_app_initializes_registry_on_startup(tmp_path: Path) -> None:
    reg = ReservedUsernames(cache_file=tmp_path / "cache.json", custom_reserved=["acme"])
    app = create_app(registry=reg)

    with TestClient(app) as client:
        assert client.get("/healthz").json() == {"ok": True, "ready": True}
        assert client.get("/api/usernames/ACME").json()["isReserved"] is True
    assert app.state.registry is reg
