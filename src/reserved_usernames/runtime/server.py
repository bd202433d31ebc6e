from __future__ import annotations

import contextlib
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import ReservedUsernames
from ..core.options import RegistryOptions


def create_app(
    options: RegistryOptions | None = None,
    *,
    registry: ReservedUsernames | None = None,
) -> FastAPI:
    """Build the HTTP app. The registry is initialized in the app lifespan, before serving."""

    reg = registry if registry is not None else ReservedUsernames(options or RegistryOptions.from_env())

    @contextlib.asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        if not reg.is_ready:
            await reg.initialize()
        yield

    app = FastAPI(title="reserved-usernames", version="0.1.0", lifespan=lifespan)
    app.state.registry = reg
    return create_api_app(reg, app=app)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
    options: RegistryOptions | None = None,
    log_level: str = "info",
    access_log: bool = False,
) -> None:
    """Serve the reserved-usernames API with uvicorn (blocks until shutdown)."""

    app = create_app(options)
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    uvicorn.Server(config).run()
