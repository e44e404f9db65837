from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from apod.api.router import router
from apod.client.http import new_http_client
from apod.core.config import settings
from apod.core.logging import configure_logging

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # ── Startup ──────────────────────────────────────────────────────
    # One pooled transport for the app's lifetime, shared by all requests.
    app.state.http_client = new_http_client(settings)
    yield
    # ── Shutdown ─────────────────────────────────────────────────────
    await app.state.http_client.aclose()


app = FastAPI(
    title="APOD Client",
    description="Async proxy for NASA's Astronomy Picture of the Day API.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
