"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import router

app = FastAPI(
    title="apimenu",
    description="Build navigable content trees from API descriptions.",
)
app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
