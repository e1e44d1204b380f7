"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import render

app = FastAPI(title="bootstencil", description="Render Bootstrap fragments from outline text.")
app.include_router(render.router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
