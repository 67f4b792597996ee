"""Master API router, mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from morphlab.api import analyze, animate, download, health, history, render, transform

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(transform.router)
api_router.include_router(render.router)
api_router.include_router(animate.router)
api_router.include_router(analyze.router)
api_router.include_router(download.router)
api_router.include_router(history.router)
