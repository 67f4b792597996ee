"""FastAPI app factory."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from morphlab.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.morphlab_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="MorphLab",
        description="SVG animation studio: safe SVG rendering and AI-driven transformations",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from morphlab.api.router import api_router

    app.include_router(api_router)

    # Built frontend is mounted last so /api routes take precedence
    _mount_frontend(app)

    return app


def _mount_frontend(app: FastAPI) -> None:
    static_dir = Path(settings.static_dir)
    if not static_dir.is_dir():
        logger.info("No frontend build at %s, serving API only", static_dir)
        return
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="frontend")
    logger.info("Serving frontend from %s", static_dir)


app = create_app()
