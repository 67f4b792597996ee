"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from morphlab.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0")


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from morphlab.llm.prompts import get_all_templates

    return get_all_templates()


@router.get("/actions")
async def actions() -> dict[str, str]:
    from morphlab.llm.prompts import PRESET_ACTIONS

    return dict(PRESET_ACTIONS)
