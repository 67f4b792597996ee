"""POST /api/animate: transform, render, and record history in one step."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from morphlab.dependencies import get_pipeline, get_store, get_transform
from morphlab.history.store import HistoryStore
from morphlab.models.requests import TransformRequest
from morphlab.models.responses import AnimateResponse
from morphlab.session.animator import AnimatorSession, TransformFn
from morphlab.svg.pipeline import RenderPipeline

router = APIRouter()


@router.post("/animate", response_model=AnimateResponse)
async def animate(
    req: TransformRequest,
    transform_fn: TransformFn = Depends(get_transform),
    store: HistoryStore = Depends(get_store),
    pipeline: RenderPipeline = Depends(get_pipeline),
) -> AnimateResponse:
    session = AnimatorSession(transform=transform_fn, store=store, pipeline=pipeline)
    session.load_svg(req.svg)
    state = await session.generate(req.action)
    return AnimateResponse.from_state(state, session.last_item)
