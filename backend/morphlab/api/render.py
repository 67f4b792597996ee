"""POST /api/render and /api/upload: safe data-URI rendering of untrusted SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from morphlab.dependencies import get_pipeline
from morphlab.models.requests import RenderRequest
from morphlab.models.responses import RenderResponse
from morphlab.svg.ingest import accept_upload
from morphlab.svg.outcome import RenderError
from morphlab.svg.pipeline import RenderPipeline

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, pipeline: RenderPipeline = Depends(get_pipeline)) -> RenderResponse:
    return RenderResponse.from_outcome(pipeline.render(req.svg))


@router.post("/upload", response_model=RenderResponse)
async def upload(
    file: UploadFile = File(...),
    pipeline: RenderPipeline = Depends(get_pipeline),
):
    data = await file.read()
    logger.info("Received upload %r (%s, %d bytes)", file.filename, file.content_type, len(data))

    accepted = accept_upload(file.content_type, data)
    if isinstance(accepted, RenderError):
        return JSONResponse(
            status_code=415,
            content=RenderResponse.from_outcome(accepted).model_dump(),
        )
    return RenderResponse.from_outcome(pipeline.render(accepted))
