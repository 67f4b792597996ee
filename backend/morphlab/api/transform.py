"""POST /api/transform: raw model transformation of an SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from morphlab.dependencies import get_transform
from morphlab.llm.client import TransformationError
from morphlab.models.requests import TransformRequest
from morphlab.models.responses import TransformResponse
from morphlab.session.animator import TransformFn

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/transform", response_model=TransformResponse)
async def transform(req: TransformRequest, transform_fn: TransformFn = Depends(get_transform)):
    logger.info("Received transform request. Action: %r. Incoming SVG size: %d bytes", req.action, len(req.svg))
    try:
        result = await transform_fn(req.svg, req.action)
    except TransformationError as e:
        logger.error("Transform failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})
    return TransformResponse(result=result)
