"""POST /api/analyze: complexity check before transformation."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from morphlab.config import Settings
from morphlab.dependencies import get_settings
from morphlab.models.requests import AnalyzeRequest
from morphlab.models.responses import AnalyzeResponse
from morphlab.svg.complexity import analyze_complexity

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    report = analyze_complexity(req.svg, warn_bytes=settings.complexity_warning_bytes)
    if report.too_complex:
        logger.info("SVG is highly complex (%.2f KB), transformation may time out", report.size_kb)
    return AnalyzeResponse.from_report(report)
