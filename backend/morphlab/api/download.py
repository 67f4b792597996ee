"""POST /api/download: offer SVG markup as a timestamped file."""

from __future__ import annotations

from fastapi import APIRouter, Response

from morphlab.models.requests import DownloadRequest
from morphlab.svg.download import suggested_filename
from morphlab.svg.encoder import SVG_MIME_TYPE

router = APIRouter()


def svg_attachment(svg: str, timestamp_ms: int | None = None) -> Response:
    filename = suggested_filename(timestamp_ms)
    return Response(
        content=svg.encode("utf-8", errors="replace"),
        media_type=SVG_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/download")
async def download(req: DownloadRequest) -> Response:
    return svg_attachment(req.svg, req.timestamp_ms)
