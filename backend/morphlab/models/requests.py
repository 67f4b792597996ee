"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TransformRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    action: str = Field(..., description="Animation/transformation to apply, in natural language")


class RenderRequest(BaseModel):
    svg: str = Field(..., description="Raw, untrusted SVG code")


class AnalyzeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class DownloadRequest(BaseModel):
    svg: str = Field(..., description="SVG code to offer as a file")
    timestamp_ms: int | None = Field(
        default=None,
        description="Timestamp used in the suggested filename (defaults to now)",
    )
