"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from morphlab.history.store import HistoryItem
from morphlab.session.state import ViewState
from morphlab.svg.complexity import ComplexityReport
from morphlab.svg.outcome import RenderError, RenderOutcome


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class TransformResponse(BaseModel):
    result: str = ""
    error: str | None = None


class RenderResponse(BaseModel):
    ok: bool
    uri: str | None = Field(default=None, description="data: URI for an image-loading attribute")
    svg: str | None = Field(default=None, description="Normalized SVG markup")
    error_kind: str | None = None
    message: str | None = None

    @classmethod
    def from_outcome(cls, outcome: RenderOutcome) -> RenderResponse:
        if isinstance(outcome, RenderError):
            return cls(ok=False, error_kind=outcome.kind.value, message=outcome.message)
        return cls(ok=True, uri=outcome.resource.uri, svg=outcome.svg)


class AnalyzeResponse(BaseModel):
    size_bytes: int
    size_kb: float
    paths: int
    polygons: int
    rects: int
    circles: int
    groups: int
    too_complex: bool

    @classmethod
    def from_report(cls, report: ComplexityReport) -> AnalyzeResponse:
        return cls(
            size_bytes=report.size_bytes,
            size_kb=report.size_kb,
            paths=report.paths,
            polygons=report.polygons,
            rects=report.rects,
            circles=report.circles,
            groups=report.groups,
            too_complex=report.too_complex,
        )


class HistoryItemResponse(BaseModel):
    id: str
    original_svg: str
    action: str
    result_svg: str
    timestamp_ms: int

    @classmethod
    def from_item(cls, item: HistoryItem) -> HistoryItemResponse:
        return cls(
            id=item.id,
            original_svg=item.original_svg,
            action=item.action,
            result_svg=item.result_svg,
            timestamp_ms=item.timestamp_ms,
        )


class AnimateResponse(BaseModel):
    status: str
    render: RenderResponse | None = None
    error: str | None = None
    history_item: HistoryItemResponse | None = None

    @classmethod
    def from_state(cls, state: ViewState, item: HistoryItem | None) -> AnimateResponse:
        return cls(
            status=state.status.value,
            render=RenderResponse.from_outcome(state.result) if state.result is not None else None,
            error=state.error,
            history_item=HistoryItemResponse.from_item(item) if item is not None else None,
        )
