"""FastAPI dependency injection."""

from __future__ import annotations

from morphlab.config import settings
from morphlab.history.store import HistoryStore, get_history_store
from morphlab.llm.client import transform_svg
from morphlab.session.animator import TransformFn
from morphlab.svg.parser import SvgParser
from morphlab.svg.pipeline import RenderPipeline

_pipeline = RenderPipeline(SvgParser())


def get_settings():
    return settings


def get_pipeline() -> RenderPipeline:
    return _pipeline


def get_store() -> HistoryStore:
    return get_history_store()


def get_transform() -> TransformFn:
    return transform_svg
