"""Drives one user's load → generate → history flow."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from morphlab.history.store import HistoryItem, HistoryStore
from morphlab.llm.client import TransformationError
from morphlab.session.state import (
    GenerateRequested,
    Status,
    SvgLoaded,
    TransformFailed,
    TransformSucceeded,
    UploadRejected,
    ViewState,
    transition,
)
from morphlab.svg.ingest import accept_upload
from morphlab.svg.outcome import RenderError, RenderOk
from morphlab.svg.pipeline import RenderPipeline

logger = logging.getLogger(__name__)

TransformFn = Callable[[str, str], Awaitable[str]]


class AnimatorSession:
    """Holds the current ViewState and applies events to it.

    A HistoryItem is written only for a transform that rendered successfully
    and is still the current generation when it completes.
    """

    def __init__(
        self,
        transform: TransformFn,
        store: HistoryStore,
        pipeline: RenderPipeline | None = None,
    ) -> None:
        self.transform = transform
        self.store = store
        self.pipeline = pipeline or RenderPipeline()
        self.state = ViewState()
        self.last_item: HistoryItem | None = None

    def _apply(self, event) -> ViewState:
        self.state = transition(self.state, event)
        return self.state

    def load_svg(self, svg: str) -> ViewState:
        self.last_item = None
        return self._apply(SvgLoaded(svg))

    def load_upload(self, content_type: str | None, data: bytes) -> ViewState:
        accepted = accept_upload(content_type, data)
        if isinstance(accepted, RenderError):
            return self._apply(UploadRejected(accepted.message))
        return self.load_svg(accepted)

    async def generate(self, action: str) -> ViewState:
        before = self.state
        self._apply(GenerateRequested(action))
        if self.state is before:
            logger.debug("Generate ignored (status=%s)", before.status.value)
            return self.state

        generation = self.state.generation
        source = self.state.source_svg or ""
        action = self.state.action

        try:
            result_svg = await self.transform(source, action)
        except TransformationError as e:
            logger.warning("Transformation failed: %s", e)
            return self._apply(TransformFailed(generation, str(e)))

        outcome = self.pipeline.render(result_svg)
        self._apply(TransformSucceeded(generation, outcome))

        if (
            isinstance(outcome, RenderOk)
            and self.state.status is Status.SUCCESS
            and self.state.generation == generation
        ):
            item = HistoryItem.create(original_svg=source, action=action, result_svg=result_svg)
            self.store.add(item)
            self.last_item = item
        return self.state
