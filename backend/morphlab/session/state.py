"""Animator view state as immutable snapshots transitioned by discrete events.

Each generate request bumps ``generation``; completion events carry the
generation they were issued under and are dropped when it no longer
matches, so a slow response can never overwrite a newer one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from morphlab.svg.outcome import RenderError, RenderOk, RenderOutcome


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: Status = Status.IDLE
    source_svg: str | None = None
    action: str = ""
    result: RenderOk | None = None
    error: str | None = None
    generation: int = 0

    @property
    def can_generate(self) -> bool:
        return self.status is not Status.LOADING and bool(self.source_svg)


@dataclass(frozen=True)
class SvgLoaded:
    svg: str


@dataclass(frozen=True)
class UploadRejected:
    message: str


@dataclass(frozen=True)
class GenerateRequested:
    action: str


@dataclass(frozen=True)
class TransformSucceeded:
    generation: int
    outcome: RenderOutcome


@dataclass(frozen=True)
class TransformFailed:
    generation: int
    message: str


Event = Union[SvgLoaded, UploadRejected, GenerateRequested, TransformSucceeded, TransformFailed]


def transition(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, SvgLoaded):
        # A new source supersedes anything in flight
        return ViewState(source_svg=event.svg, generation=state.generation + 1)

    if isinstance(event, UploadRejected):
        return replace(state, status=Status.ERROR, error=event.message)

    if isinstance(event, GenerateRequested):
        action = event.action.strip()
        if not state.can_generate or not action:
            return state
        return replace(
            state,
            status=Status.LOADING,
            action=action,
            error=None,
            generation=state.generation + 1,
        )

    if isinstance(event, (TransformSucceeded, TransformFailed)):
        if state.status is not Status.LOADING or event.generation != state.generation:
            return state
        if isinstance(event, TransformFailed):
            return replace(state, status=Status.ERROR, result=None, error=event.message)
        if isinstance(event.outcome, RenderError):
            return replace(state, status=Status.ERROR, result=None, error=event.outcome.message)
        return replace(state, status=Status.SUCCESS, result=event.outcome, error=None)

    raise TypeError(f"Unknown event: {event!r}")
