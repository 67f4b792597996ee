"""MorphLab SVG render pipeline."""

from morphlab.svg.outcome import ErrorKind, RenderError, RenderOk, RenderOutcome
from morphlab.svg.parser import SvgParser
from morphlab.svg.pipeline import RenderPipeline, render

__all__ = [
    "ErrorKind",
    "RenderError",
    "RenderOk",
    "RenderOutcome",
    "SvgParser",
    "RenderPipeline",
    "render",
]
