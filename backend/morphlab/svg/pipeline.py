"""Render pipeline: parse → normalize → serialize → encode.

``render`` is total: any str or bytes input yields a RenderOutcome, it does
no I/O and shares no mutable state between calls.
"""

from __future__ import annotations

import logging
from typing import Union

from morphlab.svg.encoder import encode
from morphlab.svg.normalizer import normalize
from morphlab.svg.outcome import ParseError, RenderError, RenderOk, RenderOutcome
from morphlab.svg.parser import SvgParser
from morphlab.svg.serializer import serialize

logger = logging.getLogger(__name__)


class RenderPipeline:
    """Single shared renderer for every display surface."""

    def __init__(self, parser: SvgParser | None = None) -> None:
        self.parser = parser or SvgParser()

    def render(self, raw: Union[str, bytes]) -> RenderOutcome:
        parsed = self.parser.parse(raw)
        if isinstance(parsed, ParseError):
            logger.warning("Render failed (%s): %s", parsed.kind.value, parsed.message)
            return RenderError(kind=parsed.kind, message=parsed.message)

        svg_text = serialize(normalize(parsed))
        resource = encode(svg_text)
        logger.debug("Rendered SVG: %d chars in, %d chars encoded", len(raw), len(resource.uri))
        return RenderOk(resource=resource, svg=svg_text)


def render(raw: Union[str, bytes], parser: SvgParser | None = None) -> RenderOutcome:
    return RenderPipeline(parser).render(raw)
