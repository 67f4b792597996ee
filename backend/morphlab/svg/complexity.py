"""SVG complexity check before sending markup to the transformation model.

Models stream their output token by token, so regenerating a large SVG is
prone to timeouts and truncated markup. This is a cheap text-level count,
it works on any input whether or not it parses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_WARNING_BYTES = 15000

_TAG_PATTERNS = {
    "paths": re.compile(r"<path\b", re.IGNORECASE),
    "polygons": re.compile(r"<polygon\b", re.IGNORECASE),
    "rects": re.compile(r"<rect\b", re.IGNORECASE),
    "circles": re.compile(r"<circle\b", re.IGNORECASE),
    "groups": re.compile(r"<g\b", re.IGNORECASE),
}


@dataclass(frozen=True)
class ComplexityReport:
    size_bytes: int
    paths: int
    polygons: int
    rects: int
    circles: int
    groups: int
    too_complex: bool

    @property
    def size_kb(self) -> float:
        return round(self.size_bytes / 1024.0, 2)


def analyze_complexity(svg_text: str, warn_bytes: int = DEFAULT_WARNING_BYTES) -> ComplexityReport:
    size = len(svg_text.encode("utf-8", errors="replace"))
    counts = {name: len(pattern.findall(svg_text)) for name, pattern in _TAG_PATTERNS.items()}
    return ComplexityReport(size_bytes=size, too_complex=size > warn_bytes, **counts)
