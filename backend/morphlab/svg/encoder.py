"""Data-URI encoding for isolated display.

The result is meant for an image-loading attribute (``<img src>``), which
decodes the SVG as a standalone resource outside the host page's script
context. It must never be inserted as markup.
"""

from __future__ import annotations

from urllib.parse import quote

from morphlab.svg.outcome import EncodedResource

SVG_MIME_TYPE = "image/svg+xml"
DATA_URI_PREFIX = f"data:{SVG_MIME_TYPE};utf8,"

# Unreserved characters left alone by encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode(svg_text: str) -> EncodedResource:
    return EncodedResource(uri=DATA_URI_PREFIX + quote(svg_text, safe=_URI_COMPONENT_SAFE))
