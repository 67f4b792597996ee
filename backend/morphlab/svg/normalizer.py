"""Root dimension normalization.

After this stage the root carries a viewBox whenever one can be derived
and never carries width/height, so the consuming container decides the
final pixel size.
"""

from __future__ import annotations

import copy
import logging
import re

from morphlab.svg.outcome import NormalizedDocument, ParsedDocument

logger = logging.getLogger(__name__)

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")


def normalize(doc: ParsedDocument) -> NormalizedDocument:
    root = copy.deepcopy(doc.root)
    root.tail = None

    if root.get("viewBox") is None:
        width = root.get("width")
        height = root.get("height")
        if width is not None and height is not None:
            w = strip_units(width)
            h = strip_units(height)
            if w is not None and h is not None:
                root.set("viewBox", f"0 0 {w} {h}")
            else:
                logger.debug("Cannot derive viewBox from width=%r height=%r", width, height)

    for attr in ("width", "height"):
        if attr in root.attrib:
            del root.attrib[attr]

    return NormalizedDocument(root=root)


def strip_units(value: str) -> str | None:
    """Keep digits and '.' only; None if what remains is not a number."""
    stripped = _NON_NUMERIC_RE.sub("", value)
    if not stripped:
        return None
    try:
        float(stripped)
    except ValueError:
        return None
    return stripped
