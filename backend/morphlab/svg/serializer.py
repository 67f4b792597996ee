"""Write normalized SVG trees back to markup."""

from __future__ import annotations

from lxml import etree

from morphlab.svg.outcome import NormalizedDocument


def serialize(doc: NormalizedDocument) -> str:
    """Serialize the root subtree only, without XML declaration or trailing text."""
    return etree.tostring(doc.root, encoding="unicode", with_tail=False)
