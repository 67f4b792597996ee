"""SVG parser: hardened lxml facade.

Turns raw, untrusted text into a ParsedDocument rooted at the first <svg>
element, or a ParseError. Never raises for any input.
"""

from __future__ import annotations

import logging
from typing import Union

from lxml import etree

from morphlab.svg.outcome import ErrorKind, ParsedDocument, ParseError

logger = logging.getLogger(__name__)

SVG_LOCAL_NAME = "svg"


def _make_xml_parser() -> etree.XMLParser:
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities="internal",
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
        huge_tree=False,
        recover=False,
    )


class SvgParser:
    """Parses SVG markup with its own lxml parser instance.

    Construct one per pipeline (or per test); instances hold no state
    between calls beyond the lxml parser configuration.
    """

    def __init__(self, xml_parser: etree.XMLParser | None = None) -> None:
        self._xml_parser = xml_parser or _make_xml_parser()

    def parse(self, raw: Union[str, bytes]) -> Union[ParsedDocument, ParseError]:
        if isinstance(raw, str):
            # The parser forces UTF-8, so any encoding declaration is ignored
            data = raw.encode("utf-8", errors="replace")
        else:
            data = bytes(raw)

        if not data.strip():
            return ParseError(ErrorKind.MALFORMED_XML, "Empty SVG input")

        try:
            document = etree.fromstring(data, parser=self._xml_parser)
        except (etree.LxmlError, ValueError) as e:
            logger.debug("XML parse failed: %s", e)
            return ParseError(ErrorKind.MALFORMED_XML, f"Malformed SVG markup: {e}")

        root = _find_svg_root(document)
        if root is None:
            return ParseError(
                ErrorKind.NO_ROOT_SVG,
                f"No <svg> element found (document root is <{_local_name(document)}>)",
            )

        # External entities stay unexpanded; their DOCTYPE is not serialized,
        # so a leftover reference would make the output unparseable
        for entity in root.iter(etree.Entity):
            return ParseError(
                ErrorKind.MALFORMED_XML,
                f"Unresolved entity reference {entity.text}",
            )
        return ParsedDocument(root=root)


def _local_name(el: etree._Element) -> str:
    if not isinstance(el.tag, str):
        return ""
    return etree.QName(el).localname


def _find_svg_root(document: etree._Element) -> etree._Element | None:
    """First element in document order whose local name is ``svg``, any namespace."""
    for el in document.iter():
        if _local_name(el) == SVG_LOCAL_NAME:
            return el
    return None
