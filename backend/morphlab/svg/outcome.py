"""Value types flowing through the render pipeline.

Every stage hands back a new immutable value. Failures are values too:
the parser returns a ``ParseError`` and the pipeline a ``RenderError``,
neither is ever raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from lxml import etree


class ErrorKind(str, Enum):
    MALFORMED_XML = "malformed-xml"
    NO_ROOT_SVG = "no-root-svg"
    TRANSFORMATION_FAILED = "transformation-failed"
    UNSUPPORTED_FILE_TYPE = "unsupported-file-type"


@dataclass(frozen=True)
class ParseError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ParsedDocument:
    """A successfully parsed document, rooted at the located <svg> element."""

    root: etree._Element


@dataclass(frozen=True, eq=False)
class NormalizedDocument:
    """A parsed document whose root satisfies the dimensional contract.

    Two documents compare equal when their canonical (C14N) forms match.
    C14N rejects relative namespace URIs; those trees compare by their
    plain serialization instead.
    """

    root: etree._Element

    def canonical(self) -> bytes:
        try:
            return etree.tostring(self.root, method="c14n")
        except etree.C14NError:
            return etree.tostring(self.root, encoding="utf-8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedDocument):
            return NotImplemented
        return self.canonical() == other.canonical()

    def __hash__(self) -> int:
        return hash(self.canonical())


@dataclass(frozen=True)
class EncodedResource:
    uri: str

    def __str__(self) -> str:
        return self.uri


@dataclass(frozen=True)
class RenderOk:
    resource: EncodedResource
    svg: str  # normalized markup, offered as a download

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RenderError:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


RenderOutcome = Union[RenderOk, RenderError]
