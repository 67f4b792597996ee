"""Shared test fixtures."""

from __future__ import annotations

import pytest

from morphlab.history.store import HistoryStore
from morphlab.svg.parser import SvgParser
from morphlab.svg.pipeline import RenderPipeline


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

# No viewBox: must be derived from width/height
SIZED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100px" height="50px">
  <rect x="10" y="10" width="80" height="30" fill="#4ECDC4"/>
</svg>'''

UNSIZED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

ANIMATED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="480" height="480">
  <circle cx="12" cy="12" r="10" fill="#FF6B6B">
    <animateTransform attributeName="transform" type="rotate" from="0 12 12" to="360 12 12" dur="2s" repeatCount="indefinite"/>
  </circle>
</svg>'''

SCRIPTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10" onload="alert(1)">
  <script>alert(document.cookie)</script>
  <rect width="10" height="10"/>
</svg>'''

# Inkscape-style export with an XML declaration, comment and foreign namespaces
INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" width="210mm" height="297mm" inkscape:version="1.3">
  <g inkscape:label="Layer 1"><path d="M10 10 L200 10 L200 280 Z"/></g>
</svg>'''


@pytest.fixture
def parser() -> SvgParser:
    return SvgParser()


@pytest.fixture
def pipeline(parser: SvgParser) -> RenderPipeline:
    return RenderPipeline(parser)


@pytest.fixture
def store(tmp_path) -> HistoryStore:
    return HistoryStore(tmp_path / "history")

# Internal DTD entity; the DOCTYPE is dropped on serialization
ENTITY_SVG = '''<!DOCTYPE svg [<!ENTITY c "red">]>
<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect fill="&c;" width="10" height="10"/><text>&c;</text></svg>'''

# Relative namespace URI, which C14N refuses
RELATIVE_NS_SVG = '<svg xmlns="foo" width="1" height="1"/>'
