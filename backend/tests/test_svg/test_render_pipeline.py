"""Tests for the render pipeline orchestrator."""

import dataclasses
import random
from urllib.parse import unquote

import pytest
from lxml import etree

from morphlab.svg.encoder import DATA_URI_PREFIX
from morphlab.svg.outcome import ErrorKind, RenderError, RenderOk
from morphlab.svg.pipeline import RenderPipeline, render

from tests.conftest import CIRCLE_SVG, ENTITY_SVG, RELATIVE_NS_SVG, SCRIPTED_SVG, SIZED_SVG


def test_render_ok(pipeline):
    outcome = pipeline.render(SIZED_SVG)
    assert isinstance(outcome, RenderOk)
    assert outcome.ok
    assert outcome.resource.uri.startswith(DATA_URI_PREFIX)
    root = etree.fromstring(outcome.svg.encode())
    assert root.get("viewBox") == "0 0 100 50"
    assert root.get("width") is None


def test_encoded_payload_decodes_to_normalized_svg(pipeline):
    outcome = pipeline.render(CIRCLE_SVG)
    assert unquote(outcome.resource.uri[len(DATA_URI_PREFIX):]) == outcome.svg


def test_malformed_input():
    outcome = render("<svg><unclosed")
    assert isinstance(outcome, RenderError)
    assert not outcome.ok
    assert outcome.kind is ErrorKind.MALFORMED_XML
    assert outcome.kind.value == "malformed-xml"


def test_no_root_input():
    outcome = render("<rect/>")
    assert isinstance(outcome, RenderError)
    assert outcome.kind.value == "no-root-svg"


def test_outcome_is_immutable(pipeline):
    outcome = pipeline.render(CIRCLE_SVG)
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.svg = "<svg/>"


def test_script_content_never_appears_as_markup(pipeline):
    outcome = pipeline.render(SCRIPTED_SVG)
    assert isinstance(outcome, RenderOk)
    payload = outcome.resource.uri[len(DATA_URI_PREFIX):]
    assert "<" not in payload
    assert ">" not in payload
    assert '"' not in payload
    assert "%3Cscript%3E" in payload


def test_render_is_deterministic():
    assert RenderPipeline().render(CIRCLE_SVG) == RenderPipeline().render(CIRCLE_SVG)


def test_render_expands_internal_entities(pipeline):
    outcome = pipeline.render(ENTITY_SVG)
    assert isinstance(outcome, RenderOk)
    assert "&c;" not in outcome.svg
    # The encoded markup must stand on its own without the DOCTYPE
    root = etree.fromstring(outcome.svg.encode())
    assert root[0].get("fill") == "red"
    assert root.get("viewBox") == "0 0 10 10"


def test_render_relative_namespace(pipeline):
    outcome = pipeline.render(RELATIVE_NS_SVG)
    assert isinstance(outcome, RenderOk)
    assert etree.fromstring(outcome.svg.encode()).get("viewBox") == "0 0 1 1"


def _random_markup(rng: random.Random) -> str:
    tokens = ["<svg", "<rect", "/>", ">", "</svg>", "<", "&", "&amp;", '"', "=",
              " width=\"10px\"", " viewBox=\"0 0 1 1\"", "<!--", "-->", "<![CDATA[", "]]>",
              "<?xml version=\"1.0\"?>", "\x00", "\ud800", "é", "text"]
    return "".join(rng.choice(tokens) for _ in range(rng.randint(0, 20)))


def test_render_is_total_under_fuzzing(pipeline):
    rng = random.Random(20260418)
    for _ in range(300):
        raw_bytes = bytes(rng.randrange(256) for _ in range(rng.randint(0, 128)))
        inputs = [
            raw_bytes,
            raw_bytes.decode("utf-8", errors="surrogateescape"),
            _random_markup(rng),
        ]
        for raw in inputs:
            outcome = pipeline.render(raw)
            assert isinstance(outcome, (RenderOk, RenderError))
