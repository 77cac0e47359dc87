"""Shared test fixtures for facehash."""

import xml.etree.ElementTree as ET

import pytest

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def svg_ns():
    """Return the ElementTree tag prefix for the SVG namespace."""
    return SVG_NS


@pytest.fixture
def parse_svg():
    """Return a function that parses SVG markup to its root element."""
    def _parse(markup: str) -> ET.Element:
        return ET.fromstring(markup)
    return _parse
