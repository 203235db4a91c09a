"""Lenient XML loading that keeps prefixed tag names such as ``fsb:origin_offset`` as written."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from xml.parsers import expat

from .errors import UrdfError, UrdfErrorType

_PARSE_MESSAGE = "Failed to parse URDF string with error: "


def _parse(data: str | bytes) -> ET.Element:
    builder = ET.TreeBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    try:
        parser.Parse(data, True)
    except expat.ExpatError as exc:
        raise UrdfError(UrdfErrorType.PARSE_ERROR, f"{_PARSE_MESSAGE}{exc}") from exc
    return builder.close()


def parse_xml(text: str | bytes) -> ET.Element:
    """Parse an XML document and return its root element.

    Namespace prefixes are not resolved, so undeclared prefixes are accepted.
    Raises ``UrdfError`` with ``PARSE_ERROR`` on malformed input.
    """
    return _parse(text)


def parse_xml_file(path: str | os.PathLike[str]) -> ET.Element:
    """Read and parse an XML file, returning its root element."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise UrdfError(UrdfErrorType.PARSE_ERROR, f"{_PARSE_MESSAGE}{exc}") from exc
    return _parse(data)