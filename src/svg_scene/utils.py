"""Functions for reading SVG trees."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, TypeGuard
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import fromstring

import svg_scene.wrappers as svg_classes
from svg_scene.wrappers import ElemSpan, filtered_tag

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "{http://www.w3.org/2000/svg}"
"""The provider prefix of elements in the SVG namespace."""

GROUP_TAGS = {"g", "svg"}
"""Tags parsed as groups."""

WRAPPED_CLASSES: dict[str, type[ElemSpan]] = {
    "path": svg_classes.Path,
    "line": svg_classes.Line,
    "rect": svg_classes.Rect,
    "circle": svg_classes.Circle,
    "ellipse": svg_classes.Ellipse,
    "polygon": svg_classes.Polygon,
    "polyline": svg_classes.Polyline,
}
"""The wrapper class of each supported shape tag."""

NONE_CLASSES = {
    "metadata",
    "defs",
    "title",
    "desc",
    "clipPath",
    "marker",
    "mask",
    "pattern",
    "symbol",
    "linearGradient",
    "radialGradient",
    "filter",
    "style",
    "script",
}
"""Tags that draw nothing by themselves and are skipped quietly."""


def save_parse(data: str) -> ET.Element:
    """Save and parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def assure_elem(elem: Any) -> TypeGuard[ET.Element]:
    """Assure that the element is an `ET.Element`."""
    return isinstance(elem, ET.Element)


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree."""
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return save_parse(data)


def filtered_tag_with_provider(tag: str) -> tuple[str, str]:
    """Get the tag and provider from an XML tag.

    Examples:
        >>> filtered_tag_with_provider("{http://www.w3.org/2000/svg}rect")
        ('rect', '{http://www.w3.org/2000/svg}')
        >>> filtered_tag_with_provider("rect")
        ('rect', '')
    """
    provider_match = re.match(r"({.*})", tag)
    provider_str = provider_match.group(1) if provider_match else ""

    return filtered_tag(tag), provider_str


def in_svg_namespace(elem: ET.Element) -> bool:
    """If the element is an SVG element. Elements without namespace count."""
    _, provider = filtered_tag_with_provider(elem.tag)
    return provider in {"", SVG_NAMESPACE}


def get_class_from_tag(tag: str) -> type[ElemSpan] | None:
    """Get the wrapper class from the tag, None if it draws nothing."""
    if tag in NONE_CLASSES:
        return None

    if elem := WRAPPED_CLASSES.get(tag):
        return elem

    logger.warning("SVG parsing error. Shape %s not supported", tag)
    return None


def get_class(elem: ET.Element) -> type[ElemSpan] | None:
    """Get the wrapper class from the element."""
    if not in_svg_namespace(elem):
        return None

    return get_class_from_tag(filtered_tag(elem.tag))
