"""Convert SVG documents into a scene graph of groups and shapes."""

from __future__ import annotations

from .config import Settings
from .nodes import (
    Circle,
    Color,
    Ellipse,
    Group,
    Line,
    LineCap,
    LineJoin,
    Locus,
    Node,
    Path,
    Polygon,
    Polyline,
    Rect,
    RoundRect,
    Shape,
    Stroke,
    Transform,
)
from .parser import SvgParser, parse_svg
from .path_data import PathDataError, PathSegment, parse_path_data

__all__ = [
    "Circle",
    "Color",
    "Ellipse",
    "Group",
    "Line",
    "LineCap",
    "LineJoin",
    "Locus",
    "Node",
    "Path",
    "PathDataError",
    "PathSegment",
    "Polygon",
    "Polyline",
    "Rect",
    "RoundRect",
    "Settings",
    "Shape",
    "Stroke",
    "SvgParser",
    "Transform",
    "parse_path_data",
    "parse_svg",
]
