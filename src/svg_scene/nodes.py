"""Scene-graph nodes built from an SVG document."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from typing_extensions import Self, override

from svg_scene.path_data import get_bbox, get_segments_bbox, to_absolute, union_bbox

if TYPE_CHECKING:
    from collections.abc import Iterator

    from svg_scene.path_data import BBox, PathSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An opaque RGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Self:
        """Create a color from its channels."""
        return cls(r, g, b)

    @property
    def hex(self) -> str:
        """The color as `#rrggbb`.

        Examples:
            >>> Color.rgb(255, 128, 0).hex
            '#ff8000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class LineCap(Enum):
    """Shape at the open ends of a stroke."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(Enum):
    """Shape at the corners of a stroke."""

    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True)
class Stroke:
    """Outline style of a shape."""

    fill: Color
    width: float = 1.0
    cap: LineCap = LineCap.ROUND
    join: LineJoin = LineJoin.ROUND


@dataclass(frozen=True)
class Transform:
    """Affine transform (m11 m12 m21 m22 dx dy) placing a shape in the scene."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def move(cls, dx: float, dy: float) -> Self:
        """A pure translation."""
        return cls(dx=dx, dy=dy)

    @property
    def is_identity(self) -> bool:
        """If the transform leaves every point in place."""
        return self == Transform()


class Locus(ABC):
    """Geometry of a shape."""

    @abstractmethod
    def bounds(self) -> BBox:
        """The bounding box (x, y, width, height) of the geometry."""


@dataclass(frozen=True)
class Line(Locus):
    """Line class."""

    x1: float
    y1: float
    x2: float
    y2: float

    @override
    def bounds(self) -> BBox:
        return get_bbox([complex(self.x1, self.y1), complex(self.x2, self.y2)])


@dataclass(frozen=True)
class Rect(Locus):
    """Rectangle class."""

    x: float
    y: float
    w: float
    h: float

    @override
    def bounds(self) -> BBox:
        return (self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class RoundRect(Locus):
    """Rectangle with rounded corners."""

    rect: Rect
    rx: float
    ry: float

    @override
    def bounds(self) -> BBox:
        return self.rect.bounds()


@dataclass(frozen=True)
class Circle(Locus):
    """Circle class."""

    cx: float
    cy: float
    r: float

    @override
    def bounds(self) -> BBox:
        return (self.cx - self.r, self.cy - self.r, 2 * self.r, 2 * self.r)


@dataclass(frozen=True)
class Ellipse(Locus):
    """Ellipse class."""

    cx: float
    cy: float
    rx: float
    ry: float

    @override
    def bounds(self) -> BBox:
        return (self.cx - self.rx, self.cy - self.ry, 2 * self.rx, 2 * self.ry)


@dataclass(frozen=True)
class _PointList(Locus):
    points: tuple[float, ...]

    @property
    def vertices(self) -> list[complex]:
        """The points paired up as (x, y). A trailing odd value is ignored."""
        xs, ys = self.points[::2], self.points[1::2]
        return [complex(x, y) for x, y in zip(xs, ys, strict=False)]

    @override
    def bounds(self) -> BBox:
        return get_bbox(self.vertices)


@dataclass(frozen=True)
class Polygon(_PointList):
    """Closed shape through a list of points."""


@dataclass(frozen=True)
class Polyline(_PointList):
    """Open line through a list of points."""


@dataclass(frozen=True)
class Path(Locus):
    """Path class."""

    segments: tuple[PathSegment, ...]

    def absolute_segments(self) -> list[PathSegment]:
        """The segments with relative coordinates resolved."""
        return to_absolute(self.segments)

    @override
    def bounds(self) -> BBox:
        return get_segments_bbox(self.segments)


class Node(ABC):
    """Abstract base class for scene-graph nodes."""

    @abstractmethod
    def bounds(self) -> BBox:
        """The bounding box of the node."""


@dataclass
class Shape(Node):
    """A form drawn with a fill and stroke."""

    form: Locus
    fill: Color | None = None
    stroke: Stroke | None = None
    pos: Transform = field(default_factory=Transform)

    @override
    def bounds(self, include_stroke: bool = False) -> BBox:
        """The bounds of the form, optionally padded by half the stroke width."""
        x, y, w, h = self.form.bounds()
        if not include_stroke or self.stroke is None:
            return (x, y, w, h)

        pad = self.stroke.width / 2
        return (x - pad, y - pad, w + 2 * pad, h + 2 * pad)


@dataclass
class Group(Node):
    """Group class."""

    contents: list[Node] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    @override
    def bounds(self) -> BBox:
        """The union of the bounds of all children that draw something.

        Raises:
            ValueError: If no child has a bounding box.
        """
        bboxes: list[BBox] = []
        for node in self.contents:
            try:
                bboxes.append(node.bounds())
            except ValueError as e:
                logger.debug("Ignoring %r without bounds: %s", node, e)

        if not bboxes:
            raise ValueError("Group has no contents")
        return union_bbox(*bboxes)

    def shapes(self) -> list[Shape]:
        """All shapes below this group, depth first."""
        found: list[Shape] = []
        for node in self.contents:
            if isinstance(node, Group):
                found.extend(node.shapes())
            elif isinstance(node, Shape):
                found.append(node)
        return found
