"""Wrapper for SVG elements."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from typing_extensions import override

from svg_scene import config, nodes
from svg_scene.path_data import PathDataError, parse_path_data
from svg_scene.style import cascade_style, get_fill_color, get_stroke

if TYPE_CHECKING:
    from collections.abc import Mapping
    from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}circle")
        'circle'
        >>> filtered_tag("circle")
        'circle'
    """
    return re.sub(r"\{.*\}", "", tag)


def filtered_split(s: str, sep: str | re.Pattern[str], maxsplit: int = 0) -> list[str]:
    r"""Split a string and remove empty strings.

    Examples:
        >>> filtered_split("a1b1c1", "1")
        ['a', 'b', 'c']
        >>> filtered_split("a12b12c", re.compile(r"\d+"))
        ['a', 'b', 'c']
    """
    if isinstance(sep, str):
        sep = re.compile(sep)

    return [x.strip() for x in sep.split(s, maxsplit) if x.strip()]


def to_float(value: str) -> float:
    """Convert an attribute value to float, ignoring a 'px' suffix."""
    return float(value.strip().removesuffix("px"))


class ElemSpan(ABC):
    """Abstract base class for SVG shape elements."""

    def __init__(
        self,
        elem: ET.Element,
        group_style: Mapping[str, str] | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        """Initialize the element.

        Args:
            elem: The element to wrap.
            group_style: The style inherited from the enclosing groups.
            settings: The parser settings.
        """
        self.elem = elem
        self.attr = elem.attrib
        self.settings = settings or config.settings
        self.style = cascade_style(group_style or {}, self.attr)

    @override
    def __repr__(self) -> str:
        elem_id = self.attr.get("id", "")
        id_suffix = f" (#{elem_id})" if elem_id else ""
        return f"{self.tag}{id_suffix}"

    @property
    def tag(self) -> str:
        """The tag of the element."""
        return filtered_tag(self.elem.tag)

    @property
    def fill(self) -> nodes.Color | None:
        """The resolved fill color."""
        return get_fill_color(self.style)

    @property
    def stroke(self) -> nodes.Stroke | None:
        """The resolved stroke."""
        return get_stroke(self.style, self.settings.default_stroke_width)

    def as_float(self, *args: str) -> tuple[float, ...]:
        """Get required attributes as floats without the 'px' suffix."""
        if missing := [x for x in args if x not in self.attr]:
            raise ValueError(f"Missing attributes {missing}")

        return tuple(to_float(self.attr[arg]) for arg in args)

    def as_optional_float(self, key: str) -> float | None:
        """Get an attribute as float, None if missing or invalid."""
        if key not in self.attr:
            return None

        try:
            return to_float(self.attr[key])
        except ValueError:
            return None

    def as_float_default(self, key: str, default: float = 0.0) -> float:
        """Get an attribute as float, the default if missing or invalid."""
        value = self.as_optional_float(key)
        return default if value is None else value

    @abstractmethod
    def get_form(self) -> nodes.Locus:
        """Build the geometry of the element.

        Raises:
            ValueError: If required attributes are missing or invalid.
        """

    def form(self) -> nodes.Locus | None:
        """The geometry of the element or None if it can not be built."""
        try:
            return self.get_form()
        except PathDataError:
            raise
        except ValueError as e:
            logger.warning("Dropping %s: %s", self, e)
            return None

    def shape(self, pos: nodes.Transform | None = None) -> nodes.Shape | None:
        """The element as a styled shape or None if it has no geometry."""
        form = self.form()
        if form is None:
            return None

        return nodes.Shape(
            form=form,
            fill=self.fill,
            stroke=self.stroke,
            pos=pos or nodes.Transform(),
        )


class Line(ElemSpan):
    """Line class."""

    @override
    def get_form(self) -> nodes.Line:
        x1, y1, x2, y2 = self.as_float("x1", "y1", "x2", "y2")
        return nodes.Line(x1=x1, y1=y1, x2=x2, y2=y2)


class Rect(ElemSpan):
    """Rectangle class."""

    @override
    def get_form(self) -> nodes.Rect | nodes.RoundRect:
        width, height = self.as_float("width", "height")
        rect = nodes.Rect(
            x=self.as_float_default("x"),
            y=self.as_float_default("y"),
            w=width,
            h=height,
        )

        rx = self.as_optional_float("rx")
        ry = self.as_optional_float("ry")
        if rx is None and ry is None:
            return rect

        return nodes.RoundRect(rect=rect, rx=rx or 0.0, ry=ry or 0.0)


class Circle(ElemSpan):
    """Circle class."""

    @override
    def get_form(self) -> nodes.Circle:
        (r,) = self.as_float("r")
        return nodes.Circle(
            cx=self.as_float_default("cx"),
            cy=self.as_float_default("cy"),
            r=r,
        )


class Ellipse(ElemSpan):
    """Ellipse class."""

    @override
    def get_form(self) -> nodes.Ellipse:
        rx, ry = self.as_float("rx", "ry")
        return nodes.Ellipse(
            cx=self.as_float_default("cx"),
            cy=self.as_float_default("cy"),
            rx=rx,
            ry=ry,
        )


class Polygon(ElemSpan):
    """Polygon class."""

    def _get_points(self) -> tuple[float, ...]:
        if "points" not in self.attr:
            raise ValueError("Missing attributes ['points']")

        # split on comma or space, drop what is not a number
        points: list[float] = []
        for value in filtered_split(self.attr["points"], r"[,\s]"):
            try:
                points.append(to_float(value))
            except ValueError:
                continue
        return tuple(points)

    @override
    def get_form(self) -> nodes.Polygon | nodes.Polyline:
        return nodes.Polygon(points=self._get_points())


class Polyline(Polygon):
    """Polyline class."""

    @override
    def get_form(self) -> nodes.Polyline:
        return nodes.Polyline(points=self._get_points())


class Path(ElemSpan):
    """Path class."""

    @override
    def get_form(self) -> nodes.Path:
        if "d" not in self.attr:
            raise ValueError("Missing attributes ['d']")

        segments = parse_path_data(self.attr["d"], strict=self.settings.strict_paths)
        return nodes.Path(segments=tuple(segments))
