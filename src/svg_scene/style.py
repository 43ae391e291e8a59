"""Cascade style attributes and resolve fill and stroke."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from svg_scene.nodes import Color, LineCap, LineJoin, Stroke

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

AVAILABLE_STYLE_ATTRIBUTES = (
    "fill",
    "stroke",
    "stroke-width",
    "stroke-linecap",
    "stroke-linejoin",
)
"""Presentation attributes taking part in the cascade."""

NO_PAINT = {"none", "transparent"}
"""Paint values that disable fill or stroke."""

HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")
"""A regex pattern for the digits of a hex color."""


def cascade_style(
    group_style: Mapping[str, str], attrib: Mapping[str, str]
) -> dict[str, str]:
    """Merge the style of an element over the style inherited from its group.

    A `style` attribute replaces the presentation attributes of the element,
    they are only read when it is missing.

    Examples:
        >>> cascade_style({"fill": "#000"}, {"style": "stroke: #fff; fill:#f00"})
        {'fill': '#f00', 'stroke': '#fff'}
        >>> cascade_style({"fill": "#000"}, {"stroke-width": "2"})
        {'fill': '#000', 'stroke-width': '2'}
    """
    style = dict(group_style)

    if "style" in attrib:
        declarations = [x.strip() for x in attrib["style"].split(";") if x.strip()]
        for declaration in declarations:
            parts = declaration.split(":")
            if len(parts) != 2:  # noqa: PLR2004
                continue
            key, value = parts
            style[key.strip()] = value.strip()
        return style

    for name in AVAILABLE_STYLE_ATTRIBUTES:
        if name in attrib:
            style[name] = attrib[name]

    return style


def create_color(value: str) -> Color | None:
    """Decode a hex color, with or without `#`.

    Hex digits are read from the front, anything after them is ignored.

    Returns:
        The color, or None for no paint and for values that are not hex.

    Examples:
        >>> create_color("#ff8000")
        Color(r=255, g=128, b=0)
        >>> create_color("#f80")
        Color(r=255, g=136, b=0)
        >>> create_color("none") is None
        True
    """
    cleaned = value.replace(" ", "")
    if cleaned.lower() in NO_PAINT:
        return None

    digits = cleaned.removeprefix("#")
    if (hex_match := HEX_PATTERN.match(digits)) is None:
        logger.warning("Unsupported color %r", value)
        return None

    digits = hex_match.group()

    if len(digits) == 3:  # noqa: PLR2004
        digits = "".join(c * 2 for c in digits)

    rgb_value = min(int(digits, 16), 0xFFFFFFFF)

    return Color.rgb(
        (rgb_value >> 16) & 0xFF,
        (rgb_value >> 8) & 0xFF,
        rgb_value & 0xFF,
    )


def get_fill_color(style: Mapping[str, str]) -> Color | None:
    """The fill color, None if unset or no paint."""
    if "fill" not in style:
        return None
    return create_color(style["fill"])


def get_stroke_width(style: Mapping[str, str], default: float = 1.0) -> float:
    """The stroke width without a `px` suffix."""
    if "stroke-width" not in style:
        return default

    raw_value = style["stroke-width"]
    try:
        return float(raw_value.replace(" ", "").removesuffix("px"))
    except ValueError:
        logger.warning("Invalid stroke width %r, using %s", raw_value, default)
        return default


def _get_enum(style: Mapping[str, str], key: str, enum_type: type[E], default: E) -> E:
    if key not in style:
        return default

    try:
        return enum_type(style[key].strip())
    except ValueError:
        logger.warning("Invalid %s %r, using %s", key, style[key], default.value)
        return default


def get_stroke(style: Mapping[str, str], default_width: float = 1.0) -> Stroke | None:
    """The stroke, None unless a stroke color resolves."""
    if "stroke" not in style:
        return None

    color = create_color(style["stroke"])
    if color is None:
        return None

    return Stroke(
        fill=color,
        width=get_stroke_width(style, default_width),
        cap=_get_enum(style, "stroke-linecap", LineCap, LineCap.ROUND),
        join=_get_enum(style, "stroke-linejoin", LineJoin, LineJoin.ROUND),
    )
