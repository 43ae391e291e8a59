"""Resolve relative segments and calculate bounding boxes."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from .math import cubic_extrema
from .segments import ClosePath, CubicCurve, LineH, LineTo, LineV, Move

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .segments import PathSegment

BBox: TypeAlias = tuple[float, float, float, float]
"""Bounding box as a tuple (x, y, width, height)."""


def to_absolute(segments: Iterable[PathSegment]) -> list[PathSegment]:
    """Resolve relative segments against the current point.

    A close returns the current point to the start of its subpath.

    Example:
        >>> to_absolute([Move(10, 10), LineTo(5, 0, absolute=False), LineV(20)])
        [Move(x=10.0, y=10.0, absolute=True), LineTo(x=15.0, y=10.0, absolute=True), LineV(y=20.0, absolute=True)]
    """  # noqa: E501
    final: list[PathSegment] = []

    curr_pos = complex(0, 0)
    start_pos = complex(0, 0)

    for segment in segments:
        offset = complex(0, 0) if segment.absolute else curr_pos

        if isinstance(segment, Move):
            curr_pos = start_pos = complex(segment.x, segment.y) + offset
            final.append(Move(curr_pos.real, curr_pos.imag))

        elif isinstance(segment, LineTo):
            curr_pos = complex(segment.x, segment.y) + offset
            final.append(LineTo(curr_pos.real, curr_pos.imag))

        elif isinstance(segment, LineH):
            curr_pos = complex(segment.x + offset.real, curr_pos.imag)
            final.append(LineH(curr_pos.real))

        elif isinstance(segment, LineV):
            curr_pos = complex(curr_pos.real, segment.y + offset.imag)
            final.append(LineV(curr_pos.imag))

        elif isinstance(segment, CubicCurve):
            first = complex(segment.x1, segment.y1) + offset
            second = complex(segment.x2, segment.y2) + offset
            curr_pos = complex(segment.x, segment.y) + offset
            final.append(
                CubicCurve(
                    first.real,
                    first.imag,
                    second.real,
                    second.imag,
                    curr_pos.real,
                    curr_pos.imag,
                )
            )

        else:
            curr_pos = start_pos
            final.append(segment)

    return final


def get_bbox(points: Sequence[complex]) -> BBox:
    """Calculates the bounding box from multiple points.

    Args:
        points: A list of points as complex numbers.

    Returns:
        The bounding box as a tuple (x, y, width, height).
    """
    if not points:
        raise ValueError("No bounding box points found")

    xs = [p.real for p in points]
    ys = [p.imag for p in points]

    return min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys)


def union_bbox(*bboxes: BBox) -> BBox:
    """The smallest bounding box containing all given boxes."""
    corners: list[complex] = []
    for x, y, w, h in bboxes:
        corners.extend((complex(x, y), complex(x + w, y + h)))

    return get_bbox(corners)


def get_segments_bbox(segments: Iterable[PathSegment]) -> BBox:
    """Calculates the bounding box of the geometry drawn by the segments.

    Moves on their own draw nothing, so a path of only moves has no
    bounding box.

    Raises:
        ValueError: If no segment draws anything.
    """
    all_bbox_points: list[complex] = []

    curr_pos = complex(0, 0)
    start_pos = complex(0, 0)

    for segment in to_absolute(segments):
        if isinstance(segment, Move):
            curr_pos = start_pos = complex(segment.x, segment.y)
            continue

        if isinstance(segment, ClosePath):
            point = start_pos
        elif isinstance(segment, LineTo):
            point = complex(segment.x, segment.y)
        elif isinstance(segment, LineH):
            point = complex(segment.x, curr_pos.imag)
        elif isinstance(segment, LineV):
            point = complex(curr_pos.real, segment.y)
        else:
            point = complex(segment.x, segment.y)
            x_low, x_high = cubic_extrema(
                curr_pos.real, segment.x1, segment.x2, segment.x
            )
            y_low, y_high = cubic_extrema(
                curr_pos.imag, segment.y1, segment.y2, segment.y
            )
            all_bbox_points.extend((complex(x_low, y_low), complex(x_high, y_high)))

        all_bbox_points.extend((curr_pos, point))
        curr_pos = point

    if not all_bbox_points:
        raise ValueError("Only move commands found in path data")

    return get_bbox(all_bbox_points)
