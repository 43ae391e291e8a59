"""Parse SVG path data into typed segments."""

from __future__ import annotations

from .bbox import BBox, get_bbox, get_segments_bbox, to_absolute, union_bbox
from .constants import CommandKind
from .parser import (
    PathDataError,
    decode_command,
    decode_path_data,
    parse_path_data,
    serialize_path_data,
    split_values,
    tokenize,
)
from .segments import (
    ClosePath,
    CubicCurve,
    Decoded,
    LineH,
    LineTo,
    LineV,
    Move,
    Ok,
    PathSegment,
    RawCommand,
    Skipped,
)

__all__ = [
    "BBox",
    "ClosePath",
    "CommandKind",
    "CubicCurve",
    "Decoded",
    "LineH",
    "LineTo",
    "LineV",
    "Move",
    "Ok",
    "PathDataError",
    "PathSegment",
    "RawCommand",
    "Skipped",
    "decode_command",
    "decode_path_data",
    "get_bbox",
    "get_segments_bbox",
    "parse_path_data",
    "serialize_path_data",
    "split_values",
    "tokenize",
    "to_absolute",
    "union_bbox",
]
