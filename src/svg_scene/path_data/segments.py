"""Typed path segments and the intermediate records of the path-data parser."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TypeAlias

from .constants import CommandKind


@dataclass(frozen=True)
class RawCommand:
    """A command letter together with its unparsed parameter text."""

    kind: CommandKind
    parameter_text: str
    absolute: bool


class _Segment:
    """Shared helpers for the segment dataclasses."""

    letter_absolute = "?"

    @property
    def letter(self) -> str:
        """The command letter, lower case for relative segments."""
        if getattr(self, "absolute", True):
            return self.letter_absolute
        return self.letter_absolute.lower()

    @property
    def values(self) -> tuple[float, ...]:
        """The numeric payload in command order."""
        return tuple(
            getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name != "absolute"
        )


@dataclass(frozen=True)
class Move(_Segment):
    """Start a new subpath at (x, y)."""

    x: float
    y: float
    absolute: bool = True

    letter_absolute = "M"


@dataclass(frozen=True)
class LineTo(_Segment):
    """Straight line to (x, y)."""

    x: float
    y: float
    absolute: bool = True

    letter_absolute = "L"


@dataclass(frozen=True)
class LineH(_Segment):
    """Horizontal line to x."""

    x: float
    absolute: bool = True

    letter_absolute = "H"


@dataclass(frozen=True)
class LineV(_Segment):
    """Vertical line to y."""

    y: float
    absolute: bool = True

    letter_absolute = "V"


@dataclass(frozen=True)
class CubicCurve(_Segment):
    """Cubic Bezier curve with control points (x1, y1), (x2, y2) ending at (x, y)."""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    absolute: bool = True

    letter_absolute = "C"


@dataclass(frozen=True)
class ClosePath(_Segment):
    """Close the current subpath. Relative and absolute closes are identical."""

    absolute: bool = field(default=True, init=False)

    letter_absolute = "Z"


PathSegment: TypeAlias = Move | LineTo | LineH | LineV | CubicCurve | ClosePath
"""A single typed drawing operation."""

SEGMENT_TYPES: dict[CommandKind, type[PathSegment]] = {
    CommandKind.MOVE: Move,
    CommandKind.LINE_TO: LineTo,
    CommandKind.LINE_H: LineH,
    CommandKind.LINE_V: LineV,
    CommandKind.CURVE_TO: CubicCurve,
    CommandKind.CLOSE_PATH: ClosePath,
}
"""The segment class produced for each command kind."""


@dataclass(frozen=True)
class Ok:
    """A command that decoded into a segment."""

    segment: PathSegment


@dataclass(frozen=True)
class Skipped:
    """A command that produced no segment, with the reason why."""

    command: RawCommand
    reason: str


Decoded: TypeAlias = Ok | Skipped
"""The result of decoding one raw command."""
