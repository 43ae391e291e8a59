"""Constants for the SVG path-data parser."""

from __future__ import annotations

import re
from enum import Enum


class CommandKind(Enum):
    """The kind of a path-data command."""

    MOVE = "M"
    LINE_TO = "L"
    LINE_H = "H"
    LINE_V = "V"
    CURVE_TO = "C"
    CLOSE_PATH = "Z"
    UNKNOWN = "?"


COMMAND_LETTERS: dict[str, tuple[CommandKind, bool]] = {
    "M": (CommandKind.MOVE, True),
    "m": (CommandKind.MOVE, False),
    "L": (CommandKind.LINE_TO, True),
    "l": (CommandKind.LINE_TO, False),
    "H": (CommandKind.LINE_H, True),
    "h": (CommandKind.LINE_H, False),
    "V": (CommandKind.LINE_V, True),
    "v": (CommandKind.LINE_V, False),
    "C": (CommandKind.CURVE_TO, True),
    "c": (CommandKind.CURVE_TO, False),
    "Z": (CommandKind.CLOSE_PATH, True),
    "z": (CommandKind.CLOSE_PATH, False),
}
"""The command kind and default absoluteness of each supported letter."""

UNSUPPORTED = (CommandKind.UNKNOWN, True)
"""Kind and absoluteness for anything that is not a command letter."""

ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE: 2,
    CommandKind.LINE_TO: 2,
    CommandKind.LINE_H: 1,
    CommandKind.LINE_V: 1,
    CommandKind.CURVE_TO: 6,
    CommandKind.CLOSE_PATH: 0,
}
"""The number of values consumed by each command kind."""

SPLIT_PATTERN = re.compile(r"[,\s]+")
"""A regex pattern to split the parameter text of a command."""

SEPARATORS = ", \t\n\r\f\v"
"""Characters that only separate values and carry no content."""

EXPONENT_MARKERS = frozenset("eE")
"""Characters after which a minus sign belongs to the same number."""

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
"""A regex pattern matching a single SVG number."""


def command_for(letter: str) -> tuple[CommandKind, bool]:
    """Get the command kind and absoluteness of a letter.

    Examples:
        >>> command_for("c")
        (<CommandKind.CURVE_TO: 'C'>, False)
        >>> command_for("A")
        (<CommandKind.UNKNOWN: '?'>, True)
    """
    return COMMAND_LETTERS.get(letter, UNSUPPORTED)
