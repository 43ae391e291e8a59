"""Parse the SVG path-data mini-language into typed segments.

Parsing happens in two stages. The tokenizer slices the `d` attribute into
raw commands at every supported command letter, then the decoder turns each
raw command into at most one segment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .constants import (
    ARITY,
    COMMAND_LETTERS,
    EXPONENT_MARKERS,
    NUMBER_PATTERN,
    SEPARATORS,
    SPLIT_PATTERN,
    CommandKind,
    command_for,
)
from .segments import SEGMENT_TYPES, ClosePath, Decoded, Ok, RawCommand, Skipped

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .segments import PathSegment

logger = logging.getLogger(__name__)

_ORPHAN_KINDS = {CommandKind.CLOSE_PATH, CommandKind.UNKNOWN}


class PathDataError(ValueError):
    """Raised in strict mode when commands of the path data were skipped."""

    def __init__(self, skipped: list[Skipped]) -> None:
        self.skipped = skipped
        reasons = "; ".join(
            f"{x.command.kind.value} {x.command.parameter_text.strip()!r}: {x.reason}"
            for x in skipped
        )
        super().__init__(f"{len(skipped)} path command(s) skipped: {reasons}")


def _flush(commands: list[RawCommand], letter: str, text: str) -> None:
    """Emit the text collected after `letter` as a raw command."""
    if not text:
        return

    kind, absolute = command_for(letter)
    if kind in _ORPHAN_KINDS:
        # text after a close-path letter or before the first letter
        if not text.strip(SEPARATORS):
            return
        kind = CommandKind.UNKNOWN

    commands.append(RawCommand(kind, text, absolute))


def tokenize(d: str) -> list[RawCommand]:
    """Split path data into raw commands, one per command letter.

    Close-path letters are emitted as soon as they are seen and never carry
    parameter text.

    Examples:
        >>> [(x.kind.value, x.parameter_text) for x in tokenize("M1 2z")]
        [('M', '1 2'), ('Z', '')]
    """
    commands: list[RawCommand] = []
    letter = ""
    start = 0

    for ix, char in enumerate(d):
        if char not in COMMAND_LETTERS:
            continue

        _flush(commands, letter, d[start:ix])

        kind, _ = command_for(char)
        if kind is CommandKind.CLOSE_PATH:
            commands.append(RawCommand(kind, "", absolute=True))

        letter = char
        start = ix + 1

    _flush(commands, letter, d[start:])

    return commands


def separate_negative_values(token: str) -> list[str]:
    """Split a token wherever a minus sign starts a new number.

    A minus sign directly after an exponent marker stays in the number.

    Examples:
        >>> separate_negative_values("10-5.5-3")
        ['10', '-5.5', '-3']
        >>> separate_negative_values("1e-5")
        ['1e-5']
    """
    values: list[str] = []
    start = 0

    for ix in range(1, len(token)):
        if token[ix] == "-" and token[ix - 1] not in EXPONENT_MARKERS:
            values.append(token[start:ix])
            start = ix

    if token[start:]:
        values.append(token[start:])

    return values


def split_values(text: str) -> list[str]:
    """Split parameter text into number tokens.

    Examples:
        >>> split_values(" 1,2  3-4 ")
        ['1', '2', '3', '-4']
    """
    return [
        value
        for piece in SPLIT_PATTERN.split(text)
        if piece
        for value in separate_negative_values(piece)
    ]


def _to_float(token: str) -> float | None:
    if NUMBER_PATTERN.fullmatch(token) is None:
        return None
    return float(token)


def decode_command(command: RawCommand) -> Decoded:
    """Decode a raw command into a segment or the reason it was skipped."""
    if command.kind is CommandKind.UNKNOWN:
        return Skipped(command, "no command letter")

    if command.kind is CommandKind.CLOSE_PATH:
        return Ok(ClosePath())

    tokens = split_values(command.parameter_text)
    arity = ARITY[command.kind]

    if len(tokens) < arity:
        return Skipped(command, f"expected {arity} values, got {len(tokens)}")

    values: list[float] = []
    for token in tokens[:arity]:
        value = _to_float(token)
        if value is None:
            return Skipped(command, f"invalid number {token!r}")
        values.append(value)

    if len(tokens) > arity:
        logger.debug(
            "Ignoring %d extra values after %s command",
            len(tokens) - arity,
            command.kind.name,
        )

    segment_type = SEGMENT_TYPES[command.kind]
    return Ok(segment_type(*values, absolute=command.absolute))  # type: ignore[call-arg]


def decode_path_data(d: str) -> list[Decoded]:
    """Decode every command of the path data, keeping skipped ones."""
    decoded = [decode_command(x) for x in tokenize(d)]

    for item in decoded:
        if isinstance(item, Skipped):
            logger.debug(
                "Skipping path command %s %r: %s",
                item.command.kind.name,
                item.command.parameter_text,
                item.reason,
            )

    return decoded


def parse_path_data(d: str, strict: bool = False) -> list[PathSegment]:
    """Parse path data into an ordered list of segments.

    Malformed commands are dropped and parsing continues with the next one.

    Args:
        d: The value of a `d` attribute.
        strict: Raise instead of dropping malformed commands.

    Returns:
        The segments in drawing order.

    Raises:
        PathDataError: If `strict` is set and any command was skipped.

    Example:
        >>> parse_path_data("M1-2L3-4")
        [Move(x=1.0, y=-2.0, absolute=True), LineTo(x=3.0, y=-4.0, absolute=True)]
    """
    decoded = decode_path_data(d)

    if strict:
        skipped = [x for x in decoded if isinstance(x, Skipped)]
        if skipped:
            raise PathDataError(skipped)

    return [x.segment for x in decoded if isinstance(x, Ok)]


def format_number(value: float) -> str:
    """Format a number for path data, dropping a trailing `.0`.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(-0.5)
        '-0.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def serialize_path_data(segments: Iterable[PathSegment]) -> str:
    """Write segments back as path data.

    Example:
        >>> serialize_path_data(parse_path_data("m1,2 l3-4z"))
        'm1 2 l3 -4 Z'
    """
    parts: list[str] = []
    for segment in segments:
        numbers = " ".join(format_number(v) for v in segment.values)
        parts.append(f"{segment.letter}{numbers}")

    return " ".join(parts)
