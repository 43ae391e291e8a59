"""Tests decoding path data into segments."""

from __future__ import annotations

import logging

import pytest

from svg_scene.path_data import (
    ClosePath,
    CommandKind,
    CubicCurve,
    LineH,
    LineTo,
    LineV,
    Move,
    Ok,
    PathDataError,
    RawCommand,
    Skipped,
    decode_command,
    decode_path_data,
    parse_path_data,
    serialize_path_data,
)


def test_adjacent_numbers() -> None:
    assert parse_path_data("M1-2L3-4") == [
        Move(1, -2, absolute=True),
        LineTo(3, -4, absolute=True),
    ]


def test_close_path() -> None:
    segments = parse_path_data("M0 0L1 1Z")
    assert len(segments) == 3
    assert segments[-1] == ClosePath()


def test_close_path_consumes_nothing() -> None:
    assert parse_path_data("M0 0L1 1Z 7 8") == parse_path_data("M0 0L1 1Z")


def test_relative_close_is_absolute() -> None:
    (segment,) = parse_path_data("z")
    assert segment.absolute


def test_missing_values_drop_command() -> None:
    assert parse_path_data("L5") == []


def test_relative_and_absolute() -> None:
    assert parse_path_data("m1 2l3 4") == [
        Move(1, 2, absolute=False),
        LineTo(3, 4, absolute=False),
    ]
    assert parse_path_data("M1 2L3 4") == [
        Move(1, 2, absolute=True),
        LineTo(3, 4, absolute=True),
    ]


def test_all_commands() -> None:
    assert parse_path_data("M0 0H10V-5C1 2 3 4 5 6h1v2c-1-2-3-4-5-6Z") == [
        Move(0, 0),
        LineH(10),
        LineV(-5),
        CubicCurve(1, 2, 3, 4, 5, 6),
        LineH(1, absolute=False),
        LineV(2, absolute=False),
        CubicCurve(-1, -2, -3, -4, -5, -6, absolute=False),
        ClosePath(),
    ]


@pytest.mark.parametrize("test_input", ["M 1,2 3 4", "M1,2,3,4"])
def test_mixed_separators(test_input: str) -> None:
    assert parse_path_data(test_input) == [Move(1, 2)]


def test_extra_values_are_ignored() -> None:
    # one segment per letter, no repeated commands
    assert parse_path_data("M0 0 L10 10 20 20") == [Move(0, 0), LineTo(10, 10)]


def test_malformed_command_is_dropped() -> None:
    assert parse_path_data("M0 0L. 1L2 2") == [Move(0, 0), LineTo(2, 2)]


def test_unsupported_command_drops_neighbour() -> None:
    assert parse_path_data("M0 0A5 5 0 0 1 10 10L1 1") == [LineTo(1, 1)]


@pytest.mark.parametrize("test_input", ["", "   ", ",,"])
def test_empty_path_data(test_input: str) -> None:
    assert parse_path_data(test_input) == []


@pytest.mark.parametrize(
    ("test_input", "expected"),
    [
        ("M1e-5 2", Move(1e-5, 2)),
        ("M1e2-3", Move(100, -3)),
        ("M.5.5", None),
        ("M+1 +2", Move(1, 2)),
        ("M5. 6", Move(5, 6)),
        ("Mnan 1", None),
        ("Minf 1", None),
        ("M1_0 1", None),
    ],
)
def test_numbers(test_input: str, expected: Move | None) -> None:
    segments = parse_path_data(test_input)
    assert segments == ([] if expected is None else [expected])


def test_order_is_preserved() -> None:
    d = "M1 1 L2 2 H3 V4 C5 5 6 6 7 7 Z m1 1 l2 2"
    segments = parse_path_data(d)
    letters = [x.letter for x in segments]
    assert letters == ["M", "L", "H", "V", "C", "Z", "m", "l"]


@pytest.mark.parametrize(
    "test_input",
    ["M0 0 L1", "L1 2 3 H V1 C1 2 3", "M1 2 L3 4 Z Z", "Mx 1 H2 V"],
)
def test_segment_count_is_bounded(test_input: str) -> None:
    letters = sum(test_input.count(x) for x in "MmLlHhVvCcZz")
    assert len(parse_path_data(test_input)) <= letters


def test_decode_command() -> None:
    assert decode_command(RawCommand(CommandKind.LINE_V, " 3 ", absolute=False)) == Ok(
        LineV(3, absolute=False)
    )
    assert decode_command(RawCommand(CommandKind.CLOSE_PATH, "", absolute=True)) == Ok(
        ClosePath()
    )


def test_decode_path_data_keeps_skipped() -> None:
    decoded = decode_path_data("M0 0 L5 C1 2 3 4 5 x")
    assert decoded[0] == Ok(Move(0, 0))
    assert isinstance(decoded[1], Skipped)
    assert decoded[1].reason == "expected 2 values, got 1"
    assert isinstance(decoded[2], Skipped)
    assert decoded[2].reason == "invalid number 'x'"


def test_skipped_commands_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="svg_scene.path_data.parser"):
        parse_path_data("M0 0 L5")
    assert "Skipping path command LINE_TO" in caplog.text


def test_strict() -> None:
    with pytest.raises(PathDataError, match="2 path command") as excinfo:
        parse_path_data("M0 0 L5 H x Z", strict=True)

    assert [x.command.kind for x in excinfo.value.skipped] == [
        CommandKind.LINE_TO,
        CommandKind.LINE_H,
    ]


def test_strict_accepts_clean_path() -> None:
    d = " M0 0 L1 1 Z M2 2 L3 3 z "
    assert parse_path_data(d, strict=True) == parse_path_data(d)


def test_strict_rejects_text_after_close() -> None:
    with pytest.raises(PathDataError, match="no command letter"):
        parse_path_data("M0 0 Z 1 1", strict=True)


def test_segment_properties() -> None:
    assert CubicCurve(1, 2, 3, 4, 5, 6).values == (1, 2, 3, 4, 5, 6)
    assert LineH(3, absolute=False).letter == "h"
    assert ClosePath().values == ()
    assert ClosePath().letter == "Z"


def test_serialize() -> None:
    segments = parse_path_data("M10,20 l-1.5-2 h.5 V3 c1 2 3 4 5 6 z")
    assert serialize_path_data(segments) == "M10 20 l-1.5 -2 h0.5 V3 c1 2 3 4 5 6 Z"


@pytest.mark.parametrize(
    "test_input",
    [
        "M1-2L3-4",
        "m0.25,0.5 l-1e-5 2 h3 v-4 z",
        "M 10 10 C 20 20, 40 20, 50 10 Z",
        "M0 0H10V-5C1 2 3 4 5 6h1v2c-1-2-3-4-5-6Z",
    ],
)
def test_serialize_round_trip(test_input: str) -> None:
    segments = parse_path_data(test_input)
    assert parse_path_data(serialize_path_data(segments)) == segments
