from __future__ import annotations

import math

import pytest

from api.donut_runner.duration import format_duration, parse_duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5s", 5.0),
        ("300ms", 0.3),
        ("1m30s", 90.0),
        ("1.5h", 5400.0),
        ("2h45m", 9900.0),
        ("250us", 250e-6),
        ("250µs", 250e-6),
        ("250μs", 250e-6),
        ("10ns", 10e-9),
        (".5s", 0.5),
        ("0", 0.0),
        ("7", 7.0),
        ("2.5", 2.5),
        ("+3s", 3.0),
        ("-1m", -60.0),
        (" 4s ", 4.0),
    ],
)
def test_parse_duration(text: str, expected: float) -> None:
    assert parse_duration(text) == pytest.approx(expected)


@pytest.mark.parametrize("value, expected", [(3, 3.0), (0.25, 0.25), (-1, -1.0)])
def test_parse_duration_numbers(value, expected) -> None:
    assert parse_duration(value) == expected


@pytest.mark.parametrize(
    "bad", ["", "   ", "s", "5x", "5 s", "1m 30s", "ms5", "--5s", "nan", "inf", "5s!", "+"]
)
def test_parse_duration_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValueError, match="invalid duration"):
        parse_duration(bad)


@pytest.mark.parametrize("bad", [True, math.inf, math.nan])
def test_parse_duration_rejects_non_finite_and_bool(bad) -> None:
    with pytest.raises(ValueError):
        parse_duration(bad)


def test_format_duration() -> None:
    assert format_duration(5.0) == "5s"
    assert format_duration(0.03) == "30ms"
    assert format_duration(0.0) == "0s"
