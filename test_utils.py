import math

import pytest

from alidval.utils import RangeParseError, format_id, parse_bound, parse_range


@pytest.mark.parametrize("text, expected", [
    ("10,20", (10.0, 20.0)),
    ("5,1", (5.0, 1.0)),
    (",5", (0.0, 5.0)),
    ("3,", (3.0, 1.0)),
    (",", (0.0, 1.0)),
    ("-2.5,1e3", (-2.5, 1000.0)),
    (" 1, 2", (1.0, 2.0)),
    ("0x10,0x1.8p1", (16.0, 3.0)),
    (".5,1.", (0.5, 1.0)),
    ("-inf,Infinity", (-math.inf, math.inf)),
    ("0e7,0", (0.0, 0.0)),
])
def test_parse_range(text, expected):
    assert parse_range(text) == expected


@pytest.mark.parametrize("text", [
    "",
    "10",
    "10;20",
    "abc,1",
    "1,abc",
    "1,2x",
    "1 ,2",
    "nan,1",
    "1,NaN",
    "1e999,2",
    "1,1e-999",
    "-,1",
    "1,,2",
    "0x1p99999,1",
    "1,-0x1.8p5000",
    "\u0661,2",
    "1,\u0662",
    "\u00a01,2",
])
def test_parse_range_rejects_malformed_text(text):
    with pytest.raises(RangeParseError):
        parse_range(text)


def test_range_parse_error_is_value_error():
    assert issubclass(RangeParseError, ValueError)


def test_parse_bound_returns_remainder():
    assert parse_bound("1.5,2") == (1.5, ",2")
    assert parse_bound("  -3") == (-3.0, "")
    assert parse_bound("0x") == (0.0, "x")


def test_format_id():
    assert format_id(0.0) == "0.00000000000000000000"
    assert format_id(0.5) == "0.50000000000000000000"
    assert format_id(10.25) == "10.25000000000000000000"
    assert format_id(0.5, precision=3) == "0.500"
