"""
Utility functions for character values, range parsing and id formatting.
"""

import math
import re
from typing import Optional, Tuple

from .config import BASE_RANGE, OUTPUT_PRECISION

_UPPER_A = ord('A')
_LOWER_A = ord('a')

# Accepted number syntax for range bounds, mirroring C strtod()
_DECIMAL_PATTERN = re.compile(r"""
    [+-]?
    (?: \d+\.?\d* | \.\d+ )     # mantissa
    (?: [eE][+-]?\d+ )?         # optional exponent
    """, re.VERBOSE | re.ASCII)
_HEX_PATTERN = re.compile(r"""
    [+-]?0[xX]
    (?: [0-9a-fA-F]+\.?[0-9a-fA-F]* | \.[0-9a-fA-F]+ )
    (?: [pP][+-]?\d+ )?
    """, re.VERBOSE | re.ASCII)
_SPECIAL_PATTERN = re.compile(r"[+-]?(?:infinity|inf|nan)", re.IGNORECASE | re.ASCII)
_C_WHITESPACE = " \t\n\v\f\r"


class RangeParseError(ValueError):
    """Raised when range or bound text cannot be parsed."""


def letter_index(byte: int) -> Optional[int]:
    """Return the 0-based alphabet position of an ASCII letter byte.

    Args:
        byte: Byte value (0-255)

    Returns:
        Optional[int]: 0 for 'A'/'a' up to 25 for 'Z'/'z', None otherwise
    """
    if _UPPER_A <= byte < _UPPER_A + 26:
        return byte - _UPPER_A
    if _LOWER_A <= byte < _LOWER_A + 26:
        return byte - _LOWER_A
    return None


def standard_char_value(byte: int) -> int:
    """Value of a character in the 27-symbol alphabet (non-letter 0, A..Z 1..26)."""
    index = letter_index(byte)
    return 0 if index is None else index + 1


def stretch_char_value(byte: int) -> int:
    """Value of a leading character in the 26-symbol alphabet (A..Z 0..25).

    Non-letters share the value of 'A'.
    """
    index = letter_index(byte)
    return 0 if index is None else index


def parse_bound(text: str) -> Tuple[float, str]:
    """Parse a leading floating-point number from text the way strtod does.

    Args:
        text: Text starting with a number, optionally preceded by whitespace

    Returns:
        Tuple[float, str]: Parsed value and the unparsed remainder

    Raises:
        RangeParseError: If no number is present, the number is NaN, or the
            value does not fit in a double
    """
    stripped = text.lstrip(_C_WHITESPACE)
    hex_match = _HEX_PATTERN.match(stripped)
    if hex_match:
        number_text = hex_match.group()
        try:
            value = float.fromhex(number_text)
        except OverflowError as e:
            raise RangeParseError(f"bound out of range: {number_text!r}") from e
    else:
        match = _SPECIAL_PATTERN.match(stripped) or _DECIMAL_PATTERN.match(stripped)
        if not match:
            raise RangeParseError(f"expected a number, got {text!r}")
        number_text = match.group()
        try:
            value = float(number_text)
        except (ValueError, OverflowError) as e:
            raise RangeParseError(f"invalid number {number_text!r}") from e

    if math.isnan(value):
        raise RangeParseError(f"bound is not a number: {number_text!r}")
    if math.isinf(value) and 'inf' not in number_text.lower():
        raise RangeParseError(f"bound out of range: {number_text!r}")
    if value == 0.0 and _has_nonzero_mantissa(number_text):
        raise RangeParseError(f"bound out of range: {number_text!r}")

    return value, stripped[len(number_text):]


def _has_nonzero_mantissa(number_text: str) -> bool:
    text = number_text.lstrip('+-')
    if text[:2].lower() == '0x':
        mantissa = re.split(r"[pP]", text[2:])[0]
        return re.search(r"[1-9a-fA-F]", mantissa) is not None
    mantissa = re.split(r"[eE]", text)[0]
    return re.search(r"[1-9]", mantissa) is not None


def parse_range(text: str) -> Tuple[float, float]:
    """Parse range text of the form ``<lower>,<upper>``.

    Either number may be omitted, defaulting to the base range bound; the
    comma may not.

    Args:
        text: Range specification, e.g. "10,20", ",5" or "3,"

    Returns:
        Tuple[float, float]: (lower, upper)

    Raises:
        RangeParseError: If the comma is missing or a bound is malformed
    """
    lower, upper = BASE_RANGE.lower, BASE_RANGE.upper
    rest = text
    if not rest.startswith(','):
        lower, rest = parse_bound(rest)
        if not rest.startswith(','):
            raise RangeParseError(f"expected ',' in range {text!r}")
    rest = rest[1:]
    if rest:
        upper, rest = parse_bound(rest)
        if rest:
            raise RangeParseError(f"unexpected text {rest!r} in range {text!r}")
    return lower, upper


def format_id(value: float, precision: int = OUTPUT_PRECISION) -> str:
    """Format an id value in fixed-point notation."""
    return f"{value:.{precision}f}"
