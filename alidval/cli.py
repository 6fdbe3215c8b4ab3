"""
Command-line interface for calculating alphabetical id values.
"""

import sys
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from rich.console import Console

from .config import EncoderConfig, RunConfig, ScaleRange
from .encoder import AlphabeticalIdEncoder
from .scaler import RangeScaler
from .utils import RangeParseError, format_id, parse_range

console = Console(markup=False, highlight=False, soft_wrap=True, emoji=False)

HELP_TEXT = """\
usage: alidval [options] <string(s)>

    <string(s)> is one or more strings, for each of which an "alphabetical
    id value" will be produced independently.
        The algorithm is limited in precision to the first 11 characters
    of a string. It is case-insensitive. Further, it only recognizes English
    alphabet ASCII characters as being letters. By default, all other char-
    acters are treated as being identical, and jointly given priority before
    'A'.
        The output id value ranges from 0.0 to 1.0 by default.

    Options:
        -A  Make strings that begin with an alphabetical character fill up
            the whole output id range; other leading characters are made
            equal to 'A'.
        -r  Map the output id value onto a specified range. The range is
            specified in the format: <number>,<number>
                The numbers are the lower and upper bound, respectively; if
            omitted, the default for the number is used. If the lower bound
            exceeds the upper, the numbering order is reversed.
"""


class ArgumentCursor:
    """Pull-style reader over command-line tokens."""

    def __init__(self, args: Sequence[str]):
        self._args = list(args)
        self._index = 0

    def peek(self) -> Optional[str]:
        if self._index < len(self._args):
            return self._args[self._index]
        return None

    def consume(self) -> Optional[str]:
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def remaining(self) -> List[str]:
        return self._args[self._index:]


@dataclass
class ParseResult:
    """Outcome of parsing the command line.

    Attributes:
        config (Optional[RunConfig]): Configuration on success
        strings (List[str]): Strings to encode, in input order
        error (Optional[str]): Reason parsing failed, if it did
    """
    config: Optional[RunConfig] = None
    strings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.config is not None and bool(self.strings)


def _parse_option(token: str, cursor: ArgumentCursor, config: RunConfig) -> RunConfig:
    """Apply one option token (possibly several combined flags) to config.

    Raises:
        RangeParseError: If a flag is unknown or its argument is malformed
    """
    flags = token[1:]
    position = 0
    while position < len(flags):
        flag = flags[position]
        position += 1
        if flag == 'A':
            config = replace(config, encoder=EncoderConfig(first_char_alphabetic_stretch=True))
        elif flag == 'r':
            range_text = flags[position:]
            if not range_text:
                range_text = cursor.consume()
                if range_text is None:
                    raise RangeParseError("option -r requires an argument")
            lower, upper = parse_range(range_text)
            # the range argument ends the option token
            return replace(config, scale=ScaleRange(lower, upper))
        else:
            raise RangeParseError(f"unknown option -{flag}")
    return config


def parse_arguments(args: Sequence[str]) -> ParseResult:
    """
    Parse command-line arguments into a run configuration and input strings.

    Options are read while tokens begin with '-'; everything from the first
    other token on is taken as input strings.

    Args:
        args: Command-line arguments without the program name

    Returns:
        ParseResult: Configuration and strings, or the failure reason
    """
    cursor = ArgumentCursor(args)
    config = RunConfig()

    while True:
        token = cursor.peek()
        if token is None or not token.startswith('-'):
            break
        cursor.consume()
        try:
            config = _parse_option(token, cursor, config)
        except RangeParseError as e:
            return ParseResult(error=str(e))

    strings = cursor.remaining()
    if not strings:
        return ParseResult(config=config, error="no input strings")
    return ParseResult(config=config, strings=strings)


def print_help() -> None:
    """Print help/usage message."""
    console.print(HELP_TEXT)


def calculate_ids(strings: Sequence[str], config: RunConfig) -> List[float]:
    """Encode and, if configured, scale each string."""
    encoder = AlphabeticalIdEncoder(config.encoder)
    scaler = RangeScaler(config.scale)
    return [scaler.scale(encoder.encode(text)) for text in strings]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool.

    Any parse failure prints the usage text and still exits with status 0.
    """
    if argv is None:
        argv = sys.argv[1:]

    result = parse_arguments(argv)
    if not result.ok:
        print_help()
        return 0

    for string_id in calculate_ids(result.strings, result.config):
        console.print(format_id(string_id))
    return 0
