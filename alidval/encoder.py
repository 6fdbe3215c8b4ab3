"""
Main encoder module mapping text strings onto alphabetical id values.
Treats each string as a base-27 fraction read from its first character,
producing a real number in the encoder's base range.
"""

from typing import Iterable, Optional, Union

import numpy as np

from .config import ALPHABET_SIZE, BASE_RANGE, DIVISOR_BASE, EncoderConfig
from .utils import standard_char_value, stretch_char_value

TextInput = Optional[Union[str, bytes, bytearray]]


def to_bytes(text: TextInput) -> bytes:
    """Convert encoder input into the byte sequence that gets encoded.

    Strings are UTF-8 encoded so that every non-ASCII byte occupies its own
    position, as it would in a raw command-line argument.

    Raises:
        TypeError: If the input type is not supported
    """
    if text is None:
        return b''
    if isinstance(text, str):
        return text.encode('utf-8', 'surrogateescape')
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"Unsupported input type: {type(text)}")


class AlphabeticalIdEncoder:
    """
    Encoder for case-insensitive alphabetical id values.

    Each character is assigned a value from 0 (non-letter) or 1 ('A') to
    26 ('Z') and divided by its place value, which starts at 27 and is
    multiplied by 27 for every further character. The quotients are summed.

    With ``first_char_alphabetic_stretch`` the first character instead gets
    a value from 0 ('A' and non-letters) to 25 ('Z') over a place value of
    26, and the following place values are 26 * 27, 26 * 27**2, ...

    Precision is limited to about the first 11 characters; the twelfth is
    only partially distinguished and later ones leave the result unchanged.
    """

    def __init__(self, config: EncoderConfig = EncoderConfig()):
        """
        Initialize the AlphabeticalIdEncoder.

        Args:
            config: Configuration object selecting the encoding mode
        """
        self.config = config

    @property
    def stretch(self) -> bool:
        return self.config.first_char_alphabetic_stretch

    def encode(self, text: TextInput) -> float:
        """
        Calculate the alphabetical id value of a string.

        Args:
            text: String or byte string to encode; None encodes as empty

        Returns:
            float: Id value in [0.0, 1.0]

        Raises:
            TypeError: If input type is not supported
        """
        data = to_bytes(text)
        string_id = BASE_RANGE.lower
        divisor = DIVISOR_BASE
        position = 0

        if self.stretch and data:
            divisor = float(ALPHABET_SIZE)
            string_id += stretch_char_value(data[0]) / divisor
            divisor *= DIVISOR_BASE
            position = 1

        for byte in data[position:]:
            string_id += standard_char_value(byte) / divisor
            divisor *= DIVISOR_BASE

        return string_id

    def batch_encode(self, texts: Iterable[TextInput]) -> np.ndarray:
        """
        Encode a batch of strings.

        Args:
            texts: Strings to encode

        Returns:
            np.ndarray: Id values [batch_size], float64
        """
        return np.fromiter(
            (self.encode(text) for text in texts),
            dtype=np.float64
        )
