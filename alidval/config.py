"""
Configuration module for the alphabetical id system.
Provides frozen dataclass-based configurations for the encoder and scaler.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

DIVISOR_BASE = 27.0  # 26 letters + 1 shared non-letter symbol
ALPHABET_SIZE = 26
OUTPUT_PRECISION = 20


@dataclass(frozen=True)
class EncoderConfig:
    """Configuration settings for the alphabetical id encoder.

    Attributes:
        first_char_alphabetic_stretch (bool): Give the first character a
            26-symbol place value, so letter-initial strings fill the whole
            output range and a leading non-letter counts as 'A'
    """
    first_char_alphabetic_stretch: bool = False


@dataclass(frozen=True)
class BaseRange:
    """The encoder's native output interval."""
    lower: float = 0.0
    upper: float = 1.0

    def __post_init__(self):
        if not self.lower < self.upper:
            raise ValueError(
                f"base range lower bound ({self.lower}) must be below "
                f"upper bound ({self.upper})"
            )

    @property
    def width(self) -> float:
        return self.upper - self.lower


BASE_RANGE = BaseRange()


@dataclass(frozen=True)
class ScaleRange:
    """Target interval for remapping id values.

    Attributes:
        lower (float): Value that the lowest id maps onto
        upper (float): Value that the highest id maps onto

    If ``lower`` exceeds ``upper`` the numbering order is reversed. Equal
    bounds are allowed and map every id onto that value.
    """
    lower: float = BASE_RANGE.lower
    upper: float = BASE_RANGE.upper

    def __post_init__(self):
        """Validate bounds after initialization."""
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise ValueError(
                f"scale bounds must be numbers, got ({self.lower}, {self.upper})"
            )

    @property
    def reversed(self) -> bool:
        return self.lower > self.upper

    @property
    def is_degenerate(self) -> bool:
        return self.lower == self.upper


@dataclass(frozen=True)
class RunConfig:
    """Complete configuration for one invocation, fixed before encoding.

    Attributes:
        encoder (EncoderConfig): Encoding mode
        scale (Optional[ScaleRange]): Target range, or None to leave ids unscaled
    """
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    scale: Optional[ScaleRange] = None

    @property
    def scaling_enabled(self) -> bool:
        return self.scale is not None
