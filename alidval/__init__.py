"""
Alphabetical Id Values for Text Strings
=======================================

This package maps text strings onto deterministic real numbers ordered by
their leading alphabetic content, for use as sort keys or for alphabetical
sharding, and optionally remaps them onto a chosen numeric range.

Main Components
--------------
- AlphabeticalIdEncoder: Core encoder mapping strings into [0.0, 1.0]
- RangeScaler: Linear remapping of ids onto a target range
- EncoderConfig / ScaleRange / RunConfig: Immutable configuration
- AlphabeticalIdEvaluator: Order and distribution evaluation framework

Example
-------
>>> from alidval import AlphabeticalIdEncoder, RangeScaler, ScaleRange
>>> encoder = AlphabeticalIdEncoder()
>>> string_id = encoder.encode("Hello")
>>> RangeScaler(ScaleRange(10.0, 20.0)).scale(string_id)
"""

from alidval.config import BASE_RANGE, BaseRange, EncoderConfig, RunConfig, ScaleRange
from alidval.encoder import AlphabeticalIdEncoder
from alidval.scaler import RangeScaler, scale_id
from alidval.evaluation import (
    EvaluationConfig,
    AlphabeticalIdEvaluator,
    SyntheticStringDataset,
)

__version__ = "1.0.0"

__all__ = [
    "AlphabeticalIdEncoder",
    "RangeScaler",
    "scale_id",
    "EncoderConfig",
    "ScaleRange",
    "BaseRange",
    "BASE_RANGE",
    "RunConfig",
    "EvaluationConfig",
    "AlphabeticalIdEvaluator",
    "SyntheticStringDataset",
]
