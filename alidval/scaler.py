"""
Range scaling of alphabetical id values.
"""

from typing import Optional

import numpy as np

from .config import BASE_RANGE, BaseRange, ScaleRange


class RangeScaler:
    """Linearly remap ids from the base range onto a target range.

    A target whose lower bound exceeds its upper bound reverses the
    numbering order: the lowest id maps onto ``target.lower`` (the larger
    value) and the highest onto ``target.upper``. Without a target, ids pass
    through unchanged.

    Attributes:
        target (Optional[ScaleRange]): Range to map onto, or None
        base (BaseRange): Range the ids are produced in
    """

    def __init__(
        self,
        target: Optional[ScaleRange] = None,
        base: BaseRange = BASE_RANGE
    ):
        self.target = target
        self.base = base

    @property
    def enabled(self) -> bool:
        return self.target is not None

    def _position(self, string_id):
        return (string_id - self.base.lower) / self.base.width

    def scale(self, string_id: float) -> float:
        """
        Translate an id value from the base range to the target range.

        Args:
            string_id: Id value in the base range

        Returns:
            float: The scaled id, or the input if scaling is disabled
        """
        if self.target is None:
            return string_id
        lower, upper = self.target.lower, self.target.upper
        if lower > upper:
            return (1.0 - self._position(string_id)) * (lower - upper) + upper
        return self._position(string_id) * (upper - lower) + lower

    def scale_array(self, ids: np.ndarray) -> np.ndarray:
        """
        Vectorised form of :meth:`scale`.

        Args:
            ids: Id values [batch_size]

        Returns:
            np.ndarray: Scaled ids [batch_size], float64
        """
        ids = np.asarray(ids, dtype=np.float64)
        if self.target is None:
            return ids.copy()
        lower, upper = self.target.lower, self.target.upper
        if lower > upper:
            return (1.0 - self._position(ids)) * (lower - upper) + upper
        return self._position(ids) * (upper - lower) + lower


def scale_id(string_id: float, lower: float, upper: float) -> float:
    """Scale a single id onto ``[lower, upper]`` (reversed if lower > upper)."""
    return RangeScaler(ScaleRange(lower, upper)).scale(string_id)
