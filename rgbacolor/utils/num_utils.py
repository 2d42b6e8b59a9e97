import math
import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity (CSS / JS ``Math.round``)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized ``round_half_up``; returns an int64 array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(np.int64)
