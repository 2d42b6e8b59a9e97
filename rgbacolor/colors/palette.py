from __future__ import annotations
from typing import List

from ..types.color_types import Scalar
from .rgba import RgbaColor

# A window of 80 shifted by 10 keeps the palette away from black and white.
LIGHTNESS_WINDOW = 80
LIGHTNESS_OFFSET = 10


def spread_in_range(member: Scalar, count: int, window: int = LIGHTNESS_WINDOW, offset: int = LIGHTNESS_OFFSET) -> List[float]:
    """
    Evenly spaced values in ``[offset, window + offset)`` lined up with ``member``.

    The first value is the smallest one that sits a whole number of
    intervals (``window // count``, at least 1) away from ``member + offset``.
    Values are returned in increasing order of their index, never re-sorted.

    Args:
        member: Value the spread is aligned with
        count: Number of values
        window: Width of the range the values are spread over
        offset: Distance of the range from 0

    Returns:
        List of ``count`` floats
    """
    if count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")
    # more values than the window is wide: step by 1 and let lightness clamp
    interval = max(window // count, 1)

    low = (member + offset) % interval
    if low == 0 and member == window:
        low += interval

    return [float(low + interval * i + offset) for i in range(count)]


def palette_vary_lightness(color: RgbaColor, count: int) -> List[RgbaColor]:
    """``count`` colors that differ from ``color`` only in lightness."""
    return [color.with_lightness(value) for value in spread_in_range(color.lightness, count)]


RgbaColor.get_palette_vary_lightness = palette_vary_lightness
