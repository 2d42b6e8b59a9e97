"""
Bounds checks shared by the color value and the HSL engine.

Nothing here raises for numeric input: out-of-range values are clamped
(or wrapped, for hue) into their valid range. NaN goes to the lower bound.
"""
import math

from boundednumbers import clamp

from ..types.color_types import Scalar, RGB_MAX, HUE_360, SL_MAX, ALPHA_MAX


def _clamp_float(value: Scalar, upper: float) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, upper))


def rgb_check(value: Scalar) -> int:
    """Clamp into [0, 255] and truncate to int."""
    return int(_clamp_float(value, RGB_MAX))


def hue_check(hue: Scalar) -> float:
    """Wrap hue into [0, 360); negative values wrap forward, inf and NaN give 0."""
    hue = float(hue)
    if not math.isfinite(hue):
        return 0.0
    wrapped = hue % HUE_360
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if wrapped == HUE_360 else wrapped


def sl_check(value: Scalar) -> float:
    """Clamp a saturation or lightness percentage into [0, 100]."""
    return _clamp_float(value, SL_MAX)


def alpha_check(alpha: Scalar) -> float:
    return _clamp_float(alpha, ALPHA_MAX)


def in_sl_range(value: Scalar) -> bool:
    return sl_check(value) == value
