"""
RGB <-> HSL Conversions
=======================

Scalar functions work on single colors; ``np_`` functions work on arrays
whose last dimension holds the three channels.

RGB -> HSL:
    rgb_to_hsl(r, g, b)
        0-255 channels to an ``HslTriple``
    np_rgb_to_hsl(rgb)
        Vectorized, (..., 3) -> (..., 3)

HSL -> RGB:
    hsl_to_rgb(h, s, l)
        Hue in degrees, saturation/lightness in percent, to 0-255 channels
    np_hsl_to_rgb(hsl)
        Vectorized, (..., 3) -> (..., 3) int64

Bounds:
    rgb_check, hue_check, sl_check, alpha_check
        Clamp (or wrap, for hue) a value into its valid range

Examples
--------
>>> from rgbacolor.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0)
HslTriple(hue=0.0, saturation=100.0, lightness=50.0)
>>> hsl_to_rgb(120, 100, 50)
(0, 255, 0)
"""

from .bounds import rgb_check, hue_check, sl_check, alpha_check, in_sl_range
from .hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    hue_to_channel,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)

__all__ = [
    # bounds
    'rgb_check',
    'hue_check',
    'sl_check',
    'alpha_check',
    'in_sl_range',

    # RGB <-> HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hue_to_channel',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',
]
