"""
rgbacolor Color Value
=====================

``RgbaColor`` is an immutable rgba color with HSL access.

Features
--------
- Immutable instances (frozen after initialization)
- Value clamping to valid ranges instead of errors
- Hue, saturation and lightness computed on demand
- HSL-space adjustments that keep alpha (``transforms``)
- Palettes that vary lightness only (``palette``)

Usage
-----
>>> from rgbacolor.colors import RgbaColor
>>> red = RgbaColor(255, 0, 0)
>>> red.hue, red.saturation, red.lightness
(0.0, 100.0, 50.0)
>>> red.complement().value
(0, 255, 255, 1.0)
>>> RgbaColor(255, 0, 0, 0.5).lighten(20).alpha
0.5

Notes
-----
- ``RgbaColor.from_hsl`` always returns an opaque color; transforms put the
  original alpha back themselves.
- Transform and palette functions are attached to ``RgbaColor`` when this
  package is imported.
"""

from .rgba import RgbaColor
from . import transforms
from . import palette
from .transforms import adjust_with_fallback, with_hsl
from .palette import palette_vary_lightness, spread_in_range


__all__ = [
    'RgbaColor',
    'adjust_with_fallback',
    'with_hsl',
    'palette_vary_lightness',
    'spread_in_range',
]
