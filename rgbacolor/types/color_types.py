from __future__ import annotations
from enum import IntEnum
from typing import NamedTuple, Tuple

Scalar = int | float
RgbTuple = Tuple[int, int, int]
RgbaTuple = Tuple[int, int, int, float]

RGB_MAX = 255
HUE_360 = 360
SL_MAX = 100.0
ALPHA_MAX = 1.0


class HslTriple(NamedTuple):
    """
    Hue [0, 360), saturation [0, 100] and lightness [0, 100].

    Never mutated; use ``_replace`` to derive a new triple.
    """
    hue: float
    saturation: float
    lightness: float


class HslChannel(IntEnum):
    """Index of a component inside an ``HslTriple``."""
    HUE = 0
    SATURATION = 1
    LIGHTNESS = 2

    @property
    def field(self) -> str:
        return HslTriple._fields[self.value]
