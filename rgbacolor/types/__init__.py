from .color_types import HslTriple, HslChannel, Scalar, RgbTuple, RgbaTuple
from .notation import Notation, DefaultColor

__all__ = [
    "HslTriple",
    "HslChannel",
    "Scalar",
    "RgbTuple",
    "RgbaTuple",
    "Notation",
    "DefaultColor",
]
