# No dependencies
from enum import Enum


class Notation(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"


class DefaultColor(str, Enum):
    """Color handed back by the parser when text cannot be understood."""
    # general-purpose variant
    BLACK = "black"
    # client-facing variant
    WHITE = "white"


default_color_components = {
    DefaultColor.BLACK: (0, 0, 0, 1.0),
    DefaultColor.WHITE: (255, 255, 255, 1.0),
}
