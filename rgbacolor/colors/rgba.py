from __future__ import annotations
from typing import Callable, List, Optional, TYPE_CHECKING

from ..conversions import rgb_to_hsl, hsl_to_rgb, rgb_check, alpha_check
from ..types.color_types import HslTriple, RgbaTuple, Scalar

if TYPE_CHECKING:
    from ..parsing.parser import ColorParser
    from ..types.notation import Notation


class RgbaColor:
    """
    An rgba color with HSL access.

    Channels are ints in [0, 255], alpha is a float in [0, 1]. Out-of-range
    components are clamped on construction, never rejected. Instances are
    immutable; every adjustment returns a new color.

    >>> RgbaColor(-10, 300, 128, 1.5).value
    (0, 255, 128, 1.0)
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_is_frozen')  # prevents adding new attributes → immutability

    _is_frozen: bool   # unset until __init__ finishes

    # attached by .transforms
    with_hue:       Callable[[RgbaColor, Scalar], RgbaColor]
    with_saturation: Callable[[RgbaColor, Scalar], RgbaColor]
    with_lightness: Callable[[RgbaColor, Scalar], RgbaColor]
    adjust_hue:     Callable[[RgbaColor, Scalar], RgbaColor]
    lighten:        Callable[[RgbaColor, Scalar], RgbaColor]
    darken:         Callable[[RgbaColor, Scalar], RgbaColor]
    saturate:       Callable[[RgbaColor, Scalar], RgbaColor]
    desaturate:     Callable[[RgbaColor, Scalar], RgbaColor]
    opacify:        Callable[[RgbaColor, Scalar], RgbaColor]
    transparentize: Callable[[RgbaColor, Scalar], RgbaColor]
    complement:     Callable[[RgbaColor], RgbaColor]
    grayscale:      Callable[[RgbaColor], RgbaColor]
    inverse:        Callable[[RgbaColor], RgbaColor]
    lighten_or_darken:      Callable[[RgbaColor, Scalar, Scalar], RgbaColor]
    darken_or_lighten:      Callable[[RgbaColor, Scalar, Scalar], RgbaColor]
    saturate_or_desaturate: Callable[[RgbaColor, Scalar, Scalar], RgbaColor]
    desaturate_or_saturate: Callable[[RgbaColor, Scalar, Scalar], RgbaColor]
    # attached by .palette
    get_palette_vary_lightness: Callable[[RgbaColor, int], List[RgbaColor]]
    # attached by ..formatting
    to_hex:  Callable[[RgbaColor], str]
    to_rgb:  Callable[[RgbaColor], str]
    to_rgba: Callable[[RgbaColor], str]
    to_hsl:  Callable[[RgbaColor], str]
    to_hsla: Callable[[RgbaColor], str]
    format:  Callable[[RgbaColor, Notation], str]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar = 0, green: Scalar = 0, blue: Scalar = 0, alpha: Scalar = 1.0) -> None:
        self._r = rgb_check(red)
        self._g = rgb_check(green)
        self._b = rgb_check(blue)
        self._a = alpha_check(alpha)

        # no writes after this point
        super().__setattr__('_is_frozen', True)

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_hsl(cls, hue: Scalar, saturation: Scalar, lightness: Scalar) -> RgbaColor:
        """
        Create an opaque color from hue [0,360), saturation [0,100] and
        lightness [0,100]. Alpha is always 1 on this path.
        """
        return cls(*hsl_to_rgb(hue, saturation, lightness))

    @classmethod
    def from_hsl_triple(cls, triple: HslTriple) -> RgbaColor:
        """Convenience to get back to RGB from the triple returned by ``to_hsl_triple``."""
        return cls.from_hsl(*triple)

    @classmethod
    def parse(cls, text: str, parser: Optional[ColorParser] = None) -> RgbaColor:
        """Parse a hex, rgb, rgba, hsl or hsla string; malformed text gives the parser's default."""
        from ..parsing.parser import DEFAULT_PARSER  # local import to avoid cycles
        return (parser or DEFAULT_PARSER).parse(text, stacklevel=2)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def alpha(self) -> float:
        return self._a

    @property
    def value(self) -> RgbaTuple:
        return (self._r, self._g, self._b, self._a)

    def to_hsl_triple(self) -> HslTriple:
        """
        Hue [0,360), saturation [0,100] and lightness [0,100] of this color.

        For any color ``c``, ``RgbaColor.from_hsl_triple(c.to_hsl_triple())``
        has the same red, green and blue.
        """
        return rgb_to_hsl(self._r, self._g, self._b)

    @property
    def hue(self) -> float:
        return self.to_hsl_triple().hue

    @property
    def saturation(self) -> float:
        return self.to_hsl_triple().saturation

    @property
    def lightness(self) -> float:
        return self.to_hsl_triple().lightness

    # shorthand
    r = red
    g = green
    b = blue
    a = alpha
    h = hue
    s = saturation
    l = lightness

    # ------------------ COPIES ------------------
    def with_red(self, red: Scalar) -> RgbaColor:
        return self.__class__(red, self._g, self._b, self._a)

    def with_green(self, green: Scalar) -> RgbaColor:
        return self.__class__(self._r, green, self._b, self._a)

    def with_blue(self, blue: Scalar) -> RgbaColor:
        return self.__class__(self._r, self._g, blue, self._a)

    def with_alpha(self, alpha: Scalar) -> RgbaColor:
        return self.__class__(self._r, self._g, self._b, alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RgbaColor):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._r}, {self._g}, {self._b}, {self._a})"

    def __str__(self) -> str:
        return self.to_hex()
