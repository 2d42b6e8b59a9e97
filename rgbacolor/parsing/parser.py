from __future__ import annotations
import re
import warnings
from typing import Optional, Union

from ..colors.rgba import RgbaColor
from ..types.notation import DefaultColor, default_color_components
from .extractors import PartsExtractor, RegexPartsExtractor

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_LEADING_HEX = re.compile(r"\s*([0-9a-fA-F]+)")


class ColorParseWarning(UserWarning):
    """Text could not be parsed as a color; the parser's default was returned."""


def parse_int(text: str, base: int = 10) -> int:
    """Leading integer of ``text``, or 0 when there is none (``parseInt(v) || 0``)."""
    pattern = _LEADING_HEX if base == 16 else _LEADING_INT
    match = pattern.match(text)
    return int(match.group(1), base) if match else 0


def parse_float(text: str) -> float:
    """Leading real number of ``text``, or 0.0 when there is none (``parseFloat(v) || 0``)."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_hex_digits(digits: str) -> int:
    value = parse_int(digits, 16)
    # #abc is #aabbcc
    return 16 * value + value if len(digits) == 1 else value


class ColorParser:
    """
    Turns hex, rgb, rgba, hsl and hsla strings into ``RgbaColor``.

    Malformed text never raises: the configured default color is returned
    and a ``ColorParseWarning`` is issued.

    Args:
        extractor: Strategy that finds the numeric parts of rgb/hsl functions.
            Defaults to ``RegexPartsExtractor``.
        default: Color returned for text that cannot be parsed, either a
            ``DefaultColor`` or any ``RgbaColor``.
    """

    def __init__(
        self,
        extractor: Optional[PartsExtractor] = None,
        default: Union[DefaultColor, str, RgbaColor] = DefaultColor.BLACK,
    ) -> None:
        self.extractor = extractor if extractor is not None else RegexPartsExtractor()
        if isinstance(default, RgbaColor):
            self.default = default
        else:
            self.default = RgbaColor(*default_color_components[DefaultColor(default)])

    def __repr__(self) -> str:
        return f"ColorParser(extractor={type(self.extractor).__name__}(), default={self.default!r})"

    def _fallback(self, text: str, notation: str, stacklevel: int) -> RgbaColor:
        # stacklevel 1 is the caller of the public method that gave up
        warnings.warn(
            f"Could not parse {text!r} as {notation}; using default color {self.default.to_hex()}",
            ColorParseWarning,
            stacklevel=stacklevel + 2,
        )
        return self.default

    def parse(self, text: str, stacklevel: int = 1) -> RgbaColor:
        """
        Parse a color in any supported notation.

        ``stacklevel`` works as in ``warnings.warn``: wrappers pass 2 so a
        ``ColorParseWarning`` points at their own caller.
        """
        if not isinstance(text, str):
            raise TypeError(f"Color text must be a str, got {type(text).__name__}")
        stripped = text.strip()
        prefix = stripped[:4].lower()

        if prefix.startswith("#"):
            return self.parse_hex(stripped, stacklevel + 1)
        if prefix == "rgba":
            return self.parse_rgba(stripped, stacklevel + 1)
        if prefix.startswith("rgb"):
            return self.parse_rgb(stripped, stacklevel + 1)
        if prefix == "hsla":
            return self.parse_hsla(stripped, stacklevel + 1)
        if prefix.startswith("hsl"):
            return self.parse_hsl(stripped, stacklevel + 1)
        return self._fallback(text, "a color", stacklevel)

    def parse_hex(self, text: str, stacklevel: int = 1) -> RgbaColor:
        """``#rgb`` or ``#rrggbb``."""
        hex_text = text.strip()
        if not hex_text.startswith("#"):
            return self._fallback(text, "hex", stacklevel)

        digits = hex_text[1:]
        if len(digits) == 3:
            width = 1
        elif len(digits) == 6:
            width = 2
        else:
            return self._fallback(text, "hex", stacklevel)

        channels = [_parse_hex_digits(digits[i:i + width]) for i in range(0, len(digits), width)]
        return RgbaColor(*channels)

    def parse_rgb(self, text: str, stacklevel: int = 1) -> RgbaColor:
        parts = self.extractor.rgb_parts(text)
        if parts is None or len(parts) != 3:
            return self._fallback(text, "rgb", stacklevel)
        return RgbaColor(*(parse_int(p) for p in parts))

    def parse_rgba(self, text: str, stacklevel: int = 1) -> RgbaColor:
        parts = self.extractor.rgba_parts(text)
        if parts is None or len(parts) != 4:
            return self._fallback(text, "rgba", stacklevel)
        r, g, b, a = parts
        return RgbaColor(parse_int(r), parse_int(g), parse_int(b), parse_float(a))

    def parse_hsl(self, text: str, stacklevel: int = 1) -> RgbaColor:
        """CSS3 hsl, e.g. ``hsl(25, 100%, 80%)``."""
        parts = self.extractor.hsl_parts(text)
        if parts is None or len(parts) != 3:
            return self._fallback(text, "hsl", stacklevel)
        return RgbaColor.from_hsl(*(parse_int(p) for p in parts))

    def parse_hsla(self, text: str, stacklevel: int = 1) -> RgbaColor:
        """CSS3 hsla, e.g. ``hsla(25, 100%, 80%, 0.5)``."""
        parts = self.extractor.hsla_parts(text)
        if parts is None or len(parts) != 4:
            return self._fallback(text, "hsla", stacklevel)
        h, s, l, a = parts
        return RgbaColor.from_hsl(parse_int(h), parse_int(s), parse_int(l)).with_alpha(parse_float(a))


DEFAULT_PARSER = ColorParser()


def parse_color(text: str) -> RgbaColor:
    """Parse ``text`` with the module default parser (regex extraction, black default)."""
    return DEFAULT_PARSER.parse(text, stacklevel=2)
