"""rgbacolor: an immutable rgba color with HSL adjustments, CSS parsing and formatting."""

from .colors import RgbaColor, adjust_with_fallback, palette_vary_lightness, spread_in_range
from .formatting import (
    to_hex,
    to_rgb,
    to_rgba,
    to_hsl,
    to_hsla,
    format_color,
    opacity_properties,
)
from .parsing import (
    ColorParser,
    ColorParseWarning,
    PartsExtractor,
    RegexPartsExtractor,
    SplitPartsExtractor,
    DEFAULT_PARSER,
    parse_color,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)
from .types import HslTriple, HslChannel, Notation, DefaultColor

__version__ = "1.0.0"

__all__ = [
    # color value
    "RgbaColor",
    "HslTriple",
    "HslChannel",
    "adjust_with_fallback",
    "palette_vary_lightness",
    "spread_in_range",
    # formatting
    "Notation",
    "to_hex",
    "to_rgb",
    "to_rgba",
    "to_hsl",
    "to_hsla",
    "format_color",
    "opacity_properties",
    # parsing
    "ColorParser",
    "ColorParseWarning",
    "PartsExtractor",
    "RegexPartsExtractor",
    "SplitPartsExtractor",
    "DefaultColor",
    "DEFAULT_PARSER",
    "parse_color",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    # version
    "__version__",
]
