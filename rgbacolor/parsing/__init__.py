from .extractors import PartsExtractor, RegexPartsExtractor, SplitPartsExtractor
from .parser import (
    ColorParser,
    ColorParseWarning,
    DEFAULT_PARSER,
    parse_color,
    parse_int,
    parse_float,
)

__all__ = [
    "PartsExtractor",
    "RegexPartsExtractor",
    "SplitPartsExtractor",
    "ColorParser",
    "ColorParseWarning",
    "DEFAULT_PARSER",
    "parse_color",
    "parse_int",
    "parse_float",
]
