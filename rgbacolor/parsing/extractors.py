"""
Strategies for pulling the raw numeric parts out of CSS color functions.

An extractor only finds the parts; it does not turn them into numbers or
colors. ``None`` means the text does not look like the requested notation.
"""
from __future__ import annotations
import re
from abc import ABC, abstractmethod
from typing import Optional, Tuple

Parts = Optional[Tuple[str, ...]]


class PartsExtractor(ABC):

    @abstractmethod
    def rgb_parts(self, text: str) -> Parts:
        """Three parts of ``rgb(r, g, b)``."""

    @abstractmethod
    def rgba_parts(self, text: str) -> Parts:
        """Four parts of ``rgba(r, g, b, a)``."""

    @abstractmethod
    def hsl_parts(self, text: str) -> Parts:
        """Three parts of ``hsl(h, s%, l%)``."""

    @abstractmethod
    def hsla_parts(self, text: str) -> Parts:
        """Four parts of ``hsla(h, s%, l%, a)``."""


_INT = r"([0-9]+)"
_FLOAT = r"([0-9]*\.?[0-9]+)"


def _function_pattern(name: str, *groups: str) -> re.Pattern:
    body = r".*,\s*".join(groups)
    return re.compile(rf"{name}\s*\(\s*{body}.*\)", re.IGNORECASE)


class RegexPartsExtractor(PartsExtractor):
    """
    Browser-style extraction: one regular expression per notation.

    Anything after a number up to the next comma (units, ``%``) is ignored.
    """

    RGB = _function_pattern("rgb", _INT, _INT, _INT)
    RGBA = _function_pattern("rgba", _INT, _INT, _INT, _FLOAT)
    HSL = _function_pattern("hsl", _INT, _INT, _INT)
    HSLA = _function_pattern("hsla", _INT, _INT, _INT, _FLOAT)

    @staticmethod
    def _groups(pattern: re.Pattern, text: str) -> Parts:
        match = pattern.search(text)
        return match.groups() if match else None

    def rgb_parts(self, text: str) -> Parts:
        return self._groups(self.RGB, text)

    def rgba_parts(self, text: str) -> Parts:
        return self._groups(self.RGBA, text)

    def hsl_parts(self, text: str) -> Parts:
        return self._groups(self.HSL, text)

    def hsla_parts(self, text: str) -> Parts:
        return self._groups(self.HSLA, text)


class SplitPartsExtractor(PartsExtractor):
    """
    Plain string splitting: the text between the first ``(`` and the last
    ``)`` split on commas. The arity is checked, the parts are not.
    """

    @staticmethod
    def _split(text: str, name: str, arity: int) -> Parts:
        head, sep, rest = text.partition("(")
        if not sep or head.strip().lower() != name:
            return None
        inner, close, _ = rest.rpartition(")")
        if not close:
            return None
        parts = tuple(part.strip() for part in inner.split(","))
        return parts if len(parts) == arity else None

    def rgb_parts(self, text: str) -> Parts:
        return self._split(text, "rgb", 3)

    def rgba_parts(self, text: str) -> Parts:
        return self._split(text, "rgba", 4)

    def hsl_parts(self, text: str) -> Parts:
        return self._split(text, "hsl", 3)

    def hsla_parts(self, text: str) -> Parts:
        return self._split(text, "hsla", 4)
