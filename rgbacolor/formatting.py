"""Rendering of ``RgbaColor`` to CSS notations, plus CSS opacity properties."""
from __future__ import annotations
from typing import Callable, Dict

from .colors.rgba import RgbaColor
from .conversions import alpha_check
from .types.color_types import Scalar
from .types.notation import Notation
from .utils.num_utils import round_half_up


def _short_float(value: float) -> str:
    """Shortest text for ``value`` without float noise: ``0.3`` rather than ``0.30000000000000004``."""
    return repr(round(value, 6))


def to_hex(color: RgbaColor) -> str:
    """``#rrggbb``, lowercase and zero padded."""
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


def to_rgb(color: RgbaColor) -> str:
    return f"rgb({color.red},{color.green},{color.blue})"


def to_rgba(color: RgbaColor) -> str:
    return f"rgba({color.red},{color.green},{color.blue},{_short_float(color.alpha)})"


def _hsl_parts(color: RgbaColor) -> str:
    h, s, l = color.to_hsl_triple()
    return f"{round_half_up(h)},{round_half_up(s)}%,{round_half_up(l)}%"


def to_hsl(color: RgbaColor) -> str:
    """CSS3 hsl, e.g. ``hsl(120,100%,50%)``; components rounded to integers."""
    return f"hsl({_hsl_parts(color)})"


def to_hsla(color: RgbaColor) -> str:
    """CSS3 hsla, e.g. ``hsla(120,100%,50%,0.5)``; alpha is not rounded."""
    return f"hsla({_hsl_parts(color)},{_short_float(color.alpha)})"


FORMATTERS: Dict[Notation, Callable[[RgbaColor], str]] = {
    Notation.HEX: to_hex,
    Notation.RGB: to_rgb,
    Notation.RGBA: to_rgba,
    Notation.HSL: to_hsl,
    Notation.HSLA: to_hsla,
}


def format_color(color: RgbaColor, notation: Notation | str = Notation.HEX) -> str:
    """Render ``color`` in the given notation ("hex", "rgb", "rgba", "hsl" or "hsla")."""
    return FORMATTERS[Notation(notation)](color)


def opacity_properties(opacity: Scalar, legacy_ie: bool = False) -> Dict[str, str]:
    """
    CSS properties that apply ``opacity`` to an element.

    Old IE ignores ``opacity`` and wants a 0-100 value through ``filter`` and
    ``-ms-filter`` instead; ``legacy_ie=True`` returns that form.

    Args:
        opacity: Opacity in [0, 1], clamped
        legacy_ie: Return the IE8 filter properties

    Returns:
        Mapping of CSS property name to value
    """
    opacity = alpha_check(opacity)
    if not legacy_ie:
        return {"opacity": _short_float(opacity)}
    return {
        "-ms-filter": f'"progid:DXImageTransform.Microsoft.Alpha(Opacity={_short_float(opacity * 100)})"',
        "filter": f"alpha(opacity={int(round(opacity * 100, 6))})",
    }


RgbaColor.to_hex = to_hex
RgbaColor.to_rgb = to_rgb
RgbaColor.to_rgba = to_rgba
RgbaColor.to_hsl = to_hsl
RgbaColor.to_hsla = to_hsla
RgbaColor.format = format_color
