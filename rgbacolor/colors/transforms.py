"""
HSL-space adjustments of an ``RgbaColor``.

Every function takes the color first and returns a new color. The HSL ones
convert to an ``HslTriple``, replace exactly one component, convert back and
re-apply the original alpha; only ``opacify``/``transparentize`` change alpha.
"""
from __future__ import annotations

from ..conversions import hue_check, sl_check, alpha_check, in_sl_range
from ..types.color_types import HslChannel, HslTriple, Scalar
from .rgba import RgbaColor


def _from_triple(color: RgbaColor, triple: HslTriple) -> RgbaColor:
    # from_hsl resets alpha to 1
    return color.__class__.from_hsl_triple(triple).with_alpha(color.alpha)


def with_hsl(color: RgbaColor, channel: HslChannel, value: Scalar) -> RgbaColor:
    """Return a color with one HSL component replaced by an already bounds-checked value."""
    triple = color.to_hsl_triple()._replace(**{channel.field: value})
    return _from_triple(color, triple)

# -----------------------
# Setters
# -----------------------
def with_hue(color: RgbaColor, hue: Scalar) -> RgbaColor:
    return with_hsl(color, HslChannel.HUE, hue_check(hue))


def with_saturation(color: RgbaColor, saturation: Scalar) -> RgbaColor:
    return with_hsl(color, HslChannel.SATURATION, sl_check(saturation))


def with_lightness(color: RgbaColor, lightness: Scalar) -> RgbaColor:
    return with_hsl(color, HslChannel.LIGHTNESS, sl_check(lightness))

# -----------------------
# Relative adjustments
# -----------------------
def adjust_hue(color: RgbaColor, degrees: Scalar) -> RgbaColor:
    """Rotate the hue by ``degrees``, wrapping into [0, 360)."""
    return with_hue(color, color.hue + degrees)


def _adjust_sl(color: RgbaColor, channel: HslChannel, amount: Scalar) -> RgbaColor:
    current = color.to_hsl_triple()[channel]
    return with_hsl(color, channel, sl_check(current + amount))


def lighten(color: RgbaColor, amount: Scalar) -> RgbaColor:
    return _adjust_sl(color, HslChannel.LIGHTNESS, amount)


def darken(color: RgbaColor, amount: Scalar) -> RgbaColor:
    """Equivalent to ``lighten(-amount)``."""
    return lighten(color, -amount)


def saturate(color: RgbaColor, amount: Scalar) -> RgbaColor:
    return _adjust_sl(color, HslChannel.SATURATION, amount)


def desaturate(color: RgbaColor, amount: Scalar) -> RgbaColor:
    """Equivalent to ``saturate(-amount)``."""
    return saturate(color, -amount)


def opacify(color: RgbaColor, amount: Scalar) -> RgbaColor:
    return color.with_alpha(alpha_check(color.alpha + amount))


def transparentize(color: RgbaColor, amount: Scalar) -> RgbaColor:
    """Equivalent to ``opacify(-amount)``."""
    return opacify(color, -amount)

# -----------------------
# Related colors
# -----------------------
def complement(color: RgbaColor) -> RgbaColor:
    return adjust_hue(color, 180)


def grayscale(color: RgbaColor) -> RgbaColor:
    return with_saturation(color, 0)


def inverse(color: RgbaColor) -> RgbaColor:
    """Subtract each rgb channel from 255; alpha is kept."""
    return color.__class__(255 - color.red, 255 - color.green, 255 - color.blue, color.alpha)

# -----------------------
# Contrast preserving adjustments
# -----------------------
def adjust_with_fallback(color: RgbaColor, channel: HslChannel, first: Scalar, second: Scalar) -> RgbaColor:
    """
    Apply ``first`` to a saturation or lightness component, falling back to ``second``.

    If ``current + first`` lands inside [0, 100] it is used as is. Otherwise,
    when ``second`` is 0, ``current + first`` is clamped and used. Otherwise
    ``first`` is discarded and ``current + second`` is clamped and used.

    Args:
        color: Color to adjust
        channel: ``HslChannel.SATURATION`` or ``HslChannel.LIGHTNESS``
        first: Delta tried first
        second: Delta used only when ``first`` overflows; 0 disables it

    Returns:
        New color with the original alpha
    """
    if channel is HslChannel.HUE:
        raise ValueError("Fallback adjustment only applies to saturation or lightness")

    current = color.to_hsl_triple()[channel]
    first_value = current + first

    if in_sl_range(first_value):
        value = first_value
    elif second == 0:
        value = sl_check(first_value)
    else:
        value = sl_check(current + second)

    return with_hsl(color, channel, value)


def lighten_or_darken(color: RgbaColor, lighten: Scalar, darken: Scalar) -> RgbaColor:
    """Lighten, or darken instead if lightening overflows the lightness range."""
    return adjust_with_fallback(color, HslChannel.LIGHTNESS, lighten, -darken)


def darken_or_lighten(color: RgbaColor, darken: Scalar, lighten: Scalar) -> RgbaColor:
    """Darken, or lighten instead if darkening overflows the lightness range."""
    return adjust_with_fallback(color, HslChannel.LIGHTNESS, -darken, lighten)


def saturate_or_desaturate(color: RgbaColor, saturate: Scalar, desaturate: Scalar) -> RgbaColor:
    """Saturate, or desaturate instead if saturating overflows the saturation range."""
    return adjust_with_fallback(color, HslChannel.SATURATION, saturate, -desaturate)


def desaturate_or_saturate(color: RgbaColor, desaturate: Scalar, saturate: Scalar) -> RgbaColor:
    """Desaturate, or saturate instead if desaturating overflows the saturation range."""
    return adjust_with_fallback(color, HslChannel.SATURATION, -desaturate, saturate)


RgbaColor.with_hue = with_hue
RgbaColor.with_saturation = with_saturation
RgbaColor.with_lightness = with_lightness
RgbaColor.adjust_hue = adjust_hue
RgbaColor.lighten = lighten
RgbaColor.darken = darken
RgbaColor.saturate = saturate
RgbaColor.desaturate = desaturate
RgbaColor.opacify = opacify
RgbaColor.transparentize = transparentize
RgbaColor.complement = complement
RgbaColor.grayscale = grayscale
RgbaColor.inverse = inverse
RgbaColor.lighten_or_darken = lighten_or_darken
RgbaColor.darken_or_lighten = darken_or_lighten
RgbaColor.saturate_or_desaturate = saturate_or_desaturate
RgbaColor.desaturate_or_saturate = desaturate_or_saturate
