import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HslTriple, RgbTuple, Scalar, RGB_MAX, HUE_360, SL_MAX
from ..utils.num_utils import round_half_up, np_round_half_up
from .bounds import rgb_check, hue_check, sl_check

## RGB to HSL conversions

def rgb_to_hsl(r: Scalar, g: Scalar, b: Scalar) -> HslTriple:
    """
    Convert 0-255 RGB channels to HSL.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        HslTriple: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    red = r / RGB_MAX
    green = g / RGB_MAX
    blue = b / RGB_MAX

    max_c = max(red, green, blue)
    min_c = min(red, green, blue)

    lightness = (max_c + min_c) / 2.0

    if max_c == min_c:
        # grey
        hue = saturation = 0.0
    else:
        delta = max_c - min_c
        if lightness < 0.5:
            saturation = delta / (2.0 * lightness)
        else:
            saturation = delta / (2.0 - 2.0 * lightness)

        if max_c == red:
            hue = (green - blue) / delta
        elif max_c == green:
            hue = (blue - red) / delta + 2.0
        else:
            hue = (red - green) / delta + 4.0
        hue *= 60

    return HslTriple(
        hue_check(hue),
        sl_check(saturation * SL_MAX),
        sl_check(lightness * SL_MAX),
    )

## HSL to RGB conversions

def hue_to_channel(m1: float, m2: float, h: float) -> float:
    """
    CSS3 basis function mapping a hue-shifted position to one channel in [0, 1].
    See http://www.w3.org/TR/css3-color/#hsl-color
    """
    if h < 0:
        h += 1
    if h > 1:
        h -= 1
    if h * 6 < 1:
        return m1 + (m2 - m1) * 6 * h
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1


def hsl_to_rgb(h: Scalar, s: Scalar, l: Scalar) -> RgbTuple:
    """
    Convert HSL to 0-255 RGB channels.

    Only the RGB triple is rebuilt; there is no alpha on this path.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 100], clamped
        l: Lightness in [0, 100], clamped

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    hue = hue_check(h) / HUE_360
    saturation = sl_check(s) / SL_MAX
    lightness = sl_check(l) / SL_MAX

    if saturation == 0:
        # grey
        red = green = blue = lightness
    else:
        if lightness <= 0.5:
            m2 = lightness * (saturation + 1)
        else:
            m2 = lightness + saturation - lightness * saturation
        m1 = 2 * lightness - m2
        red = hue_to_channel(m1, m2, hue + 1 / 3)
        green = hue_to_channel(m1, m2, hue)
        blue = hue_to_channel(m1, m2, hue - 1 / 3)

    return (
        rgb_check(round_half_up(red * RGB_MAX)),
        rgb_check(round_half_up(green * RGB_MAX)),
        rgb_check(round_half_up(blue * RGB_MAX)),
    )

## Vectorized variants

def _split_channels(values: NDArray, what: str) -> tuple[NDArray, NDArray, NDArray]:
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"{what} expects last dimension to be 3, got shape {arr.shape}")
    return arr[..., 0], arr[..., 1], arr[..., 2]


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to HSL.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        hsl: float array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r, g, b = _split_channels(rgb, "np_rgb_to_hsl")
    r = r / RGB_MAX
    g = g / RGB_MAX
    b = b / RGB_MAX

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    mask = delta > 0
    saturation = np.zeros_like(lightness)
    low = mask & (lightness < 0.5)
    high = mask & ~(lightness < 0.5)
    saturation[low] = delta[low] / (2.0 * lightness[low])
    saturation[high] = delta[high] / (2.0 - 2.0 * lightness[high])

    # Channel priority matches the scalar version: red, then green, then blue
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue = np.zeros_like(max_c)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r]
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0
    hue = (hue * 60) % HUE_360
    hue[hue == HUE_360] = 0.0

    saturation = np.clip(saturation * SL_MAX, 0.0, SL_MAX)
    lightness = np.clip(lightness * SL_MAX, 0.0, SL_MAX)

    return np.stack([hue, saturation, lightness], axis=-1)


def np_hue_to_channel(m1: NDArray, m2: NDArray, h: NDArray) -> NDArray:
    """Vectorized ``hue_to_channel``."""
    h = np.where(h < 0, h + 1, h)
    h = np.where(h > 1, h - 1, h)
    return np.where(
        h * 6 < 1, m1 + (m2 - m1) * 6 * h,
        np.where(
            h * 2 < 1, m2,
            np.where(h * 3 < 2, m1 + (m2 - m1) * (2 / 3 - h) * 6, m1),
        ),
    )


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to 0-255 RGB.

    Args:
        hsl: array of shape (..., 3): hue in degrees, saturation and lightness in [0, 100]

    Returns:
        rgb: int64 array of shape (..., 3) in [0, 255]
    """
    h, s, l = _split_channels(hsl, "np_hsl_to_rgb")
    hue = (h % HUE_360) / HUE_360
    saturation = np.clip(s, 0.0, SL_MAX) / SL_MAX
    lightness = np.clip(l, 0.0, SL_MAX) / SL_MAX

    m2 = np.where(
        lightness <= 0.5,
        lightness * (saturation + 1),
        lightness + saturation - lightness * saturation,
    )
    m1 = 2 * lightness - m2

    grey = saturation == 0
    red = np.where(grey, lightness, np_hue_to_channel(m1, m2, hue + 1 / 3))
    green = np.where(grey, lightness, np_hue_to_channel(m1, m2, hue))
    blue = np.where(grey, lightness, np_hue_to_channel(m1, m2, hue - 1 / 3))

    rgb = np.stack([red, green, blue], axis=-1) * RGB_MAX
    return np.clip(np_round_half_up(rgb), 0, RGB_MAX)
