# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincta_brewer.py — Brewer-like sequential, diverging and qualitative
color maps generated from hue, contrast, saturation, brightness and warmth.

Every generator returns an (n, 3) uint8 array of sRGB colors; ``.tobytes()``
gives the row-major byte layout.  Parameters are expected in their documented
ranges (contrast, saturation, brightness, warmth in [0, 1], angles in
radians, n >= 2); hues are wrapped into [0, 2*pi) here, nothing else is
validated.

References:
    - Wijffelaars, M., Vliegen, R., van Wijk, J.J., van der Linden, E.-J.
      (2008). "Generating Color Palettes using Intuitive Parameters".
      Computer Graphics Forum 27(3).
"""

import numpy as np
from numba import njit

from tincta_colorengine import (
    PI,
    Triple,
    TWO_PI,
    lch_to_luv,
    lch_chroma,
    luv_saturation,
    normalize_hue,
    hue_difference,
)
from tincta_gamut import (
    BRIGHT_POINT,
    BRIGHT_POINT_HUE,
    BRIGHT_POINT_SATURATION,
    YELLOW_LIGHTNESS,
    YELLOW_HUE,
    RED_SATURATION,
    smax,
)
from tincta_curves import (
    get_color_points,
    get_colormap_entry,
    luv_to_srgb_byte_triple,
)

__all__ = [
    "DIVERGING_NEUTRAL_MAX_N",
    "brewer_sequential_default_contrast_for_small_n",
    "brewer_diverging_default_contrast_for_small_n",
    "brewer_sequential",
    "brewer_diverging",
    "brewer_qualitative",
]

# Diverging maps up to this size get a dedicated neutral middle color;
# larger (continuous-looking) maps average the two branch ends instead.
DIVERGING_NEUTRAL_MAX_N = 9


def brewer_sequential_default_contrast_for_small_n(n: int) -> float:
    """Contrast that keeps small sequential maps distinguishable."""
    return min(0.88, 0.34 + 0.06 * n)


def brewer_diverging_default_contrast_for_small_n(n: int) -> float:
    """Contrast that keeps small diverging maps distinguishable."""
    return min(0.88, 0.34 + 0.06 * n)


# =============================================================================
# Kernels
# =============================================================================

@njit(cache=True)
def _store(colormap: np.ndarray, i: int, c: Triple) -> None:
    r, g, b = luv_to_srgb_byte_triple(c[0], c[1], c[2])
    colormap[i, 0] = r
    colormap[i, 1] = g
    colormap[i, 2] = b


@njit(cache=True)
def _sequential_kernel(n: int, hue: float, contrast: float, saturation: float,
                       brightness: float, warmth: float) -> np.ndarray:
    colormap = np.empty((n, 3), dtype=np.uint8)
    p0, p1, p2, q0, q1, q2 = get_color_points(
        hue, saturation, warmth, BRIGHT_POINT, BRIGHT_POINT_HUE, BRIGHT_POINT_SATURATION)
    for i in range(n):
        t = (n - 1 - i) / (n - 1.0)
        c = get_colormap_entry(t, p0, p2, q0, q1, q2, contrast, brightness)
        _store(colormap, i, c)
    return colormap


@njit(cache=True)
def _diverging_neutral(n: int, warmth: float, c0: Triple, c1: Triple) -> Triple:
    """Middle color of an odd-sized diverging map from both branch ends."""
    if n <= DIVERGING_NEUTRAL_MAX_N:
        # Discrete maps: an extra desaturated color at the bright point's hue.
        c0s = luv_saturation(c0[0], c0[1], c0[2])
        c1s = luv_saturation(c1[0], c1[1], c1[2])
        sn = 0.5 * (c0s + c1s) * warmth
        l = 0.5 * (c0[0] + c1[0])
        cc = lch_chroma(l, min(smax(l, BRIGHT_POINT_HUE), sn))
        u, v = lch_to_luv(cc, BRIGHT_POINT_HUE)
        return (l, u, v)
    # Continuous maps: plain average, an extra neutral would stand out as a seam.
    return (0.5 * (c0[0] + c1[0]),
            0.5 * (c0[1] + c1[1]),
            0.5 * (c0[2] + c1[2]))


@njit(cache=True)
def _diverging_kernel(n: int, hue: float, divergence: float, contrast: float,
                      saturation: float, brightness: float, warmth: float) -> np.ndarray:
    colormap = np.empty((n, 3), dtype=np.uint8)
    hue1 = normalize_hue(hue + divergence)
    p00, p01, p02, q00, q01, q02 = get_color_points(
        hue, saturation, warmth, BRIGHT_POINT, BRIGHT_POINT_HUE, BRIGHT_POINT_SATURATION)
    p10, p11, p12, q10, q11, q12 = get_color_points(
        hue1, saturation, warmth, BRIGHT_POINT, BRIGHT_POINT_HUE, BRIGHT_POINT_SATURATION)

    half = n // 2
    for i in range(n):
        if n % 2 == 1 and i == half:
            c0 = get_colormap_entry(1.0, p00, p02, q00, q01, q02, contrast, brightness)
            c1 = get_colormap_entry(1.0, p10, p12, q10, q11, q12, contrast, brightness)
            c = _diverging_neutral(n, warmth, c0, c1)
        else:
            t = i / (n - 1.0)
            if i < half:
                c = get_colormap_entry(2.0 * t, p00, p02, q00, q01, q02,
                                       contrast, brightness)
            else:
                c = get_colormap_entry(2.0 * (1.0 - t), p10, p12, q10, q11, q12,
                                       contrast, brightness)
        _store(colormap, i, c)
    return colormap


@njit(cache=True)
def _qualitative_kernel(n: int, hue: float, divergence: float, contrast: float,
                        saturation: float, brightness: float) -> np.ndarray:
    colormap = np.empty((n, 3), dtype=np.uint8)
    eps = hue / TWO_PI
    r = divergence / TWO_PI
    l0 = brightness * YELLOW_LIGHTNESS
    l1 = (1.0 - contrast) * l0
    smax_cap = saturation * RED_SATURATION

    for i in range(n):
        t = i / (n - 1.0)
        ch = normalize_hue(TWO_PI * (eps + t * r))
        alpha = abs(hue_difference(ch, YELLOW_HUE)) / PI
        cl = (1.0 - alpha) * l0 + alpha * l1
        cs = min(smax(cl, ch), smax_cap)
        u, v = lch_to_luv(lch_chroma(cl, cs), ch)
        _store(colormap, i, (cl, u, v))
    return colormap


# =============================================================================
# Public API
# =============================================================================

def brewer_sequential(n: int, hue: float, contrast: float, saturation: float,
                      brightness: float, warmth: float) -> np.ndarray:
    """
    Sequential map along a single hue, from light (index 0) to dark.

    Args:
        n: Number of colors (>= 2).
        hue: Hue in radians.
        contrast: Lightness spread, [0, 1].
        saturation: [0, 1].
        brightness: Lightness offset, [0, 1].
        warmth: Shift of the light end toward yellow, [0, 1].

    Returns:
        (n, 3) uint8 sRGB colors.
    """
    return _sequential_kernel(int(n), normalize_hue(float(hue)), float(contrast),
                              float(saturation), float(brightness), float(warmth))


def brewer_diverging(n: int, hue: float, divergence: float, contrast: float,
                     saturation: float, brightness: float, warmth: float) -> np.ndarray:
    """
    Diverging map: dark ``hue`` -> light neutral -> dark ``hue + divergence``.

    Args:
        n: Number of colors (>= 2).
        hue: Hue of the first half, radians.
        divergence: Angular offset of the second hue, radians.
        contrast, saturation, brightness, warmth: As for the sequential map.

    Returns:
        (n, 3) uint8 sRGB colors.
    """
    return _diverging_kernel(int(n), normalize_hue(float(hue)), float(divergence),
                             float(contrast), float(saturation), float(brightness),
                             float(warmth))


def brewer_qualitative(n: int, hue: float, divergence: float, contrast: float,
                       saturation: float, brightness: float) -> np.ndarray:
    """
    Qualitative map of n categorical hues spread over ``divergence`` radians.

    Lightness is highest near yellow and reduced by up to ``contrast`` for
    hues on the opposite side of the circle, so categories look comparably
    bright.  Saturation is capped at ``saturation`` times that of pure red.

    Returns:
        (n, 3) uint8 sRGB colors.
    """
    return _qualitative_kernel(int(n), normalize_hue(float(hue)), float(divergence),
                               float(contrast), float(saturation), float(brightness))
