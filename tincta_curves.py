# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincta_curves.py — Bezier color curves through CIELUV.

One hue branch of a Brewer-like map is a pair of quadratic Bezier segments

    B0 = (p0, q0, q1)      dark half, from black toward the boundary color
    B1 = (q1, q2, p2)      light half, toward the warm bright point

joined at q1.  Both segments have monotonic lightness, so a target lightness
maps to exactly one curve parameter; that parameter is recovered with the
closed-form inverse of the scalar quadratic Bezier instead of a numeric root
finder, which keeps sampled maps bit-reproducible.

All LUV colors are plain (L, u, v) tuples.
"""

import math
from numba import njit
from typing import Tuple

from tincta_colorengine import (
    Triple,
    lch_to_luv,
    lch_chroma,
    mix_hue,
    luv_to_xyz,
    xyz_to_rgb,
    rgb_to_srgb,
)
from tincta_gamut import most_saturated_in_srgb, smax

__all__ = [
    "ColorPoints",
    "get_color_points",
    "bezier",
    "inv_bezier",
    "target_lightness",
    "get_colormap_entry",
    "luv_to_srgb_byte_triple",
]

ColorPoints = Tuple[Triple, Triple, Triple, Triple, Triple, Triple]


@njit(cache=True)
def _lerp(a: Triple, b: Triple, t: float) -> Triple:
    """Component-wise (1 - t) * a + t * b in LUV; not hue preserving."""
    s = 1.0 - t
    return (s * a[0] + t * b[0],
            s * a[1] + t * b[1],
            s * a[2] + t * b[2])


@njit(cache=True)
def _midpoint(a: Triple, b: Triple) -> Triple:
    return (0.5 * (a[0] + b[0]),
            0.5 * (a[1] + b[1]),
            0.5 * (a[2] + b[2]))


@njit(cache=True)
def get_color_points(hue: float, saturation: float, warmth: float,
                     pb: Triple, pb_hue: float, pb_saturation: float) -> ColorPoints:
    """
    Anchor and control points of the curve for one hue.

    Args:
        hue: LCh hue in radians, [0, 2*pi).
        saturation: [0, 1], pulls q0 / q2 toward the boundary color p1.
        warmth: [0, 1], pulls the light end p2 toward the bright point.
        pb: Bright point (LUV).
        pb_hue: Hue of the bright point.
        pb_saturation: Saturation of the bright point.

    Returns:
        (p0, p1, p2, q0, q1, q2) as LUV triples.
    """
    u0, v0 = lch_to_luv(0.0, hue)
    p0 = (0.0, u0, v0)
    p1 = most_saturated_in_srgb(hue)

    p2l = (1.0 - warmth) * 100.0 + warmth * pb[0]
    p2h = mix_hue(warmth, hue, pb_hue)
    p2c = lch_chroma(p2l, min(smax(p2l, p2h), warmth * saturation * pb_saturation))
    u2, v2 = lch_to_luv(p2c, p2h)
    p2 = (p2l, u2, v2)

    q0 = _lerp(p0, p1, saturation)
    q2 = _lerp(p2, p1, saturation)
    q1 = _midpoint(q0, q2)
    return p0, p1, p2, q0, q1, q2


@njit(cache=True)
def bezier(b0: Triple, b1: Triple, b2: Triple, t: float) -> Triple:
    """Quadratic Bezier through LUV control points at parameter t."""
    a = (1.0 - t) * (1.0 - t)
    b = 2.0 * (1.0 - t) * t
    c = t * t
    return (a * b0[0] + b * b1[0] + c * b2[0],
            a * b0[1] + b * b1[1] + c * b2[1],
            a * b0[2] + b * b1[2] + c * b2[2])


@njit(cache=True)
def inv_bezier(b0: float, b1: float, b2: float, v: float) -> float:
    """
    Parameter t at which the scalar quadratic Bezier (b0, b1, b2) equals v.

    The discriminant is clamped at 0 so values a rounding step outside the
    segment still resolve to its end.
    """
    denom = b0 - 2.0 * b1 + b2
    if abs(denom) < 1e-12:
        # Degenerates to the linear Bezier b0 + 2 t (b1 - b0).
        if b1 == b0:
            return 0.0
        return (v - b0) / (2.0 * (b1 - b0))
    return (b0 - b1 + math.sqrt(max(b1 * b1 - b0 * b2 + denom * v, 0.0))) / denom


@njit(cache=True)
def target_lightness(t: float, contrast: float, brightness: float) -> float:
    """Eased lightness for map position t: 125 - 125 * 0.2^((1-c) b + t c)."""
    return 125.0 - 125.0 * math.pow(0.2, (1.0 - contrast) * brightness + t * contrast)


@njit(cache=True)
def get_colormap_entry(t: float, p0: Triple, p2: Triple,
                       q0: Triple, q1: Triple, q2: Triple,
                       contrast: float, brightness: float) -> Triple:
    """
    LUV color at normalized map position t (0 = dark end, 1 = light end).
    """
    l = target_lightness(t, contrast, brightness)
    if l <= q1[0]:
        T = 0.5 * inv_bezier(p0[0], q0[0], q1[0], l)
    else:
        T = 0.5 * inv_bezier(q1[0], q2[0], p2[0], l) + 0.5
    if T <= 0.5:
        return bezier(p0, q0, q1, 2.0 * T)
    return bezier(q1, q2, p2, 2.0 * (T - 0.5))


@njit(cache=True)
def luv_to_srgb_byte_triple(l: float, u: float, v: float) -> Tuple[int, int, int]:
    """LUV -> clipped sRGB bytes, rounding half away from zero."""
    x, y, z = luv_to_xyz(l, u, v)
    r, g, b = xyz_to_rgb(x, y, z)
    sr, sg, sb = rgb_to_srgb(r, g, b)
    return (int(math.floor(sr * 255.0 + 0.5)),
            int(math.floor(sg * 255.0 + 0.5)),
            int(math.floor(sb * 255.0 + 0.5)))
