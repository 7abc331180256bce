# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincta_gamut.py — sRGB gamut boundary in CIELUV.

The boundary of the sRGB cube, seen along an LCh hue ray, is always a face
where one linear RGB channel is 0, another is 1 and the third is free.  The
six primary / secondary hues split the hue circle into the sectors in which
each (zero, one, free) assignment applies.  Because u', v' are linear-
fractional in XYZ, and XYZ is linear in RGB, the free channel that puts a
color exactly on the hue ray is the root of a single linear equation:

    T       = -sin(h) * u'_n + cos(h) * v'_n
    q(ch)   = T * (M[0,ch] + 15 M[1,ch] + 3 M[2,ch])
              - (-4 sin(h) M[0,ch] + 9 cos(h) M[1,ch])
    free    = -q(one) / q(free)

Process-wide constants (gamut hues, bright point, yellow / red references)
are computed eagerly at import; they do not depend on any parameter.

References:
    - Wijffelaars, M., Vliegen, R., van Wijk, J.J., van der Linden, E.-J.
      (2008). "Generating Color Palettes using Intuitive Parameters".
      Computer Graphics Forum 27(3).
"""

import math
import numpy as np
from numba import njit
from typing import Final, Tuple

from tincta_colorengine import (
    ArrayFloat,
    Triple,
    M_RGB_TO_XYZ,
    D65_U_PRIME,
    D65_V_PRIME,
    clamp,
    rgb_to_srgb_channel,
    srgb_to_rgb,
    rgb_to_xyz,
    xyz_to_luv,
    luv_to_lch,
    lch_saturation,
    luv_saturation,
    srgb_to_lch_hue,
)

__all__ = [
    "GAMUT_HUES",
    "BRIGHT_POINT",
    "BRIGHT_POINT_HUE",
    "BRIGHT_POINT_SATURATION",
    "YELLOW_LIGHTNESS",
    "YELLOW_HUE",
    "RED_SATURATION",
    "most_saturated_in_srgb",
    "smax",
]


# =============================================================================
# Process-wide constants
# =============================================================================

# LCh hues of the cube corners: red, yellow, green, cyan, blue, magenta.
GAMUT_HUES: Final[ArrayFloat] = np.array([
    srgb_to_lch_hue(1.0, 0.0, 0.0),
    srgb_to_lch_hue(1.0, 1.0, 0.0),
    srgb_to_lch_hue(0.0, 1.0, 0.0),
    srgb_to_lch_hue(0.0, 1.0, 1.0),
    srgb_to_lch_hue(0.0, 0.0, 1.0),
    srgb_to_lch_hue(1.0, 0.0, 1.0),
], dtype=np.float64)
GAMUT_HUES.setflags(write=False)


def _linear_rgb_to_luv(r: float, g: float, b: float) -> Triple:
    return xyz_to_luv(*rgb_to_xyz(r, g, b))


# Device yellow, the anchor that the light end of every curve leans toward.
BRIGHT_POINT: Final[Triple] = _linear_rgb_to_luv(1.0, 1.0, 0.0)
_bp_chroma, BRIGHT_POINT_HUE = luv_to_lch(BRIGHT_POINT[1], BRIGHT_POINT[2])
BRIGHT_POINT_SATURATION: Final[float] = lch_saturation(BRIGHT_POINT[0], _bp_chroma)
del _bp_chroma

# Yellow is perceived as the lightest hue; qualitative maps darken the other
# hues relative to it.
YELLOW_LIGHTNESS: Final[float] = BRIGHT_POINT[0]
YELLOW_HUE: Final[float] = BRIGHT_POINT_HUE

# Red has the highest saturation of all sRGB primaries.
RED_SATURATION: Final[float] = luv_saturation(*_linear_rgb_to_luv(1.0, 0.0, 0.0))


# =============================================================================
# Gamut boundary
# =============================================================================

@njit(cache=True)
def _boundary_channels(hue: float) -> Tuple[int, int, int]:
    """
    Sector lookup: indices (free, zero, one) of the RGB channels on the
    cube face hit by the hue ray.
    """
    h = GAMUT_HUES
    if hue < h[0]:
        return 2, 1, 0
    elif hue < h[1]:
        return 1, 2, 0
    elif hue < h[2]:
        return 0, 2, 1
    elif hue < h[3]:
        return 2, 0, 1
    elif hue < h[4]:
        return 1, 0, 2
    elif hue < h[5]:
        return 0, 1, 2
    return 2, 1, 0


@njit(cache=True)
def most_saturated_in_srgb(hue: float) -> Triple:
    """
    Most saturated sRGB color with the given LCh hue, as a LUV triple.

    Args:
        hue: LCh hue in radians, [0, 2*pi).

    Returns:
        (L, u, v) of the color on the sRGB cube surface.
    """
    i, j, k = _boundary_channels(hue)
    M = M_RGB_TO_XYZ
    alpha = -math.sin(hue)
    beta = math.cos(hue)
    T = alpha * D65_U_PRIME + beta * D65_V_PRIME
    q0 = (T * (M[0, k] + 15.0 * M[1, k] + 3.0 * M[2, k])
          - (4.0 * alpha * M[0, k] + 9.0 * beta * M[1, k]))
    q1 = (T * (M[0, i] + 15.0 * M[1, i] + 3.0 * M[2, i])
          - (4.0 * alpha * M[0, i] + 9.0 * beta * M[1, i]))

    srgb = np.zeros(3)
    srgb[j] = 0.0
    srgb[k] = 1.0
    srgb[i] = rgb_to_srgb_channel(clamp(-q0 / q1, 0.0, 1.0))

    r, g, b = srgb_to_rgb(srgb[0], srgb[1], srgb[2])
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_luv(x, y, z)


@njit(cache=True)
def smax(l: float, hue: float) -> float:
    """
    Maximum saturation reachable at lightness l and the given hue.

    Piecewise linear in l: from zero saturation at black (l below the
    boundary color) or white (l above it) to the boundary color's saturation.
    Exact at both endpoints and at the boundary color.
    """
    pl, pu, pv = most_saturated_in_srgb(hue)
    end_l = 0.0
    if l > pl:
        end_l = 100.0
    alpha = (end_l - l) / (end_l - pl)
    pmid_s = luv_saturation(pl, pu, pv)
    pend_s = luv_saturation(end_l, 0.0, 0.0)
    return alpha * (pmid_s - pend_s) + pend_s
