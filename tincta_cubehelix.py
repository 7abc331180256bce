# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincta_cubehelix.py — D.A. Green's CubeHelix color scheme.

A helix around the grey diagonal of the RGB cube.  The perturbation matrix
has zero luminance (0.30 R + 0.59 G + 0.11 B), so perceived intensity grows
with the map position regardless of hue, as long as no channel is clipped.

References:
    - Green, D.A. (2011). "A colour scheme for the display of astronomical
      intensity images". Bulletin of the Astronomical Society of India 39.
"""

import math
import numpy as np
from numba import njit
from typing import Final, Tuple

from tincta_colorengine import TWO_PI

__all__ = [
    "CUBEHELIX_COEFFICIENTS",
    "cube_helix",
]

# Rows: R, G, B.  Columns: cos(angle), sin(angle).
CUBEHELIX_COEFFICIENTS: Final[np.ndarray] = np.array([
    [-0.14861,  1.78277],
    [-0.29227, -0.90649],
    [ 1.97294,  0.0    ]
], dtype=np.float64)
CUBEHELIX_COEFFICIENTS.setflags(write=False)


@njit(cache=True)
def _cube_helix_kernel(n: int, hue: float, rot: float, saturation: float,
                       gamma: float) -> Tuple[np.ndarray, int]:
    colormap = np.empty((n, 3), dtype=np.uint8)
    K = CUBEHELIX_COEFFICIENTS
    clippings = 0
    rgb = np.empty(3)
    for i in range(n):
        fract = i / (n - 1.0)
        angle = TWO_PI * (hue / 3.0 + 1.0 + rot * fract)
        fract = math.pow(fract, gamma)
        amp = saturation * fract * (1.0 - fract) / 2.0
        s = math.sin(angle)
        c = math.cos(angle)
        clipped = False
        for ch in range(3):
            val = fract + amp * (K[ch, 0] * c + K[ch, 1] * s)
            if val < 0.0:
                val = 0.0
                clipped = True
            elif val > 1.0:
                val = 1.0
                clipped = True
            rgb[ch] = val
        if clipped:
            clippings += 1
        for ch in range(3):
            # Truncation, as in the published reference implementation.
            colormap[i, ch] = int(rgb[ch] * 255.0)
    return colormap, clippings


def cube_helix(n: int, hue: float, rotations: float, saturation: float,
               gamma: float) -> Tuple[np.ndarray, int]:
    """
    CubeHelix color map.

    The helix is parametrized directly in (gamma-encoded) RGB; it does not go
    through the LUV pipeline of the Brewer-like maps.

    Args:
        n: Number of colors (>= 2).
        hue: Start color of the helix; the starting angle is
            2*pi * (hue / 3 + 1).
        rotations: Number of R -> G -> B turns over the map, may be negative.
        saturation: Helix amplitude (Green's "hue" parameter).
        gamma: Exponent applied to the map position to emphasize low or
            high intensities.

    Returns:
        ((n, 3) uint8 sRGB colors, number of colors where at least one
        channel had to be clipped to [0, 1]).
    """
    colormap, clipped = _cube_helix_kernel(int(n), float(hue), float(rotations),
                                           float(saturation), float(gamma))
    return colormap, int(clipped)
