# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincta_params.py — parameter sets, defaults and a method registry.

Each color map method is described by an immutable parameter record that
knows its own defaults, its literature reference and how to generate the
map.  Front ends (sliders, command lines, notebooks) hold one record per
method, derive new ones with ``replace`` and call ``generate``.

Example:
    >>> params = BrewerDivergingParams.defaults(n=11).replace(warmth=0.3)
    >>> result = params.generate()
    >>> result.colors.shape
    (11, 3)
"""

from __future__ import annotations

import dataclasses
import math
import warnings
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Type, Union

import numpy as np

from tincta_brewer import (
    brewer_sequential,
    brewer_diverging,
    brewer_qualitative,
    brewer_sequential_default_contrast_for_small_n,
    brewer_diverging_default_contrast_for_small_n,
)
from tincta_cubehelix import cube_helix

__all__ = [
    "ColorMapClippingWarning",
    "ColorMapResult",
    "BrewerSequentialParams",
    "BrewerDivergingParams",
    "BrewerQualitativeParams",
    "CubeHelixParams",
    "ColorMapParams",
    "COLORMAP_METHODS",
    "generate_colormap",
]

_BREWER_REFERENCE = (
    "M. Wijffelaars, R. Vliegen, J.J. van Wijk, E.-J. van der Linden. "
    "Generating Color Palettes using Intuitive Parameters. "
    "Computer Graphics Forum 27(3), May 2008."
)


class ColorMapClippingWarning(UserWarning):
    """Some colors of a generated map fell outside the sRGB gamut."""


@dataclass(slots=True, frozen=True, eq=False)
class ColorMapResult:
    """Generated colors plus the number of entries that needed clipping."""
    colors:  np.ndarray
    clipped: int = 0

    def __len__(self) -> int:
        return int(self.colors.shape[0])

    def tobytes(self) -> bytes:
        """Row-major sRGB bytes, 3 per color."""
        return self.colors.tobytes()


# ---------------------------------------------------------------------------
# Parameter records
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class BrewerSequentialParams:
    """Single-hue map with monotonic lightness."""
    n:          int
    hue:        float
    contrast:   float
    saturation: float
    brightness: float
    warmth:     float

    name:      ClassVar[str] = "brewer-sequential"
    reference: ClassVar[str] = _BREWER_REFERENCE

    @classmethod
    def defaults(cls, n: int = 256) -> BrewerSequentialParams:
        return cls(n=n, hue=0.0,
                   contrast=brewer_sequential_default_contrast_for_small_n(n),
                   saturation=0.6, brightness=0.75, warmth=0.15)

    def replace(self, **changes) -> BrewerSequentialParams:
        return dataclasses.replace(self, **changes)

    def generate(self) -> ColorMapResult:
        colors = brewer_sequential(self.n, self.hue, self.contrast,
                                   self.saturation, self.brightness, self.warmth)
        return ColorMapResult(colors)


@dataclass(slots=True, frozen=True)
class BrewerDivergingParams:
    """Two hues meeting at a light neutral."""
    n:          int
    hue:        float
    divergence: float
    contrast:   float
    saturation: float
    brightness: float
    warmth:     float

    name:      ClassVar[str] = "brewer-diverging"
    reference: ClassVar[str] = _BREWER_REFERENCE

    @classmethod
    def defaults(cls, n: int = 257) -> BrewerDivergingParams:
        return cls(n=n, hue=0.0, divergence=math.tau * 2.0 / 3.0,
                   contrast=brewer_diverging_default_contrast_for_small_n(n),
                   saturation=0.6, brightness=0.75, warmth=0.15)

    def replace(self, **changes) -> BrewerDivergingParams:
        return dataclasses.replace(self, **changes)

    def generate(self) -> ColorMapResult:
        colors = brewer_diverging(self.n, self.hue, self.divergence, self.contrast,
                                  self.saturation, self.brightness, self.warmth)
        return ColorMapResult(colors)


@dataclass(slots=True, frozen=True)
class BrewerQualitativeParams:
    """Categorical hues with balanced apparent brightness."""
    n:          int
    hue:        float
    divergence: float
    contrast:   float
    saturation: float
    brightness: float

    name:      ClassVar[str] = "brewer-qualitative"
    reference: ClassVar[str] = _BREWER_REFERENCE

    @classmethod
    def defaults(cls, n: int = 9) -> BrewerQualitativeParams:
        return cls(n=n, hue=0.0, divergence=math.radians(250.0),
                   contrast=0.5, saturation=0.5, brightness=0.8)

    def replace(self, **changes) -> BrewerQualitativeParams:
        return dataclasses.replace(self, **changes)

    def generate(self) -> ColorMapResult:
        colors = brewer_qualitative(self.n, self.hue, self.divergence, self.contrast,
                                    self.saturation, self.brightness)
        return ColorMapResult(colors)


@dataclass(slots=True, frozen=True)
class CubeHelixParams:
    """Green's helix through the RGB cube."""
    n:          int
    hue:        float
    rotations:  float
    saturation: float
    gamma:      float

    name:      ClassVar[str] = "cubehelix"
    reference: ClassVar[str] = (
        "D.A. Green. A colour scheme for the display of astronomical intensity "
        "images. Bulletin of the Astronomical Society of India 39(2), June 2011."
    )

    @classmethod
    def defaults(cls, n: int = 256) -> CubeHelixParams:
        return cls(n=n, hue=0.5, rotations=-1.5, saturation=1.2, gamma=1.0)

    def replace(self, **changes) -> CubeHelixParams:
        return dataclasses.replace(self, **changes)

    def generate(self) -> ColorMapResult:
        colors, clipped = cube_helix(self.n, self.hue, self.rotations,
                                     self.saturation, self.gamma)
        if clipped > 0:
            warnings.warn(
                f"cubehelix: {clipped} of {self.n} colors were clipped to the "
                "sRGB gamut; reduce saturation or adjust gamma.",
                ColorMapClippingWarning,
                stacklevel=2,
            )
        return ColorMapResult(colors, clipped)


ColorMapParams = Union[
    BrewerSequentialParams,
    BrewerDivergingParams,
    BrewerQualitativeParams,
    CubeHelixParams,
]

COLORMAP_METHODS: Dict[str, Type[ColorMapParams]] = {
    cls.name: cls
    for cls in (BrewerSequentialParams, BrewerDivergingParams,
                BrewerQualitativeParams, CubeHelixParams)
}


def generate_colormap(method: str, n: Optional[int] = None, **overrides) -> ColorMapResult:
    """
    Generate a map by method name with default parameters plus overrides.

    Args:
        method: One of the keys of ``COLORMAP_METHODS``.
        n: Number of colors; None uses the method's default size.
        **overrides: Parameter values replacing the defaults.

    Raises:
        KeyError: Unknown method name.
    """
    try:
        cls = COLORMAP_METHODS[method]
    except KeyError:
        raise KeyError(
            f"Unknown color map method {method!r}; "
            f"known methods: {', '.join(sorted(COLORMAP_METHODS))}"
        ) from None
    params = cls.defaults() if n is None else cls.defaults(n)
    if overrides:
        params = params.replace(**overrides)
    return params.generate()


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Tincta Color Map Defaults ---")
    for method, cls in COLORMAP_METHODS.items():
        params = cls.defaults()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = params.generate()
        print(f"{method:20s} n={len(result):4d} clipped={result.clipped:3d} "
              f"first={tuple(result.colors[0])} last={tuple(result.colors[-1])}"
              f"{' [warned]' if caught else ''}")
