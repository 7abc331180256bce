# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Space Engine
==================
Closed-form conversions between the four color spaces used by the color map
generators:

    sRGB  <->  linear RGB  <->  CIE XYZ  <->  CIE LUV  <->  LCh(uv)

Conventions:
1. D65 reference white everywhere.
2. "RGB" means linear RGB, "sRGB" the gamma-encoded variant. Both in [0, 1].
3. XYZ and LUV keep their native range (Y and L in [0, 100]).
4. Hue angles are radians in [0, 2*pi).

The module exposes two layers:

- Scalar Numba kernels (``rgb_to_xyz``, ``xyz_to_luv``, ...) operating on
  plain floats and returning tuples. They are compiled with strict IEEE 754
  semantics and are what the gamut solver, the curve sampler and the color
  map generators are built from, so generated maps are bit-reproducible.
- ``ColorSpaceEngine``, a shape-safe batch API over ``(N, 3)`` arrays for
  callers that want to inspect or post-process colors.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
"""

import functools
import math
import numpy as np
import numpy.typing as npt
from numba import njit
from typing import Final, TypeAlias, Callable, Any, Tuple

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "Triple",

    # --- Constants ---
    "PI",
    "TWO_PI",
    "REF_WHITE_D65",
    "D65_U_PRIME",
    "D65_V_PRIME",
    "LUV_EPSILON",
    "LUV_KAPPA",
    "SATURATION_EPSILON",
    "M_RGB_TO_XYZ",
    "M_XYZ_TO_RGB",

    # --- Decorators ---
    "handle_shapes",

    # --- Scalar kernels ---
    "clamp",
    "u_prime",
    "v_prime",
    "srgb_to_rgb_channel",
    "rgb_to_srgb_channel",
    "srgb_to_rgb",
    "rgb_to_srgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_lch",
    "lch_to_luv",
    "lch_saturation",
    "lch_chroma",
    "luv_saturation",
    "srgb_to_lch_hue",
    "normalize_hue",
    "hue_difference",
    "mix_hue",

    # --- Classes ---
    "ColorSpaceEngine",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = npt.NDArray[np.floating]
Triple: TypeAlias = Tuple[float, float, float]

# --- Constants ---

PI: Final[float] = math.pi
TWO_PI: Final[float] = 2.0 * math.pi

# D65 white point in the [0, 100] XYZ range.
REF_WHITE_D65: Final[Triple] = (95.047, 100.000, 108.883)

# sRGB primaries (IEC 61966-2-1), applied to linear RGB and scaled by 100.
M_RGB_TO_XYZ: Final[ArrayFloat] = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505]
], dtype=np.float64)
M_RGB_TO_XYZ.setflags(write=False)

M_XYZ_TO_RGB: Final[ArrayFloat] = np.array([
    [ 3.2406255, -1.5372080, -0.4986286],
    [-0.9689307,  1.8757561,  0.0415175],
    [ 0.0557101, -0.2040211,  1.0569959]
], dtype=np.float64)
M_XYZ_TO_RGB.setflags(write=False)

# Pre-transposed copies for row-vector batches (rgb @ M.T).
_M_RGB_TO_XYZ_T: Final[ArrayFloat] = M_RGB_TO_XYZ.T.copy()
_M_XYZ_TO_RGB_T: Final[ArrayFloat] = M_XYZ_TO_RGB.T.copy()

# --- Exact Rational Math Constants ---
# CIE 1976 lightness switches from the linear to the cube-root branch at
# Y/Yn = (6/29)^3; the linear slope is (29/3)^3.
_LUV_DELTA: Final[float] = 6.0 / 29.0
LUV_EPSILON: Final[float] = _LUV_DELTA * _LUV_DELTA * _LUV_DELTA  # ~0.008856
LUV_KAPPA: Final[float] = (29.0 * 29.0 * 29.0) / (3.0 * 3.0 * 3.0)  # ~903.296

# Lightness floor for saturation = chroma / L.
SATURATION_EPSILON: Final[float] = 1e-8


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to (N, 3) float64 and safeguard shape.

    Single colors (shape (3,)) are treated as a batch of one internally.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns result[0]
        - If input is (N, 3), returns the full result
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr_in = np.ascontiguousarray(np.atleast_2d(arr), dtype=np.float64)

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (3,) or (N, 3), got {np.shape(arr)}")

        res = func(arr_in, *args, **kwargs)

        if np.ndim(arr) == 1:
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. SCALAR KERNELS (Numba, strict IEEE 754)
# =============================================================================

@njit(cache=True)
def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


@njit(cache=True)
def u_prime(x: float, y: float, z: float) -> float:
    """CIE 1976 u' = 4X / (X + 15Y + 3Z). Black returns 0."""
    d = x + 15.0 * y + 3.0 * z
    if d <= 1e-12:
        return 0.0
    return 4.0 * x / d


@njit(cache=True)
def v_prime(x: float, y: float, z: float) -> float:
    """CIE 1976 v' = 9Y / (X + 15Y + 3Z). Black returns 0."""
    d = x + 15.0 * y + 3.0 * z
    if d <= 1e-12:
        return 0.0
    return 9.0 * y / d


D65_U_PRIME: Final[float] = u_prime(*REF_WHITE_D65)
D65_V_PRIME: Final[float] = v_prime(*REF_WHITE_D65)


@njit(cache=True)
def rgb_to_srgb_channel(x: float) -> float:
    """sRGB OETF (IEC 61966-2-1), linear -> gamma encoded."""
    if x <= 0.0031308:
        return x * 12.92
    return 1.055 * (x ** (1.0 / 2.4)) - 0.055


@njit(cache=True)
def srgb_to_rgb_channel(x: float) -> float:
    """sRGB EOTF (IEC 61966-2-1), gamma encoded -> linear."""
    if x <= 0.04045:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** 2.4


@njit(cache=True)
def rgb_to_srgb(r: float, g: float, b: float) -> Triple:
    return rgb_to_srgb_channel(r), rgb_to_srgb_channel(g), rgb_to_srgb_channel(b)


@njit(cache=True)
def srgb_to_rgb(sr: float, sg: float, sb: float) -> Triple:
    return srgb_to_rgb_channel(sr), srgb_to_rgb_channel(sg), srgb_to_rgb_channel(sb)


@njit(cache=True)
def rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    """Linear RGB [0, 1] -> XYZ [0, 100]."""
    M = M_RGB_TO_XYZ
    x = (M[0, 0] * r + M[0, 1] * g + M[0, 2] * b) * 100.0
    y = (M[1, 0] * r + M[1, 1] * g + M[1, 2] * b) * 100.0
    z = (M[2, 0] * r + M[2, 1] * g + M[2, 2] * b) * 100.0
    return x, y, z


@njit(cache=True)
def xyz_to_rgb(x: float, y: float, z: float) -> Triple:
    """
    XYZ [0, 100] -> linear RGB.

    Out-of-gamut colors are clipped to the unit cube, never flagged.
    """
    M = M_XYZ_TO_RGB
    r = clamp((M[0, 0] * x + M[0, 1] * y + M[0, 2] * z) / 100.0, 0.0, 1.0)
    g = clamp((M[1, 0] * x + M[1, 1] * y + M[1, 2] * z) / 100.0, 0.0, 1.0)
    b = clamp((M[2, 0] * x + M[2, 1] * y + M[2, 2] * z) / 100.0, 0.0, 1.0)
    return r, g, b


@njit(cache=True)
def xyz_to_luv(x: float, y: float, z: float) -> Triple:
    """
    XYZ -> CIELUV (D65).

    L uses the CIE piecewise cube root; u*, v* are the u', v' offsets from
    the white point scaled by 13 L.
    """
    y_ratio = y / REF_WHITE_D65[1]
    if y_ratio <= LUV_EPSILON:
        l = LUV_KAPPA * y_ratio
    else:
        l = 116.0 * (y_ratio ** (1.0 / 3.0)) - 16.0
    u = 13.0 * l * (u_prime(x, y, z) - D65_U_PRIME)
    v = 13.0 * l * (v_prime(x, y, z) - D65_V_PRIME)
    return l, u, v


@njit(cache=True)
def luv_to_xyz(l: float, u: float, v: float) -> Triple:
    """
    CIELUV (D65) -> XYZ.

    Recovers u', v' from u*, v* / 13L, undoes the lightness curve to get Y,
    then solves X and Z from the chromaticity. L <= 0 maps to black.
    """
    if l <= 0.0:
        return 0.0, 0.0, 0.0
    up = u / (13.0 * l) + D65_U_PRIME
    vp = v / (13.0 * l) + D65_V_PRIME
    if l <= 8.0:
        y = REF_WHITE_D65[1] * l / LUV_KAPPA
    else:
        tmp = (l + 16.0) / 116.0
        y = REF_WHITE_D65[1] * tmp * tmp * tmp
    if vp <= 1e-12:
        return 0.0, y, 0.0
    x = y * (9.0 * up) / (4.0 * vp)
    z = y * (12.0 - 3.0 * up - 20.0 * vp) / (4.0 * vp)
    return x, y, z


@njit(cache=True)
def luv_to_lch(u: float, v: float) -> Tuple[float, float]:
    """(u, v) -> (chroma, hue) with hue in [0, 2*pi)."""
    c = math.hypot(u, v)
    h = math.atan2(v, u)
    if h < 0.0:
        h += TWO_PI
    if h >= TWO_PI:
        h -= TWO_PI
    return c, h


@njit(cache=True)
def lch_to_luv(c: float, h: float) -> Tuple[float, float]:
    """(chroma, hue) -> (u, v)."""
    return c * math.cos(h), c * math.sin(h)


@njit(cache=True)
def lch_saturation(l: float, c: float) -> float:
    return c / max(l, SATURATION_EPSILON)


@njit(cache=True)
def lch_chroma(l: float, s: float) -> float:
    return s * l


@njit(cache=True)
def luv_saturation(l: float, u: float, v: float) -> float:
    return lch_saturation(l, math.hypot(u, v))


@njit(cache=True)
def srgb_to_lch_hue(sr: float, sg: float, sb: float) -> float:
    """LCh hue angle of a gamma-encoded sRGB color."""
    r, g, b = srgb_to_rgb(sr, sg, sb)
    x, y, z = rgb_to_xyz(r, g, b)
    l, u, v = xyz_to_luv(x, y, z)
    c, h = luv_to_lch(u, v)
    return h


# --- Hue arithmetic ---
# All hue blends go through hue_difference so that they follow the shorter
# arc and never cross the 0 / 2*pi seam the long way round.

@njit(cache=True)
def normalize_hue(h: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    r = h % TWO_PI
    if r >= TWO_PI:
        r = 0.0
    return r


@njit(cache=True)
def hue_difference(h0: float, h1: float) -> float:
    """Signed shortest angular step from h0 to h1, in (-pi, pi]."""
    d = (h1 - h0) % TWO_PI
    if d > PI:
        d -= TWO_PI
    return d


@njit(cache=True)
def mix_hue(alpha: float, h0: float, h1: float) -> float:
    """Blend two hues along the shorter arc; alpha=0 gives h0, alpha=1 h1."""
    return normalize_hue(h0 + alpha * hue_difference(h0, h1))


# =============================================================================
# 3. BATCH KERNELS
# =============================================================================
# Loops over the scalar kernels, so batch and per-color results are identical.

@njit(cache=True)
def _gamma_srgb(linear: ArrayFloat) -> ArrayFloat:
    """
    Applies sRGB OETF (Gamma Correction).

    Explicit loop instead of `np.where` avoids allocating a boolean mask.
    """
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        out_flat[i] = rgb_to_srgb_channel(linear_flat[i])
    return out

@njit(cache=True)
def _inverse_gamma_srgb(srgb: ArrayFloat) -> ArrayFloat:
    """Applies sRGB EOTF (Inverse Gamma)."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        out_flat[i] = srgb_to_rgb_channel(srgb_flat[i])
    return out


@njit(cache=True)
def _xyz_to_luv_kernel(xyz: ArrayFloat) -> ArrayFloat:
    n = xyz.shape[0]
    out = np.empty_like(xyz)
    for i in range(n):
        out[i, 0], out[i, 1], out[i, 2] = xyz_to_luv(xyz[i, 0], xyz[i, 1], xyz[i, 2])
    return out

@njit(cache=True)
def _luv_to_xyz_kernel(luv: ArrayFloat) -> ArrayFloat:
    n = luv.shape[0]
    out = np.empty_like(luv)
    for i in range(n):
        out[i, 0], out[i, 1], out[i, 2] = luv_to_xyz(luv[i, 0], luv[i, 1], luv[i, 2])
    return out

@njit(cache=True)
def _luv_to_lch_kernel(luv: ArrayFloat) -> ArrayFloat:
    """(N, 3) LUV -> (N, 3) LCh, hue in radians."""
    n = luv.shape[0]
    out = np.empty_like(luv)
    for i in range(n):
        c, h = luv_to_lch(luv[i, 1], luv[i, 2])
        out[i, 0] = luv[i, 0]
        out[i, 1] = c
        out[i, 2] = h
    return out

@njit(cache=True)
def _lch_to_luv_kernel(lch: ArrayFloat) -> ArrayFloat:
    n = lch.shape[0]
    out = np.empty_like(lch)
    for i in range(n):
        u, v = lch_to_luv(lch[i, 1], lch[i, 2])
        out[i, 0] = lch[i, 0]
        out[i, 1] = u
        out[i, 2] = v
    return out

@njit(cache=True)
def _luv_saturation_kernel(luv: ArrayFloat) -> ArrayFloat:
    n = luv.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = luv_saturation(luv[i, 0], luv[i, 1], luv[i, 2])
    return out


# =============================================================================
# 4. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for batch color space transformations.

    Architecture Note:
        Core transforms provide both a public ``@handle_shapes`` decorated API
        and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
        float64 input.  Pipelines (e.g. ``luv_to_srgb``) chain the ``_raw``
        variants to avoid redundant shape checks at each stage.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _srgb_to_rgb_raw(srgb_array: ArrayFloat) -> ArrayFloat:
        return _inverse_gamma_srgb(srgb_array)

    @staticmethod
    def _rgb_to_srgb_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        return _gamma_srgb(rgb_array)

    @staticmethod
    def _rgb_to_xyz_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        return np.dot(rgb_array, _M_RGB_TO_XYZ_T) * 100.0

    @staticmethod
    def _xyz_to_rgb_raw(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        linear = np.dot(xyz_array, _M_XYZ_TO_RGB_T) / 100.0
        if clip:
            linear = np.clip(linear, 0.0, 1.0)
        return linear

    @staticmethod
    def _xyz_to_luv_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        return _xyz_to_luv_kernel(xyz_array)

    @staticmethod
    def _luv_to_xyz_raw(luv_array: ArrayFloat) -> ArrayFloat:
        return _luv_to_xyz_kernel(luv_array)

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def srgb_to_rgb(srgb_array: ArrayFloat) -> ArrayFloat:
        """
        Converts gamma-encoded sRGB [0..1] to linear RGB [0..1].

        Args:
            srgb_array: Input sRGB data, shape (N, 3) or (3,).
        """
        return ColorSpaceEngine._srgb_to_rgb_raw(srgb_array)

    @staticmethod
    @handle_shapes
    def rgb_to_srgb(rgb_array: ArrayFloat) -> ArrayFloat:
        """Converts linear RGB [0..1] to gamma-encoded sRGB [0..1]."""
        return ColorSpaceEngine._rgb_to_srgb_raw(rgb_array)

    @staticmethod
    @handle_shapes
    def rgb_to_xyz(rgb_array: ArrayFloat) -> ArrayFloat:
        """
        Converts linear RGB [0..1] to XYZ [0..100] (D65).

        Args:
            rgb_array: Input linear RGB data, shape (N, 3) or (3,).

        Returns:
            XYZ coordinates.
        """
        return ColorSpaceEngine._rgb_to_xyz_raw(rgb_array)

    @staticmethod
    @handle_shapes
    def xyz_to_rgb(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        Converts XYZ [0..100] (D65) to linear RGB.

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).
            clip: If True (default), clamps each channel to [0, 1].  Set False
                  to inspect how far a color lies outside the sRGB gamut.

        Returns:
            Linear RGB coordinates.
        """
        return ColorSpaceEngine._xyz_to_rgb_raw(xyz_array, clip=clip)

    @staticmethod
    @handle_shapes
    def xyz_to_luv(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ [0..100] to CIELUV (D65 white).

        Returns:
            Luv coordinates, L in [0, 100].
        """
        return ColorSpaceEngine._xyz_to_luv_raw(xyz_array)

    @staticmethod
    @handle_shapes
    def luv_to_xyz(luv_array: ArrayFloat) -> ArrayFloat:
        """Converts CIELUV (D65 white) to XYZ [0..100]."""
        return ColorSpaceEngine._luv_to_xyz_raw(luv_array)

    @staticmethod
    @handle_shapes
    def luv_to_lch(luv_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELUV to its polar form LCh(uv).

        Returns:
            LCh coordinates (Lightness, Chroma, Hue in radians [0, 2*pi)).
        """
        return _luv_to_lch_kernel(luv_array)

    @staticmethod
    @handle_shapes
    def lch_to_luv(lch_array: ArrayFloat) -> ArrayFloat:
        """Converts LCh(uv) with hue in radians to CIELUV."""
        return _lch_to_luv_kernel(lch_array)

    @staticmethod
    @handle_shapes
    def luv_saturation(luv_array: ArrayFloat) -> ArrayFloat:
        """Saturation chroma / L per color; shape (N,) or a scalar."""
        return _luv_saturation_kernel(luv_array)

    # --- Pipelines ---

    @staticmethod
    @handle_shapes
    def srgb_to_luv(srgb_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion sRGB -> CIELUV."""
        rgb = ColorSpaceEngine._srgb_to_rgb_raw(srgb_array)
        xyz = ColorSpaceEngine._rgb_to_xyz_raw(rgb)
        return ColorSpaceEngine._xyz_to_luv_raw(xyz)

    @staticmethod
    @handle_shapes
    def luv_to_srgb(luv_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion CIELUV -> sRGB, clipped to the sRGB gamut."""
        xyz = ColorSpaceEngine._luv_to_xyz_raw(luv_array)
        rgb = ColorSpaceEngine._xyz_to_rgb_raw(xyz)
        return ColorSpaceEngine._rgb_to_srgb_raw(rgb)

    @staticmethod
    @handle_shapes
    def luv_to_srgb_bytes(luv_array: ArrayFloat) -> np.ndarray:
        """CIELUV -> sRGB bytes (uint8), rounding half away from zero."""
        xyz = ColorSpaceEngine._luv_to_xyz_raw(luv_array)
        rgb = ColorSpaceEngine._xyz_to_rgb_raw(xyz)
        srgb = ColorSpaceEngine._rgb_to_srgb_raw(rgb)
        return np.floor(srgb * 255.0 + 0.5).astype(np.uint8)

    @staticmethod
    def srgb_bytes_to_luv(srgb_bytes: np.ndarray) -> ArrayFloat:
        """uint8 sRGB triples (e.g. a generated color map) -> CIELUV."""
        return ColorSpaceEngine.srgb_to_luv(np.asarray(srgb_bytes, dtype=np.float64) / 255.0)


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Tincta Color Engine Validation ---")

    rng = np.random.default_rng(0)
    rgb_in = rng.random((1000, 3))

    print("1. Testing Round-Trip Stability (RGB->XYZ->LUV->XYZ->RGB)...")
    xyz = ColorSpaceEngine.rgb_to_xyz(rgb_in)
    luv = ColorSpaceEngine.xyz_to_luv(xyz)
    rgb_out = ColorSpaceEngine.xyz_to_rgb(ColorSpaceEngine.luv_to_xyz(luv))
    max_err = np.max(np.abs(rgb_in - rgb_out))
    print(f"   Max Error: {max_err:.2e} {'[PASS]' if max_err < 1e-3 else '[FAIL]'}")

    print("2. Testing LCh Round-Trip...")
    luv_back = ColorSpaceEngine.lch_to_luv(ColorSpaceEngine.luv_to_lch(luv))
    max_err_lch = np.max(np.abs(luv - luv_back))
    print(f"   Max Error (LUV->LCh->LUV): {max_err_lch:.2e} "
          f"{'[PASS]' if max_err_lch < 1e-9 else '[FAIL]'}")

    print("3. Testing Hue Seam...")
    h = mix_hue(0.5, 0.1, 6.2)
    print(f"   mix_hue(0.5, 0.1, 6.2) = {h:.4f} "
          f"{'[PASS]' if abs(hue_difference(h, 0.0)) < 0.1 else '[FAIL]'}")

    print("4. Testing Shape Safety...")
    try:
        ColorSpaceEngine.rgb_to_xyz(np.zeros((10, 5)))
    except ValueError as e:
        print(f"   Caught expected error: {e}")
