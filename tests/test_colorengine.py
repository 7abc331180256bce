# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math

import numpy as np
import pytest

from tincta_colorengine import (
    ColorSpaceEngine,
    REF_WHITE_D65,
    TWO_PI,
    hue_difference,
    luv_to_xyz,
    mix_hue,
    normalize_hue,
    rgb_to_srgb,
    rgb_to_xyz,
    srgb_to_rgb,
    xyz_to_luv,
    xyz_to_rgb,
    luv_saturation,
)


@pytest.fixture
def rgb_samples():
    return np.random.default_rng(42).random((500, 3))


def test_srgb_round_trip(rgb_samples):
    srgb = ColorSpaceEngine.rgb_to_srgb(rgb_samples)
    back = ColorSpaceEngine.srgb_to_rgb(srgb)
    np.testing.assert_allclose(back, rgb_samples, atol=1e-9)


def test_rgb_xyz_luv_round_trip(rgb_samples):
    xyz = ColorSpaceEngine.rgb_to_xyz(rgb_samples)
    luv = ColorSpaceEngine.xyz_to_luv(xyz)
    rgb = ColorSpaceEngine.xyz_to_rgb(ColorSpaceEngine.luv_to_xyz(luv))
    np.testing.assert_allclose(rgb, rgb_samples, atol=1e-3)


def test_luv_lch_round_trip(rgb_samples):
    luv = ColorSpaceEngine.srgb_to_luv(rgb_samples)
    lch = ColorSpaceEngine.luv_to_lch(luv)
    assert np.all(lch[:, 1] >= 0.0)
    assert np.all((lch[:, 2] >= 0.0) & (lch[:, 2] < TWO_PI))
    np.testing.assert_allclose(ColorSpaceEngine.lch_to_luv(lch), luv, atol=1e-9)


def test_scalar_kernels_match_batch_api(rgb_samples):
    luv_batch = ColorSpaceEngine.xyz_to_luv(ColorSpaceEngine.rgb_to_xyz(rgb_samples))
    for rgb, expected in zip(rgb_samples[:20], luv_batch[:20]):
        np.testing.assert_allclose(xyz_to_luv(*rgb_to_xyz(*rgb)), expected, atol=1e-9)


def test_white_point_is_achromatic():
    l, u, v = xyz_to_luv(*REF_WHITE_D65)
    assert l == pytest.approx(100.0)
    assert abs(u) < 1e-9
    assert abs(v) < 1e-9


def test_linear_white_has_unit_luminance():
    x, y, z = rgb_to_xyz(1.0, 1.0, 1.0)
    assert y == pytest.approx(100.0)
    assert x == pytest.approx(REF_WHITE_D65[0], abs=0.01)
    assert z == pytest.approx(REF_WHITE_D65[2], abs=0.05)


def test_black_is_guarded():
    assert xyz_to_luv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert luv_to_xyz(0.0, 12.0, -7.0) == (0.0, 0.0, 0.0)
    assert luv_saturation(0.0, 0.0, 0.0) == 0.0


def test_xyz_to_rgb_clips_out_of_gamut():
    assert xyz_to_rgb(200.0, 200.0, 200.0) == (1.0, 1.0, 1.0)
    xyz = np.array([200.0, 200.0, 200.0])
    np.testing.assert_array_equal(ColorSpaceEngine.xyz_to_rgb(xyz), [1.0, 1.0, 1.0])
    assert np.all(ColorSpaceEngine.xyz_to_rgb(xyz, clip=False) > 1.0)


def test_single_color_keeps_shape():
    out = ColorSpaceEngine.rgb_to_xyz(np.array([0.2, 0.4, 0.6]))
    assert out.shape == (3,)
    assert np.isscalar(ColorSpaceEngine.luv_saturation(np.array([50.0, 10.0, 0.0])))


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        ColorSpaceEngine.rgb_to_xyz(np.zeros((10, 5)))


def test_bytes_round_trip():
    srgb_bytes = np.array([[255, 0, 0], [12, 200, 90], [255, 255, 255]], dtype=np.uint8)
    luv = ColorSpaceEngine.srgb_bytes_to_luv(srgb_bytes)
    np.testing.assert_array_equal(ColorSpaceEngine.luv_to_srgb_bytes(luv), srgb_bytes)


def test_batch_gamma_matches_scalar_kernels(rgb_samples):
    srgb = ColorSpaceEngine.rgb_to_srgb(rgb_samples)
    back = ColorSpaceEngine.srgb_to_rgb(rgb_samples)
    for i in range(20):
        np.testing.assert_allclose(srgb[i], rgb_to_srgb(*rgb_samples[i]), rtol=0, atol=1e-14)
        np.testing.assert_allclose(back[i], srgb_to_rgb(*rgb_samples[i]), rtol=0, atol=1e-14)


# ---------------------------------------------------------------------------
# Hue arithmetic
# ---------------------------------------------------------------------------
def test_normalize_hue():
    assert normalize_hue(TWO_PI) == 0.0
    assert normalize_hue(-0.5) == pytest.approx(TWO_PI - 0.5)
    assert normalize_hue(7.0) == pytest.approx(7.0 - TWO_PI)


def test_hue_difference_range():
    assert hue_difference(0.0, math.pi) == pytest.approx(math.pi)
    assert hue_difference(math.pi, 0.0) == pytest.approx(math.pi)
    assert hue_difference(0.1, 6.2) == pytest.approx(6.2 - TWO_PI - 0.1)
    assert hue_difference(6.2, 0.1) == pytest.approx(0.1 + TWO_PI - 6.2)


def test_mix_hue_takes_short_path_across_seam():
    for h0, h1 in ((0.1, 6.2), (6.2, 0.1)):
        mid = mix_hue(0.5, h0, h1)
        assert 0.0 <= mid < TWO_PI
        # The short arc between 0.1 and 6.2 passes through 0, not through pi.
        assert abs(hue_difference(mid, 0.0)) < 0.01
    assert mix_hue(0.0, 0.1, 6.2) == pytest.approx(0.1)
    assert mix_hue(1.0, 0.1, 6.2) == pytest.approx(6.2)
