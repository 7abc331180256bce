# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math

import numpy as np
import pytest

from tincta_colorengine import ColorSpaceEngine, TWO_PI
from tincta_gamut import YELLOW_HUE, YELLOW_LIGHTNESS
from tincta_brewer import (
    DIVERGING_NEUTRAL_MAX_N,
    brewer_diverging,
    brewer_diverging_default_contrast_for_small_n,
    brewer_qualitative,
    brewer_sequential,
    brewer_sequential_default_contrast_for_small_n,
)
from tincta_cubehelix import cube_helix

SEQ = dict(contrast=0.88, saturation=0.6, brightness=0.75, warmth=0.15)
DIV = dict(divergence=TWO_PI * 2.0 / 3.0, **SEQ)
QUAL = dict(divergence=math.radians(250.0), contrast=0.5, saturation=0.5, brightness=0.8)


def _lightness(colors):
    return ColorSpaceEngine.srgb_bytes_to_luv(colors)[:, 0]


def _chroma(colors):
    luv = ColorSpaceEngine.srgb_bytes_to_luv(colors)
    return np.hypot(luv[:, 1], luv[:, 2])


@pytest.mark.parametrize("n", [2, 3, 9, 11, 256])
def test_shapes_and_dtype(n):
    for colors in (brewer_sequential(n, 1.0, **SEQ),
                   brewer_diverging(n, 1.0, **DIV),
                   brewer_qualitative(n, 1.0, **QUAL)):
        assert colors.shape == (n, 3)
        assert colors.dtype == np.uint8


def test_cube_helix_two_colors_are_black_and_white():
    colors, clipped = cube_helix(2, 0.5, -1.5, 1.2, 1.0)
    np.testing.assert_array_equal(colors, [[0, 0, 0], [255, 255, 255]])
    assert clipped == 0


@pytest.mark.parametrize("hue", [0.0, 1.0, 2.5, 4.2, 5.5])
def test_sequential_runs_from_light_to_dark(hue):
    lightness = _lightness(brewer_sequential(16, hue, **SEQ))
    assert np.all(np.diff(lightness) < 0.0)


def test_sequential_two_colors():
    light, dark = _lightness(brewer_sequential(2, 3.0, **SEQ))
    assert light > dark


def test_sequential_contrast_zero_is_flat():
    colors = brewer_sequential(8, 2.0, 0.0, 0.6, 0.75, 0.15)
    assert np.all(colors == colors[0])


def test_generators_are_deterministic():
    np.testing.assert_array_equal(brewer_sequential(64, 0.3, **SEQ),
                                  brewer_sequential(64, 0.3, **SEQ))
    np.testing.assert_array_equal(brewer_diverging(65, 0.3, **DIV),
                                  brewer_diverging(65, 0.3, **DIV))
    np.testing.assert_array_equal(brewer_qualitative(12, 0.3, **QUAL),
                                  brewer_qualitative(12, 0.3, **QUAL))
    first, first_clipped = cube_helix(256, 0.0, -1.5, 3.0, 1.0)
    second, second_clipped = cube_helix(256, 0.0, -1.5, 3.0, 1.0)
    np.testing.assert_array_equal(first, second)
    assert first_clipped == second_clipped > 0


def test_hue_is_wrapped():
    a = brewer_sequential(16, -1.0, **SEQ).astype(np.int16)
    b = brewer_sequential(16, TWO_PI - 1.0, **SEQ).astype(np.int16)
    c = brewer_sequential(16, TWO_PI * 3.0 - 1.0, **SEQ).astype(np.int16)
    assert np.max(np.abs(a - b)) <= 1
    assert np.max(np.abs(a - c)) <= 1


@pytest.mark.parametrize("n", [2, 8, 9, 11, 64, 257])
def test_diverging_mirrors_when_hues_swap(n):
    hue, divergence = 0.4, 2.0
    other = dict(DIV, divergence=TWO_PI - divergence)
    a = brewer_diverging(n, hue, **dict(DIV, divergence=divergence)).astype(np.int16)
    b = brewer_diverging(n, hue + divergence, **other).astype(np.int16)
    assert np.max(np.abs(a - b[::-1])) <= 1


@pytest.mark.parametrize("n", [9, 11, 257])
def test_diverging_middle_is_lightest_and_least_chromatic(n):
    colors = brewer_diverging(n, 0.0, **DIV)
    lightness = _lightness(colors)
    chroma = _chroma(colors)
    mid = n // 2
    assert lightness[mid] == pytest.approx(lightness.max(), abs=0.5)
    assert chroma[mid] < min(chroma[0], chroma[-1])


def test_diverging_branches_darken_toward_the_ends():
    lightness = _lightness(brewer_diverging(33, 1.0, **DIV))
    assert np.all(np.diff(lightness[:16]) > 0.0)
    assert np.all(np.diff(lightness[17:]) < 0.0)


def test_default_contrast_for_small_n():
    assert brewer_sequential_default_contrast_for_small_n(2) == pytest.approx(0.46)
    assert brewer_sequential_default_contrast_for_small_n(9) == pytest.approx(0.88)
    assert brewer_sequential_default_contrast_for_small_n(100) == pytest.approx(0.88)
    assert brewer_diverging_default_contrast_for_small_n(5) == pytest.approx(0.64)
    assert DIVERGING_NEUTRAL_MAX_N == 9


def test_qualitative_lightness_follows_distance_to_yellow():
    brightness, contrast = 0.8, 0.5
    colors = brewer_qualitative(2, YELLOW_HUE, math.pi, contrast, 0.0, brightness)
    # Zero saturation gives greys.
    assert np.all(colors.max(axis=1).astype(int) - colors.min(axis=1) <= 1)
    l_yellow, l_opposite = _lightness(colors)
    assert l_yellow == pytest.approx(brightness * YELLOW_LIGHTNESS, abs=0.6)
    assert l_opposite == pytest.approx((1.0 - contrast) * brightness * YELLOW_LIGHTNESS, abs=0.6)


def test_qualitative_colors_are_distinct():
    colors = brewer_qualitative(9, 0.0, **QUAL)
    assert len({tuple(row) for row in colors}) == 9
