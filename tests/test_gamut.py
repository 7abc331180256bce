# -*- coding: utf-8 -*-
"""
Tincta: Perceptually uniform color maps from intuitive parameters
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
import pytest

from tincta_colorengine import (
    ColorSpaceEngine,
    TWO_PI,
    hue_difference,
    luv_saturation,
    luv_to_lch,
)
from tincta_gamut import (
    BRIGHT_POINT,
    BRIGHT_POINT_HUE,
    BRIGHT_POINT_SATURATION,
    GAMUT_HUES,
    RED_SATURATION,
    YELLOW_HUE,
    YELLOW_LIGHTNESS,
    most_saturated_in_srgb,
    smax,
)

HUES = np.linspace(0.0, TWO_PI, 361)[:-1]


def _luv_to_unclipped_srgb(luv):
    xyz = ColorSpaceEngine.luv_to_xyz(np.asarray(luv))
    rgb = ColorSpaceEngine.xyz_to_rgb(xyz, clip=False)
    return ColorSpaceEngine.rgb_to_srgb(rgb)


def test_gamut_hues_are_ordered_corners():
    assert GAMUT_HUES.shape == (6,)
    assert np.all(np.diff(GAMUT_HUES) > 0.0)
    assert np.all((GAMUT_HUES >= 0.0) & (GAMUT_HUES < TWO_PI))


def test_gamut_hues_are_read_only():
    with pytest.raises(ValueError):
        GAMUT_HUES[0] = 0.0


@pytest.mark.parametrize("hue", HUES)
def test_boundary_color_lies_on_cube_surface(hue):
    srgb = _luv_to_unclipped_srgb(most_saturated_in_srgb(hue))
    assert np.min(np.abs(srgb)) < 1e-4
    assert np.min(np.abs(srgb - 1.0)) < 1e-4


@pytest.mark.parametrize("hue", HUES[::10])
def test_boundary_color_keeps_hue(hue):
    l, u, v = most_saturated_in_srgb(hue)
    c, h = luv_to_lch(u, v)
    assert c > 0.0
    assert abs(hue_difference(h, hue)) < 1e-5


@pytest.mark.parametrize("hue", HUES[::5])
def test_smax_is_zero_at_black_and_white(hue):
    assert abs(smax(0.0, hue)) < 1e-12
    assert abs(smax(100.0, hue)) < 1e-12


@pytest.mark.parametrize("hue", HUES[::30])
def test_smax_peaks_at_boundary_color(hue):
    l, u, v = most_saturated_in_srgb(hue)
    peak = luv_saturation(l, u, v)
    assert smax(l, hue) == pytest.approx(peak)
    assert smax(0.5 * l, hue) == pytest.approx(0.5 * peak)
    assert smax(l + 0.5 * (100.0 - l), hue) == pytest.approx(0.5 * peak)


def test_bright_point_is_yellow():
    l, u, v = BRIGHT_POINT
    assert 96.0 < l < 98.0
    assert 1.45 < BRIGHT_POINT_HUE < 1.55
    assert BRIGHT_POINT_SATURATION == pytest.approx(luv_saturation(l, u, v))
    assert YELLOW_LIGHTNESS == l
    assert YELLOW_HUE == BRIGHT_POINT_HUE


def test_red_saturation_reference():
    red = ColorSpaceEngine.srgb_to_luv(np.array([1.0, 0.0, 0.0]))
    assert RED_SATURATION == pytest.approx(luv_saturation(*red))
    assert 3.0 < RED_SATURATION < 3.7
