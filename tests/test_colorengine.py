# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the vectorised ColorSpaceEngine.
"""

import numpy as np
import pytest

from color_models import Lab, Luv, Okhsv, Oklab, Rgb, Xyy, Xyz
from tincture_adaptation import D50_CONTEXT, D65_CONTEXT
from tincture_colorengine import ColorSpaceEngine as CSE
from tincture_rgbspec import RgbSpace

RNG = np.random.default_rng(7)
RGB_BATCH = RNG.uniform(0.05, 0.95, size=(64, 3))


# =============================================================================
# Shape handling
# =============================================================================

def test_single_row_keeps_its_shape():
    out = CSE.srgb_to_xyz(np.array([0.4, 0.5, 0.6]))
    assert out.shape == (3,)
    assert CSE.srgb_to_xyz(RGB_BATCH).shape == (64, 3)

def test_bad_shape_raises():
    with pytest.raises(ValueError):
        CSE.xyz_to_lab(np.zeros((10, 5)))
    with pytest.raises(ValueError):
        CSE.xyz_to_lab(np.zeros(3), white=(1.0, 1.0))

def test_input_is_not_modified():
    batch = RGB_BATCH.copy()
    CSE.rgb_to_lab(batch)
    np.testing.assert_array_equal(batch, RGB_BATCH)


# =============================================================================
# Agreement with the model classes
# =============================================================================

def test_rgb_batch_matches_models():
    xyz = CSE.rgb_to_xyz(RGB_BATCH, RgbSpace.DISPLAY_P3)
    for row, out in zip(RGB_BATCH, xyz):
        model = Rgb(*row, space=RgbSpace.DISPLAY_P3).to_xyz()
        np.testing.assert_allclose(out, model.to_array(), atol=1e-12)

def test_lab_batch_matches_models():
    lab = CSE.rgb_to_lab(RGB_BATCH)
    for row, out in zip(RGB_BATCH, lab):
        np.testing.assert_allclose(out, Rgb(*row).convert(Lab).to_array(), atol=1e-10)

def test_xyy_batch_matches_models():
    xyz = CSE.srgb_to_xyz(RGB_BATCH)
    xyy = CSE.xyz_to_xyY(xyz)
    for row, out in zip(xyz, xyy):
        np.testing.assert_allclose(out, Xyz(*row).convert(Xyy).to_array(), atol=1e-12)

def test_okhsv_batch_matches_models():
    oklab = CSE.srgb_to_oklab(RGB_BATCH)
    okhsv = CSE.oklab_to_okhsv(oklab)
    for row, lab_row, out in zip(RGB_BATCH, oklab, okhsv):
        np.testing.assert_allclose(lab_row, Rgb(*row).convert(Oklab).to_array(), atol=1e-12)
        np.testing.assert_allclose(out, Rgb(*row).convert(Okhsv).to_array(), atol=1e-9)


# =============================================================================
# Round trips
# =============================================================================

def test_lab_round_trip():
    xyz = CSE.srgb_to_xyz(RGB_BATCH)
    np.testing.assert_allclose(CSE.lab_to_xyz(CSE.xyz_to_lab(xyz)), xyz, atol=1e-12)

def test_luv_round_trip():
    xyz = CSE.srgb_to_xyz(RGB_BATCH)
    luv = CSE.xyz_to_luv(xyz, D50_CONTEXT.reference_white)
    np.testing.assert_allclose(CSE.luv_to_xyz(luv, D50_CONTEXT.reference_white), xyz, atol=1e-12)
    np.testing.assert_allclose(luv[0], Luv.from_xyz(Xyz(*xyz[0], context=D50_CONTEXT)).to_array(),
                               atol=1e-10)

def test_polar_round_trip():
    lab = CSE.rgb_to_lab(RGB_BATCH)
    lch = CSE.lab_to_lch(lab)
    assert np.all((lch[:, 2] >= 0.0) & (lch[:, 2] < 360.0))
    np.testing.assert_allclose(CSE.lch_to_lab(lch), lab, atol=1e-10)

def test_rgb_round_trip_in_every_space():
    for space in (RgbSpace.SRGB, RgbSpace.ADOBE_RGB, RgbSpace.PROPHOTO_RGB, RgbSpace.REC2020):
        xyz = CSE.rgb_to_xyz(RGB_BATCH, space)
        np.testing.assert_allclose(CSE.xyz_to_rgb(xyz, space), RGB_BATCH, atol=1e-9)

def test_oklab_round_trips():
    xyz = CSE.srgb_to_xyz(RGB_BATCH)
    np.testing.assert_allclose(CSE.oklab_to_xyz(CSE.xyz_to_oklab(xyz)), xyz, atol=1e-10)
    oklab = CSE.srgb_to_oklab(RGB_BATCH)
    np.testing.assert_allclose(CSE.oklab_to_srgb(oklab), RGB_BATCH, atol=1e-6)

def test_xyz_to_srgb_clips_by_default():
    out = CSE.xyz_to_srgb(np.array([[0.0, 1.0, 0.0]]))
    assert out.min() >= 0.0 and out.max() <= 1.0
    raw = CSE.xyz_to_srgb(np.array([[0.0, 1.0, 0.0]]), clip=False)
    assert raw.min() < 0.0


# =============================================================================
# Adaptation
# =============================================================================

def test_adapt_batch():
    xyz = CSE.srgb_to_xyz(RGB_BATCH)
    there = CSE.adapt(xyz, D65_CONTEXT, D50_CONTEXT)
    np.testing.assert_allclose(CSE.adapt(there, D50_CONTEXT, D65_CONTEXT), xyz, atol=1e-10)
    same = CSE.adapt(xyz, D65_CONTEXT, D65_CONTEXT)
    np.testing.assert_array_equal(same, xyz)
    assert same is not xyz
