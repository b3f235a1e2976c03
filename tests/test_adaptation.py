# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for chromatic adaptation and viewing contexts.
"""

import warnings

import numpy as np
import pytest

import tincture_config
from tincture_adaptation import (
    BRADFORD, CAT02, CAT16, CATS, D50_CONTEXT, D65_CONTEXT, VON_KRIES, XYZ_SCALING,
    ViewingContext, adapt_xyz,
)
from tincture_illuminant import ILLUMINANT_A, ILLUMINANT_D50, ILLUMINANT_D65, Illuminant, Observer

SAMPLE = np.array([0.3, 0.4, 0.5])


@pytest.fixture
def cat_warnings():
    yield
    tincture_config.set_cat_warnings(True)


# =============================================================================
# Identity
# =============================================================================

def test_same_white_is_exact_identity():
    target = D65_CONTEXT.with_cat(CAT16)
    out = adapt_xyz(SAMPLE, D65_CONTEXT, target)
    np.testing.assert_array_equal(out, SAMPLE)
    assert out is not SAMPLE

def test_self_adaptation_of_d65():
    np.testing.assert_array_equal(adapt_xyz(SAMPLE, D65_CONTEXT, D65_CONTEXT), SAMPLE)

def test_needs_adaptation():
    assert not D65_CONTEXT.needs_adaptation(D65_CONTEXT.with_cat(VON_KRIES))
    assert D65_CONTEXT.needs_adaptation(D50_CONTEXT)
    assert D65_CONTEXT.needs_adaptation(D65_CONTEXT.with_observer(Observer.CIE1964_10))


# =============================================================================
# Von Kries re-rendering
# =============================================================================

@pytest.mark.parametrize("cat", list(CATS.values()), ids=list(CATS))
def test_source_white_maps_to_destination_white(cat):
    d65 = ILLUMINANT_D65.white_2
    d50 = ILLUMINANT_D50.white_2
    np.testing.assert_allclose(cat.adapt(d65, d65, d50), d50, atol=1e-9)

@pytest.mark.parametrize("cat", [BRADFORD, CAT02, CAT16, VON_KRIES])
def test_round_trip(cat):
    src = D65_CONTEXT.with_cat(cat)
    dst = ViewingContext(ILLUMINANT_A, cat=cat)
    there = adapt_xyz(SAMPLE, src, dst)
    back = adapt_xyz(there, dst, src)
    np.testing.assert_allclose(back, SAMPLE, atol=1e-8)

def test_bradford_d65_to_d50_matrix():
    expected = np.array([
        [1.0478112, 0.0228866, -0.0501270],
        [0.0295424, 0.9904844, -0.0170491],
        [-0.0092345, 0.0150436, 0.7521316],
    ])
    m = BRADFORD.adaptation_matrix(ILLUMINANT_D65.white_2, ILLUMINANT_D50.white_2)
    np.testing.assert_allclose(m, expected, atol=1e-5)

def test_composite_matrix_is_read_only():
    m = BRADFORD.adaptation_matrix(ILLUMINANT_D65.white_2, ILLUMINANT_D50.white_2)
    with pytest.raises(ValueError):
        m[0, 0] = 1.0

def test_adapt_array_matches_scalar():
    rows = np.array([[0.1, 0.2, 0.3], [0.5, 0.5, 0.5], [0.9, 1.0, 1.1]])
    d65, d50 = ILLUMINANT_D65.white_2, ILLUMINANT_D50.white_2
    batch = BRADFORD.adapt_array(rows, d65, d50)
    for row, out in zip(rows, batch):
        np.testing.assert_allclose(out, BRADFORD.adapt(row, d65, d50), atol=1e-14)

def test_target_cat_is_used():
    via_bradford = adapt_xyz(SAMPLE, D65_CONTEXT, D50_CONTEXT)
    via_cat16 = adapt_xyz(SAMPLE, D65_CONTEXT, D50_CONTEXT.with_cat(CAT16))
    assert not np.allclose(via_bradford, via_cat16, atol=1e-6)

def test_lms_round_trip():
    np.testing.assert_allclose(CAT02.from_lms(CAT02.to_lms(SAMPLE)), SAMPLE, atol=1e-12)


# =============================================================================
# Zero cone response guard
# =============================================================================

def test_zero_cone_channel_warns_and_passes_through(cat_warnings):
    with pytest.warns(RuntimeWarning, match="zero cone response"):
        m = XYZ_SCALING.adaptation_matrix((1.0, 1.0, 0.0), (1.0, 1.0, 1.0))
    np.testing.assert_allclose(m, np.eye(3))

def test_zero_cone_channel_warning_can_be_silenced(cat_warnings):
    tincture_config.set_cat_warnings(False)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        XYZ_SCALING.adaptation_matrix((1.0, 1.0, 0.0), (1.0, 1.0, 1.0))


# =============================================================================
# Custom contexts
# =============================================================================

def test_custom_illuminant_round_trip():
    custom = ViewingContext(Illuminant.from_chromaticity("Studio", (0.35, 0.36)))
    there = adapt_xyz(SAMPLE, D65_CONTEXT, custom)
    back = adapt_xyz(there, custom, D65_CONTEXT)
    np.testing.assert_allclose(back, SAMPLE, atol=1e-6)

def test_context_builders():
    ctx = D65_CONTEXT.with_illuminant(ILLUMINANT_A).with_cat(CAT02)
    assert ctx.illuminant is ILLUMINANT_A
    assert ctx.cat is CAT02
    assert ctx.observer is Observer.CIE1931_2
    np.testing.assert_allclose(ctx.reference_white, ILLUMINANT_A.white_2)
