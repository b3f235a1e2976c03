# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for RGB space derivation and transfer functions.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from tincture_errors import DegenerateMatrixError
from tincture_illuminant import ILLUMINANT_D65, Chromaticity
from tincture_rgbspec import (
    ACESCCT_TRANSFER, PQ_TRANSFER, HLG_TRANSFER, SRGB_TRANSFER, BT709_TRANSFER, PROPHOTO_TRANSFER,
    RgChromaticity, RgbPrimaries, RgbSpace, RgbSpec, TransferFunction, TransferKind, resolve_space,
)


# =============================================================================
# Matrix derivation
# =============================================================================

@pytest.mark.parametrize("space", list(RgbSpace), ids=[s.name for s in RgbSpace])
def test_white_point_closure(space):
    white = space.spec.linear_to_xyz((1.0, 1.0, 1.0))
    np.testing.assert_allclose(white, space.context.reference_white, atol=1e-6)

@pytest.mark.parametrize("space", list(RgbSpace), ids=[s.name for s in RgbSpace])
def test_matrix_pair_is_inverse(space):
    product = space.xyz_matrix @ space.inverse_xyz_matrix
    np.testing.assert_allclose(product, np.eye(3), atol=1e-10)

def test_srgb_white_and_matrix():
    np.testing.assert_allclose(
        RgbSpace.SRGB.spec.linear_to_xyz((1.0, 1.0, 1.0)), (0.9505, 1.0, 1.0890), atol=1e-4
    )
    expected = np.array([
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ])
    np.testing.assert_allclose(RgbSpace.SRGB.xyz_matrix, expected, atol=1e-6)

def test_matrices_are_read_only_and_cached():
    spec = RgbSpace.DISPLAY_P3.spec
    assert spec.xyz_matrix is spec.xyz_matrix
    with pytest.raises(ValueError):
        spec.xyz_matrix[0, 0] = 0.0

def test_matrix_cell_initialises_once_under_threads():
    spec = RgbSpec.custom("Threaded", (0.7, 0.3), (0.2, 0.7), (0.15, 0.05), ILLUMINANT_D65)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: spec.xyz_matrix, range(32)))
    assert all(r is results[0] for r in results)

def test_collinear_primaries_fail_fast():
    primaries = RgbPrimaries.from_xy((0.1, 0.1), (0.2, 0.2), (0.3, 0.3))
    with pytest.raises(DegenerateMatrixError):
        primaries.xyz_matrix(ILLUMINANT_D65.white_2)
    spec = RgbSpec.custom("Flat", (0.1, 0.1), (0.2, 0.2), (0.3, 0.3), ILLUMINANT_D65)
    with pytest.raises(DegenerateMatrixError):
        spec.xyz_matrix

def test_custom_spec_is_hashable_and_resolvable():
    spec = RgbSpec.custom("Mine", (0.64, 0.33), (0.30, 0.60), (0.15, 0.06), ILLUMINANT_D65)
    assert hash(spec) == hash(RgbSpec.custom("Mine", (0.64, 0.33), (0.30, 0.60),
                                             (0.15, 0.06), ILLUMINANT_D65))
    assert resolve_space(spec) is spec
    assert resolve_space(RgbSpace.SRGB) is RgbSpace.SRGB.spec
    np.testing.assert_allclose(spec.xyz_matrix, RgbSpace.LINEAR_SRGB.xyz_matrix)
    with pytest.raises(TypeError):
        resolve_space("sRGB")  # type: ignore[arg-type]

def test_catalog_labels_are_unique():
    labels = [space.label for space in RgbSpace]
    assert len(labels) == len(set(labels)) == 35


# =============================================================================
# Transfer functions
# =============================================================================

@pytest.mark.parametrize("transfer", [
    SRGB_TRANSFER, BT709_TRANSFER, PROPHOTO_TRANSFER, HLG_TRANSFER, ACESCCT_TRANSFER,
    TransferFunction.power(2.2), TransferFunction(TransferKind.LINEAR),
])
def test_transfer_round_trip(transfer):
    values = np.linspace(0.0, 1.0, 51)
    np.testing.assert_allclose(transfer.encode(transfer.decode(values)), values, atol=1e-9)

def test_srgb_curve_points():
    assert SRGB_TRANSFER.decode(0.04045) == pytest.approx(0.04045 / 12.92)
    assert SRGB_TRANSFER.decode(1.0) == pytest.approx(1.0)
    assert SRGB_TRANSFER.encode(0.5) == pytest.approx(0.735357, abs=1e-6)
    assert isinstance(SRGB_TRANSFER.decode(0.5), float)

def test_pq_is_absolute():
    assert PQ_TRANSFER.encode(10000.0) == pytest.approx(1.0)
    assert PQ_TRANSFER.decode(1.0) == pytest.approx(10000.0)
    assert PQ_TRANSFER.decode(0.0) == 0.0
    assert PQ_TRANSFER.decode(PQ_TRANSFER.encode(100.0)) == pytest.approx(100.0)

def test_acescct_curve():
    # Log and linear segments meet at 2^-7
    assert ACESCCT_TRANSFER.encode(0.0078125) == pytest.approx(0.155251141552511, abs=1e-9)
    assert ACESCCT_TRANSFER.encode(0.18) == pytest.approx(0.4135884, abs=1e-6)
    assert ACESCCT_TRANSFER.decode(ACESCCT_TRANSFER.encode(0.001)) == pytest.approx(0.001)
    assert ACESCCT_TRANSFER.decode(2.0) == 65504.0

def test_camera_gamuts_are_registered():
    assert RgbSpace.ACESCCT.transfer is ACESCCT_TRANSFER
    assert RgbSpace.SONY_S_GAMUT3_CINE.label == "Sony S-Gamut3.Cine"
    assert RgbSpace.BEST_RGB.context.illuminant.name == "D50"

def test_hlg_segments():
    assert HLG_TRANSFER.encode(1.0 / 12.0) == pytest.approx(0.5)
    assert HLG_TRANSFER.encode(1.0) == pytest.approx(1.0, abs=1e-5)
    assert HLG_TRANSFER.encode(-0.1) == 0.0

def test_gamma_is_mirrored_for_negatives():
    gamma = TransferFunction.power(2.2)
    assert gamma.decode(-0.5) == pytest.approx(-(0.5 ** 2.2))
    assert gamma.encode(-(0.5 ** 2.2)) == pytest.approx(-0.5)

def test_gamma_must_be_positive():
    with pytest.raises(ValueError):
        TransferFunction.power(0.0)

def test_array_shape_is_kept():
    values = np.full((4, 3), 0.5)
    assert SRGB_TRANSFER.decode(values).shape == (4, 3)


# =============================================================================
# rg chromaticity
# =============================================================================

def test_rg_of_the_space_white_is_balanced():
    white = Chromaticity.from_xyz(RgbSpace.SRGB.context.reference_white)
    rg = RgChromaticity.from_xy(white)
    assert (rg.r, rg.g, rg.b) == pytest.approx((1.0 / 3.0, 1.0 / 3.0, 1.0 / 3.0), abs=1e-9)

def test_rg_from_linear():
    rg = RgChromaticity.from_linear(0.2, 0.6, 0.2, RgbSpace.DISPLAY_P3)
    assert (rg.r, rg.g) == pytest.approx((0.2, 0.6))
    assert rg.space is RgbSpace.DISPLAY_P3
    assert RgChromaticity.from_linear(0.0, 0.0, 0.0) == RgChromaticity(0.0, 0.0)

@pytest.mark.parametrize("space", [RgbSpace.SRGB, RgbSpace.ADOBE_RGB, RgbSpace.PROPHOTO_RGB])
def test_rg_returns_to_xy(space):
    xy = Chromaticity(0.35, 0.42)
    back = RgChromaticity.from_xy(xy, space).to_xy()
    assert (back.x, back.y) == pytest.approx((xy.x, xy.y), abs=1e-12)

def test_rg_of_a_primary():
    rg = RgChromaticity.from_xy(RgbSpace.SRGB.spec.primaries.red)
    assert (rg.r, rg.g) == pytest.approx((1.0, 0.0), abs=1e-9)
