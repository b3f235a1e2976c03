# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for chromaticities, observers and the illuminant catalog.
"""

import numpy as np
import pytest

from tincture_illuminant import (
    Chromaticity, Illuminant, Observer, ILLUMINANTS, ILLUMINANT_D50, ILLUMINANT_D65,
    ILLUMINANT_E, Upvp, Uv, illuminant_by_name,
)


def test_chromaticity_lift_and_project():
    xy = Chromaticity(0.3127, 0.3290)
    xyz = xy.to_xyz(1.0)
    assert xyz[1] == pytest.approx(1.0)
    back = Chromaticity.from_xyz(xyz)
    assert back.x == pytest.approx(xy.x)
    assert back.y == pytest.approx(xy.y)
    assert xy.z == pytest.approx(1.0 - 0.3127 - 0.3290)

def test_chromaticity_edge_cases():
    np.testing.assert_array_equal(Chromaticity(0.3, 0.0).to_xyz(), np.zeros(3))
    assert Chromaticity.from_xyz(np.zeros(3)).as_tuple() == (0.0, 0.0)

def test_ucs_coordinates_of_d65():
    xy = Chromaticity(0.3127, 0.3290)
    uv = xy.to_uv()
    assert (uv.u, uv.v) == pytest.approx((0.19783, 0.31222), abs=1e-5)
    upvp = xy.to_upvp()
    assert (upvp.u, upvp.v) == pytest.approx((0.19783, 0.46832), abs=1e-5)
    # v' is 1.5 v, u' equals u
    assert uv.to_upvp().v == pytest.approx(upvp.v)
    assert upvp.to_uv().v == pytest.approx(uv.v)

@pytest.mark.parametrize("xy", [(0.3127, 0.3290), (0.4476, 0.4074), (0.15, 0.06), (0.64, 0.33)])
def test_ucs_coordinates_return_to_xy(xy):
    xy = Chromaticity(*xy)
    for ucs in (xy.to_uv(), xy.to_upvp()):
        back = ucs.to_xy()
        assert (back.x, back.y) == pytest.approx((xy.x, xy.y), abs=1e-12)
    np.testing.assert_allclose(xy.to_uv().to_xyz(0.5), xy.to_xyz(0.5), atol=1e-12)

def test_ucs_degenerate_projections():
    assert Uv(2.0, 1.0).to_xy() == Chromaticity(0.0, 0.0)
    assert Upvp(2.0, 1.5).to_xy() == Chromaticity(0.0, 0.0)
    assert Chromaticity(1.5, 0.0).to_uv() == Uv(0.0, 0.0)

def test_d65_chromaticity():
    xy = ILLUMINANT_D65.chromaticity()
    assert xy.x == pytest.approx(0.3127, abs=1e-4)
    assert xy.y == pytest.approx(0.3290, abs=1e-4)

def test_observer_selects_white():
    assert ILLUMINANT_D65.white_tuple(Observer.CIE1931_2) == ILLUMINANT_D65.white_2
    assert ILLUMINANT_D65.white_tuple(Observer.CIE1964_10) == ILLUMINANT_D65.white_10
    assert ILLUMINANT_D65.white_2 != ILLUMINANT_D65.white_10

@pytest.mark.parametrize("name", sorted(ILLUMINANTS))
def test_catalog_whites_are_normalised(name):
    ill = ILLUMINANTS[name]
    for observer in Observer:
        assert ill.white(observer)[1] == pytest.approx(1.0)

def test_lookup_is_case_insensitive():
    assert illuminant_by_name("d65") is ILLUMINANT_D65
    assert illuminant_by_name(" D50 ") is ILLUMINANT_D50
    with pytest.raises(KeyError):
        illuminant_by_name("D93")

def test_equal_energy_white():
    np.testing.assert_array_equal(ILLUMINANT_E.white(), np.ones(3))

def test_custom_illuminants():
    ill = Illuminant.from_chromaticity("Warm", (0.4369, 0.4041))
    assert ill.white_2[1] == pytest.approx(1.0)
    assert ill.chromaticity().x == pytest.approx(0.4369)
    assert ill.white_10 == ill.white_2

    explicit = Illuminant.custom("Lab lamp", (0.98, 1.0, 0.9))
    assert explicit.white_tuple(Observer.CIE1964_10) == (0.98, 1.0, 0.9)

def test_custom_illuminant_validation():
    with pytest.raises(ValueError):
        Illuminant.from_chromaticity("Bad", (0.3, 0.0))
    with pytest.raises(ValueError):
        Illuminant.custom("Bad", (1.0, 1.0))  # type: ignore[arg-type]
