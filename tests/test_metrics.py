# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for color differences, contrast and correlated color temperature.
"""

import numpy as np
import pytest

import math

from color_models import Lab, Rgb, Xyz
from tincture_adaptation import D50_CONTEXT
from tincture_illuminant import ILLUMINANT_A, ILLUMINANT_D65, Chromaticity
from tincture_metrics import (
    AERT_RECOMMENDED_MINIMUM, ColorMetrics, ContrastRatio, LightnessContrast, aert_brightness_difference,
    apca_contrast, cct_hernandez_andres, cct_mccamy, cct_ohno, cct_robertson, cie76, cie94, ciecmc,
    ciede2000, contrast_ratio, euclidean, manhattan, michelson_contrast, rms_contrast, weber_contrast,
)

# Sharma, Wu & Dalal (2005) reference pairs
SHARMA_PAIRS = [
    ((50.0, 2.6772, -79.7751), (50.0, 0.0, -82.7485), 2.0425),
    ((50.0, 0.0, 0.0), (50.0, -1.0, 2.0), 2.3669),
    ((50.0, 2.5, 0.0), (73.0, 25.0, -18.0), 27.1492),
]


# =============================================================================
# Batch differences
# =============================================================================

@pytest.mark.parametrize("lab1, lab2, expected", SHARMA_PAIRS)
def test_ciede2000_reference_pairs(lab1, lab2, expected):
    assert ColorMetrics.delta_E_2000(np.array(lab1), np.array(lab2)) == pytest.approx(expected, abs=1e-3)
    assert ColorMetrics.delta_E_2000(np.array(lab2), np.array(lab1)) == pytest.approx(expected, abs=1e-3)

def test_ciede2000_batch_matches_single():
    lab1 = np.array([p[0] for p in SHARMA_PAIRS])
    lab2 = np.array([p[1] for p in SHARMA_PAIRS])
    res = ColorMetrics.delta_E_2000(lab1, lab2)
    assert res.shape == (3,)
    np.testing.assert_allclose(res, [p[2] for p in SHARMA_PAIRS], atol=1e-3)

def test_single_row_is_broadcast():
    batch = np.array([[50.0, 0.0, 0.0], [60.0, 0.0, 0.0], [70.0, 0.0, 0.0]])
    res = ColorMetrics.delta_E_76(batch, np.array([50.0, 0.0, 0.0]))
    np.testing.assert_allclose(res, [0.0, 10.0, 20.0], atol=1e-12)

def test_identical_colors_have_zero_difference():
    lab = np.array([40.0, 20.0, -30.0])
    assert ColorMetrics.delta_E_2000(lab, lab) == pytest.approx(0.0, abs=1e-9)
    assert ColorMetrics.delta_E_94(lab, lab) == pytest.approx(0.0, abs=1e-9)

def test_bad_shapes_raise():
    with pytest.raises(ValueError):
        ColorMetrics.delta_E_76(np.zeros((10, 5)), np.zeros((10, 5)))
    with pytest.raises(ValueError):
        ColorMetrics.delta_E_2000(np.zeros((4, 3)), np.zeros((5, 3)))

def test_cie94_textiles_weights():
    ref = np.array([50.0, 40.0, 0.0])
    sample = np.array([60.0, 40.0, 0.0])
    # Pure lightness difference is divided by k_L
    assert ColorMetrics.delta_E_94(ref, sample) == pytest.approx(10.0)
    assert ColorMetrics.delta_E_94(ref, sample, textiles=True) == pytest.approx(5.0)

def test_cmc_lightness_weight():
    ref = np.array([50.0, 0.0, 0.0])
    sample = np.array([60.0, 0.0, 0.0])
    s_l = 0.040975 * 50.0 / (1.0 + 0.01765 * 50.0)
    assert ColorMetrics.delta_E_CMC(ref, sample, pl=1.0) == pytest.approx(10.0 / s_l, abs=1e-6)
    assert ColorMetrics.delta_E_CMC(ref, sample) == pytest.approx(5.0 / s_l, abs=1e-6)

def test_cmc_dark_reference_uses_fixed_lightness_weight():
    res = ColorMetrics.delta_E_CMC(np.array([10.0, 0.0, 0.0]), np.array([15.0, 0.0, 0.0]), pl=1.0)
    assert res == pytest.approx(5.0 / 0.511, abs=1e-6)

def test_cmc_batch_and_zero():
    lab1 = np.array([[50.0, 20.0, -10.0], [70.0, -5.0, 30.0]])
    res = ColorMetrics.delta_E_CMC(lab1, lab1)
    assert res.shape == (2,)
    np.testing.assert_allclose(res, 0.0, atol=1e-9)


# =============================================================================
# Model-level differences
# =============================================================================

def test_cie76_black_white():
    assert cie76(Lab(0.0, 0.0, 0.0), Lab(100.0, 0.0, 0.0)) == pytest.approx(100.0, abs=1e-9)

def test_cie94_is_asymmetric():
    a = Lab(50.0, 50.0, 0.0)
    b = Lab(50.0, 0.0, 0.0)
    assert cie94(a, b) == pytest.approx(50.0 / 3.25, abs=1e-6)
    assert cie94(b, a) == pytest.approx(50.0, abs=1e-6)

def test_ciede2000_across_models():
    red = Rgb(1.0, 0.0, 0.0)
    assert ciede2000(red, red.convert(Lab)) == pytest.approx(0.0, abs=1e-6)
    assert ciede2000(red, Rgb(0.0, 0.0, 1.0)) > 20.0

def test_second_color_is_adapted_into_first_context():
    d65_white = Xyz.reference_white()
    d50_white = Xyz.reference_white(D50_CONTEXT)
    assert cie76(d65_white, d50_white) == pytest.approx(0.0, abs=1e-6)
    assert euclidean(d65_white, d50_white) == pytest.approx(0.0, abs=1e-9)

def test_xyz_distances():
    a = Xyz(0.1, 0.2, 0.3)
    b = Xyz(0.4, 0.6, 0.3)
    assert euclidean(a, b) == pytest.approx(0.5)
    assert manhattan(a, b) == pytest.approx(0.7)

def test_ciecmc_is_asymmetric():
    a = Lab(50.0, 50.0, 0.0)
    b = Lab(50.0, 0.0, 0.0)
    # A neutral reference has S_C = 0.638 and no hue weighting
    assert ciecmc(b, a) == pytest.approx(50.0 / 0.638, abs=1e-6)
    assert ciecmc(a, b) < ciecmc(b, a)

def test_ciecmc_acceptability_halves_lightness_term():
    a, b = Lab(50.0, 0.0, 0.0), Lab(60.0, 0.0, 0.0)
    assert ciecmc(a, b, l=2.0) == pytest.approx(ciecmc(a, b) / 2.0)
    assert ciecmc(Rgb(0.2, 0.4, 0.6), Rgb(0.2, 0.4, 0.6)) == pytest.approx(0.0, abs=1e-6)


# =============================================================================
# Contrast
# =============================================================================

def test_black_on_white_contrast():
    ratio = contrast_ratio(Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0))
    assert float(ratio) == pytest.approx(21.0, abs=1e-6)
    assert ratio.meets_aaa()
    assert ratio.meets_aa()

def test_contrast_is_symmetric():
    a, b = Rgb(0.2, 0.4, 0.6), Rgb(0.9, 0.9, 0.8)
    assert contrast_ratio(a, b).value == pytest.approx(contrast_ratio(b, a).value)

def test_same_color_has_unit_contrast():
    ratio = contrast_ratio(Rgb(0.5, 0.5, 0.5), Rgb(0.5, 0.5, 0.5))
    assert ratio.value == pytest.approx(1.0)
    assert not ratio.meets_aa_large_text()

def test_wcag_thresholds():
    ratio = ContrastRatio(4.5)
    assert ratio.meets_aa()
    assert ratio.meets_aaa_large_text()
    assert not ratio.meets_aaa()
    assert ContrastRatio(3.0).meets_aa_large_text()

def test_apca_polarity():
    black, white = Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0)
    normal = apca_contrast(black, white)
    reverse = apca_contrast(white, black)
    assert float(normal) == pytest.approx(106.04, abs=0.1)
    assert float(reverse) < 0.0
    assert normal.meets_body_text()
    assert reverse.meets_body_text()

def test_apca_zero_for_close_luminance():
    color = Xyz(0.4, 0.5, 0.3)
    assert apca_contrast(color, color).value == 0.0
    assert apca_contrast(color, Xyz(0.4, 0.50025, 0.3)).value == 0.0
    # Inside the low clip
    assert apca_contrast(Xyz(0.0, 0.5, 0.0), Xyz(0.0, 0.51, 0.0)).value == 0.0

def test_apca_grows_with_luminance_difference():
    white = Xyz(0.9505, 1.0, 1.089)
    assert apca_contrast(Xyz(0.0, 0.05, 0.0), white).value > apca_contrast(Xyz(0.0, 0.2, 0.0), white).value

def test_apca_thresholds_depend_on_polarity():
    assert LightnessContrast(62.0).meets_body_text()
    assert not LightnessContrast(-62.0).meets_body_text()
    assert LightnessContrast(-62.0).meets_large_text()
    assert LightnessContrast(-46.0).meets_very_large_text()
    assert not LightnessContrast(20.0).meets_very_large_text()

def test_michelson_contrast():
    black, white = Xyz(0.0, 0.0, 0.0), Xyz.reference_white()
    assert michelson_contrast(black, white) == pytest.approx(1.0)
    assert michelson_contrast(white, black) == pytest.approx(1.0)
    assert michelson_contrast(black, black) == 0.0
    assert michelson_contrast(Xyz(0.0, 0.6, 0.0), Xyz(0.0, 0.2, 0.0)) == pytest.approx(0.5)

def test_weber_contrast():
    assert weber_contrast(Xyz(0.0, 0.6, 0.0), Xyz(0.0, 0.2, 0.0)) == pytest.approx(2.0)
    assert weber_contrast(Xyz(0.0, 0.1, 0.0), Xyz(0.0, 0.2, 0.0)) == pytest.approx(-0.5)
    black = Xyz(0.0, 0.0, 0.0)
    assert weber_contrast(Xyz(0.0, 0.1, 0.0), black) == math.inf
    assert weber_contrast(black, black) == 0.0

def test_rms_contrast():
    assert rms_contrast(Xyz(0.0, 0.2, 0.0), Xyz(0.0, 0.8, 0.0)) == pytest.approx(0.3)
    assert rms_contrast(Xyz(0.0, 0.0, 0.0), Xyz.reference_white()) == pytest.approx(0.5)

def test_aert_brightness_difference():
    diff = aert_brightness_difference(Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0))
    assert diff == pytest.approx(255.0)
    assert diff >= AERT_RECOMMENDED_MINIMUM
    # Pure green weighs 0.587 of full brightness
    assert aert_brightness_difference(Rgb(0.0, 1.0, 0.0), Rgb(0.0, 0.0, 0.0)) == pytest.approx(0.587 * 255.0)

def test_aert_reads_colors_as_srgb():
    lab_white = Rgb(1.0, 1.0, 1.0).convert(Lab)
    assert aert_brightness_difference(lab_white, Rgb(0.0, 0.0, 0.0)) == pytest.approx(255.0)


# =============================================================================
# Correlated color temperature
# =============================================================================

def test_mccamy_d65():
    assert cct_mccamy(ILLUMINANT_D65.chromaticity()) == pytest.approx(6504.0, abs=50.0)
    assert cct_mccamy(Xyz.reference_white()) == pytest.approx(6504.0, abs=50.0)

def test_mccamy_illuminant_a():
    assert cct_mccamy(ILLUMINANT_A.chromaticity()) == pytest.approx(2856.0, abs=20.0)

def test_hernandez_andres_d65():
    assert cct_hernandez_andres(Chromaticity(0.3127, 0.3290)) == pytest.approx(6504.0, abs=50.0)

def test_hernandez_andres_switches_to_high_range():
    # Blue skylight far above 50 000 K
    assert cct_hernandez_andres(Chromaticity(0.2466, 0.2335)) > 50000.0

def test_epicenter_estimators_are_undefined_level_with_the_epicenter():
    assert math.isnan(cct_mccamy(Chromaticity(0.3, 0.1858)))
    assert math.isnan(cct_hernandez_andres(Chromaticity(0.3, 0.1735)))

@pytest.mark.parametrize("estimator", [cct_ohno, cct_robertson])
@pytest.mark.parametrize("xy, expected, tol", [
    ((0.31271, 0.32902), 6504.0, 50.0),
    ((0.44757, 0.40745), 2856.0, 50.0),
    ((0.34567, 0.35850), 5003.0, 100.0),
    ((0.4369, 0.4041), 3000.0, 100.0),
    ((0.2807, 0.2884), 10000.0, 200.0),
])
def test_locus_estimators(estimator, xy, expected, tol):
    assert estimator(Chromaticity(*xy)) == pytest.approx(expected, abs=tol)

def test_locus_estimators_accept_colors():
    assert cct_ohno(Xyz.reference_white()) == pytest.approx(6504.0, abs=50.0)
    assert cct_robertson(Xyz.reference_white()) == pytest.approx(6504.0, abs=50.0)
