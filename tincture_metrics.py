# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Metrics
=============
Color differences, correlated color temperature and WCAG contrast.

Two layers are provided:
    - ``ColorMetrics``: batch color differences over (N, 3) CIELAB arrays,
      JIT-compiled and parallelised with Numba.
    - Model-level functions (``cie76``, ``ciede2000``, ``cct_mccamy`` ...)
      that take ``ColorModel`` instances. Both colors are expressed in the
      first color's viewing context before comparison.

References:
    - CIE 116-1995 "Industrial colour-difference evaluation" (CIE94).
    - Clarke, McDonald, Rigg (1984). CMC l:c color difference.
    - Sharma, Wu, Dalal (2005). "The CIEDE2000 color-difference formula".
    - McCamy, C. S. (1992). "Correlated color temperature as an explicit
      function of chromaticity coordinates".
    - Hernández-Andrés, Lee, Romero (1999). "Calculating correlated color
      temperatures across the entire gamut of daylight and skylight
      chromaticities".
    - Robertson, A. R. (1968). "Computation of correlated color temperature
      and distribution temperature".
    - Ohno, Y. (2014). "Practical use and calculation of CCT and Duv".
    - Kim et al. (2002). Blackbody xy approximation used by the Ohno search.
    - W3C WCAG 2.x, success criteria 1.4.3 / 1.4.6.
    - APCA-W3 (SAPC-4), W3C AERT brightness difference.
"""

import numpy as np
from dataclasses import dataclass
from numba import njit, prange
from typing import Final, Tuple, Union

from color_models import ColorModel, Lab, Rgb, Xyz
from tincture_colorengine import DEG2RAD
from tincture_illuminant import Chromaticity
from tincture_matrix import ArrayFloat
from tincture_rgbspec import RgbSpace

__all__ = [
    # --- Constants ---
    "CIE94_GRAPHIC_ARTS",
    "CIE94_TEXTILES",
    "WCAG_AA_NORMAL_TEXT",
    "WCAG_AA_LARGE_TEXT",
    "WCAG_AAA_NORMAL_TEXT",
    "WCAG_AAA_LARGE_TEXT",
    "APCA_BODY_TEXT",
    "APCA_LARGE_TEXT",
    "APCA_VERY_LARGE_TEXT",
    "AERT_RECOMMENDED_MINIMUM",

    # --- Batch ---
    "ColorMetrics",

    # --- Distances ---
    "euclidean",
    "manhattan",
    "cie76",
    "cie94",
    "ciede2000",
    "ciecmc",

    # --- Contrast ---
    "ContrastRatio",
    "contrast_ratio",
    "LightnessContrast",
    "apca_contrast",
    "michelson_contrast",
    "weber_contrast",
    "rms_contrast",
    "aert_brightness_difference",

    # --- Temperature ---
    "cct_mccamy",
    "cct_hernandez_andres",
    "cct_ohno",
    "cct_robertson",
]

C25_7: Final[float] = 25.0 ** 7

# (k_L, K1, K2) parametric factors for CIE94
CIE94_GRAPHIC_ARTS: Final[Tuple[float, float, float]] = (1.0, 0.045, 0.015)
CIE94_TEXTILES: Final[Tuple[float, float, float]] = (2.0, 0.048, 0.014)

WCAG_AA_NORMAL_TEXT: Final[float] = 4.5
WCAG_AA_LARGE_TEXT: Final[float] = 3.0
WCAG_AAA_NORMAL_TEXT: Final[float] = 7.0
WCAG_AAA_LARGE_TEXT: Final[float] = 4.5

# McCamy cubic
_MCCAMY_EPICENTER: Final[Tuple[float, float]] = (0.3320, 0.1858)
_MCCAMY_COEFFS: Final[Tuple[float, float, float, float]] = (-449.0, 3525.0, -6823.3, 5520.33)

# Hernández-Andrés exponential series: (A0, (A_i, t_i), ...)
_HA_EPICENTER: Final[Tuple[float, float]] = (0.3366, 0.1735)
_HA_LOW_A0: Final[float] = -949.86315
_HA_LOW_TERMS: Final[Tuple[Tuple[float, float], ...]] = (
    (6253.80338, 0.92159),
    (28.70599, 0.20039),
    (0.00004, 0.07125),
)
_HA_HIGH_A0: Final[float] = 36284.48953
_HA_HIGH_TERMS: Final[Tuple[Tuple[float, float], ...]] = (
    (0.00228, 0.07861),
    (5.4535e-36, 0.01543),
)
_HA_HIGH_RANGE_THRESHOLD: Final[float] = 50000.0

_MRD_FACTOR: Final[float] = 1.0e6

# Kim et al. (2002) Planckian locus: x in powers of 1/T, y in powers of x
_KIM_THRESHOLD: Final[float] = 4000.0
_KIM_LOW_X: Final[Tuple[float, float, float, float]] = (-0.2661239e9, -0.2343589e6, 0.8776956e3, 0.179910)
_KIM_LOW_Y: Final[Tuple[float, float, float, float]] = (-1.1063814, -1.34811020, 2.18555832, -0.20219683)
_KIM_HIGH_X: Final[Tuple[float, float, float, float]] = (-3.0258469e9, 2.1070379e6, 0.2226347e3, 0.240390)
_KIM_HIGH_Y: Final[Tuple[float, float, float, float]] = (3.0817580, -5.87338670, 3.75112997, -0.37001483)
_OHNO_MRD_MAX: Final[int] = 600
_OHNO_PARABOLIC_EPSILON: Final[float] = 1e-20

# Robertson isotherms: (MRD, u, v, slope)
_ROBERTSON_ISOTHERMS: Final[Tuple[Tuple[float, float, float, float], ...]] = (
    (0.0, 0.18006, 0.26352, -0.24341),
    (10.0, 0.18066, 0.26589, -0.25479),
    (20.0, 0.18133, 0.26846, -0.26876),
    (30.0, 0.18208, 0.27119, -0.28539),
    (40.0, 0.18293, 0.27407, -0.30470),
    (50.0, 0.18388, 0.27709, -0.32675),
    (60.0, 0.18494, 0.28021, -0.35156),
    (70.0, 0.18611, 0.28342, -0.37915),
    (80.0, 0.18740, 0.28668, -0.40955),
    (90.0, 0.18880, 0.28997, -0.44278),
    (100.0, 0.19032, 0.29326, -0.47888),
    (125.0, 0.19462, 0.30141, -0.58204),
    (150.0, 0.19962, 0.30921, -0.70471),
    (175.0, 0.20525, 0.31647, -0.84901),
    (200.0, 0.21142, 0.32312, -1.0182),
    (225.0, 0.21807, 0.32909, -1.2168),
    (250.0, 0.22511, 0.33439, -1.4512),
    (275.0, 0.23247, 0.33904, -1.7298),
    (300.0, 0.24010, 0.34308, -2.0637),
    (325.0, 0.24792, 0.34655, -2.4681),
    (350.0, 0.25591, 0.34951, -2.9641),
    (375.0, 0.26400, 0.35200, -3.5814),
    (400.0, 0.27218, 0.35407, -4.3633),
    (425.0, 0.28039, 0.35577, -5.3762),
    (450.0, 0.28863, 0.35714, -6.7262),
    (475.0, 0.29685, 0.35823, -8.5955),
    (500.0, 0.30505, 0.35907, -11.324),
    (525.0, 0.31320, 0.35968, -15.628),
    (550.0, 0.32129, 0.36011, -23.325),
    (575.0, 0.32931, 0.36038, -40.770),
    (600.0, 0.33724, 0.36051, -116.45),
)

# APCA (SAPC-4) constants
_APCA_BLACK_THRESHOLD: Final[float] = 0.022
_APCA_BLACK_CLAMP_EXPONENT: Final[float] = 1.414
_APCA_DELTA_Y_MIN: Final[float] = 0.0005
_APCA_NORMAL_EXPONENTS: Final[Tuple[float, float]] = (0.56, 0.57)   # (background, text)
_APCA_REVERSE_EXPONENTS: Final[Tuple[float, float]] = (0.57, 0.62)
_APCA_SCALE: Final[float] = 1.14
_APCA_LOW_CLIP: Final[float] = 0.1
_APCA_LOW_OFFSET: Final[float] = 0.027

# (normal polarity, reverse polarity) Lc thresholds
APCA_BODY_TEXT: Final[Tuple[float, float]] = (60.0, 75.0)
APCA_LARGE_TEXT: Final[Tuple[float, float]] = (45.0, 60.0)
APCA_VERY_LARGE_TEXT: Final[Tuple[float, float]] = (30.0, 45.0)

# AERT brightness uses BT.601 luma weights on 8-bit sRGB
_AERT_WEIGHTS: Final[Tuple[float, float, float]] = (0.299, 0.587, 0.114)
AERT_RECOMMENDED_MINIMUM: Final[float] = 125.0


# =============================================================================
# 1. BATCH KERNELS
# =============================================================================

@njit(cache=True, fastmath=True)
def _delta_e_2000_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                         k_L: float, k_C: float, k_H: float) -> float:
    """Single-pixel CIEDE2000 with parametric factors."""
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar = (C1 + C2) * 0.5
    C_bar_7 = C_bar**7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + C25_7)))
    scale = 1.0 + G
    a1_p = scale * a1
    a2_p = scale * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)
    h1_p = np.degrees(np.arctan2(b1, a1_p)) % 360.0
    h2_p = np.degrees(np.arctan2(b2, a2_p)) % 360.0
    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    dh_p = 0.0
    if C1_p * C2_p > 1e-12:
        diff = h2_p - h1_p
        if abs(diff) <= 180.0:
            dh_p = diff
        elif diff > 180.0:
            dh_p = diff - 360.0
        else:
            dh_p = diff + 360.0
    dH_p = 2.0 * np.sqrt(C1_p * C2_p) * np.sin((dh_p * DEG2RAD) * 0.5)
    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_bar_p = h1_p + h2_p
    if C1_p * C2_p > 1e-12:
        if abs(h1_p - h2_p) <= 180.0:
            h_bar_p *= 0.5
        elif h_bar_p < 360.0:
            h_bar_p = (h_bar_p + 360.0) * 0.5
        else:
            h_bar_p = (h_bar_p - 360.0) * 0.5
    T = 1.0 - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD) + \
        0.24 * np.cos((2.0 * h_bar_p) * DEG2RAD) + \
        0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD) - \
        0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD)
    d_theta = 30.0 * np.exp(-((h_bar_p - 275.0) / 25.0)**2)
    C_bar_p_7 = C_bar_p**7
    RC = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))
    RT = -np.sin((2.0 * d_theta) * DEG2RAD) * RC
    L_term = (L_bar_p - 50.0)**2
    SL = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T
    tL = dL_p / (k_L * SL)
    tC = dC_p / (k_C * SC)
    tH = dH_p / (k_H * SH)
    return np.sqrt(tL * tL + tC * tC + tH * tH + RT * tC * tH)

@njit(cache=True, fastmath=True, parallel=True)
def _batch_delta_e_2000(lab1: ArrayFloat, lab2: ArrayFloat, k_L: float, k_C: float, k_H: float) -> ArrayFloat:
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        res[i] = _delta_e_2000_single(lab1[i, 0], lab1[i, 1], lab1[i, 2],
                                      lab2[i, 0], lab2[i, 1], lab2[i, 2], k_L, k_C, k_H)
    return res

@njit(cache=True, fastmath=True, parallel=True)
def _batch_delta_e_76(lab1: ArrayFloat, lab2: ArrayFloat) -> ArrayFloat:
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        dL = lab1[i, 0] - lab2[i, 0]
        da = lab1[i, 1] - lab2[i, 1]
        db = lab1[i, 2] - lab2[i, 2]
        res[i] = np.sqrt(dL*dL + da*da + db*db)
    return res

@njit(cache=True, fastmath=True, parallel=True)
def _batch_delta_e_94(lab1: ArrayFloat, lab2: ArrayFloat, k_L: float, K1: float, K2: float) -> ArrayFloat:
    """
    CIE 1994 Delta E. Weighting uses the reference sample (lab1), so the
    metric is asymmetric.
    """
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        L1, a1, b1 = lab1[i, 0], lab1[i, 1], lab1[i, 2]
        L2, a2, b2 = lab2[i, 0], lab2[i, 1], lab2[i, 2]

        dL = L1 - L2
        C1 = np.sqrt(a1*a1 + b1*b1)
        C2 = np.sqrt(a2*a2 + b2*b2)
        dC = C1 - C2

        da = a1 - a2
        db = b1 - b2
        # dH² can dip below zero from rounding
        dH_sq = da*da + db*db - dC*dC
        if dH_sq < 0.0:
            dH_sq = 0.0

        SC = 1.0 + K1 * C1
        SH = 1.0 + K2 * C1

        term_L = dL / k_L
        term_C = dC / SC
        res[i] = np.sqrt(term_L*term_L + term_C*term_C + dH_sq / (SH * SH))
    return res

@njit(cache=True, fastmath=True, parallel=True)
def _batch_delta_e_cmc(lab1: ArrayFloat, lab2: ArrayFloat, pl: float, pc: float) -> ArrayFloat:
    """
    CMC l:c (1984) Delta E. Weighting functions take the reference sample
    (lab1), so the metric is asymmetric.
    """
    n = len(lab1)
    res = np.empty(n, dtype=np.float64)
    for i in prange(n):
        L1, a1, b1 = lab1[i, 0], lab1[i, 1], lab1[i, 2]
        L2, a2, b2 = lab2[i, 0], lab2[i, 1], lab2[i, 2]

        dL = L1 - L2
        C1 = np.sqrt(a1*a1 + b1*b1)
        C2 = np.sqrt(a2*a2 + b2*b2)
        dC = C1 - C2

        da = a1 - a2
        db = b1 - b2
        dH_sq = da*da + db*db - dC*dC
        if dH_sq < 0.0:
            dH_sq = 0.0

        h1 = np.degrees(np.arctan2(b1, a1)) % 360.0

        if L1 < 16.0:
            SL = 0.511
        else:
            SL = (0.040975 * L1) / (1.0 + 0.01765 * L1)
        SC = (0.0638 * C1) / (1.0 + 0.0131 * C1) + 0.638

        if 164.0 <= h1 <= 345.0:
            T = 0.56 + abs(0.2 * np.cos((h1 + 168.0) * DEG2RAD))
        else:
            T = 0.36 + abs(0.4 * np.cos((h1 + 35.0) * DEG2RAD))
        C1_4 = C1**4
        F = np.sqrt(C1_4 / (C1_4 + 1900.0))
        SH = SC * (F * T + 1.0 - F)

        term_L = dL / (pl * SL)
        term_C = dC / (pc * SC)
        res[i] = np.sqrt(term_L*term_L + term_C*term_C + dH_sq / (SH * SH))
    return res


# =============================================================================
# 2. BATCH API
# =============================================================================

class ColorMetrics:
    """Color differences over CIELAB arrays of shape (N, 3) or (3,)."""

    @staticmethod
    def _prepare_inputs(lab1: ArrayFloat, lab2: ArrayFloat) -> Tuple[ArrayFloat, ArrayFloat]:
        """
        Broadcasting helper.

        A single row on either side is broadcast against the other; the
        result is materialised C-contiguous for the ``prange`` loops.
        """
        l1 = np.ascontiguousarray(np.atleast_2d(lab1), dtype=np.float64)
        l2 = np.ascontiguousarray(np.atleast_2d(lab2), dtype=np.float64)

        if l1.ndim != 2 or l2.ndim != 2 or l1.shape[-1] != 3 or l2.shape[-1] != 3:
            raise ValueError(f"Inputs must have shape (N, 3), got {l1.shape} and {l2.shape}")

        if l1.shape[0] != l2.shape[0]:
            if l1.shape[0] == 1:
                l1 = np.ascontiguousarray(np.broadcast_to(l1, l2.shape))
            elif l2.shape[0] == 1:
                l2 = np.ascontiguousarray(np.broadcast_to(l2, l1.shape))
            else:
                raise ValueError(f"Shapes {l1.shape} and {l2.shape} are not broadcastable.")
        return l1, l2

    @staticmethod
    def _finish(res: ArrayFloat, lab1: ArrayFloat, lab2: ArrayFloat) -> Union[float, ArrayFloat]:
        if np.ndim(lab1) == 1 and np.ndim(lab2) == 1:
            return float(res[0])
        return res

    @staticmethod
    def delta_E_2000(lab1: ArrayFloat, lab2: ArrayFloat,
                     k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0,
                     textiles: bool = False) -> Union[float, ArrayFloat]:
        """
        Calculates CIEDE2000 Color Difference.

        Args:
            lab1: Reference colors, shape (N, 3) or (3,).
            lab2: Sample colors, shape (N, 3) or (3,).
            k_L: Parametric lightness weight (default 1.0).
            k_C: Parametric chroma weight (default 1.0).
            k_H: Parametric hue weight (default 1.0).
            textiles: If True, overrides k_L=2.0, k_C=1.0, k_H=1.0.

        Returns:
            DeltaE 2000 values; a float when both inputs are single colors.
        """
        if textiles:
            k_L, k_C, k_H = 2.0, 1.0, 1.0
        l1, l2 = ColorMetrics._prepare_inputs(lab1, lab2)
        return ColorMetrics._finish(_batch_delta_e_2000(l1, l2, k_L, k_C, k_H), lab1, lab2)

    @staticmethod
    def delta_E_76(lab1: ArrayFloat, lab2: ArrayFloat) -> Union[float, ArrayFloat]:
        """Calculates CIE Delta E 1976 (Euclidean distance in Lab)."""
        l1, l2 = ColorMetrics._prepare_inputs(lab1, lab2)
        return ColorMetrics._finish(_batch_delta_e_76(l1, l2), lab1, lab2)

    @staticmethod
    def delta_E_94(lab1: ArrayFloat, lab2: ArrayFloat,
                   textiles: bool = False,
                   k_L: float = 1.0, K1: float = 0.045, K2: float = 0.015) -> Union[float, ArrayFloat]:
        """
        Calculates CIE 1994 Color Difference.

        Note: lab1 is the *reference* and lab2 the *sample*; swapping them
        may give a different result.

        Args:
            textiles: If True, overrides k_L=2.0, K1=0.048, K2=0.014.
            k_L, K1, K2: Graphic-arts parametric factors by default.
        """
        if textiles:
            k_L, K1, K2 = CIE94_TEXTILES
        l1, l2 = ColorMetrics._prepare_inputs(lab1, lab2)
        return ColorMetrics._finish(_batch_delta_e_94(l1, l2, k_L, K1, K2), lab1, lab2)

    @staticmethod
    def delta_E_CMC(lab1: ArrayFloat, lab2: ArrayFloat,
                    pl: float = 2.0, pc: float = 1.0) -> Union[float, ArrayFloat]:
        """
        Calculates CMC l:c (1984) Color Difference.

        Like CIE 1994 the metric is asymmetric: lab1 is the reference
        (standard), lab2 the sample (batch).

        Args:
            pl: Lightness factor; 2.0 for acceptability, 1.0 for perceptibility.
            pc: Chroma factor (default 1.0).
        """
        l1, l2 = ColorMetrics._prepare_inputs(lab1, lab2)
        return ColorMetrics._finish(_batch_delta_e_cmc(l1, l2, pl, pc), lab1, lab2)


# =============================================================================
# 3. MODEL-LEVEL DISTANCES
# =============================================================================

def _xyz_pair(a: ColorModel, b: ColorModel) -> Tuple[Xyz, Xyz]:
    xyz_a = a.to_xyz()
    return xyz_a, b.to_xyz().adapt_to(xyz_a.context)

def _lab_pair(a: ColorModel, b: ColorModel) -> Tuple[ArrayFloat, ArrayFloat]:
    xyz_a, xyz_b = _xyz_pair(a, b)
    return Lab.from_xyz(xyz_a).to_array(), Lab.from_xyz(xyz_b).to_array()

def euclidean(a: ColorModel, b: ColorModel) -> float:
    """Straight-line distance between two colors in XYZ."""
    xyz_a, xyz_b = _xyz_pair(a, b)
    return float(np.linalg.norm(xyz_a.to_array() - xyz_b.to_array()))

def manhattan(a: ColorModel, b: ColorModel) -> float:
    """Sum of absolute XYZ component differences."""
    xyz_a, xyz_b = _xyz_pair(a, b)
    return float(np.sum(np.abs(xyz_a.to_array() - xyz_b.to_array())))

def cie76(a: ColorModel, b: ColorModel) -> float:
    """CIE 1976 Delta E*ab."""
    return float(ColorMetrics.delta_E_76(*_lab_pair(a, b)))

def cie94(reference: ColorModel, sample: ColorModel, textiles: bool = False) -> float:
    """CIE 1994 Delta E (asymmetric: weights derive from ``reference``)."""
    return float(ColorMetrics.delta_E_94(*_lab_pair(reference, sample), textiles=textiles))

def ciede2000(a: ColorModel, b: ColorModel,
              k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0) -> float:
    """CIEDE2000 Delta E with parametric weights."""
    return float(ColorMetrics.delta_E_2000(*_lab_pair(a, b), k_L=k_L, k_C=k_C, k_H=k_H))

def ciecmc(reference: ColorModel, sample: ColorModel, l: float = 1.0, c: float = 1.0) -> float:
    """
    CMC l:c Delta E, asymmetric like ``cie94``.

    The defaults are the perceptibility weights; pass ``l=2.0`` for the
    acceptability variant used in textile pass/fail work.
    """
    return float(ColorMetrics.delta_E_CMC(*_lab_pair(reference, sample), pl=l, pc=c))


# =============================================================================
# 4. CONTRAST
# =============================================================================

@dataclass(frozen=True, slots=True)
class ContrastRatio:
    """WCAG 2.x contrast ratio, 1..21."""
    value: float

    def meets_aa(self) -> bool:
        return self.value >= WCAG_AA_NORMAL_TEXT

    def meets_aa_large_text(self) -> bool:
        return self.value >= WCAG_AA_LARGE_TEXT

    def meets_aaa(self) -> bool:
        return self.value >= WCAG_AAA_NORMAL_TEXT

    def meets_aaa_large_text(self) -> bool:
        return self.value >= WCAG_AAA_LARGE_TEXT

    def __float__(self) -> float:
        return self.value

def contrast_ratio(a: ColorModel, b: ColorModel) -> ContrastRatio:
    """(L_lighter + 0.05) / (L_darker + 0.05) from relative luminance Y."""
    l1 = a.luminance
    l2 = b.luminance
    lighter, darker = (l1, l2) if l1 > l2 else (l2, l1)
    return ContrastRatio((lighter + 0.05) / (darker + 0.05))


@dataclass(frozen=True, slots=True)
class LightnessContrast:
    """
    APCA lightness contrast Lc, roughly -108..106.

    Positive values are dark text on a light background (normal polarity),
    negative values light text on a dark background.
    """
    value: float

    def _meets(self, thresholds: Tuple[float, float]) -> bool:
        normal, reverse = thresholds
        if self.value >= 0.0:
            return self.value >= normal
        return -self.value >= reverse

    def meets_body_text(self) -> bool:
        return self._meets(APCA_BODY_TEXT)

    def meets_large_text(self) -> bool:
        return self._meets(APCA_LARGE_TEXT)

    def meets_very_large_text(self) -> bool:
        return self._meets(APCA_VERY_LARGE_TEXT)

    def __float__(self) -> float:
        return self.value

def _apca_soft_clamp(y: float) -> float:
    """Lifts near-black luminance to model display flare."""
    if y < _APCA_BLACK_THRESHOLD:
        return y + (_APCA_BLACK_THRESHOLD - y) ** _APCA_BLACK_CLAMP_EXPONENT
    return y

def apca_contrast(text: ColorModel, background: ColorModel) -> LightnessContrast:
    """
    APCA (SAPC-4) lightness contrast of ``text`` over ``background``.

    Order matters: swapping the colors flips the polarity and changes the
    magnitude. Pairs whose luminance differs by less than 0.0005, or whose
    raw contrast falls inside the low clip, return Lc 0.
    """
    text_y = _apca_soft_clamp(text.luminance)
    bg_y = _apca_soft_clamp(background.luminance)
    if abs(bg_y - text_y) < _APCA_DELTA_Y_MIN:
        return LightnessContrast(0.0)

    bg_exp, text_exp = _APCA_NORMAL_EXPONENTS if bg_y > text_y else _APCA_REVERSE_EXPONENTS
    sapc = (bg_y ** bg_exp - text_y ** text_exp) * _APCA_SCALE

    if sapc > _APCA_LOW_CLIP:
        return LightnessContrast((sapc - _APCA_LOW_OFFSET) * 100.0)
    if sapc < -_APCA_LOW_CLIP:
        return LightnessContrast((sapc + _APCA_LOW_OFFSET) * 100.0)
    return LightnessContrast(0.0)

def michelson_contrast(a: ColorModel, b: ColorModel) -> float:
    """(L_max - L_min) / (L_max + L_min), 0..1; 0 for two blacks."""
    l_max, l_min = sorted((a.luminance, b.luminance), reverse=True)
    total = l_max + l_min
    return 0.0 if total == 0.0 else (l_max - l_min) / total

def weber_contrast(target: ColorModel, background: ColorModel) -> float:
    """
    (L_target - L_background) / L_background, signed.

    A black background gives +inf for any non-black target and 0 for black.
    """
    l_target = target.luminance
    l_bg = background.luminance
    if l_bg == 0.0:
        return 0.0 if l_target == 0.0 else float("inf")
    return (l_target - l_bg) / l_bg

def rms_contrast(a: ColorModel, b: ColorModel) -> float:
    """Standard deviation of the two luminances, i.e. |L1 - L2| / 2."""
    return abs(a.luminance - b.luminance) / 2.0

def _aert_brightness(color: ColorModel) -> float:
    rgb = color.convert(Rgb, space=RgbSpace.SRGB)
    wr, wg, wb = _AERT_WEIGHTS
    return wr * rgb.red + wg * rgb.green + wb * rgb.blue

def aert_brightness_difference(a: ColorModel, b: ColorModel) -> float:
    """
    W3C AERT brightness difference, 0..255, on 8-bit sRGB.

    Values of at least ``AERT_RECOMMENDED_MINIMUM`` (125) are considered
    readable.
    """
    return abs(_aert_brightness(a) - _aert_brightness(b))


# =============================================================================
# 5. CORRELATED COLOR TEMPERATURE
# =============================================================================

def _xy(color: Union[ColorModel, Chromaticity]) -> Chromaticity:
    if isinstance(color, Chromaticity):
        return color
    return color.chromaticity()

def _epicenter_slope(xy: Chromaticity, epicenter: Tuple[float, float]) -> float:
    """
    Inverse slope n = (x - xe) / (y - ye) of the line to the epicenter.

    NaN when the chromaticity lies level with the epicenter, where the
    slope is undefined.
    """
    dy = xy.y - epicenter[1]
    if dy == 0.0:
        return float("nan")
    return (xy.x - epicenter[0]) / dy

def cct_mccamy(color: Union[ColorModel, Chromaticity]) -> float:
    """
    McCamy's cubic CCT approximation in kelvin.

    Accurate to a few kelvin between roughly 2856 K and 6504 K. Returns NaN
    for a chromaticity level with the epicenter (y = 0.1858).
    """
    n = _epicenter_slope(_xy(color), _MCCAMY_EPICENTER)
    a3, a2, a1, a0 = _MCCAMY_COEFFS
    return ((a3 * n + a2) * n + a1) * n + a0

def _exp_series(a0: float, terms: Tuple[Tuple[float, float], ...], n: float) -> float:
    return a0 + sum(a * np.exp(-n / t) for a, t in terms)

def cct_hernandez_andres(color: Union[ColorModel, Chromaticity]) -> float:
    """
    Hernández-Andrés exponential CCT estimate in kelvin.

    The low-range series covers 3 000 K to 50 000 K; estimates above that
    are recomputed with the high-range series (up to 8 * 10^5 K). Returns
    NaN for a chromaticity level with the epicenter (y = 0.1735).
    """
    n = _epicenter_slope(_xy(color), _HA_EPICENTER)
    if np.isnan(n):
        return n
    cct = _exp_series(_HA_LOW_A0, _HA_LOW_TERMS, n)
    if cct > _HA_HIGH_RANGE_THRESHOLD:
        cct = _exp_series(_HA_HIGH_A0, _HA_HIGH_TERMS, n)
    return float(cct)

def _planckian_uv(t: ArrayFloat) -> Tuple[ArrayFloat, ArrayFloat]:
    """Blackbody (u, v) at temperatures ``t`` via the Kim et al. cubic splines."""
    inv = 1.0 / t
    low = t <= _KIM_THRESHOLD

    def cubic(c: Tuple[float, float, float, float], s: ArrayFloat) -> ArrayFloat:
        return ((c[0] * s + c[1]) * s + c[2]) * s + c[3]

    x = np.where(low, cubic(_KIM_LOW_X, inv), cubic(_KIM_HIGH_X, inv))
    y = np.where(low, cubic(_KIM_LOW_Y, x), cubic(_KIM_HIGH_Y, x))
    denom = -2.0 * x + 12.0 * y + 3.0
    return 4.0 * x / denom, 6.0 * y / denom

def cct_ohno(color: Union[ColorModel, Chromaticity]) -> float:
    """
    Ohno (2014) CCT in kelvin.

    Searches the Planckian locus in CIE 1960 UCS at 1 MRD steps
    (1 667 K upwards), then refines the closest step with a parabola
    through its neighbours. Intended for roughly 1 000 K to 20 000 K.
    """
    uv = _xy(color).to_uv()
    mrd = np.arange(1, _OHNO_MRD_MAX + 1, dtype=np.float64)
    u_bb, v_bb = _planckian_uv(_MRD_FACTOR / mrd)
    dist = (uv.u - u_bb) ** 2 + (uv.v - v_bb) ** 2

    i = int(np.argmin(dist))
    d_lo = dist[max(i - 1, 0)]
    d_mid = dist[i]
    d_hi = dist[min(i + 1, len(mrd) - 1)]
    denom = d_lo - 2.0 * d_mid + d_hi
    best = mrd[i]
    if abs(denom) > _OHNO_PARABOLIC_EPSILON:
        best += 0.5 * (d_lo - d_hi) / denom
    return float(_MRD_FACTOR / best)

def cct_robertson(color: Union[ColorModel, Chromaticity]) -> float:
    """
    Robertson (1968) CCT in kelvin, interpolated between the 31 tabulated
    isotherms.

    A crossing of the zero-MRD isotherm yields +inf; a chromaticity past the
    last isotherm clamps to 1 667 K.
    """
    uv = _xy(color).to_uv()
    last_d = 0.0
    for i, (mrd, u, v, slope) in enumerate(_ROBERTSON_ISOTHERMS):
        d = ((uv.v - v) - (uv.u - u) * slope) / np.sqrt(1.0 + slope * slope)
        if i > 0 and d * last_d < 0.0:
            prev = _ROBERTSON_ISOTHERMS[i - 1][0]
            interpolated = prev + last_d / (last_d - d) * (mrd - prev)
            return float(_MRD_FACTOR / interpolated) if interpolated > 0.0 else float("inf")
        last_d = d
    return _MRD_FACTOR / _ROBERTSON_ISOTHERMS[-1][0]
