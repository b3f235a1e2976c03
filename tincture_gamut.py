# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_gamut.py — Oklab and the perceptual gamut boundary.

Oklab is a perceptually uniform opponent space built from a cube-rooted LMS
response. The Okhsv / Okhsl / Okhwb cone forms wrap it in an intuitive
(hue, saturation, value|lightness) parameterisation whose saturation is
relative to the linear sRGB gamut boundary at each hue.

The boundary for a hue is approximated by a triangle in (L, C):

              C
              ^        cusp (L_cusp, C_cusp)
              |          /\\
              |        /    \\
              |      /        \\
              +----+-----------+---> L
              0                 1

The cusp is found from the maximum saturation S = C / L along the hue,
seeded by a per-region polynomial and refined by a single Halley step
(third-order convergence; one step brings the error to ~1e-6).

Hue arguments to the gamut helpers are fractions of a turn; the cone-form
conversions use degrees like every other polar model in Tincture.

References:
    - Ottosson, B. (2020). "A perceptual color space for image processing".
    - Ottosson, B. (2021). "Okhsv and Okhsl: Two new color spaces for color picking".
"""

import numpy as np
from numba import njit
from typing import Final, Tuple

from tincture_matrix import ArrayFloat, mat3_inverse

__all__ = [
    "K1",
    "K2",
    "K3",
    "M1_XYZ_TO_LMS",
    "M1_LMS_TO_XYZ",
    "M1_LINEAR_SRGB_TO_LMS",
    "M2_LMS_TO_LAB",
    "M2_LAB_TO_LMS",
    "toe",
    "toe_inv",
    "compute_max_saturation",
    "oklab_to_linear_srgb",
    "linear_srgb_to_oklab",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "cusp_for_hue",
    "max_chroma_at_lightness",
    "oklab_to_okhsv",
    "okhsv_to_oklab",
    "oklab_to_okhsl",
    "okhsl_to_oklab",
    "okhsv_to_okhwb",
    "okhwb_to_okhsv",
    "oklab_to_okhsv_batch",
    "okhsv_to_oklab_batch",
    "oklab_to_okhsl_batch",
    "okhsl_to_oklab_batch",
]

# --- Toe constants ---
K1: Final[float] = 0.206
K2: Final[float] = 0.03
K3: Final[float] = (1.0 + K1) / (1.0 + K2)

# Achromatic thresholds
_OKHSL_MIN_CHROMA: Final[float] = 1e-4
_TINY: Final[float] = 1e-10

_TWO_PI: Final[float] = 2.0 * np.pi
_RAD2DEG: Final[float] = 180.0 / np.pi
_DEG2RAD: Final[float] = np.pi / 180.0

# --- Oklab matrices ---
# M1: XYZ (D65) -> LMS
_M1_XYZ = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
], dtype=np.float64)
# M1 folded with the sRGB primaries: linear sRGB -> LMS
_M1_SRGB = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)
# M2: cube-rooted LMS -> Lab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

M1_XYZ_TO_LMS: Final[ArrayFloat] = _M1_XYZ
M1_LMS_TO_XYZ: Final[ArrayFloat] = mat3_inverse(_M1_XYZ)
M1_LINEAR_SRGB_TO_LMS: Final[ArrayFloat] = _M1_SRGB
M2_LMS_TO_LAB: Final[ArrayFloat] = _M2
M2_LAB_TO_LMS: Final[ArrayFloat] = mat3_inverse(_M2)


# =============================================================================
# 1. SCALAR KERNELS
# =============================================================================
# NOTE: compiled without fastmath. Hue-boundary arithmetic subtracts nearly
# equal terms and the toe pair must invert to ~1e-12.

@njit(cache=True)
def _cbrt(x: float) -> float:
    if x < 0.0:
        return -((-x) ** (1.0 / 3.0))
    return x ** (1.0 / 3.0)

@njit(cache=True)
def _mul3(m: ArrayFloat, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0, 0] * x + m[0, 1] * y + m[0, 2] * z,
        m[1, 0] * x + m[1, 1] * y + m[1, 2] * z,
        m[2, 0] * x + m[2, 1] * y + m[2, 2] * z,
    )

@njit(cache=True)
def toe(x: float) -> float:
    """
    Lightness compression mapping Oklab L to a reference-lightness scale
    close to CIE L* / 100. Monotone on [0, 1], toe(0) = 0, toe(1) = 1.
    """
    t = K3 * x - K1
    return 0.5 * (t + np.sqrt(t * t + 4.0 * K2 * K3 * x))

@njit(cache=True)
def toe_inv(x: float) -> float:
    """Exact inverse of ``toe``."""
    return (x * x + K1 * x) / (K3 * (x + K2))

@njit(cache=True)
def compute_max_saturation(a: float, b: float) -> float:
    """
    Maximum saturation S = C / L along the unit hue direction (a, b) such
    that the color stays inside linear sRGB.

    The channel that clips first is chosen by two half-plane tests; a
    polynomial in (a, b) seeds S and one Halley step refines it.

    Args:
        a: cos(hue) component, with a² + b² = 1.
        b: sin(hue) component.
    """
    if -1.88170328 * a - 0.80936493 * b > 1.0:
        # Red channel clips first
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1.0:
        # Green channel clips first
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, -0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        # Blue channel clips first
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    sat = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_ = 1.0 + sat * k_l
    m_ = 1.0 + sat * k_m
    s_ = 1.0 + sat * k_s

    l3 = l_ * l_ * l_
    m3 = m_ * m_ * m_
    s3 = s_ * s_ * s_

    l_ds = 3.0 * k_l * l_ * l_
    m_ds = 3.0 * k_m * m_ * m_
    s_ds = 3.0 * k_s * s_ * s_

    l_ds2 = 6.0 * k_l * k_l * l_
    m_ds2 = 6.0 * k_m * k_m * m_
    s_ds2 = 6.0 * k_s * k_s * s_

    f = wl * l3 + wm * m3 + ws * s3
    f1 = wl * l_ds + wm * m_ds + ws * s_ds
    f2 = wl * l_ds2 + wm * m_ds2 + ws * s_ds2

    # Single Halley step
    return sat - f * f1 / (f1 * f1 - 0.5 * f * f2)

@njit(cache=True)
def oklab_to_linear_srgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Oklab -> linear sRGB without the XYZ detour."""
    l_ = l + 0.3963377774 * a + 0.2158037573 * b
    m_ = l - 0.1055613458 * a - 0.0638541728 * b
    s_ = l - 0.0894841775 * a - 1.2914855480 * b

    l3 = l_ * l_ * l_
    m3 = m_ * m_ * m_
    s3 = s_ * s_ * s_

    return (
        4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3,
        -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3,
        -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3,
    )

@njit(cache=True)
def _linear_srgb_to_oklab_kernel(r: float, g: float, b: float, m1: ArrayFloat,
                                 m2: ArrayFloat) -> Tuple[float, float, float]:
    lms = _mul3(m1, r, g, b)
    return _mul3(m2, _cbrt(lms[0]), _cbrt(lms[1]), _cbrt(lms[2]))

@njit(cache=True)
def _xyz_to_oklab_kernel(x: float, y: float, z: float, m1: ArrayFloat,
                         m2: ArrayFloat) -> Tuple[float, float, float]:
    lms = _mul3(m1, x, y, z)
    return _mul3(m2, _cbrt(lms[0]), _cbrt(lms[1]), _cbrt(lms[2]))

@njit(cache=True)
def _oklab_to_xyz_kernel(l: float, a: float, b: float, m2_inv: ArrayFloat,
                         m1_inv: ArrayFloat) -> Tuple[float, float, float]:
    lms_ = _mul3(m2_inv, l, a, b)
    return _mul3(m1_inv, lms_[0] ** 3, lms_[1] ** 3, lms_[2] ** 3)

@njit(cache=True)
def cusp_for_hue(h: float) -> Tuple[float, float]:
    """
    Locates the gamut cusp (L_cusp, C_cusp) for a hue.

    Args:
        h: Hue as a fraction of a full turn, [0, 1).

    Returns:
        Lightness and chroma of the most chromatic in-gamut color at ``h``.
    """
    a = np.cos(_TWO_PI * h)
    b = np.sin(_TWO_PI * h)
    s_max = compute_max_saturation(a, b)
    rgb = oklab_to_linear_srgb(1.0, s_max * a, s_max * b)
    l_cusp = _cbrt(1.0 / max(rgb[0], max(rgb[1], rgb[2])))
    return (l_cusp, l_cusp * s_max)

@njit(cache=True)
def max_chroma_at_lightness(cusp: Tuple[float, float], l: float) -> float:
    """
    Chroma ceiling at lightness ``l`` under the triangular boundary:
    (0, 0) -> cusp on the lower branch, cusp -> (1, 0) on the upper one.
    """
    l_cusp, c_cusp = cusp
    if l <= l_cusp:
        if l_cusp <= 0.0:
            return 0.0
        return c_cusp * l / l_cusp
    if l_cusp >= 1.0:
        return 0.0
    return c_cusp * (1.0 - l) / (1.0 - l_cusp)

@njit(cache=True)
def _hue_degrees(a: float, b: float) -> float:
    h = np.arctan2(b, a) * _RAD2DEG
    if h < 0.0:
        h += 360.0
    if h >= 360.0:
        h -= 360.0
    return h


# =============================================================================
# 2. CONE FORMS
# =============================================================================

@njit(cache=True)
def oklab_to_okhsv(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Oklab -> (hue°, saturation, value)."""
    h = _hue_degrees(a, b)
    c = np.hypot(a, b)
    l_cusp, c_cusp = cusp_for_hue(h / 360.0)

    if c_cusp < _TINY or l < _TINY:
        return (h, 0.0, toe(l))

    tv = l + c * (1.0 - l_cusp) / c_cusp
    v = toe(tv)
    if tv > _TINY:
        s = min(c / (tv * c_cusp), 1.0)
    else:
        s = 0.0
    return (h, s, v)

@njit(cache=True)
def okhsv_to_oklab(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """(hue°, saturation, value) -> Oklab."""
    l_cusp, c_cusp = cusp_for_hue(h / 360.0)
    tv = toe_inv(v)
    l = tv * (1.0 - s * (1.0 - l_cusp))
    c = tv * s * c_cusp
    h_rad = h * _DEG2RAD
    return (l, c * np.cos(h_rad), c * np.sin(h_rad))

@njit(cache=True)
def oklab_to_okhsl(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Oklab -> (hue°, saturation, lightness)."""
    h = _hue_degrees(a, b)
    c = np.hypot(a, b)
    lightness = toe(l)
    if c < _OKHSL_MIN_CHROMA:
        return (h, 0.0, lightness)
    max_c = max_chroma_at_lightness(cusp_for_hue(h / 360.0), l)
    if max_c < _TINY:
        return (h, 0.0, lightness)
    return (h, min(c / max_c, 1.0), lightness)

@njit(cache=True)
def okhsl_to_oklab(h: float, s: float, lightness: float) -> Tuple[float, float, float]:
    """(hue°, saturation, lightness) -> Oklab."""
    l = toe_inv(lightness)
    c = s * max_chroma_at_lightness(cusp_for_hue(h / 360.0), l)
    h_rad = h * _DEG2RAD
    return (l, c * np.cos(h_rad), c * np.sin(h_rad))

@njit(cache=True)
def okhsv_to_okhwb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """(hue°, saturation, value) -> (hue°, whiteness, blackness)."""
    return (h, (1.0 - s) * v, 1.0 - v)

@njit(cache=True)
def okhwb_to_okhsv(h: float, w: float, b: float) -> Tuple[float, float, float]:
    """(hue°, whiteness, blackness) -> (hue°, saturation, value)."""
    v = 1.0 - b
    if v == 0.0:
        return (h, 0.0, 0.0)
    return (h, 1.0 - w / v, v)


# =============================================================================
# 3. TRISTIMULUS HELPERS
# =============================================================================

def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Linear sRGB (D65) -> Oklab."""
    return _linear_srgb_to_oklab_kernel(float(r), float(g), float(b), _M1_SRGB, _M2)

def xyz_to_oklab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """XYZ (D65) -> Oklab."""
    return _xyz_to_oklab_kernel(float(x), float(y), float(z), _M1_XYZ, _M2)

def oklab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Oklab -> XYZ (D65)."""
    return _oklab_to_xyz_kernel(float(l), float(a), float(b), M2_LAB_TO_LMS, M1_LMS_TO_XYZ)


# =============================================================================
# 4. BATCH KERNELS  (N, 3) arrays
# =============================================================================

@njit(cache=True)
def oklab_to_okhsv_batch(lab: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(lab)
    for i in range(lab.shape[0]):
        out[i, 0], out[i, 1], out[i, 2] = oklab_to_okhsv(lab[i, 0], lab[i, 1], lab[i, 2])
    return out

@njit(cache=True)
def okhsv_to_oklab_batch(hsv: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(hsv)
    for i in range(hsv.shape[0]):
        out[i, 0], out[i, 1], out[i, 2] = okhsv_to_oklab(hsv[i, 0], hsv[i, 1], hsv[i, 2])
    return out

@njit(cache=True)
def oklab_to_okhsl_batch(lab: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(lab)
    for i in range(lab.shape[0]):
        out[i, 0], out[i, 1], out[i, 2] = oklab_to_okhsl(lab[i, 0], lab[i, 1], lab[i, 2])
    return out

@njit(cache=True)
def okhsl_to_oklab_batch(hsl: ArrayFloat) -> ArrayFloat:
    out = np.empty_like(hsl)
    for i in range(hsl.shape[0]):
        out[i, 0], out[i, 1], out[i, 2] = okhsl_to_oklab(hsl[i, 0], hsl[i, 1], hsl[i, 2])
    return out
