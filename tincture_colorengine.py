# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Vectorised Color Engine
=======================
Batch counterpart of the ``color_models`` classes: the same transforms over
(N, 3) NumPy arrays, JIT-compiled with Numba. The model classes delegate
their CIE arithmetic to the ``_raw`` paths here, so scalar and batch results
agree bit for bit.

Architecture Note:
    Core transforms provide both a public ``@handle_shapes`` decorated API
    and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
    float64 input. Convenience pipelines (e.g. ``rgb_to_lab``) call the
    ``_raw`` variants to avoid redundant shape checks at each stage.

Conventions:
    - XYZ is relative (reference white Y = 1).
    - L* is 0..100; hues are degrees in [0, 360).
    - RGB arrays are *encoded* values of the given space, nominally 0..1.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - Ottosson, B. (2020). "A perceptual color space for image processing".
"""

import functools
import numpy as np
from numba import njit
from typing import Final, Callable, Any, Union, Sequence

import tincture_gamut as gamut
from tincture_adaptation import ViewingContext
from tincture_illuminant import ILLUMINANT_D65
from tincture_matrix import ArrayFloat
from tincture_rgbspec import RgbSpace, SpaceLike, resolve_space

__all__ = [
    # --- Constants ---
    "REF_WHITE_D65",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "DEG2RAD",
    "RAD2DEG",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "ColorSpaceEngine",
]

WhiteLike = Union[ArrayFloat, Sequence[float]]

REF_WHITE_D65: Final[ArrayFloat] = np.array(ILLUMINANT_D65.white_2, dtype=np.float64)

# --- Exact Rational Math Constants ---
# Defined by CIE 1976 for the Lab transformation.
# delta = 6/29 is the threshold where the function switches from cubic to linear.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # ~0.008856
LAB_KAPPA: Final[float] = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0)  # ~903.296

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to (N, 3) and safeguard shape.

    This ensures that 1D inputs (single pixels) are treated as 2D batches
    internally, simplifying the kernels.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns (3,)
        - If input is (N, 3), returns (N, 3)
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper

def _white(white: WhiteLike) -> ArrayFloat:
    w = np.asarray(white, dtype=np.float64)
    if w.shape != (3,):
        raise ValueError(f"Reference white must have shape (3,), got {w.shape}")
    return w


# =============================================================================
# 2. LOW-LEVEL MATH KERNELS (Numba Optimized)
# =============================================================================

@njit(cache=True, fastmath=True)
def _lab_f(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear transfer function f(t) for CIELAB.

    This is the "cube root" part of the Lab transform, with a linear slope
    near zero to prevent infinite slope.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out

@njit(cache=True, fastmath=True)
def _lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    """
    Inverse non-linear transfer function for CIELAB.

    Uses multiplication form (116*t - 16)/k instead of (t - 16/116)/(k/116)
    to minimize floating point division errors near the delta threshold.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > _LAB_DELTA:
            out_flat[i] = v ** 3.0
        else:
            out_flat[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out

@njit(cache=True, fastmath=True)
def _xyz_to_uv_prime(xyz_arr: ArrayFloat) -> ArrayFloat:
    """
    Calculates CIE 1976 u', v' chromaticity coordinates from XYZ.

    Formulas:
        u' = 4X / (X + 15Y + 3Z)
        v' = 9Y / (X + 15Y + 3Z)
    """
    out = np.zeros((xyz_arr.shape[0], 2), dtype=np.float64)
    for i in range(xyz_arr.shape[0]):
        d = xyz_arr[i, 0] + 15.0 * xyz_arr[i, 1] + 3.0 * xyz_arr[i, 2]
        # Black returns (0, 0)
        if d > 1e-12:
            inv_d = 1.0 / d
            out[i, 0] = 4.0 * xyz_arr[i, 0] * inv_d
            out[i, 1] = 9.0 * xyz_arr[i, 1] * inv_d
    return out

@njit(cache=True, fastmath=True)
def _rect_to_polar_kernel(rect: ArrayFloat) -> ArrayFloat:
    """
    (L, a, b) -> (L, C, h°) for any opponent space (Lab, Luv, Oklab).
    Input shape (N, 3), Output shape (N, 3).
    """
    n = rect.shape[0]
    polar = np.empty_like(rect)

    for i in range(n):
        L, a, b = rect[i, 0], rect[i, 1], rect[i, 2]
        C = np.hypot(a, b)
        h_deg = np.arctan2(b, a) * RAD2DEG
        if h_deg < 0: h_deg += 360.0
        polar[i, 0], polar[i, 1], polar[i, 2] = L, C, h_deg
    return polar

@njit(cache=True, fastmath=True)
def _polar_to_rect_kernel(polar: ArrayFloat) -> ArrayFloat:
    """
    (L, C, h°) -> (L, a, b).
    Input shape (N, 3), Output shape (N, 3).
    """
    n = polar.shape[0]
    rect = np.empty_like(polar)

    for i in range(n):
        L, C, h_deg = polar[i, 0], polar[i, 1], polar[i, 2]
        h_rad = h_deg * DEG2RAD
        rect[i, 0] = L
        rect[i, 1] = C * np.cos(h_rad)
        rect[i, 2] = C * np.sin(h_rad)
    return rect


# =============================================================================
# 3. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for vectorised color space transformations."""

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _xyz_to_xyY_raw(xyz_array: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw XYZ → xyY.  *xyz_array* must be (N, 3) float64."""
        sum_xyz = np.sum(xyz_array, axis=-1)
        mask = sum_xyz != 0.0
        xyY = np.zeros_like(xyz_array)

        if np.any(mask):
            inv_sum = 1.0 / sum_xyz[mask]
            xyY[mask, 0] = xyz_array[mask, 0] * inv_sum
            xyY[mask, 1] = xyz_array[mask, 1] * inv_sum
            xyY[mask, 2] = xyz_array[mask, 1]

        # NOTE (Design Decision): zero-sum (black) pixels take the chromaticity
        # of the reference white with Y = 0 so that hue-less black stays on
        # the neutral axis. Lindbloom convention, not CIE mandated.
        w_sum = float(np.sum(white))
        xyY[~mask, 0] = white[0] / w_sum
        xyY[~mask, 1] = white[1] / w_sum
        xyY[~mask, 2] = 0.0
        return xyY

    @staticmethod
    def _xyY_to_xyz_raw(xyY_array: ArrayFloat) -> ArrayFloat:
        """Raw xyY → XYZ.  y == 0 yields black."""
        x, y, Y = xyY_array[..., 0], xyY_array[..., 1], xyY_array[..., 2]
        xyz = np.zeros_like(xyY_array)
        mask = y != 0.0
        if np.any(mask):
            factor = Y[mask] / y[mask]
            xyz[mask, 0] = x[mask] * factor
            xyz[mask, 1] = Y[mask]
            xyz[mask, 2] = (1.0 - x[mask] - y[mask]) * factor
        return xyz

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw XYZ → Lab.  *xyz_array* must be (N, 3) float64."""
        xyz_norm = np.ascontiguousarray(xyz_array / white)
        f_xyz = _lab_f(xyz_norm)

        out = np.empty_like(xyz_array)
        out[..., 0] = 116.0 * f_xyz[..., 1] - 16.0
        out[..., 1] = 500.0 * (f_xyz[..., 0] - f_xyz[..., 1])
        out[..., 2] = 200.0 * (f_xyz[..., 1] - f_xyz[..., 2])
        return out

    @staticmethod
    def _lab_to_xyz_raw(lab_array: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw Lab → XYZ.  *lab_array* must be (N, 3) float64."""
        L, a, b = lab_array[..., 0], lab_array[..., 1], lab_array[..., 2]

        fy = (L + 16.0) / 116.0
        f = np.empty_like(lab_array)
        f[..., 0] = a / 500.0 + fy
        f[..., 1] = fy
        f[..., 2] = fy - b / 200.0

        xyz = _lab_f_inv(f)
        xyz *= white
        return xyz

    @staticmethod
    def _xyz_to_luv_raw(xyz_array: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw XYZ → Luv.  *xyz_array* must be (N, 3) float64."""
        uv_prime = _xyz_to_uv_prime(xyz_array)

        ill_2d = np.ascontiguousarray(np.atleast_2d(white))
        uv_prime_n = _xyz_to_uv_prime(ill_2d)
        u_n, v_n = uv_prime_n[0, 0], uv_prime_n[0, 1]

        Y_norm = np.ascontiguousarray(xyz_array[:, 1] / white[1])
        L = 116.0 * _lab_f(Y_norm) - 16.0

        # Black has no chromaticity; keep it on the neutral axis.
        black = uv_prime[:, 0] == 0.0
        out = np.empty_like(xyz_array)
        out[:, 0] = L
        out[:, 1] = np.where(black, 0.0, 13.0 * L * (uv_prime[:, 0] - u_n))
        out[:, 2] = np.where(black, 0.0, 13.0 * L * (uv_prime[:, 1] - v_n))
        return out

    @staticmethod
    def _luv_to_xyz_raw(luv_array: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw Luv → XYZ.  *luv_array* must be (N, 3) float64."""
        L, u, v = luv_array[:, 0], luv_array[:, 1], luv_array[:, 2]

        ill_2d = np.ascontiguousarray(np.atleast_2d(white))
        uv_prime_n = _xyz_to_uv_prime(ill_2d)
        u_n, v_n = uv_prime_n[0, 0], uv_prime_n[0, 1]

        mask = L > 1e-12
        u_prime = np.full_like(L, u_n)
        v_prime = np.full_like(L, v_n)

        if np.any(mask):
            inv_13L = 1.0 / (13.0 * L[mask])
            u_prime[mask] = (u[mask] * inv_13L) + u_n
            v_prime[mask] = (v[mask] * inv_13L) + v_n

        fy = np.ascontiguousarray((L + 16.0) / 116.0)
        Y = _lab_f_inv(fy) * white[1]

        X = np.zeros_like(Y)
        Z = np.zeros_like(Y)

        mask_v = (v_prime > 1e-12) & mask
        if np.any(mask_v):
            Y_valid = Y[mask_v]
            up, vp = u_prime[mask_v], v_prime[mask_v]
            inv_4vp = 1.0 / (4.0 * vp)
            X[mask_v] = Y_valid * 9.0 * up * inv_4vp
            Z[mask_v] = Y_valid * (12.0 - 3.0 * up - 20.0 * vp) * inv_4vp

        out = np.empty_like(luv_array)
        out[:, 0] = X
        out[:, 1] = Y
        out[:, 2] = Z
        return out

    @staticmethod
    def _to_polar_raw(rect_array: ArrayFloat) -> ArrayFloat:
        return _rect_to_polar_kernel(rect_array)

    @staticmethod
    def _to_rect_raw(polar_array: ArrayFloat) -> ArrayFloat:
        return _polar_to_rect_kernel(polar_array)

    @staticmethod
    def _xyz_to_oklab_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        """Raw XYZ (D65) → Oklab."""
        lms = np.dot(xyz_array, gamut.M1_XYZ_TO_LMS.T)
        lms_prime = np.cbrt(lms)
        return np.dot(lms_prime, gamut.M2_LMS_TO_LAB.T)

    @staticmethod
    def _oklab_to_xyz_raw(oklab_array: ArrayFloat) -> ArrayFloat:
        """Raw Oklab → XYZ (D65)."""
        lms_prime = np.dot(oklab_array, gamut.M2_LAB_TO_LMS.T)
        return np.dot(lms_prime ** 3, gamut.M1_LMS_TO_XYZ.T)

    @staticmethod
    def _rgb_to_xyz_raw(rgb_array: ArrayFloat, space: SpaceLike) -> ArrayFloat:
        """Raw encoded RGB → XYZ in the space's own context."""
        spec = resolve_space(space)
        linear = spec.transfer.decode(rgb_array)
        return np.dot(linear, spec.xyz_matrix.T)

    @staticmethod
    def _xyz_to_rgb_raw(xyz_array: ArrayFloat, space: SpaceLike, clip: bool = False) -> ArrayFloat:
        """Raw XYZ (in the space's context) → encoded RGB."""
        spec = resolve_space(space)
        linear = np.ascontiguousarray(np.dot(xyz_array, spec.inverse_xyz_matrix.T))
        encoded = spec.transfer.encode(linear)
        if clip:
            return np.clip(encoded, 0.0, 1.0)
        return encoded

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def xyz_to_xyY(xyz_array: ArrayFloat, white: WhiteLike = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts XYZ to xyY.

        Args:
            xyz_array: Input XYZ, shape (N, 3) or (3,).
            white: Reference white whose chromaticity is given to black pixels.
        """
        return ColorSpaceEngine._xyz_to_xyY_raw(xyz_array, _white(white))

    @staticmethod
    @handle_shapes
    def xyY_to_xyz(xyY_array: ArrayFloat) -> ArrayFloat:
        """Converts xyY to XYZ. Rows with y == 0 map to black."""
        return ColorSpaceEngine._xyY_to_xyz_raw(xyY_array)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat, white: WhiteLike = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts XYZ to CIELAB.

        Args:
            xyz_array: Input XYZ, shape (N, 3) or (3,).
            white: Reference white the XYZ values are relative to.

        Returns:
            Lab values with L* in 0..100.
        """
        return ColorSpaceEngine._xyz_to_lab_raw(xyz_array, _white(white))

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat, white: WhiteLike = REF_WHITE_D65) -> ArrayFloat:
        """Converts CIELAB to XYZ relative to ``white``."""
        return ColorSpaceEngine._lab_to_xyz_raw(lab_array, _white(white))

    @staticmethod
    @handle_shapes
    def xyz_to_luv(xyz_array: ArrayFloat, white: WhiteLike = REF_WHITE_D65) -> ArrayFloat:
        """Converts XYZ to CIELUV relative to ``white``."""
        return ColorSpaceEngine._xyz_to_luv_raw(xyz_array, _white(white))

    @staticmethod
    @handle_shapes
    def luv_to_xyz(luv_array: ArrayFloat, white: WhiteLike = REF_WHITE_D65) -> ArrayFloat:
        """Converts CIELUV to XYZ relative to ``white``."""
        return ColorSpaceEngine._luv_to_xyz_raw(luv_array, _white(white))

    @staticmethod
    @handle_shapes
    def lab_to_lch(lab_array: ArrayFloat) -> ArrayFloat:
        """
        Converts rectangular opponent coordinates to polar (L, C, h°).

        Works for Lab → LCh(ab), Luv → LCh(uv) and Oklab → Oklch alike.
        """
        return _rect_to_polar_kernel(lab_array)

    @staticmethod
    @handle_shapes
    def lch_to_lab(lch_array: ArrayFloat) -> ArrayFloat:
        """Converts polar (L, C, h°) back to rectangular opponent coordinates."""
        return _polar_to_rect_kernel(lch_array)

    @staticmethod
    @handle_shapes
    def xyz_to_oklab(xyz_array: ArrayFloat) -> ArrayFloat:
        """Converts XYZ (D65) to Oklab."""
        return ColorSpaceEngine._xyz_to_oklab_raw(xyz_array)

    @staticmethod
    @handle_shapes
    def oklab_to_xyz(oklab_array: ArrayFloat) -> ArrayFloat:
        """Converts Oklab to XYZ (D65)."""
        return ColorSpaceEngine._oklab_to_xyz_raw(oklab_array)

    @staticmethod
    @handle_shapes
    def oklab_to_okhsv(oklab_array: ArrayFloat) -> ArrayFloat:
        """Converts Oklab to Okhsv (h°, s, v)."""
        return gamut.oklab_to_okhsv_batch(oklab_array)

    @staticmethod
    @handle_shapes
    def okhsv_to_oklab(okhsv_array: ArrayFloat) -> ArrayFloat:
        """Converts Okhsv (h°, s, v) to Oklab."""
        return gamut.okhsv_to_oklab_batch(okhsv_array)

    @staticmethod
    @handle_shapes
    def oklab_to_okhsl(oklab_array: ArrayFloat) -> ArrayFloat:
        """Converts Oklab to Okhsl (h°, s, l)."""
        return gamut.oklab_to_okhsl_batch(oklab_array)

    @staticmethod
    @handle_shapes
    def okhsl_to_oklab(okhsl_array: ArrayFloat) -> ArrayFloat:
        """Converts Okhsl (h°, s, l) to Oklab."""
        return gamut.okhsl_to_oklab_batch(okhsl_array)

    @staticmethod
    @handle_shapes
    def rgb_to_xyz(rgb_array: ArrayFloat, space: SpaceLike = RgbSpace.SRGB) -> ArrayFloat:
        """
        Converts encoded RGB of any space to XYZ in that space's context.

        Args:
            rgb_array: Encoded RGB, shape (N, 3) or (3,).
            space: ``RgbSpace`` member or custom ``RgbSpec``.
        """
        return ColorSpaceEngine._rgb_to_xyz_raw(rgb_array, space)

    @staticmethod
    @handle_shapes
    def xyz_to_rgb(xyz_array: ArrayFloat, space: SpaceLike = RgbSpace.SRGB,
                   clip: bool = False) -> ArrayFloat:
        """
        Converts XYZ (already in the space's context) to encoded RGB.

        Args:
            xyz_array: Input XYZ, shape (N, 3) or (3,).
            space: ``RgbSpace`` member or custom ``RgbSpec``.
            clip: If True, clamps the encoded output to [0, 1]. Off by
                  default to preserve out-of-gamut / HDR values.
        """
        return ColorSpaceEngine._xyz_to_rgb_raw(xyz_array, space, clip)

    @staticmethod
    @handle_shapes
    def srgb_to_xyz(rgb_array: ArrayFloat) -> ArrayFloat:
        """Converts sRGB [0..1] to XYZ (D65)."""
        return ColorSpaceEngine._rgb_to_xyz_raw(rgb_array, RgbSpace.SRGB)

    @staticmethod
    @handle_shapes
    def xyz_to_srgb(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """Converts XYZ (D65) to sRGB, clamped to [0, 1] by default."""
        return ColorSpaceEngine._xyz_to_rgb_raw(xyz_array, RgbSpace.SRGB, clip)

    @staticmethod
    @handle_shapes
    def adapt(xyz_array: ArrayFloat, source: ViewingContext, target: ViewingContext) -> ArrayFloat:
        """
        Adapts XYZ rows from ``source`` to ``target`` using the target's CAT.

        Identical reference whites return an unchanged copy.
        """
        if not source.needs_adaptation(target):
            return xyz_array.copy()
        return target.cat.adapt_array(xyz_array, source.white_tuple, target.white_tuple)

    # =====================================================================
    #  Convenience Pipelines
    # =====================================================================

    @staticmethod
    @handle_shapes
    def rgb_to_lab(rgb_array: ArrayFloat, space: SpaceLike = RgbSpace.SRGB) -> ArrayFloat:
        """Encoded RGB → Lab under the space's own reference white."""
        spec = resolve_space(space)
        xyz = ColorSpaceEngine._rgb_to_xyz_raw(rgb_array, spec)
        return ColorSpaceEngine._xyz_to_lab_raw(xyz, spec.context.reference_white)

    @staticmethod
    @handle_shapes
    def lab_to_rgb(lab_array: ArrayFloat, space: SpaceLike = RgbSpace.SRGB,
                   clip: bool = False) -> ArrayFloat:
        """Lab under the space's reference white → encoded RGB."""
        spec = resolve_space(space)
        xyz = ColorSpaceEngine._lab_to_xyz_raw(lab_array, spec.context.reference_white)
        return ColorSpaceEngine._xyz_to_rgb_raw(xyz, spec, clip)

    @staticmethod
    @handle_shapes
    def srgb_to_oklab(rgb_array: ArrayFloat) -> ArrayFloat:
        """sRGB → Oklab via the sRGB-folded LMS matrix."""
        linear = RgbSpace.SRGB.transfer.decode(rgb_array)
        lms = np.dot(linear, gamut.M1_LINEAR_SRGB_TO_LMS.T)
        return np.dot(np.cbrt(lms), gamut.M2_LMS_TO_LAB.T)

    @staticmethod
    @handle_shapes
    def oklab_to_srgb(oklab_array: ArrayFloat, clip: bool = False) -> ArrayFloat:
        """Oklab → sRGB via the analytic linear-sRGB inverse."""
        linear = np.empty_like(oklab_array)
        for i in range(oklab_array.shape[0]):
            linear[i] = gamut.oklab_to_linear_srgb(*oklab_array[i])
        encoded = RgbSpace.SRGB.transfer.encode(linear)
        if clip:
            return np.clip(encoded, 0.0, 1.0)
        return encoded
