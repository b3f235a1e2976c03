# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_matrix.py — 3x3 linear algebra for colorimetry.

Every colorimetric transform in Tincture is a 3x3 matrix acting on a column
vector (XYZ, linear RGB, LMS). This module provides the handful of kernels the
rest of the package is built on:

    mat3_mul_vec   M · v
    mat3_mul       A · B        (order matters: primaries · diag(scale))
    mat3_det       det(M)
    mat3_inverse   adj(M) / det(M)
    mat3_diag      diag(v)

Kernels are Numba-compiled and never raise; singularity is detected in the
Python wrapper so the error surfaces at the API edge.
"""

import numpy as np
from numba import njit
from typing import Final, TypeAlias, Sequence, Union

from tincture_errors import DegenerateMatrixError

__all__ = [
    "ArrayFloat",
    "MatrixLike",
    "SINGULAR_TOLERANCE",
    "as_mat3",
    "as_vec3",
    "mat3_mul_vec",
    "mat3_mul",
    "mat3_det",
    "mat3_inverse",
    "mat3_diag",
    "mat3_to_tuple",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]
MatrixLike: TypeAlias = Union[ArrayFloat, Sequence[Sequence[float]]]

# Relative to the cube of the largest entry, so well-conditioned matrices with
# small entries are not mistaken for singular ones.
SINGULAR_TOLERANCE: Final[float] = 1e-12


# =============================================================================
# 1. LOW-LEVEL KERNELS
# =============================================================================
# NOTE: fastmath is deliberately off here. The matrix pair of every RGB space
# must close on its reference white to ~1e-12, which reassociation can break.

@njit(cache=True)
def _mul_vec_kernel(m: ArrayFloat, v: ArrayFloat) -> ArrayFloat:
    out = np.empty(3, dtype=np.float64)
    for i in range(3):
        out[i] = m[i, 0] * v[0] + m[i, 1] * v[1] + m[i, 2] * v[2]
    return out

@njit(cache=True)
def _mul_kernel(a: ArrayFloat, b: ArrayFloat) -> ArrayFloat:
    out = np.empty((3, 3), dtype=np.float64)
    for i in range(3):
        for j in range(3):
            out[i, j] = a[i, 0] * b[0, j] + a[i, 1] * b[1, j] + a[i, 2] * b[2, j]
    return out

@njit(cache=True)
def _det_kernel(m: ArrayFloat) -> float:
    """Cofactor expansion along the first row."""
    a, b, c = m[0, 0], m[0, 1], m[0, 2]
    d, e, f = m[1, 0], m[1, 1], m[1, 2]
    g, h, i = m[2, 0], m[2, 1], m[2, 2]
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

@njit(cache=True)
def _adjugate_kernel(m: ArrayFloat) -> ArrayFloat:
    """Transposed cofactor matrix. adj(M) / det(M) is the inverse."""
    a, b, c = m[0, 0], m[0, 1], m[0, 2]
    d, e, f = m[1, 0], m[1, 1], m[1, 2]
    g, h, i = m[2, 0], m[2, 1], m[2, 2]

    out = np.empty((3, 3), dtype=np.float64)
    out[0, 0] = e * i - f * h
    out[0, 1] = c * h - b * i
    out[0, 2] = b * f - c * e
    out[1, 0] = f * g - d * i
    out[1, 1] = a * i - c * g
    out[1, 2] = c * d - a * f
    out[2, 0] = d * h - e * g
    out[2, 1] = b * g - a * h
    out[2, 2] = a * e - b * d
    return out


# =============================================================================
# 2. INPUT NORMALISATION
# =============================================================================

def as_mat3(m: MatrixLike) -> ArrayFloat:
    """Coerces nested sequences or arrays into a contiguous (3, 3) float64 array.

    Raises:
        ValueError: If the input does not have shape (3, 3).
    """
    arr = np.ascontiguousarray(m, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {arr.shape}")
    return arr

def as_vec3(v: Union[ArrayFloat, Sequence[float]]) -> ArrayFloat:
    """Coerces a length-3 sequence into a contiguous (3,) float64 array."""
    arr = np.ascontiguousarray(v, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {arr.shape}")
    return arr

def mat3_to_tuple(m: MatrixLike) -> tuple[tuple[float, ...], ...]:
    """Hashable nested-tuple form, used as an ``lru_cache`` key."""
    arr = as_mat3(m)
    return tuple(tuple(float(x) for x in row) for row in arr)


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def mat3_mul_vec(m: MatrixLike, v: Union[ArrayFloat, Sequence[float]]) -> ArrayFloat:
    """
    Multiplies a 3x3 matrix by a column vector.

    Args:
        m: Matrix, shape (3, 3).
        v: Vector, shape (3,).

    Returns:
        ``m · v`` as a (3,) float64 array.
    """
    return _mul_vec_kernel(as_mat3(m), as_vec3(v))

def mat3_mul(a: MatrixLike, b: MatrixLike) -> ArrayFloat:
    """
    Multiplies two 3x3 matrices, ``a · b``.

    The product is not commutative; the RGB derivation relies on
    ``primaries · diag(scale)`` scaling the columns of ``primaries``.
    """
    return _mul_kernel(as_mat3(a), as_mat3(b))

def mat3_det(m: MatrixLike) -> float:
    """Determinant of a 3x3 matrix."""
    return float(_det_kernel(as_mat3(m)))

def mat3_inverse(m: MatrixLike) -> ArrayFloat:
    """
    Inverts a 3x3 matrix by the adjugate / determinant method.

    Args:
        m: Matrix, shape (3, 3).

    Returns:
        The inverse as a (3, 3) float64 array.

    Raises:
        DegenerateMatrixError: If the determinant is zero, non-finite, or
            negligible relative to the magnitude of the entries (e.g. RGB
            primaries that are collinear in xy).
    """
    arr = as_mat3(m)
    det = float(_det_kernel(arr))
    scale = float(np.max(np.abs(arr)))
    if not np.isfinite(det) or scale == 0.0 or abs(det) < SINGULAR_TOLERANCE * scale ** 3:
        raise DegenerateMatrixError(det)
    return _adjugate_kernel(arr) * (1.0 / det)

def mat3_diag(v: Union[ArrayFloat, Sequence[float]]) -> ArrayFloat:
    """Diagonal 3x3 matrix with ``v`` on the diagonal."""
    return np.diag(as_vec3(v))
