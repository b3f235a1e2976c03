# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for the 3x3 matrix kernels.
"""

import numpy as np
import pytest

from tincture_adaptation import BRADFORD, CAT16
from tincture_errors import DegenerateMatrixError, TinctureError
from tincture_matrix import (
    as_mat3, as_vec3, mat3_det, mat3_diag, mat3_inverse, mat3_mul, mat3_mul_vec, mat3_to_tuple,
)


def test_mul_vec_matches_numpy():
    m = np.array([[1.0, 2.0, 3.0], [0.5, -1.0, 4.0], [2.0, 0.0, 1.0]])
    v = np.array([0.3, -0.2, 1.5])
    np.testing.assert_allclose(mat3_mul_vec(m, v), m @ v, atol=1e-15)

def test_mul_is_ordered():
    a = np.array([[1.0, 2.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
    b = mat3_diag([2.0, 3.0, 4.0])
    ab = mat3_mul(a, b)
    np.testing.assert_allclose(ab, a @ b)
    # Right-multiplying by a diagonal scales columns
    np.testing.assert_allclose(ab[:, 1], a[:, 1] * 3.0)
    assert not np.allclose(ab, mat3_mul(b, a))

def test_det_of_diagonal():
    assert mat3_det(mat3_diag([2.0, 3.0, 4.0])) == pytest.approx(24.0)

@pytest.mark.parametrize("matrix", [BRADFORD.matrix, CAT16.matrix])
def test_double_inversion_recovers_matrix(matrix):
    m = as_mat3(matrix)
    np.testing.assert_allclose(mat3_inverse(mat3_inverse(m)), m, atol=1e-10)

def test_inverse_is_inverse():
    m = as_mat3(BRADFORD.matrix)
    np.testing.assert_allclose(mat3_mul(m, mat3_inverse(m)), np.eye(3), atol=1e-12)

def test_singular_matrix_raises():
    singular = [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 1.0, 1.0]]
    with pytest.raises(DegenerateMatrixError) as info:
        mat3_inverse(singular)
    assert info.value.determinant == pytest.approx(0.0)
    assert isinstance(info.value, ValueError)
    assert isinstance(info.value, TinctureError)

def test_zero_matrix_raises():
    with pytest.raises(DegenerateMatrixError):
        mat3_inverse(np.zeros((3, 3)))

def test_small_but_regular_matrix_inverts():
    m = np.eye(3) * 1e-6
    np.testing.assert_allclose(mat3_inverse(m), np.eye(3) * 1e6)

def test_shape_validation():
    with pytest.raises(ValueError):
        as_mat3(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        as_vec3([1.0, 2.0])

def test_tuple_form_is_hashable():
    key = mat3_to_tuple(np.eye(3))
    assert hash(key) == hash(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))
