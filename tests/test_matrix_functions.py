# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from ratlinalg.errors import DimensionMismatch
from ratlinalg.matrix import Matrix
from ratlinalg.matrix_functions import adj, det, det_cofactor, det_elimination
from ratlinalg.rational import ONE, ZERO, Rational
from ratlinalg.utils import random_integer_matrix, random_nonsingular_upper

TEST_ITERATIONS = 20


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_identity_determinant(n):
    assert det_cofactor(Matrix.identity(n)) == ONE
    assert det_elimination(Matrix.identity(n)) == ONE


def test_hand_computed_3x3():
    A = Matrix.from_rows([[2, -3, 1], [2, 0, -1], [1, 4, 5]])
    assert A.determinant() == Rational(49)
    assert det(A, method="elimination") == Rational(49)


def test_zero_row_determinant():
    A = Matrix.from_rows([[1, 2, 3], [0, 0, 0], [4, 5, 6]])
    assert det_cofactor(A) == ZERO
    assert det_elimination(A) == ZERO


def test_fractional_determinant():
    A = Matrix.from_rows([[Rational(1, 2), Rational(1, 3)], [Rational(1, 4), Rational(1, 5)]])
    assert det(A) == Rational(1, 60)


def test_single_entry():
    assert det(Matrix.from_rows([[Rational(-7, 3)]])) == Rational(-7, 3)


def test_swap_flips_sign():
    A = Matrix.from_rows([[0, 1], [1, 0]])
    assert det_cofactor(A) == Rational(-1)
    assert det_elimination(A) == Rational(-1)


def test_methods_agree():
    for seed in range(TEST_ITERATIONS):
        for n in range(1, 6):
            A = random_integer_matrix(n, n, low=-5, high=6, seed=seed)
            assert det_cofactor(A) == det_elimination(A)


def test_determinant_matches_numpy():
    for seed in range(TEST_ITERATIONS):
        A = random_integer_matrix(5, 5, seed=seed)
        ours = float(det(A))
        assert math.isclose(ours, np.linalg.det(A.to_float_array()), rel_tol=1e-9, abs_tol=1e-6)


def test_determinant_transpose_and_product():
    for seed in range(TEST_ITERATIONS):
        A = random_integer_matrix(4, 4, seed=seed)
        B = random_integer_matrix(4, 4, seed=seed + 1000)
        assert det(A) == det(A.transpose())
        assert det(A @ B) == det(A) * det(B)


def test_upper_triangular_is_diagonal_product():
    U = random_nonsingular_upper(6, seed=3)
    expected = ONE
    for i in range(6):
        expected = expected * U[i, i]
    assert det(U, method="elimination") == expected
    assert det(U) == expected


def test_non_square_and_bad_method():
    A = Matrix.zero(2, 3)
    assert det(A) is None
    assert det(A, method="elimination") is None
    with pytest.raises(ValueError):
        det(Matrix.identity(2), method="lu")


def test_large_cofactor_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="ratlinalg.matrix_functions"):
        assert det_cofactor(Matrix.identity(9)) == ONE
    assert "O(n!)" in caplog.text


def test_adjugate():
    for seed in range(TEST_ITERATIONS):
        A = random_integer_matrix(4, 4, seed=seed)
        d = det(A, method="elimination")
        assert A @ adj(A) == d * Matrix.identity(4)


def test_adjugate_singular(caplog):
    A = Matrix.from_rows([[1, 2], [2, 4]])
    with caplog.at_level(logging.WARNING, logger="ratlinalg.matrix_functions"):
        assert adj(A) == Matrix.from_rows([[4, -2], [-2, 1]])
    assert "singular" in caplog.text

    B = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert B @ adj(B) == Matrix.zero(3, 3)
    assert adj(B) == Matrix.from_rows([[-3, 6, -3], [6, -12, 6], [-3, 6, -3]])


def test_adjugate_edge_cases():
    assert adj(Matrix.from_rows([[5]])) == Matrix.identity(1)
    with pytest.raises(DimensionMismatch):
        adj(Matrix.zero(2, 3))
