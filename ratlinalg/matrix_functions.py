# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

from .elimination import lockstep_rref
from .errors import DimensionMismatch
from .matrix import Matrix
from .rational import ZERO, Rational
from .utils import COFACTOR_WARN_SIZE, DEFAULT_DET_METHOD, permutation_sign

logger = logging.getLogger(__name__)


def _laplace(A: Matrix) -> Rational:
    n = A.num_rows
    if n == 1:
        return A[0, 0]
    if n == 2:
        return A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]

    det = ZERO
    for i in range(n):
        entry = A[0, i]
        if entry.is_zero():
            continue
        term = entry * _laplace(A.remove_row_and_col(0, i))
        # sign (-1)**i along row 0
        det = det + term if i % 2 == 0 else det - term
    return det


def det_cofactor(A: Matrix) -> Optional[Rational]:
    """
    Determinant by Laplace expansion along the first row.

    Returns None when A is not square.
    """
    if A.num_rows != A.num_cols:
        return None
    if A.num_rows > COFACTOR_WARN_SIZE:
        logger.warning(
            f"det_cofactor(): {A.num_rows}x{A.num_cols} expansion is O(n!), "
            "consider method='elimination'"
        )
    return _laplace(A)


def det_elimination(A: Matrix) -> Optional[Rational]:
    """
    Determinant from the pivots of a single Gauss-Jordan pass.

    det(A) = sign(perm) * prod(pivots) when A reduces to the identity,
    and zero otherwise. Returns None when A is not square.
    """
    m, n = A.shape
    if m != n:
        return None
    result = lockstep_rref(A, Matrix.zero(n, 1))
    if len(result.pivots) < n:
        return ZERO
    det = Rational(permutation_sign(result.perm))
    for p in result.pivot_values:
        det = det * p
    return det


def det(A: Matrix, method: str = DEFAULT_DET_METHOD) -> Optional[Rational]:
    """
    Calculate the determinant of an n-by-n matrix A.

    ``method`` is "cofactor" (reference expansion) or "elimination".
    Both agree exactly, sign included.
    """
    if method == "cofactor":
        return det_cofactor(A)
    if method == "elimination":
        return det_elimination(A)
    raise ValueError(f"unknown determinant method: {method!r}")


def adj(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix A.

    Fast path (det != 0): adj(A) = det(A) * A^{-1}
    Slow path (det = 0): transpose of the cofactor matrix
    """
    m, n = A.shape
    if m != n:
        raise DimensionMismatch("A must be a square matrix")
    if n == 1:
        return Matrix.identity(1)

    d = det_elimination(A)
    if not d.is_zero():
        return A.inverse().scale(d)

    logger.warning("adj(): singular matrix, falling back to the cofactor matrix – O(n^5)")
    C = Matrix.zero(n, n)
    for i in range(n):
        for j in range(n):
            minor = det_elimination(A.remove_row_and_col(i, j))
            C[i, j] = minor if (i + j) % 2 == 0 else -minor
    return C.transpose()
