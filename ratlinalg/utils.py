# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import List, Optional

import numpy as np

from .matrix import Matrix

# Cofactor expansion is O(n!); above this size det_cofactor logs a warning.
COFACTOR_WARN_SIZE: int = 8

DEFAULT_DET_METHOD: str = "cofactor"


def permutation_sign(perm: List[int]) -> int:
    """Return +1 or -1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n - #cycles
    return -1 if swaps & 1 else 1


def random_integer_matrix(
    rows: int, cols: int, low: int = -9, high: int = 10, seed: Optional[int] = None
) -> Matrix:
    """Matrix with integer entries drawn uniformly from [low, high)."""
    rng = np.random.default_rng(seed)
    return Matrix.from_array(rng.integers(low, high, size=(rows, cols)))


def random_nonsingular_upper(
    n: int, low: int = -9, high: int = 10, seed: Optional[int] = None
) -> Matrix:
    """
    Build a matrix U that is upper-triangular with random integer entries
    above the diagonal and only non-zero values on its diagonal

    Returns
    -------
    Matrix, det(U) is the product of the diagonal
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.integers(low, high, size=(n, n)))
    # replace the diagonal with values from 1..max(|low|, |high|) of random sign
    bound = max(abs(low), abs(high), 2)
    diag = rng.integers(1, bound, size=n) * rng.choice([-1, 1], size=n)
    U[np.diag_indices(n)] = diag
    return Matrix.from_array(U)
