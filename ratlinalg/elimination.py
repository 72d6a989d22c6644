# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from .errors import DimensionMismatch
from .rational import Rational

if TYPE_CHECKING:
    from .matrix import Matrix

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    row: int
    col: int


class LockstepResult(NamedTuple):
    rref: "Matrix"
    pair: "Matrix"
    pivots: List[int]
    pivot_values: List[Rational]
    perm: List[int]


def next_leading_position(R: "Matrix", last: Position) -> Optional[Position]:
    """
    Find the next pivot strictly below and to the right of ``last``.

    Columns are scanned left to right and, inside each column, rows top to
    bottom, so the first non-zero entry found is the leftmost candidate.
    Returns None when the unreduced region is entirely zero.
    """
    for col in range(last.col + 1, R.num_cols):
        for row in range(last.row + 1, R.num_rows):
            if not R[row, col].is_zero():
                return Position(row, col)
    return None


def lockstep_rref(A: "Matrix", pair: "Matrix") -> LockstepResult:
    """
    Gauss-Jordan reduction of A, replaying every row operation on ``pair``.

    Parameters
    ----------
    A    : Matrix          (m, n)
        Matrix to reduce. Not modified.
    pair : Matrix          (m, k)
        Companion matrix; receives the same swaps, scalings and row
        additions as A. Not modified. Pass the zero matrix for a plain
        RREF, or the m-by-m identity to accumulate the inverse.

    Returns
    -------
    LockstepResult
        rref         : reduced row-echelon form of A.
        pair         : ``pair`` after the identical row operations.
        pivots       : pivot column indices; len = rank(A).
        pivot_values : pivot entries as found, before scaling to one.
        perm         : final row order: row i comes from original row perm[i].
    """
    if A.num_rows != pair.num_rows:
        raise DimensionMismatch(
            f"paired matrix has {pair.num_rows} rows, expected {A.num_rows}"
        )

    R = A.clone()
    P = pair.clone()
    m, n = R.shape

    perm = list(range(m))
    pivots: List[int] = []
    pivot_values: List[Rational] = []

    last = Position(-1, -1)
    for cur in range(min(m, n)):
        lead = next_leading_position(R, last)
        if lead is None:
            logger.debug(f"no pivot left after row {last.row}; rank = {cur}")
            break

        # Bring the pivot row up to the current row
        if lead.row != cur:
            R.swap_rows(cur, lead.row)
            P.swap_rows(cur, lead.row)
            perm[cur], perm[lead.row] = perm[lead.row], perm[cur]

        piv_val = R[cur, lead.col]
        pivots.append(lead.col)
        pivot_values.append(piv_val)
        logger.debug(f"pivot {piv_val} at ({lead.row}, {lead.col}) -> row {cur}")

        # Scale the pivot row so the pivot becomes exactly one
        factor = piv_val.reciprocal()
        R.multiply_row(factor, cur)
        P.multiply_row(factor, cur)

        # Clear the pivot column above and below
        for row in range(m):
            if row == cur:
                continue
            row_factor = -R[row, lead.col]
            if row_factor.is_zero():
                continue
            R.add_multiple_of_row(row, row_factor, cur)
            P.add_multiple_of_row(row, row_factor, cur)

        last = Position(cur, lead.col)

    return LockstepResult(R, P, pivots, pivot_values, perm)
