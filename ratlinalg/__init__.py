# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
ratlinalg
=========

Dense linear algebra over the rationals. Entries are exact fractions, so
row reduction, rank, determinants and inverses carry no rounding error.

Public API
~~~~~~~~~~
- Numbers
    - `Rational`, `ZERO`, `ONE`, `as_rational`
- Matrices
    - `Matrix` (`rref`, `inverse`, `rank`, `determinant`, row operations)
- Elimination
    - `lockstep_rref`, `next_leading_position`
- Matrix utilities
    - `det`, `det_cofactor`, `det_elimination`, `adj`
- Errors
    - `DivisionByZero`, `DimensionMismatch`, `IndexOutOfBounds`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import ratlinalg as rla
>>> A = rla.Matrix.from_rows([[1, 1], [1, 2]])
>>> A @ A.inverse() == rla.Matrix.identity(2)
True
>>> A.determinant()
Rational(1, 1)
"""

from importlib.metadata import version as _pkg_version

from .elimination import LockstepResult, Position, lockstep_rref, next_leading_position
from .errors import (
    DimensionMismatch,
    DivisionByZero,
    IndexOutOfBounds,
    RationalLinalgError,
)
from .matrix import Matrix
from .matrix_functions import adj, det, det_cofactor, det_elimination
from .rational import ONE, ZERO, Rational, as_rational
from .utils import permutation_sign, random_integer_matrix, random_nonsingular_upper

__all__ = [
    "Rational",
    "ZERO",
    "ONE",
    "as_rational",
    "Matrix",
    "lockstep_rref",
    "next_leading_position",
    "LockstepResult",
    "Position",
    "det",
    "det_cofactor",
    "det_elimination",
    "adj",
    "permutation_sign",
    "random_integer_matrix",
    "random_nonsingular_upper",
    "RationalLinalgError",
    "DivisionByZero",
    "DimensionMismatch",
    "IndexOutOfBounds",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show ratlinalg", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
