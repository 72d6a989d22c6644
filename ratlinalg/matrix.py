# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrices of exact rationals.

Entries live in one flat, row-major list: entry (i, j) sits at index
``i * num_cols + j``.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .elimination import lockstep_rref
from .errors import DimensionMismatch, IndexOutOfBounds
from .rational import ONE, ZERO, Rational, RationalLike, as_rational

logger = logging.getLogger(__name__)


class Matrix:
    """
    A ``num_rows`` by ``num_cols`` matrix of ``Rational`` entries.

    Indexing with a single int reads the flat row-major list directly;
    indexing with ``(i, j)`` is bounds-checked.

    >>> A = Matrix.from_rows([[1, 1], [1, 2]])
    >>> A.inverse() == Matrix.from_rows([[2, -1], [-1, 1]])
    True
    """

    __hash__ = None  # mutable

    def __init__(self, entries: Iterable[RationalLike], rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise DimensionMismatch(f"dimensions must be positive, got {rows}x{cols}")
        data = [as_rational(e) for e in entries]
        if len(data) != rows * cols:
            raise DimensionMismatch(
                f"{len(data)} entries cannot fill a {rows}x{cols} matrix"
            )
        self._entries: List[Rational] = data
        self.num_rows = rows
        self.num_cols = cols
        self._rref: Optional["Matrix"] = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def zero(cls, rows: int, cols: int) -> "Matrix":
        return cls([ZERO] * (rows * cols), rows, cols)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        if n < 1:
            raise DimensionMismatch(f"identity size must be positive, got {n}")
        return cls(
            [ONE if i == j else ZERO for i in range(n) for j in range(n)], n, n
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[RationalLike]]) -> "Matrix":
        """Build a matrix from a list of equally long rows."""
        if len(rows) == 0:
            raise DimensionMismatch("a matrix needs at least one row")
        n = len(rows[0])
        for r in rows:
            if len(r) != n:
                raise DimensionMismatch("rows have differing lengths")
        return cls([e for r in rows for e in r], len(rows), n)

    @classmethod
    def from_array(cls, A: np.ndarray) -> "Matrix":
        """
        Convert a 2-D integer (or object array of exact values) ndarray.

        Float arrays are refused rather than silently approximated.
        """
        A = np.asarray(A)
        if A.ndim != 2:
            raise DimensionMismatch(f"expected a 2-D array, got ndim={A.ndim}")
        if A.dtype.kind in "fc":
            raise TypeError("floating point arrays cannot be converted exactly")
        m, n = A.shape
        return cls(A.ravel().tolist(), m, n)

    def to_array(self) -> np.ndarray:
        """Object ndarray holding the ``Rational`` entries."""
        out = np.empty(len(self._entries), dtype=object)
        out[:] = self._entries
        return out.reshape(self.shape)

    def to_float_array(self) -> np.ndarray:
        return np.array([float(e) for e in self._entries], dtype=float).reshape(
            self.shape
        )

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.num_rows, self.num_cols

    def _index(self, i: int, j: int) -> int:
        if not 0 <= i < self.num_rows or not 0 <= j < self.num_cols:
            raise IndexOutOfBounds(
                f"index ({i}, {j}) outside {self.num_rows}x{self.num_cols} matrix"
            )
        return i * self.num_cols + j

    def _check_row(self, x: int) -> None:
        if not 0 <= x < self.num_rows:
            raise IndexOutOfBounds(f"row {x} outside 0..{self.num_rows - 1}")

    def get_flat(self, k: int) -> Rational:
        return self._entries[k]

    def set_flat(self, k: int, value: RationalLike) -> None:
        self._entries[k] = as_rational(value)
        self._rref = None

    def get(self, i: int, j: int) -> Rational:
        return self._entries[self._index(i, j)]

    def set(self, i: int, j: int, value: RationalLike) -> None:
        self._entries[self._index(i, j)] = as_rational(value)
        self._rref = None

    def __getitem__(self, key) -> Rational:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get_flat(key)

    def __setitem__(self, key, value: RationalLike) -> None:
        if isinstance(key, tuple):
            self.set(*key, value)
        else:
            self.set_flat(key, value)

    def row(self, i: int) -> List[Rational]:
        self._check_row(i)
        start = i * self.num_cols
        return self._entries[start : start + self.num_cols]

    def col(self, j: int) -> List[Rational]:
        if not 0 <= j < self.num_cols:
            raise IndexOutOfBounds(f"column {j} outside 0..{self.num_cols - 1}")
        return self._entries[j :: self.num_cols]

    def rows(self) -> List[List[Rational]]:
        return [self.row(i) for i in range(self.num_rows)]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"shapes {self.shape} and {other.shape} are not compatible"
            )

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        return Matrix(
            [a + b for a, b in zip(self._entries, other._entries)],
            self.num_rows,
            self.num_cols,
        )

    def negate(self) -> "Matrix":
        return Matrix([-a for a in self._entries], self.num_rows, self.num_cols)

    def subtract(self, other: "Matrix") -> "Matrix":
        return self.add(other.negate())

    def scale(self, factor: RationalLike) -> "Matrix":
        f = as_rational(factor)
        return Matrix([f * a for a in self._entries], self.num_rows, self.num_cols)

    def matmul(self, other: "Matrix") -> "Matrix":
        if self.num_cols != other.num_rows:
            raise DimensionMismatch(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        cols = [other.col(j) for j in range(other.num_cols)]
        out = []
        for i in range(self.num_rows):
            r = self.row(i)
            for c in cols:
                acc = ZERO
                for a, b in zip(r, c):
                    if not a.is_zero():
                        acc = acc + a * b
                out.append(acc)
        return Matrix(out, self.num_rows, other.num_cols)

    def transpose(self) -> "Matrix":
        return Matrix(
            [e for j in range(self.num_cols) for e in self.col(j)],
            self.num_cols,
            self.num_rows,
        )

    def equals(self, other: "Matrix") -> bool:
        return self.shape == other.shape and all(
            a.equals(b) for a, b in zip(self._entries, other._entries)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.negate()

    def __mul__(self, other):
        # scalar only; use @ for the matrix product
        if isinstance(other, Matrix):
            return NotImplemented
        try:
            return self.scale(other)
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    # ------------------------------------------------------------------
    # Row operations (in place)
    # ------------------------------------------------------------------
    def swap_rows(self, x: int, y: int) -> None:
        self._check_row(x)
        self._check_row(y)
        n = self.num_cols
        e = self._entries
        e[x * n : (x + 1) * n], e[y * n : (y + 1) * n] = (
            e[y * n : (y + 1) * n],
            e[x * n : (x + 1) * n],
        )
        self._rref = None

    def multiply_row(self, factor: RationalLike, x: int) -> None:
        self._check_row(x)
        f = as_rational(factor)
        start = x * self.num_cols
        for k in range(start, start + self.num_cols):
            self._entries[k] = f * self._entries[k]
        self._rref = None

    def add_multiple_of_row(self, target: int, factor: RationalLike, source: int) -> None:
        """``row[target] += factor * row[source]``"""
        self._check_row(target)
        self._check_row(source)
        f = as_rational(factor)
        n = self.num_cols
        t0, s0 = target * n, source * n
        for k in range(n):
            self._entries[t0 + k] = self._entries[t0 + k] + f * self._entries[s0 + k]
        self._rref = None

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    def rref(self) -> "Matrix":
        """
        Reduced row-echelon form, computed once and cached.

        Returns a copy so callers cannot corrupt the cached value.
        """
        if self._rref is None:
            result = lockstep_rref(self, Matrix.zero(self.num_rows, self.num_cols))
            self._rref = result.rref
        return self._rref.clone()

    def inverse(self) -> Optional["Matrix"]:
        """
        Exact inverse, or None when the matrix is singular.

        Raises
        ------
        DimensionMismatch : if the matrix is not square.
        """
        if self.num_rows != self.num_cols:
            raise DimensionMismatch(
                f"only square matrices have inverses, got {self.shape}"
            )
        n = self.num_rows
        identity = Matrix.identity(n)
        result = lockstep_rref(self, identity)
        self._rref = result.rref
        if result.rref != identity:
            logger.debug(f"matrix is singular (rank {len(result.pivots)} < {n})")
            return None
        return result.pair

    def rank(self) -> int:
        """Number of non-zero rows in the RREF."""
        R = self.rref()
        return sum(
            1
            for i in range(R.num_rows)
            if any(not e.is_zero() for e in R.row(i))
        )

    def determinant(self) -> Optional[Rational]:
        """Cofactor-expansion determinant; None for non-square matrices."""
        from .matrix_functions import det_cofactor

        return det_cofactor(self)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def clone(self) -> "Matrix":
        out = Matrix.__new__(Matrix)
        out._entries = list(self._entries)
        out.num_rows = self.num_rows
        out.num_cols = self.num_cols
        out._rref = None
        return out

    def remove_row_and_col(self, row: int, col: int) -> "Matrix":
        """The minor obtained by deleting ``row`` and ``col``."""
        self._index(row, col)
        if self.num_rows == 1 or self.num_cols == 1:
            raise DimensionMismatch(f"cannot take a minor of a {self.shape} matrix")
        out = [
            self._entries[i * self.num_cols + j]
            for i in range(self.num_rows)
            if i != row
            for j in range(self.num_cols)
            if j != col
        ]
        return Matrix(out, self.num_rows - 1, self.num_cols - 1)

    def __repr__(self) -> str:
        body = ", ".join(
            "[" + ", ".join(str(e) for e in r) + "]" for r in self.rows()
        )
        return f"{self.__class__.__name__}([{body}])"
