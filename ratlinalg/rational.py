# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exact rational numbers.

A ``Rational`` is always stored in lowest terms with a positive
denominator, and zero is always ``0/1``. Instances are immutable: every
arithmetic operation returns a freshly normalized value.
"""

import math
import numbers
from fractions import Fraction
from typing import Optional, Tuple, Union

from .errors import DivisionByZero

RationalLike = Union["Rational", int, Fraction]


def _check_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _normalize(numerator: int, denominator: int) -> Tuple[int, int]:
    if denominator == 0:
        raise DivisionByZero(f"zero denominator in {numerator}/0")
    if numerator == 0:
        return 0, 1
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    g = math.gcd(numerator, denominator)
    return numerator // g, denominator // g


class Rational:
    """
    Exact fraction ``numerator / denominator``.

    Parameters
    ----------
    numerator : int
    denominator : int, default 1
        Must be non-zero.

    Raises
    ------
    DivisionByZero
        If ``denominator == 0``.
    TypeError
        If either argument is not an integer.

    Examples
    --------
    >>> Rational(6, -4)
    Rational(-3, 2)
    >>> Rational(1, 2) + Rational(1, 3)
    Rational(5, 6)
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        n = _check_int(numerator, "numerator")
        d = _check_int(denominator, "denominator")
        self._numerator, self._denominator = _normalize(n, d)

    @classmethod
    def _raw(cls, numerator: int, denominator: int) -> "Rational":
        # caller guarantees (numerator, denominator) is already normalized
        obj = cls.__new__(cls)
        obj._numerator = numerator
        obj._denominator = denominator
        return obj

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        return cls._raw(value.numerator, value.denominator)

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "Rational") -> "Rational":
        n = self._numerator * other._denominator + other._numerator * self._denominator
        d = self._denominator * other._denominator
        return Rational(n, d)

    def subtract(self, other: "Rational") -> "Rational":
        return self.add(other.negate())

    def multiply(self, other: "Rational") -> "Rational":
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: "Rational") -> "Rational":
        return self.multiply(other.reciprocal())

    def negate(self) -> "Rational":
        return Rational._raw(-self._numerator, self._denominator)

    def reciprocal(self) -> "Rational":
        """Return ``1 / self``; raises ``DivisionByZero`` for zero."""
        if self._numerator == 0:
            raise DivisionByZero("zero has no reciprocal")
        return Rational(self._denominator, self._numerator)

    def is_zero(self) -> bool:
        return self._numerator == 0

    def equals(self, other: "Rational") -> bool:
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    # ------------------------------------------------------------------
    # Operator protocol
    # ------------------------------------------------------------------
    @staticmethod
    def _coerce(other) -> Optional["Rational"]:
        if isinstance(other, Rational):
            return other
        if isinstance(other, Fraction):
            return Rational.from_fraction(other)
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return Rational._raw(int(other), 1)
        return None

    def __add__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.add(o)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.subtract(o)

    def __rsub__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else o.subtract(self)

    def __mul__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.multiply(o)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else self.divide(o)

    def __rtruediv__(self, other):
        o = self._coerce(other)
        return NotImplemented if o is None else o.divide(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational._raw(abs(self._numerator), self._denominator)

    def __eq__(self, other) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.equals(o)

    def __hash__(self) -> int:
        # agree with int and Fraction hashing so equal values hash equal
        return hash(Fraction(self._numerator, self._denominator))

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"


ZERO = Rational(0)
ONE = Rational(1)


def as_rational(value: RationalLike) -> Rational:
    """
    Coerce ``value`` to a ``Rational``.

    Accepts ``Rational``, ``fractions.Fraction`` and integers (including
    numpy integer scalars). Floats are rejected: their binary expansion is
    already an approximation.
    """
    r = Rational._coerce(value)
    if r is None:
        raise TypeError(
            f"cannot convert {type(value).__name__} to an exact Rational"
        )
    return r
