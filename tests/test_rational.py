# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import itertools
import math
from fractions import Fraction

import numpy as np
import pytest

from ratlinalg.errors import DivisionByZero
from ratlinalg.rational import ONE, ZERO, Rational, as_rational

VECTORS = [
    (0, 1),
    (1, 1),
    (-1, 1),
    (1, 2),
    (-3, 4),
    (7, -3),
    (22, 7),
    (-5, -15),
    (123456789, 987654321),
    (2**70, 3**40),
]


@pytest.mark.parametrize("n, d", VECTORS)
def test_normalized_lowest_terms(n, d):
    r = Rational(n, d)
    assert r.denominator > 0
    assert math.gcd(abs(r.numerator), r.denominator) == 1
    assert Fraction(r.numerator, r.denominator) == Fraction(n, d)


def test_canonical_forms():
    assert (Rational(6, -4).numerator, Rational(6, -4).denominator) == (-3, 2)
    assert (Rational(-2, -4).numerator, Rational(-2, -4).denominator) == (1, 2)
    assert (Rational(0, -5).numerator, Rational(0, -5).denominator) == (0, 1)
    assert Rational(4) == Rational(8, 2)
    assert ZERO == Rational(0, 7)
    assert ONE == Rational(-9, -9)


def test_zero_denominator():
    with pytest.raises(DivisionByZero):
        Rational(1, 0)
    # also a regular ZeroDivisionError
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_reciprocal():
    assert Rational(-3, 4).reciprocal() == Rational(-4, 3)
    assert Rational(5).reciprocal().denominator == 5
    with pytest.raises(DivisionByZero):
        ZERO.reciprocal()
    with pytest.raises(DivisionByZero):
        ONE / ZERO


@pytest.mark.parametrize("bad", [1.5, "3", None, True])
def test_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        Rational(bad)
    with pytest.raises(TypeError):
        Rational(1, bad)


def test_arithmetic_matches_fractions():
    for (a, b), (c, d) in itertools.product(VECTORS, repeat=2):
        x, y = Rational(a, b), Rational(c, d)
        fx, fy = Fraction(a, b), Fraction(c, d)
        assert (x + y).to_fraction() == fx + fy
        assert (x - y).to_fraction() == fx - fy
        assert (x * y).to_fraction() == fx * fy
        assert (-x).to_fraction() == -fx
        if fy != 0:
            assert (x / y).to_fraction() == fx / fy


def test_named_methods_agree_with_operators():
    x, y = Rational(2, 3), Rational(-5, 7)
    assert x.add(y) == x + y
    assert x.subtract(y) == x - y
    assert x.multiply(y) == x * y
    assert x.divide(y) == x / y
    assert x.negate() == -x
    assert x.equals(Rational(4, 6))


def test_field_laws():
    values = [Rational(n, d) for n, d in VECTORS]
    for x, y, z in itertools.product(values[:6], repeat=3):
        assert x + y == y + x
        assert x * y == y * x
        assert (x + y) + z == x + (y + z)
        assert (x * y) * z == x * (y * z)
    for x in values:
        assert x + (-x) == ZERO
        if not x.is_zero():
            assert x * x.reciprocal() == ONE


def test_mixed_int_arithmetic():
    assert 1 - Rational(1, 3) == Rational(2, 3)
    assert Rational(1, 3) + 1 == Rational(4, 3)
    assert 2 / Rational(4) == Rational(1, 2)
    assert 3 * Rational(1, 6) == Rational(1, 2)
    assert Rational(5) == 5
    assert Rational(1, 2) + Fraction(1, 2) == ONE


def test_equality_and_hash():
    assert Rational(1, 2) != Rational(1, 3)
    assert Rational(1, 2) != "1/2"
    assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}) == 1
    assert hash(Rational(3)) == hash(3)
    assert hash(Rational(1, 2)) == hash(Fraction(1, 2))


def test_zero_checks():
    assert ZERO.is_zero()
    assert not Rational(1, 100).is_zero()
    assert not ZERO
    assert Rational(-1, 2)


def test_str_repr():
    assert str(Rational(3, 4)) == "3/4"
    assert str(Rational(-6, 3)) == "-2"
    assert repr(Rational(3, -4)) == "Rational(-3, 4)"
    assert float(Rational(1, 4)) == 0.25
    assert abs(Rational(-1, 4)) == Rational(1, 4)


def test_as_rational():
    assert as_rational(Fraction(6, 8)) == Rational(3, 4)
    assert as_rational(np.int64(5)) == Rational(5)
    r = Rational(1, 7)
    assert as_rational(r) is r
    with pytest.raises(TypeError):
        as_rational(0.5)
    with pytest.raises(TypeError):
        as_rational(np.float64(2.0))
