# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by ratlinalg.

Each one also derives from the matching built-in so callers that already
catch ``ZeroDivisionError``, ``ValueError`` or ``IndexError`` keep working.
"""


class RationalLinalgError(Exception):
    """Base class for every error raised by this package."""


class DivisionByZero(RationalLinalgError, ZeroDivisionError):
    """Zero denominator, or the reciprocal of zero."""


class DimensionMismatch(RationalLinalgError, ValueError):
    """Operands have incompatible shapes, or a square matrix was required."""


class IndexOutOfBounds(RationalLinalgError, IndexError):
    """Row or column index outside the declared dimensions."""
