# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import DeterminantOverflowError
from .matrix import SquareMatrix

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Dense top rows above this size get an O(n!) warning
LARGE_DIMENSION_WARNING: int = 11


def polarity(column: int, dimension: int, row: int = 0) -> int:
    """Return +1 or -1, the Laplace sign of position (row, column)."""
    if not (0 <= row < dimension and 0 <= column < dimension):
        raise ValueError(
            f"({row}, {column}) is outside a {dimension}x{dimension} matrix"
        )
    return -1 if (row + column) & 1 else 1


def check_int64(value: int, what: str = "value") -> int:
    """Pass `value` through, or raise if it does not fit in int64."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise DeterminantOverflowError(
            f"{what} {value} is outside the signed 64-bit range"
        )
    return value


def random_integer_matrix(
    n, low=-9, high=10, density=1.0, seed=None
) -> SquareMatrix:
    """
    Build an n-by-n matrix of integers drawn from [low, high).

    `density` is the probability that an entry is kept; the rest are
    zeroed, which gives the cofactor expansion something to skip.

    Returns
    -------
    SquareMatrix with int64 entries
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must lie in [0, 1]")
    rng = np.random.default_rng(seed)
    A = rng.integers(low, high, size=(n, n), dtype=np.int64)
    if density < 1.0:
        A[rng.random(size=(n, n)) >= density] = 0
    return SquareMatrix.from_rows(A)
