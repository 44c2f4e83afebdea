# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .matrix import SquareMatrix


def extract_minor(matrix: SquareMatrix, column: int) -> SquareMatrix:
    """
    Delete row 0 and `column` from an n-by-n matrix.

    Parameters
    ----------
    matrix : SquareMatrix   (n, n), n >= 2
    column : int            0 <= column < n

    Returns
    -------
    M : SquareMatrix        (n-1, n-1)
        Freshly allocated; row i of M is row i+1 of `matrix` with
        `column` skipped. Shares no storage with `matrix`.
    """
    n = matrix.dimension
    if n < 2:
        raise ValueError("A minor needs a matrix of dimension 2 or more")
    if not 0 <= column < n:
        raise ValueError(f"column {column} is outside a {n}x{n} matrix")

    A = matrix.entries.reshape(n, n)
    # fancy indexing copies, so the minor owns its entries
    minor = A[1:][:, np.arange(n) != column]
    return SquareMatrix(n - 1, minor.ravel())
