# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from cofactor.matrix import SquareMatrix
from cofactor.minors import extract_minor
from cofactor.utils import random_integer_matrix


def test_minor_deletes_first_row_and_column():
    m = SquareMatrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    np.testing.assert_array_equal(extract_minor(m, 0).to_array(), [[5, 6], [8, 9]])
    np.testing.assert_array_equal(extract_minor(m, 1).to_array(), [[4, 6], [7, 9]])
    np.testing.assert_array_equal(extract_minor(m, 2).to_array(), [[4, 5], [7, 8]])


@pytest.mark.parametrize("n", [2, 3, 6])
def test_minor_matches_numpy_deletion(n):
    m = random_integer_matrix(n, seed=n)
    A = m.to_array()
    for col in range(n):
        expected = np.delete(A[1:], col, axis=1)
        with extract_minor(m, col) as minor:
            assert minor.dimension == n - 1
            np.testing.assert_array_equal(minor.to_array(), expected)


def test_minor_of_2x2_is_1x1():
    m = SquareMatrix.from_rows([[1, 2], [3, 4]])
    assert extract_minor(m, 0).entries.tolist() == [4]
    assert extract_minor(m, 1).entries.tolist() == [3]


def test_minor_survives_source_release():
    m = SquareMatrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    minor = extract_minor(m, 1)
    m.release()
    np.testing.assert_array_equal(minor.to_array(), [[4, 6], [7, 9]])


def test_minor_shares_no_storage():
    m = SquareMatrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    minor = extract_minor(m, 0)
    minor[0, 0] = -1
    assert m[1, 1] == 5
    assert not np.shares_memory(minor.entries, m.entries)


def test_minor_preconditions():
    with pytest.raises(ValueError):
        extract_minor(SquareMatrix.create(1), 0)
    m = SquareMatrix.create(3)
    with pytest.raises(ValueError):
        extract_minor(m, 3)
    with pytest.raises(ValueError):
        extract_minor(m, -1)
