# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Square integer matrix container
"""

from __future__ import annotations

import numpy as np

from .errors import InvalidDimensionError, MatrixReleasedError

ENTRY_DTYPE = np.int64


def _owned_entries(values) -> np.ndarray:
    """
    Validate integer input and return a fresh, flat int64 copy.

    Raises
    ------
    ValueError    : the values are not integers.
    OverflowError : a value does not fit in int64.
    """
    A = np.asarray(values)
    if A.dtype.kind == "u" and A.size and A.max() > np.iinfo(ENTRY_DTYPE).max:
        raise OverflowError("entry does not fit in a signed 64-bit integer")
    if A.dtype.kind not in "iuO":
        raise ValueError(f"entries must be integers, got dtype {A.dtype}")
    if A.dtype.kind == "O" and not all(
        isinstance(v, (int, np.integer)) and not isinstance(v, bool)
        for v in A.flat
    ):
        raise ValueError("entries must be integers")

    # np.array always copies; object arrays of Python ints raise
    # OverflowError here when too large
    return np.array(A, dtype=ENTRY_DTYPE).ravel()


class SquareMatrix:
    """
    An n-by-n integer matrix stored as a flat, row-major int64 array.

    ``entries[row * n + col]`` is the value at (row, col). The matrix owns
    its storage; it is dropped by ``release()``, and the matrix is also a
    context manager that releases on exit.
    """

    dimension: int

    def __init__(self, dimension: int, entries: np.ndarray | None = None):
        if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
            raise InvalidDimensionError(
                f"dimension must be an integer, got: {type(dimension)}"
            )
        if dimension < 1:
            raise InvalidDimensionError(
                f"dimension must be at least 1, got: {dimension}"
            )
        self.dimension = int(dimension)
        size = self.dimension * self.dimension

        if entries is None:
            entries = np.zeros(size, dtype=ENTRY_DTYPE)
        else:
            entries = _owned_entries(entries)
            if entries.size != size:
                raise ValueError(
                    f"expected {size} entries for dimension {self.dimension}, "
                    f"got {entries.size}"
                )
        self._entries: np.ndarray | None = entries

    @classmethod
    def create(cls, dimension: int) -> SquareMatrix:
        """Allocate a zero-filled dimension-by-dimension matrix."""
        return cls(dimension)

    @classmethod
    def from_rows(cls, rows) -> SquareMatrix:
        """
        Build a matrix from a list of rows or a 2-D array.

        Raises
        ------
        ValueError    : the grid is not square or holds non-integers.
        OverflowError : an entry does not fit in int64.
        """
        A = np.asarray(rows)
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise ValueError(f"expected an n-by-n grid, got shape {A.shape}")
        return cls(A.shape[0], A)

    @classmethod
    def identity(cls, dimension: int) -> SquareMatrix:
        m = cls(dimension)
        m.entries[:: m.dimension + 1] = 1
        return m

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    @property
    def entries(self) -> np.ndarray:
        if self._entries is None:
            raise MatrixReleasedError("matrix storage has been released")
        return self._entries

    @property
    def released(self) -> bool:
        return self._entries is None

    def release(self) -> None:
        """Drop the storage. Calling it again does nothing."""
        self._entries = None

    def __enter__(self) -> SquareMatrix:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _offset(self, key: tuple[int, int]) -> int:
        row, col = key
        n = self.dimension
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"({row}, {col}) is outside a {n}x{n} matrix")
        return row * n + col

    def __getitem__(self, key: tuple[int, int]) -> int:
        return int(self.entries[self._offset(key)])

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"entries must be integers, got: {type(value)}")
        self.entries[self._offset(key)] = value

    def row(self, i: int) -> np.ndarray:
        """Return a copy of row i."""
        n = self.dimension
        if not 0 <= i < n:
            raise IndexError(f"row {i} is outside a {n}x{n} matrix")
        return self.entries[i * n : (i + 1) * n].copy()

    def to_array(self) -> np.ndarray:
        """Return an independent (n, n) copy of the entries."""
        return self.entries.reshape(self.dimension, self.dimension).copy()

    def __repr__(self) -> str:
        if self.released:
            return f"{self.__class__.__name__}(dimension={self.dimension}, released)"
        return f"{self.__class__.__name__}({self.to_array().tolist()})"
