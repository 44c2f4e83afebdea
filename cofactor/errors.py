# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the cofactor engine
"""

from __future__ import annotations


class CofactorError(Exception):
    """Base class for every error raised by this package."""


class InvalidDimensionError(CofactorError, ValueError):
    """A matrix was requested with a side length below one."""


class MatrixReleasedError(CofactorError, RuntimeError):
    """The storage of a matrix was used after release()."""


class DeterminantOverflowError(CofactorError, OverflowError):
    """An intermediate value left the signed 64-bit range in checked mode."""


class ParallelEvaluationError(CofactorError):
    """
    One or more top-level cofactor tasks failed.

    Attributes
    ----------
    failures : list[tuple[int, BaseException]]
        (column, exception) for every failed task, in column order.
    """

    def __init__(self, failures: list[tuple[int, BaseException]]):
        self.failures = failures
        columns = ", ".join(str(col) for col, _ in failures)
        super().__init__(
            f"{len(failures)} cofactor task(s) failed (columns: {columns})"
        )
