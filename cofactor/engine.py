# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, wait
from dataclasses import dataclass
import numpy as np

from .errors import MatrixReleasedError, ParallelEvaluationError
from .matrix import SquareMatrix
from .minors import extract_minor
from .utils import LARGE_DIMENSION_WARNING, check_int64, polarity

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ("exact", "checked")
EXECUTORS = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


@dataclass(frozen=True)
class CofactorTerm:
    """Signed contribution of one top-row column, produced by a fan-out task."""

    column: int
    value: int


def _is_checked(overflow: str) -> bool:
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(
            f"overflow must be one of {OVERFLOW_POLICIES}, got: {overflow!r}"
        )
    return overflow == "checked"


def _mul(a: int, b: int, checked: bool) -> int:
    p = a * b
    return check_int64(p, "product") if checked else p


def _add(a: int, b: int, checked: bool) -> int:
    s = a + b
    return check_int64(s, "partial sum") if checked else s


def _require_live(matrix: SquareMatrix) -> None:
    if matrix.released:
        raise MatrixReleasedError("cannot evaluate a released matrix")


def _warn_if_expensive(matrix: SquareMatrix) -> None:
    n = matrix.dimension
    if n >= LARGE_DIMENSION_WARNING and np.count_nonzero(matrix.row(0)) == n:
        logger.warning(
            "cofactor expansion of a dense %dx%d top row – O(n!) terms", n, n
        )


def _cofactor(matrix: SquareMatrix, column: int, checked: bool) -> int:
    entry = int(matrix.entries[column])
    if entry == 0:
        # zero weight, skip the whole subtree
        return 0
    with extract_minor(matrix, column) as minor:
        if minor.dimension == 1:
            return _mul(entry, int(minor.entries[0]), checked)
        return _mul(entry, _expand(minor, checked), checked)


def _expand(matrix: SquareMatrix, checked: bool) -> int:
    n = matrix.dimension
    if n == 1:
        return int(matrix.entries[0])
    total = 0
    for col in range(n):
        term = _mul(polarity(col, n), _cofactor(matrix, col, checked), checked)
        total = _add(total, term, checked)
    return total


def _signed_term(matrix: SquareMatrix, column: int, checked: bool) -> CofactorTerm:
    """Body of one fan-out task. Recursion below this point is sequential."""
    n = matrix.dimension
    value = _mul(polarity(column, n), _cofactor(matrix, column, checked), checked)
    return CofactorTerm(column, value)


def cofactor_term(matrix: SquareMatrix, column: int, overflow: str = "exact") -> int:
    """
    Return a[0, column] * det(minor(0, column)), without the sign.

    A zero entry short-circuits to 0 before any minor is built.
    """
    checked = _is_checked(overflow)
    n = matrix.dimension
    if n < 2:
        raise ValueError("cofactor_term needs a matrix of dimension 2 or more")
    if not 0 <= column < n:
        raise ValueError(f"column {column} is outside a {n}x{n} matrix")
    return _cofactor(matrix, column, checked)


def determinant(matrix: SquareMatrix, overflow: str = "exact") -> int:
    """
    Determinant of an n-by-n integer matrix by Laplace expansion along
    the first row, evaluated sequentially.

    Parameters
    ----------
    matrix : SquareMatrix
    overflow : {"exact", "checked"}
        "exact" works in Python integers and never loses precision.
        "checked" raises DeterminantOverflowError as soon as a product
        or partial sum leaves the signed 64-bit range.
    """
    checked = _is_checked(overflow)
    _require_live(matrix)
    _warn_if_expensive(matrix)
    return _expand(matrix, checked)


def parallel_determinant(
    matrix: SquareMatrix,
    overflow: str = "exact",
    max_workers: int | None = None,
    executor: str = "process",
) -> int:
    """
    Same result as `determinant`, with one task per top-row column.

    Only the outermost level fans out; each task expands its minor
    sequentially. All tasks are joined before the terms are summed.

    Parameters
    ----------
    matrix : SquareMatrix
    overflow : {"exact", "checked"}
    max_workers : int | None
        Pool size; defaults to min(n, cpu count).
    executor : {"process", "thread"}
        Which concurrent.futures pool runs the tasks.

    Raises
    ------
    ParallelEvaluationError : if any task failed. Every task is awaited
        first; the error lists each failed column.
    """
    checked = _is_checked(overflow)
    try:
        pool_cls = EXECUTORS[executor]
    except KeyError:
        raise ValueError(
            f"executor must be one of {tuple(EXECUTORS)}, got: {executor!r}"
        ) from None

    _require_live(matrix)
    n = matrix.dimension
    if n == 1:
        return int(matrix.entries[0])
    _warn_if_expensive(matrix)

    if max_workers is None:
        max_workers = min(n, os.cpu_count() or 1)

    logger.debug(
        "fanning out %d cofactor tasks on %d %s workers", n, max_workers, executor
    )
    with pool_cls(max_workers=max_workers) as pool:
        futures = [
            pool.submit(_signed_term, matrix, col, checked) for col in range(n)
        ]
        wait(futures)

    failures = [
        (col, f.exception())
        for col, f in enumerate(futures)
        if f.exception() is not None
    ]
    if failures:
        logger.error("%d of %d cofactor tasks failed", len(failures), n)
        raise ParallelEvaluationError(failures) from failures[0][1]

    total = 0
    for term in (f.result() for f in futures):
        total = _add(total, term.value, checked)
    logger.debug("joined %d cofactor terms", n)
    return total
