# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
cofactor
========

Exact determinants of square integer matrices by Laplace (cofactor)
expansion along the first row, with an optional parallel mode that
evaluates the top-level cofactor terms concurrently.

Public API
~~~~~~~~~~
- Matrix container
    - `SquareMatrix`
- Expansion pieces
    - `extract_minor`, `polarity`, `cofactor_term`
- Determinants
    - `determinant` (sequential), `parallel_determinant`
- Helpers
    - `random_integer_matrix`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import cofactor as cf
>>> A = cf.SquareMatrix.from_rows([[83, 86, 77], [15, 93, 35], [86, 92, 49]])
>>> cf.determinant(A)
-202965
>>> cf.parallel_determinant(A, executor="thread")
-202965
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .engine import (
    CofactorTerm,
    cofactor_term,
    determinant,
    parallel_determinant,
)
from .errors import (
    CofactorError,
    DeterminantOverflowError,
    InvalidDimensionError,
    MatrixReleasedError,
    ParallelEvaluationError,
)
from .matrix import SquareMatrix
from .minors import extract_minor
from .utils import polarity, random_integer_matrix

__all__ = [
    "SquareMatrix",
    "extract_minor",
    "polarity",
    "cofactor_term",
    "determinant",
    "parallel_determinant",
    "CofactorTerm",
    "random_integer_matrix",
    "CofactorError",
    "InvalidDimensionError",
    "MatrixReleasedError",
    "DeterminantOverflowError",
    "ParallelEvaluationError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show cofactor”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
