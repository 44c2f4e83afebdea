#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import time

import numpy as np
import pandas as pd

from cofactor import determinant, parallel_determinant, random_integer_matrix

REPEATS = 3  # best of 3 runs leads to stable numbers
SEED = 0
# (dimension, density): dense rows pay the full n! cost, sparse ones skip most of it
sizes = [(6, 1.0), (8, 1.0), (9, 1.0), (12, 0.35), (14, 0.25)]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    records = []
    for n, density in sizes:
        A = random_integer_matrix(n, low=-50, high=50, density=density, seed=SEED + n)

        # reference, floating point
        t_np = min(wall(np.linalg.det, A.to_array()) for _ in range(REPEATS))
        d_np = round(np.linalg.det(A.to_array()))

        t_seq = min(wall(determinant, A) for _ in range(REPEATS))
        d_seq = determinant(A)

        t_par = min(wall(parallel_determinant, A) for _ in range(REPEATS))
        d_par = parallel_determinant(A)

        records.append(
            (
                f"{n}x{n}",
                density,
                t_seq,
                t_par,
                t_seq / t_par,
                t_np,
                d_seq == d_par,
                d_seq - d_np,
            )
        )
        A.release()

    df = pd.DataFrame(
        records,
        columns=[
            "size",
            "density",
            "seq sec",
            "par sec",
            "speedup",
            "numpy sec",
            "seq==par",
            "exact-numpy",
        ],
    )
    print(df.to_markdown(index=False))
    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
