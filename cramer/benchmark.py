#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import time

import numpy as np
import pandas as pd

from .solver import cramer_solve, cramer_solve_concurrent
from .utils import random_nonsingular

REPEATS = 3  # best of 3 is stable enough for O(n!) kernels
SIZES = (3, 5, 7)


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run_benchmark(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    """
    Time the sequential and concurrent Cramer solvers against
    np.linalg.solve on random non-singular systems.
    """
    rng = np.random.default_rng(seed)
    kernels = [
        ("numpy", np.linalg.solve),
        ("cramer", cramer_solve),
        ("cramer-threads", cramer_solve_concurrent),
    ]

    records = []
    for n in sizes:
        A = random_nonsingular(n, seed=int(rng.integers(2**31)))
        b = rng.standard_normal(n)
        for name, solve in kernels:
            t = min(wall(solve, A, b) for _ in range(repeats))
            x = solve(A, b)
            resid = np.linalg.norm(A @ x - b, np.inf)
            records.append((name, f"{n}x{n}", t, resid))

    return pd.DataFrame(records, columns=["kernel", "size", "sec", "residual"])


def main():
    df = run_benchmark()
    print(df.to_markdown(index=False))


if __name__ == "__main__":
    main()
