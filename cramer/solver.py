# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Cramer's rule solvers

Each unknown is a ratio of two determinants:

    x_i = det(A_i) / det(A)

where A_i is A with column i replaced by the constants b. The n
numerators are independent of each other, which is what the
concurrent variant exploits.
"""

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Optional, Tuple

import numpy as np

from .errors import ShapeError, SingularSystemError
from .matrix_functions import determinant, replace_column
from .validation import vector_length, is_square_matrix, split_augmented

logger = logging.getLogger(__name__)


def _prepare(A, b) -> Tuple[np.ndarray, np.ndarray]:
    """Validate the inputs and return float copies of (A, b)."""
    if b is None:
        return split_augmented(A)
    if not is_square_matrix(A):
        raise ShapeError("coefficient matrix must be square")
    A = np.array(A, dtype=float)
    n = A.shape[0]
    if vector_length(b) != n:
        raise ShapeError(f"constants vector must have length {n}")
    return A, np.array(b, dtype=float)


def _main_determinant(A: np.ndarray, tol: float) -> float:
    if tol < 0:
        raise ValueError("tol must be non-negative")
    d = determinant(A)
    # tol == 0 keeps exact-zero semantics
    if abs(d) <= tol:
        logger.warning(f"main determinant {d} is zero, no unique solution")
        raise SingularSystemError(d)
    return d


def _solve_unknown(A: np.ndarray, b: np.ndarray, i: int, det_main: float):
    """Return (i, x_i) for one column substitution."""
    return i, determinant(replace_column(A, b, i)) / det_main


def cramer_solve(A, b: Optional[np.ndarray] = None, *, tol: float = 0.0) -> np.ndarray:
    """
    Solve A x = b with Cramer's rule, one determinant after another.

    Parameters
    ----------
    A : (n, n) or (n, n+1) array_like
        Coefficient matrix, or an augmented matrix when b is None.
    b : (n,) array_like | None
        Constants vector.
    tol : float
        The system counts as singular when |det(A)| <= tol. The default
        of 0.0 only rejects an exactly zero determinant.

    Returns
    -------
    x : (n,) ndarray
        x[i] is the value of unknown x_(i+1).

    Raises
    ------
    ShapeError : malformed A or b, raised before any determinant is computed.
    SingularSystemError : det(A) is zero (within tol).
    """
    A, b = _prepare(A, b)
    det_main = _main_determinant(A, tol)

    n = A.shape[0]
    x = np.empty(n, dtype=float)
    for i in range(n):
        _, x[i] = _solve_unknown(A, b, i, det_main)
    return x


def cramer_solve_concurrent(
    A,
    b: Optional[np.ndarray] = None,
    *,
    tol: float = 0.0,
    processes: bool = False,
) -> np.ndarray:
    """
    Same contract as `cramer_solve`, but the n numerator determinants
    run as n concurrent tasks, one per unknown.

    Every task reads the shared inputs and returns (index, value); the
    results are written into the output by this thread only. The call
    returns once every task has finished. A failing task aborts the solve.

    Parameters
    ----------
    processes : bool
        Fan out to a process pool instead of threads. Useful when the
        cofactor expansions are large enough to be CPU bound.
    """
    A, b = _prepare(A, b)
    det_main = _main_determinant(A, tol)

    n = A.shape[0]
    x = np.empty(n, dtype=float)
    executor = ProcessPoolExecutor if processes else ThreadPoolExecutor
    logger.debug(f"submitting {n} column tasks to {executor.__name__}")
    with executor(max_workers=n) as pool:
        futures = [pool.submit(_solve_unknown, A, b, i, det_main) for i in range(n)]
        for future in as_completed(futures):
            i, value = future.result()
            x[i] = value
    return x
