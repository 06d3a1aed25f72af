# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .errors import ShapeError
from .validation import vector_length, is_square_matrix

logger = logging.getLogger(__name__)


def _check_index(name: str, k: int, n: int):
    if not 0 <= k < n:
        raise IndexError(f"{name} index {k} out of range for a {n}x{n} matrix")


def _strike(A: np.ndarray, row: int, col: int) -> np.ndarray:
    n = A.shape[0]
    return A[np.arange(n) != row][:, np.arange(n) != col]


def minor(A: np.ndarray, row: int, col: int) -> np.ndarray:
    """
    Return the (n-1) by (n-1) submatrix of A with `row` and `col` removed.

    Relative order of the remaining entries is kept. The result is a
    fresh array, A is never modified.
    """
    if not is_square_matrix(A):
        raise ShapeError("A minor is only defined for a non-empty square matrix.")
    A = np.asarray(A, dtype=float)
    n = A.shape[0]
    _check_index("row", row, n)
    _check_index("column", col, n)
    return _strike(A, row, col)


def replace_column(A: np.ndarray, b: np.ndarray, col: int) -> np.ndarray:
    """
    Copy of the n by n matrix A with column `col` replaced by b.

    Parameters
    ----------
    A : (n, n) ndarray
    b : (n,) ndarray
        Values written into column `col`, row by row.
    col : int
        Column to substitute, 0 <= col < n.
    """
    if not is_square_matrix(A):
        raise ShapeError("replace_column requires a square matrix")
    B = np.array(A, dtype=float)
    n = B.shape[0]
    if vector_length(b) != n:
        raise ShapeError(f"vector does not match a {n}x{n} matrix")
    b = np.asarray(b, dtype=float)
    _check_index("column", col, n)
    B[:, col] = b
    return B


def _cofactor_det(A: np.ndarray) -> float:
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    # Laplace expansion along the first row
    det = 0.0
    for j in range(n):
        sign = -1.0 if j & 1 else 1.0
        det += sign * A[0, j] * _cofactor_det(_strike(A, 0, j))
    return float(det)


def determinant(A) -> float:
    """
    Determinant of the n-by-n matrix A by recursive cofactor expansion.

    O(n!) work, only meant for small systems. The summation order is
    fixed so equal inputs always give bit-identical results.
    """
    if not is_square_matrix(A):
        raise ShapeError("The determinant is undefined for non-square matrices.")
    A = np.asarray(A, dtype=float)
    d = _cofactor_det(A)
    logger.debug(f"det of {A.shape[0]}x{A.shape[0]} matrix = {d}")
    return d
