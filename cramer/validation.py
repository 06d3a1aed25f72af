# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import List, Optional, Tuple

import numpy as np

from .errors import ShapeError


def vector_length(v) -> Optional[int]:
    """Length of v if it is a flat sequence of numbers, else None."""
    if isinstance(v, np.ndarray):
        return len(v) if v.ndim == 1 else None
    if not isinstance(v, (list, tuple)):
        return None
    if not all(isinstance(x, (numbers.Number, np.number)) for x in v):
        return None
    return len(v)


def _row_lengths(M) -> Optional[List[int]]:
    """
    Length of every row of M, or None if M is not two dimensional.

    Nested lists are inspected row by row so that ragged input is
    reported here instead of failing inside np.asarray.
    """
    if isinstance(M, np.ndarray):
        if M.ndim != 2:
            return None
        return [M.shape[1]] * M.shape[0]
    if not isinstance(M, (list, tuple)):
        return None
    lengths = []
    for row in M:
        length = vector_length(row)
        if length is None:
            return None
        lengths.append(length)
    return lengths


def is_square_matrix(M) -> bool:
    """True iff M is non-empty and every row is as long as the row count."""
    lengths = _row_lengths(M)
    if not lengths:
        return False
    n = len(lengths)
    return all(length == n for length in lengths)


def is_augmented_matrix(M) -> bool:
    """
    True iff M is non-empty, every row has the same length and that
    length is the row count plus one (coefficients + constants column).
    """
    lengths = _row_lengths(M)
    if not lengths:
        return False
    n = len(lengths)
    return all(length == n + 1 for length in lengths)


def split_augmented(M) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split an n by (n+1) augmented matrix into its coefficient block
    and its constants column.

    Returns
    -------
    A : (n, n) ndarray
    b : (n,) ndarray
    """
    if not is_augmented_matrix(M):
        raise ShapeError(
            "matrix is not an augmented matrix for Cramer's rule "
            "(expected n rows by n+1 columns)"
        )
    M = np.array(M, dtype=float)
    n = M.shape[0]
    return M[:, :n].copy(), M[:, n].copy()
