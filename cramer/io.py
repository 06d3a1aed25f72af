# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Reading linear systems from text files and printing solutions
"""

import logging
from typing import Tuple

import numpy as np

from .errors import ShapeError
from .validation import split_augmented

logger = logging.getLogger(__name__)


def read_system(path) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load a linear system from a whitespace separated text file.

    Two layouts are understood, told apart by their shape:

    - augmented matrix, n rows of n+1 values (last value is the constant)
    - n rows of n coefficients followed by one line of n constants

    Returns
    -------
    A : (n, n) ndarray
    b : (n,) ndarray
    """
    M = np.loadtxt(path, dtype=float, ndmin=2)
    if M.size == 0:
        raise ShapeError(f"{path}: file is empty or contains no data")

    rows, cols = M.shape
    if cols == rows + 1:
        logger.debug(f"{path}: augmented {rows}x{cols} matrix")
        return split_augmented(M)
    if rows == cols + 1:
        logger.debug(f"{path}: {cols}x{cols} matrix followed by constants")
        return M[:cols].copy(), M[cols].copy()
    raise ShapeError(
        f"{path}: a {rows}x{cols} table is neither an augmented matrix "
        "nor a square matrix followed by a constants line"
    )


def format_solution(x, precision: int = 2) -> str:
    """One line per unknown, e.g. ``x1 = 0.80``."""
    return "\n".join(f"x{i + 1} = {v:.{precision}f}" for i, v in enumerate(x))
